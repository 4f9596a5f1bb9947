"""Input events delivered by a window: keys, mouse buttons, motion and text."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple


class Key(enum.Enum):
    SPACE = "space"
    APOSTROPHE = "apostrophe"
    COMMA = "comma"
    MINUS = "minus"
    PERIOD = "period"
    SLASH = "slash"
    NUM0 = "num0"
    NUM1 = "num1"
    NUM2 = "num2"
    NUM3 = "num3"
    NUM4 = "num4"
    NUM5 = "num5"
    NUM6 = "num6"
    NUM7 = "num7"
    NUM8 = "num8"
    NUM9 = "num9"
    SEMICOLON = "semicolon"
    EQUAL = "equal"
    A = "a"
    B = "b"
    C = "c"
    D = "d"
    E = "e"
    F = "f"
    G = "g"
    H = "h"
    I = "i"  # noqa: E741
    J = "j"
    K = "k"
    L = "l"
    M = "m"
    N = "n"
    O = "o"  # noqa: E741
    P = "p"
    Q = "q"
    R = "r"
    S = "s"
    T = "t"
    U = "u"
    V = "v"
    W = "w"
    X = "x"
    Y = "y"
    Z = "z"
    LEFT_BRACKET = "left_bracket"
    BACKSLASH = "backslash"
    RIGHT_BRACKET = "right_bracket"
    GRAVE_ACCENT = "grave_accent"
    WORLD1 = "world1"
    WORLD2 = "world2"
    ESCAPE = "escape"
    ENTER = "enter"
    TAB = "tab"
    BACKSPACE = "backspace"
    INSERT = "insert"
    DELETE = "delete"
    RIGHT = "right"
    LEFT = "left"
    DOWN = "down"
    UP = "up"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"
    CAPS_LOCK = "caps_lock"
    SCROLL_LOCK = "scroll_lock"
    NUM_LOCK = "num_lock"
    PRINT_SCREEN = "print_screen"
    PAUSE = "pause"
    F1 = "f1"
    F2 = "f2"
    F3 = "f3"
    F4 = "f4"
    F5 = "f5"
    F6 = "f6"
    F7 = "f7"
    F8 = "f8"
    F9 = "f9"
    F10 = "f10"
    F11 = "f11"
    F12 = "f12"
    F13 = "f13"
    F14 = "f14"
    F15 = "f15"
    F16 = "f16"
    F17 = "f17"
    F18 = "f18"
    F19 = "f19"
    F20 = "f20"
    F21 = "f21"
    F22 = "f22"
    F23 = "f23"
    F24 = "f24"
    F25 = "f25"
    KP0 = "kp0"
    KP1 = "kp1"
    KP2 = "kp2"
    KP3 = "kp3"
    KP4 = "kp4"
    KP5 = "kp5"
    KP6 = "kp6"
    KP7 = "kp7"
    KP8 = "kp8"
    KP9 = "kp9"
    KP_DECIMAL = "kp_decimal"
    KP_DIVIDE = "kp_divide"
    KP_MULTIPLY = "kp_multiply"
    KP_SUBTRACT = "kp_subtract"
    KP_ADD = "kp_add"
    KP_ENTER = "kp_enter"
    KP_EQUAL = "kp_equal"
    LEFT_SHIFT = "left_shift"
    LEFT_CONTROL = "left_control"
    LEFT_ALT = "left_alt"
    LEFT_SUPER = "left_super"
    RIGHT_SHIFT = "right_shift"
    RIGHT_CONTROL = "right_control"
    RIGHT_ALT = "right_alt"
    RIGHT_SUPER = "right_super"
    MENU = "menu"
    UNKNOWN = "unknown"


class Action(enum.Enum):
    RELEASE = "release"
    PRESS = "press"
    REPEAT = "repeat"


class MouseButton(enum.Enum):
    BUTTON_LEFT = "left"
    BUTTON_RIGHT = "right"
    BUTTON_MIDDLE = "middle"
    BUTTON4 = "button4"
    BUTTON5 = "button5"
    BUTTON6 = "button6"
    BUTTON7 = "button7"
    BUTTON8 = "button8"


class Modifier(enum.Flag):
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()
    SUPER = enum.auto()
    CAPSLOCK = enum.auto()
    NUMLOCK = enum.auto()


@dataclass(frozen=True)
class KeyInput:
    key: Key
    scancode: int
    action: Action
    modifier: Modifier = Modifier(0)


@dataclass(frozen=True)
class MouseMotion:
    """Cursor movement: relative delta as a fraction of the window, and absolute position."""

    rel_x: float
    rel_y: float
    abs_x: float
    abs_y: float


@dataclass(frozen=True)
class MouseButtonInput:
    button: MouseButton
    action: Action
    modifier: Modifier = Modifier(0)


@dataclass(frozen=True)
class CharInput:
    char: str


class MouseTracker:
    """Turns absolute cursor positions into motion events relative to the window size."""

    def __init__(self, width, height):
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._last: Optional[Tuple[float, float]] = None

    def motion(self, x, y) -> MouseMotion:
        """Motion event for a cursor now at (x, y); the first one has no relative part."""
        if self._last is None:
            event = MouseMotion(0.0, 0.0, float(x), float(y))
        else:
            last_x, last_y = self._last
            event = MouseMotion(
                (x - last_x) / self.width,
                (y - last_y) / self.height,
                float(x),
                float(y),
            )
        self._last = (x, y)
        return event