"""User-interface elements: empty slots, text, buttons and panels."""

from __future__ import annotations

import itertools
import logging
from typing import Any, Dict, Iterator, Optional, Union

from alers.input import Action, MouseButton, MouseButtonInput, MouseMotion
from alers.layout import Layout, NoLayout, RowNotFoundError, TableLayout

log = logging.getLogger(__name__)

LayoutType = Union[NoLayout, TableLayout]


class Empty:
    """A placeholder that only takes up space."""

    def __init__(self):
        self.layout = Layout()


class Text:
    """A line of text drawn with a font from the resource store."""

    def __init__(self, position, text: str, font: int, font_size: int):
        self.layout = Layout.new_local(position, (0, 0))
        self.text = text
        self.font = font
        self.font_size = font_size


class Button:
    """A clickable box that changes colour on hover and on press."""

    def __init__(self, position, size, idle_color, hover_color, press_color):
        self.layout = Layout.new_local(position, size)
        self.idle_color = idle_color
        self.hover_color = hover_color
        self.press_color = press_color
        self.is_pressed = False
        self.is_hover = False
        self.is_disable = False

    @classmethod
    def basic(cls, color) -> "Button":
        """Button of one colour, placed later by its parent's layout."""
        button = cls((0, 0), (0, 0), color, color, color)
        button.layout = Layout()
        return button

    def input(self, event) -> None:
        if isinstance(event, MouseMotion):
            self.is_hover = self.layout.is_inside(int(event.abs_x), int(event.abs_y))
        elif isinstance(event, MouseButtonInput):
            self.is_pressed = (
                self.is_hover
                and event.button is MouseButton.BUTTON_LEFT
                and event.action is Action.PRESS
            )

    def current_color(self):
        """Colour to draw with: press beats hover, hover beats idle."""
        color = self.idle_color
        if self.is_hover:
            color = self.hover_color
        if self.is_pressed:
            color = self.press_color
        return color


Element = Union[Empty, Text, Button, "Panel"]


class Panel:
    """A container whose layout type arranges its children."""

    def __init__(self, layout_type: LayoutType, layout: Optional[Layout] = None):
        self.layout_type = layout_type
        self.layout = Layout() if layout is None else layout
        self.children: Dict[int, Any] = {}
        self._keys = itertools.count()

    @classmethod
    def root(cls, layout_type: LayoutType, size) -> "Panel":
        return cls(layout_type, Layout.new_local((0, 0), size))

    def push(self, element) -> int:
        key = next(self._keys)
        self.children[key] = element
        return key

    def resize(self, new_size) -> None:
        """Change the local size and re-arrange; a layout error is only logged."""
        self.layout.size = (int(new_size[0]), int(new_size[1]))
        try:
            self.refresh_layout()
        except RowNotFoundError as err:
            log.warning("layout refresh failed: %s", err)

    def refresh_layout(self) -> None:
        layouts = [child.layout for child in self.children.values()]
        self.layout_type.arrange(self.layout, layouts)

    def input(self, event) -> None:
        for child in self.children.values():
            if isinstance(child, (Panel, Button)):
                child.input(event)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self.children.values()))


class Panels:
    """Panels addressed by key."""

    def __init__(self):
        self._panels: Dict[int, Panel] = {}
        self._keys = itertools.count()

    def push(self, panel: Panel) -> int:
        key = next(self._keys)
        self._panels[key] = panel
        return key

    def get(self, key: int) -> Optional[Panel]:
        return self._panels.get(key)