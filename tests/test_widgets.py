from alers.input import Action, MouseButton, MouseButtonInput, MouseMotion
from alers.layout import Layout, NoLayout, TableLayout
from alers.widgets import Button, Empty, Panel, Panels, Text


def _button():
    return Button((0, 0), (10, 10), "idle", "hover", "press")


def test_button_idle_color_by_default():
    assert _button().current_color() == "idle"


def test_button_hover_when_cursor_inside():
    button = _button()
    button.input(MouseMotion(0.0, 0.0, 5.0, 5.0))
    assert button.is_hover
    assert button.current_color() == "hover"


def test_button_leaves_hover_when_cursor_outside():
    button = _button()
    button.input(MouseMotion(0.0, 0.0, 5.0, 5.0))
    button.input(MouseMotion(0.0, 0.0, 50.0, 5.0))
    assert button.current_color() == "idle"


def test_button_press_needs_hover_and_left_press():
    button = _button()
    button.input(MouseButtonInput(MouseButton.BUTTON_LEFT, Action.PRESS))
    assert not button.is_pressed
    button.input(MouseMotion(0.0, 0.0, 5.0, 5.0))
    button.input(MouseButtonInput(MouseButton.BUTTON_LEFT, Action.PRESS))
    assert button.current_color() == "press"
    button.input(MouseButtonInput(MouseButton.BUTTON_LEFT, Action.RELEASE))
    assert button.current_color() == "hover"


def test_button_right_click_does_not_press():
    button = _button()
    button.input(MouseMotion(0.0, 0.0, 5.0, 5.0))
    button.input(MouseButtonInput(MouseButton.BUTTON_RIGHT, Action.PRESS))
    assert not button.is_pressed


def test_basic_button_uses_one_color():
    button = Button.basic("blue")
    assert (button.idle_color, button.hover_color, button.press_color) == ("blue", "blue", "blue")
    assert button.layout == Layout()


def test_text_and_empty_layouts():
    text = Text((4, 6), "hello", 0, 12)
    assert text.layout.position == (4, 6)
    assert text.layout.size == (0, 0)
    assert Empty().layout == Layout()


def test_panel_push_gives_distinct_keys():
    panel = Panel(NoLayout())
    first = panel.push(Empty())
    second = panel.push(Empty())
    assert first != second
    assert len(list(panel)) == 2


def test_panel_refresh_layout_arranges_children():
    table = TableLayout([[1.0, 1.0]], [1.0])
    panel = Panel.root(table, (100, 40))
    left, right = Empty(), Button.basic("c")
    panel.push(left)
    panel.push(right)
    panel.refresh_layout()
    assert left.layout.size == (50, 40)
    assert right.layout.position == (left.layout.size[0], 0)


def test_panel_resize_updates_size_and_arranges():
    panel = Panel.root(TableLayout([[1.0]], [1.0]), (10, 10))
    child = Empty()
    panel.push(child)
    panel.resize((30, 20))
    assert panel.layout.size == (30, 20)
    assert child.layout.size == (30, 20)


def test_panel_resize_ignores_layout_error():
    panel = Panel.root(TableLayout([[1.0]], []), (10, 10))
    child = Empty()
    panel.push(child)
    panel.resize((30, 20))
    assert panel.layout.size == (30, 20)
    assert child.layout == Layout()


def test_panel_input_reaches_nested_button():
    inner = Panel(NoLayout())
    button = _button()
    inner.push(button)
    outer = Panel(NoLayout())
    outer.push(inner)
    outer.push(Text((0, 0), "t", 0, 10))
    outer.input(MouseMotion(0.0, 0.0, 5.0, 5.0))
    assert button.is_hover


def test_panels_push_and_get():
    panels = Panels()
    panel = Panel(NoLayout())
    key = panels.push(panel)
    assert panels.get(key) is panel
    assert panels.get(key + 1) is None