import pytest

from confuse.events import (
    AppRenderEvent,
    AppTickEvent,
    AppUpdateEvent,
    EventCategory,
    EventDispatcher,
    EventType,
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
    bit,
)


def test_bit_shifts():
    assert [bit(i) for i in range(5)] == [1, 2, 4, 8, 16]


def test_category_values_are_bits():
    assert EventCategory.APPLICATION == bit(0)
    assert EventCategory.MOUSE_BUTTON == bit(4)


@pytest.mark.parametrize(
    "event, name",
    [
        (WindowResizeEvent(1, 2), "WindowResize"),
        (WindowCloseEvent(), "WindowClose"),
        (AppTickEvent(), "AppTick"),
        (AppUpdateEvent(), "AppUpdate"),
        (AppRenderEvent(), "AppRender"),
        (KeyPressedEvent(65, 0), "KeyPressed"),
        (KeyReleasedEvent(65), "KeyReleased"),
        (KeyTypedEvent(65), "KeyTyped"),
        (MouseMovedEvent(1.0, 2.0), "MouseMoved"),
        (MouseScrolledEvent(1.0, 2.0), "MouseScrolled"),
        (MouseButtonPressedEvent(0), "MouseButtonPressed"),
        (MouseButtonReleasedEvent(0), "MouseButtonReleased"),
    ],
)
def test_event_names(event, name):
    assert event.name == name
    assert event.handled is False


def test_window_close_str_is_name():
    assert str(WindowCloseEvent()) == "WindowClose"


def test_string_forms():
    assert str(WindowResizeEvent(1280, 720)) == "window resize event: 1280, 720"
    assert str(KeyPressedEvent(65, 1)) == "key pressed event: 65 (1 repeats)"
    assert str(KeyReleasedEvent(65)) == "key released event: 65"
    assert str(KeyTypedEvent(65)) == "key typed event: 65"
    assert str(MouseButtonPressedEvent(2)) == "mouse button pressed event: 2"
    assert str(MouseButtonReleasedEvent(2)) == "mouse button released event: 2"


def test_mouse_float_formatting():
    assert str(MouseMovedEvent(1.5, 100.0)) == "mouse moved event: 1.5, 100"
    assert str(MouseScrolledEvent(0.0, -1.0)) == "mouse scrolled event: 0, -1"


def test_categories():
    key = KeyPressedEvent(32, 0)
    assert key.is_in_category(EventCategory.KEYBOARD)
    assert key.is_in_category(EventCategory.INPUT)
    assert not key.is_in_category(EventCategory.MOUSE)

    mouse = MouseButtonPressedEvent(0)
    assert mouse.is_in_category(EventCategory.MOUSE)
    assert not mouse.is_in_category(EventCategory.MOUSE_BUTTON)

    resize = WindowResizeEvent(10, 10)
    assert resize.is_in_category(EventCategory.APPLICATION)
    assert not resize.is_in_category(EventCategory.INPUT)


def test_event_type_values():
    assert WindowCloseEvent().event_type == EventType.WINDOW_CLOSE
    assert WindowResizeEvent(1, 1).event_type == EventType.WINDOW_RESIZE
    assert int(EventType.NONE) == 0
    assert int(EventType.WINDOW_CLOSE) == 1


def test_dispatch_matching_sets_handled():
    event = WindowCloseEvent()
    seen = []

    def handler(e):
        seen.append(e)
        return True

    assert EventDispatcher(event).dispatch(WindowCloseEvent, handler) is True
    assert seen == [event]
    assert event.handled is True


def test_dispatch_handler_result_overrides_handled():
    event = WindowCloseEvent()
    event.handled = True
    assert EventDispatcher(event).dispatch(WindowCloseEvent, lambda e: False)
    assert event.handled is False


def test_dispatch_non_matching_skips_handler():
    event = WindowResizeEvent(3, 4)
    calls = []
    result = EventDispatcher(event).dispatch(
        WindowCloseEvent, lambda e: calls.append(e) or True
    )
    assert result is False
    assert calls == []
    assert event.handled is False


def test_resize_attributes():
    event = WindowResizeEvent(800, 600)
    assert (event.width, event.height) == (800, 600)