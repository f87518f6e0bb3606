import pytest

from confuse.events import (
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
)
from confuse.keycodes import Key, MouseButton
from confuse.window import Input, Window, WindowProps


class FakeWindow(Window):
    def __init__(self, width=1280, height=720):
        super().__init__()
        self._width = width
        self._height = height
        self._vsync = False
        self.callback = None

    def on_update(self):
        pass

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    def set_event_callback(self, callback):
        self.callback = callback

    @property
    def vsync(self):
        return self._vsync

    @vsync.setter
    def vsync(self, enabled):
        self._vsync = enabled

    @property
    def native_window(self):
        return self

    def emit(self, event):
        self._track(event)
        if self.callback is not None:
            self.callback(event)


@pytest.fixture(autouse=True)
def detached_input():
    previous = Input.attach(None)
    yield
    Input.attach(previous)


def test_window_props_defaults():
    props = WindowProps()
    assert (props.title, props.width, props.height) == ("Confuse Engine", 1280, 720)


def test_window_is_abstract():
    with pytest.raises(TypeError):
        Window()


def test_input_without_window_raises():
    with pytest.raises(RuntimeError):
        Input.is_key_pressed(Key.A)
    with pytest.raises(RuntimeError):
        Input.mouse_position()


def test_attach_returns_previous_window():
    first, second = FakeWindow(), FakeWindow()
    assert Input.attach(first) is None
    assert Input.attach(second) is first


def test_key_press_and_release_tracked():
    window = FakeWindow()
    Input.attach(window)
    assert Input.is_key_pressed(Key.W) is False
    window.emit(KeyPressedEvent(Key.W, 0))
    assert Input.is_key_pressed(Key.W) is True
    assert Input.is_key_pressed(int(Key.W)) is True
    assert Input.is_key_pressed(Key.S) is False
    window.emit(KeyReleasedEvent(Key.W))
    assert Input.is_key_pressed(Key.W) is False


def test_release_of_unpressed_key_leaves_state_empty():
    window = FakeWindow()
    Input.attach(window)
    window.emit(KeyReleasedEvent(Key.Q))
    assert Input.is_key_pressed(Key.Q) is False


def test_mouse_buttons_tracked():
    window = FakeWindow()
    Input.attach(window)
    window.emit(MouseButtonPressedEvent(MouseButton.RIGHT))
    assert Input.is_mouse_button_pressed(MouseButton.RIGHT) is True
    assert Input.is_mouse_button_pressed(MouseButton.LEFT) is False
    window.emit(MouseButtonReleasedEvent(MouseButton.RIGHT))
    assert Input.is_mouse_button_pressed(MouseButton.RIGHT) is False


def test_mouse_position_follows_moves():
    window = FakeWindow()
    Input.attach(window)
    assert Input.mouse_position() == (0.0, 0.0)
    window.emit(MouseMovedEvent(12.5, 40.0))
    assert Input.mouse_position() == (12.5, 40.0)
    assert Input.mouse_x() == 12.5
    assert Input.mouse_y() == 40.0


def test_events_reach_callback():
    window = FakeWindow()
    received = []
    window.set_event_callback(received.append)
    event = KeyPressedEvent(Key.SPACE, 0)
    window.emit(event)
    assert received == [event]