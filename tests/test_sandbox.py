import numpy as np
import pytest

from confuse.application import Application
from confuse.camera import ortho
from confuse.events import KeyPressedEvent, MouseMovedEvent, WindowResizeEvent
from confuse.keycodes import Key
from confuse.renderer import API, Renderer, UnsupportedAPIError
from confuse.sandbox import ExampleLayer, Sandbox
from confuse.timestep import Timestep
from confuse.window import Input, Window


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

    def press(self, key):
        self._track(KeyPressedEvent(key, 0))


@pytest.fixture(autouse=True)
def restore_state():
    previous_input = Input.attach(None)
    previous_api = Renderer.api()
    yield
    Input.attach(previous_input)
    Renderer.set_api(previous_api)


def test_initial_camera_projection():
    layer = ExampleLayer()
    np.testing.assert_allclose(
        layer.camera.projection_matrix, ortho(-1.28, 1.28, -0.72, 0.72, -1.0, 1.0)
    )
    assert layer.name == "example"


def test_left_key_moves_camera():
    window = FakeWindow()
    Input.attach(window)
    window.press(Key.A)
    layer = ExampleLayer()
    layer.on_update(Timestep(1.0))
    assert layer.camera.position == (-5.0, 0.0, 0.0)


def test_a_takes_precedence_over_d():
    window = FakeWindow()
    Input.attach(window)
    window.press(Key.A)
    window.press(Key.D)
    layer = ExampleLayer()
    layer.on_update(Timestep(1.0))
    assert layer.camera.position == (-5.0, 0.0, 0.0)


def test_d_and_w_move_right_and_up():
    window = FakeWindow()
    Input.attach(window)
    window.press(Key.D)
    window.press(Key.W)
    layer = ExampleLayer()
    layer.on_update(Timestep(1.0))
    assert layer.camera.position == (5.0, 5.0, 0.0)


def test_arrow_keys_rotate_camera():
    window = FakeWindow()
    Input.attach(window)
    window.press(Key.LEFT)
    layer = ExampleLayer()
    layer.on_update(Timestep(1.0))
    assert layer.camera.rotation == 180.0

    other = FakeWindow()
    Input.attach(other)
    other.press(Key.RIGHT)
    turned = ExampleLayer()
    turned.on_update(Timestep(1.0))
    assert turned.camera.rotation == -180.0


def test_no_keys_leaves_camera_still():
    Input.attach(FakeWindow())
    layer = ExampleLayer()
    layer.on_update(Timestep(1.0))
    assert layer.camera.position == (0.0, 0.0, 0.0)
    assert layer.camera.rotation == 0.0


def test_resize_to_wide_window():
    Application(FakeWindow(width=1600, height=800))
    layer = ExampleLayer()
    layer.on_event(WindowResizeEvent(1600, 800))
    np.testing.assert_allclose(
        layer.camera.projection_matrix, ortho(-2.0, 2.0, -1.0, 1.0, -1.0, 1.0)
    )


def test_resize_to_tall_window():
    Application(FakeWindow(width=800, height=1600))
    layer = ExampleLayer()
    layer.on_event(WindowResizeEvent(800, 1600))
    np.testing.assert_allclose(
        layer.camera.projection_matrix, ortho(-1.0, 1.0, -2.0, 2.0, -1.0, 1.0)
    )


def test_other_events_keep_camera():
    Application(FakeWindow(width=1600, height=800))
    layer = ExampleLayer()
    layer.on_event(MouseMovedEvent(1.0, 2.0))
    np.testing.assert_allclose(
        layer.camera.projection_matrix, ortho(-1.28, 1.28, -0.72, 0.72, -1.0, 1.0)
    )


def test_sandbox_with_unsupported_api_raises():
    Renderer.set_api(API.NONE)
    with pytest.raises(UnsupportedAPIError):
        Sandbox(FakeWindow())