"""Application windows, their event callbacks and polled input state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, ClassVar

from .events import (
    Event,
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)
from .keycodes import Key, MouseButton
from .log import core_logger
from .opengl import OpenGLContext

EventCallback = Callable[[Event], None]

UNKNOWN_KEY = -1


@dataclass
class WindowProps:
    """Title and size of a window to be created."""

    title: str = "Confuse Engine"
    width: int = 1280
    height: int = 720


class Window(ABC):
    """A window that reports events to a callback and keeps track of input state."""

    def __init__(self) -> None:
        self._pressed_keys: set[int] = set()
        self._pressed_buttons: set[int] = set()
        self._cursor: tuple[float, float] = (0.0, 0.0)

    @abstractmethod
    def on_update(self) -> None: ...

    @property
    @abstractmethod
    def width(self) -> int: ...

    @property
    @abstractmethod
    def height(self) -> int: ...

    @abstractmethod
    def set_event_callback(self, callback: EventCallback | None) -> None: ...

    @property
    @abstractmethod
    def vsync(self) -> bool: ...

    @vsync.setter
    @abstractmethod
    def vsync(self, enabled: bool) -> None: ...

    @property
    @abstractmethod
    def native_window(self) -> Any: ...

    def _track(self, event: Event) -> None:
        """Record what an outgoing event says about keys, buttons and the cursor."""
        if isinstance(event, KeyPressedEvent):
            self._pressed_keys.add(int(event.key_code))
        elif isinstance(event, KeyReleasedEvent):
            self._pressed_keys.discard(int(event.key_code))
        elif isinstance(event, MouseButtonPressedEvent):
            self._pressed_buttons.add(int(event.button))
        elif isinstance(event, MouseButtonReleasedEvent):
            self._pressed_buttons.discard(int(event.button))
        elif isinstance(event, MouseMovedEvent):
            self._cursor = (float(event.x), float(event.y))

    def _is_key_pressed(self, keycode: int) -> bool:
        return keycode in self._pressed_keys

    def _is_mouse_button_pressed(self, button: int) -> bool:
        return button in self._pressed_buttons

    def _mouse_position(self) -> tuple[float, float]:
        return self._cursor


_KEY_ALIASES: dict[str, tuple[str, ...]] = {
    "LEFT_BRACKET": ("BRACKETLEFT",),
    "RIGHT_BRACKET": ("BRACKETRIGHT",),
    "GRAVE_ACCENT": ("GRAVE",),
    "ENTER": ("RETURN",),
    "PAGE_UP": ("PAGEUP",),
    "PAGE_DOWN": ("PAGEDOWN",),
    "CAPS_LOCK": ("CAPSLOCK",),
    "SCROLL_LOCK": ("SCROLLLOCK",),
    "NUM_LOCK": ("NUMLOCK",),
    "PRINT_SCREEN": ("PRINT",),
    "LEFT_SHIFT": ("LSHIFT",),
    "LEFT_CONTROL": ("LCTRL",),
    "LEFT_ALT": ("LALT",),
    "LEFT_SUPER": ("LWINDOWS", "LMETA", "LCOMMAND"),
    "RIGHT_SHIFT": ("RSHIFT",),
    "RIGHT_CONTROL": ("RCTRL",),
    "RIGHT_ALT": ("RALT",),
    "RIGHT_SUPER": ("RWINDOWS", "RMETA", "RCOMMAND"),
}

_PYGLET_BUTTONS = {
    1: MouseButton.LEFT,
    4: MouseButton.RIGHT,
    2: MouseButton.MIDDLE,
    8: MouseButton.BUTTON_4,
    16: MouseButton.BUTTON_5,
}


def _pyglet_key_names(name: str) -> tuple[str, ...]:
    if name in _KEY_ALIASES:
        return _KEY_ALIASES[name]
    if name.startswith("DIGIT_"):
        return ("_" + name[len("DIGIT_"):],)
    if name.startswith("KP_"):
        return ("NUM_" + name[len("KP_"):],)
    return (name,)


@lru_cache(maxsize=1)
def _key_table() -> dict[int, int]:
    from pyglet.window import key as pyglet_key

    table: dict[int, int] = {}
    for member in Key:
        for candidate in _pyglet_key_names(member.name):
            symbol = getattr(pyglet_key, candidate, None)
            if isinstance(symbol, int):
                table.setdefault(symbol, int(member))
                break
    return table


def _key_code(symbol: int) -> int:
    return _key_table().get(symbol, UNKNOWN_KEY)


class DesktopWindow(Window):
    """A desktop window with an OpenGL context."""

    def __init__(self, props: WindowProps | None = None) -> None:
        super().__init__()
        props = props if props is not None else WindowProps()
        self._title = props.title
        self._width = int(props.width)
        self._height = int(props.height)
        self._vsync = False
        self._callback: EventCallback | None = None

        core_logger().info(
            "creating window %s (%d, %d)", props.title, props.width, props.height
        )

        import pyglet.window

        self._window: Any = pyglet.window.Window(
            width=self._width, height=self._height, caption=self._title, resizable=True
        )
        self._context = OpenGLContext(self._window)
        self._context.init()
        self.vsync = True

        self._window.push_handlers(
            on_resize=self._handle_resize,
            on_close=self._handle_close,
            on_key_press=self._handle_key_press,
            on_key_release=self._handle_key_release,
            on_text=self._handle_text,
            on_mouse_press=self._handle_mouse_press,
            on_mouse_release=self._handle_mouse_release,
            on_mouse_scroll=self._handle_mouse_scroll,
            on_mouse_motion=self._handle_mouse_motion,
            on_mouse_drag=self._handle_mouse_drag,
        )

    def _send(self, event: Event) -> None:
        self._track(event)
        if self._callback is not None:
            self._callback(event)

    def _handle_resize(self, width: int, height: int) -> None:
        self._width = int(width)
        self._height = int(height)
        self._send(WindowResizeEvent(self._width, self._height))

    def _handle_close(self) -> bool:
        self._send(WindowCloseEvent())
        return True

    def _handle_key_press(self, symbol: int, modifiers: int) -> bool:
        self._send(KeyPressedEvent(_key_code(symbol), 0))
        return True

    def _handle_key_release(self, symbol: int, modifiers: int) -> bool:
        self._send(KeyReleasedEvent(_key_code(symbol)))
        return True

    def _handle_text(self, text: str) -> None:
        for char in text:
            self._send(KeyTypedEvent(ord(char)))

    def _handle_mouse_press(self, x: int, y: int, button: int, modifiers: int) -> None:
        if button in _PYGLET_BUTTONS:
            self._send(MouseButtonPressedEvent(int(_PYGLET_BUTTONS[button])))

    def _handle_mouse_release(self, x: int, y: int, button: int, modifiers: int) -> None:
        if button in _PYGLET_BUTTONS:
            self._send(MouseButtonReleasedEvent(int(_PYGLET_BUTTONS[button])))

    def _handle_mouse_scroll(self, x: int, y: int, scroll_x: float, scroll_y: float) -> None:
        self._send(MouseScrolledEvent(float(scroll_x), float(scroll_y)))

    def _handle_mouse_motion(self, x: int, y: int, dx: int, dy: int) -> None:
        """Send a cursor move with y measured downward from the top edge."""
        self._send(MouseMovedEvent(float(x), float(self._height - y)))

    def _handle_mouse_drag(
        self, x: int, y: int, dx: int, dy: int, buttons: int, modifiers: int
    ) -> None:
        self._handle_mouse_motion(x, y, dx, dy)

    def on_update(self) -> None:
        self._window.dispatch_events()
        self._context.swap_buffers()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set_event_callback(self, callback: EventCallback | None) -> None:
        self._callback = callback

    @property
    def vsync(self) -> bool:
        return self._vsync

    @vsync.setter
    def vsync(self, enabled: bool) -> None:
        self._window.set_vsync(bool(enabled))
        self._vsync = bool(enabled)

    @property
    def native_window(self) -> Any:
        return self._window

    def close(self) -> None:
        """Destroy the native window; further calls do nothing."""
        if self._window is not None:
            self._window.close()
            self._window = None


def create_window(props: WindowProps | None = None) -> Window:
    """Create a desktop window with the given properties."""
    return DesktopWindow(props if props is not None else WindowProps())


class Input:
    """Polled keyboard and mouse state of the attached window."""

    _window: ClassVar[Window | None] = None

    @classmethod
    def attach(cls, window: Window | None) -> Window | None:
        """Make ``window`` the source of input state. Returns the previous one."""
        previous = cls._window
        cls._window = window
        return previous

    @classmethod
    def _source(cls) -> Window:
        if cls._window is None:
            raise RuntimeError("no window is attached to input")
        return cls._window

    @classmethod
    def is_key_pressed(cls, keycode: int) -> bool:
        return cls._source()._is_key_pressed(int(keycode))

    @classmethod
    def is_mouse_button_pressed(cls, button: int) -> bool:
        return cls._source()._is_mouse_button_pressed(int(button))

    @classmethod
    def mouse_position(cls) -> tuple[float, float]:
        return cls._source()._mouse_position()

    @classmethod
    def mouse_x(cls) -> float:
        return cls.mouse_position()[0]

    @classmethod
    def mouse_y(cls) -> float:
        return cls.mouse_position()[1]