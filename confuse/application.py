"""The application: owns the window and layer stack and runs the frame loop."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import ClassVar

from . import log
from .events import Event, EventDispatcher, WindowCloseEvent
from .layers import Layer, LayerStack
from .timestep import Timestep
from .window import Input, Window, create_window


class Application:
    """The running program; the most recently created one is ``Application.get()``."""

    _instance: ClassVar[Application | None] = None

    def __init__(self, window: Window | None = None) -> None:
        if Application._instance is not None:
            log.core_logger().warning("application already exists")
        Application._instance = self

        self._window = window if window is not None else create_window()
        self._window.set_event_callback(self.on_event)
        Input.attach(self._window)

        self._layer_stack = LayerStack()
        self._running = True
        self._last_frame_time = time.perf_counter()

    @classmethod
    def get(cls) -> Application:
        if cls._instance is None:
            raise RuntimeError("no application has been created")
        return cls._instance

    @property
    def window(self) -> Window:
        return self._window

    @property
    def running(self) -> bool:
        return self._running

    def push_layer(self, layer: Layer) -> None:
        self._layer_stack.push_layer(layer)
        layer.on_attach()

    def push_overlay(self, overlay: Layer) -> None:
        self._layer_stack.push_overlay(overlay)
        overlay.on_attach()

    def on_event(self, event: Event) -> None:
        EventDispatcher(event).dispatch(WindowCloseEvent, self._on_window_close)
        for layer in reversed(self._layer_stack):
            layer.on_event(event)
            if event.handled:
                break

    def _on_window_close(self, event: WindowCloseEvent) -> bool:
        self._running = False
        return True

    def run_frame(self) -> Timestep:
        """Update and render every layer once, then update the window."""
        now = time.perf_counter()
        timestep = Timestep(now - self._last_frame_time)
        self._last_frame_time = now

        for layer in self._layer_stack:
            layer.on_update(timestep)
        for layer in self._layer_stack:
            layer.on_imgui_render()

        self._window.on_update()
        return timestep

    def run(self) -> None:
        """Run frames until the window is closed."""
        while self._running:
            self.run_frame()


def run_application(factory: Callable[[], Application]) -> Application:
    """Set up logging, build an application with ``factory`` and run it to the end."""
    log.init()
    log.core_logger().info("initialization core")
    log.client_logger().info("init application")

    app = factory()
    try:
        app.run()
    finally:
        close = getattr(app.window, "close", None)
        if callable(close):
            close()
    return app