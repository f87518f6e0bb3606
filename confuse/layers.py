"""Layers and the ordered stack that holds them."""

from __future__ import annotations

from collections.abc import Iterator

from .events import Event
from .timestep import Timestep


class Layer:
    """A unit of update, render and event handling.

    The default hooks only keep a little bookkeeping: whether the layer is
    attached, how much time it has been updated for, how many interface
    frames it has drawn and the last event it saw.
    """

    def __init__(self, name: str = "layer") -> None:
        self._name = name
        self._attached = False
        self._elapsed = 0.0
        self._frames_rendered = 0
        self._last_event: Event | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def attached(self) -> bool:
        return self._attached

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def frames_rendered(self) -> int:
        return self._frames_rendered

    @property
    def last_event(self) -> Event | None:
        return self._last_event

    def on_attach(self) -> None:
        """Called when the layer is pushed onto an application."""
        self._attached = True

    def on_detach(self) -> None:
        """Called when the layer is taken off an application."""
        self._attached = False

    def on_update(self, ts: Timestep) -> None:
        """Called once per frame with the time since the previous frame."""
        self._elapsed += float(ts)

    def on_imgui_render(self) -> None:
        """Called once per frame while the interface is being drawn."""
        self._frames_rendered += 1

    def on_event(self, event: Event) -> None:
        """Called for each event that reaches this layer."""
        self._last_event = event

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"


class LayerStack:
    """Layers below, overlays above; iteration runs bottom to top."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def push_layer(self, layer: Layer) -> None:
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1

    def push_overlay(self, overlay: Layer) -> None:
        self._layers.append(overlay)

    def _position(self, layer: Layer) -> int | None:
        return next((i for i, item in enumerate(self._layers) if item is layer), None)

    def pop_layer(self, layer: Layer) -> None:
        index = self._position(layer)
        if index is not None:
            del self._layers[index]
            self._insert_index -= 1

    def pop_overlay(self, overlay: Layer) -> None:
        index = self._position(overlay)
        if index is not None:
            del self._layers[index]

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(self._layers)

    def __len__(self) -> int:
        return len(self._layers)