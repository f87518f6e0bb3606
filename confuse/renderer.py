"""Renderer front end: backend selection, render commands and scene submission."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import IntEnum
from typing import ClassVar

import numpy as np

from .buffers import IndexBuffer, Shader, VertexArray, VertexBuffer
from .camera import OrthographicCamera


class API(IntEnum):
    NONE = 0
    OPENGL = 1


class UnsupportedAPIError(RuntimeError):
    """Raised when a resource is requested for a renderer API that has no backend."""


class RendererAPI(ABC):
    """The drawing operations a rendering backend provides."""

    @abstractmethod
    def set_clear_color(self, color: Sequence[float]) -> None: ...

    @abstractmethod
    def clear(self) -> None: ...

    @abstractmethod
    def draw_indexed(self, vertex_array: VertexArray) -> None: ...


class RenderCommand:
    """Forwards draw calls to the active backend."""

    _renderer_api: ClassVar[RendererAPI | None] = None

    @classmethod
    def use(cls, renderer_api: RendererAPI | None) -> RendererAPI | None:
        """Select the backend; ``None`` restores the default. Returns the previous one."""
        previous = cls._renderer_api
        cls._renderer_api = renderer_api
        return previous

    @classmethod
    def _backend(cls) -> RendererAPI:
        if cls._renderer_api is None:
            from .opengl import OpenGLRendererAPI

            cls._renderer_api = OpenGLRendererAPI()
        return cls._renderer_api

    @classmethod
    def set_clear_color(cls, color: Sequence[float]) -> None:
        cls._backend().set_clear_color(color)

    @classmethod
    def clear(cls) -> None:
        cls._backend().clear()

    @classmethod
    def draw_indexed(cls, vertex_array: VertexArray) -> None:
        cls._backend().draw_indexed(vertex_array)


class Renderer:
    """Scene-level rendering: camera set-up and submission of draw calls."""

    _api: ClassVar[API] = API.OPENGL
    _view_projection: ClassVar[np.ndarray] = np.identity(4, dtype=np.float32)

    @classmethod
    def api(cls) -> API:
        return cls._api

    @classmethod
    def set_api(cls, api: API) -> None:
        cls._api = API(api)

    @classmethod
    def begin_scene(cls, camera: OrthographicCamera) -> None:
        cls._view_projection = camera.view_projection_matrix * 3.0

    @classmethod
    def end_scene(cls) -> None:
        pass

    @classmethod
    def submit(
        cls,
        shader: Shader,
        vertex_array: VertexArray,
        transform: np.ndarray | None = None,
    ) -> None:
        if transform is None:
            transform = np.identity(4, dtype=np.float32)
        shader.bind()
        shader.upload_uniform_mat4("u_viewProjection", cls._view_projection)  # type: ignore[attr-defined]
        shader.upload_uniform_mat4("u_transform", transform)  # type: ignore[attr-defined]
        vertex_array.bind()
        RenderCommand.draw_indexed(vertex_array)


def _require_opengl() -> None:
    api = Renderer.api()
    if api is API.NONE:
        raise UnsupportedAPIError("renderer API None is currently not supported")
    if api is not API.OPENGL:
        raise UnsupportedAPIError(f"unknown renderer API: {api!r}")


def create_vertex_buffer(vertices: Sequence[float]) -> VertexBuffer:
    """Create a vertex buffer for the active renderer API."""
    _require_opengl()
    from .opengl import OpenGLVertexBuffer

    return OpenGLVertexBuffer(vertices)


def create_index_buffer(indices: Sequence[int]) -> IndexBuffer:
    """Create an index buffer for the active renderer API."""
    _require_opengl()
    from .opengl import OpenGLIndexBuffer

    return OpenGLIndexBuffer(indices)


def create_shader(vertex_src: str, fragment_src: str) -> Shader:
    """Compile a shader program for the active renderer API."""
    _require_opengl()
    from .opengl import OpenGLShader

    return OpenGLShader(vertex_src, fragment_src)


def create_vertex_array() -> VertexArray:
    """Create a vertex array for the active renderer API."""
    _require_opengl()
    from .opengl import OpenGLVertexArray

    return OpenGLVertexArray()