"""OpenGL implementations of the renderer's buffers, shaders, vertex arrays and context."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from .buffers import (
    GraphicsContext,
    IndexBuffer,
    Shader,
    ShaderDataType,
    VertexArray,
    VertexBuffer,
)
from .log import core_logger
from .renderer import RendererAPI

GL_FALSE = 0
GL_TRUE = 1
GL_TRIANGLES = 0x0004
GL_DEPTH_BUFFER_BIT = 0x0100
GL_COLOR_BUFFER_BIT = 0x4000
GL_INT = 0x1404
GL_UNSIGNED_INT = 0x1405
GL_FLOAT = 0x1406
GL_BOOL = 0x8B56
GL_ARRAY_BUFFER = 0x8892
GL_ELEMENT_ARRAY_BUFFER = 0x8893
GL_STATIC_DRAW = 0x88E4

_gl: Any = None


def _api() -> Any:
    """The OpenGL function namespace, loaded on first use."""
    global _gl
    if _gl is None:
        from pyglet import gl

        _gl = gl
    return _gl


def _shader_api() -> Any:
    from pyglet.graphics import shader

    return shader


def _buffer_object(size: int) -> Any:
    from pyglet.graphics.vertexbuffer import BufferObject

    return BufferObject(size)


def _vertex_array_object() -> Any:
    from pyglet.graphics.vertexarray import VertexArray as GLVertexArray

    return GLVertexArray()


_BASE_TYPES = {
    ShaderDataType.FLOAT: GL_FLOAT,
    ShaderDataType.FLOAT2: GL_FLOAT,
    ShaderDataType.FLOAT3: GL_FLOAT,
    ShaderDataType.FLOAT4: GL_FLOAT,
    ShaderDataType.MAT3: GL_FLOAT,
    ShaderDataType.MAT4: GL_FLOAT,
    ShaderDataType.INT: GL_INT,
    ShaderDataType.INT2: GL_INT,
    ShaderDataType.INT3: GL_INT,
    ShaderDataType.INT4: GL_INT,
    ShaderDataType.BOOL: GL_BOOL,
}


def gl_base_type(data_type: ShaderDataType) -> int:
    """The OpenGL component type of a shader data type."""
    try:
        return _BASE_TYPES[ShaderDataType(data_type)]
    except (KeyError, ValueError):
        raise ValueError(f"unknown shader data type: {data_type!r}") from None


class ShaderError(RuntimeError):
    """A shader failed to compile or link; ``info_log`` holds the driver's message."""

    def __init__(self, message: str, info_log: str = "") -> None:
        super().__init__(f"{message}: {info_log}" if info_log else message)
        self.info_log = info_log


def _static_buffer(target: int, data: np.ndarray) -> Any:
    """Create a GPU buffer holding ``data`` bound to ``target``."""
    gl = _api()
    buffer = _buffer_object(max(data.nbytes, 1))
    gl.glBindBuffer(target, buffer.id)
    gl.glBufferData(target, data.nbytes, data.tobytes(), GL_STATIC_DRAW)
    return buffer


class OpenGLVertexBuffer(VertexBuffer):
    """A static vertex buffer of 32-bit floats."""

    def __init__(self, vertices: Sequence[float]) -> None:
        super().__init__()
        data = np.ascontiguousarray(vertices, dtype=np.float32).ravel()
        self._buffer: Any = _static_buffer(GL_ARRAY_BUFFER, data)

    @property
    def renderer_id(self) -> int:
        return int(self._buffer.id) if self._buffer is not None else 0

    def bind(self) -> None:
        _api().glBindBuffer(GL_ARRAY_BUFFER, self.renderer_id)

    def unbind(self) -> None:
        _api().glBindBuffer(GL_ARRAY_BUFFER, 0)

    def delete(self) -> None:
        """Free the GPU buffer; further calls do nothing."""
        if self._buffer is not None:
            self._buffer.delete()
            self._buffer = None


class OpenGLIndexBuffer(IndexBuffer):
    """A static index buffer of 32-bit unsigned integers."""

    def __init__(self, indices: Sequence[int]) -> None:
        data = np.ascontiguousarray(indices, dtype=np.uint32).ravel()
        self._count = int(data.size)
        self._buffer: Any = _static_buffer(GL_ELEMENT_ARRAY_BUFFER, data)

    @property
    def renderer_id(self) -> int:
        return int(self._buffer.id) if self._buffer is not None else 0

    def bind(self) -> None:
        _api().glBindBuffer(GL_ELEMENT_ARRAY_BUFFER, self.renderer_id)

    def unbind(self) -> None:
        _api().glBindBuffer(GL_ELEMENT_ARRAY_BUFFER, 0)

    @property
    def count(self) -> int:
        return self._count

    def delete(self) -> None:
        """Free the GPU buffer; further calls do nothing."""
        if self._buffer is not None:
            self._buffer.delete()
            self._buffer = None


def _compile(shader_api: Any, source: str, stage: str) -> Any:
    try:
        return shader_api.Shader(source, stage)
    except shader_api.ShaderException as exc:
        log = str(exc)
        core_logger().error("%s", log)
        raise ShaderError(f"{stage} shader compilation failed", log) from None


def _matrix_data(matrix: Any, size: int) -> np.ndarray:
    data = np.asarray(matrix, dtype=np.float32)
    if data.shape != (size, size):
        raise ValueError(f"expected a {size}x{size} matrix, got shape {data.shape}")
    # Column-major, as the uniform upload does not transpose.
    return np.ascontiguousarray(data.T)


class OpenGLShader(Shader):
    """A shader program linked from vertex and fragment sources."""

    def __init__(self, vertex_src: str, fragment_src: str) -> None:
        shader_api = _shader_api()
        self._program: Any = None
        vertex = _compile(shader_api, vertex_src, "vertex")
        try:
            fragment = _compile(shader_api, fragment_src, "fragment")
        except ShaderError:
            vertex.delete()
            raise

        try:
            self._program = shader_api.ShaderProgram(vertex, fragment)
        except shader_api.ShaderException as exc:
            vertex.delete()
            fragment.delete()
            log = str(exc)
            core_logger().error("%s", log)
            raise ShaderError("shader link failed", log) from None

    @property
    def renderer_id(self) -> int:
        return int(self._program.id) if self._program is not None else 0

    def bind(self) -> None:
        _api().glUseProgram(self.renderer_id)

    def unbind(self) -> None:
        _api().glUseProgram(0)

    def delete(self) -> None:
        """Free the program; further calls do nothing."""
        if self._program is not None:
            self._program.delete()
            self._program = None

    def _upload(self, name: str, value: Any) -> None:
        # A uniform the program does not use is ignored, as OpenGL does for location -1.
        if self._program is None:
            return
        try:
            self._program[name] = value
        except _shader_api().ShaderException:
            pass

    def upload_uniform_int(self, name: str, value: int) -> None:
        self._upload(name, int(value))

    def upload_uniform_float(self, name: str, value: float) -> None:
        self._upload(name, float(value))

    def upload_uniform_float2(self, name: str, values: Sequence[float]) -> None:
        x, y = values
        self._upload(name, (float(x), float(y)))

    def upload_uniform_float3(self, name: str, values: Sequence[float]) -> None:
        x, y, z = values
        self._upload(name, (float(x), float(y), float(z)))

    def upload_uniform_float4(self, name: str, values: Sequence[float]) -> None:
        x, y, z, w = values
        self._upload(name, (float(x), float(y), float(z), float(w)))

    def upload_uniform_mat3(self, name: str, matrix: Any) -> None:
        data = _matrix_data(matrix, 3)
        self._upload(name, tuple(float(v) for v in data.ravel()))

    def upload_uniform_mat4(self, name: str, matrix: Any) -> None:
        data = _matrix_data(matrix, 4)
        self._upload(name, tuple(float(v) for v in data.ravel()))


class OpenGLVertexArray(VertexArray):
    """A vertex array object tying vertex buffer layouts to attribute slots."""

    def __init__(self) -> None:
        self._array: Any = _vertex_array_object()
        self._vertex_buffers: list[VertexBuffer] = []
        self._index_buffer: IndexBuffer | None = None

    @property
    def renderer_id(self) -> int:
        return int(self._array.id) if self._array is not None else 0

    def bind(self) -> None:
        _api().glBindVertexArray(self.renderer_id)

    def unbind(self) -> None:
        _api().glBindVertexArray(0)

    def delete(self) -> None:
        """Free the vertex array object; further calls do nothing."""
        if self._array is not None:
            self._array.delete()
            self._array = None

    def add_vertex_buffer(self, vertex_buffer: VertexBuffer) -> None:
        layout = vertex_buffer.layout
        if not len(layout):
            raise ValueError("vertex buffer has no layout")
        gl = _api()
        gl.glBindVertexArray(self.renderer_id)
        vertex_buffer.bind()
        for index, element in enumerate(layout):
            gl.glEnableVertexAttribArray(index)
            gl.glVertexAttribPointer(
                index,
                element.component_count,
                gl_base_type(element.data_type),
                GL_TRUE if element.normalized else GL_FALSE,
                layout.stride,
                element.offset,
            )
        self._vertex_buffers.append(vertex_buffer)

    def set_index_buffer(self, index_buffer: IndexBuffer) -> None:
        _api().glBindVertexArray(self.renderer_id)
        index_buffer.bind()
        self._index_buffer = index_buffer

    @property
    def vertex_buffers(self) -> tuple[VertexBuffer, ...]:
        return tuple(self._vertex_buffers)

    @property
    def index_buffer(self) -> IndexBuffer | None:
        return self._index_buffer


class OpenGLRendererAPI(RendererAPI):
    """Draw operations issued straight to OpenGL."""

    def set_clear_color(self, color: Sequence[float]) -> None:
        r, g, b, a = color
        _api().glClearColor(float(r), float(g), float(b), float(a))

    def clear(self) -> None:
        _api().glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)

    def draw_indexed(self, vertex_array: VertexArray) -> None:
        index_buffer = vertex_array.index_buffer
        if index_buffer is None:
            raise ValueError("vertex array has no index buffer")
        _api().glDrawElements(GL_TRIANGLES, index_buffer.count, GL_UNSIGNED_INT, None)


def _driver_info() -> tuple[str, str, str]:
    from pyglet.gl import gl_info

    if hasattr(gl_info, "get_version_string"):
        version = gl_info.get_version_string()
    else:
        version = gl_info.get_version()
    return str(gl_info.get_vendor()), str(gl_info.get_renderer()), str(version)


class OpenGLContext(GraphicsContext):
    """The OpenGL context of a window."""

    def __init__(self, window_handle: Any) -> None:
        if window_handle is None:
            raise ValueError("window handle is null")
        self._window = window_handle

    @property
    def window_handle(self) -> Any:
        return self._window

    def init(self) -> None:
        self._window.switch_to()
        vendor, renderer, version = _driver_info()
        print("openGL renderer:")
        print(f"  vendor: {vendor}")
        print(f"  renderer: {renderer}")
        print(f"  version: {version}")

    def swap_buffers(self) -> None:
        self._window.flip()