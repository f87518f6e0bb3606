"""Vertex layouts and the abstract GPU resources built on them."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import IntEnum


class ShaderDataType(IntEnum):
    NONE = 0
    FLOAT = 1
    FLOAT2 = 2
    FLOAT3 = 3
    FLOAT4 = 4
    MAT3 = 5
    MAT4 = 6
    INT = 7
    INT2 = 8
    INT3 = 9
    INT4 = 10
    BOOL = 11


_COMPONENTS = {
    ShaderDataType.FLOAT: 1,
    ShaderDataType.FLOAT2: 2,
    ShaderDataType.FLOAT3: 3,
    ShaderDataType.FLOAT4: 4,
    ShaderDataType.MAT3: 3 * 3,
    ShaderDataType.MAT4: 4 * 4,
    ShaderDataType.INT: 1,
    ShaderDataType.INT2: 2,
    ShaderDataType.INT3: 3,
    ShaderDataType.INT4: 4,
    ShaderDataType.BOOL: 1,
}

_SIZES = {
    ShaderDataType.FLOAT: 4,
    ShaderDataType.FLOAT2: 4 * 2,
    ShaderDataType.FLOAT3: 4 * 3,
    ShaderDataType.FLOAT4: 4 * 4,
    ShaderDataType.MAT3: 4 * 3 * 3,
    ShaderDataType.MAT4: 4 * 4 * 4,
    ShaderDataType.INT: 4,
    ShaderDataType.INT2: 4 * 2,
    ShaderDataType.INT3: 4 * 3,
    ShaderDataType.INT4: 4 * 4,
    ShaderDataType.BOOL: 1,
}


def shader_data_type_size(data_type: ShaderDataType) -> int:
    """Size in bytes of one value of ``data_type``."""
    try:
        return _SIZES[ShaderDataType(data_type)]
    except (KeyError, ValueError):
        raise ValueError(f"unknown shader data type: {data_type!r}") from None


@dataclass
class BufferElement:
    """One named attribute within a vertex."""

    data_type: ShaderDataType
    name: str
    normalized: bool = False
    size: int = field(init=False)
    offset: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.data_type = ShaderDataType(self.data_type)
        self.size = shader_data_type_size(self.data_type)

    @property
    def component_count(self) -> int:
        try:
            return _COMPONENTS[self.data_type]
        except KeyError:
            raise ValueError(f"unknown shader data type: {self.data_type!r}") from None


class BufferLayout:
    """An ordered set of vertex attributes with computed offsets and stride."""

    def __init__(self, elements: Iterable[BufferElement] = ()) -> None:
        placed: list[BufferElement] = []
        offset = 0
        for element in elements:
            copy = dataclasses.replace(element)
            copy.offset = offset
            offset += copy.size
            placed.append(copy)
        self._elements = tuple(placed)
        self._stride = offset

    @property
    def stride(self) -> int:
        return self._stride

    @property
    def elements(self) -> tuple[BufferElement, ...]:
        return self._elements

    def __iter__(self) -> Iterator[BufferElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"BufferLayout({list(self._elements)!r})"


class VertexBuffer(ABC):
    """A buffer of vertex data described by a layout."""

    def __init__(self) -> None:
        self._layout = BufferLayout()

    @abstractmethod
    def bind(self) -> None: ...

    @abstractmethod
    def unbind(self) -> None: ...

    @property
    def layout(self) -> BufferLayout:
        return self._layout

    @layout.setter
    def layout(self, layout: BufferLayout) -> None:
        self._layout = layout


class IndexBuffer(ABC):
    """A buffer of vertex indices."""

    @abstractmethod
    def bind(self) -> None: ...

    @abstractmethod
    def unbind(self) -> None: ...

    @property
    @abstractmethod
    def count(self) -> int: ...


class VertexArray(ABC):
    """Vertex buffers bound together with an index buffer."""

    @abstractmethod
    def bind(self) -> None: ...

    @abstractmethod
    def unbind(self) -> None: ...

    @abstractmethod
    def add_vertex_buffer(self, vertex_buffer: VertexBuffer) -> None: ...

    @abstractmethod
    def set_index_buffer(self, index_buffer: IndexBuffer) -> None: ...

    @property
    @abstractmethod
    def vertex_buffers(self) -> Sequence[VertexBuffer]: ...

    @property
    @abstractmethod
    def index_buffer(self) -> IndexBuffer | None: ...


class Shader(ABC):
    """A compiled shader program."""

    @abstractmethod
    def bind(self) -> None: ...

    @abstractmethod
    def unbind(self) -> None: ...


class GraphicsContext(ABC):
    """A rendering context attached to a window."""

    @abstractmethod
    def init(self) -> None: ...

    @abstractmethod
    def swap_buffers(self) -> None: ...