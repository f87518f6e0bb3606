import pytest

from confuse.buffers import (
    BufferElement,
    BufferLayout,
    GraphicsContext,
    IndexBuffer,
    Shader,
    ShaderDataType,
    VertexArray,
    VertexBuffer,
    shader_data_type_size,
)

REAL_TYPES = [t for t in ShaderDataType if t is not ShaderDataType.NONE]


class _MemoryVertexBuffer(VertexBuffer):
    def __init__(self):
        super().__init__()
        self.bound = False

    def bind(self):
        self.bound = True

    def unbind(self):
        self.bound = False


def test_float_size_is_four_bytes():
    assert shader_data_type_size(ShaderDataType.FLOAT) == 4


def test_bool_size_is_one_byte():
    assert shader_data_type_size(ShaderDataType.BOOL) == 1


@pytest.mark.parametrize("data_type", [t for t in REAL_TYPES if t is not ShaderDataType.BOOL])
def test_size_is_four_bytes_per_component(data_type):
    element = BufferElement(data_type, "attr")
    assert element.size == 4 * element.component_count


def test_mat4_component_count():
    assert BufferElement(ShaderDataType.MAT4, "m").component_count == 16


def test_none_type_is_rejected():
    with pytest.raises(ValueError):
        shader_data_type_size(ShaderDataType.NONE)
    with pytest.raises(ValueError):
        BufferElement(ShaderDataType.NONE, "x")


def test_element_defaults():
    element = BufferElement(ShaderDataType.FLOAT2, "a_uv")
    assert element.normalized is False
    assert element.offset == 0
    assert element.name == "a_uv"


def test_sandbox_layout_offsets_and_stride():
    layout = BufferLayout(
        [
            BufferElement(ShaderDataType.FLOAT3, "a_Position"),
            BufferElement(ShaderDataType.FLOAT4, "a_Color"),
        ]
    )
    assert layout.stride == 28
    assert [e.offset for e in layout] == [0, 12]
    assert [e.name for e in layout] == ["a_Position", "a_Color"]


def test_layout_offsets_accumulate():
    elements = [BufferElement(t, t.name) for t in REAL_TYPES]
    layout = BufferLayout(elements)
    assert len(layout) == len(elements)
    running = 0
    for element in layout.elements:
        assert element.offset == running
        running += element.size
    assert layout.stride == running


def test_layout_does_not_mutate_given_elements():
    first = BufferElement(ShaderDataType.FLOAT, "a")
    second = BufferElement(ShaderDataType.FLOAT, "b")
    layout = BufferLayout([first, second])
    assert second.offset == 0
    assert layout.elements[1].offset == first.size


def test_empty_layout():
    layout = BufferLayout()
    assert len(layout) == 0
    assert layout.stride == 0
    assert list(layout) == []


def test_vertex_buffer_layout_round_trip():
    buffer = _MemoryVertexBuffer()
    assert len(buffer.layout) == 0
    layout = BufferLayout([BufferElement(ShaderDataType.FLOAT3, "a_Position")])
    buffer.layout = layout
    assert buffer.layout is layout
    buffer.bind()
    assert buffer.bound is True


@pytest.mark.parametrize(
    "abstract", [VertexBuffer, IndexBuffer, VertexArray, Shader, GraphicsContext]
)
def test_abstract_resources_cannot_be_instantiated(abstract):
    with pytest.raises(TypeError):
        abstract()