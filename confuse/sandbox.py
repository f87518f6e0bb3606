"""Example application: a coloured triangle over a grid of flat-coloured squares."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from .application import Application, run_application
from .buffers import BufferElement, BufferLayout, Shader, ShaderDataType, VertexArray
from .camera import OrthographicCamera, scale, translate
from .events import Event, EventType
from .keycodes import Key
from .layers import Layer
from .log import TRACE, client_logger
from .renderer import (
    RenderCommand,
    Renderer,
    create_index_buffer,
    create_shader,
    create_vertex_array,
    create_vertex_buffer,
)
from .timestep import Timestep
from .window import Input, Window

TRIANGLE_VERTICES = (
    -0.5, -0.5, 0.0, 1.0, 0.1, 0.1, 1.0,
    0.5, -0.5, 0.0, 0.1, 1.0, 0.1, 1.0,
    0.0, 0.5, 0.0, 0.1, 0.1, 1.0, 1.0,
)
TRIANGLE_INDICES = (0, 1, 2)

SQUARE_VERTICES = (
    -0.5, -0.5, 0.0,
    0.5, -0.5, 0.0,
    0.5, 0.5, 0.0,
    -0.5, 0.5, 0.0,
)
SQUARE_INDICES = (0, 1, 2, 2, 3, 0)

VERTEX_SHADER = """
#version 330 core

layout(location = 0) in vec3 a_position;
layout(location = 1) in vec4 a_color;

uniform mat4 u_viewProjection;
uniform mat4 u_transform;

out vec3 v_position;
out vec4 v_color;

void main(){
    v_position = a_position;
    v_color = a_color;
    gl_Position = u_viewProjection * u_transform * vec4(a_position, 1.0);
}
"""

FRAGMENT_SHADER = """
#version 330 core

layout(location = 0) out vec4 color;

in vec3 v_position;
in vec4 v_color;

void main(){
    color = vec4(v_position * 0.5 + 0.5, 1.0);
    color = v_color;
}
"""

FLAT_COLOR_VERTEX_SHADER = """
#version 330 core

layout(location = 0) in vec3 a_position;

uniform mat4 u_viewProjection;
uniform mat4 u_transform;

out vec3 v_position;

void main(){
    v_position = a_position;
    gl_Position = u_viewProjection * u_transform * vec4(a_position, 1.0);
}
"""

FLAT_COLOR_FRAGMENT_SHADER = """
#version 330 core

layout(location = 0) out vec4 color;

in vec3 v_position;

uniform vec3 u_color;

void main(){
    color = vec4(u_color, 1.0);
}
"""

CLEAR_COLOR = (0.06, 0.06, 0.06, 1.0)
GRID_SIZE = 20
GRID_SPACING = 0.11
SQUARE_SCALE = 0.1


@dataclass
class _SceneResources:
    shader: Shader
    vertex_array: VertexArray
    flat_color_shader: Shader
    square_va: VertexArray


def _build_resources() -> _SceneResources:
    vertex_array = create_vertex_array()
    vertex_buffer = create_vertex_buffer(TRIANGLE_VERTICES)
    vertex_buffer.layout = BufferLayout(
        [
            BufferElement(ShaderDataType.FLOAT3, "a_Position"),
            BufferElement(ShaderDataType.FLOAT4, "a_Color"),
        ]
    )
    vertex_array.add_vertex_buffer(vertex_buffer)
    vertex_array.set_index_buffer(create_index_buffer(TRIANGLE_INDICES))

    square_va = create_vertex_array()
    square_vb = create_vertex_buffer(SQUARE_VERTICES)
    square_vb.layout = BufferLayout([BufferElement(ShaderDataType.FLOAT3, "a_Position")])
    square_va.add_vertex_buffer(square_vb)
    square_va.set_index_buffer(create_index_buffer(SQUARE_INDICES))

    return _SceneResources(
        shader=create_shader(VERTEX_SHADER, FRAGMENT_SHADER),
        vertex_array=vertex_array,
        flat_color_shader=create_shader(FLAT_COLOR_VERTEX_SHADER, FLAT_COLOR_FRAGMENT_SHADER),
        square_va=square_va,
    )


class ExampleLayer(Layer):
    """Moves and turns the camera from the keyboard and draws the scene."""

    def __init__(self) -> None:
        super().__init__("example")
        self.camera = OrthographicCamera(-1.28, 1.28, -0.72, 0.72)
        self.square_color = [0.2, 0.3, 0.8]
        self._camera_position = [0.0, 0.0, 0.0]
        self._camera_rotation = 0.0
        self._camera_move_speed = 5.0
        self._camera_rotation_speed = 180.0
        self._resources: _SceneResources | None = None

    def on_attach(self) -> None:
        self._resources = _build_resources()

    def on_update(self, ts: Timestep) -> None:
        step = float(ts)
        if Input.is_key_pressed(Key.A):
            self._camera_position[0] -= self._camera_move_speed * step
        elif Input.is_key_pressed(Key.D):
            self._camera_position[0] += self._camera_move_speed * step
        if Input.is_key_pressed(Key.W):
            self._camera_position[1] += self._camera_move_speed * step
        elif Input.is_key_pressed(Key.S):
            self._camera_position[1] -= self._camera_move_speed * step

        if Input.is_key_pressed(Key.LEFT):
            self._camera_rotation += self._camera_rotation_speed * step
        elif Input.is_key_pressed(Key.RIGHT):
            self._camera_rotation -= self._camera_rotation_speed * step

        self.camera.position = self._camera_position
        self.camera.rotation = self._camera_rotation

        if self._resources is not None:
            self._render(self._resources)

    def _render(self, resources: _SceneResources) -> None:
        RenderCommand.set_clear_color(CLEAR_COLOR)
        RenderCommand.clear()

        Renderer.begin_scene(self.camera)
        identity = np.identity(4, dtype=np.float32)
        square_scale = scale(identity, SQUARE_SCALE)

        flat = resources.flat_color_shader
        flat.bind()
        flat.upload_uniform_float3("u_color", self.square_color)  # type: ignore[attr-defined]

        for y in range(GRID_SIZE):
            for x in range(GRID_SIZE):
                position = (x * GRID_SPACING, y * GRID_SPACING, 0.0)
                transform = translate(identity, position) @ square_scale
                Renderer.submit(flat, resources.square_va, transform)

        Renderer.submit(resources.shader, resources.vertex_array)
        Renderer.end_scene()

    def on_event(self, event: Event) -> None:
        if event.event_type != EventType.WINDOW_RESIZE:
            return
        window = Application.get().window
        aspect_ratio = float(window.width) / float(window.height)
        client_logger().log(TRACE, "%s", aspect_ratio)
        if aspect_ratio > 1.0:
            self.camera = OrthographicCamera(-aspect_ratio, aspect_ratio, -1.0, 1.0)
        else:
            self.camera = OrthographicCamera(-1.0, 1.0, -1.0 / aspect_ratio, 1.0 / aspect_ratio)


class Sandbox(Application):
    """The example application with a single example layer."""

    def __init__(self, window: Window | None = None) -> None:
        super().__init__(window)
        self.push_layer(ExampleLayer())


def create_application() -> Application:
    return Sandbox()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sandbox", description="Run the example sandbox application."
    )
    parser.parse_args(argv)
    run_application(create_application)
    return 0