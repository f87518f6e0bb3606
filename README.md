# confuse

A small 2D game engine built on `pyglet` and `numpy`. It gives you:

- an event system (`confuse.events`) with window, keyboard and mouse
  events, `EventCategory` flags and an `EventDispatcher`;
- key and mouse button codes (`confuse.keycodes`: `Key`, `MouseButton`);
- layers and overlays (`confuse.layers`: `Layer`, `LayerStack`) that
  receive updates, events and a per-frame UI hook in stack order;
- buffer layouts and the abstract vertex buffer, index buffer, vertex
  array, shader and graphics context types (`confuse.buffers`), with an
  OpenGL backend (`confuse.opengl`);
- an orthographic camera and the matrix helpers `ortho`, `translate`,
  `rotate` and `scale` (`confuse.camera`);
- a renderer front end (`confuse.renderer`): `RenderCommand`,
  `Renderer.begin_scene` / `submit` / `end_scene`, and the factory
  functions `create_vertex_buffer`, `create_index_buffer`,
  `create_shader` and `create_vertex_array`;
- a desktop window with polled input (`confuse.window`: `DesktopWindow`,
  `create_window`, `Input`) and an application loop
  (`confuse.application`: `Application`, `run_application`);
- engine and client loggers (`confuse.log`: `init`, `core_logger`,
  `client_logger`), which write timestamped lines to standard output,
  coloured when it is a terminal.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## The demo

The package ships a demo application (`confuse.sandbox`): a coloured
triangle and a 20 by 20 grid of flat-coloured squares seen through an
orthographic camera. Move the camera with W, A, S, D and turn it with the
left and right arrow keys. Resizing the window rebuilds the camera to match
the new aspect ratio.

```
confuse-sandbox
```

## Writing an application

Subclass `Layer`, override the hooks you need, and push the layer onto an
`Application`:

```python
from confuse.application import Application, run_application
from confuse.events import EventType
from confuse.layers import Layer
from confuse.renderer import RenderCommand


class MyLayer(Layer):
    def __init__(self):
        super().__init__("my layer")

    def on_update(self, ts):
        RenderCommand.set_clear_color((0.1, 0.1, 0.1, 1.0))
        RenderCommand.clear()

    def on_event(self, event):
        if event.event_type is EventType.WINDOW_RESIZE:
            print(event)


class MyApp(Application):
    def __init__(self, window=None):
        super().__init__(window)
        self.push_layer(MyLayer())


run_application(MyApp)
```

`run_application` sets up the loggers, builds the application, runs it
until the window is closed and then closes the window.
`Application.run_frame()` runs a single frame if you want to drive the
loop yourself, and `Application.get()` returns the most recently created
application.

Layers are updated from the bottom of the stack up; events travel from the
top down and stop at the first layer that marks them handled. Overlays
always sit above ordinary layers. A window close event stops the loop.

`Timestep` carries the time since the previous frame; use `float(ts)`,
`ts.seconds` or `ts.milliseconds`.

`Input.is_key_pressed`, `Input.is_mouse_button_pressed` and
`Input.mouse_position` answer from the events the attached window has
sent; the mouse y coordinate is measured downward from the top edge.

Shaders that fail to compile or link raise `confuse.opengl.ShaderError`
with the driver's message in `info_log`. Asking for a resource while
`Renderer.api()` is `API.NONE` raises `UnsupportedAPIError`.

## What it does not do

- There is no immediate-mode UI. `Layer.on_imgui_render` is called once
  per frame, but nothing draws a user interface, so the demo has no
  settings window and its square colour cannot be changed while running.
- OpenGL is the only rendering backend.
- Windows emit resize, close, key, text, mouse button, scroll and cursor
  events only; the focus, move, tick, update and render event types exist
  but are never sent by the window.