"""A small 2D game engine: events, layers, an orthographic camera, an OpenGL renderer and a demo application."""

__version__ = "0.1.0"