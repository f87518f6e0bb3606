[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "confuse"
version = "0.1.0"
description = "A small 2D game engine with layers, events, an orthographic camera and an OpenGL renderer"
requires-python = ">=3.10"
keywords = ["game engine", "opengl", "renderer", "layers", "events", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "numpy",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
confuse-sandbox = "confuse.sandbox:main"

[tool.hatch.build.targets.wheel]
packages = ["confuse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
