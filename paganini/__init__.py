"""A small entity-component game engine with a pyglet OpenGL renderer, input state and file helpers."""

__version__ = "0.1.0"