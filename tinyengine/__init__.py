"""A small, educational 2D game engine core: math, game loop, primitives and shaders."""

__version__ = "0.1.0"