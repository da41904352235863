"""A small 2D game toolkit on pygame: colours, shapes, sprites, drawing, input state, files, INI settings and lists."""

__version__ = "0.1.0"