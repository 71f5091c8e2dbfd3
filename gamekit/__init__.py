"""Building blocks for small 2D games: math, easing, vectors, rectangles, colours, meshes, input state, timers and JSON settings."""

__version__ = "0.1.0"