"""Grid raycasting maze explorer: .cub scene loading, ray casting, shading and a pygame game loop."""

__version__ = "0.1.0"
__all__ = ["__version__"]