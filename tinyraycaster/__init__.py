"""A small software raycaster with a top-down map, textured walls and sprites."""

__version__ = "0.1.0"
__all__ = ["__version__"]