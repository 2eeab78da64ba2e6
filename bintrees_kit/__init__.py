"""Linked binary tree nodes with traversals, measurements, ASCII rendering and demos."""

__version__ = "0.1.0"
__all__ = ["__version__"]