"""A tile-based platformer: level loading, game rules, pygame drawing and small text helpers."""

__version__ = "0.1.0"
__all__ = ["__version__"]