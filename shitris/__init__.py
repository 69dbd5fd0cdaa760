"""Falling-block puzzle logic: vectors, settings, a line-clearing board and file loaders."""

__version__ = "0.1.0"
__all__ = ["board", "loader", "settings", "vec2"]