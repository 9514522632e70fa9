"""Character, string, memory and output helpers with C-library semantics."""

__version__ = "0.1.0"
__all__ = ["chars", "convert", "output", "memory", "search", "transform"]