"""Character, byte-buffer, string and linked-list utilities."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "lists"]