"""Character, byte-buffer, string, linked-list and printf-style helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "linked", "printf"]