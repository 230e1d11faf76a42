"""Helpers for characters, byte buffers, strings, linked lists, line reading and printf-style formatting."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "text", "llist", "output", "linereader", "printf"]