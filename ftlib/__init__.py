"""C-style character, memory, string, linked-list and printf helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "memory",
    "search",
    "strings",
    "linkedlist",
    "spec",
    "textconv",
    "numconv",
    "printf",
]