"""Character, number, memory, string, linked-list, output, printf and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "numbers", "memory", "strings", "linked", "output", "printf", "lines"]