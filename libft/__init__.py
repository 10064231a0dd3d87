"""Character, string, byte-buffer, conversion, output and linked-list helpers with C-library semantics."""

__version__ = "0.1.0"
__all__ = ["chars", "convert", "memory", "output", "text", "linked_list"]