"""Builder API for generating C source code: expressions, statements, functions, fields and enums."""

__version__ = "0.1.0"

__all__ = [
    "block",
    "cenum",
    "comment",
    "doc",
    "expr",
    "field",
    "formatter",
    "function",
]