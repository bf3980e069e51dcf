"""Classic data-structure and algorithm routines as plain Python functions."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "dynamic",
    "matrix",
    "numbers",
    "recursion",
    "searching",
    "sorting",
    "stack",
    "strings",
]