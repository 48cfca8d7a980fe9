"""Classic array, hashing, searching, recursion and binary-tree exercises."""

__version__ = "0.1.0"
__all__ = ["arrays", "hashing", "recursion", "searching", "tree"]