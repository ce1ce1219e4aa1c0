"""Classic beginner algorithm drills: patterns, numbers, recursion, reversal, hashing and sorting."""

__version__ = "0.1.0"

__all__ = ["hashing", "numbers", "patterns", "recursion", "reversal", "sorting"]