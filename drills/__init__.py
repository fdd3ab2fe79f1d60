"""Solutions to classic programming-exercise problems, grouped by kind of puzzle."""

__version__ = "0.1.0"
__all__ = ["arrays", "contests", "counting", "grid", "numbers", "strings", "trees"]