"""Two-stack integer sorting with a fixed set of operations, plus a checker."""

__version__ = "1.0.0"