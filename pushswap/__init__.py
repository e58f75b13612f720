"""Two-stack sorting with a restricted set of operations, plus string and list helpers."""

__version__ = "0.1.0"