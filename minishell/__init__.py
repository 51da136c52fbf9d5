"""Shell data types, string helpers, printf formatting and line reading."""

__version__ = "0.1.0"
__all__ = ["shelltypes", "strings", "printf", "lines"]