"""String-keyed hash tables using separate chaining or linear probing, with a demo."""

__version__ = "0.1.0"
__all__ = ["chained", "demo", "hashing", "probing"]