"""Console demos of searching and sorting algorithms."""

__version__ = "0.1.0"
__all__ = ["searching", "sorting"]