"""Detect and fix encoding, line-ending and character issues in text files."""

__version__ = "0.1.0"

__all__ = ["__version__"]