"""Generic collections, string helpers, data conversion and template context building."""

__version__ = "0.1.0"