"""Minimal JSON API over a MongoDB users collection."""

__version__ = "1.0.0"
