"""Rooms and room types backend."""

__version__ = "0.1.0"
