"""Labyrinth: perfect maze generation and shortest-path hints."""

__version__ = "1.0.0"
