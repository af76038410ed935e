"""Freakend CLI -- scaffold backend feature templates and wire them into a server."""

__version__ = "1.0.0"
