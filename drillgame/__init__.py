"""A side-scrolling drill platformer with a tile map editor."""

__version__ = "0.1.0"