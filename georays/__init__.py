"""Level text format, editor actions, menu widget state and player physics for a side-scrolling platformer."""

__version__ = "0.1.0"
__all__ = ["editor", "levelfile", "objects", "physics", "widgets"]