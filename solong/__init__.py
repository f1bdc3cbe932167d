"""A tile-based puzzle game: collect every power cell, then reach the portal."""

__version__ = "1.0.0"