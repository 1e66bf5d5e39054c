"""Tile maps, routes, waves, configuration and a pygame window for a tower defence game."""

__version__ = "0.1.0"