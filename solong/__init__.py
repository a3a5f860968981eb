"""Tile-based puzzle game on .ber maps: collect the coins, then reach the exit."""

__version__ = "0.1.0"
__all__ = ["cli", "fmt", "game", "maploader", "pathfind", "render", "validate"]