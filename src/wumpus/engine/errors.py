"""Exceptions raised by the game engine."""


class WumpusError(Exception):
    """Base class for engine errors."""


class CaveError(WumpusError):
    """An adjacency table does not describe a usable cave."""


class OutOfArrowsError(WumpusError):
    """An arrow was taken from an empty quiver."""
