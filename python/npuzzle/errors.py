"""Exception hierarchy shared by the models, the search engine and the CLI."""

from __future__ import annotations


class NPuzzleError(Exception):
    """Base class for every error raised by this package."""


class InvalidInput(NPuzzleError, ValueError):
    """A grid, strategy name, heuristic name or menu choice is malformed."""


class IllegalMove(NPuzzleError):
    """An action was applied that would move the blank off the board."""


class NoPathAvailable(NPuzzleError):
    """Action reconstruction was requested but parent links were not kept."""
