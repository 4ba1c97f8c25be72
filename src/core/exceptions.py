"""
Custom exceptions shared across layers.

All of them derive from GameError, so callers that do not care about the specific failure can catch that one.
"""


class GameError(Exception):
    """Top-level exception for anything related to the games service."""


class InvalidRequestError(GameError):
    """Caller supplied data that violates a Game invariant (e.g. too many bombs for the grid)."""


class GameNotFoundError(GameError):
    """No game is stored under the requested ID."""


class RepositoryError(GameError):
    """Storage backend could not complete a read or write."""


class PersistenceError(GameError):
    """The service could not persist or fetch a game. Input was fine, storage was not."""
