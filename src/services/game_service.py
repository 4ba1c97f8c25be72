"""Orchestration of communication from API router to persistence layer (and the reverse direction)."""

import logging

from src.core.exceptions import (
    GameNotFoundError,
    InvalidRequestError,
    PersistenceError,
    RepositoryError,
)
from src.core.models import MAX_BOARD_SIZE, GameID, GameModel
from src.core.uid import UIDGenerator
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


class GameService:
    """Validates new games, hands out their identity and talks to the repository."""

    def __init__(self, repository: GameRepository, uid_generator: UIDGenerator) -> None:
        self.repo = repository
        self.uid_generator = uid_generator

    def create_game(self, name: str, size: int, bomb_count: int) -> GameModel:
        """
        Create and persist a new game.
        ---
        Nothing happens (no ID consumed, no write) when the input is rejected.
        """
        self._validate_dimensions(size, bomb_count)

        new_game = GameModel(
            id=self.uid_generator.next_id(),
            name=name,
            size=size,
            bomb_count=bomb_count,
        )

        try:
            self.repo.save_game(new_game)
        except RepositoryError as exc:
            logger.warning("Saving game %s failed: %s", new_game.id, exc)
            raise PersistenceError("create game into repository has failed") from exc

        logger.info(
            "Created game %s (size=%d, bombs=%d)", new_game.id, size, bomb_count
        )
        return new_game

    def get_game(self, game_id: GameID) -> GameModel:
        """Retrieve a stored game."""
        try:
            return self.repo.get_game(game_id)
        except GameNotFoundError as exc:
            raise GameNotFoundError(f"No game found with id {game_id!r}.") from exc
        except RepositoryError as exc:
            logger.warning("Fetching game %s failed: %s", game_id, exc)
            raise PersistenceError("get game from repository has failed") from exc

    # -- Internal helpers --
    @staticmethod
    def _validate_dimensions(size: int, bomb_count: int) -> None:
        if size <= 0:
            raise InvalidRequestError(f"Board size must be positive, got {size}.")
        if size > MAX_BOARD_SIZE:
            raise InvalidRequestError(
                f"Board size cannot exceed {MAX_BOARD_SIZE}, got {size}."
            )
        if bomb_count < 0:
            raise InvalidRequestError(
                f"Number of bombs cannot be negative, got {bomb_count}."
            )
        # At least one cell must be free of bombs
        if bomb_count >= size * size:
            raise InvalidRequestError(
                f"the number of bombs is invalid: {bomb_count} bombs do not fit a {size}x{size} board."
            )
