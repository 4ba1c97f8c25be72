"""Protocol repository (implemented in memory and with SQLAlchemy, the Service only knows about this contract)"""

from typing import Protocol

from src.core.models import GameID, GameModel


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    def get_game(self, game_id: GameID) -> GameModel:
        """
        Get game by ID.
        ---
        Raises GameNotFoundError if no record exists, RepositoryError if the backend fails.
        """
        ...

    def save_game(self, game: GameModel) -> None:
        """
        Insert or overwrite the record keyed by game.id (saving twice is not an error).
        ---
        Raises RepositoryError if the backend cannot complete the write.
        """
        ...
