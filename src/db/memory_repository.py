"""Implementation of (Game)Repository keeping everything in a dictionary (lost when the process stops)"""

from threading import Lock

from src.core.exceptions import GameNotFoundError
from src.core.models import GameID, GameModel


class InMemoryGameRepository:
    """Thread-safe dictionary of games. A single lock guards every read and write."""

    def __init__(self) -> None:
        self._games: dict[GameID, GameModel] = {}
        self._lock = Lock()

    def get_game(self, game_id: GameID) -> GameModel:
        """Get game by ID, if record exists."""
        with self._lock:
            game = self._games.get(game_id)
        if game is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return game

    def save_game(self, game: GameModel) -> None:
        """Unconditional upsert."""
        with self._lock:
            self._games[game.id] = game

    def clear(self) -> None:
        """Clear the repository (useful in between tests)"""
        with self._lock:
            self._games.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)

    def __contains__(self, game_id: object) -> bool:
        with self._lock:
            return game_id in self._games
