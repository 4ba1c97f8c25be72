"""Implementation of (Game)Repository using SQLAlchemy"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import GameNotFoundError, RepositoryError
from src.core.models import GameID, GameModel
from src.db.schema import DBGame

logger = logging.getLogger(__name__)


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, game_id: GameID) -> GameModel:
        """Get game by ID, if record exists."""
        try:
            game_db = self._fetch_game(game_id)
        except (SQLAlchemyError, OverflowError) as exc:
            logger.exception("Reading game %s failed", game_id)
            raise RepositoryError(f"Could not read game with {game_id=}.") from exc

        if game_db is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return self._to_model(game_db)

    def save_game(self, game: GameModel) -> None:
        """Insert the game, or overwrite the existing record with the same ID."""
        game_db = DBGame(
            id=game.id,
            name=game.name,
            size=game.size,
            bomb_count=game.bomb_count,
        )
        try:
            self.db.merge(game_db)
            self.db.commit()
        except (SQLAlchemyError, OverflowError) as exc:
            self.db.rollback()
            logger.exception("Writing game %s failed", game.id)
            raise RepositoryError(f"Could not write game with id={game.id!r}.") from exc

    def _fetch_game(self, game_id: GameID) -> DBGame | None:
        query = select(DBGame).where(DBGame.id == game_id)
        return self.db.scalar(query)

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            id=game_db.id,
            name=game_db.name,
            size=game_db.size,
            bomb_count=game_db.bomb_count,
        )
