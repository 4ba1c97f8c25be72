"""FastAPI dependencies: hand every request a GameService wired to the configured backend."""

from typing import Generator

from fastapi import Depends, Request

from src.core.config import Settings
from src.core.uid import UIDGenerator
from src.db.repository import GameRepository
from src.db.sql_repository import SQLGameRepository
from src.services.game_service import GameService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_repository(request: Request) -> Generator[GameRepository, None, None]:
    """
    Memory backend: the one repository shared by all requests.
    SQL backend: a repository around a session that lives as long as the request.
    """
    state = request.app.state
    if state.settings.STORAGE_BACKEND != "sql":
        yield state.repository
        return

    db = state.session_factory()
    try:
        yield SQLGameRepository(db)
    finally:
        db.close()


def get_uid_generator(request: Request) -> UIDGenerator:
    return request.app.state.uid_generator


def get_game_service(
    repository: GameRepository = Depends(get_repository),
    uid_generator: UIDGenerator = Depends(get_uid_generator),
) -> GameService:
    return GameService(repository, uid_generator)
