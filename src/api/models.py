"""Requests and Response models"""

from typing import Optional, Self

from pydantic import BaseModel, Field

from src.core.models import MAX_BOARD_SIZE, GameModel


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    """Body of POST /games. Leaving out size or bombs falls back to defaults derived from the settings."""

    name: str
    size: Optional[int] = Field(default=None, ge=0, le=MAX_BOARD_SIZE)
    bombs: Optional[int] = Field(default=None, ge=0, le=MAX_BOARD_SIZE * MAX_BOARD_SIZE)


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    id: str
    name: str
    size: int
    bombs: int

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        return cls(id=model.id, name=model.name, size=model.size, bombs=model.bomb_count)


class ErrorResponse(BaseModel):
    error: str
