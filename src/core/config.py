"""Application settings, read from environment variables (and an optional .env file)."""

from functools import lru_cache
from typing import Literal, Self

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.models import MAX_BOARD_SIZE

StorageBackend = Literal["memory", "sql"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = Field(default=8080, ge=1000, le=9999)
    LOG_LEVEL: str = "INFO"

    STORAGE_BACKEND: StorageBackend = "memory"
    DATABASE_URL: str = "sqlite:///./games.db"

    # Used when a create request leaves out size and/or bombs
    DEFAULT_GAME_SIZE: int = Field(default=9, gt=0, le=MAX_BOARD_SIZE)
    DEFAULT_BOMB_COUNT: int = Field(default=10, ge=0)

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @model_validator(mode="after")
    def validate_default_board(self) -> Self:
        if self.DEFAULT_BOMB_COUNT >= self.DEFAULT_GAME_SIZE**2:
            raise ValueError(
                f"DEFAULT_BOMB_COUNT ({self.DEFAULT_BOMB_COUNT}) must be smaller than the "
                f"number of cells of the default board ({self.DEFAULT_GAME_SIZE}x{self.DEFAULT_GAME_SIZE})."
            )
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
