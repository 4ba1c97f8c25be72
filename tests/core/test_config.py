import pytest
from pydantic import ValidationError

from src.core.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for variable in ("APP_PORT", "LOG_LEVEL", "STORAGE_BACKEND"):
        monkeypatch.delenv(variable, raising=False)

    settings = Settings(_env_file=None)
    assert settings.APP_PORT == 8080
    assert settings.LOG_LEVEL == "INFO"
    assert settings.STORAGE_BACKEND == "memory"


def test_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_PORT", "9090")
    monkeypatch.setenv("STORAGE_BACKEND", "sql")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)
    assert settings.APP_PORT == 9090
    assert settings.STORAGE_BACKEND == "sql"
    assert settings.LOG_LEVEL == "DEBUG"


@pytest.mark.parametrize("port", [80, 999, 10000])
def test_port_out_of_range(port: int) -> None:
    with pytest.raises(ValidationError):
        _ = Settings(_env_file=None, APP_PORT=port)


@pytest.mark.parametrize(
    "overrides",
    [
        {"STORAGE_BACKEND": "redis"},
        {"LOG_LEVEL": "LOUD"},
        {"DEFAULT_GAME_SIZE": 0},
    ],
)
def test_invalid_settings(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        _ = Settings(_env_file=None, **overrides)


def test_default_bombs_must_fit_default_board() -> None:
    with pytest.raises(ValidationError):
        _ = Settings(_env_file=None, DEFAULT_GAME_SIZE=3, DEFAULT_BOMB_COUNT=10)

    settings = Settings(_env_file=None, DEFAULT_GAME_SIZE=3, DEFAULT_BOMB_COUNT=8)
    assert settings.DEFAULT_BOMB_COUNT == 8
