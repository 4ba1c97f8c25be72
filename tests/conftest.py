"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from itertools import count
from typing import Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.memory_repository import InMemoryGameRepository
from src.db.schema import Base

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


class SequentialUIDGenerator:
    """Deterministic UID generator: game-1, game-2, ... Remembers everything it handed out."""

    def __init__(self, prefix: str = "game") -> None:
        self.prefix = prefix
        self.issued: list[str] = []
        self._counter = count(1)

    def next_id(self) -> str:
        new_id = f"{self.prefix}-{next(self._counter)}"
        self.issued.append(new_id)
        return new_id


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def memory_repository() -> Generator[InMemoryGameRepository, None, None]:
    """Ensures to clear the repository between tests"""
    repo = InMemoryGameRepository()
    try:
        yield repo
    finally:
        repo.clear()


@pytest.fixture
def uid_generator() -> SequentialUIDGenerator:
    return SequentialUIDGenerator()
