"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and db layer (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer or API layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass

GameID = str

# Largest board edge accepted. Keeps size and bomb count within a 64-bit integer column.
MAX_BOARD_SIZE = 1000


@dataclass(frozen=True)
class GameModel:
    """Minesweeper game record. Frozen: once stored, nobody holding a reference can change it."""

    id: GameID
    name: str
    size: int
    bomb_count: int
