"""Unique identifier generation, injected into the Service so tests can swap it for something deterministic."""

from typing import Protocol
from uuid import uuid4


class UIDGenerator(Protocol):
    """Produces identifiers that were never handed out before (within the process lifetime)."""

    def next_id(self) -> str:
        """Return a fresh identifier."""
        ...


class UUID4Generator:
    """Default generator based on random UUIDs."""

    def next_id(self) -> str:
        return str(uuid4())
