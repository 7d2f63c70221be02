"""Has-voted set - identities that already cast a vote in one election."""

from collections.abc import Iterator
from datetime import datetime

from loguru import logger

from election.repositories.base import BaseRepository
from election.repositories.db import Database


class HasVotedSet(BaseRepository):
    """Append-only set of voter identities, scoped to one election."""

    def __init__(self, database: Database, election_id: int):
        super().__init__(database)
        self.election_id = election_id

    def __contains__(self, identity: object) -> bool:
        row = self.fetchone(
            "SELECT 1 FROM has_voted WHERE election_id = ? AND identity = ?",
            [self.election_id, identity],
        )
        return row is not None

    def __len__(self) -> int:
        return self.fetchone("SELECT COUNT(*) FROM has_voted WHERE election_id = ?", [self.election_id])[0]

    def __iter__(self) -> Iterator[str]:
        rows = self.fetchall(
            "SELECT identity FROM has_voted WHERE election_id = ? ORDER BY voted_at, identity",
            [self.election_id],
        )
        return iter([r[0] for r in rows])

    def add(self, identity: str, voted_at: datetime) -> None:
        """Insert identity. Callers check membership first under the election lock."""
        self.execute(
            "INSERT INTO has_voted (election_id, identity, voted_at) VALUES (?, ?, ?)",
            [self.election_id, identity, voted_at],
        )
        logger.debug("has_voted[{}] += {}", self.election_id, identity)
