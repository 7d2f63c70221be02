"""Voter registry - identity to name, role and voting eligibility."""

from datetime import datetime

from loguru import logger

from election.models.voters import Role, Voter
from election.repositories.base import BaseRepository

_COLUMNS = "identity, name, role, can_vote, registered_at"


def _to_voter(row) -> Voter:
    return Voter(
        identity=row[0],
        name=row[1],
        role=Role(row[2]),
        can_vote=bool(row[3]),
        registered_at=row[4],
    )


class VoterRegistry(BaseRepository):
    """Repository for registered voters."""

    def lookup(self, identity: str) -> Voter | None:
        """Get voter by identity, None if not registered."""
        row = self.fetchone(f"SELECT {_COLUMNS} FROM voter WHERE identity = ?", [identity])
        return _to_voter(row) if row else None

    def register(self, identity: str, name: str, role: Role, now: datetime) -> Voter | None:
        """Insert a new voter with voting enabled.

        Returns the new voter, or None when the identity is already registered
        (the earliest name and role are kept).
        """
        if self.lookup(identity) is not None:
            logger.debug("register({}): already registered", identity)
            return None

        self.execute(
            f"INSERT INTO voter ({_COLUMNS}) VALUES (?, ?, ?, ?, ?)",
            [identity, name, role.value, True, now],
        )
        logger.debug("register({}): {} as {}", identity, name, role)
        return Voter(identity=identity, name=name, role=role, can_vote=True, registered_at=now)

    def set_can_vote(self, identity: str, can_vote: bool) -> None:
        self.execute("UPDATE voter SET can_vote = ? WHERE identity = ?", [can_vote, identity])
        logger.debug("set_can_vote({}): {}", identity, can_vote)

    def all(self) -> list[Voter]:
        """All voters in registration order."""
        rows = self.fetchall(f"SELECT {_COLUMNS} FROM voter ORDER BY registered_at, identity")
        return [_to_voter(r) for r in rows]

    def count(self) -> int:
        return self.fetchone("SELECT COUNT(*) FROM voter")[0]
