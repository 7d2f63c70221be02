"""Election store - elections, ordered proposals, winner slots and the id counter."""

from datetime import datetime

from loguru import logger

from election.errors import NotFound
from election.models.elections import Election, ElectionSummary, Proposal, VoterStat, Winner
from election.models.voters import Role
from election.repositories.base import BaseRepository
from election.repositories.elections.roll import HasVotedSet

_COLUMNS = "id, name, description, active, computed, expires_at, created_by, created_at, started_at, stopped_at"


def _to_election(row) -> Election:
    return Election(
        id=row[0],
        name=row[1],
        description=row[2] or "",
        active=bool(row[3]),
        computed=bool(row[4]),
        expires_at=row[5],
        created_by=row[6],
        created_at=row[7],
        started_at=row[8],
        stopped_at=row[9],
    )


class ElectionStore(BaseRepository):
    """Repository for elections and everything hanging off them."""

    # ========== Elections ==========

    def get(self, election_id: int) -> Election:
        """Get election with proposals in index order, NotFound if missing."""
        row = self.fetchone(f"SELECT {_COLUMNS} FROM election WHERE id = ?", [election_id])
        if row is None:
            raise NotFound(f"Election {election_id} not found")

        election = _to_election(row)
        election.proposals = self.proposals(election_id)
        return election

    def exists(self, election_id: int) -> bool:
        return self.fetchone("SELECT 1 FROM election WHERE id = ?", [election_id]) is not None

    def summaries(self) -> list[ElectionSummary]:
        elections = [_to_election(r) for r in self.fetchall(f"SELECT {_COLUMNS} FROM election ORDER BY id")]
        return [ElectionSummary(id=e.id, name=e.name, state=e.state, expires_at=e.expires_at) for e in elections]

    def next_id(self) -> int:
        """Take the next sequential id. Only advances when the transaction commits."""
        next_id = self.fetchone("SELECT next_id FROM election_counter WHERE id = 1")[0]
        self.execute("UPDATE election_counter SET next_id = ? WHERE id = 1", [next_id + 1])
        return int(next_id)

    def peek_next_id(self) -> int:
        return int(self.fetchone("SELECT next_id FROM election_counter WHERE id = 1")[0])

    def insert(
        self,
        name: str,
        description: str,
        choices: list[str],
        expires_at: datetime,
        created_by: str,
        now: datetime,
    ) -> Election:
        """Store a new election in the CREATED state with zeroed proposals."""
        election_id = self.next_id()
        self.execute(
            f"INSERT INTO election ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, NULL, NULL)",
            [election_id, name, description, False, False, expires_at, created_by, now],
        )
        proposals = [Proposal(index=i, name=choice) for i, choice in enumerate(choices)]
        self._db.executemany(
            "INSERT INTO proposal (election_id, idx, name, vote_count) VALUES (?, ?, ?, 0)",
            [[election_id, p.index, p.name] for p in proposals],
        )
        logger.debug("insert election {}: {} proposals", election_id, len(proposals))
        return Election(
            id=election_id,
            name=name,
            description=description,
            active=False,
            computed=False,
            expires_at=expires_at,
            created_by=created_by,
            created_at=now,
            proposals=proposals,
        )

    def mark_started(self, election_id: int, now: datetime) -> None:
        self.execute("UPDATE election SET active = true, started_at = ? WHERE id = ?", [now, election_id])

    def mark_stopped(self, election_id: int, now: datetime) -> None:
        """Clear active; the timer now reports the stop time."""
        self.execute(
            "UPDATE election SET active = false, expires_at = ?, stopped_at = ? WHERE id = ?",
            [now, now, election_id],
        )

    def mark_computed(self, election_id: int) -> None:
        self.execute("UPDATE election SET computed = true WHERE id = ?", [election_id])

    # ========== Proposals ==========

    def proposals(self, election_id: int) -> list[Proposal]:
        rows = self.fetchall(
            "SELECT idx, name, vote_count FROM proposal WHERE election_id = ? ORDER BY idx",
            [election_id],
        )
        return [Proposal(index=r[0], name=r[1], vote_count=int(r[2])) for r in rows]

    def add_votes(self, election_id: int, index: int, weight: int) -> None:
        self.execute(
            "UPDATE proposal SET vote_count = vote_count + ? WHERE election_id = ? AND idx = ?",
            [weight, election_id, index],
        )

    # ========== Ballots ==========

    def has_voted(self, election_id: int) -> HasVotedSet:
        return HasVotedSet(self._database, election_id)

    def participation(self, election_id: int) -> list[VoterStat]:
        """Per registered voter: eligibility and whether they voted here."""
        rows = self.fetchall(
            """
            SELECT v.identity, v.name, v.role, v.can_vote, hv.identity IS NOT NULL
            FROM voter v
            LEFT JOIN has_voted hv ON hv.identity = v.identity AND hv.election_id = ?
            ORDER BY v.registered_at, v.identity
            """,
            [election_id],
        )
        return [
            VoterStat(identity=r[0], name=r[1], role=Role(r[2]), can_vote=bool(r[3]), has_voted=bool(r[4]))
            for r in rows
        ]

    # ========== Winner ==========

    def winner(self, election_id: int) -> Winner | None:
        row = self.fetchone("SELECT idx, name, vote_count FROM winner WHERE election_id = ?", [election_id])
        return Winner(index=row[0], name=row[1], vote_count=int(row[2])) if row else None

    def set_winner(self, election_id: int, winner: Winner) -> None:
        self.execute(
            "INSERT INTO winner (election_id, idx, name, vote_count) VALUES (?, ?, ?, ?)",
            [election_id, winner.index, winner.name, winner.vote_count],
        )
        logger.debug("winner[{}] = {} ({})", election_id, winner.name, winner.vote_count)
