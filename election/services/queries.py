"""Read-only projections of voters and elections."""

from dataclasses import dataclass

from election.errors import NotComputed, NotFound
from election.models.common import BaseEntity
from election.models.elections import Election, ElectionResult, ElectionSummary, VoterStat
from election.models.voters import Role
from election.repositories import ElectionStore, VoterRegistry, WeightTable
from election.services.access import is_administrator


@dataclass
class VoterProfile(BaseEntity):
    """What a voter sees about themselves."""

    identity: str
    name: str
    role: Role
    can_vote: bool


class ElectionQueries:
    """Public reads. No access guard: the data is world-readable."""

    def __init__(self, registry: VoterRegistry, weights: WeightTable, store: ElectionStore, administrator: str):
        self._registry = registry
        self._weights = weights
        self._store = store
        self._administrator = administrator

    def view_election(self, election_id: int) -> Election:
        return self._store.get(election_id)

    def list_elections(self) -> list[ElectionSummary]:
        return self._store.summaries()

    def view_election_stats(self, election_id: int) -> list[VoterStat]:
        if not self._store.exists(election_id):
            raise NotFound(f"Election {election_id} not found")
        return self._store.participation(election_id)

    def view_result(self, election_id: int) -> ElectionResult:
        election = self._store.get(election_id)
        winner = self._store.winner(election_id) if election.computed else None
        if winner is None:
            raise NotComputed(f"Election {election_id} has not been compiled")

        return ElectionResult(
            election_id=election_id,
            election_name=election.name,
            winner_name=winner.name,
            winner_count=winner.vote_count,
        )

    def whoami(self, identity: str) -> VoterProfile:
        voter = self._registry.lookup(identity)
        if voter is None:
            raise NotFound(f"Voter {identity} not found")
        return VoterProfile(identity=voter.identity, name=voter.name, role=voter.role, can_vote=voter.can_vote)

    def is_administrator(self, identity: str) -> bool:
        return is_administrator(identity, self._administrator)

    def weights(self) -> dict[Role, int]:
        return self._weights.all()
