"""Election domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from election.models.common import BaseEntity
from election.models.voters import Role


class ElectionState(StrEnum):
    CREATED = "CREATED"
    ACTIVE = "ACTIVE"
    CLOSED = "CLOSED"
    COMPUTED = "COMPUTED"


@dataclass
class Proposal(BaseEntity):
    """One selectable option with its accumulated weighted count."""

    index: int
    name: str
    vote_count: int = 0


@dataclass
class Winner(BaseEntity):
    """Snapshot of the winning proposal taken at compilation."""

    index: int
    name: str
    vote_count: int


@dataclass
class Election(BaseEntity):
    """Election record with its ordered proposals."""

    id: int
    name: str
    description: str
    active: bool
    computed: bool
    expires_at: datetime
    created_by: str
    created_at: datetime
    started_at: datetime | None = None
    stopped_at: datetime | None = None
    proposals: list[Proposal] = field(default_factory=list)

    @property
    def state(self) -> ElectionState:
        if self.computed:
            return ElectionState.COMPUTED
        if self.active:
            return ElectionState.ACTIVE
        if self.stopped_at is not None:
            return ElectionState.CLOSED
        return ElectionState.CREATED

    @property
    def choice_names(self) -> list[str]:
        return [p.name for p in self.proposals]


@dataclass
class ElectionSummary(BaseEntity):
    id: int
    name: str
    state: ElectionState
    expires_at: datetime


@dataclass
class VoterStat(BaseEntity):
    """Participation of one registered voter in an election."""

    identity: str
    name: str
    role: Role
    can_vote: bool
    has_voted: bool


@dataclass
class ElectionResult(BaseEntity):
    election_id: int
    election_name: str
    winner_name: str
    winner_count: int
