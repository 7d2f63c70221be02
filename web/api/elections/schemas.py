"""Election API request and response schemas."""

from datetime import datetime

from pydantic import BaseModel


class CreateElectionRequest(BaseModel):
    """Election creation payload. Choice validation is left to the engine."""

    name: str
    description: str = ""
    choices: list[str]
    duration_hours: float
    num_choices: int | None = None


class ElectionCreatedResponse(BaseModel):
    id: int


class VoteRequest(BaseModel):
    choice: int


class ElectionResponse(BaseModel):
    """Election detail."""

    id: int
    name: str
    description: str
    choices: list[str]
    active: bool
    computed: bool
    state: str
    expires_at: datetime


class ElectionSummaryItem(BaseModel):
    id: int
    name: str
    state: str
    expires_at: datetime


class ElectionsResponse(BaseModel):
    items: list[ElectionSummaryItem]


class VoterStatItem(BaseModel):
    """Participation of one voter."""

    identity: str
    name: str
    role: str
    can_vote: bool
    has_voted: bool


class ElectionStatsResponse(BaseModel):
    election_id: int
    items: list[VoterStatItem]
    voted: int
    registered: int


class ResultResponse(BaseModel):
    """Compiled election result."""

    election_id: int
    election_name: str
    winner_name: str
    winner_count: int
