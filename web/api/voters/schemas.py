"""Voter API request and response schemas."""

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    """Voter registration payload."""

    identity: str
    name: str
    role: str


class RegisterResponse(BaseModel):
    identity: str
    created: bool


class WeightRequest(BaseModel):
    role: str
    weight: int


class WeightsResponse(BaseModel):
    """Current weight per role."""

    weights: dict[str, int]


class WhoAmIResponse(BaseModel):
    """Caller's own voter profile."""

    identity: str
    name: str
    role: str
    can_vote: bool


class AdministratorResponse(BaseModel):
    identity: str
    is_administrator: bool
