"""Voter API views - thin layer over services."""

from election.container import container
from web.api.errors import validate_identity

from .schemas import (
    AdministratorResponse,
    RegisterRequest,
    RegisterResponse,
    WeightRequest,
    WeightsResponse,
    WhoAmIResponse,
)


def register(caller: str, payload: RegisterRequest) -> RegisterResponse:
    """Register a voter (idempotent)."""
    validate_identity(payload.identity)
    created = container.engine.register(caller, payload.identity, payload.name, payload.role)
    return RegisterResponse(identity=payload.identity, created=created)


def ban(caller: str, identity: str) -> WhoAmIResponse:
    """Ban a voter and return the updated profile."""
    validate_identity(identity)
    container.engine.ban(caller, identity)
    return whoami(identity)


def unban(caller: str, identity: str) -> WhoAmIResponse:
    validate_identity(identity)
    container.engine.unban(caller, identity)
    return whoami(identity)


def set_weight(caller: str, payload: WeightRequest) -> WeightsResponse:
    """Set a role weight and return the whole table."""
    container.engine.set_weight(caller, payload.role, payload.weight)
    return get_weights()


def get_weights() -> WeightsResponse:
    weights = container.queries.weights()
    return WeightsResponse(weights={role.value: weight for role, weight in weights.items()})


def whoami(identity: str) -> WhoAmIResponse:
    """Get the voter profile behind an identity."""
    validate_identity(identity)
    profile = container.queries.whoami(identity)

    return WhoAmIResponse(
        identity=profile.identity,
        name=profile.name,
        role=profile.role.value,
        can_vote=profile.can_vote,
    )


def is_administrator(identity: str) -> AdministratorResponse:
    return AdministratorResponse(identity=identity, is_administrator=container.queries.is_administrator(identity))
