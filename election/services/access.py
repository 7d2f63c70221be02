"""Access control - stateless predicates over caller identity and registry."""

from collections.abc import Iterable

from loguru import logger

from election.errors import Unauthorized
from election.models.voters import Role
from election.repositories.voters import VoterRegistry


def is_administrator(identity: str, administrator: str) -> bool:
    return identity == administrator


def has_role(registry: VoterRegistry, identity: str, role: Role) -> bool:
    voter = registry.lookup(identity)
    return voter is not None and voter.role == role


def has_any_role(registry: VoterRegistry, identity: str, roles: Iterable[Role]) -> bool:
    voter = registry.lookup(identity)
    return voter is not None and voter.role in frozenset(roles)


def require(allowed: bool, caller: str, action: str) -> None:
    """Raise Unauthorized unless ``allowed``."""
    if not allowed:
        logger.warning("Unauthorized: {} tried to {}", caller, action)
        raise Unauthorized(f"{caller} is not allowed to {action}")
