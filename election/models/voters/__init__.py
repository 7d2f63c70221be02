"""Voter domain models - voters, roles and role weights."""

from election.models.voters.entities import MANAGERS, Role, Voter
from election.models.voters.voter import VOTER_DDL
from election.models.voters.weight import WEIGHT_DDL

__all__ = [
    "VOTER_DDL",
    "WEIGHT_DDL",
    "MANAGERS",
    "Role",
    "Voter",
]
