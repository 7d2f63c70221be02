"""Voter domain entities."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from election.errors import InvalidStakeholder
from election.models.common import BaseEntity


class Role(StrEnum):
    DIRECTOR = "Director"
    TEACHER = "Teacher"
    STUDENT = "Student"

    @classmethod
    def parse(cls, value: "Role | str") -> "Role":
        """Resolve a role label (case-insensitive) or fail with InvalidStakeholder."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for role in cls:
                if role.value.lower() == value.strip().lower():
                    return role
        raise InvalidStakeholder(f"Unknown role: {value!r}")


# Roles allowed to create and compile elections
MANAGERS = frozenset({Role.DIRECTOR, Role.TEACHER})


@dataclass
class Voter(BaseEntity):
    """Registered voter."""

    identity: str
    name: str
    role: Role
    can_vote: bool
    registered_at: datetime
