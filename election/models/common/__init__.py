"""Common models - base classes and shared tables."""

from election.models.common.base import BaseEntity
from election.models.common.counter import COUNTER_DDL, COUNTER_SEED

__all__ = [
    "BaseEntity",
    "COUNTER_DDL",
    "COUNTER_SEED",
]
