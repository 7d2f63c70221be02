"""Voter repositories - registry and role weights."""

from election.repositories.voters.registry import VoterRegistry
from election.repositories.voters.weights import WeightTable

__all__ = [
    "VoterRegistry",
    "WeightTable",
]
