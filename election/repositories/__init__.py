"""Repositories package - data access layer for the election database."""

from election.repositories.base import BaseRepository
from election.repositories.db import Database
from election.repositories.elections import ElectionStore, HasVotedSet
from election.repositories.voters import VoterRegistry, WeightTable

__all__ = [
    # DB
    "Database",
    # Base
    "BaseRepository",
    # Voters
    "VoterRegistry",
    "WeightTable",
    # Elections
    "ElectionStore",
    "HasVotedSet",
]
