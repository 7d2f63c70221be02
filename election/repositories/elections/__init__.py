"""Election repositories - store and per-election has-voted sets."""

from election.repositories.elections.roll import HasVotedSet
from election.repositories.elections.store import ElectionStore

__all__ = [
    "ElectionStore",
    "HasVotedSet",
]
