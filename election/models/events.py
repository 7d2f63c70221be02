"""Notifications raised to external collaborators after a commit."""

from dataclasses import dataclass
from datetime import datetime

from election.models.common import BaseEntity
from election.models.voters import Role


@dataclass
class Event(BaseEntity):
    """Base class for all notifications."""

    @property
    def kind(self) -> str:
        return self.__class__.__name__


@dataclass
class VoterCreated(Event):
    role: Role
    name: str
    identity: str


@dataclass
class VoterBanned(Event):
    name: str
    identity: str


@dataclass
class VoterUnbanned(Event):
    name: str
    identity: str


@dataclass
class BallotCreated(Event):
    id: int
    name: str
    expiry: datetime


@dataclass
class BallotStarted(Event):
    id: int
    name: str
    timestamp: datetime


@dataclass
class BallotStopped(Event):
    id: int
    name: str
    timestamp: datetime


@dataclass
class BallotResultCompiled(Event):
    id: int
    name: str
    timestamp: datetime


@dataclass
class VoteCast(Event):
    election_id: int
    identity: str
