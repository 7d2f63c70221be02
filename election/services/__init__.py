"""Services package - service class exports."""

from election.services.engine import VotingEngine
from election.services.notifications import EventBus
from election.services.queries import ElectionQueries, VoterProfile
from election.services.results import ResultCompiler

__all__ = [
    "ElectionQueries",
    "EventBus",
    "ResultCompiler",
    "VoterProfile",
    "VotingEngine",
]
