"""Election domain models - elections, proposals, ballots and results."""

from election.models.elections.ballot import HAS_VOTED_DDL, WINNER_DDL
from election.models.elections.election import ELECTION_DDL
from election.models.elections.entities import (
    Election,
    ElectionResult,
    ElectionState,
    ElectionSummary,
    Proposal,
    VoterStat,
    Winner,
)
from election.models.elections.proposal import PROPOSAL_DDL

__all__ = [
    "ELECTION_DDL",
    "PROPOSAL_DDL",
    "HAS_VOTED_DDL",
    "WINNER_DDL",
    "Election",
    "ElectionResult",
    "ElectionState",
    "ElectionSummary",
    "Proposal",
    "VoterStat",
    "Winner",
]
