"""Models package - DDL and entities for all domains."""

from election.models.common import COUNTER_DDL, COUNTER_SEED, BaseEntity
from election.models.elections import (
    ELECTION_DDL,
    HAS_VOTED_DDL,
    PROPOSAL_DDL,
    WINNER_DDL,
    Election,
    ElectionResult,
    ElectionState,
    ElectionSummary,
    Proposal,
    VoterStat,
    Winner,
)
from election.models.voters import MANAGERS, VOTER_DDL, WEIGHT_DDL, Role, Voter

ALL_DDL = [
    # Voters
    VOTER_DDL,
    WEIGHT_DDL,
    # Elections
    ELECTION_DDL,
    PROPOSAL_DDL,
    HAS_VOTED_DDL,
    WINNER_DDL,
    # Common
    COUNTER_DDL,
]

SEEDS = [
    COUNTER_SEED,
]

__all__ = [
    # Common
    "BaseEntity",
    "COUNTER_DDL",
    # Voters
    "VOTER_DDL",
    "WEIGHT_DDL",
    "MANAGERS",
    "Role",
    "Voter",
    # Elections
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
    # All DDL
    "ALL_DDL",
    "SEEDS",
]
