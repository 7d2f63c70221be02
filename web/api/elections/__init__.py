"""Elections API."""

from web.api.elections.views import (
    cast_vote,
    compile_results,
    create_election,
    get_election,
    get_election_stats,
    get_elections,
    get_result,
    start_election,
    stop_election,
)

__all__ = [
    "create_election",
    "start_election",
    "stop_election",
    "cast_vote",
    "compile_results",
    "get_elections",
    "get_election",
    "get_election_stats",
    "get_result",
]
