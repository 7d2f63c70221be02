"""Election API views - thin layer over services."""

from election.container import container
from web.api.errors import validate_election_id

from .schemas import (
    CreateElectionRequest,
    ElectionCreatedResponse,
    ElectionResponse,
    ElectionsResponse,
    ElectionStatsResponse,
    ElectionSummaryItem,
    ResultResponse,
    VoterStatItem,
    VoteRequest,
)


def create_election(caller: str, payload: CreateElectionRequest) -> ElectionCreatedResponse:
    """Create an election (directors and teachers)."""
    election_id = container.engine.create_election(
        caller,
        payload.name,
        payload.description,
        payload.choices,
        payload.duration_hours,
        num_choices=payload.num_choices,
    )
    return ElectionCreatedResponse(id=election_id)


def start_election(caller: str, election_id: int) -> ElectionResponse:
    validate_election_id(election_id)
    container.engine.start_election(caller, election_id)
    return get_election(election_id)


def stop_election(caller: str, election_id: int) -> ElectionResponse:
    validate_election_id(election_id)
    container.engine.stop_election(caller, election_id)
    return get_election(election_id)


def cast_vote(caller: str, election_id: int, payload: VoteRequest) -> None:
    """Cast the caller's vote."""
    validate_election_id(election_id)
    container.engine.cast_vote(caller, election_id, payload.choice)


def compile_results(caller: str, election_id: int) -> ResultResponse:
    """Compile and return the result."""
    validate_election_id(election_id)
    container.engine.compile_results(caller, election_id)
    return get_result(election_id)


def get_elections() -> ElectionsResponse:
    items = [
        ElectionSummaryItem(id=e.id, name=e.name, state=e.state.value, expires_at=e.expires_at)
        for e in container.queries.list_elections()
    ]
    return ElectionsResponse(items=items)


def get_election(election_id: int) -> ElectionResponse:
    """Get election detail with ordered choices."""
    validate_election_id(election_id)
    election = container.queries.view_election(election_id)

    return ElectionResponse(
        id=election.id,
        name=election.name,
        description=election.description,
        choices=election.choice_names,
        active=election.active,
        computed=election.computed,
        state=election.state.value,
        expires_at=election.expires_at,
    )


def get_election_stats(election_id: int) -> ElectionStatsResponse:
    """Get per-voter participation for an election."""
    validate_election_id(election_id)
    stats = container.queries.view_election_stats(election_id)

    items = [
        VoterStatItem(
            identity=s.identity,
            name=s.name,
            role=s.role.value,
            can_vote=s.can_vote,
            has_voted=s.has_voted,
        )
        for s in stats
    ]

    return ElectionStatsResponse(
        election_id=election_id,
        items=items,
        voted=sum(s.has_voted for s in stats),
        registered=len(stats),
    )


def get_result(election_id: int) -> ResultResponse:
    validate_election_id(election_id)
    result = container.queries.view_result(election_id)

    return ResultResponse(
        election_id=result.election_id,
        election_name=result.election_name,
        winner_name=result.winner_name,
        winner_count=result.winner_count,
    )
