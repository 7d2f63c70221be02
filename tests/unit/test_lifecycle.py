"""Tests for the election lifecycle: create, start, stop, compile."""

from datetime import timedelta

import pytest
from conftest import ADMIN, DIRECTOR, STUDENT, TEACHER

from election.errors import InvalidElectionParams, InvalidState, NotFound
from election.models.elections import ElectionState
from election.models.events import BallotCreated, BallotResultCompiled, BallotStarted, BallotStopped


class TestCreate:
    def test_create(self, school, store, clock, events):
        election_id = school.create_election(TEACHER, "Prom theme", "Vote!", ["Space", "Jungle"], 2)

        election = store.get(election_id)
        assert election_id == 0
        assert election.name == "Prom theme"
        assert election.description == "Vote!"
        assert election.choice_names == ["Space", "Jungle"]
        assert [p.vote_count for p in election.proposals] == [0, 0]
        assert [p.index for p in election.proposals] == [0, 1]
        assert election.expires_at == clock.now + timedelta(hours=2)
        assert election.created_by == TEACHER
        assert election.state is ElectionState.CREATED
        assert not election.active
        assert not election.computed
        assert events == [BallotCreated(id=0, name="Prom theme", expiry=election.expires_at)]

    def test_sequential_ids(self, school):
        ids = [school.create_election(DIRECTOR, f"E{i}", "", ["A", "B"], 1) for i in range(3)]
        assert ids == [0, 1, 2]

    @pytest.mark.parametrize("choices", [[], ["Only"]])
    def test_too_few_choices(self, school, store, choices):
        with pytest.raises(InvalidElectionParams):
            school.create_election(DIRECTOR, "E", "", choices, 1)
        assert store.peek_next_id() == 0

    def test_choice_count_mismatch(self, school, store, events):
        with pytest.raises(InvalidElectionParams):
            school.create_election(DIRECTOR, "E", "", ["A", "B", "C"], 1, num_choices=2)

        assert store.summaries() == []
        assert store.peek_next_id() == 0
        assert events == []
        assert school.create_election(DIRECTOR, "E", "", ["A", "B", "C"], 1, num_choices=3) == 0

    def test_blank_choice(self, school):
        with pytest.raises(InvalidElectionParams):
            school.create_election(DIRECTOR, "E", "", ["A", "  "], 1)

    @pytest.mark.parametrize("hours", [0, -1])
    def test_non_positive_duration(self, school, hours):
        with pytest.raises(InvalidElectionParams):
            school.create_election(DIRECTOR, "E", "", ["A", "B"], hours)

    @pytest.mark.parametrize("hours", [10**9, float("inf")])
    def test_duration_too_long(self, school, store, hours):
        with pytest.raises(InvalidElectionParams):
            school.create_election(DIRECTOR, "E", "", ["A", "B"], hours)
        assert store.peek_next_id() == 0

    @pytest.mark.parametrize("hours", ["2", None, True, float("nan")])
    def test_non_numeric_duration(self, school, store, hours):
        with pytest.raises(InvalidElectionParams):
            school.create_election(DIRECTOR, "E", "", ["A", "B"], hours)
        assert store.peek_next_id() == 0

    def test_fractional_duration(self, school, store, clock):
        election_id = school.create_election(DIRECTOR, "E", "", ["A", "B"], 0.5)
        assert store.get(election_id).expires_at == clock.now + timedelta(minutes=30)


class TestStartStop:
    def test_start(self, school, store, clock, events):
        election_id = school.create_election(DIRECTOR, "E", "", ["A", "B"], 1)
        events.clear()

        school.start_election(ADMIN, election_id)

        election = store.get(election_id)
        assert election.active
        assert election.state is ElectionState.ACTIVE
        assert events == [BallotStarted(id=election_id, name="E", timestamp=clock.now)]

    def test_stop_resets_timer(self, open_election, school, store, clock, events):
        clock.advance(minutes=10)
        events.clear()

        school.stop_election(ADMIN, open_election)

        election = store.get(open_election)
        assert not election.active
        assert election.expires_at == clock.now
        assert election.state is ElectionState.CLOSED
        assert events == [BallotStopped(id=open_election, name="Class rep", timestamp=clock.now)]

    def test_restart_closed_election(self, open_election, school, store):
        school.stop_election(ADMIN, open_election)
        school.start_election(ADMIN, open_election)
        assert store.get(open_election).state is ElectionState.ACTIVE

    def test_start_twice(self, open_election, school, store):
        school.start_election(ADMIN, open_election)
        assert store.get(open_election).active

    def test_start_computed_election(self, open_election, school, store):
        school.compile_results(DIRECTOR, open_election)
        with pytest.raises(InvalidState):
            school.start_election(ADMIN, open_election)
        assert not store.get(open_election).active

    def test_stop_computed_election(self, open_election, school, store, clock):
        school.compile_results(DIRECTOR, open_election)
        stopped_at = store.get(open_election).expires_at
        clock.advance(minutes=5)

        with pytest.raises(InvalidState):
            school.stop_election(ADMIN, open_election)
        assert store.get(open_election).expires_at == stopped_at

    @pytest.mark.parametrize("operation", ["start_election", "stop_election"])
    def test_unknown_election(self, school, operation):
        with pytest.raises(NotFound):
            getattr(school, operation)(ADMIN, 42)

    def test_active_not_cleared_by_clock(self, open_election, queries, clock):
        clock.advance(days=3)
        assert queries.view_election(open_election).active


class TestCompile:
    def test_compile(self, open_election, school, store, clock, events):
        school.cast_vote(STUDENT, open_election, 2)
        clock.advance(minutes=20)
        events.clear()

        school.compile_results(TEACHER, open_election)

        election = store.get(open_election)
        assert not election.active
        assert election.computed
        assert election.state is ElectionState.COMPUTED
        assert election.expires_at == clock.now
        assert store.winner(open_election).name == "C"
        assert events == [
            BallotStopped(id=open_election, name="Class rep", timestamp=clock.now),
            BallotResultCompiled(id=open_election, name="Class rep", timestamp=clock.now),
        ]

    def test_compile_without_votes(self, open_election, school, store):
        school.compile_results(DIRECTOR, open_election)
        winner = store.winner(open_election)
        assert (winner.index, winner.name, winner.vote_count) == (0, "A", 0)

    def test_compile_never_started(self, school, store):
        election_id = school.create_election(DIRECTOR, "E", "", ["A", "B"], 1)
        school.compile_results(DIRECTOR, election_id)
        assert store.get(election_id).computed

    def test_compile_twice(self, open_election, school, store, events):
        school.compile_results(DIRECTOR, open_election)
        events.clear()

        with pytest.raises(InvalidState):
            school.compile_results(DIRECTOR, open_election)
        assert events == []
        assert store.winner(open_election).name == "A"

    def test_compile_unknown(self, school):
        with pytest.raises(NotFound):
            school.compile_results(DIRECTOR, 7)


class TestScenario:
    def test_weighted_winner(self, school, queries):
        school.set_weight(ADMIN, "Teacher", 2)
        election_id = school.create_election(DIRECTOR, "Mascot", "", ["A", "B"], 1)
        school.start_election(ADMIN, election_id)

        school.cast_vote(DIRECTOR, election_id, 0)
        school.cast_vote(TEACHER, election_id, 1)
        school.compile_results(DIRECTOR, election_id)

        result = queries.view_result(election_id)
        assert result.winner_name == "B"
        assert result.winner_count == 2
