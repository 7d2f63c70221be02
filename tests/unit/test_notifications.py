"""Tests for the notification bus."""

import pytest
from conftest import ADMIN, STUDENT

from election.errors import AlreadyVoted
from election.models.events import BallotStarted, VoteCast, VoterBanned, VoterCreated
from election.models.voters import Role
from election.services.notifications import EventBus


class TestEventBus:
    def test_publish_in_order(self):
        bus = EventBus()
        seen = []
        bus.subscribe(seen.append)

        first = VoteCast(election_id=0, identity="a")
        second = VoteCast(election_id=0, identity="b")
        bus.publish([first, second])

        assert seen == [first, second]

    def test_failing_handler_does_not_stop_others(self):
        bus = EventBus()
        seen = []

        def broken(event):
            raise RuntimeError("mail server down")

        bus.subscribe(broken)
        bus.subscribe(seen.append)
        bus.publish([VoterBanned(name="Sam", identity="s")])

        assert len(seen) == 1

    def test_unsubscribe(self):
        bus = EventBus()
        seen = []
        bus.subscribe(seen.append)
        bus.unsubscribe(seen.append)
        bus.publish([VoteCast(election_id=1, identity="x")])
        assert seen == []

    def test_event_kind(self):
        assert VoteCast(election_id=1, identity="x").kind == "VoteCast"
        assert VoteCast(election_id=1, identity="x").to_dict() == {"election_id": 1, "identity": "x"}

    def test_to_dict_flattens_roles(self):
        event = VoterCreated(role=Role.STUDENT, name="Sam", identity="s")
        assert event.to_dict() == {"role": "Student", "name": "Sam", "identity": "s"}


class TestEngineNotifications:
    def test_failing_handler_keeps_commit(self, open_election, school, bus, store):
        def broken(event):
            raise RuntimeError("queue full")

        bus.subscribe(broken)
        school.cast_vote(STUDENT, open_election, 0)
        assert STUDENT in store.has_voted(open_election)

    def test_no_event_on_failure(self, open_election, school, events):
        events.clear()
        school.cast_vote(STUDENT, open_election, 0)
        school.start_election(ADMIN, open_election)
        with pytest.raises(AlreadyVoted):
            school.cast_vote(STUDENT, open_election, 0)

        assert [type(e) for e in events] == [VoteCast, BallotStarted]
