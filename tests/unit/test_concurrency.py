"""Tests for concurrent operations on the engine."""

from concurrent.futures import ThreadPoolExecutor

from conftest import ADMIN, DIRECTOR, STUDENT

from election.errors import AlreadyVoted, ElectionError
from election.models.voters import Role


def attempt(fn, *args):
    try:
        fn(*args)
        return "ok"
    except ElectionError as e:
        return e.__class__.__name__


class TestConcurrentVotes:
    def test_same_voter_votes_once(self, open_election, school, store):
        with ThreadPoolExecutor(max_workers=8) as pool:
            outcomes = list(pool.map(lambda _: attempt(school.cast_vote, STUDENT, open_election, 0), range(16)))

        assert outcomes.count("ok") == 1
        assert outcomes.count(AlreadyVoted.__name__) == 15
        assert [p.vote_count for p in store.get(open_election).proposals] == [1, 0, 0]
        assert len(store.has_voted(open_election)) == 1

    def test_many_voters_one_election(self, open_election, school, store):
        voters = [f"stu-{i}" for i in range(2, 22)]
        for v in voters:
            school.register(ADMIN, v, v.upper(), Role.STUDENT)

        with ThreadPoolExecutor(max_workers=8) as pool:
            outcomes = list(pool.map(lambda v: attempt(school.cast_vote, v, open_election, 1), voters))

        assert outcomes == ["ok"] * len(voters)
        assert store.get(open_election).proposals[1].vote_count == len(voters)
        assert len(store.has_voted(open_election)) == len(voters)

    def test_distinct_elections(self, school, store):
        ids = [school.create_election(DIRECTOR, f"E{i}", "", ["A", "B"], 1) for i in range(4)]
        for election_id in ids:
            school.start_election(ADMIN, election_id)

        with ThreadPoolExecutor(max_workers=4) as pool:
            outcomes = list(pool.map(lambda e: attempt(school.cast_vote, STUDENT, e, 1), ids))

        assert outcomes == ["ok"] * len(ids)
        for election_id in ids:
            assert store.get(election_id).proposals[1].vote_count == 1

    def test_concurrent_creates_get_unique_ids(self, school):
        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(lambda i: school.create_election(DIRECTOR, f"E{i}", "", ["A", "B"], 1), range(10)))

        assert sorted(ids) == list(range(10))
