"""Shared fixtures: in-memory database, controllable clock, recorded events."""

from datetime import datetime, timedelta

import pytest

from election.models.voters import Role
from election.repositories import Database, ElectionStore, VoterRegistry, WeightTable
from election.services import ElectionQueries, EventBus, VotingEngine

ADMIN = "admin"
DIRECTOR = "dir-1"
TEACHER = "tea-1"
STUDENT = "stu-1"


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime = datetime(2026, 9, 1, 8, 0)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def database():
    db = Database(":memory:")
    yield db
    db.close()


@pytest.fixture
def registry(database):
    return VoterRegistry(database)


@pytest.fixture
def weights(database):
    return WeightTable(database)


@pytest.fixture
def store(database):
    return ElectionStore(database)


@pytest.fixture
def events():
    return []


@pytest.fixture
def bus(events):
    bus = EventBus()
    bus.subscribe(events.append)
    return bus


@pytest.fixture
def engine(database, registry, weights, store, bus, clock):
    return VotingEngine(
        database=database,
        registry=registry,
        weights=weights,
        store=store,
        bus=bus,
        administrator=ADMIN,
        administrator_name="Principal Office",
        clock=clock,
    )


@pytest.fixture
def queries(registry, weights, store):
    return ElectionQueries(registry=registry, weights=weights, store=store, administrator=ADMIN)


@pytest.fixture
def school(engine, events):
    """Engine with one director, one teacher and one student registered."""
    engine.register(ADMIN, DIRECTOR, "Dana Director", Role.DIRECTOR)
    engine.register(ADMIN, TEACHER, "Tom Teacher", Role.TEACHER)
    engine.register(ADMIN, STUDENT, "Sam Student", Role.STUDENT)
    events.clear()
    return engine


@pytest.fixture
def open_election(school):
    """Started election with choices A, B, C lasting one hour."""
    election_id = school.create_election(DIRECTOR, "Class rep", "Pick a rep", ["A", "B", "C"], 1)
    school.start_election(ADMIN, election_id)
    return election_id
