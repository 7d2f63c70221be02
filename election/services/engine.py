"""Voting engine - every state-changing operation on voters and elections.

Each operation follows the same shape: access guard first (read-only, no
lock), then the relevant lock, then one DuckDB transaction doing all checks
and writes, then notifications once the transaction has committed. A failing
check raises inside the transaction, which rolls it back, so state is never
partially applied.
"""

import threading
from collections.abc import Sequence
from datetime import timedelta

from loguru import logger

from election.clock import Clock, utcnow
from election.errors import (
    AlreadyVoted,
    Expired,
    IndexOutOfRange,
    InvalidElectionParams,
    InvalidState,
    InvalidWeight,
    NotFound,
    Unauthorized,
)
from election.models.elections import Election
from election.models.events import (
    BallotCreated,
    BallotResultCompiled,
    BallotStarted,
    BallotStopped,
    Event,
    VoteCast,
    VoterBanned,
    VoterCreated,
    VoterUnbanned,
)
from election.models.voters import MANAGERS, Role
from election.repositories import Database, ElectionStore, VoterRegistry, WeightTable
from election.services.access import has_any_role, is_administrator, require
from election.services.locks import ElectionLocks
from election.services.notifications import EventBus
from election.services.results import ResultCompiler
from settings import DEFAULT_WEIGHT, MAX_WEIGHT

audit = logger.bind(audit=True)


class VotingEngine:
    """Election lifecycle, voter management and weighted vote casting."""

    def __init__(
        self,
        database: Database,
        registry: VoterRegistry,
        weights: WeightTable,
        store: ElectionStore,
        bus: EventBus,
        administrator: str,
        administrator_name: str = "Administrator",
        compiler: ResultCompiler | None = None,
        clock: Clock = utcnow,
    ):
        self._database = database
        self._registry = registry
        self._weights = weights
        self._store = store
        self._bus = bus
        self._compiler = compiler or ResultCompiler()
        self._clock = clock
        self.administrator = administrator

        self._election_lock = ElectionLocks()
        self._registry_lock = threading.RLock()
        self._creation_lock = threading.Lock()

        with self._registry_lock:
            events = self._database.atomic(self._bootstrap, administrator_name)
        self._bus.publish(events)
        logger.debug("VotingEngine initialized (administrator={})", administrator)

    def _bootstrap(self, administrator_name: str) -> list[Event]:
        self._weights.ensure_defaults(DEFAULT_WEIGHT)
        voter = self._registry.register(self.administrator, administrator_name, Role.DIRECTOR, self._clock())
        if voter is None:
            return []
        return [VoterCreated(role=voter.role, name=voter.name, identity=voter.identity)]

    def _require_administrator(self, caller: str, action: str) -> None:
        require(is_administrator(caller, self.administrator), caller, action)

    def _require_manager(self, caller: str, action: str) -> None:
        require(has_any_role(self._registry, caller, MANAGERS), caller, action)

    def _lock_for(self, election_id: int) -> threading.RLock:
        """Lock of a stored election. Unknown ids fail before a lock is created."""
        if isinstance(election_id, bool) or not isinstance(election_id, int) or not self._store.exists(election_id):
            raise NotFound(f"Election {election_id} not found")
        return self._election_lock(election_id)

    # ========== Voters ==========

    def register(self, caller: str, identity: str, name: str, role: Role | str) -> bool:
        """Register a voter. Returns False when the identity already exists.

        The administrator registers any role; directors and teachers may
        enroll students.
        """
        role = Role.parse(role)
        allowed = is_administrator(caller, self.administrator) or (
            role is Role.STUDENT and has_any_role(self._registry, caller, MANAGERS)
        )
        require(allowed, caller, f"register a {role}")

        with self._registry_lock:
            events = self._database.atomic(self._register, identity, name, role)
        self._bus.publish(events)
        return bool(events)

    def _register(self, identity: str, name: str, role: Role) -> list[Event]:
        voter = self._registry.register(identity, name, role, self._clock())
        if voter is None:
            return []
        audit.info("Voter {} registered as {} ({})", identity, role, name)
        return [VoterCreated(role=voter.role, name=voter.name, identity=voter.identity)]

    def ban(self, caller: str, identity: str) -> None:
        self._require_administrator(caller, "ban voters")
        with self._registry_lock:
            events = self._database.atomic(self._set_can_vote, identity, False)
        self._bus.publish(events)

    def unban(self, caller: str, identity: str) -> None:
        self._require_administrator(caller, "unban voters")
        with self._registry_lock:
            events = self._database.atomic(self._set_can_vote, identity, True)
        self._bus.publish(events)

    def _set_can_vote(self, identity: str, can_vote: bool) -> list[Event]:
        voter = self._registry.lookup(identity)
        if voter is None:
            raise NotFound(f"Voter {identity} not found")

        self._registry.set_can_vote(identity, can_vote)
        audit.info("Voter {} {}", identity, "unbanned" if can_vote else "banned")
        if can_vote:
            return [VoterUnbanned(name=voter.name, identity=identity)]
        return [VoterBanned(name=voter.name, identity=identity)]

    def set_weight(self, caller: str, role: Role | str, weight: int) -> None:
        """Change a role's weight. Votes already cast keep their tallied weight."""
        self._require_administrator(caller, "set weights")
        role = Role.parse(role)
        if isinstance(weight, bool) or not isinstance(weight, int) or not 0 <= weight <= MAX_WEIGHT:
            raise InvalidWeight(f"Invalid weight for {role}: {weight!r}")

        with self._registry_lock:
            self._database.atomic(self._weights.set_weight, role, weight)
        audit.info("Weight of {} set to {}", role, weight)

    # ========== Election lifecycle ==========

    def create_election(
        self,
        caller: str,
        name: str,
        description: str,
        choices: Sequence[str],
        duration_hours: float,
        num_choices: int | None = None,
    ) -> int:
        """Create an election in the CREATED state and return its id."""
        self._require_manager(caller, "create elections")

        choices = list(choices)
        if num_choices is not None and num_choices != len(choices):
            raise InvalidElectionParams(f"Expected {num_choices} choices, got {len(choices)}")
        if len(choices) < 2:
            raise InvalidElectionParams("An election needs at least two choices")
        if any(not isinstance(c, str) or not c.strip() for c in choices):
            raise InvalidElectionParams("Choice names must be non-empty")
        if isinstance(duration_hours, bool) or not isinstance(duration_hours, int | float):
            raise InvalidElectionParams(f"Duration must be a number of hours, got {duration_hours!r}")
        if not duration_hours > 0:
            raise InvalidElectionParams(f"Duration must be positive, got {duration_hours}")
        try:
            duration = timedelta(hours=duration_hours)
            self._clock() + duration
        except OverflowError:
            raise InvalidElectionParams(f"Duration too long: {duration_hours} hours") from None

        with self._creation_lock:
            election = self._database.atomic(
                self._create, caller, name, description, choices, duration
            )
        self._bus.publish([BallotCreated(id=election.id, name=election.name, expiry=election.expires_at)])
        return election.id

    def _create(
        self,
        caller: str,
        name: str,
        description: str,
        choices: list[str],
        duration: timedelta,
    ) -> Election:
        now = self._clock()
        election = self._store.insert(
            name=name,
            description=description,
            choices=choices,
            expires_at=now + duration,
            created_by=caller,
            now=now,
        )
        audit.info("Election {} '{}' created by {} with {} choices", election.id, name, caller, len(choices))
        return election

    def start_election(self, caller: str, election_id: int) -> None:
        """Activate an election. Restarting a closed election is allowed,
        a computed one is final."""
        self._require_administrator(caller, "start elections")
        with self._lock_for(election_id):
            events = self._database.atomic(self._start, election_id)
        self._bus.publish(events)

    def _start(self, election_id: int) -> list[Event]:
        election = self._store.get(election_id)
        if election.computed:
            raise InvalidState(f"Election {election_id} is already computed")

        now = self._clock()
        self._store.mark_started(election_id, now)
        audit.info("Election {} started", election_id)
        return [BallotStarted(id=election_id, name=election.name, timestamp=now)]

    def stop_election(self, caller: str, election_id: int) -> None:
        self._require_administrator(caller, "stop elections")
        with self._lock_for(election_id):
            events = self._database.atomic(self._stop, election_id)
        self._bus.publish(events)

    def _stop(self, election_id: int) -> list[Event]:
        election = self._store.get(election_id)
        if election.computed:
            raise InvalidState(f"Election {election_id} is already computed")

        now = self._clock()
        self._store.mark_stopped(election_id, now)
        audit.info("Election {} stopped", election_id)
        return [BallotStopped(id=election_id, name=election.name, timestamp=now)]

    def compile_results(self, caller: str, election_id: int) -> None:
        """Stop the election, mark it computed and fill its winner slot."""
        self._require_manager(caller, "compile results")
        with self._lock_for(election_id):
            events = self._database.atomic(self._compile, election_id)
        self._bus.publish(events)

    def _compile(self, election_id: int) -> list[Event]:
        events = self._stop(election_id)
        self._store.mark_computed(election_id)

        election = self._store.get(election_id)
        winner = self._compiler.compile(election.proposals)
        self._store.set_winner(election_id, winner)

        audit.info("Election {} compiled: {} wins with {}", election_id, winner.name, winner.vote_count)
        events.append(BallotResultCompiled(id=election_id, name=election.name, timestamp=self._clock()))
        return events

    # ========== Voting ==========

    def cast_vote(self, caller: str, election_id: int, choice: int) -> None:
        """Cast the caller's single vote, weighted by their current role weight."""
        with self._lock_for(election_id):
            events = self._database.atomic(self._cast_vote, caller, election_id, choice)
        self._bus.publish(events)

    def _cast_vote(self, caller: str, election_id: int, choice: int) -> list[Event]:
        election = self._store.get(election_id)
        if not election.active:
            raise InvalidState(f"Election {election_id} is not active")
        if election.computed:
            raise InvalidState(f"Election {election_id} is already computed")

        now = self._clock()
        if now > election.expires_at:
            raise Expired(f"Election {election_id} expired at {election.expires_at}")

        voter = self._registry.lookup(caller)
        if voter is None:
            raise NotFound(f"Voter {caller} not found")
        if not voter.can_vote:
            logger.warning("Banned voter {} tried to vote in {}", caller, election_id)
            raise Unauthorized(f"{caller} is not allowed to vote")

        has_voted = self._store.has_voted(election_id)
        if caller in has_voted:
            logger.warning("{} tried to vote twice in {}", caller, election_id)
            raise AlreadyVoted(f"{caller} already voted in election {election_id}")

        if isinstance(choice, bool) or not isinstance(choice, int) or not 0 <= choice < len(election.proposals):
            raise IndexOutOfRange(f"Choice {choice!r} out of range for election {election_id}")

        weight = self._weights.weight_of(voter.role)
        self._store.add_votes(election_id, choice, weight)
        has_voted.add(caller, now)

        audit.info("Vote cast in election {} by {} (weight {})", election_id, caller, weight)
        return [VoteCast(election_id=election_id, identity=caller)]
