"""Dependency Injection container - initialized at app startup."""

from election.clock import Clock, utcnow
from election.repositories import Database, ElectionStore, VoterRegistry, WeightTable
from election.services import ElectionQueries, EventBus, VotingEngine
from settings import ADMIN_IDENTITY, ADMIN_NAME, DB_PATH


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(
        self,
        db_path: str = DB_PATH,
        administrator: str = ADMIN_IDENTITY,
        administrator_name: str = ADMIN_NAME,
        clock: Clock = utcnow,
    ) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        self.database = Database(db_path)

        # Repositories (singletons)
        self._registry = VoterRegistry(self.database)
        self._weights = WeightTable(self.database)
        self._store = ElectionStore(self.database)

        # Services (with injected repos)
        self.bus = EventBus()

        self.engine = VotingEngine(
            database=self.database,
            registry=self._registry,
            weights=self._weights,
            store=self._store,
            bus=self.bus,
            administrator=administrator,
            administrator_name=administrator_name,
            clock=clock,
        )

        self.queries = ElectionQueries(
            registry=self._registry,
            weights=self._weights,
            store=self._store,
            administrator=administrator,
        )

        self._initialized = True

    def close(self) -> None:
        """Release the database and allow a fresh init()."""
        if not self._initialized:
            return
        self.database.close()
        self._initialized = False


# Global container instance
container = Container()
