"""DuckDB connection and transaction management."""

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

import duckdb
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from election.models import ALL_DDL, SEEDS
from settings import DB_PATH, TX_RETRIES

T = TypeVar("T")


def _log_retry(state) -> None:
    logger.warning("Transaction conflict, retry #{}: {}", state.attempt_number, state.outcome.exception())


class Database:
    """One DuckDB database shared by all threads.

    Each thread works on its own cursor of the root connection, so a
    transaction opened by an operation spans every repository call made on
    that thread until commit or rollback.
    """

    def __init__(self, path: str = DB_PATH):
        self.path = path
        self._root = duckdb.connect(path)
        self._local = threading.local()
        self._cursors: list[duckdb.DuckDBPyConnection] = []
        self._cursors_lock = threading.Lock()
        self.init_tables()
        logger.debug("DB connected: {}", path)

    def connection(self) -> duckdb.DuckDBPyConnection:
        """Get thread-local cursor."""
        conn = getattr(self._local, "conn", None)
        if conn is None:
            # The root connection is not thread-safe, cursors are
            with self._cursors_lock:
                conn = self._root.cursor()
                self._cursors.append(conn)
            self._local.conn = conn
        return conn

    def init_tables(self) -> None:
        """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
        conn = self.connection()
        for ddl in ALL_DDL:
            conn.execute(ddl)
        for seed in SEEDS:
            conn.execute(seed)
        logger.debug("DB tables initialized")

    @property
    def in_transaction(self) -> bool:
        return getattr(self._local, "depth", 0) > 0

    @contextmanager
    def transaction(self) -> Iterator[duckdb.DuckDBPyConnection]:
        """Commit on success, roll back on any exception.

        Nested use joins the outer transaction.
        """
        conn = self.connection()
        if self.in_transaction:
            self._local.depth += 1
            try:
                yield conn
            finally:
                self._local.depth -= 1
            return

        conn.begin()
        self._local.depth = 1
        try:
            yield conn
            conn.commit()
        except BaseException:
            self._rollback(conn)
            raise
        finally:
            self._local.depth = 0

    @staticmethod
    def _rollback(conn: duckdb.DuckDBPyConnection) -> None:
        try:
            conn.rollback()
        except duckdb.TransactionException as e:
            # A failed COMMIT has already discarded the transaction
            logger.debug("Rollback skipped: {}", e)

    @retry(
        stop=stop_after_attempt(TX_RETRIES),
        wait=wait_exponential(multiplier=0.01, min=0.01, max=0.5),
        retry=retry_if_exception_type(duckdb.TransactionException),
        before_sleep=_log_retry,
        reraise=True,
    )
    def atomic(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Run ``fn`` in its own transaction, retrying on write-write conflicts."""
        with self.transaction():
            return fn(*args, **kwargs)

    def close(self) -> None:
        """Close all cursors and the root connection."""
        with self._cursors_lock:
            for conn in self._cursors:
                conn.close()
            self._cursors.clear()
        self._local = threading.local()
        self._root.close()
        logger.debug("DB connection closed: {}", self.path)
