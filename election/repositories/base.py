"""Base repository class."""

from typing import Any

from loguru import logger

from election.repositories.db import Database


class BaseRepository:
    """Base repository with common functionality.

    Statements run on the calling thread's cursor, so they join whatever
    transaction :class:`Database` has open on that thread.
    """

    def __init__(self, database: Database):
        self._database = database
        logger.debug("{} initialized", self.__class__.__name__)

    @property
    def _db(self):
        return self._database.connection()

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        if params:
            return self._db.execute(query, params)
        return self._db.execute(query)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()
