"""Lock table serializing operations on the same election."""

import threading
from collections import defaultdict


class ElectionLocks:
    """One re-entrant lock per election id, created on first use.

    Callers only ask for ids of stored elections, so the table is bounded
    by the number of elections.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: defaultdict[int, threading.RLock] = defaultdict(threading.RLock)

    def __call__(self, election_id: int) -> threading.RLock:
        with self._guard:
            return self._locks[election_id]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
