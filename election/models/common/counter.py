"""Monotonic id counters."""

COUNTER_DDL = """
CREATE TABLE IF NOT EXISTS election_counter (
    id INTEGER PRIMARY KEY,
    next_id INTEGER NOT NULL
)
"""

COUNTER_SEED = """
INSERT INTO election_counter (id, next_id)
SELECT 1, 0
WHERE NOT EXISTS (SELECT 1 FROM election_counter WHERE id = 1)
"""
