"""Per-election ballot bookkeeping - who voted and the compiled winner."""

HAS_VOTED_DDL = """
CREATE TABLE IF NOT EXISTS has_voted (
    election_id INTEGER NOT NULL,
    identity VARCHAR NOT NULL,
    voted_at TIMESTAMP NOT NULL,
    PRIMARY KEY (election_id, identity)
)
"""

WINNER_DDL = """
CREATE TABLE IF NOT EXISTS winner (
    election_id INTEGER PRIMARY KEY,
    idx INTEGER NOT NULL,
    name VARCHAR NOT NULL,
    vote_count BIGINT NOT NULL
)
"""
