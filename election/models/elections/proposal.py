"""Proposal (ballot choice) model - index is the ballot choice identifier."""

PROPOSAL_DDL = """
CREATE TABLE IF NOT EXISTS proposal (
    election_id INTEGER NOT NULL,
    idx INTEGER NOT NULL,
    name VARCHAR NOT NULL,
    vote_count BIGINT NOT NULL,
    PRIMARY KEY (election_id, idx)
)
"""
