"""Voter model."""

VOTER_DDL = """
CREATE TABLE IF NOT EXISTS voter (
    identity VARCHAR PRIMARY KEY,
    name VARCHAR NOT NULL,
    role VARCHAR NOT NULL,
    can_vote BOOLEAN NOT NULL,
    registered_at TIMESTAMP NOT NULL
)
"""
