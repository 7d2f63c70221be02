"""Election model."""

ELECTION_DDL = """
CREATE TABLE IF NOT EXISTS election (
    id INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL,
    description VARCHAR,
    active BOOLEAN NOT NULL,
    computed BOOLEAN NOT NULL,
    expires_at TIMESTAMP NOT NULL,
    created_by VARCHAR NOT NULL,
    created_at TIMESTAMP NOT NULL,
    started_at TIMESTAMP,
    stopped_at TIMESTAMP
)
"""
