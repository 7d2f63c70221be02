"""Role weight model - one row per role."""

WEIGHT_DDL = """
CREATE TABLE IF NOT EXISTS role_weight (
    role VARCHAR PRIMARY KEY,
    weight BIGINT NOT NULL
)
"""
