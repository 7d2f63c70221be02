"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("ELECTION_DB_PATH", "election.duckdb")

# Logging
LOG_DIR = Path("logs")

# Administrator (registered as a Director on bootstrap)
ADMIN_IDENTITY = os.getenv("ELECTION_ADMIN", "admin")
ADMIN_NAME = os.getenv("ELECTION_ADMIN_NAME", "Administrator")

# Voting
DEFAULT_WEIGHT = 1

# Transactions
TX_RETRIES = 5

# Largest role weight; keeps accumulated proposal counts well inside BIGINT
MAX_WEIGHT = 2**31 - 1
