"""School election engine - voters, weighted ballots and result compilation."""

__version__ = "0.1.0"
