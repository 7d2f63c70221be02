"""Voters API."""

from web.api.voters.views import (
    ban,
    get_weights,
    is_administrator,
    register,
    set_weight,
    unban,
    whoami,
)

__all__ = [
    "register",
    "ban",
    "unban",
    "set_weight",
    "get_weights",
    "whoami",
    "is_administrator",
]
