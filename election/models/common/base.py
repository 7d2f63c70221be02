"""Base entity class for all domain entities."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


def _plain(items: list[tuple[str, Any]]) -> dict[str, Any]:
    return {k: v.value if isinstance(v, Enum) else v for k, v in items}


@dataclass
class BaseEntity:
    """Base class for all entities."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary, enums as their plain values."""
        return asdict(self, dict_factory=_plain)
