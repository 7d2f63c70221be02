"""Weight table - vote weight per role."""

from loguru import logger

from election.models.voters import Role
from election.repositories.base import BaseRepository


class WeightTable(BaseRepository):
    """Repository for role weights. Read at cast time only."""

    def ensure_defaults(self, default: int) -> None:
        """Seed a weight for every role that has none yet."""
        for role in Role:
            row = self.fetchone("SELECT 1 FROM role_weight WHERE role = ?", [role.value])
            if row is None:
                self.execute("INSERT INTO role_weight (role, weight) VALUES (?, ?)", [role.value, default])
                logger.debug("Seeded weight {}={}", role, default)

    def weight_of(self, role: Role) -> int:
        row = self.fetchone("SELECT weight FROM role_weight WHERE role = ?", [role.value])
        if row is None:
            raise LookupError(f"No weight configured for role {role}")
        return int(row[0])

    def set_weight(self, role: Role, weight: int) -> None:
        self.execute("UPDATE role_weight SET weight = ? WHERE role = ?", [weight, role.value])
        logger.debug("set_weight({}): {}", role, weight)

    def all(self) -> dict[Role, int]:
        """Get weights: {role: weight}."""
        rows = self.fetchall("SELECT role, weight FROM role_weight")
        weights = {Role(r[0]): int(r[1]) for r in rows}
        return {role: weights[role] for role in Role if role in weights}
