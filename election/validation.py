"""Integrity checks over persisted election state."""

import duckdb


def validate_election(conn: duckdb.DuckDBPyConnection, election_id: int) -> dict:
    """Validate data integrity for one election."""
    issues = []
    stats = {}

    row = conn.execute("SELECT active, computed FROM election WHERE id = ?", [election_id]).fetchone()
    if row is None:
        return {"election": election_id, "valid": False, "stats": stats, "issues": ["Election not found"]}
    active, computed = bool(row[0]), bool(row[1])

    if active and computed:
        issues.append("Election is both active and computed")

    indices = [r[0] for r in conn.execute(
        "SELECT idx FROM proposal WHERE election_id = ? ORDER BY idx", [election_id]
    ).fetchall()]
    stats["proposals"] = len(indices)
    if len(indices) < 2:
        issues.append(f"Only {len(indices)} proposals")
    if indices != list(range(len(indices))):
        issues.append(f"Proposal indices not contiguous: {indices}")

    stats["votes_cast"] = conn.execute(
        "SELECT COUNT(*) FROM has_voted WHERE election_id = ?", [election_id]
    ).fetchone()[0]
    stats["weighted_total"] = int(conn.execute(
        "SELECT COALESCE(SUM(vote_count), 0) FROM proposal WHERE election_id = ?", [election_id]
    ).fetchone()[0])

    unknown_voters = conn.execute(
        """
        SELECT COUNT(*) FROM has_voted hv
        LEFT JOIN voter v ON v.identity = hv.identity
        WHERE hv.election_id = ? AND v.identity IS NULL
        """,
        [election_id],
    ).fetchone()[0]
    if unknown_voters > 0:
        issues.append(f"{unknown_voters} votes from unregistered identities")

    winner = conn.execute(
        """
        SELECT w.name, p.name FROM winner w
        LEFT JOIN proposal p ON p.election_id = w.election_id AND p.idx = w.idx
        WHERE w.election_id = ?
        """,
        [election_id],
    ).fetchone()
    if computed and winner is None:
        issues.append("Computed election has no winner")
    if winner is not None and not computed:
        issues.append("Winner set on an election that is not computed")
    if winner is not None and winner[0] != winner[1]:
        issues.append(f"Winner '{winner[0]}' does not match proposal '{winner[1]}'")

    return {
        "election": election_id,
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }


def validate_all(conn: duckdb.DuckDBPyConnection) -> list[dict]:
    """Validate every stored election, in id order."""
    ids = [r[0] for r in conn.execute("SELECT id FROM election ORDER BY id").fetchall()]
    return [validate_election(conn, election_id) for election_id in ids]
