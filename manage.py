#!/usr/bin/env python3
"""
Inspect the election database.

Usage:
    python manage.py validate          # Check integrity of every election
    python manage.py validate 0 3      # Check specific elections
    python manage.py elections         # List elections and their state
    python manage.py result 3          # Show the compiled result of election 3
"""

import sys

from election.container import container
from election.errors import ElectionError
from election.validation import validate_all, validate_election
from settings.logging import setup_logging

logger = setup_logging(level="INFO", to_file=False)


def run_validation(election_ids: list[int] | None = None) -> bool:
    """Validate elections in database."""
    conn = container.database.connection()
    if election_ids:
        reports = [validate_election(conn, e) for e in election_ids]
    else:
        reports = validate_all(conn)

    if not reports:
        print("\n⚠️  No elections found.\n")
        return True

    print("\n" + "=" * 60)
    print("ELECTION INTEGRITY REPORT")
    print("=" * 60)

    all_valid = True
    for report in reports:
        status = "✅" if report["valid"] else "❌"
        print(f"\nElection {report['election']} {status}")
        for key, value in report["stats"].items():
            print(f"  {key}: {value:,}")
        if report["issues"]:
            all_valid = False
            for issue in report["issues"]:
                print(f"  ⚠️  {issue}")

    print("\n" + "=" * 60)
    print("✅ All elections valid!" if all_valid else "❌ Some issues found.")
    print("=" * 60 + "\n")
    return all_valid


def list_elections() -> None:
    for e in container.queries.list_elections():
        print(f"{e.id:>4}  {e.state.value:<9} {e.expires_at:%Y-%m-%d %H:%M}  {e.name}")


def show_result(election_id: int) -> None:
    result = container.queries.view_result(election_id)
    print(f"{result.election_name}: {result.winner_name} ({result.winner_count})")


def parse_ids(values: list[str]) -> list[int]:
    """Election ids from the command line. Raises ValueError on anything else."""
    ids = []
    for value in values:
        if not value.isdigit():
            raise ValueError(f"Invalid election id: {value!r}")
        ids.append(int(value))
    return ids


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(__doc__)
        return 1

    command, rest = args[0], args[1:]
    try:
        ids = parse_ids(rest)
    except ValueError as e:
        logger.error("{}", e)
        return 2

    container.init()
    try:
        if command == "validate":
            return 0 if run_validation(ids or None) else 1
        if command == "elections":
            list_elections()
            return 0
        if command == "result" and len(ids) == 1:
            show_result(ids[0])
            return 0
        print(__doc__)
        return 1
    except ElectionError as e:
        logger.error("{}: {}", e.__class__.__name__, e.message)
        return 1
    finally:
        container.close()


if __name__ == "__main__":
    sys.exit(main())
