"""Parsing helpers for raw query-string values."""

import re
from datetime import date

DEFAULT_LIMIT = 1000

# SQLite INTEGER range; larger values cannot be bound as parameters
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_int_list(raw: str | None) -> list[int]:
    """
    Parse a comma-separated list of integers.

    Tokens that are blank or not integers are dropped rather than rejected,
    so "10,abc,20" gives [10, 20] and "abc" gives []. Values outside the
    SQLite integer range are dropped too.
    """
    if not raw:
        return []

    values = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            value = int(token)
        except ValueError:
            continue
        if SQLITE_INT_MIN <= value <= SQLITE_INT_MAX:
            values.append(value)
    return values


def resolve_limit(raw: str | None, default: int = DEFAULT_LIMIT) -> int:
    """
    Resolve a result limit, falling back to the default when missing or not positive.

    Limits past the SQLite integer range are capped at its maximum.
    """
    if raw is None:
        return default
    try:
        limit = int(raw.strip())
    except ValueError:
        return default
    if limit <= 0:
        return default
    return min(limit, SQLITE_INT_MAX)


def is_valid_date_string(raw: str) -> bool:
    """Check that a value is YYYY-MM-DD and names a real calendar day."""
    if not _DATE_PATTERN.match(raw):
        return False
    try:
        date.fromisoformat(raw)
    except ValueError:
        return False
    return True
