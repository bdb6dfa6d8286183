"""Chart-of-accounts rules for hyphen-segmented account numbers."""

from collections.abc import Iterable

from src.domain.constants import SYNTHETIC_SEGMENTS
from src.domain.models.accounts import AccountKind

_KIND_BY_FIRST_DIGIT = {
    "0": AccountKind.ASSET,
    "1": AccountKind.ASSET,
    "2": AccountKind.LIABILITY,
    "3": AccountKind.ASSET,
    "4": AccountKind.EXPENSE,
    "5": AccountKind.EXPENSE,
    "7": AccountKind.INCOME,
    "8": AccountKind.EQUITY,
}


def synthetic_number(account_number: str) -> str:
    """Return the account number truncated to at most three segments.

    Args:
        account_number: Analytical or synthetic account number.

    Returns:
        str: The synthetic rollup key, unchanged for short numbers.
    """
    segments = account_number.split("-")
    if len(segments) <= SYNTHETIC_SEGMENTS:
        return account_number
    return "-".join(segments[:SYNTHETIC_SEGMENTS])


def matches_prefix(account_number: str, prefixes: Iterable[str]) -> bool:
    """Return True when the number starts with any prefix, as strings.

    ``"2029"`` matches ``"202"`` while ``"20"`` does not.
    """
    return any(account_number.startswith(prefix) for prefix in prefixes)


def belongs_to(account_number: str, prefix: str) -> bool:
    """Return True when the number is the prefix or one of its sub-accounts."""
    return account_number == prefix or account_number.startswith(f"{prefix}-")


def first_segment(value: str) -> str:
    """Return the part before the first hyphen."""
    return value.split("-", 1)[0]


def location_category_prefix(location_identifier: str) -> str:
    """Return the category prefix of a location identifier such as ``"2-15"``."""
    return first_segment(location_identifier.strip())


def infer_kind(account_number: str) -> AccountKind:
    """Infer the account kind from the first digit of its number."""
    if not account_number:
        return AccountKind.OTHER
    return _KIND_BY_FIRST_DIGIT.get(account_number[0], AccountKind.OTHER)


def budget_account_prefix(prefix: str, location_identifier: str | None) -> str:
    """Return ``"<prefix>-<location identifier>"`` used by budget items."""
    if not location_identifier:
        return prefix
    return f"{prefix}-{location_identifier}"


__all__ = [
    "synthetic_number",
    "matches_prefix",
    "belongs_to",
    "first_segment",
    "location_category_prefix",
    "infer_kind",
    "budget_account_prefix",
]
