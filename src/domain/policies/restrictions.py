"""Per-location account restriction policy."""

from collections.abc import Iterable

from src.domain.models.accounts import AccountRestriction
from src.domain.services.chart_of_accounts import matches_prefix


def restricted_prefixes(
    restrictions: Iterable[AccountRestriction],
    location_category: str | None,
) -> tuple[str, ...]:
    """Return the account prefixes hidden for a location category.

    Args:
        restrictions: Restriction rows, possibly for several categories.
        location_category: Category prefix of the reporting location.

    Returns:
        tuple[str, ...]: Sorted unique prefixes marked as restricted.
    """
    if not location_category:
        return ()
    prefixes = {
        row.account_number_prefix
        for row in restrictions
        if row.is_restricted
        and row.location_category_prefix == location_category
        and row.account_number_prefix
    }
    return tuple(sorted(prefixes))


def is_restricted(account_number: str, prefixes: Iterable[str]) -> bool:
    """Return True when the account falls under a restricted prefix."""
    return matches_prefix(account_number, prefixes)


__all__ = ["restricted_prefixes", "is_restricted"]
