"""Helpers for Decimal normalization."""

from decimal import Decimal

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def ratio_percent(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Return numerator / denominator * 100, or 0 when denominator <= 0."""
    if denominator <= 0:
        return ZERO
    return numerator / denominator * HUNDRED


__all__ = ["ZERO", "HUNDRED", "coerce_decimal", "ratio_percent"]
