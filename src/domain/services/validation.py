"""Domain validation helpers."""

from datetime import date
from decimal import Decimal
from logging import Logger

from src.domain.errors import InvalidPeriodError
from src.domain.models.accounts import Account
from src.domain.models.ledger import Transaction
from src.domain.services.chart_of_accounts import infer_kind


def validate_period(date_from: date, date_to: date) -> None:
    """Reject ranges whose start is after their end.

    Raises:
        InvalidPeriodError: If ``date_from > date_to``.
    """
    if date_from > date_to:
        raise InvalidPeriodError(
            f"Invalid period: {date_from.isoformat()} is after "
            f"{date_to.isoformat()}"
        )


def validate_month(month: int) -> None:
    """Reject months outside 1..12.

    Raises:
        InvalidPeriodError: If the month is out of range.
    """
    if not 1 <= month <= 12:
        raise InvalidPeriodError(f"Invalid month: {month}")


def find_transaction_inconsistency(transaction: Transaction) -> str | None:
    """Return why a transaction cannot be aggregated, or None.

    Args:
        transaction: Ledger transaction to inspect.

    Returns:
        str | None: Reason naming the negative field, if any.
    """
    for field_name in ("debit_amount", "credit_amount", "amount"):
        value = getattr(transaction, field_name)
        if value is not None and Decimal(value) < 0:
            return f"negative {field_name}: {value}"
    return None


def validate_account_kind(account: Account, logger: Logger) -> None:
    """Warn when a stored kind disagrees with the number prefix.

    Args:
        account: Account from the catalogue query.
        logger: Logger used for warnings.
    """
    if account.kind is None:
        return
    inferred = infer_kind(account.number)
    if account.kind is not inferred:
        logger.warning(
            f"Account {account.number} stored as {account.kind.value} "
            f"but its number implies {inferred.value}"
        )


__all__ = [
    "validate_period",
    "validate_month",
    "find_transaction_inconsistency",
    "validate_account_kind",
]
