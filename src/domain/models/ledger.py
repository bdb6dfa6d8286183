"""Domain models for ledger transactions and their classified legs."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class LegSide(str, Enum):
    """Side of a double-entry leg."""

    DEBIT = "debit"
    CREDIT = "credit"


class Category(str, Enum):
    """Reporting category a leg is routed to."""

    INCOME = "income"
    EXPENSE = "expense"
    FINANCIAL_POSITION = "financial_position"
    SETTLEMENT = "settlement"
    OTHER = "other"


P_AND_L_CATEGORIES = (Category.INCOME, Category.EXPENSE)


@dataclass(frozen=True)
class Transaction:
    """Immutable double-entry ledger record.

    ``debit_amount`` and ``credit_amount`` override the shared ``amount``
    for their leg when present.
    """

    id: str
    date: date
    debit_account_id: str | None
    credit_account_id: str | None
    location_id: str
    amount: Decimal | None = None
    debit_amount: Decimal | None = None
    credit_amount: Decimal | None = None
    currency: str = "PLN"
    exchange_rate: Decimal | None = None


@dataclass(frozen=True)
class ClassifiedContribution:
    """One eligible leg of a transaction, keyed by its synthetic account."""

    transaction_id: str
    account_number: str
    synthetic_account_number: str
    side: LegSide
    category: Category
    amount: Decimal

    @property
    def signed_amount(self) -> Decimal:
        """Return the amount signed positively for debit legs."""
        if self.side is LegSide.DEBIT:
            return self.amount
        return -self.amount


@dataclass(frozen=True)
class InconsistentTransaction:
    """Warning about a transaction (or leg) left out of aggregation."""

    transaction_id: str
    reason: str


__all__ = [
    "LegSide",
    "Category",
    "P_AND_L_CATEGORIES",
    "Transaction",
    "ClassifiedContribution",
    "InconsistentTransaction",
]
