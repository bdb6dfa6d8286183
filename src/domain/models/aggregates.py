"""Domain models for period aggregates."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.domain.models.ledger import Category, InconsistentTransaction, LegSide


@dataclass(frozen=True)
class AccountBucket:
    """Summed contributions for one synthetic account on one side."""

    synthetic_account_number: str
    side: LegSide
    category: Category
    name: str
    total: Decimal

    @property
    def signed_total(self) -> Decimal:
        """Return the total signed positively for debit buckets."""
        if self.side is LegSide.DEBIT:
            return self.total
        return -self.total


@dataclass(frozen=True)
class PeriodAggregate:
    """Totals of classified contributions for a location and date range.

    Attributes:
        location_id: Location the transactions belong to.
        period_start: First calendar day included.
        period_end: Last calendar day included.
        buckets: Buckets ordered by synthetic number then side.
        per_category: Unsigned totals for income and expense, debit minus
            credit for the other categories.
        warnings: Transactions or legs excluded from the totals.
    """

    location_id: str
    period_start: date
    period_end: date
    buckets: tuple[AccountBucket, ...] = ()
    per_category: dict[Category, Decimal] = field(default_factory=dict)
    warnings: tuple[InconsistentTransaction, ...] = ()

    @property
    def per_synthetic_account(
        self,
    ) -> dict[tuple[str, LegSide], AccountBucket]:
        return {
            (bucket.synthetic_account_number, bucket.side): bucket
            for bucket in self.buckets
        }

    @property
    def total_income(self) -> Decimal:
        return self.per_category.get(Category.INCOME, Decimal("0"))

    @property
    def total_expense(self) -> Decimal:
        return self.per_category.get(Category.EXPENSE, Decimal("0"))

    @property
    def balance(self) -> Decimal:
        return self.total_income - self.total_expense


__all__ = ["AccountBucket", "PeriodAggregate"]
