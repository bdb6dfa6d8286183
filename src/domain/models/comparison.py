"""Domain models for multi-period comparisons."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class ComparisonMetric(str, Enum):
    """Control total compared between two periods."""

    INCOME = "income"
    EXPENSE = "expense"
    BALANCE = "balance"


@dataclass(frozen=True)
class Comparison:
    """Change of a metric between a previous and a current period.

    ``change`` is ``current - previous`` for every metric, so an expense
    increase is a positive change.
    """

    metric: ComparisonMetric
    current: Decimal
    previous: Decimal
    change: Decimal
    change_percent: Decimal


@dataclass(frozen=True)
class ReportTotals:
    """Control totals of one report or a sum of reports."""

    income_total: Decimal
    expense_total: Decimal

    @property
    def balance(self) -> Decimal:
        return self.income_total - self.expense_total


__all__ = ["ComparisonMetric", "Comparison", "ReportTotals"]
