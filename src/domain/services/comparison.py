"""Multi-period comparison of report control totals."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models.comparison import (
    Comparison,
    ComparisonMetric,
    ReportTotals,
)
from src.domain.models.reports import ReportDetails, ReportSections
from src.utils.decimal_utils import HUNDRED, ZERO


def compare_values(
    metric: ComparisonMetric,
    current: Decimal,
    previous: Decimal,
) -> Comparison:
    """Return ``current - previous`` and its percentage of ``|previous|``.

    Args:
        metric: Compared control total.
        current: Value of the current period.
        previous: Value of the previous period.

    Returns:
        Comparison: Change with ``change_percent = 0`` when previous is 0.
    """
    change = current - previous
    if previous == 0:
        change_percent = ZERO
    else:
        change_percent = change / abs(previous) * HUNDRED
    return Comparison(
        metric=metric,
        current=current,
        previous=previous,
        change=change,
        change_percent=change_percent,
    )


def totals_of(report: ReportSections | ReportDetails | ReportTotals) -> ReportTotals:
    return ReportTotals(
        income_total=report.income_total,
        expense_total=report.expense_total,
    )


def sum_totals(
    reports: Iterable[ReportSections | ReportDetails | ReportTotals],
) -> ReportTotals:
    """Add up the control totals of several reports."""
    income = ZERO
    expense = ZERO
    for report in reports:
        income += report.income_total
        expense += report.expense_total
    return ReportTotals(income_total=income, expense_total=expense)


def metric_value(totals: ReportTotals, metric: ComparisonMetric) -> Decimal:
    if metric is ComparisonMetric.INCOME:
        return totals.income_total
    if metric is ComparisonMetric.EXPENSE:
        return totals.expense_total
    return totals.balance


def compare_reports(
    current: ReportSections | ReportDetails | ReportTotals,
    previous: ReportSections | ReportDetails | ReportTotals,
    metric: ComparisonMetric,
) -> Comparison:
    """Compare one metric of two reports."""
    metric = ComparisonMetric(metric)
    return compare_values(
        metric,
        metric_value(totals_of(current), metric),
        metric_value(totals_of(previous), metric),
    )


def compare_all(
    current: ReportSections | ReportDetails | ReportTotals,
    previous: ReportSections | ReportDetails | ReportTotals,
) -> dict[ComparisonMetric, Comparison]:
    return {
        metric: compare_reports(current, previous, metric)
        for metric in ComparisonMetric
    }


__all__ = [
    "compare_values",
    "totals_of",
    "sum_totals",
    "metric_value",
    "compare_reports",
    "compare_all",
]
