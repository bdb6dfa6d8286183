"""Budget forecasting, realization and deviation rules."""

from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal

from src.domain.models.aggregates import PeriodAggregate
from src.domain.models.budget import (
    BudgetDeviation,
    BudgetItem,
    BudgetItemKind,
    BudgetPlan,
    BudgetRealization,
    ForecastMethod,
    RealizationStatus,
)
from src.domain.models.catalogue import ReportCatalogue
from src.domain.models.ledger import Category
from src.domain.services.chart_of_accounts import (
    budget_account_prefix,
    first_segment,
)
from src.domain.services.report_assembly import sum_buckets
from src.utils.decimal_utils import HUNDRED, ZERO, ratio_percent

CENT = Decimal("0.01")
MONTHS_IN_YEAR = 12
AVERAGE_WINDOW = 3

_KIND_CATEGORY = {
    BudgetItemKind.INCOME: Category.INCOME,
    BudgetItemKind.EXPENSE: Category.EXPENSE,
}


def quantize_amount(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def account_turnover(
    aggregate: PeriodAggregate | None,
    prefix: str,
    kind: BudgetItemKind,
) -> Decimal:
    """Return the income or expense turnover of one account family.

    Args:
        aggregate: Aggregate to read; ``None`` counts as no activity.
        prefix: Catalogue prefix such as ``"401"``.
        kind: Budget item kind selecting the category.

    Returns:
        Decimal: Turnover of the prefix in the kind's category.
    """
    if aggregate is None:
        return ZERO
    return sum_buckets(
        aggregate.buckets,
        (prefix,),
        category=_KIND_CATEGORY[kind],
    )


def historical_amount(
    history: Mapping[int, PeriodAggregate],
    prefix: str,
    kind: BudgetItemKind,
    target_year: int,
    method: ForecastMethod,
) -> Decimal:
    """Return the raw forecast of one account for the target year.

    Missing years count as zero. ``avg_3_years`` always divides by three.
    """
    if method is ForecastMethod.MANUAL:
        return ZERO
    if method is ForecastMethod.LAST_YEAR:
        return account_turnover(history.get(target_year - 1), prefix, kind)
    total = sum(
        (
            account_turnover(history.get(target_year - offset), prefix, kind)
            for offset in range(1, AVERAGE_WINDOW + 1)
        ),
        ZERO,
    )
    return total / AVERAGE_WINDOW


def apply_expense_adjustment(
    amounts: list[Decimal],
    additional_expenses: Decimal,
    planned_cost_reduction: Decimal,
) -> list[Decimal]:
    """Spread the manual adjustment evenly and clamp at zero.

    Args:
        amounts: Raw expense amounts.
        additional_expenses: Extra expenses expected in the target year.
        planned_cost_reduction: Savings expected in the target year.

    Returns:
        list[Decimal]: Adjusted amounts, each ``>= 0``.
    """
    if not amounts:
        return []
    per_item = (additional_expenses - planned_cost_reduction) / len(amounts)
    return [max(amount + per_item, ZERO) for amount in amounts]


def forecast_items(
    catalogue: ReportCatalogue,
    history: Mapping[int, PeriodAggregate],
    target_year: int,
    method: ForecastMethod,
    additional_expenses: Decimal = ZERO,
    planned_cost_reduction: Decimal = ZERO,
    location_identifier: str | None = None,
) -> list[BudgetItem]:
    """Propose budget items for every catalogue account.

    Args:
        catalogue: Income and expense catalogue to forecast.
        history: Yearly aggregates keyed by year.
        target_year: Year the plan is for.
        method: Forecast method.
        additional_expenses: Manual expense increase.
        planned_cost_reduction: Manual expense decrease.
        location_identifier: Optional identifier appended to item prefixes.

    Returns:
        list[BudgetItem]: Income items followed by expense items.
    """
    income_items = []
    for entry in catalogue.income:
        raw = historical_amount(
            history, entry.prefix, BudgetItemKind.INCOME, target_year, method
        )
        income_items.append(
            _build_item(
                entry.prefix,
                entry.name,
                BudgetItemKind.INCOME,
                raw,
                raw,
                history,
                target_year,
                location_identifier,
            )
        )

    raw_expenses = [
        historical_amount(
            history, entry.prefix, BudgetItemKind.EXPENSE, target_year, method
        )
        for entry in catalogue.expense
    ]
    adjusted = apply_expense_adjustment(
        raw_expenses,
        additional_expenses,
        planned_cost_reduction,
    )
    expense_items = [
        _build_item(
            entry.prefix,
            entry.name,
            BudgetItemKind.EXPENSE,
            planned,
            raw,
            history,
            target_year,
            location_identifier,
        )
        for entry, raw, planned in zip(catalogue.expense, raw_expenses, adjusted)
    ]
    return income_items + expense_items


def _build_item(
    prefix: str,
    name: str,
    kind: BudgetItemKind,
    planned: Decimal,
    raw: Decimal,
    history: Mapping[int, PeriodAggregate],
    target_year: int,
    location_identifier: str | None,
) -> BudgetItem:
    return BudgetItem(
        account_prefix=budget_account_prefix(prefix, location_identifier),
        account_name=name,
        kind=kind,
        planned_amount=quantize_amount(planned),
        previous_year_amount=quantize_amount(
            account_turnover(history.get(target_year - 1), prefix, kind)
        ),
        forecasted_amount=quantize_amount(raw),
    )


def monthly_budget(plan: BudgetPlan) -> Decimal:
    """Return the approved annual expense budget divided by twelve."""
    return plan.annual_expense_budget / MONTHS_IN_YEAR


def realization_status(percentage: Decimal) -> RealizationStatus:
    """Bucket a realization percentage.

    Boundaries belong to the lower bucket: 50 and 80 are green, 100 is
    orange.
    """
    if percentage < 50:
        return RealizationStatus.GRAY
    if percentage <= 80:
        return RealizationStatus.GREEN
    if percentage <= HUNDRED:
        return RealizationStatus.ORANGE
    return RealizationStatus.RED


def build_realization(
    year: int,
    month: int,
    budgeted: Decimal,
    actual: Decimal,
) -> BudgetRealization:
    """Compare one month's expense total with the monthly budget."""
    percentage = ratio_percent(actual, budgeted)
    return BudgetRealization(
        year=year,
        month=month,
        budgeted=quantize_amount(budgeted),
        actual=actual,
        percentage=quantize_amount(percentage),
        status=realization_status(percentage),
    )


def build_deviations(
    items: Iterable[BudgetItem],
    aggregate: PeriodAggregate,
    months: int = MONTHS_IN_YEAR,
) -> list[BudgetDeviation]:
    """Compare plan items with the actual turnover of an aggregate.

    Args:
        items: Items of an approved plan.
        aggregate: Aggregate of the compared period.
        months: Number of months the aggregate covers; the annual planned
            amount is scaled by ``months / 12``.

    Returns:
        list[BudgetDeviation]: Deviations sorted by absolute size,
        largest first.
    """
    deviations = []
    for item in items:
        budgeted = quantize_amount(
            item.planned_amount * months / MONTHS_IN_YEAR
        )
        actual = account_turnover(
            aggregate,
            first_segment(item.account_prefix),
            item.kind,
        )
        deviation = actual - budgeted
        deviations.append(
            BudgetDeviation(
                account_prefix=item.account_prefix,
                account_name=item.account_name,
                kind=item.kind,
                budgeted=budgeted,
                actual=actual,
                deviation=deviation,
                percentage=quantize_amount(ratio_percent(deviation, budgeted)),
            )
        )
    return sorted(
        deviations,
        key=lambda row: (-abs(row.deviation), row.account_prefix),
    )


__all__ = [
    "quantize_amount",
    "account_turnover",
    "historical_amount",
    "apply_expense_adjustment",
    "forecast_items",
    "monthly_budget",
    "realization_status",
    "build_realization",
    "build_deviations",
]
