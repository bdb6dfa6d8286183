"""Tests for budget forecasting and realization rules."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.models import (
    Account,
    BudgetItem,
    BudgetItemKind,
    BudgetPlan,
    BudgetPlanStatus,
    CatalogueEntry,
    ForecastMethod,
    RealizationStatus,
    ReportCatalogue,
    Transaction,
)
from src.domain.services.aggregation import aggregate_transactions
from src.domain.services.budget import (
    apply_expense_adjustment,
    build_deviations,
    build_realization,
    forecast_items,
    monthly_budget,
    realization_status,
)

ACCOUNTS = {
    "kasa": Account("kasa", "100", "Kasa"),
    "biurowe": Account("biurowe", "401-1-3", "Biurowe"),
    "poczta": Account("poczta", "402", "Poczta"),
    "kolęda": Account("kolęda", "704", "Kolęda"),
}

CATALOGUE = ReportCatalogue(
    version="test",
    income=(CatalogueEntry("704", "Kolęda"),),
    expense=(CatalogueEntry("401", "Biurowe"), CatalogueEntry("402", "Poczta")),
    financial_position=(),
    settlements=(),
)


def _year(year: int, office: str = "0", post: str = "0", carol: str = "0"):
    transactions = []
    for tx_id, debit, credit, amount in (
        ("office", "biurowe", "kasa", office),
        ("post", "poczta", "kasa", post),
        ("carol", "kasa", "kolęda", carol),
    ):
        transactions.append(
            Transaction(
                id=f"{tx_id}-{year}",
                date=date(year, 6, 1),
                debit_account_id=debit,
                credit_account_id=credit,
                location_id="loc-1",
                amount=Decimal(amount),
            )
        )
    return aggregate_transactions(
        "loc-1",
        date(year, 1, 1),
        date(year, 12, 31),
        transactions,
        ACCOUNTS,
    )


def _item(items, prefix):
    return next(item for item in items if item.account_prefix == prefix)


def test_three_year_average_forecast():
    """Expense history of 100, 200 and 300 forecasts 200."""
    history = {
        2024: _year(2024, office="100"),
        2023: _year(2023, office="200"),
        2022: _year(2022, office="300"),
    }

    items = forecast_items(CATALOGUE, history, 2025, ForecastMethod.AVG_3_YEARS)

    office = _item(items, "401")
    assert office.planned_amount == Decimal("200.00")
    assert office.forecasted_amount == Decimal("200.00")
    assert office.previous_year_amount == Decimal("100.00")


def test_missing_years_count_as_zero():
    history = {2024: _year(2024, office="90")}

    items = forecast_items(CATALOGUE, history, 2025, ForecastMethod.AVG_3_YEARS)

    assert _item(items, "401").planned_amount == Decimal("30.00")
    assert _item(items, "402").planned_amount == Decimal("0.00")


def test_last_year_forecast_includes_income_unadjusted():
    history = {2024: _year(2024, office="100", post="40", carol="900")}

    items = forecast_items(
        CATALOGUE,
        history,
        2025,
        ForecastMethod.LAST_YEAR,
        additional_expenses=Decimal("60"),
        location_identifier="1-3",
    )

    assert [item.kind for item in items] == [
        BudgetItemKind.INCOME,
        BudgetItemKind.EXPENSE,
        BudgetItemKind.EXPENSE,
    ]
    assert _item(items, "704-1-3").planned_amount == Decimal("900.00")
    assert _item(items, "401-1-3").planned_amount == Decimal("130.00")
    assert _item(items, "402-1-3").planned_amount == Decimal("70.00")
    assert _item(items, "402-1-3").forecasted_amount == Decimal("40.00")


def test_manual_forecast_keeps_previous_year_reference():
    history = {2024: _year(2024, office="100")}

    items = forecast_items(CATALOGUE, history, 2025, ForecastMethod.MANUAL)

    office = _item(items, "401")
    assert office.planned_amount == Decimal("0.00")
    assert office.previous_year_amount == Decimal("100.00")


@pytest.mark.parametrize(
    ("additional", "reduction"),
    [
        ("0", "0"),
        ("0", "1000"),
        ("50", "75"),
        ("1000", "0"),
        ("0", "0.01"),
    ],
)
def test_forecast_expense_items_are_never_negative(additional, reduction):
    """Adjusted expense amounts are clamped at zero."""
    history = {2024: _year(2024, office="100", post="1")}

    items = forecast_items(
        CATALOGUE,
        history,
        2025,
        ForecastMethod.LAST_YEAR,
        additional_expenses=Decimal(additional),
        planned_cost_reduction=Decimal(reduction),
    )

    assert all(
        item.planned_amount >= 0
        for item in items
        if item.kind is BudgetItemKind.EXPENSE
    )


def test_apply_expense_adjustment_spreads_evenly():
    adjusted = apply_expense_adjustment(
        [Decimal("100"), Decimal("10")],
        Decimal("0"),
        Decimal("40"),
    )

    assert adjusted == [Decimal("80"), Decimal("0")]
    assert apply_expense_adjustment([], Decimal("5"), Decimal("0")) == []


@pytest.mark.parametrize(
    ("percentage", "expected"),
    [
        ("0", RealizationStatus.GRAY),
        ("49.99", RealizationStatus.GRAY),
        ("50", RealizationStatus.GREEN),
        ("80", RealizationStatus.GREEN),
        ("80.01", RealizationStatus.ORANGE),
        ("100", RealizationStatus.ORANGE),
        ("100.01", RealizationStatus.RED),
    ],
)
def test_realization_status_boundaries(percentage, expected):
    assert realization_status(Decimal(percentage)) is expected


def test_build_realization_uses_monthly_budget():
    plan = BudgetPlan(
        id="plan-1",
        location_id="loc-1",
        year=2025,
        status=BudgetPlanStatus.APPROVED,
        items=(
            BudgetItem("401", "Biurowe", BudgetItemKind.EXPENSE, Decimal("1200")),
            BudgetItem("704", "Kolęda", BudgetItemKind.INCOME, Decimal("5000")),
        ),
    )

    budget = monthly_budget(plan)
    realization = build_realization(2025, 3, budget, Decimal("100.01"))

    assert budget == Decimal("100")
    assert realization.percentage == Decimal("100.01")
    assert realization.status is RealizationStatus.RED
    assert realization.remaining == Decimal("-0.01")


def test_build_realization_without_budget_is_gray():
    realization = build_realization(2025, 3, Decimal("0"), Decimal("50"))

    assert realization.percentage == Decimal("0")
    assert realization.status is RealizationStatus.GRAY


def test_build_deviations_sorted_by_absolute_deviation():
    items = [
        BudgetItem("401-1-3", "Biurowe", BudgetItemKind.EXPENSE, Decimal("1200")),
        BudgetItem("402-1-3", "Poczta", BudgetItemKind.EXPENSE, Decimal("2400")),
    ]
    aggregate = _year(2025, office="150", post="190")

    deviations = build_deviations(items, aggregate, months=1)

    assert [row.account_prefix for row in deviations] == ["401-1-3", "402-1-3"]
    office = deviations[0]
    assert office.budgeted == Decimal("100.00")
    assert office.actual == Decimal("150")
    assert office.deviation == Decimal("50.00")
    assert office.percentage == Decimal("50.00")
    assert deviations[1].deviation == Decimal("-10.00")
