"""Tests for the ForecastBudgetUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.forecast_budget import ForecastBudgetUseCase
from src.domain.errors import InvalidPeriodError, InvalidRequestError
from src.domain.models import (
    AccountBucket,
    Category,
    CatalogueEntry,
    LegSide,
    PeriodAggregate,
    ReportCatalogue,
)

CATALOGUE = ReportCatalogue(
    version="test",
    income=(CatalogueEntry("704", "Kolęda"),),
    expense=(CatalogueEntry("401", "Biurowe"),),
    financial_position=(),
    settlements=(),
)


def _year_aggregate(year: int, office: str) -> PeriodAggregate:
    bucket = AccountBucket(
        synthetic_account_number="401-1-3",
        side=LegSide.DEBIT,
        category=Category.EXPENSE,
        name="Biurowe",
        total=Decimal(office),
    )
    return PeriodAggregate(
        location_id="loc-1",
        period_start=date(year, 1, 1),
        period_end=date(year, 12, 31),
        buckets=(bucket,),
        per_category={Category.EXPENSE: Decimal(office)},
    )


def _build(aggregates: dict[int, PeriodAggregate]):
    ledger = MagicMock()
    ledger.fetch_location_identifier.return_value = "1-3"
    aggregator = MagicMock()
    aggregator.execute_year.side_effect = lambda location_id, year: aggregates[year]
    use_case = ForecastBudgetUseCase(
        ledger,
        catalogue=CATALOGUE,
        aggregator=aggregator,
        logger=MagicMock(),
    )
    return use_case, aggregator


def test_avg_3_years_reads_three_previous_years():
    """Historical totals of 100, 200 and 300 forecast 200."""
    use_case, aggregator = _build(
        {
            2024: _year_aggregate(2024, "100"),
            2023: _year_aggregate(2023, "200"),
            2022: _year_aggregate(2022, "300"),
        }
    )

    items = use_case.execute("loc-1", 2025, "avg_3_years")

    assert [call.args[1] for call in aggregator.execute_year.call_args_list] == [
        2024,
        2023,
        2022,
    ]
    expense = items[1]
    assert expense.account_prefix == "401-1-3"
    assert expense.planned_amount == Decimal("200.00")
    assert items[0].planned_amount == Decimal("0.00")


def test_last_year_applies_manual_adjustments():
    use_case, aggregator = _build({2024: _year_aggregate(2024, "100")})

    items = use_case.execute(
        "loc-1",
        2025,
        additional_expenses="20",
        planned_cost_reduction=Decimal("50"),
    )

    assert aggregator.execute_year.call_count == 1
    assert items[1].planned_amount == Decimal("70.00")
    assert items[1].forecasted_amount == Decimal("100.00")


def test_unknown_method_is_rejected():
    use_case, aggregator = _build({})

    with pytest.raises(InvalidRequestError, match="median") as excinfo:
        use_case.execute("loc-1", 2025, "median")

    assert not isinstance(excinfo.value, InvalidPeriodError)
    assert isinstance(excinfo.value, ValueError)

    aggregator.execute_year.assert_not_called()
