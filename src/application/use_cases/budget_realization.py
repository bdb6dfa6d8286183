"""Use case to compare actual spend with an approved budget plan."""

from datetime import date

from src.application.ports.budget_store import BudgetStorePort
from src.application.use_cases.aggregate_period import AggregatePeriodUseCase
from src.domain.models import (
    BudgetDeviation,
    BudgetPlan,
    BudgetPlanStatus,
    BudgetRealization,
)
from src.domain.services.budget import (
    build_deviations,
    build_realization,
    monthly_budget,
)
from src.domain.services.validation import validate_month
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import ZERO


class BudgetRealizationUseCase:
    """Compute realization metrics of approved budget plans."""

    def __init__(
        self,
        budget_store: BudgetStorePort,
        aggregator: AggregatePeriodUseCase,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            budget_store: Port providing budget plans.
            aggregator: Aggregation use case for actual amounts.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._budget_store = budget_store
        self._aggregator = aggregator
        self._logger = logger or get_app_logger()

    def execute(
        self,
        location_id: str,
        year: int,
        month: int,
    ) -> BudgetRealization | None:
        """Return the realization of one month.

        Args:
            location_id: Reporting location.
            year: Plan year.
            month: Month number, 1..12.

        Returns:
            BudgetRealization | None: Realization, or None without an
            approved plan for the year.
        """
        validate_month(month)
        plan = self._approved_plan(location_id, year)
        if plan is None:
            return None
        aggregate = self._aggregator.execute_month(location_id, year, month)
        realization = build_realization(
            year,
            month,
            monthly_budget(plan),
            aggregate.total_expense,
        )
        self._logger.info(
            f"Realization {location_id} {year}-{month:02d}: "
            f"{realization.percentage}% ({realization.status.value})"
        )
        return realization

    def execute_year(
        self,
        location_id: str,
        year: int,
        reference_date: date,
    ) -> list[BudgetRealization]:
        """Return twelve monthly realizations of a year.

        Months after ``reference_date`` are reported with no actual spend.
        """
        plan = self._approved_plan(location_id, year)
        if plan is None:
            return []
        budget = monthly_budget(plan)
        rows = []
        for month in range(1, 13):
            if (year, month) > (reference_date.year, reference_date.month):
                actual = ZERO
            else:
                actual = self._aggregator.execute_month(
                    location_id,
                    year,
                    month,
                ).total_expense
            rows.append(build_realization(year, month, budget, actual))
        return rows

    def deviations(
        self,
        location_id: str,
        year: int,
        month: int | None = None,
    ) -> list[BudgetDeviation]:
        """Return per-item deviations for a month or the whole year."""
        plan = self._approved_plan(location_id, year)
        if plan is None:
            return []
        if month is None:
            aggregate = self._aggregator.execute_year(location_id, year)
            return build_deviations(plan.items, aggregate)
        validate_month(month)
        aggregate = self._aggregator.execute_month(location_id, year, month)
        return build_deviations(plan.items, aggregate, months=1)

    def _approved_plan(self, location_id: str, year: int) -> BudgetPlan | None:
        plan = self._budget_store.read_budget_plan(location_id, year)
        if plan is None or plan.status is not BudgetPlanStatus.APPROVED:
            self._logger.info(
                f"No approved budget plan for {location_id} {year}"
            )
            return None
        return plan


__all__ = ["BudgetRealizationUseCase"]
