"""Port for budget plans and their items."""

from collections.abc import Sequence
from decimal import Decimal
from typing import Protocol

from src.domain.models import (
    BudgetItem,
    BudgetPlan,
    BudgetPlanStatus,
    ForecastMethod,
)


class BudgetStorePort(Protocol):
    """Port exposing budget plan persistence."""

    def read_budget_plan(self, location_id: str, year: int) -> BudgetPlan | None:
        """Return the plan of a location for a year, with its items."""

    def read_budget_plan_by_id(self, plan_id: str) -> BudgetPlan | None:
        """Return a plan by id, with its items."""

    def create_budget_plan_with_items(
        self,
        location_id: str,
        year: int,
        forecast_method: ForecastMethod,
        additional_expenses: Decimal,
        planned_cost_reduction: Decimal,
        items: Sequence[BudgetItem],
    ) -> BudgetPlan:
        """Atomically create a draft plan with its items.

        Raises DuplicatePlanError when the location already has a plan
        for the year.
        """

    def replace_budget_items(
        self,
        plan_id: str,
        items: Sequence[BudgetItem],
    ) -> None:
        """Delete the items of a plan and insert the given ones."""

    def update_budget_plan_status(
        self,
        plan_id: str,
        status: BudgetPlanStatus,
    ) -> None:
        """Persist a new plan status."""


__all__ = ["BudgetStorePort"]
