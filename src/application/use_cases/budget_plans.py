"""Use cases to create budget plans and move them through approval."""

from collections.abc import Sequence
from dataclasses import replace
from decimal import Decimal

from src.application.ports.budget_store import BudgetStorePort
from src.application.use_cases.forecast_budget import (
    ForecastBudgetUseCase,
    parse_forecast_method,
)
from src.domain.errors import (
    DuplicatePlanError,
    InvalidStatusTransitionError,
    NotFoundError,
    PlanNotEditableError,
    duplicate_plan,
    invalid_transition,
)
from src.domain.models import BudgetItem, BudgetPlan, BudgetPlanStatus, ForecastMethod
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal

PLAN_TRANSITIONS = {
    BudgetPlanStatus.DRAFT: {BudgetPlanStatus.SUBMITTED},
    BudgetPlanStatus.SUBMITTED: {
        BudgetPlanStatus.APPROVED,
        BudgetPlanStatus.REJECTED,
    },
    BudgetPlanStatus.REJECTED: {BudgetPlanStatus.DRAFT},
    BudgetPlanStatus.APPROVED: set(),
}


class CreateBudgetPlanUseCase:
    """Create the single budget plan of a location and year."""

    def __init__(
        self,
        budget_store: BudgetStorePort,
        forecaster: ForecastBudgetUseCase,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            budget_store: Port persisting plans and items.
            forecaster: Forecast use case proposing the items.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._budget_store = budget_store
        self._forecaster = forecaster
        self._logger = logger or get_app_logger()

    def execute(
        self,
        location_id: str,
        year: int,
        method: ForecastMethod | str = ForecastMethod.LAST_YEAR,
        additional_expenses=Decimal("0"),
        planned_cost_reduction=Decimal("0"),
        items: Sequence[BudgetItem] | None = None,
    ) -> BudgetPlan:
        """Create a draft plan with forecast or given items.

        Args:
            location_id: Location the plan belongs to.
            year: Plan year.
            method: Forecast method used when ``items`` is not given.
            additional_expenses: Manual expense increase.
            planned_cost_reduction: Manual expense decrease.
            items: Explicit items; skips the forecast when given.

        Returns:
            BudgetPlan: Created plan with its items.

        Raises:
            DuplicatePlanError: If the location already has a plan for the
                year. Nothing is written in that case, including when a
                concurrent create wins the race.
        """
        method = parse_forecast_method(method)
        if self._budget_store.read_budget_plan(location_id, year) is not None:
            raise DuplicatePlanError(duplicate_plan(location_id, year))

        additional_expenses = coerce_decimal(additional_expenses)
        planned_cost_reduction = coerce_decimal(planned_cost_reduction)
        if items is None:
            items = self._forecaster.execute(
                location_id,
                year,
                method,
                additional_expenses,
                planned_cost_reduction,
            )

        plan = self._budget_store.create_budget_plan_with_items(
            location_id,
            year,
            method,
            additional_expenses,
            planned_cost_reduction,
            items,
        )
        self._logger.info(
            f"Budget plan {plan.id} created for {location_id} {year} "
            f"with {len(items)} items"
        )
        return plan


class ChangeBudgetPlanStatusUseCase:
    """Validate and persist budget plan status changes."""

    def __init__(self, budget_store: BudgetStorePort, logger=None) -> None:
        self._budget_store = budget_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        plan_id: str,
        status: BudgetPlanStatus | str,
    ) -> BudgetPlan:
        target = BudgetPlanStatus(status)
        plan = _require_plan(self._budget_store, plan_id)
        if target not in PLAN_TRANSITIONS[plan.status]:
            raise InvalidStatusTransitionError(
                invalid_transition("budget plan", plan.status.value, target.value)
            )
        self._budget_store.update_budget_plan_status(plan.id, target)
        self._logger.info(
            f"Budget plan {plan.id} moved from {plan.status.value} "
            f"to {target.value}"
        )
        return replace(plan, status=target)


class UpdateBudgetItemsUseCase:
    """Replace the items of a draft budget plan."""

    def __init__(self, budget_store: BudgetStorePort, logger=None) -> None:
        self._budget_store = budget_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        plan_id: str,
        items: Sequence[BudgetItem],
    ) -> BudgetPlan:
        """Replace all items of a plan.

        Raises:
            NotFoundError: If the plan does not exist.
            PlanNotEditableError: If the plan is not a draft.
        """
        plan = _require_plan(self._budget_store, plan_id)
        if plan.status is not BudgetPlanStatus.DRAFT:
            raise PlanNotEditableError(
                f"Budget plan {plan.id} is {plan.status.value}; "
                "items can only change while draft"
            )
        self._budget_store.replace_budget_items(plan.id, items)
        self._logger.info(
            f"Budget plan {plan.id} items replaced ({len(items)} items)"
        )
        return replace(plan, items=tuple(items))


def _require_plan(budget_store: BudgetStorePort, plan_id: str) -> BudgetPlan:
    plan = budget_store.read_budget_plan_by_id(plan_id)
    if plan is None:
        raise NotFoundError(f"Budget plan {plan_id} not found")
    return plan


__all__ = [
    "PLAN_TRANSITIONS",
    "CreateBudgetPlanUseCase",
    "ChangeBudgetPlanStatusUseCase",
    "UpdateBudgetItemsUseCase",
]
