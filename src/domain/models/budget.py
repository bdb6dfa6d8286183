"""Domain models for budget plans, forecasts and realization."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class BudgetPlanStatus(str, Enum):
    """Approval status of a budget plan."""

    DRAFT = "draft"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    REJECTED = "rejected"


class ForecastMethod(str, Enum):
    """How proposed amounts are derived from history."""

    LAST_YEAR = "last_year"
    AVG_3_YEARS = "avg_3_years"
    MANUAL = "manual"


class BudgetItemKind(str, Enum):
    """Budget line family."""

    INCOME = "income"
    EXPENSE = "expense"


class RealizationStatus(str, Enum):
    """Bucket of actual spend relative to the monthly budget."""

    GRAY = "gray"
    GREEN = "green"
    ORANGE = "orange"
    RED = "red"


@dataclass(frozen=True)
class BudgetItem:
    """Planned annual amount for one catalogue account."""

    account_prefix: str
    account_name: str
    kind: BudgetItemKind
    planned_amount: Decimal
    previous_year_amount: Decimal | None = None
    forecasted_amount: Decimal | None = None


@dataclass(frozen=True)
class BudgetPlan:
    """Budget plan of a location for one year."""

    id: str
    location_id: str
    year: int
    status: BudgetPlanStatus = BudgetPlanStatus.DRAFT
    forecast_method: ForecastMethod = ForecastMethod.LAST_YEAR
    additional_expenses: Decimal = Decimal("0")
    planned_cost_reduction: Decimal = Decimal("0")
    items: tuple[BudgetItem, ...] = ()

    @property
    def annual_expense_budget(self) -> Decimal:
        return sum(
            (
                item.planned_amount
                for item in self.items
                if item.kind is BudgetItemKind.EXPENSE
            ),
            Decimal("0"),
        )


@dataclass(frozen=True)
class BudgetRealization:
    """Actual spend of one month against the monthly budget."""

    year: int
    month: int
    budgeted: Decimal
    actual: Decimal
    percentage: Decimal
    status: RealizationStatus

    @property
    def remaining(self) -> Decimal:
        return self.budgeted - self.actual


@dataclass(frozen=True)
class BudgetDeviation:
    """Actual versus budgeted amount of one plan item."""

    account_prefix: str
    account_name: str
    kind: BudgetItemKind
    budgeted: Decimal
    actual: Decimal
    deviation: Decimal
    percentage: Decimal


__all__ = [
    "BudgetPlanStatus",
    "ForecastMethod",
    "BudgetItemKind",
    "RealizationStatus",
    "BudgetItem",
    "BudgetPlan",
    "BudgetRealization",
    "BudgetDeviation",
]
