"""Application use cases package."""

from .aggregate_period import AggregatePeriodUseCase
from .assemble_report import AssembleReportUseCase
from .report_lifecycle import ChangeReportStatusUseCase
from .forecast_budget import ForecastBudgetUseCase
from .budget_plans import (
    ChangeBudgetPlanStatusUseCase,
    CreateBudgetPlanUseCase,
    UpdateBudgetItemsUseCase,
)
from .budget_realization import BudgetRealizationUseCase
from .compare_periods import ComparePeriodsUseCase

__all__ = [
    "AggregatePeriodUseCase",
    "AssembleReportUseCase",
    "ChangeReportStatusUseCase",
    "ForecastBudgetUseCase",
    "ChangeBudgetPlanStatusUseCase",
    "CreateBudgetPlanUseCase",
    "UpdateBudgetItemsUseCase",
    "BudgetRealizationUseCase",
    "ComparePeriodsUseCase",
]
