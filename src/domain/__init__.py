"""Domain package for ledger classification and reporting rules."""

from .constants import DEFAULT_CATALOGUE
from .errors import (
    DataUnavailableError,
    DuplicatePlanError,
    EngineError,
    InvalidPeriodError,
    InvalidRequestError,
    InvalidStatusTransitionError,
    NotFoundError,
    PlanNotEditableError,
)
from .models import (
    Account,
    BudgetItem,
    BudgetPlan,
    PeriodAggregate,
    ReportCatalogue,
    ReportDetails,
    ReportSections,
    Transaction,
)
from .services import (
    aggregate_transactions,
    assemble_sections,
    classify_transaction,
    compare_reports,
    forecast_items,
    synthetic_number,
)
from .policies import is_restricted, restricted_prefixes

__all__ = [
    "DEFAULT_CATALOGUE",
    "DataUnavailableError",
    "DuplicatePlanError",
    "EngineError",
    "InvalidPeriodError",
    "InvalidRequestError",
    "InvalidStatusTransitionError",
    "NotFoundError",
    "PlanNotEditableError",
    "Account",
    "BudgetItem",
    "BudgetPlan",
    "PeriodAggregate",
    "ReportCatalogue",
    "ReportDetails",
    "ReportSections",
    "Transaction",
    "aggregate_transactions",
    "assemble_sections",
    "classify_transaction",
    "compare_reports",
    "forecast_items",
    "synthetic_number",
    "is_restricted",
    "restricted_prefixes",
]
