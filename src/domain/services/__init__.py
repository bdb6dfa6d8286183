"""Domain services package."""

from .chart_of_accounts import (
    belongs_to,
    budget_account_prefix,
    infer_kind,
    location_category_prefix,
    matches_prefix,
    synthetic_number,
)
from .validation import (
    find_transaction_inconsistency,
    validate_account_kind,
    validate_month,
    validate_period,
)
from .classification import categorize_leg, classify_transaction
from .aggregation import (
    aggregate_contributions,
    aggregate_transactions,
    merge_aggregates,
)
from .report_assembly import assemble_sections, carry_forward
from .budget import (
    build_deviations,
    build_realization,
    forecast_items,
    monthly_budget,
    realization_status,
)
from .comparison import compare_reports, compare_values, sum_totals

__all__ = [
    "belongs_to",
    "budget_account_prefix",
    "infer_kind",
    "location_category_prefix",
    "matches_prefix",
    "synthetic_number",
    "find_transaction_inconsistency",
    "validate_account_kind",
    "validate_month",
    "validate_period",
    "categorize_leg",
    "classify_transaction",
    "aggregate_contributions",
    "aggregate_transactions",
    "merge_aggregates",
    "assemble_sections",
    "carry_forward",
    "build_deviations",
    "build_realization",
    "forecast_items",
    "monthly_budget",
    "realization_status",
    "compare_reports",
    "compare_values",
    "sum_totals",
]
