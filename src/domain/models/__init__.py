"""Domain models package."""

from .accounts import Account, AccountKind, AccountRestriction
from .aggregates import AccountBucket, PeriodAggregate
from .budget import (
    BudgetDeviation,
    BudgetItem,
    BudgetItemKind,
    BudgetPlan,
    BudgetPlanStatus,
    BudgetRealization,
    ForecastMethod,
    RealizationStatus,
)
from .catalogue import (
    CatalogueEntry,
    PositionCategory,
    ReportCatalogue,
    SettlementCategory,
)
from .comparison import Comparison, ComparisonMetric, ReportTotals
from .ledger import (
    Category,
    ClassifiedContribution,
    InconsistentTransaction,
    LegSide,
    Transaction,
)
from .reports import (
    AccountBreakdownLine,
    ClosingBalances,
    FinancialPositionRow,
    IntentionsRow,
    Report,
    ReportDetails,
    ReportSections,
    ReportStatus,
    SectionLine,
    SettlementRow,
    SnapshotRecord,
)

__all__ = [
    "Account",
    "AccountKind",
    "AccountRestriction",
    "AccountBucket",
    "PeriodAggregate",
    "BudgetDeviation",
    "BudgetItem",
    "BudgetItemKind",
    "BudgetPlan",
    "BudgetPlanStatus",
    "BudgetRealization",
    "ForecastMethod",
    "RealizationStatus",
    "CatalogueEntry",
    "PositionCategory",
    "ReportCatalogue",
    "SettlementCategory",
    "Comparison",
    "ComparisonMetric",
    "ReportTotals",
    "Category",
    "ClassifiedContribution",
    "InconsistentTransaction",
    "LegSide",
    "Transaction",
    "AccountBreakdownLine",
    "ClosingBalances",
    "FinancialPositionRow",
    "IntentionsRow",
    "Report",
    "ReportDetails",
    "ReportSections",
    "ReportStatus",
    "SectionLine",
    "SettlementRow",
    "SnapshotRecord",
]
