"""Application ports package."""

from .budget_store import BudgetStorePort
from .database import DatabaseEnginePort
from .ledger_repository import LedgerRepositoryPort
from .report_store import ReportStorePort

__all__ = [
    "BudgetStorePort",
    "DatabaseEnginePort",
    "LedgerRepositoryPort",
    "ReportStorePort",
]
