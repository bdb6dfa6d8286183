"""Composition root for wiring infrastructure adapters."""

from src.application.ports.budget_store import BudgetStorePort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.ports.report_store import ReportStorePort
from src.application.use_cases.aggregate_period import AggregatePeriodUseCase
from src.application.use_cases.assemble_report import AssembleReportUseCase
from src.application.use_cases.budget_plans import (
    ChangeBudgetPlanStatusUseCase,
    CreateBudgetPlanUseCase,
    UpdateBudgetItemsUseCase,
)
from src.application.use_cases.budget_realization import (
    BudgetRealizationUseCase,
)
from src.application.use_cases.compare_periods import ComparePeriodsUseCase
from src.application.use_cases.forecast_budget import ForecastBudgetUseCase
from src.application.use_cases.report_lifecycle import ChangeReportStatusUseCase
from src.domain.models import ReportCatalogue
from src.infrastructure.budget_repository import SqlAlchemyBudgetStore
from src.infrastructure.catalogue_loader import load_catalogue
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.report_store import SqlAlchemyReportStore
from src.infrastructure.settings import EngineSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the ledger repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db)


def build_report_store(
    db_port: DatabaseEnginePort | None = None,
) -> ReportStorePort:
    """Return the report snapshot store."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyReportStore(resolved_db)


def build_budget_store(
    db_port: DatabaseEnginePort | None = None,
) -> BudgetStorePort:
    """Return the budget plan store."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyBudgetStore(resolved_db)


def build_catalogue(settings: EngineSettings | None = None) -> ReportCatalogue:
    """Return the configured report catalogue."""
    resolved = settings or EngineSettings.from_env()
    return load_catalogue(resolved.catalogue_file, logger=get_app_logger())


def build_report_assembler(
    db_port: DatabaseEnginePort | None = None,
) -> AssembleReportUseCase:
    """Return the report assembler wired to SQLAlchemy adapters."""
    resolved_db = db_port or build_database_adapter()
    return AssembleReportUseCase(
        build_ledger_repository(resolved_db),
        build_report_store(resolved_db),
        catalogue=build_catalogue(),
        logger=get_app_logger(),
    )


def build_budget_forecaster(
    db_port: DatabaseEnginePort | None = None,
) -> ForecastBudgetUseCase:
    """Return the budget forecast use case."""
    resolved_db = db_port or build_database_adapter()
    return ForecastBudgetUseCase(
        build_ledger_repository(resolved_db),
        catalogue=build_catalogue(),
        logger=get_app_logger(),
    )


def build_budget_realization(
    db_port: DatabaseEnginePort | None = None,
) -> BudgetRealizationUseCase:
    """Return the budget realization use case."""
    resolved_db = db_port or build_database_adapter()
    logger = get_app_logger()
    return BudgetRealizationUseCase(
        build_budget_store(resolved_db),
        AggregatePeriodUseCase(build_ledger_repository(resolved_db), logger),
        logger=logger,
    )


def build_report_status_changer(
    db_port: DatabaseEnginePort | None = None,
) -> ChangeReportStatusUseCase:
    """Return the report lifecycle use case."""
    resolved_db = db_port or build_database_adapter()
    return ChangeReportStatusUseCase(
        build_report_store(resolved_db),
        build_report_assembler(resolved_db),
        logger=get_app_logger(),
    )


def build_period_comparator(
    db_port: DatabaseEnginePort | None = None,
) -> ComparePeriodsUseCase:
    """Return the multi-period comparison use case."""
    return ComparePeriodsUseCase(
        build_report_assembler(db_port),
        logger=get_app_logger(),
    )


def build_budget_plan_creator(
    db_port: DatabaseEnginePort | None = None,
) -> CreateBudgetPlanUseCase:
    """Return the use case creating budget plans."""
    resolved_db = db_port or build_database_adapter()
    return CreateBudgetPlanUseCase(
        build_budget_store(resolved_db),
        build_budget_forecaster(resolved_db),
        logger=get_app_logger(),
    )


def build_budget_plan_status_changer(
    db_port: DatabaseEnginePort | None = None,
) -> ChangeBudgetPlanStatusUseCase:
    resolved_db = db_port or build_database_adapter()
    return ChangeBudgetPlanStatusUseCase(
        build_budget_store(resolved_db),
        logger=get_app_logger(),
    )


def build_budget_items_updater(
    db_port: DatabaseEnginePort | None = None,
) -> UpdateBudgetItemsUseCase:
    resolved_db = db_port or build_database_adapter()
    return UpdateBudgetItemsUseCase(
        build_budget_store(resolved_db),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_report_store",
    "build_budget_store",
    "build_catalogue",
    "build_report_assembler",
    "build_budget_forecaster",
    "build_budget_realization",
    "build_report_status_changer",
    "build_period_comparator",
    "build_budget_plan_creator",
    "build_budget_plan_status_changer",
    "build_budget_items_updater",
]
