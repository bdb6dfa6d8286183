"""Use case to assemble monthly reports with carried balances."""

from datetime import timedelta

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.ports.report_store import ReportStorePort
from src.application.use_cases.aggregate_period import AggregatePeriodUseCase
from src.domain.constants import DEFAULT_CATALOGUE
from src.domain.models import (
    ClosingBalances,
    ReportCatalogue,
    ReportDetails,
    ReportSections,
)
from src.domain.services.report_assembly import assemble_sections, carry_forward
from src.domain.services.validation import validate_month
from src.infrastructure.logging.logger import get_app_logger
from src.utils.date_utils import month_bounds, next_month


class AssembleReportUseCase:
    """Build the five-section report of a location for a month.

    Opening balances come from the newest cached snapshot before the month,
    rolled forward over the ledger activity since that snapshot. Without a
    snapshot the balances are rolled forward from the first transaction of
    the location.
    """

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        report_store: ReportStorePort,
        catalogue: ReportCatalogue | None = None,
        aggregator: AggregatePeriodUseCase | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger reads.
            report_store: Port providing cached snapshots.
            catalogue: Report catalogue; defaults to the built-in one.
            aggregator: Optional aggregation use case to reuse.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._report_store = report_store
        self._catalogue = catalogue or DEFAULT_CATALOGUE
        self._logger = logger or get_app_logger()
        self._aggregator = aggregator or AggregatePeriodUseCase(
            ledger_repository,
            logger=self._logger,
        )

    def execute(
        self,
        location_id: str,
        month: int,
        year: int,
        report_id: str | None = None,
    ) -> ReportSections:
        """Return the report of one month.

        Args:
            location_id: Reporting location.
            month: Month number, 1..12.
            year: Calendar year.
            report_id: When given, the snapshot of this report is replaced
                with the freshly computed totals.

        Returns:
            ReportSections: Assembled sections and control totals.

        Raises:
            InvalidPeriodError: If ``month`` is outside 1..12.
        """
        validate_month(month)
        opening = self.opening_balances(location_id, year, month)
        aggregate = self._aggregator.execute_month(location_id, year, month)
        sections = assemble_sections(aggregate, self._catalogue, opening)
        self._logger.info(
            f"Report {location_id} {year}-{month:02d}: "
            f"income={sections.income_total}, "
            f"expense={sections.expense_total}, balance={sections.balance}"
        )
        if report_id:
            self.store_snapshot(report_id, sections)
        return sections

    def execute_year_to_date(
        self,
        location_id: str,
        month: int,
        year: int,
    ) -> ReportSections:
        """Return one report covering January through ``month``."""
        validate_month(month)
        opening = self.opening_balances(location_id, year, 1)
        aggregate = self._aggregator.execute_year_to_date(
            location_id,
            year,
            month,
        )
        return assemble_sections(aggregate, self._catalogue, opening)

    def execute_year(self, location_id: str, year: int) -> list[ReportSections]:
        """Return the twelve monthly reports of a year in order.

        Each month opens with the closing balances of the month before.
        """
        opening = self.opening_balances(location_id, year, 1)
        reports = []
        for month in range(1, 13):
            aggregate = self._aggregator.execute_month(location_id, year, month)
            sections = assemble_sections(aggregate, self._catalogue, opening)
            reports.append(sections)
            opening = sections.closing_balances
        return reports

    def opening_balances(
        self,
        location_id: str,
        year: int,
        month: int,
    ) -> ClosingBalances:
        """Return the balances carried into the first day of a month."""
        month_start, _ = month_bounds(year, month)
        history_end = month_start - timedelta(days=1)

        snapshot = self._report_store.find_latest_snapshot(
            location_id,
            year,
            month,
        )
        if snapshot is not None:
            base = snapshot.details.closing_balances
            start_year, start_month = next_month(snapshot.year, snapshot.month)
            history_start, _ = month_bounds(start_year, start_month)
            self._logger.info(
                f"Carrying balances for {location_id} from snapshot "
                f"{snapshot.report_id} ({snapshot.year}-{snapshot.month:02d})"
            )
        else:
            base = ClosingBalances()
            history_start = self._ledger_repository.fetch_first_transaction_date(
                location_id
            )
            if history_start is None:
                self._logger.info(
                    f"No ledger history for {location_id}; opening at zero"
                )
                return base
            self._logger.info(
                f"Carrying balances for {location_id} from history start "
                f"{history_start}"
            )

        if history_start > history_end:
            return base
        aggregate = self._aggregator.execute(
            location_id,
            history_start,
            history_end,
        )
        return carry_forward(base, aggregate, self._catalogue)

    def store_snapshot(
        self,
        report_id: str,
        sections: ReportSections,
    ) -> ReportDetails:
        """Replace the cached snapshot of a report."""
        details = ReportDetails.from_sections(sections)
        self._report_store.upsert_report_details(report_id, details)
        self._logger.info(f"Snapshot stored for report {report_id}")
        return details


__all__ = ["AssembleReportUseCase"]
