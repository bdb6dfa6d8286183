"""Use case to move monthly reports through their review lifecycle."""

from dataclasses import replace

from src.application.ports.report_store import ReportStorePort
from src.application.use_cases.assemble_report import AssembleReportUseCase
from src.domain.errors import (
    InvalidStatusTransitionError,
    NotFoundError,
    invalid_transition,
)
from src.domain.models import Report, ReportStatus
from src.infrastructure.logging.logger import get_app_logger

REPORT_TRANSITIONS = {
    ReportStatus.DRAFT: {ReportStatus.SUBMITTED},
    ReportStatus.SUBMITTED: {
        ReportStatus.APPROVED,
        ReportStatus.TO_BE_CORRECTED,
        ReportStatus.DRAFT,
    },
    ReportStatus.TO_BE_CORRECTED: {ReportStatus.DRAFT},
    ReportStatus.APPROVED: set(),
}

# Statuses whose entry recomputes the cached snapshot.
SNAPSHOT_REFRESH_STATUSES = {ReportStatus.DRAFT, ReportStatus.SUBMITTED}


class ChangeReportStatusUseCase:
    """Validate a report status change and refresh its snapshot."""

    def __init__(
        self,
        report_store: ReportStorePort,
        report_assembler: AssembleReportUseCase,
        logger=None,
    ) -> None:
        self._report_store = report_store
        self._report_assembler = report_assembler
        self._logger = logger or get_app_logger()

    def execute(self, report_id: str, status: ReportStatus | str) -> Report:
        """Change the status of a report.

        Args:
            report_id: Report to update.
            status: Target status.

        Returns:
            Report: Report header with the new status.

        Raises:
            NotFoundError: If the report does not exist.
            InvalidStatusTransitionError: If the change is not allowed.
        """
        target = ReportStatus(status)
        report = self._report_store.read_report(report_id)
        if report is None:
            raise NotFoundError(f"Report {report_id} not found")
        if target not in REPORT_TRANSITIONS[report.status]:
            raise InvalidStatusTransitionError(
                invalid_transition("report", report.status.value, target.value)
            )

        if target in SNAPSHOT_REFRESH_STATUSES:
            self._report_assembler.execute(
                report.location_id,
                report.month,
                report.year,
                report_id=report.id,
            )
        self._report_store.update_report_status(report.id, target)
        self._logger.info(
            f"Report {report.id} moved from {report.status.value} "
            f"to {target.value}"
        )
        return replace(report, status=target)


__all__ = ["REPORT_TRANSITIONS", "ChangeReportStatusUseCase"]
