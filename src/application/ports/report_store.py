"""Port for monthly report headers and their cached snapshots."""

from typing import Protocol

from src.domain.models import Report, ReportDetails, ReportStatus, SnapshotRecord


class ReportStorePort(Protocol):
    """Port exposing report headers and the snapshot cache."""

    def read_report(self, report_id: str) -> Report | None:
        """Return a report header by id."""

    def update_report_status(self, report_id: str, status: ReportStatus) -> None:
        """Persist a new report status."""

    def read_report_details(self, report_id: str) -> ReportDetails | None:
        """Return the cached snapshot of a report."""

    def upsert_report_details(
        self,
        report_id: str,
        details: ReportDetails,
    ) -> None:
        """Replace the cached snapshot of a report."""

    def find_latest_snapshot(
        self,
        location_id: str,
        year: int,
        month: int,
    ) -> SnapshotRecord | None:
        """Return the newest snapshot strictly before ``year``/``month``.

        Only submitted or approved reports count. Draft snapshots go
        stale while their month is still being edited.
        """


__all__ = ["ReportStorePort"]
