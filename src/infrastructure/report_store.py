"""SQLAlchemy-backed store for report headers and snapshots."""

import json

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.report_store import ReportStorePort
from src.domain.models import (
    ClosingBalances,
    Report,
    ReportDetails,
    ReportStatus,
    SnapshotRecord,
)
from src.infrastructure.sql_errors import ledger_store_errors
from src.utils.decimal_utils import coerce_decimal

SELECT_REPORT_SQL = text(
    """
    SELECT id, location_id, month, year, status
    FROM reports
    WHERE id = :report_id
    """
)

UPDATE_REPORT_STATUS_SQL = text(
    """
    UPDATE reports
    SET status = :status, updated_at = CURRENT_TIMESTAMP
    WHERE id = :report_id
    """
)

SELECT_REPORT_DETAILS_SQL = text(
    """
    SELECT income_total, expense_total, balance, settlements_total,
           opening_balance, closing_balance, closing_balances
    FROM report_details
    WHERE report_id = :report_id
    """
)

UPSERT_REPORT_DETAILS_SQL = text(
    """
    INSERT INTO report_details (
        report_id,
        income_total,
        expense_total,
        balance,
        settlements_total,
        opening_balance,
        closing_balance,
        closing_balances
    )
    VALUES (
        :report_id,
        :income_total,
        :expense_total,
        :balance,
        :settlements_total,
        :opening_balance,
        :closing_balance,
        :closing_balances
    )
    ON CONFLICT (report_id) DO UPDATE SET
        income_total = EXCLUDED.income_total,
        expense_total = EXCLUDED.expense_total,
        balance = EXCLUDED.balance,
        settlements_total = EXCLUDED.settlements_total,
        opening_balance = EXCLUDED.opening_balance,
        closing_balance = EXCLUDED.closing_balance,
        closing_balances = EXCLUDED.closing_balances,
        updated_at = CURRENT_TIMESTAMP
    """
)

SELECT_LATEST_SNAPSHOT_SQL = text(
    """
    SELECT r.id AS report_id, r.year, r.month,
           d.income_total, d.expense_total, d.balance, d.settlements_total,
           d.opening_balance, d.closing_balance, d.closing_balances
    FROM report_details d
    JOIN reports r ON r.id = d.report_id
    WHERE r.location_id = :location_id
      AND (r.year < :year OR (r.year = :year AND r.month < :month))
      AND r.status IN ('submitted', 'approved')
      AND d.closing_balances IS NOT NULL
    ORDER BY r.year DESC, r.month DESC
    LIMIT 1
    """
)


class SqlAlchemyReportStore(ReportStorePort):
    """Report store backed by SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def read_report(self, report_id: str) -> Report | None:
        engine = self._db_port.get_ledger_engine()
        with ledger_store_errors("reading a report"):
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_REPORT_SQL,
                    {"report_id": report_id},
                ).first()
        if row is None:
            return None
        return Report(
            id=str(row.id),
            location_id=str(row.location_id),
            month=int(row.month),
            year=int(row.year),
            status=ReportStatus(row.status),
        )

    def update_report_status(self, report_id: str, status: ReportStatus) -> None:
        engine = self._db_port.get_ledger_engine()
        with ledger_store_errors("updating a report status"):
            with engine.begin() as conn:
                conn.execute(
                    UPDATE_REPORT_STATUS_SQL,
                    {"report_id": report_id, "status": ReportStatus(status).value},
                )

    def read_report_details(self, report_id: str) -> ReportDetails | None:
        engine = self._db_port.get_ledger_engine()
        with ledger_store_errors("reading a report snapshot"):
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_REPORT_DETAILS_SQL,
                    {"report_id": report_id},
                ).first()
        if row is None:
            return None
        return self._to_details(row)

    def upsert_report_details(
        self,
        report_id: str,
        details: ReportDetails,
    ) -> None:
        """Replace the snapshot of a report in a single statement."""
        params = {
            "report_id": report_id,
            "income_total": details.income_total,
            "expense_total": details.expense_total,
            "balance": details.balance,
            "settlements_total": details.settlements_total,
            "opening_balance": details.opening_balance,
            "closing_balance": details.closing_balance,
            "closing_balances": json.dumps(details.closing_balances.to_dict()),
        }
        engine = self._db_port.get_ledger_engine()
        with ledger_store_errors("storing a report snapshot"):
            with engine.begin() as conn:
                conn.execute(UPSERT_REPORT_DETAILS_SQL, params)

    def find_latest_snapshot(
        self,
        location_id: str,
        year: int,
        month: int,
    ) -> SnapshotRecord | None:
        params = {"location_id": location_id, "year": year, "month": month}
        engine = self._db_port.get_ledger_engine()
        with ledger_store_errors("looking up the latest snapshot"):
            with engine.connect() as conn:
                row = conn.execute(SELECT_LATEST_SNAPSHOT_SQL, params).first()
        if row is None:
            return None
        return SnapshotRecord(
            report_id=str(row.report_id),
            year=int(row.year),
            month=int(row.month),
            details=self._to_details(row),
        )

    @staticmethod
    def _to_details(row) -> ReportDetails:
        raw_balances = row.closing_balances
        if isinstance(raw_balances, str):
            raw_balances = json.loads(raw_balances)
        return ReportDetails(
            income_total=coerce_decimal(row.income_total),
            expense_total=coerce_decimal(row.expense_total),
            balance=coerce_decimal(row.balance),
            settlements_total=coerce_decimal(row.settlements_total),
            opening_balance=coerce_decimal(row.opening_balance),
            closing_balance=coerce_decimal(row.closing_balance),
            closing_balances=ClosingBalances.from_dict(raw_balances),
        )


__all__ = ["SqlAlchemyReportStore"]
