"""Domain models for assembled reports and their cached snapshots."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum

from src.domain.models.ledger import InconsistentTransaction


class ReportStatus(str, Enum):
    """Review status of a monthly report."""

    DRAFT = "draft"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    TO_BE_CORRECTED = "to_be_corrected"


@dataclass(frozen=True)
class Report:
    """Monthly report header as kept by the report store."""

    id: str
    location_id: str
    month: int
    year: int
    status: ReportStatus = ReportStatus.DRAFT


@dataclass(frozen=True)
class SectionLine:
    """Catalogue line of the income or expense section."""

    prefix: str
    name: str
    amount: Decimal


@dataclass(frozen=True)
class AccountBreakdownLine:
    """Per synthetic account amount, including non-catalogue accounts."""

    account_number: str
    name: str
    amount: Decimal


@dataclass(frozen=True)
class FinancialPositionRow:
    """Cash/bank category row: ``closing = opening + debits - credits``."""

    key: str
    name: str
    opening: Decimal
    debits: Decimal
    credits: Decimal
    closing: Decimal


@dataclass(frozen=True)
class IntentionsRow:
    """Carried intentions balance."""

    opening: Decimal
    received: Decimal
    celebrated_and_given: Decimal
    closing: Decimal


@dataclass(frozen=True)
class SettlementRow:
    """Receivables and payables matrix for one settlement category."""

    key: str
    name: str
    receivables_opening: Decimal
    receivables_change: Decimal
    receivables_closing: Decimal
    payables_opening: Decimal
    payables_change: Decimal
    payables_closing: Decimal


@dataclass(frozen=True)
class ClosingBalances:
    """Balances carried from one period into the next."""

    financial_position: dict[str, Decimal] = field(default_factory=dict)
    intentions: Decimal = Decimal("0")
    receivables: dict[str, Decimal] = field(default_factory=dict)
    payables: dict[str, Decimal] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Return a JSON-friendly representation with string amounts."""
        return {
            "financial_position": {
                key: str(value)
                for key, value in sorted(self.financial_position.items())
            },
            "intentions": str(self.intentions),
            "receivables": {
                key: str(value)
                for key, value in sorted(self.receivables.items())
            },
            "payables": {
                key: str(value)
                for key, value in sorted(self.payables.items())
            },
        }

    @classmethod
    def from_dict(cls, payload: dict | None) -> "ClosingBalances":
        """Build balances from :meth:`to_dict` output."""
        if not payload:
            return cls()
        return cls(
            financial_position={
                key: Decimal(value)
                for key, value in payload.get("financial_position", {}).items()
            },
            intentions=Decimal(payload.get("intentions", "0")),
            receivables={
                key: Decimal(value)
                for key, value in payload.get("receivables", {}).items()
            },
            payables={
                key: Decimal(value)
                for key, value in payload.get("payables", {}).items()
            },
        )


@dataclass(frozen=True)
class ReportSections:
    """Five-section report with its control totals."""

    location_id: str
    period_start: date
    period_end: date
    catalogue_version: str
    income: tuple[SectionLine, ...]
    expense: tuple[SectionLine, ...]
    income_breakdown: tuple[AccountBreakdownLine, ...]
    expense_breakdown: tuple[AccountBreakdownLine, ...]
    financial_position: tuple[FinancialPositionRow, ...]
    financial_position_total: FinancialPositionRow
    intentions: IntentionsRow
    settlements: tuple[SettlementRow, ...]
    income_total: Decimal
    expense_total: Decimal
    warnings: tuple[InconsistentTransaction, ...] = ()

    @property
    def balance(self) -> Decimal:
        return self.income_total - self.expense_total

    @property
    def settlements_total(self) -> Decimal:
        """Return the net receivables minus payables change of the period."""
        return sum(
            (
                row.receivables_change - row.payables_change
                for row in self.settlements
            ),
            Decimal("0"),
        )

    @property
    def closing_balances(self) -> ClosingBalances:
        return ClosingBalances(
            financial_position={
                row.key: row.closing for row in self.financial_position
            },
            intentions=self.intentions.closing,
            receivables={
                row.key: row.receivables_closing for row in self.settlements
            },
            payables={
                row.key: row.payables_closing for row in self.settlements
            },
        )


@dataclass(frozen=True)
class ReportDetails:
    """Materialized snapshot of a report assembly run."""

    income_total: Decimal
    expense_total: Decimal
    balance: Decimal
    settlements_total: Decimal
    opening_balance: Decimal
    closing_balance: Decimal = Decimal("0")
    closing_balances: ClosingBalances = field(default_factory=ClosingBalances)

    @classmethod
    def from_sections(cls, sections: ReportSections) -> "ReportDetails":
        """Build the snapshot of an assembled report."""
        total_row = sections.financial_position_total
        return cls(
            income_total=sections.income_total,
            expense_total=sections.expense_total,
            balance=sections.balance,
            settlements_total=sections.settlements_total,
            opening_balance=total_row.opening,
            closing_balance=total_row.closing,
            closing_balances=sections.closing_balances,
        )


@dataclass(frozen=True)
class SnapshotRecord:
    """Cached snapshot together with the period it belongs to."""

    report_id: str
    year: int
    month: int
    details: ReportDetails


__all__ = [
    "ReportStatus",
    "Report",
    "SectionLine",
    "AccountBreakdownLine",
    "FinancialPositionRow",
    "IntentionsRow",
    "SettlementRow",
    "ClosingBalances",
    "ReportSections",
    "ReportDetails",
    "SnapshotRecord",
]
