"""Versioned report catalogues consumed by the report assembler."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogueEntry:
    """Income or expense line of the fixed report catalogue."""

    prefix: str
    name: str


@dataclass(frozen=True)
class PositionCategory:
    """Named cash/bank category mapped to ``1xx`` prefixes."""

    key: str
    name: str
    prefixes: tuple[str, ...]


@dataclass(frozen=True)
class SettlementCategory:
    """Named receivables/payables category mapped to account prefixes."""

    key: str
    name: str
    prefixes: tuple[str, ...]


@dataclass(frozen=True)
class ReportCatalogue:
    """Configuration describing the fixed sections of a monthly report."""

    version: str
    income: tuple[CatalogueEntry, ...]
    expense: tuple[CatalogueEntry, ...]
    financial_position: tuple[PositionCategory, ...]
    settlements: tuple[SettlementCategory, ...]
    intentions_prefix: str = "210"
    intentions_name: str = "Intencje"


__all__ = [
    "CatalogueEntry",
    "PositionCategory",
    "SettlementCategory",
    "ReportCatalogue",
]
