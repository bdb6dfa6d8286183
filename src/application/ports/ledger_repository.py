"""Port for ledger reads consumed by the aggregation engine."""

from collections.abc import Iterable
from datetime import date
from typing import Protocol

from src.domain.models import Account, AccountRestriction, Transaction


class LedgerRepositoryPort(Protocol):
    """Port exposing transactions, accounts and restrictions."""

    def fetch_transactions(
        self,
        location_id: str,
        date_from: date,
        date_to: date,
    ) -> list[Transaction]:
        """Return transactions of a location within inclusive bounds."""

    def fetch_accounts(
        self,
        numbers: Iterable[str] | None = None,
    ) -> list[Account]:
        """Return accounts, optionally limited to the given numbers."""

    def fetch_restrictions(
        self,
        location_category_prefix: str,
    ) -> list[AccountRestriction]:
        """Return restriction rows for a location category."""

    def fetch_location_identifier(self, location_id: str) -> str | None:
        """Return the hyphenated identifier of a location, e.g. ``1-3``."""

    def fetch_first_transaction_date(self, location_id: str) -> date | None:
        """Return the date of the earliest transaction of a location."""


__all__ = ["LedgerRepositoryPort"]
