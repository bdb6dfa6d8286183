"""SQLAlchemy-backed repository for ledger reads."""

from collections.abc import Iterable
from datetime import date

from sqlalchemy import bindparam, text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import Account, AccountKind, AccountRestriction, Transaction
from src.infrastructure.sql_errors import ledger_store_errors
from src.utils.decimal_utils import coerce_decimal

SELECT_TRANSACTIONS_SQL = text(
    """
    SELECT id, date, debit_account_id, credit_account_id, location_id,
           amount, debit_amount, credit_amount, currency, exchange_rate
    FROM transactions
    WHERE location_id = :location_id
      AND date >= :date_from
      AND date <= :date_to
    ORDER BY date, id
    """
)

SELECT_ACCOUNTS_SQL = text(
    """
    SELECT id, number, name, type
    FROM accounts
    ORDER BY number
    """
)

SELECT_ACCOUNTS_BY_NUMBER_SQL = text(
    """
    SELECT id, number, name, type
    FROM accounts
    WHERE number IN :numbers
    ORDER BY number
    """
).bindparams(bindparam("numbers", expanding=True))

SELECT_RESTRICTIONS_SQL = text(
    """
    SELECT category_prefix, account_number_prefix, is_restricted
    FROM account_category_restrictions
    WHERE category_prefix = :category_prefix
    ORDER BY account_number_prefix
    """
)

SELECT_LOCATION_IDENTIFIER_SQL = text(
    """
    SELECT location_identifier
    FROM locations
    WHERE id = :location_id
    """
)

SELECT_FIRST_TRANSACTION_DATE_SQL = text(
    """
    SELECT MIN(date) AS first_date
    FROM transactions
    WHERE location_id = :location_id
    """
)


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for ledger transactions and accounts."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_transactions(
        self,
        location_id: str,
        date_from: date,
        date_to: date,
    ) -> list[Transaction]:
        """Return transactions of a location between inclusive dates."""
        params = {
            "location_id": location_id,
            "date_from": date_from,
            "date_to": date_to,
        }
        engine = self._db_port.get_ledger_engine()
        with ledger_store_errors("fetching transactions"):
            with engine.connect() as conn:
                rows = conn.execute(SELECT_TRANSACTIONS_SQL, params).all()
        return [self._to_transaction(row) for row in rows]

    def fetch_accounts(
        self,
        numbers: Iterable[str] | None = None,
    ) -> list[Account]:
        """Return accounts, optionally limited to the given numbers."""
        if numbers is None:
            query, params = SELECT_ACCOUNTS_SQL, {}
        else:
            numbers = list(numbers)
            if not numbers:
                return []
            query, params = SELECT_ACCOUNTS_BY_NUMBER_SQL, {"numbers": numbers}
        engine = self._db_port.get_ledger_engine()
        with ledger_store_errors("fetching accounts"):
            with engine.connect() as conn:
                rows = conn.execute(query, params).all()
        return [
            Account(
                id=str(row.id),
                number=row.number,
                name=row.name,
                kind=self._parse_kind(row.type),
            )
            for row in rows
        ]

    def fetch_restrictions(
        self,
        location_category_prefix: str,
    ) -> list[AccountRestriction]:
        """Return restriction rows for a location category."""
        engine = self._db_port.get_ledger_engine()
        with ledger_store_errors("fetching account restrictions"):
            with engine.connect() as conn:
                rows = conn.execute(
                    SELECT_RESTRICTIONS_SQL,
                    {"category_prefix": location_category_prefix},
                ).all()
        return [
            AccountRestriction(
                location_category_prefix=row.category_prefix,
                account_number_prefix=row.account_number_prefix,
                is_restricted=bool(row.is_restricted),
            )
            for row in rows
        ]

    def fetch_location_identifier(self, location_id: str) -> str | None:
        engine = self._db_port.get_ledger_engine()
        with ledger_store_errors("fetching the location identifier"):
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_LOCATION_IDENTIFIER_SQL,
                    {"location_id": location_id},
                ).first()
        if row is None:
            return None
        return row.location_identifier

    def fetch_first_transaction_date(self, location_id: str) -> date | None:
        engine = self._db_port.get_ledger_engine()
        with ledger_store_errors("fetching the first transaction date"):
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_FIRST_TRANSACTION_DATE_SQL,
                    {"location_id": location_id},
                ).first()
        if row is None:
            return None
        return row.first_date

    @staticmethod
    def _to_transaction(row) -> Transaction:
        return Transaction(
            id=str(row.id),
            date=row.date,
            debit_account_id=(
                str(row.debit_account_id) if row.debit_account_id else None
            ),
            credit_account_id=(
                str(row.credit_account_id) if row.credit_account_id else None
            ),
            location_id=str(row.location_id),
            amount=_optional_decimal(row.amount),
            debit_amount=_optional_decimal(row.debit_amount),
            credit_amount=_optional_decimal(row.credit_amount),
            currency=row.currency or "PLN",
            exchange_rate=_optional_decimal(row.exchange_rate),
        )

    @staticmethod
    def _parse_kind(raw: str | None) -> AccountKind | None:
        if not raw:
            return None
        try:
            return AccountKind(raw.strip().lower())
        except ValueError:
            return None


def _optional_decimal(value):
    if value is None:
        return None
    return coerce_decimal(value)


__all__ = ["SqlAlchemyLedgerRepository"]
