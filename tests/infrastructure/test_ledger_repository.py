"""Tests for SqlAlchemyLedgerRepository."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from src.domain.errors import DataUnavailableError
from src.domain.models import AccountKind
from src.infrastructure.ledger_repository import (
    SELECT_ACCOUNTS_BY_NUMBER_SQL,
    SELECT_ACCOUNTS_SQL,
    SqlAlchemyLedgerRepository,
)


def _repository(conn: MagicMock) -> SqlAlchemyLedgerRepository:
    engine = MagicMock()
    engine.connect.return_value.__enter__.return_value = conn
    db_port = MagicMock()
    db_port.get_ledger_engine.return_value = engine
    return SqlAlchemyLedgerRepository(db_port)


def test_fetch_transactions_maps_rows():
    conn = MagicMock()
    conn.execute.return_value.all.return_value = [
        SimpleNamespace(
            id=1,
            date=date(2024, 3, 5),
            debit_account_id=10,
            credit_account_id=None,
            location_id="loc-1",
            amount=12.5,
            debit_amount=None,
            credit_amount="7.25",
            currency=None,
            exchange_rate=None,
        )
    ]
    repository = _repository(conn)

    transactions = repository.fetch_transactions(
        "loc-1",
        date(2024, 3, 1),
        date(2024, 3, 31),
    )

    assert len(transactions) == 1
    tx = transactions[0]
    assert tx.id == "1"
    assert tx.debit_account_id == "10"
    assert tx.credit_account_id is None
    assert tx.amount == Decimal("12.5")
    assert tx.debit_amount is None
    assert tx.credit_amount == Decimal("7.25")
    assert tx.currency == "PLN"
    params = conn.execute.call_args.args[1]
    assert params == {
        "location_id": "loc-1",
        "date_from": date(2024, 3, 1),
        "date_to": date(2024, 3, 31),
    }


def test_fetch_accounts_parses_kind():
    conn = MagicMock()
    conn.execute.return_value.all.return_value = [
        SimpleNamespace(id=1, number="401-1-3", name="Biurowe", type="Expense"),
        SimpleNamespace(id=2, number="999", name="Odd", type="weird"),
        SimpleNamespace(id=3, number="100", name="Kasa", type=None),
    ]
    repository = _repository(conn)

    accounts = repository.fetch_accounts()

    assert [a.kind for a in accounts] == [AccountKind.EXPENSE, None, None]
    assert conn.execute.call_args.args[0] is SELECT_ACCOUNTS_SQL


def test_fetch_accounts_by_number_uses_expanding_query():
    conn = MagicMock()
    conn.execute.return_value.all.return_value = []
    repository = _repository(conn)

    repository.fetch_accounts(numbers=("701-1-3", "401-1-3"))

    query, params = conn.execute.call_args.args
    assert query is SELECT_ACCOUNTS_BY_NUMBER_SQL
    assert params == {"numbers": ["701-1-3", "401-1-3"]}


def test_fetch_accounts_with_empty_numbers_skips_query():
    conn = MagicMock()
    repository = _repository(conn)

    assert repository.fetch_accounts(numbers=[]) == []
    conn.execute.assert_not_called()


def test_fetch_restrictions_maps_rows():
    conn = MagicMock()
    conn.execute.return_value.all.return_value = [
        SimpleNamespace(
            category_prefix="D",
            account_number_prefix="714",
            is_restricted=1,
        )
    ]
    repository = _repository(conn)

    restrictions = repository.fetch_restrictions("D")

    assert restrictions[0].location_category_prefix == "D"
    assert restrictions[0].account_number_prefix == "714"
    assert restrictions[0].is_restricted is True


def test_fetch_location_identifier_returns_none_for_unknown_location():
    conn = MagicMock()
    conn.execute.return_value.first.return_value = None
    repository = _repository(conn)

    assert repository.fetch_location_identifier("missing") is None


def test_fetch_first_transaction_date():
    conn = MagicMock()
    conn.execute.return_value.first.return_value = SimpleNamespace(
        first_date=date(2021, 1, 4)
    )
    repository = _repository(conn)

    assert repository.fetch_first_transaction_date("loc-1") == date(2021, 1, 4)


def test_sqlalchemy_errors_become_data_unavailable():
    conn = MagicMock()
    conn.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))
    repository = _repository(conn)

    with pytest.raises(DataUnavailableError, match="fetching transactions"):
        repository.fetch_transactions(
            "loc-1",
            date(2024, 1, 1),
            date(2024, 1, 31),
        )
