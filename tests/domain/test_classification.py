"""Tests for transaction classification."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.models import Account, Category, LegSide, Transaction
from src.domain.services.classification import (
    categorize_leg,
    classify_transaction,
    resolve_leg_amount,
)


def _account(number: str) -> Account:
    return Account(id=f"id-{number}", number=number, name=f"Account {number}")


def _transaction(**overrides) -> Transaction:
    values = {
        "id": "tx-1",
        "date": date(2024, 3, 10),
        "debit_account_id": "d",
        "credit_account_id": "c",
        "location_id": "loc-1",
    }
    values.update(overrides)
    return Transaction(**values)


@pytest.mark.parametrize(
    ("number", "side", "expected"),
    [
        ("701-2", LegSide.CREDIT, Category.INCOME),
        ("215", LegSide.CREDIT, Category.INCOME),
        ("401-1", LegSide.DEBIT, Category.EXPENSE),
        ("215", LegSide.DEBIT, Category.EXPENSE),
        ("200-1", LegSide.DEBIT, Category.SETTLEMENT),
        ("200", LegSide.CREDIT, Category.SETTLEMENT),
        ("100", LegSide.DEBIT, Category.FINANCIAL_POSITION),
        ("110-3-1", LegSide.CREDIT, Category.FINANCIAL_POSITION),
        ("701", LegSide.DEBIT, Category.OTHER),
        ("401", LegSide.CREDIT, Category.OTHER),
        ("900", LegSide.DEBIT, Category.OTHER),
    ],
)
def test_categorize_leg_routes_by_prefix_and_side(number, side, expected):
    """Legs are routed by leading digits and the side they post to."""
    assert categorize_leg(number, side) is expected


def test_resolve_leg_amount_prefers_explicit_value():
    assert resolve_leg_amount(Decimal("40"), Decimal("50")) == Decimal("40")
    assert resolve_leg_amount(Decimal("0"), Decimal("50")) == Decimal("0")
    assert resolve_leg_amount(None, Decimal("50")) == Decimal("50")
    assert resolve_leg_amount(None, None) == Decimal("0")


def test_classify_transaction_emits_both_eligible_legs():
    """An expense/income pair yields two independent contributions."""
    transaction = _transaction(
        debit_amount=Decimal("50"),
        credit_amount=Decimal("50"),
    )

    result = classify_transaction(
        transaction,
        _account("401-1"),
        _account("701-2"),
    )

    assert [(c.synthetic_account_number, c.side, c.category) for c in result] == [
        ("401-1", LegSide.DEBIT, Category.EXPENSE),
        ("701-2", LegSide.CREDIT, Category.INCOME),
    ]
    assert all(c.amount == Decimal("50") for c in result)


def test_classify_transaction_uses_shared_amount_when_split_missing():
    transaction = _transaction(amount=Decimal("100"))

    result = classify_transaction(
        transaction,
        _account("401-1-2-5"),
        _account("100"),
    )

    assert result[0].synthetic_account_number == "401-1-2"
    assert result[0].account_number == "401-1-2-5"
    assert result[1].category is Category.FINANCIAL_POSITION
    assert result[1].signed_amount == Decimal("-100")


def test_classify_transaction_drops_restricted_legs():
    """Restricted accounts contribute to nothing."""
    transaction = _transaction(
        debit_amount=Decimal("50"),
        credit_amount=Decimal("50"),
    )

    result = classify_transaction(
        transaction,
        _account("401-1"),
        _account("701-2"),
        restricted=("701",),
    )

    assert len(result) == 1
    assert result[0].category is Category.EXPENSE


def test_classify_transaction_with_zero_amounts_yields_nothing():
    transaction = _transaction(
        debit_amount=Decimal("0"),
        credit_amount=Decimal("0"),
    )

    assert classify_transaction(
        transaction,
        _account("401"),
        _account("701"),
    ) == []


def test_classify_transaction_skips_missing_accounts():
    transaction = _transaction(amount=Decimal("10"), credit_account_id=None)

    result = classify_transaction(transaction, _account("401"), None)

    assert len(result) == 1
    assert result[0].side is LegSide.DEBIT
