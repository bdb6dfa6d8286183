"""Tests for period aggregation."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.models import Account, Category, LegSide, Transaction
from src.domain.services.aggregation import (
    aggregate_transactions,
    merge_aggregates,
)
from src.domain.services.classification import classify_transaction
from src.domain.services.classification import resolve_leg_amount
from src.utils.date_utils import month_bounds

ACCOUNTS = {
    account.id: account
    for account in (
        Account("a-100", "100", "Kasa"),
        Account("a-110", "110-1", "Bank"),
        Account("a-401", "401-1", "Biurowe"),
        Account("a-401x", "401-1-2-9", "Biurowe analityczne"),
        Account("a-444", "444", "Media"),
        Account("a-701", "701-2", "Intencje"),
        Account("a-200", "200-1", "Prowincja"),
        Account("a-210", "210", "Intencje do odprawienia"),
        Account("a-900", "900", "Pozabilansowe"),
    )
}


def _tx(tx_id, day, debit, credit, **amounts) -> Transaction:
    return Transaction(
        id=tx_id,
        date=day,
        debit_account_id=debit,
        credit_account_id=credit,
        location_id="loc-1",
        **amounts,
    )


def _year_of_transactions() -> list[Transaction]:
    transactions = []
    for month in range(1, 13):
        day = date(2024, month, min(month * 2, 28))
        transactions.extend(
            [
                _tx(f"e{month}", day, "a-401", "a-100", amount=Decimal(month)),
                _tx(
                    f"i{month}",
                    day,
                    "a-110",
                    "a-701",
                    debit_amount=Decimal("100.10"),
                    credit_amount=Decimal("100.10"),
                ),
                _tx(
                    f"x{month}",
                    day,
                    "a-401x",
                    "a-200",
                    amount=Decimal("3.33"),
                ),
            ]
        )
    return transactions


def test_aggregate_sums_by_synthetic_account_and_side():
    """Analytical accounts roll up into their synthetic parent."""
    transactions = [
        _tx("t1", date(2024, 3, 1), "a-401", "a-100", amount=Decimal("100")),
        _tx("t2", date(2024, 3, 2), "a-401x", "a-100", amount=Decimal("20")),
    ]

    aggregate = aggregate_transactions(
        "loc-1",
        date(2024, 3, 1),
        date(2024, 3, 31),
        transactions,
        ACCOUNTS,
    )

    buckets = aggregate.per_synthetic_account
    assert buckets[("401-1", LegSide.DEBIT)].total == Decimal("100")
    assert buckets[("401-1-2", LegSide.DEBIT)].total == Decimal("20")
    assert buckets[("100", LegSide.CREDIT)].total == Decimal("120")
    assert buckets[("401-1", LegSide.DEBIT)].name == "Biurowe"
    assert aggregate.total_expense == Decimal("120")
    assert aggregate.total_income == Decimal("0")
    assert aggregate.per_category[Category.FINANCIAL_POSITION] == Decimal("-120")


def test_duplicate_keys_add_without_deduplication():
    """The same transaction id appearing twice counts twice."""
    transaction = _tx("t1", date(2024, 3, 1), "a-444", "a-100", amount=Decimal("5"))

    aggregate = aggregate_transactions(
        "loc-1",
        date(2024, 3, 1),
        date(2024, 3, 31),
        [transaction, transaction],
        ACCOUNTS,
    )

    assert aggregate.total_expense == Decimal("10")


def test_partition_into_months_matches_single_pass():
    """Merging monthly aggregates equals aggregating the whole year."""
    transactions = _year_of_transactions()
    whole = aggregate_transactions(
        "loc-1",
        date(2024, 1, 1),
        date(2024, 12, 31),
        transactions,
        ACCOUNTS,
    )
    monthly = []
    for month in range(1, 13):
        start, end = month_bounds(2024, month)
        monthly.append(
            aggregate_transactions(
                "loc-1",
                start,
                end,
                [tx for tx in transactions if start <= tx.date <= end],
                ACCOUNTS,
            )
        )

    merged = merge_aggregates(monthly)
    reversed_merge = merge_aggregates(list(reversed(monthly)))

    assert merged.buckets == whole.buckets
    assert merged.per_category == whole.per_category
    assert reversed_merge.buckets == whole.buckets
    assert merged.period_start == date(2024, 1, 1)
    assert merged.period_end == date(2024, 12, 31)


def test_double_entry_reconciliation_across_all_categories():
    """Classification routes money without inventing or dropping it."""
    transactions = _year_of_transactions() + [
        _tx("o1", date(2024, 5, 5), "a-900", "a-210", amount=Decimal("7")),
        _tx(
            "o2",
            date(2024, 5, 6),
            "a-210",
            "a-701",
            debit_amount=Decimal("12"),
            credit_amount=Decimal("10"),
        ),
    ]
    expected = sum(
        (
            resolve_leg_amount(tx.debit_amount, tx.amount)
            - resolve_leg_amount(tx.credit_amount, tx.amount)
            for tx in transactions
        ),
        Decimal("0"),
    )

    contributions = [
        contribution
        for tx in transactions
        for contribution in classify_transaction(
            tx,
            ACCOUNTS[tx.debit_account_id],
            ACCOUNTS[tx.credit_account_id],
        )
    ]
    aggregate = aggregate_transactions(
        "loc-1",
        date(2024, 1, 1),
        date(2024, 12, 31),
        transactions,
        ACCOUNTS,
    )

    assert sum(c.signed_amount for c in contributions) == expected
    assert sum(b.signed_total for b in aggregate.buckets) == expected
    assert expected == Decimal("2")


def test_negative_transactions_are_excluded_with_warning():
    """One bad row does not block the rest of the aggregate."""
    logger = MagicMock()
    transactions = [
        _tx("good", date(2024, 3, 1), "a-444", "a-100", amount=Decimal("8")),
        _tx("bad", date(2024, 3, 2), "a-444", "a-100", amount=Decimal("-3")),
    ]

    aggregate = aggregate_transactions(
        "loc-1",
        date(2024, 3, 1),
        date(2024, 3, 31),
        transactions,
        ACCOUNTS,
        logger=logger,
    )

    assert aggregate.total_expense == Decimal("8")
    assert [w.transaction_id for w in aggregate.warnings] == ["bad"]
    assert "negative amount" in aggregate.warnings[0].reason
    logger.warning.assert_called_once()


def test_unknown_account_skips_only_that_leg():
    transactions = [
        _tx("t1", date(2024, 3, 1), "a-444", "missing", amount=Decimal("8")),
    ]

    aggregate = aggregate_transactions(
        "loc-1",
        date(2024, 3, 1),
        date(2024, 3, 31),
        transactions,
        ACCOUNTS,
    )

    assert aggregate.total_expense == Decimal("8")
    assert aggregate.warnings[0].reason == "unknown account id: missing"


def test_restricted_prefix_contributes_to_no_category():
    transactions = [
        _tx(
            "t1",
            date(2024, 3, 1),
            "a-401",
            "a-701",
            debit_amount=Decimal("50"),
            credit_amount=Decimal("50"),
        ),
    ]

    aggregate = aggregate_transactions(
        "loc-1",
        date(2024, 3, 1),
        date(2024, 3, 31),
        transactions,
        ACCOUNTS,
        restricted=("70",),
    )

    assert all(
        bucket.synthetic_account_number != "701-2" for bucket in aggregate.buckets
    )
    assert aggregate.total_income == Decimal("0")
    assert aggregate.total_expense == Decimal("50")


def test_merge_rejects_empty_and_mixed_locations():
    aggregate = aggregate_transactions(
        "loc-1",
        date(2024, 3, 1),
        date(2024, 3, 31),
        [],
        ACCOUNTS,
    )
    other = aggregate_transactions(
        "loc-2",
        date(2024, 3, 1),
        date(2024, 3, 31),
        [],
        ACCOUNTS,
    )

    with pytest.raises(ValueError):
        merge_aggregates([])
    with pytest.raises(ValueError):
        merge_aggregates([aggregate, other])
