"""Period aggregation of classified contributions."""

from collections.abc import Iterable, Mapping, Sequence
from datetime import date
from decimal import Decimal
from logging import Logger

from src.domain.models.accounts import Account
from src.domain.models.aggregates import AccountBucket, PeriodAggregate
from src.domain.models.ledger import (
    P_AND_L_CATEGORIES,
    Category,
    ClassifiedContribution,
    InconsistentTransaction,
    LegSide,
    Transaction,
)
from src.domain.services.classification import classify_transaction
from src.domain.services.validation import find_transaction_inconsistency


def aggregate_contributions(
    location_id: str,
    period_start: date,
    period_end: date,
    contributions: Iterable[ClassifiedContribution],
    account_names: Mapping[str, str] | None = None,
    warnings: Sequence[InconsistentTransaction] = (),
) -> PeriodAggregate:
    """Group contributions by synthetic account and side and sum them.

    Args:
        location_id: Location the contributions belong to.
        period_start: First day of the period.
        period_end: Last day of the period.
        contributions: Classified legs; duplicates simply add.
        account_names: Names keyed by account number, used for bucket names.
        warnings: Exclusions reported alongside the totals.

    Returns:
        PeriodAggregate: Buckets sorted by synthetic number and side.
    """
    names = account_names or {}
    totals: dict[tuple[str, LegSide], Decimal] = {}
    categories: dict[tuple[str, LegSide], Category] = {}
    bucket_names: dict[tuple[str, LegSide], str] = {}
    for contribution in contributions:
        key = (contribution.synthetic_account_number, contribution.side)
        totals[key] = totals.get(key, Decimal("0")) + contribution.amount
        categories.setdefault(key, contribution.category)
        if key not in bucket_names:
            bucket_names[key] = names.get(
                contribution.synthetic_account_number,
                names.get(
                    contribution.account_number,
                    contribution.synthetic_account_number,
                ),
            )

    buckets = tuple(
        AccountBucket(
            synthetic_account_number=number,
            side=side,
            category=categories[(number, side)],
            name=bucket_names[(number, side)],
            total=totals[(number, side)],
        )
        for number, side in sorted(totals, key=_bucket_sort_key)
    )
    return PeriodAggregate(
        location_id=location_id,
        period_start=period_start,
        period_end=period_end,
        buckets=buckets,
        per_category=_category_totals(buckets),
        warnings=tuple(warnings),
    )


def aggregate_transactions(
    location_id: str,
    period_start: date,
    period_end: date,
    transactions: Iterable[Transaction],
    accounts_by_id: Mapping[str, Account],
    restricted: Sequence[str] = (),
    logger: Logger | None = None,
) -> PeriodAggregate:
    """Classify and aggregate transactions of one location and period.

    Transactions with negative amounts are excluded and legs pointing to
    unknown accounts are skipped; both are reported as warnings.

    Args:
        location_id: Location the transactions belong to.
        period_start: First day of the period.
        period_end: Last day of the period.
        transactions: Ledger transactions fetched for the period.
        accounts_by_id: Account catalogue keyed by account id.
        restricted: Account prefixes hidden for the location.
        logger: Optional logger used for warnings.

    Returns:
        PeriodAggregate: Aggregated totals with their warnings.
    """
    contributions: list[ClassifiedContribution] = []
    warnings: list[InconsistentTransaction] = []
    for transaction in transactions:
        reason = find_transaction_inconsistency(transaction)
        if reason:
            warnings.append(InconsistentTransaction(transaction.id, reason))
            if logger:
                logger.warning(
                    f"Excluded transaction {transaction.id}: {reason}"
                )
            continue
        debit_account = _lookup_account(
            transaction,
            transaction.debit_account_id,
            accounts_by_id,
            warnings,
            logger,
        )
        credit_account = _lookup_account(
            transaction,
            transaction.credit_account_id,
            accounts_by_id,
            warnings,
            logger,
        )
        contributions.extend(
            classify_transaction(
                transaction,
                debit_account,
                credit_account,
                restricted,
            )
        )

    account_names = {
        account.number: account.name for account in accounts_by_id.values()
    }
    return aggregate_contributions(
        location_id,
        period_start,
        period_end,
        contributions,
        account_names=account_names,
        warnings=warnings,
    )


def merge_aggregates(aggregates: Sequence[PeriodAggregate]) -> PeriodAggregate:
    """Sum aggregates of one location into a single aggregate.

    Bucket totals add, the period spans all inputs, and warnings are
    concatenated. The result does not depend on input order apart from
    warning order.

    Raises:
        ValueError: If no aggregates are given or locations differ.
    """
    if not aggregates:
        raise ValueError("Cannot merge an empty list of aggregates")
    locations = {aggregate.location_id for aggregate in aggregates}
    if len(locations) > 1:
        raise ValueError(
            f"Cannot merge aggregates of different locations: {sorted(locations)}"
        )

    totals: dict[tuple[str, LegSide], Decimal] = {}
    templates: dict[tuple[str, LegSide], AccountBucket] = {}
    warnings: list[InconsistentTransaction] = []
    for aggregate in aggregates:
        warnings.extend(aggregate.warnings)
        for bucket in aggregate.buckets:
            key = (bucket.synthetic_account_number, bucket.side)
            totals[key] = totals.get(key, Decimal("0")) + bucket.total
            templates.setdefault(key, bucket)

    buckets = tuple(
        AccountBucket(
            synthetic_account_number=number,
            side=side,
            category=templates[(number, side)].category,
            name=templates[(number, side)].name,
            total=totals[(number, side)],
        )
        for number, side in sorted(totals, key=_bucket_sort_key)
    )
    return PeriodAggregate(
        location_id=aggregates[0].location_id,
        period_start=min(aggregate.period_start for aggregate in aggregates),
        period_end=max(aggregate.period_end for aggregate in aggregates),
        buckets=buckets,
        per_category=_category_totals(buckets),
        warnings=tuple(warnings),
    )


def _lookup_account(
    transaction: Transaction,
    account_id: str | None,
    accounts_by_id: Mapping[str, Account],
    warnings: list[InconsistentTransaction],
    logger: Logger | None,
) -> Account | None:
    if account_id is None:
        return None
    account = accounts_by_id.get(account_id)
    if account is None:
        reason = f"unknown account id: {account_id}"
        warnings.append(InconsistentTransaction(transaction.id, reason))
        if logger:
            logger.warning(f"Skipped leg of transaction {transaction.id}: {reason}")
    return account


def _category_totals(
    buckets: Iterable[AccountBucket],
) -> dict[Category, Decimal]:
    totals: dict[Category, Decimal] = {}
    for bucket in buckets:
        amount = (
            bucket.total
            if bucket.category in P_AND_L_CATEGORIES
            else bucket.signed_total
        )
        totals[bucket.category] = (
            totals.get(bucket.category, Decimal("0")) + amount
        )
    return dict(sorted(totals.items(), key=lambda item: item[0].value))


def _bucket_sort_key(key: tuple[str, LegSide]) -> tuple[str, str]:
    number, side = key
    return number, side.value


__all__ = [
    "aggregate_contributions",
    "aggregate_transactions",
    "merge_aggregates",
]
