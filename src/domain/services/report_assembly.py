"""Assembly of the five-section report from a period aggregate."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import SALDO_ROW_KEY, SALDO_ROW_NAME
from src.domain.models.aggregates import AccountBucket, PeriodAggregate
from src.domain.models.catalogue import CatalogueEntry, ReportCatalogue
from src.domain.models.ledger import Category, LegSide
from src.domain.models.reports import (
    AccountBreakdownLine,
    ClosingBalances,
    FinancialPositionRow,
    IntentionsRow,
    ReportSections,
    SectionLine,
    SettlementRow,
)
from src.domain.services.chart_of_accounts import belongs_to


def sum_buckets(
    buckets: Iterable[AccountBucket],
    prefixes: Iterable[str],
    *,
    side: LegSide | None = None,
    category: Category | None = None,
) -> Decimal:
    """Sum bucket totals under any of the prefixes.

    Args:
        buckets: Aggregate buckets.
        prefixes: Catalogue prefixes; a bucket matches its own prefix or
            any ``prefix-`` sub-account.
        side: Optional side filter.
        category: Optional category filter.

    Returns:
        Decimal: Unsigned sum of the matching totals.
    """
    prefixes = tuple(prefixes)
    total = Decimal("0")
    for bucket in buckets:
        if side is not None and bucket.side is not side:
            continue
        if category is not None and bucket.category is not category:
            continue
        if any(
            belongs_to(bucket.synthetic_account_number, prefix)
            for prefix in prefixes
        ):
            total += bucket.total
    return total


def assemble_sections(
    aggregate: PeriodAggregate,
    catalogue: ReportCatalogue,
    opening: ClosingBalances | None = None,
) -> ReportSections:
    """Build the income, expense, financial position, intentions and
    receivables/payables sections of a report.

    Intentions follow the income/expense reading of account 210: credits
    are intentions received and debits are intentions celebrated or passed
    on. Older report screens showed these columns the other way round
    (received as Wn, celebrated as Ma). Closing is
    ``opening + received - celebrated``.

    Args:
        aggregate: Aggregate of the reported period.
        catalogue: Versioned catalogue describing the sections.
        opening: Closing balances of the previous period, if any.

    Returns:
        ReportSections: Sections with ``balance = income - expense``.
    """
    opening = opening or ClosingBalances()
    buckets = aggregate.buckets

    income = _catalogue_lines(buckets, catalogue.income, Category.INCOME)
    expense = _catalogue_lines(buckets, catalogue.expense, Category.EXPENSE)

    position_rows = []
    for category in catalogue.financial_position:
        row_opening = opening.financial_position.get(category.key, Decimal("0"))
        debits = sum_buckets(
            buckets,
            category.prefixes,
            side=LegSide.DEBIT,
            category=Category.FINANCIAL_POSITION,
        )
        credits = sum_buckets(
            buckets,
            category.prefixes,
            side=LegSide.CREDIT,
            category=Category.FINANCIAL_POSITION,
        )
        position_rows.append(
            FinancialPositionRow(
                key=category.key,
                name=category.name,
                opening=row_opening,
                debits=debits,
                credits=credits,
                closing=row_opening + debits - credits,
            )
        )

    intentions_prefixes = (catalogue.intentions_prefix,)
    received = sum_buckets(buckets, intentions_prefixes, side=LegSide.CREDIT)
    celebrated = sum_buckets(buckets, intentions_prefixes, side=LegSide.DEBIT)
    intentions = IntentionsRow(
        opening=opening.intentions,
        received=received,
        celebrated_and_given=celebrated,
        closing=opening.intentions + received - celebrated,
    )

    settlements = []
    for category in catalogue.settlements:
        receivables_opening = opening.receivables.get(
            category.key, Decimal("0")
        )
        payables_opening = opening.payables.get(category.key, Decimal("0"))
        receivables_change = sum_buckets(
            buckets,
            category.prefixes,
            side=LegSide.DEBIT,
        )
        payables_change = sum_buckets(
            buckets,
            category.prefixes,
            side=LegSide.CREDIT,
        )
        settlements.append(
            SettlementRow(
                key=category.key,
                name=category.name,
                receivables_opening=receivables_opening,
                receivables_change=receivables_change,
                receivables_closing=receivables_opening + receivables_change,
                payables_opening=payables_opening,
                payables_change=payables_change,
                payables_closing=payables_opening + payables_change,
            )
        )

    return ReportSections(
        location_id=aggregate.location_id,
        period_start=aggregate.period_start,
        period_end=aggregate.period_end,
        catalogue_version=catalogue.version,
        income=income,
        expense=expense,
        income_breakdown=_breakdown(buckets, Category.INCOME),
        expense_breakdown=_breakdown(buckets, Category.EXPENSE),
        financial_position=tuple(position_rows),
        financial_position_total=_saldo_row(position_rows),
        intentions=intentions,
        settlements=tuple(settlements),
        income_total=aggregate.total_income,
        expense_total=aggregate.total_expense,
        warnings=aggregate.warnings,
    )


def carry_forward(
    opening: ClosingBalances | None,
    aggregate: PeriodAggregate,
    catalogue: ReportCatalogue,
) -> ClosingBalances:
    """Return the closing balances after applying an aggregate."""
    return assemble_sections(aggregate, catalogue, opening).closing_balances


def _catalogue_lines(
    buckets: tuple[AccountBucket, ...],
    entries: Iterable[CatalogueEntry],
    category: Category,
) -> tuple[SectionLine, ...]:
    return tuple(
        SectionLine(
            prefix=entry.prefix,
            name=entry.name,
            amount=sum_buckets(buckets, (entry.prefix,), category=category),
        )
        for entry in entries
    )


def _breakdown(
    buckets: tuple[AccountBucket, ...],
    category: Category,
) -> tuple[AccountBreakdownLine, ...]:
    return tuple(
        AccountBreakdownLine(
            account_number=bucket.synthetic_account_number,
            name=bucket.name,
            amount=bucket.total,
        )
        for bucket in buckets
        if bucket.category is category
    )


def _saldo_row(rows: list[FinancialPositionRow]) -> FinancialPositionRow:
    zero = Decimal("0")
    return FinancialPositionRow(
        key=SALDO_ROW_KEY,
        name=SALDO_ROW_NAME,
        opening=sum((row.opening for row in rows), zero),
        debits=sum((row.debits for row in rows), zero),
        credits=sum((row.credits for row in rows), zero),
        closing=sum((row.closing for row in rows), zero),
    )


__all__ = ["sum_buckets", "assemble_sections", "carry_forward"]
