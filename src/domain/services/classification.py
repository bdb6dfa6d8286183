"""Transaction classification into reporting categories."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import (
    EXCLUDED_SETTLEMENT_PREFIX,
    EXPENSE_PREFIX,
    FINANCIAL_POSITION_PREFIX,
    INCOME_PREFIX,
    SETTLEMENT_PREFIX,
)
from src.domain.models.accounts import Account
from src.domain.models.ledger import (
    Category,
    ClassifiedContribution,
    LegSide,
    Transaction,
)
from src.domain.policies.restrictions import is_restricted
from src.domain.services.chart_of_accounts import synthetic_number
from src.utils.decimal_utils import coerce_decimal


def categorize_leg(account_number: str, side: LegSide) -> Category:
    """Return the category a leg on this account and side is routed to.

    Args:
        account_number: Number of the account the leg posts to.
        side: Debit or credit.

    Returns:
        Category: Income, expense, financial position, settlement or other.
    """
    if account_number.startswith(EXCLUDED_SETTLEMENT_PREFIX):
        return Category.SETTLEMENT
    if account_number.startswith(FINANCIAL_POSITION_PREFIX):
        return Category.FINANCIAL_POSITION
    if side is LegSide.CREDIT and account_number.startswith(
        (INCOME_PREFIX, SETTLEMENT_PREFIX)
    ):
        return Category.INCOME
    if side is LegSide.DEBIT and account_number.startswith(
        (EXPENSE_PREFIX, SETTLEMENT_PREFIX)
    ):
        return Category.EXPENSE
    return Category.OTHER


def resolve_leg_amount(
    explicit: Decimal | None,
    shared: Decimal | None,
) -> Decimal:
    """Prefer the leg's explicit amount over the shared one when present."""
    if explicit is not None:
        return coerce_decimal(explicit)
    return coerce_decimal(shared)


def classify_transaction(
    transaction: Transaction,
    debit_account: Account | None,
    credit_account: Account | None,
    restricted: Iterable[str] = (),
) -> list[ClassifiedContribution]:
    """Classify both legs of a transaction.

    Legs without an account, on a restricted account, or with a zero amount
    produce nothing.

    Args:
        transaction: Ledger transaction.
        debit_account: Account of the debit leg, if known.
        credit_account: Account of the credit leg, if known.
        restricted: Account prefixes hidden for the transaction's location.

    Returns:
        list[ClassifiedContribution]: Zero to two contributions.
    """
    restricted = tuple(restricted)
    legs = (
        (LegSide.DEBIT, debit_account, transaction.debit_amount),
        (LegSide.CREDIT, credit_account, transaction.credit_amount),
    )
    contributions = []
    for side, account, explicit in legs:
        if account is None:
            continue
        if is_restricted(account.number, restricted):
            continue
        amount = resolve_leg_amount(explicit, transaction.amount)
        if amount == 0:
            continue
        contributions.append(
            ClassifiedContribution(
                transaction_id=transaction.id,
                account_number=account.number,
                synthetic_account_number=synthetic_number(account.number),
                side=side,
                category=categorize_leg(account.number, side),
                amount=amount,
            )
        )
    return contributions


__all__ = ["categorize_leg", "resolve_leg_amount", "classify_transaction"]
