"""Domain models for the chart of accounts."""

from dataclasses import dataclass
from enum import Enum


class AccountKind(str, Enum):
    """Account family inferred from the first digit of its number."""

    ASSET = "asset"
    LIABILITY = "liability"
    EQUITY = "equity"
    INCOME = "income"
    EXPENSE = "expense"
    OTHER = "other"


@dataclass(frozen=True)
class Account:
    """Ledger account with a hyphen-segmented hierarchical number.

    Attributes:
        id: Store identifier referenced by transaction legs.
        number: Hierarchical code such as ``"701-2-2"``.
        name: Display name.
        kind: Optional stored kind; must agree with the number prefix.
    """

    id: str
    number: str
    name: str
    kind: AccountKind | None = None


@dataclass(frozen=True)
class AccountRestriction:
    """Exclusion of an account prefix for a category of locations."""

    location_category_prefix: str
    account_number_prefix: str
    is_restricted: bool = True


__all__ = ["AccountKind", "Account", "AccountRestriction"]
