"""Use case to aggregate ledger transactions of a location and period."""

from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import Account, PeriodAggregate
from src.domain.policies.restrictions import restricted_prefixes
from src.domain.services.aggregation import (
    aggregate_transactions,
    merge_aggregates,
)
from src.domain.services.chart_of_accounts import location_category_prefix
from src.domain.services.validation import (
    validate_account_kind,
    validate_month,
    validate_period,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.date_utils import month_bounds, year_bounds


class AggregatePeriodUseCase:
    """Classify and aggregate the transactions of a location."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing transactions, accounts and
                restrictions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        location_id: str,
        date_from: date,
        date_to: date,
    ) -> PeriodAggregate:
        """Return the aggregate of ``[date_from, date_to]``.

        Args:
            location_id: Location to aggregate.
            date_from: First included day.
            date_to: Last included day.

        Returns:
            PeriodAggregate: Per synthetic account and per category totals.

        Raises:
            InvalidPeriodError: If ``date_from`` is after ``date_to``.
        """
        validate_period(date_from, date_to)
        restricted = self._restricted_prefixes(location_id)
        accounts_by_id = self._accounts_by_id()
        transactions = self._ledger_repository.fetch_transactions(
            location_id,
            date_from,
            date_to,
        )
        self._logger.info(
            f"Fetched {len(transactions)} transactions for {location_id} "
            f"between {date_from} and {date_to}"
        )
        aggregate = aggregate_transactions(
            location_id,
            date_from,
            date_to,
            transactions,
            accounts_by_id,
            restricted=restricted,
            logger=self._logger,
        )
        if aggregate.warnings:
            self._logger.warning(
                f"{len(aggregate.warnings)} transactions or legs excluded "
                f"for {location_id}"
            )
        return aggregate

    def execute_month(
        self,
        location_id: str,
        year: int,
        month: int,
    ) -> PeriodAggregate:
        """Return the aggregate of one calendar month."""
        validate_month(month)
        return self.execute(location_id, *month_bounds(year, month))

    def execute_year(self, location_id: str, year: int) -> PeriodAggregate:
        return self.execute(location_id, *year_bounds(year))

    def execute_year_to_date(
        self,
        location_id: str,
        year: int,
        month: int,
    ) -> PeriodAggregate:
        """Return the aggregate of January through ``month`` of a year.

        The months are aggregated separately and merged, which yields the
        same totals as a single query over the whole range.
        """
        validate_month(month)
        monthly = [
            self.execute_month(location_id, year, current)
            for current in range(1, month + 1)
        ]
        return merge_aggregates(monthly)

    def _restricted_prefixes(self, location_id: str) -> tuple[str, ...]:
        identifier = self._ledger_repository.fetch_location_identifier(
            location_id
        )
        if not identifier:
            self._logger.info(
                f"No identifier for location {location_id}; "
                "reporting without restrictions"
            )
            return ()
        category = location_category_prefix(identifier)
        restrictions = self._ledger_repository.fetch_restrictions(category)
        if not restrictions:
            self._logger.info(
                f"No restriction data for location category {category}"
            )
        return restricted_prefixes(restrictions, category)

    def _accounts_by_id(self) -> dict[str, Account]:
        accounts = self._ledger_repository.fetch_accounts()
        for account in accounts:
            validate_account_kind(account, self._logger)
        return {account.id: account for account in accounts}


__all__ = ["AggregatePeriodUseCase"]
