"""Use case to forecast next-year budget items from ledger history."""

from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.aggregate_period import AggregatePeriodUseCase
from src.domain.constants import DEFAULT_CATALOGUE
from src.domain.errors import InvalidRequestError
from src.domain.models import (
    BudgetItem,
    BudgetItemKind,
    ForecastMethod,
    PeriodAggregate,
    ReportCatalogue,
)
from src.domain.services.budget import AVERAGE_WINDOW, forecast_items
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


def parse_forecast_method(value: ForecastMethod | str) -> ForecastMethod:
    """Return the forecast method for a raw value.

    Raises:
        InvalidRequestError: If the value is not a known method.
    """
    try:
        return ForecastMethod(value)
    except ValueError as exc:
        raise InvalidRequestError(f"Unknown forecast method: {value}") from exc


class ForecastBudgetUseCase:
    """Propose budget items for a location and target year."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        catalogue: ReportCatalogue | None = None,
        aggregator: AggregatePeriodUseCase | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger reads.
            catalogue: Catalogue of forecast accounts.
            aggregator: Optional aggregation use case to reuse.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._catalogue = catalogue or DEFAULT_CATALOGUE
        self._logger = logger or get_app_logger()
        self._aggregator = aggregator or AggregatePeriodUseCase(
            ledger_repository,
            logger=self._logger,
        )

    def execute(
        self,
        location_id: str,
        target_year: int,
        method: ForecastMethod | str = ForecastMethod.LAST_YEAR,
        additional_expenses=Decimal("0"),
        planned_cost_reduction=Decimal("0"),
    ) -> list[BudgetItem]:
        """Return forecast items for the target year.

        Args:
            location_id: Location to forecast.
            target_year: Year of the plan.
            method: ``last_year``, ``avg_3_years`` or ``manual``.
            additional_expenses: Manual expense increase spread over items.
            planned_cost_reduction: Manual expense decrease spread over items.

        Returns:
            list[BudgetItem]: Income items followed by expense items.

        Raises:
            InvalidRequestError: If the method is unknown.
        """
        method = parse_forecast_method(method)
        history = self._load_history(location_id, target_year, method)
        identifier = self._ledger_repository.fetch_location_identifier(
            location_id
        )
        items = forecast_items(
            self._catalogue,
            history,
            target_year,
            method,
            additional_expenses=coerce_decimal(additional_expenses),
            planned_cost_reduction=coerce_decimal(planned_cost_reduction),
            location_identifier=identifier,
        )
        income_total = sum(
            (i.planned_amount for i in items if i.kind is BudgetItemKind.INCOME),
            Decimal("0"),
        )
        expense_total = sum(
            (i.planned_amount for i in items if i.kind is BudgetItemKind.EXPENSE),
            Decimal("0"),
        )
        self._logger.info(
            f"Forecast {location_id} {target_year} ({method.value}): "
            f"income={income_total}, expense={expense_total}"
        )
        return items

    def _load_history(
        self,
        location_id: str,
        target_year: int,
        method: ForecastMethod,
    ) -> dict[int, PeriodAggregate]:
        window = AVERAGE_WINDOW if method is ForecastMethod.AVG_3_YEARS else 1
        years = [target_year - offset for offset in range(1, window + 1)]
        return {
            year: self._aggregator.execute_year(location_id, year)
            for year in years
        }


__all__ = ["parse_forecast_method", "ForecastBudgetUseCase"]
