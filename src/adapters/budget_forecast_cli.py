"""CLI adapter printing a budget forecast for a location."""

from datetime import date
import os

from src.domain.errors import InvalidPeriodError, InvalidRequestError
from src.infrastructure.container import build_budget_forecaster
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.utils.decimal_utils import coerce_decimal


def main() -> None:
    """Forecast and print budget items configured by environment variables."""
    logger = get_app_logger()
    location_id = os.getenv("BUDGET_LOCATION_ID")
    if not location_id:
        logger.warning("BUDGET_LOCATION_ID is required to forecast a budget.")
        return

    raw_year = os.getenv("BUDGET_YEAR")
    try:
        target_year = int(raw_year) if raw_year else date.today().year + 1
    except ValueError:
        logger.warning(f"Invalid budget year '{raw_year}'.")
        return
    method = os.getenv("BUDGET_METHOD", "last_year")
    additional = coerce_decimal(os.getenv("BUDGET_ADDITIONAL_EXPENSES", "0"))
    reduction = coerce_decimal(os.getenv("BUDGET_COST_REDUCTION", "0"))
    get_usage_logger().info(
        f"budget_forecast_cli location={location_id} year={target_year} "
        f"method={method}"
    )

    use_case = build_budget_forecaster()
    try:
        items = use_case.execute(
            location_id,
            target_year,
            method,
            additional,
            reduction,
        )
    except (InvalidPeriodError, InvalidRequestError) as exc:
        logger.error(str(exc))
        return

    print(f"Budget forecast {location_id} {target_year} ({method})")
    for item in items:
        print(
            f"  [{item.kind.value}] {item.account_prefix} {item.account_name}: "
            f"planned={item.planned_amount}, "
            f"previous_year={item.previous_year_amount}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
