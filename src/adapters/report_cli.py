"""CLI adapter printing the monthly report of a location."""

from datetime import date
import os

from src.infrastructure.container import build_report_assembler
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import EngineSettings


def _parse_int(value: str | None, default: int, logger) -> int:
    """Parse an integer environment value.

    Args:
        value: Raw value.
        default: Value used when missing or invalid.
        logger: Logger used for warnings.

    Returns:
        int: Parsed value or the default.
    """
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid integer '{value}'. Using {default}.")
        return default


def main() -> None:
    """Assemble and print the report configured by environment variables."""
    logger = get_app_logger()
    location_id = os.getenv("REPORT_LOCATION_ID")
    if not location_id:
        logger.warning("REPORT_LOCATION_ID is required to assemble a report.")
        return

    today = date.today()
    year = _parse_int(os.getenv("REPORT_YEAR"), today.year, logger)
    month = _parse_int(os.getenv("REPORT_MONTH"), today.month, logger)
    report_id = os.getenv("REPORT_ID") or None
    currency = EngineSettings.from_env().currency
    get_usage_logger().info(
        f"report_cli location={location_id} period={year}-{month:02d}"
    )

    use_case = build_report_assembler()
    sections = use_case.execute(location_id, month, year, report_id=report_id)

    print(
        f"Report {location_id} {year}-{month:02d} "
        f"(catalogue {sections.catalogue_version})"
    )
    print("Income:")
    for line in sections.income:
        if line.amount:
            print(f"  {line.prefix} {line.name}: {line.amount} {currency}")
    print("Expense:")
    for line in sections.expense:
        if line.amount:
            print(f"  {line.prefix} {line.name}: {line.amount} {currency}")
    print("Financial position:")
    for row in (*sections.financial_position, sections.financial_position_total):
        print(
            f"  {row.name}: opening={row.opening}, debits={row.debits}, "
            f"credits={row.credits}, closing={row.closing}"
        )
    intentions = sections.intentions
    print(
        f"Intentions: opening={intentions.opening}, "
        f"received={intentions.received}, "
        f"celebrated={intentions.celebrated_and_given}, "
        f"closing={intentions.closing}"
    )
    print("Receivables / payables:")
    for row in sections.settlements:
        print(
            f"  {row.name}: receivables {row.receivables_opening} -> "
            f"{row.receivables_closing}, payables {row.payables_opening} -> "
            f"{row.payables_closing}"
        )
    print(
        f"Totals: income={sections.income_total}, "
        f"expense={sections.expense_total}, balance={sections.balance} "
        f"{currency}"
    )
    for warning in sections.warnings:
        print(f"Excluded {warning.transaction_id}: {warning.reason}")


if __name__ == "__main__":  # pragma: no cover
    main()
