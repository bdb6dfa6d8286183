"""Use case to compare report totals across periods."""

from src.application.use_cases.assemble_report import AssembleReportUseCase
from src.domain.models import Comparison, ComparisonMetric, ReportSections
from src.domain.services.comparison import compare_all, compare_reports
from src.infrastructure.logging.logger import get_app_logger
from src.utils.date_utils import previous_month


class ComparePeriodsUseCase:
    """Year-over-year and month-over-month comparisons of monthly reports."""

    def __init__(
        self,
        report_assembler: AssembleReportUseCase,
        logger=None,
    ) -> None:
        self._report_assembler = report_assembler
        self._logger = logger or get_app_logger()

    @staticmethod
    def compare(
        current: ReportSections,
        previous: ReportSections,
        metric: ComparisonMetric | str,
    ) -> Comparison:
        return compare_reports(current, previous, metric)

    def year_over_year(
        self,
        location_id: str,
        month: int,
        year: int,
    ) -> dict[ComparisonMetric, Comparison]:
        """Compare a month with the same month of the previous year."""
        current = self._report_assembler.execute(location_id, month, year)
        previous = self._report_assembler.execute(location_id, month, year - 1)
        result = compare_all(current, previous)
        self._log(location_id, "year-over-year", year, month, result)
        return result

    def month_over_month(
        self,
        location_id: str,
        month: int,
        year: int,
    ) -> dict[ComparisonMetric, Comparison]:
        """Compare a month with the month before it."""
        previous_year, previous = previous_month(year, month)
        current_report = self._report_assembler.execute(location_id, month, year)
        previous_report = self._report_assembler.execute(
            location_id,
            previous,
            previous_year,
        )
        result = compare_all(current_report, previous_report)
        self._log(location_id, "month-over-month", year, month, result)
        return result

    def _log(
        self,
        location_id: str,
        label: str,
        year: int,
        month: int,
        result: dict[ComparisonMetric, Comparison],
    ) -> None:
        changes = ", ".join(
            f"{metric.value}={comparison.change}"
            for metric, comparison in result.items()
        )
        self._logger.info(
            f"{label} {location_id} {year}-{month:02d}: {changes}"
        )


__all__ = ["ComparePeriodsUseCase"]
