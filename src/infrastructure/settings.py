"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

DEFAULT_CURRENCY = "PLN"
DEFAULT_CATALOGUE_FILENAME = "report_catalogue.json"


@dataclass(frozen=True)
class EngineSettings:
    """Settings for the reporting engine.

    Attributes:
        catalogue_file: Optional JSON file overriding the built-in catalogue.
        currency: Reporting currency label.
    """

    catalogue_file: Optional[Path] = None
    currency: str = DEFAULT_CURRENCY

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Build settings from environment variables.

        Returns:
            EngineSettings: Settings sourced from environment variables.
        """
        raw_catalogue = os.getenv("REPORT_CATALOGUE_FILE")
        logger = get_app_logger()
        if raw_catalogue:
            catalogue_file = cls._normalize_path(raw_catalogue, logger=logger)
        else:
            catalogue_file = cls._default_catalogue_file()
        currency = (
            os.getenv("REPORT_CURRENCY", DEFAULT_CURRENCY).strip().upper()
            or DEFAULT_CURRENCY
        )
        return cls(
            catalogue_file=catalogue_file,
            currency=currency,
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Resolve the catalogue path and warn when it does not exist.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Resolved filesystem path.
        """
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Report catalogue file does not exist at {path}")
        return path

    @staticmethod
    def _default_catalogue_file() -> Path | None:
        """Return ``config/report_catalogue.json`` when present."""
        candidate = get_project_root() / "config" / DEFAULT_CATALOGUE_FILENAME
        if candidate.exists():
            return candidate.resolve()
        return None


__all__ = ["EngineSettings"]
