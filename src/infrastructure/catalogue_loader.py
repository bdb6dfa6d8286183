"""Loader for versioned report catalogues stored as JSON."""

import json
from pathlib import Path

from src.domain.constants import DEFAULT_CATALOGUE
from src.domain.models import (
    CatalogueEntry,
    PositionCategory,
    ReportCatalogue,
    SettlementCategory,
)
from src.infrastructure.logging.logger import get_app_logger


def load_catalogue(path: Path | str | None, logger=None) -> ReportCatalogue:
    """Load a report catalogue, falling back to the built-in one.

    Sections missing from the document keep their built-in values.

    Args:
        path: JSON document path, or None for the built-in catalogue.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        ReportCatalogue: Parsed catalogue.

    Raises:
        ValueError: If the document is not valid catalogue JSON.
    """
    logger = logger or get_app_logger()
    if path is None:
        return DEFAULT_CATALOGUE
    path = Path(path)
    if not path.exists():
        logger.warning(
            f"Report catalogue {path} not found; using built-in catalogue"
        )
        return DEFAULT_CATALOGUE

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        catalogue = parse_catalogue(payload)
    except (json.JSONDecodeError, KeyError, TypeError) as exc:
        raise ValueError(f"Invalid report catalogue {path}: {exc}") from exc
    logger.info(f"Loaded report catalogue {catalogue.version} from {path}")
    return catalogue


def parse_catalogue(payload: dict) -> ReportCatalogue:
    """Build a catalogue from its JSON representation."""
    default = DEFAULT_CATALOGUE
    return ReportCatalogue(
        version=str(payload.get("version", default.version)),
        income=_entries(payload.get("income"), default.income),
        expense=_entries(payload.get("expense"), default.expense),
        financial_position=_categories(
            payload.get("financial_position"),
            PositionCategory,
            default.financial_position,
        ),
        settlements=_categories(
            payload.get("settlements"),
            SettlementCategory,
            default.settlements,
        ),
        intentions_prefix=str(
            payload.get("intentions_prefix", default.intentions_prefix)
        ),
        intentions_name=payload.get("intentions_name", default.intentions_name),
    )


def _entries(raw, default):
    if raw is None:
        return default
    return tuple(
        CatalogueEntry(prefix=str(entry["prefix"]), name=entry["name"])
        for entry in raw
    )


def _categories(raw, factory, default):
    if raw is None:
        return default
    return tuple(
        factory(
            key=entry["key"],
            name=entry["name"],
            prefixes=tuple(str(prefix) for prefix in entry["prefixes"]),
        )
        for entry in raw
    )


__all__ = ["load_catalogue", "parse_catalogue"]
