"""Translation of SQLAlchemy failures into engine errors."""

from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from src.domain.errors import DataUnavailableError


@contextmanager
def ledger_store_errors(action: str):
    """Re-raise SQLAlchemy errors as DataUnavailableError.

    Args:
        action: Short description used in the error message.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        raise DataUnavailableError(
            f"Ledger store unavailable while {action}: {exc}"
        ) from exc


__all__ = ["ledger_store_errors"]
