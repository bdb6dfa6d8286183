"""Error taxonomy of the ledger reporting engine."""


class EngineError(Exception):
    """Base class for engine errors."""


class DataUnavailableError(EngineError):
    """A ledger store query failed; the caller decides whether to retry."""


class InvalidPeriodError(EngineError, ValueError):
    """Structurally invalid period: reversed dates or a month outside 1..12."""


class InvalidRequestError(EngineError, ValueError):
    """Request parameter outside its allowed values, such as a forecast method."""


class DuplicatePlanError(EngineError):
    """A budget plan already exists for the location and year."""


class PlanNotEditableError(EngineError):
    """Budget plan items can only change while the plan is a draft."""


class InvalidStatusTransitionError(EngineError):
    """Requested report or plan status change is not allowed."""


class NotFoundError(EngineError):
    """Requested report or plan does not exist."""


def duplicate_plan(location_id: str, year: int) -> str:
    """Return message for an existing budget plan."""
    return f"Budget plan for location {location_id} and year {year} already exists"


def invalid_transition(entity: str, current: str, target: str) -> str:
    """Return message for a rejected status change."""
    return f"Cannot change {entity} status from '{current}' to '{target}'"


__all__ = [
    "EngineError",
    "DataUnavailableError",
    "InvalidPeriodError",
    "InvalidRequestError",
    "DuplicatePlanError",
    "PlanNotEditableError",
    "InvalidStatusTransitionError",
    "NotFoundError",
    "duplicate_plan",
    "invalid_transition",
]
