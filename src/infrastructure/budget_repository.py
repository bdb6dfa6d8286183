"""SQLAlchemy-backed store for budget plans and items."""

from collections.abc import Sequence
from decimal import Decimal

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from src.application.ports.budget_store import BudgetStorePort
from src.application.ports.database import DatabaseEnginePort
from src.domain.errors import DuplicatePlanError, duplicate_plan
from src.domain.models import (
    BudgetItem,
    BudgetItemKind,
    BudgetPlan,
    BudgetPlanStatus,
    ForecastMethod,
)
from src.infrastructure.sql_errors import ledger_store_errors
from src.utils.decimal_utils import coerce_decimal

PLAN_COLUMNS = """
    id, location_id, year, status, forecast_method,
    additional_expenses, planned_cost_reduction
"""

SELECT_PLAN_SQL = text(
    f"""
    SELECT {PLAN_COLUMNS}
    FROM budget_plans
    WHERE location_id = :location_id AND year = :year
    """
)

SELECT_PLAN_BY_ID_SQL = text(
    f"""
    SELECT {PLAN_COLUMNS}
    FROM budget_plans
    WHERE id = :plan_id
    """
)

SELECT_ITEMS_SQL = text(
    """
    SELECT account_prefix, account_name, account_type, planned_amount,
           previous_year_amount, forecasted_amount
    FROM budget_items
    WHERE budget_plan_id = :plan_id
    ORDER BY account_type DESC, account_prefix
    """
)

INSERT_PLAN_SQL = text(
    f"""
    INSERT INTO budget_plans (
        location_id,
        year,
        status,
        forecast_method,
        additional_expenses,
        planned_cost_reduction
    )
    VALUES (
        :location_id,
        :year,
        :status,
        :forecast_method,
        :additional_expenses,
        :planned_cost_reduction
    )
    RETURNING {PLAN_COLUMNS}
    """
)

INSERT_ITEMS_SQL = text(
    """
    INSERT INTO budget_items (
        budget_plan_id,
        account_prefix,
        account_name,
        account_type,
        planned_amount,
        previous_year_amount,
        forecasted_amount
    )
    VALUES (
        :budget_plan_id,
        :account_prefix,
        :account_name,
        :account_type,
        :planned_amount,
        :previous_year_amount,
        :forecasted_amount
    )
    """
)

DELETE_ITEMS_SQL = text(
    "DELETE FROM budget_items WHERE budget_plan_id = :plan_id"
)

UPDATE_PLAN_STATUS_SQL = text(
    """
    UPDATE budget_plans
    SET status = :status, updated_at = CURRENT_TIMESTAMP
    WHERE id = :plan_id
    """
)


class SqlAlchemyBudgetStore(BudgetStorePort):
    """Budget store backed by SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def read_budget_plan(self, location_id: str, year: int) -> BudgetPlan | None:
        return self._read_plan(
            SELECT_PLAN_SQL,
            {"location_id": location_id, "year": year},
        )

    def read_budget_plan_by_id(self, plan_id: str) -> BudgetPlan | None:
        return self._read_plan(SELECT_PLAN_BY_ID_SQL, {"plan_id": plan_id})

    def create_budget_plan_with_items(
        self,
        location_id: str,
        year: int,
        forecast_method: ForecastMethod,
        additional_expenses: Decimal,
        planned_cost_reduction: Decimal,
        items: Sequence[BudgetItem],
    ) -> BudgetPlan:
        """Insert a draft plan and its items in one transaction.

        Raises:
            DuplicatePlanError: If the plan insert violates the
                ``(location_id, year)`` key. Nothing is written.
            DataUnavailableError: If any other statement fails. The plan
                row is rolled back with the items.
        """
        params = {
            "location_id": location_id,
            "year": year,
            "status": BudgetPlanStatus.DRAFT.value,
            "forecast_method": ForecastMethod(forecast_method).value,
            "additional_expenses": additional_expenses,
            "planned_cost_reduction": planned_cost_reduction,
        }
        engine = self._db_port.get_ledger_engine()
        with ledger_store_errors("creating a budget plan"):
            with engine.begin() as conn:
                try:
                    row = conn.execute(INSERT_PLAN_SQL, params).one()
                except IntegrityError as exc:
                    raise DuplicatePlanError(
                        duplicate_plan(location_id, year)
                    ) from exc
                payload = self._items_payload(str(row.id), items)
                if payload:
                    conn.execute(INSERT_ITEMS_SQL, payload)
        return self._to_plan(row, tuple(items))

    def replace_budget_items(
        self,
        plan_id: str,
        items: Sequence[BudgetItem],
    ) -> None:
        """Delete and re-insert the items of a plan in one transaction."""
        payload = self._items_payload(plan_id, items)
        engine = self._db_port.get_ledger_engine()
        with ledger_store_errors("replacing budget items"):
            with engine.begin() as conn:
                conn.execute(DELETE_ITEMS_SQL, {"plan_id": plan_id})
                if payload:
                    conn.execute(INSERT_ITEMS_SQL, payload)

    def update_budget_plan_status(
        self,
        plan_id: str,
        status: BudgetPlanStatus,
    ) -> None:
        engine = self._db_port.get_ledger_engine()
        with ledger_store_errors("updating a budget plan status"):
            with engine.begin() as conn:
                conn.execute(
                    UPDATE_PLAN_STATUS_SQL,
                    {
                        "plan_id": plan_id,
                        "status": BudgetPlanStatus(status).value,
                    },
                )

    def _read_plan(self, query, params: dict) -> BudgetPlan | None:
        engine = self._db_port.get_ledger_engine()
        with ledger_store_errors("reading a budget plan"):
            with engine.connect() as conn:
                row = conn.execute(query, params).first()
                if row is None:
                    return None
                item_rows = conn.execute(
                    SELECT_ITEMS_SQL,
                    {"plan_id": row.id},
                ).all()
        items = tuple(self._to_item(item) for item in item_rows)
        return self._to_plan(row, items)

    @staticmethod
    def _to_plan(row, items: tuple[BudgetItem, ...]) -> BudgetPlan:
        return BudgetPlan(
            id=str(row.id),
            location_id=str(row.location_id),
            year=int(row.year),
            status=BudgetPlanStatus(row.status),
            forecast_method=ForecastMethod(row.forecast_method),
            additional_expenses=coerce_decimal(row.additional_expenses),
            planned_cost_reduction=coerce_decimal(row.planned_cost_reduction),
            items=items,
        )

    @staticmethod
    def _to_item(row) -> BudgetItem:
        return BudgetItem(
            account_prefix=row.account_prefix,
            account_name=row.account_name,
            kind=BudgetItemKind(row.account_type),
            planned_amount=coerce_decimal(row.planned_amount),
            previous_year_amount=(
                None
                if row.previous_year_amount is None
                else coerce_decimal(row.previous_year_amount)
            ),
            forecasted_amount=(
                None
                if row.forecasted_amount is None
                else coerce_decimal(row.forecasted_amount)
            ),
        )

    @staticmethod
    def _items_payload(
        plan_id: str,
        items: Sequence[BudgetItem],
    ) -> list[dict]:
        return [
            {
                "budget_plan_id": plan_id,
                "account_prefix": item.account_prefix,
                "account_name": item.account_name,
                "account_type": BudgetItemKind(item.kind).value,
                "planned_amount": item.planned_amount,
                "previous_year_amount": item.previous_year_amount,
                "forecasted_amount": item.forecasted_amount,
            }
            for item in items
        ]


__all__ = ["SqlAlchemyBudgetStore"]
