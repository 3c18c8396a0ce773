# Overview: Table-name based query client over the SQLAlchemy session.

"""
Backend client adapter.

Every screen talks to the store through four table names (shops, sales,
expenses, store_values) and a handful of operations. Each call returns a
QueryResult carrying either data or an error message, never raising for
backend failures; callers decide whether an error degrades to an empty
result or is surfaced via QueryResult.raise_for_error().

Rows are plain dicts shaped by each model's to_dict().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from sqlalchemy.exc import SQLAlchemyError

from ..extensions import db
from ..models import NIL_UUID, Expense, Sale, Shop, StoreValue

logger = logging.getLogger(__name__)

TABLES = {
    "shops": Shop,
    "sales": Sale,
    "expenses": Expense,
    "store_values": StoreValue,
}


class TableClientError(Exception):
    """Raised when a backend call failed and the caller asked for it."""
    pass


@dataclass
class QueryResult:
    data: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def rows(self) -> list[dict]:
        """Data as a list; failed or empty fetches yield []."""
        if self.error is not None or self.data is None:
            return []
        return list(self.data)

    def raise_for_error(self) -> "QueryResult":
        if self.error is not None:
            raise TableClientError(self.error)
        return self


class TableClient:
    def __init__(self, session=None):
        self.session = session if session is not None else db.session

    def _model(self, table: str):
        model = TABLES.get(table)
        if model is None:
            raise TableClientError(f"Unknown table: {table}")
        return model

    def _fail(self, action: str, table: str, exc: Exception) -> QueryResult:
        self.session.rollback()
        logger.exception("%s on %s failed", action, table)
        return QueryResult(error=str(exc))

    def select(
        self,
        table: str,
        *,
        columns: Iterable[str] | None = None,
        filters: dict | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> QueryResult:
        model = self._model(table)
        try:
            query = self.session.query(model)
            for key, value in (filters or {}).items():
                query = query.filter(getattr(model, key) == value)
            if order_by:
                column = getattr(model, order_by)
                query = query.order_by(column.desc() if descending else column.asc())
            rows = [row.to_dict() for row in query.all()]
        except SQLAlchemyError as exc:
            return self._fail("select", table, exc)

        if columns:
            wanted = list(columns)
            rows = [{key: row.get(key) for key in wanted} for row in rows]
        return QueryResult(data=rows)

    def get(self, table: str, row_id: str) -> QueryResult:
        model = self._model(table)
        try:
            row = self.session.get(model, row_id)
        except SQLAlchemyError as exc:
            return self._fail("get", table, exc)
        return QueryResult(data=row.to_dict() if row else None)

    def insert(self, table: str, values: dict) -> QueryResult:
        model = self._model(table)
        try:
            row = model(**values)
            self.session.add(row)
            self.session.commit()
        except SQLAlchemyError as exc:
            return self._fail("insert", table, exc)
        logger.info("Inserted %s row %s", table, row.id)
        return QueryResult(data=row.to_dict())

    def update(self, table: str, row_id: str, values: dict) -> QueryResult:
        """Update one row by id; data is None when the row does not exist."""
        model = self._model(table)
        try:
            row = self.session.get(model, row_id)
            if row is None:
                return QueryResult(data=None)
            for key, value in values.items():
                setattr(row, key, value)
            self.session.commit()
        except SQLAlchemyError as exc:
            return self._fail("update", table, exc)
        logger.info("Updated %s row %s", table, row_id)
        return QueryResult(data=row.to_dict())

    def delete(self, table: str, row_id: str) -> QueryResult:
        """Delete one row by id; data is the number of rows removed."""
        model = self._model(table)
        try:
            count = self.session.query(model).filter(model.id == row_id).delete()
            self.session.commit()
        except SQLAlchemyError as exc:
            return self._fail("delete", table, exc)
        logger.info("Deleted %s row %s", table, row_id)
        return QueryResult(data=count)

    def delete_all(self, table: str) -> QueryResult:
        """Delete every row, expressed as "id is not the nil UUID"."""
        model = self._model(table)
        try:
            count = self.session.query(model).filter(model.id != NIL_UUID).delete()
            self.session.commit()
        except SQLAlchemyError as exc:
            return self._fail("delete_all", table, exc)
        logger.info("Deleted all %d rows from %s", count, table)
        return QueryResult(data=count)


def get_table_client() -> TableClient:
    """Client bound to the current request's session."""
    return TableClient(db.session)
