# Overview: Generic list/create/update/delete over one table, driven by EntitySchema.

"""
Entity CRUD service.

Shops, sales, expenses and store values share one contract: list all rows,
create from a form payload, update by id, delete by id after confirmation,
and export the loaded rows. Each entity is described by an EntitySchema
(table, writable/required fields, list ordering, export projection); the
functions here take a schema and do the rest.

Every mutation is a single write through the table client. Callers refetch
the list afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from flask import current_app

from ..formatting import format_amount
from ..models import EXPENSE_CATEGORIES, Expense, Sale, Shop, StoreValue
from ..time_utils import utcnow
from ..validation import ConflictError, ModelValidationPolicy, validate_payload
from . import aggregation
from .aggregation import to_number
from .table_client import TableClient, get_table_client


class EntityError(Exception):
    """Raised when an entity operation fails."""
    pass


class EntityNotFoundError(EntityError):
    pass


class ConfirmationRequired(EntityError):
    """Destructive action attempted without an explicit yes."""
    pass


@dataclass(frozen=True)
class ExportColumn:
    header: str
    value: Callable[[dict], Any]


@dataclass(frozen=True)
class EntitySchema:
    name: str
    path: str
    table: str
    model: type
    label: str
    policy: ModelValidationPolicy
    empty_message: str
    order_by: str | None = None
    descending: bool = False
    allow_delete: bool = True
    with_shop_name: bool = False
    one_per_shop: bool = False
    export_name: str | None = None
    export_sheet: str | None = None
    export_columns: tuple[ExportColumn, ...] = field(default_factory=tuple)
    # Summary card over the loaded rows, and the amounts shown as currency
    total: Callable[[list[dict]], float] | None = None
    amount_fields: tuple[str, ...] = ()
    row_total: Callable[[dict], float] | None = None


SHOPS = EntitySchema(
    name="shops",
    path="shops",
    table="shops",
    model=Shop,
    label="shop",
    policy=ModelValidationPolicy(
        writable_fields=frozenset({"name", "location", "manager_name"}),
        required_on_create=frozenset({"name", "location", "manager_name"}),
    ),
    empty_message='No shops added yet. Click "Add Shop" to get started.',
    order_by="created_at",
    descending=True,
)

SALES = EntitySchema(
    name="sales",
    path="sales",
    table="sales",
    model=Sale,
    label="sale",
    policy=ModelValidationPolicy(
        writable_fields=frozenset({"date", "shop_id", "amount", "notes"}),
        required_on_create=frozenset({"date", "shop_id", "amount"}),
    ),
    empty_message='No sales recorded yet. Click "Add Sale" to get started.',
    order_by="date",
    descending=True,
    with_shop_name=True,
    total=lambda rows: aggregation.total(rows, "amount"),
    amount_fields=("amount",),
    export_name="sales",
    export_sheet="Sales",
    export_columns=(
        ExportColumn("Date", lambda row: row.get("date")),
        ExportColumn("Shop", lambda row: row.get("shop_name")),
        ExportColumn("Amount (MZN)", lambda row: to_number(row.get("amount"))),
        ExportColumn("Notes", lambda row: row.get("notes")),
    ),
)

EXPENSES = EntitySchema(
    name="expenses",
    path="expenses",
    table="expenses",
    model=Expense,
    label="expense",
    policy=ModelValidationPolicy(
        writable_fields=frozenset({"date", "category", "amount", "notes"}),
        required_on_create=frozenset({"date", "category", "amount"}),
        choices={"category": EXPENSE_CATEGORIES},
    ),
    empty_message='No expenses recorded yet. Click "Add Expense" to get started.',
    order_by="date",
    descending=True,
    total=lambda rows: aggregation.total(rows, "amount"),
    amount_fields=("amount",),
    export_name="expenses",
    export_sheet="Expenses",
    export_columns=(
        ExportColumn("Date", lambda row: row.get("date")),
        ExportColumn("Category", lambda row: row.get("category")),
        ExportColumn("Amount (MZN)", lambda row: to_number(row.get("amount"))),
        ExportColumn("Notes", lambda row: row.get("notes")),
    ),
)

def _store_value_row_total(row: dict) -> float:
    return to_number(row.get("goods_value")) + to_number(row.get("cash_value"))


STORE_VALUES = EntitySchema(
    name="store_values",
    path="store-values",
    table="store_values",
    model=StoreValue,
    label="store value",
    policy=ModelValidationPolicy(
        writable_fields=frozenset({"shop_id", "goods_value", "cash_value"}),
        required_on_create=frozenset({"shop_id", "goods_value", "cash_value"}),
    ),
    empty_message='No store values recorded yet. Click "Update Values" to get started.',
    allow_delete=False,
    with_shop_name=True,
    one_per_shop=True,
    total=aggregation.store_value_total,
    amount_fields=("goods_value", "cash_value"),
    row_total=_store_value_row_total,
    export_name="store_values",
    export_sheet="Store Values",
    export_columns=(
        ExportColumn("Shop", lambda row: row.get("shop_name")),
        ExportColumn("Goods Value (MZN)", lambda row: to_number(row.get("goods_value"))),
        ExportColumn("Cash Value (MZN)", lambda row: to_number(row.get("cash_value"))),
        ExportColumn("Total Value (MZN)", _store_value_row_total),
    ),
)

SCHEMAS = (SHOPS, SALES, EXPENSES, STORE_VALUES)


def _client(client: TableClient | None) -> TableClient:
    return client if client is not None else get_table_client()


def _shop_names(client: TableClient) -> dict[str, str]:
    result = client.select("shops", columns=("id", "name"))
    if not result.ok:
        current_app.logger.error("Failed to load shops: %s", result.error)
    return {shop["id"]: shop["name"] for shop in result.rows()}


def list_rows(schema: EntitySchema, client: TableClient | None = None) -> list[dict]:
    """
    All rows of the entity's table in its list order.

    A failed fetch is logged and yields an empty list.
    """
    client = _client(client)
    result = client.select(schema.table, order_by=schema.order_by, descending=schema.descending)
    if not result.ok:
        current_app.logger.error("Failed to load %s: %s", schema.table, result.error)
        return []

    rows = result.rows()
    if schema.with_shop_name:
        names = _shop_names(client)
        for row in rows:
            row["shop_name"] = names.get(row.get("shop_id"))
    return rows


def list_view(schema: EntitySchema, client: TableClient | None = None) -> dict:
    """
    The list screen: rows with display amounts, the empty-state prompt, and
    the summary total when the entity has one.
    """
    rows = list_rows(schema, client)
    fields = schema.amount_fields
    if schema.row_total is not None:
        fields += ("total_value",)

    for row in rows:
        if schema.row_total is not None:
            row["total_value"] = schema.row_total(row)
        if fields:
            row["formatted"] = {name: format_amount(row.get(name)) for name in fields}

    view = {
        "rows": rows,
        "empty_message": None if rows else schema.empty_message,
    }
    if schema.total is not None:
        total = schema.total(rows)
        view["total"] = total
        view["formatted_total"] = format_amount(total)
    return view


def get_row(schema: EntitySchema, row_id: str, client: TableClient | None = None) -> dict:
    result = _client(client).get(schema.table, row_id).raise_for_error()
    if result.data is None:
        raise EntityNotFoundError(f"{schema.label.capitalize()} not found")
    return result.data


def _ensure_shop_free(client: TableClient, shop_id: str, *, editing_id: str | None = None) -> None:
    taken = client.select("store_values", columns=("id",), filters={"shop_id": shop_id}).raise_for_error()
    for row in taken.rows():
        if row["id"] != editing_id:
            raise ConflictError("This shop already has a store value")


def create_row(schema: EntitySchema, payload: dict | None, client: TableClient | None = None) -> dict:
    client = _client(client)
    values = validate_payload(model=schema.model, payload=payload, policy=schema.policy, partial=False)

    if schema.one_per_shop:
        _ensure_shop_free(client, values["shop_id"])

    return client.insert(schema.table, values).raise_for_error().data


def update_row(
    schema: EntitySchema,
    row_id: str,
    payload: dict | None,
    client: TableClient | None = None,
) -> dict:
    client = _client(client)
    values = validate_payload(model=schema.model, payload=payload, policy=schema.policy, partial=True)

    if schema.one_per_shop and "shop_id" in values:
        _ensure_shop_free(client, values["shop_id"], editing_id=row_id)

    values["updated_at"] = utcnow()
    result = client.update(schema.table, row_id, values).raise_for_error()
    if result.data is None:
        raise EntityNotFoundError(f"{schema.label.capitalize()} not found")
    return result.data


def delete_row(
    schema: EntitySchema,
    row_id: str,
    *,
    confirmed: bool,
    client: TableClient | None = None,
) -> None:
    """
    Delete one row by id. Related rows in other tables are left untouched.
    """
    if not schema.allow_delete:
        raise EntityError(f"{schema.label.capitalize()} rows cannot be deleted")
    if not confirmed:
        raise ConfirmationRequired(f"Are you sure you want to delete this {schema.label}?")

    result = _client(client).delete(schema.table, row_id).raise_for_error()
    if not result.data:
        raise EntityNotFoundError(f"{schema.label.capitalize()} not found")


def available_shops(editing_id: str | None = None, client: TableClient | None = None) -> list[dict]:
    """
    Shops selectable in the store value form.

    Excludes shops that already have a store value row, except the shop of
    the row currently being edited.
    """
    client = _client(client)
    shops = client.select("shops").raise_for_error().rows()
    values = client.select("store_values", columns=("id", "shop_id")).raise_for_error().rows()

    editing_shop_id = None
    taken = set()
    for value in values:
        taken.add(value["shop_id"])
        if editing_id is not None and value["id"] == editing_id:
            editing_shop_id = value["shop_id"]

    return [shop for shop in shops if shop["id"] not in taken or shop["id"] == editing_shop_id]


def export_records(schema: EntitySchema, rows: list[dict]) -> list[dict]:
    """Project loaded rows onto the export columns, keyed by header."""
    if not schema.export_columns:
        raise EntityError(f"{schema.label.capitalize()} rows cannot be exported")
    return [
        {column.header: column.value(row) for column in schema.export_columns}
        for row in rows
    ]
