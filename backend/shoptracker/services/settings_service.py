# Overview: Settings screen data and the reset-all-data action.

from __future__ import annotations

from flask import current_app

from .entity_service import ConfirmationRequired
from .table_client import TableClient, get_table_client

APP_VERSION = "1.0.0"
APP_NAME = "Shop Tracker Pro"
APP_TYPE = "MVP Demo"

CURRENCIES = [
    {"code": "MZN", "label": "Mozambique Metical"},
    {"code": "USD", "label": "US Dollar"},
    {"code": "EUR", "label": "Euro"},
    {"code": "GBP", "label": "British Pound"},
]

# Dependents first, shops last
RESET_TABLES = ("sales", "expenses", "store_values", "shops")


def settings_overview(user) -> dict:
    code = current_app.config.get("CURRENCY_CODE", "MZN")
    label = next((c["label"] for c in CURRENCIES if c["code"] == code), code)
    return {
        "owner": {
            "name": user.name if user else "",
            "email": user.email if user else "",
        },
        "currency": {"code": code, "label": label},
        "currencies": CURRENCIES,
        "about": {
            "version": APP_VERSION,
            "application": APP_NAME,
            "type": APP_TYPE,
        },
    }


def reset_all_data(*, confirmed: bool, client: TableClient | None = None) -> dict[str, int]:
    """
    Delete every shop, sale, expense and store value. No undo.

    Returns the number of rows removed per table.
    """
    if not confirmed:
        raise ConfirmationRequired(
            "Are you sure you want to reset all data? This action cannot be undone."
        )

    client = client if client is not None else get_table_client()
    deleted = {}
    for table in RESET_TABLES:
        deleted[table] = client.delete_all(table).raise_for_error().data
    current_app.logger.warning("All shop data reset: %s", deleted)
    return deleted
