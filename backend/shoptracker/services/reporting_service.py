# Overview: Dashboard KPIs and report series computed from the three business tables.

from __future__ import annotations

from flask import current_app

from ..formatting import format_amount
from . import aggregation
from .table_client import TableClient, get_table_client

# Trend percentages on the KPI cards are fixed values, not derived from history.
TREND_PLACEHOLDERS = {
    "total_sales": 5.2,
    "total_store_value": 2.8,
    "total_expenses": -1.5,
    "net_profit": 8.3,
}

KPI_TITLES = {
    "total_sales": "Total Sales",
    "total_store_value": "Total Store Value",
    "total_expenses": "Total Expenses",
    "net_profit": "Net Profit",
}

QUICK_ACTIONS = [
    {"label": "Record New Sale", "href": "/sales"},
    {"label": "Add Expense", "href": "/expenses"},
    {"label": "View Reports", "href": "/reports"},
]


def _load(client: TableClient, table: str, columns: tuple[str, ...]) -> list[dict]:
    result = client.select(table, columns=columns)
    if not result.ok:
        current_app.logger.error("Failed to load %s for reporting: %s", table, result.error)
    return result.rows()


def dashboard_kpis(client: TableClient | None = None) -> dict:
    client = client if client is not None else get_table_client()

    sales = _load(client, "sales", ("amount",))
    expenses = _load(client, "expenses", ("amount",))
    store_values = _load(client, "store_values", ("goods_value", "cash_value"))

    total_sales = aggregation.total(sales, "amount")
    total_expenses = aggregation.total(expenses, "amount")
    values = {
        "total_sales": total_sales,
        "total_store_value": aggregation.store_value_total(store_values),
        "total_expenses": total_expenses,
        "net_profit": aggregation.net_profit(total_sales, total_expenses),
    }

    cards = [
        {
            "key": key,
            "title": KPI_TITLES[key],
            "value": value,
            "formatted": format_amount(value),
            "change": TREND_PLACEHOLDERS[key],
        }
        for key, value in values.items()
    ]

    return {
        **values,
        "cards": cards,
        "trend_is_placeholder": True,
        "quick_actions": QUICK_ACTIONS,
    }


def reports(client: TableClient | None = None, *, days: int | None = None) -> dict:
    """
    Per-shop performance, the daily sales series and expenses by category.
    """
    client = client if client is not None else get_table_client()
    if days is None:
        days = current_app.config.get("DAILY_SERIES_DAYS", aggregation.DAILY_SERIES_DAYS)

    shops = _load(client, "shops", ("id", "name"))
    sales = _load(client, "sales", ("shop_id", "amount", "date"))
    expenses = _load(client, "expenses", ("category", "amount", "date"))

    performance = aggregation.sales_by_shop(shops, sales)
    for row in performance:
        row["formatted"] = {
            "sales": format_amount(row["sales"]),
            "expenses": format_amount(row["expenses"]),
            "profit": format_amount(row["profit"]),
        }

    series = aggregation.daily_sales(sales, days)
    categories = aggregation.expenses_by_category(expenses)
    for entry in series + categories:
        entry["formatted"] = format_amount(entry["amount"])

    return {
        "shop_performance": performance,
        "daily_sales": series,
        "expenses_by_category": categories,
        "empty_messages": {
            "shop_performance": None if performance else "No shop performance data available",
            "daily_sales": None if series else "No sales data available",
            "expenses_by_category": None if categories else "No expense data available",
        },
    }
