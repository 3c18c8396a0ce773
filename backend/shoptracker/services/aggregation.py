# Overview: Pure aggregation over flat table rows for the dashboard and reports.

from __future__ import annotations

import math
from typing import Any, Iterable

DAILY_SERIES_DAYS = 14


def to_number(value: Any) -> float:
    """
    Numeric view of a stored value; text is parsed. None, junk and
    non-finite values ("nan", "inf") count as 0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value) if isinstance(value, (int, float)) else float(str(value).strip())
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def total(rows: Iterable[dict] | None, field: str) -> float:
    if not rows:
        return 0.0
    return sum((to_number(row.get(field)) for row in rows), 0.0)


def store_value_total(rows: Iterable[dict] | None) -> float:
    """Sum of goods_value + cash_value across store value rows."""
    if not rows:
        return 0.0
    return sum(
        (to_number(row.get("goods_value")) + to_number(row.get("cash_value")) for row in rows),
        0.0,
    )


def net_profit(total_sales: float, total_expenses: float) -> float:
    return total_sales - total_expenses


def sales_by_shop(shops: Iterable[dict] | None, sales: Iterable[dict] | None) -> list[dict]:
    """
    Per-shop sales totals in the shops' own order.

    Expenses are not linked to shops, so every row reports expenses 0 and
    profit equal to sales.
    """
    totals: dict[Any, float] = {}
    for sale in sales or []:
        shop_id = sale.get("shop_id")
        totals[shop_id] = totals.get(shop_id, 0.0) + to_number(sale.get("amount"))

    rows = []
    for shop in shops or []:
        shop_sales = totals.get(shop.get("id"), 0.0)
        rows.append(
            {
                "shop_id": shop.get("id"),
                "shop_name": shop.get("name"),
                "sales": shop_sales,
                "expenses": 0.0,
                "profit": shop_sales,
            }
        )
    return rows


def daily_sales(sales: Iterable[dict] | None, days: int = DAILY_SERIES_DAYS) -> list[dict]:
    """
    Sales summed per date, ascending, limited to the most recent `days`
    distinct dates present in the data (not a calendar window).
    """
    by_date: dict[str, float] = {}
    for sale in sales or []:
        day = sale.get("date")
        if day is None:
            continue
        by_date[day] = by_date.get(day, 0.0) + to_number(sale.get("amount"))

    # ISO YYYY-MM-DD sorts chronologically as text
    series = [{"date": day, "amount": amount} for day, amount in sorted(by_date.items())]
    if days <= 0:
        return []
    return series[-days:]


def expenses_by_category(expenses: Iterable[dict] | None) -> list[dict]:
    """Expenses summed per category, largest first."""
    by_category: dict[str, float] = {}
    for expense in expenses or []:
        category = expense.get("category")
        by_category[category] = by_category.get(category, 0.0) + to_number(expense.get("amount"))

    rows = [{"category": category, "amount": amount} for category, amount in by_category.items()]
    rows.sort(key=lambda row: row["amount"], reverse=True)
    return rows
