"""
Aggregation core tests.

Verifies:
- Totals over empty and non-empty row sets
- Per-shop rollup keeps shop order and reports zero for shops without sales
- Daily series keeps the most recent distinct dates, ascending
- Category rollup sorts largest first
- Numeric text and junk values
"""

from datetime import date, timedelta

from shoptracker.services import aggregation


# =============================================================================
# TOTALS
# =============================================================================


class TestTotals:

    def test_total_of_empty_is_zero(self):
        assert aggregation.total([], "amount") == 0
        assert aggregation.total(None, "amount") == 0

    def test_total_sums_field(self):
        rows = [{"amount": 10}, {"amount": 20}, {"amount": 30}]
        assert aggregation.total(rows, "amount") == 60

    def test_total_parses_numeric_text(self):
        rows = [{"amount": "123.45"}, {"amount": 1}]
        assert aggregation.total(rows, "amount") == 124.45

    def test_junk_and_missing_count_as_zero(self):
        rows = [{"amount": None}, {"amount": "abc"}, {}, {"amount": 5}]
        assert aggregation.total(rows, "amount") == 5

    def test_non_finite_text_counts_as_zero(self):
        rows = [{"amount": "nan"}, {"amount": "inf"}, {"amount": "-Infinity"}, {"amount": 5}]
        assert aggregation.total(rows, "amount") == 5
        assert aggregation.to_number(float("nan")) == 0

    def test_store_value_total(self):
        rows = [
            {"goods_value": 1000, "cash_value": 250},
            {"goods_value": "500", "cash_value": None},
        ]
        assert aggregation.store_value_total(rows) == 1750
        assert aggregation.store_value_total([]) == 0

    def test_net_profit_may_be_negative(self):
        assert aggregation.net_profit(100, 250) == -150
        assert aggregation.net_profit(250, 100) == 150


# =============================================================================
# SALES BY SHOP
# =============================================================================


class TestSalesByShop:

    def test_rollup_per_shop(self):
        shops = [{"id": "a", "name": "A"}, {"id": "b", "name": "B"}]
        sales = [
            {"shop_id": "a", "amount": 100},
            {"shop_id": "a", "amount": 50},
            {"shop_id": "b", "amount": 30},
        ]
        rows = aggregation.sales_by_shop(shops, sales)

        assert [(r["shop_name"], r["sales"]) for r in rows] == [("A", 150), ("B", 30)]

    def test_expenses_zero_and_profit_equals_sales(self):
        rows = aggregation.sales_by_shop(
            [{"id": "a", "name": "A"}],
            [{"shop_id": "a", "amount": 80}],
        )
        assert rows[0]["expenses"] == 0
        assert rows[0]["profit"] == 80

    def test_shop_without_sales_reports_zero(self):
        shops = [{"id": "a", "name": "A"}, {"id": "c", "name": "C"}]
        rows = aggregation.sales_by_shop(shops, [{"shop_id": "a", "amount": 10}])
        assert rows[1] == {
            "shop_id": "c",
            "shop_name": "C",
            "sales": 0,
            "expenses": 0,
            "profit": 0,
        }

    def test_sales_for_unknown_shop_are_ignored(self):
        rows = aggregation.sales_by_shop(
            [{"id": "a", "name": "A"}],
            [{"shop_id": "gone", "amount": 999}],
        )
        assert len(rows) == 1
        assert rows[0]["sales"] == 0

    def test_keeps_shop_order(self):
        shops = [{"id": "z", "name": "Z"}, {"id": "a", "name": "A"}]
        rows = aggregation.sales_by_shop(shops, [])
        assert [r["shop_id"] for r in rows] == ["z", "a"]


# =============================================================================
# DAILY SALES
# =============================================================================


class TestDailySales:

    def test_limits_to_latest_distinct_dates_ascending(self):
        start = date(2024, 1, 1)
        sales = [
            {"date": (start + timedelta(days=i)).isoformat(), "amount": i + 1}
            for i in range(20)
        ]
        # Shuffle order: newest first
        series = aggregation.daily_sales(list(reversed(sales)))

        assert len(series) == 14
        dates = [entry["date"] for entry in series]
        assert dates == sorted(dates)
        assert dates[0] == "2024-01-07"
        assert dates[-1] == "2024-01-20"

    def test_groups_same_date(self):
        sales = [
            {"date": "2024-01-02", "amount": 10},
            {"date": "2024-01-01", "amount": 5},
            {"date": "2024-01-02", "amount": "2.5"},
        ]
        assert aggregation.daily_sales(sales) == [
            {"date": "2024-01-01", "amount": 5},
            {"date": "2024-01-02", "amount": 12.5},
        ]

    def test_window_is_distinct_dates_not_calendar(self):
        sales = [
            {"date": "2023-01-01", "amount": 1},
            {"date": "2024-06-01", "amount": 2},
        ]
        series = aggregation.daily_sales(sales, days=14)
        assert [entry["date"] for entry in series] == ["2023-01-01", "2024-06-01"]

    def test_custom_days(self):
        sales = [{"date": f"2024-02-0{i}", "amount": i} for i in range(1, 6)]
        series = aggregation.daily_sales(sales, days=2)
        assert [entry["date"] for entry in series] == ["2024-02-04", "2024-02-05"]

    def test_empty(self):
        assert aggregation.daily_sales([]) == []
        assert aggregation.daily_sales([{"date": "2024-01-01", "amount": 1}], days=0) == []


# =============================================================================
# EXPENSES BY CATEGORY
# =============================================================================


class TestExpensesByCategory:

    def test_rollup_sorted_descending(self):
        expenses = [
            {"category": "Rent", "amount": 100},
            {"category": "Fuel", "amount": 50},
            {"category": "Rent", "amount": 25},
        ]
        assert aggregation.expenses_by_category(expenses) == [
            {"category": "Rent", "amount": 125},
            {"category": "Fuel", "amount": 50},
        ]

    def test_small_category_last(self):
        expenses = [
            {"category": "Other", "amount": 1},
            {"category": "Salaries", "amount": 900},
            {"category": "Fuel", "amount": 40},
        ]
        categories = [row["category"] for row in aggregation.expenses_by_category(expenses)]
        assert categories == ["Salaries", "Fuel", "Other"]

    def test_empty(self):
        assert aggregation.expenses_by_category(None) == []
