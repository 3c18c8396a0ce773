"""
Spreadsheet export tests: headers, rows and filename.
"""

import io
from datetime import date

import openpyxl

from shoptracker.services import export_service

from conftest import add_expense, add_sale, add_store_value


def _load(resp):
    wb = openpyxl.load_workbook(io.BytesIO(resp.data))
    ws = wb.active
    return ws.title, [list(row) for row in ws.iter_rows(values_only=True)]


def test_export_filename():
    assert export_service.export_filename("sales", on=date(2024, 3, 1)) == "shop_tracker_sales_2024-03-01.xlsx"


def test_empty_workbook_has_header_row():
    content = export_service.build_workbook("Sales", ["Date", "Amount (MZN)"], [])
    ws = openpyxl.load_workbook(io.BytesIO(content)).active
    assert [list(row) for row in ws.iter_rows(values_only=True)] == [["Date", "Amount (MZN)"]]


def test_sales_export(client, headers, shop_a):
    add_sale(shop_a.id, 123.45, day="2024-03-01", notes="morning")
    add_sale(shop_a.id, 10, day="2024-03-02")

    resp = client.get("/api/sales/export", headers=headers)
    assert resp.status_code == 200
    assert resp.mimetype == export_service.XLSX_MIMETYPE
    disposition = resp.headers["Content-Disposition"]
    assert disposition.startswith("attachment; filename=shop_tracker_sales_")
    assert disposition.endswith(".xlsx")

    title, rows = _load(resp)
    assert title == "Sales"
    assert rows[0] == ["Date", "Shop", "Amount (MZN)", "Notes"]
    assert rows[1][:3] == ["2024-03-02", "Baixa Store", 10]
    assert rows[2] == ["2024-03-01", "Baixa Store", 123.45, "morning"]


def test_expenses_export(client, headers):
    add_expense("Rent", 500, day="2024-03-01")

    title, rows = _load(client.get("/api/expenses/export", headers=headers))
    assert title == "Expenses"
    assert rows[0] == ["Date", "Category", "Amount (MZN)", "Notes"]
    assert rows[1][:3] == ["2024-03-01", "Rent", 500]


def test_store_values_export_totals(client, headers, shop_a):
    add_store_value(shop_a.id, 1000, 250.5)

    title, rows = _load(client.get("/api/store-values/export", headers=headers))
    assert title == "Store Values"
    assert rows[0] == ["Shop", "Goods Value (MZN)", "Cash Value (MZN)", "Total Value (MZN)"]
    assert rows[1] == ["Baixa Store", 1000, 250.5, 1250.5]


def test_shops_have_no_export(client, headers):
    resp = client.get("/api/shops/export", headers=headers)
    # Falls through to the row lookup
    assert resp.status_code == 404
