# Overview: Spreadsheet export of loaded entity rows.

from __future__ import annotations

import io
from datetime import date

import openpyxl

from ..time_utils import utcnow

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def export_filename(export_name: str, on: date | None = None) -> str:
    """shop_tracker_<entity>_<YYYY-MM-DD>.xlsx"""
    day = (on or utcnow().date()).isoformat()
    return f"shop_tracker_{export_name}_{day}.xlsx"


def build_workbook(sheet_title: str, headers: list[str], records: list[dict]) -> bytes:
    """
    One sheet, a header row, then one plain row per record. No styling.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = sheet_title
    ws.append(list(headers))
    for record in records:
        ws.append([record.get(header) for header in headers])

    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()
