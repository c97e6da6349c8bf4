# export/excel_exporter.py
from __future__ import annotations
from pathlib import Path
from typing import Sequence

import structlog
from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from short_tracker.logic.report import ABSENT, MonthlyReport
from short_tracker.models.worker import Worker
from short_tracker.utils.date_helper import format_month_label, format_row_date
from short_tracker.utils.format_utils import OFF_LABEL

log = structlog.get_logger(__name__)

SHEET_TITLE = "Short Report"
NUMBER_FORMAT = "#,##0.00"

FIXED_COLUMN_WIDTHS = (15, 15, 15, 20, 15)
WORKER_COLUMN_WIDTH = 12

HEADER_FONT = Font(bold=True, color="000000")
CENTER = Alignment(horizontal="center")
WHITE_FILL = PatternFill(fill_type="solid", fgColor="FFFFFF")
YELLOW_FILL = PatternFill(fill_type="solid", fgColor="FFFF00")
CREAM_FILL = PatternFill(fill_type="solid", fgColor="F5DEB3")
TOTAL_FONT = Font(bold=True, color="FF0000")
OFF_FONT = Font(color="AAAAAA")


def report_filename(year: int, month: int) -> str:
    """month is zero-based; the file name uses the calendar month number."""
    return f"Short_Report_{month + 1}_{year}.xlsx"


def _style_header(cell, fill):
    cell.font = HEADER_FONT
    cell.fill = fill
    cell.alignment = CENTER


def _number(ws, row: int, col: int, value: float, font=None):
    cell = ws.cell(row=row, column=col, value=value)
    cell.number_format = NUMBER_FORMAT
    if font is not None:
        cell.font = font
    return cell


def build_workbook(report: MonthlyReport, workers: Sequence[Worker]) -> Workbook:
    """
    Layout:
      header | one row per reported day | TOTAL
    Worker columns follow the roster order the report was built with.
    """
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE

    # header
    headers = [
        (f"Date: {format_month_label(report.year, report.month)}", WHITE_FILL),
        ("Unrecorded", YELLOW_FILL),
        ("Short", YELLOW_FILL),
        ("Short Penalty (+50)", CREAM_FILL),
        ("Total Penalty", CREAM_FILL),
    ] + [(w.name, WHITE_FILL) for w in workers]
    for c, (text, fill) in enumerate(headers, start=1):
        _style_header(ws.cell(row=1, column=c, value=text), fill)

    # day rows
    r = 2
    for row in report.rows:
        ws.cell(row=r, column=1, value=format_row_date(report.year, report.month, row.day))
        _number(ws, r, 2, row.unrecorded)
        _number(ws, r, 3, row.short)
        _number(ws, r, 4, row.short_penalty)
        _number(ws, r, 5, row.total_penalty)
        for c, w in enumerate(workers, start=6):
            share = row.share_for(w.id)
            if share is ABSENT:
                ws.cell(row=r, column=c, value=OFF_LABEL).font = OFF_FONT
            else:
                _number(ws, r, c, share)
        r += 1

    # totals
    totals = report.totals
    ws.cell(row=r, column=1, value="TOTAL").font = Font(bold=True)
    _number(ws, r, 2, totals.unrecorded, TOTAL_FONT)
    _number(ws, r, 3, totals.short, TOTAL_FONT)
    ws.cell(row=r, column=4, value="-").alignment = CENTER
    _number(ws, r, 5, totals.total_penalty, TOTAL_FONT)
    for c, w in enumerate(workers, start=6):
        _number(ws, r, c, totals.share_for(w.id), TOTAL_FONT)

    widths = list(FIXED_COLUMN_WIDTHS) + [WORKER_COLUMN_WIDTH] * len(workers)
    for c, width in enumerate(widths, start=1):
        ws.column_dimensions[get_column_letter(c)].width = width

    return wb


def export_monthly_report(report: MonthlyReport, workers: Sequence[Worker], out_dir: str | Path) -> Path:
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / report_filename(report.year, report.month)
    wb = build_workbook(report, workers)
    wb.save(path)
    log.info("report_exported", path=str(path), rows=len(report.rows))
    return path
