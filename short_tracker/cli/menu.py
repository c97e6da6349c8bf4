# cli/menu.py
from datetime import date

import structlog

from short_tracker.cli.entry_menu import entry_menu
from short_tracker.cli.worker_menu import worker_menu
from short_tracker.data.data_manager import load_workers, load_entries
from short_tracker.exceptions import CancelAction, GoBackAction
from short_tracker.export.excel_exporter import export_monthly_report
from short_tracker.logic.report import build_monthly_report
from short_tracker.utils.date_helper import format_month_label, format_row_date
from short_tracker.utils.format_utils import format_currency, format_share_cell
from short_tracker.utils.input_handler import get_input

log = structlog.get_logger(__name__)


def _ask_month():
    """Returns (year, zero-based month)."""
    today = date.today()
    while True:
        raw = get_input("Month (YYYY-MM)", default=f"{today.year:04d}-{today.month:02d}")
        parts = raw.split("-")
        if len(parts) == 2 and all(p.isdigit() for p in parts) and 1 <= int(parts[1]) <= 12:
            return int(parts[0]), int(parts[1]) - 1
        print("Use the YYYY-MM format.")


def render_month_summary(report, workers) -> list[str]:
    lines = [f"[{format_month_label(report.year, report.month)}]"]
    if report.is_empty:
        lines.append("No entries this month.")
        return lines
    for row in report.rows:
        cells = " | ".join(f"{w.name}: {format_share_cell(row.share_for(w.id))}" for w in workers)
        lines.append(
            f"{format_row_date(report.year, report.month, row.day)}  "
            f"unrec {format_currency(row.unrecorded)}  short {format_currency(row.short)}  "
            f"penalty {format_currency(row.total_penalty)}  {cells}"
        )
    t = report.totals
    cells = " | ".join(f"{w.name}: {format_currency(t.share_for(w.id))}" for w in workers)
    lines.append(
        f"TOTAL     unrec {format_currency(t.unrecorded)}  short {format_currency(t.short)}  "
        f"penalty {format_currency(t.total_penalty)}  {cells}"
    )
    return lines


def show_month(store):
    year, month = _ask_month()
    workers = load_workers(store)
    report = build_monthly_report(workers, load_entries(store), year, month)
    print()
    for line in render_month_summary(report, workers):
        print(line)


def export_month(store, settings):
    year, month = _ask_month()
    workers = load_workers(store)
    report = build_monthly_report(workers, load_entries(store), year, month)
    try:
        path = export_monthly_report(report, workers, settings.export_dir)
    except OSError as exc:
        log.error("report_export_failed", export_dir=str(settings.export_dir), error=str(exc))
        print(f"Could not write the report: {exc}")
        return None
    if report.is_empty:
        print("No entries this month; the report only has the header and totals.")
    print(f"Saved: {path}")
    return path


def main_menu(store, settings):
    while True:
        print("\n[Short Tracker]")
        print("1. Team members")
        print("2. Daily entries")
        print("3. Month summary")
        print("4. Export month to Excel")
        print("0. Quit")

        try:
            choice = get_input("Choice")
            if choice == "1":
                worker_menu(store)
            elif choice == "2":
                entry_menu(store)
            elif choice == "3":
                show_month(store)
            elif choice == "4":
                export_month(store, settings)
            elif choice == "0":
                print("Bye.")
                break
            else:
                print("Invalid choice.")
        except GoBackAction:
            print("Back to the previous menu.")
        except CancelAction:
            print("Back to the main menu.")
        except OSError as exc:
            log.error("store_write_failed", error=str(exc))
            print(f"Could not save: {exc}")
