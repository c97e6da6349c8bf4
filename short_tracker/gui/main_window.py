# gui/main_window.py
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QToolBar, QLabel,
    QDateEdit, QMessageBox, QSplitter
)
from PySide6.QtCore import Qt, QDate
from PySide6.QtGui import QAction
from datetime import date

import structlog

from short_tracker.config.settings import AppSettings
from short_tracker.data.data_manager import (
    load_workers, load_entries, add_worker, remove_worker, save_entry, get_entry
)
from short_tracker.data.store import KeyValueStore
from short_tracker.exceptions import InvalidWorkerName
from short_tracker.export.excel_exporter import export_monthly_report
from short_tracker.logic.report import build_monthly_report
from short_tracker.gui.entry_form import EntryForm
from short_tracker.gui.penalty_rules import PenaltyRulesBox
from short_tracker.gui.worker_panel import WorkerPanel
from short_tracker.utils.date_helper import date_key, format_month_label, shift_days

log = structlog.get_logger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: KeyValueStore, settings: AppSettings):
        super().__init__()
        self.setWindowTitle("Short Tracker")
        self.resize(1180, 820)

        self.store = store
        self.settings = settings
        self.current_date = date.today()

        self.workers = load_workers(store, settings.default_worker_names)
        self.entries = load_entries(store)

        self._build_ui()
        self.refresh()

    # ---------------- UI ----------------
    def _build_ui(self):
        # toolbar: title + period
        tb = QToolBar()
        tb.setMovable(False)
        self.addToolBar(tb)

        title = QLabel("Short Tracker")
        title.setStyleSheet("font-size:16px; font-weight:800; padding:0 8px;")
        tb.addWidget(title)
        tb.addSeparator()

        tb.addWidget(QLabel("Period "))
        self.date_edit = QDateEdit()
        self.date_edit.setCalendarPopup(True)
        self.date_edit.setDisplayFormat("yyyy-MM-dd")
        tb.addWidget(self.date_edit)

        self.month_label = QLabel("")
        self.month_label.setStyleSheet("font-weight:600; padding:0 8px;")
        tb.addWidget(self.month_label)

        tb.addSeparator()
        self.act_toggle_left = QAction("Show side panel", self)
        self.act_toggle_left.setCheckable(True)
        self.act_toggle_left.setChecked(True)
        self.act_toggle_left.toggled.connect(self.toggle_left_panel)
        tb.addAction(self.act_toggle_left)

        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(0, 0, 0, 0)

        splitter = QSplitter(Qt.Horizontal)
        splitter.setHandleWidth(2)
        root.addWidget(splitter)

        # left: team + rules
        left_container = QWidget()
        left = QVBoxLayout(left_container)
        self.worker_panel = WorkerPanel(
            on_add=self.handle_add_worker,
            on_remove=self.handle_remove_worker,
            on_export=self.handle_export,
        )
        left.addWidget(self.worker_panel)
        left.addWidget(PenaltyRulesBox())
        left.addStretch(1)
        left_container.setMinimumWidth(280)
        left_container.setMaximumWidth(320)

        # right: daily entry
        self.entry_form = EntryForm(on_save=self.handle_save_entry, on_navigate=self.navigate_days)

        splitter.addWidget(left_container)
        splitter.addWidget(self.entry_form)
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)
        splitter.setCollapsible(0, True)
        splitter.setCollapsible(1, False)
        self._splitter = splitter
        self._left_container = left_container

        self.date_edit.dateChanged.connect(self._on_date_picked)

        self.status = self.statusBar()

    # ---------------- binding ----------------
    def refresh(self):
        self.date_edit.blockSignals(True)
        d = self.current_date
        self.date_edit.setDate(QDate(d.year, d.month, d.day))
        self.date_edit.blockSignals(False)

        self.month_label.setText(format_month_label(d.year, d.month - 1))
        self.worker_panel.set_workers(self.workers)
        self.entry_form.load(d, get_entry(self.entries, date_key(d)), self.workers)

    def notify(self, message: str):
        self.status.showMessage(message, self.settings.notification_ms)

    def _on_date_picked(self, qd: QDate):
        self.current_date = date(qd.year(), qd.month(), qd.day())
        self.refresh()

    def navigate_days(self, days: int):
        self.current_date = shift_days(self.current_date, days)
        self.refresh()

    # ---------------- actions ----------------
    def handle_save_entry(self, entry):
        key = date_key(self.current_date)
        try:
            save_entry(self.store, self.entries, key, entry)
        except OSError as exc:
            log.error("entry_save_failed", date=key, error=str(exc))
            QMessageBox.warning(self, "Save failed", f"Could not save {key}:\n{exc}")
            return
        self.notify("Entry Saved! Moving to next day...")
        self.navigate_days(1)

    def handle_add_worker(self, name: str):
        try:
            w = add_worker(self.store, self.workers, name)
        except InvalidWorkerName:
            QMessageBox.warning(self, "Check", "Enter a name.")
            return
        except OSError as exc:
            log.error("worker_save_failed", error=str(exc))
            QMessageBox.warning(self, "Save failed", f"Could not save the team list:\n{exc}")
            return
        self.refresh()
        self.notify(f"{w.name} added.")

    def handle_remove_worker(self, worker_id: int):
        try:
            removed = remove_worker(self.store, self.workers, worker_id)
        except OSError as exc:
            log.error("worker_save_failed", error=str(exc))
            QMessageBox.warning(self, "Save failed", f"Could not save the team list:\n{exc}")
            return
        if removed:
            self.refresh()
            self.notify("Member removed.")

    def handle_export(self):
        d = self.current_date
        report = build_monthly_report(self.workers, self.entries, d.year, d.month - 1)
        try:
            path = export_monthly_report(report, self.workers, self.settings.export_dir)
        except OSError as exc:
            log.error("report_export_failed", error=str(exc))
            QMessageBox.warning(self, "Export failed", f"Could not write the report:\n{exc}")
            return
        if report.is_empty:
            self.notify(f"No entries for {format_month_label(d.year, d.month - 1)}. Empty report saved: {path}")
        else:
            self.notify(f"Excel report saved: {path}")

    def toggle_left_panel(self, visible: bool):
        sizes = self._splitter.sizes()
        if visible:
            left_min = self._left_container.minimumWidth()
            total = sum(sizes) if sizes else 1180
            self._left_container.setVisible(True)
            self._splitter.setSizes([left_min, max(total - left_min, 500)])
        else:
            self._left_container.setVisible(False)
            self._splitter.setSizes([0, sum(sizes) if sizes else 1000])
