# gui/entry_form.py
from __future__ import annotations
from datetime import date
from typing import List, Optional

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QLineEdit,
    QPushButton, QGroupBox, QFrame
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QDoubleValidator

from short_tracker.logic.penalty import split_daily_penalty
from short_tracker.models.day_entry import DayEntry
from short_tracker.models.worker import Worker
from short_tracker.utils.date_helper import format_date_long
from short_tracker.utils.format_utils import format_currency
from short_tracker.utils.parse_utils import parse_amount

ATTENDANCE_COLUMNS = 4


def _amount_text(v: float) -> str:
    if v <= 0:
        return ""
    return f"{v:.2f}".rstrip("0").rstrip(".")


class EntryForm(QWidget):
    """
    Daily entry:
      - prev/next day navigation
      - unrecorded / short inputs (one disables the other while > 0)
      - attendance toggles, live penalty and per-person share
      - save
    """
    def __init__(self, on_save, on_navigate, parent=None):
        super().__init__(parent)
        self.on_save = on_save
        self.on_navigate = on_navigate

        self._workers: List[Worker] = []
        # may hold ids of removed workers; they still count towards the split
        self._attendance: List[int] = []
        self._toggles = {}

        self._build_ui()

    # ---------------- UI ----------------
    def _build_ui(self):
        v = QVBoxLayout(self)
        v.setSpacing(12)

        # day navigator
        nav = QHBoxLayout()
        self.btn_prev = QPushButton("◀")
        self.btn_next = QPushButton("▶")
        title_box = QVBoxLayout()
        self.date_label = QLabel("")
        self.date_label.setAlignment(Qt.AlignCenter)
        self.date_label.setStyleSheet("font-size:20px; font-weight:800;")
        caption = QLabel("DAILY ENTRY")
        caption.setAlignment(Qt.AlignCenter)
        caption.setStyleSheet("font-size:10px; font-weight:700; color:#6366f1;")
        title_box.addWidget(self.date_label)
        title_box.addWidget(caption)
        nav.addWidget(self.btn_prev)
        nav.addLayout(title_box, 1)
        nav.addWidget(self.btn_next)
        v.addLayout(nav)

        # amount inputs
        amounts = QHBoxLayout()
        self.unrecorded_edit, self.unrecorded_penalty_lbl, box_u = self._amount_box("Unrecorded Amount")
        self.short_edit, self.short_penalty_lbl, box_s = self._amount_box("Short Amount")
        amounts.addWidget(box_u, 1)
        amounts.addWidget(box_s, 1)
        v.addLayout(amounts)

        # attendance
        att_head = QHBoxLayout()
        att_title = QLabel("Attendance")
        att_title.setStyleSheet("font-size:14px; font-weight:700;")
        self.share_lbl = QLabel("")
        self.share_lbl.setStyleSheet("color:#dc2626; font-weight:700;")
        att_head.addWidget(att_title)
        att_head.addStretch(1)
        att_head.addWidget(self.share_lbl)
        v.addLayout(att_head)

        self.att_grid = QGridLayout()
        v.addLayout(self.att_grid)
        v.addStretch(1)

        # total + save
        bottom = QHBoxLayout()
        total_box = QFrame()
        total_box.setStyleSheet("QFrame{background:#1f2937; border-radius:10px;} QLabel{color:white;}")
        tb = QVBoxLayout(total_box)
        cap = QLabel("TOTAL DAILY PENALTY")
        cap.setStyleSheet("font-size:10px; font-weight:700; color:#9ca3af;")
        self.total_lbl = QLabel(format_currency(0))
        self.total_lbl.setStyleSheet("font-size:28px; font-weight:900;")
        tb.addWidget(cap)
        tb.addWidget(self.total_lbl)
        self.btn_save = QPushButton("Save Entry")
        self.btn_save.setMinimumHeight(80)
        self.btn_save.setStyleSheet("font-size:16px; font-weight:700;")
        bottom.addWidget(total_box, 1)
        bottom.addWidget(self.btn_save, 1)
        v.addLayout(bottom)

        # signals
        self.btn_prev.clicked.connect(lambda: self.on_navigate(-1))
        self.btn_next.clicked.connect(lambda: self.on_navigate(1))
        self.unrecorded_edit.textChanged.connect(self._recalc)
        self.short_edit.textChanged.connect(self._recalc)
        self.btn_save.clicked.connect(self._save_clicked)

    def _amount_box(self, title):
        box = QGroupBox(title)
        lay = QVBoxLayout(box)
        edit = QLineEdit()
        edit.setPlaceholderText("0.00")
        validator = QDoubleValidator(0.0, 1e9, 2, edit)
        validator.setNotation(QDoubleValidator.Notation.StandardNotation)
        edit.setValidator(validator)
        edit.setStyleSheet("font-size:22px; font-weight:800;")
        lbl = QLabel("")
        lay.addWidget(edit)
        lay.addWidget(lbl)
        return edit, lbl, box

    def _rebuild_toggles(self):
        while self.att_grid.count():
            item = self.att_grid.takeAt(0)
            w = item.widget()
            if w is not None:
                w.setParent(None)
        self._toggles = {}

        if not self._workers:
            self.att_grid.addWidget(QLabel("Add workers to track attendance"), 0, 0)
            return

        for i, w in enumerate(self._workers):
            btn = QPushButton(w.name)
            btn.setCheckable(True)
            btn.setChecked(w.id in self._attendance)
            btn.toggled.connect(lambda checked, wid=w.id: self._toggle(wid, checked))
            self._toggles[w.id] = btn
            self.att_grid.addWidget(btn, i // ATTENDANCE_COLUMNS, i % ATTENDANCE_COLUMNS)

    # ---------------- data ----------------
    def load(self, day: date, entry: Optional[DayEntry], workers: List[Worker]):
        self._workers = list(workers)
        self.date_label.setText(format_date_long(day))

        self.unrecorded_edit.blockSignals(True)
        self.short_edit.blockSignals(True)
        if entry is not None:
            self.unrecorded_edit.setText(_amount_text(entry.unrecorded))
            self.short_edit.setText(_amount_text(entry.short))
            self._attendance = list(entry.attendance)
        else:
            self.unrecorded_edit.clear()
            self.short_edit.clear()
            self._attendance = [w.id for w in self._workers]
        self.unrecorded_edit.blockSignals(False)
        self.short_edit.blockSignals(False)

        self._rebuild_toggles()
        self._recalc()

    def collect(self) -> DayEntry:
        return DayEntry(
            unrecorded=parse_amount(self.unrecorded_edit.text()),
            short=parse_amount(self.short_edit.text()),
            attendance=list(self._attendance),
        )

    # ---------------- behaviour ----------------
    def _toggle(self, worker_id: int, checked: bool):
        if checked and worker_id not in self._attendance:
            self._attendance.append(worker_id)
        elif not checked and worker_id in self._attendance:
            self._attendance = [i for i in self._attendance if i != worker_id]
        self._recalc()

    def _recalc(self, *_):
        unrecorded = parse_amount(self.unrecorded_edit.text())
        short = parse_amount(self.short_edit.text())

        # only one amount per day from the form
        self.short_edit.setDisabled(unrecorded > 0)
        self.unrecorded_edit.setDisabled(short > 0)

        split = split_daily_penalty(unrecorded, short, len(self._attendance))
        self.unrecorded_penalty_lbl.setText(
            f"+ {format_currency(split.unrecorded_penalty)} Penalty" if split.unrecorded_penalty > 0 else "")
        self.short_penalty_lbl.setText(
            f"+ {format_currency(split.short_penalty)} Penalty" if split.short_penalty > 0 else "")
        self.total_lbl.setText(format_currency(split.total_penalty))
        if split.per_person_share > 0:
            self.share_lbl.setText(f"Share: {format_currency(split.per_person_share)} / person")
        else:
            self.share_lbl.setText("")

    def _save_clicked(self):
        self.on_save(self.collect())
