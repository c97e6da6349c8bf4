# gui/worker_panel.py
from PySide6.QtWidgets import (
    QGroupBox, QVBoxLayout, QHBoxLayout, QLineEdit, QPushButton,
    QListWidget, QListWidgetItem, QMessageBox, QAbstractItemView
)
from PySide6.QtCore import Qt


class WorkerPanel(QGroupBox):
    """
    Team members box:
      - name field + add (Enter also adds, disabled while blank)
      - roster list, remove selected (with confirmation)
      - export current month
    """
    def __init__(self, on_add, on_remove, on_export, parent=None):
        super().__init__("Team Members", parent)
        self.on_add = on_add
        self.on_remove = on_remove
        self.on_export = on_export

        v = QVBoxLayout(self)

        add_row = QHBoxLayout()
        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText("Add new member...")
        self.btn_add = QPushButton("+")
        self.btn_add.setEnabled(False)
        add_row.addWidget(self.name_edit, 1)
        add_row.addWidget(self.btn_add)
        v.addLayout(add_row)

        self.list = QListWidget()
        self.list.setSelectionMode(QAbstractItemView.SingleSelection)
        self.list.setMaximumHeight(300)
        v.addWidget(self.list)

        self.btn_remove = QPushButton("Remove Selected")
        v.addWidget(self.btn_remove)

        self.btn_export = QPushButton("Export Month to Excel")
        self.btn_export.setStyleSheet("font-weight:600; padding:6px;")
        v.addWidget(self.btn_export)

        # signals
        self.name_edit.textChanged.connect(
            lambda text: self.btn_add.setEnabled(bool(text.strip())))
        self.name_edit.returnPressed.connect(self._add_clicked)
        self.btn_add.clicked.connect(self._add_clicked)
        self.btn_remove.clicked.connect(self._remove_clicked)
        self.btn_export.clicked.connect(lambda: self.on_export())

    def set_workers(self, workers):
        self.list.clear()
        for w in workers:
            item = QListWidgetItem(w.name)
            item.setData(Qt.UserRole, w.id)
            self.list.addItem(item)
        if not workers:
            placeholder = QListWidgetItem("No members yet")
            placeholder.setFlags(Qt.NoItemFlags)
            self.list.addItem(placeholder)

    def _add_clicked(self):
        name = self.name_edit.text().strip()
        if not name:
            return
        self.on_add(name)
        self.name_edit.clear()

    def _remove_clicked(self):
        item = self.list.currentItem()
        worker_id = item.data(Qt.UserRole) if item else None
        if worker_id is None:
            QMessageBox.information(self, "Notice", "Select a member to remove.")
            return
        if QMessageBox.question(self, "Confirm", f"Remove [{item.text()}]?") != QMessageBox.Yes:
            return
        self.on_remove(worker_id)
