# guestbook/ui/home_page.py
"""
Home page of the guestbook (PyQt5)
- Top: title + "Add booking" button
- Center: one row per booking (name, date range, delete button)
- Empty state text when there are no bookings
Re-renders whenever the shared BookingStore changes.
"""

import logging

from PyQt5 import QtWidgets, QtCore

from guestbook.core.config import Settings
from guestbook.core.services import format_date_range

log = logging.getLogger(__name__)

COLUMNS = ["Name", "Zeitraum", ""]
EMPTY_TEXT = "Keine Buchungen vorhanden."

# ---------- Stylesheet (modern dark) ----------
APP_STYLE = """
QWidget {
    background: #0f1115;
    color: #E6EEF3;
    font-family: "Segoe UI", Roboto, Arial;
    font-size: 15px;
}

QPushButton {
    background: transparent;
    border: 1px solid rgba(255,255,255,0.08);
    border-radius: 6px;
    color: #cfe8ff;
    padding: 8px;
}
QPushButton:hover { background: rgba(255,255,255,0.03); }
QPushButton:pressed { background: rgba(255,255,255,0.04); }
QPushButton:disabled { color: #4f6477; }

#primaryButton {
    background: qlineargradient(x1:0,y1:0,x2:1,y2:0, stop:0 #1f6fff, stop:1 #0ea5ff);
    color: white;
    font-weight: 700;
}

QLineEdit {
    background: #0b0c0f;
    border: 1px solid rgba(255,255,255,0.08);
    border-radius: 4px;
    padding: 6px;
}

QTableWidget {
    background-color: #07121a;
    color: #E6EEF3;
    border: 1px solid rgba(255,255,255,0.03);
}
QTableWidget::item {
    padding: 6px;
    background-color: transparent;
}
QTableWidget::item:selected {
    background: #113255;
    color: #eaf6ff;
}

QHeaderView::section {
    background: #0b0c0f;
    color: #bfe0ff;
    padding: 6px;
    border: none;
    font-weight: 700;
}

#pageTitle {
    font-size: 18pt;
    font-weight: 700;
    padding: 6px;
}
#emptyLabel { color: #9ec0db; }
"""


class HomePage(QtWidgets.QWidget):
    def __init__(self, store, settings=None, add_callback=None):
        super().__init__()
        self.store = store
        self.settings = settings or Settings()
        self.add_callback = add_callback
        self._build_ui()
        self._render(store.current_entries())
        self.subscription = store.subscribe(self._render)

    def _build_ui(self):
        layout = QtWidgets.QVBoxLayout(self)

        header = QtWidgets.QHBoxLayout()
        title = QtWidgets.QLabel("Gästebuch")
        title.setObjectName("pageTitle")
        header.addWidget(title)
        header.addStretch()
        self.btn_add = QtWidgets.QPushButton("Add booking")
        self.btn_add.setObjectName("primaryButton")
        header.addWidget(self.btn_add)
        layout.addLayout(header)

        self.empty_label = QtWidgets.QLabel(EMPTY_TEXT)
        self.empty_label.setObjectName("emptyLabel")
        self.empty_label.setAlignment(QtCore.Qt.AlignCenter)
        layout.addWidget(self.empty_label, 1)

        # bookings table
        self.table = QtWidgets.QTableWidget()
        self.table.setColumnCount(len(COLUMNS))
        self.table.setHorizontalHeaderLabels(COLUMNS)
        self.table.setSelectionBehavior(QtWidgets.QAbstractItemView.SelectRows)
        self.table.setEditTriggers(QtWidgets.QAbstractItemView.NoEditTriggers)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setSectionResizeMode(0, QtWidgets.QHeaderView.Stretch)
        layout.addWidget(self.table, 1)

        # signals
        self.btn_add.clicked.connect(self._on_add_clicked)

    def _render(self, entries):
        """Rebuild the rows from a store snapshot."""
        self.table.setRowCount(0)
        self.table.setRowCount(len(entries))
        for r, entry in enumerate(entries):
            name_item = QtWidgets.QTableWidgetItem(entry.name)
            # keep the booking on the first column for retrieval
            name_item.setData(QtCore.Qt.UserRole, entry)
            self.table.setItem(r, 0, name_item)
            dates = format_date_range(entry.arrival_date, entry.departure_date, self.settings.date_format)
            self.table.setItem(r, 1, QtWidgets.QTableWidgetItem(dates))

            btn = QtWidgets.QPushButton("Löschen")
            btn.setToolTip("Delete booking")
            btn.clicked.connect(lambda _, e=entry: self._on_delete_clicked(e))
            self.table.setCellWidget(r, 2, btn)

        self.table.resizeColumnToContents(1)
        self.table.resizeColumnToContents(2)
        self.empty_label.setHidden(bool(entries))
        self.table.setHidden(not entries)

    def entry_at(self, row):
        item = self.table.item(row, 0)
        return item.data(QtCore.Qt.UserRole) if item else None

    # ---------- actions ----------
    def _on_add_clicked(self):
        if callable(self.add_callback):
            self.add_callback()

    def build_delete_dialog(self, entry):
        box = QtWidgets.QMessageBox(self)
        box.setIcon(QtWidgets.QMessageBox.Question)
        box.setWindowTitle("Buchung löschen")
        box.setText(f'Möchtest du die Buchung "{entry.name}" wirklich löschen?')
        btn_delete = box.addButton("Löschen", QtWidgets.QMessageBox.AcceptRole)
        btn_cancel = box.addButton("Abbrechen", QtWidgets.QMessageBox.RejectRole)
        box.setDefaultButton(btn_cancel)
        box.setEscapeButton(btn_cancel)
        return box, btn_delete

    def _on_delete_clicked(self, entry):
        box, btn_delete = self.build_delete_dialog(entry)
        box.exec_()
        if box.clickedButton() is not btn_delete:
            return
        log.info("Deleting booking for %r", entry.name)
        self.store.delete(entry)

    def detach(self):
        """Stop listening to the store (window closing)."""
        self.subscription.unsubscribe()
