# guestbook/ui/add_page.py
import logging

from PyQt5 import QtWidgets

from guestbook.core.config import Settings
from guestbook.core.models import BookingValidationError
from guestbook.core.services import create_booking_entry, format_date_range
from guestbook.ui.date_range import DateRangeDialog

log = logging.getLogger(__name__)


class AddPage(QtWidgets.QWidget):
    """Form for a new booking: name + date range, saved into the shared store."""

    def __init__(self, store, settings=None, back_callback=None):
        super().__init__()
        self.store = store
        self.settings = settings or Settings()
        self.back_callback = back_callback
        self.arrival_date = None
        self.departure_date = None
        self._build_ui()

    def _build_ui(self):
        layout = QtWidgets.QVBoxLayout(self)

        header = QtWidgets.QHBoxLayout()
        self.btn_back = QtWidgets.QPushButton("Back")
        header.addWidget(self.btn_back)
        title = QtWidgets.QLabel("Add Booking Entry")
        title.setObjectName("pageTitle")
        header.addWidget(title)
        header.addStretch()
        layout.addLayout(header)

        form = QtWidgets.QFormLayout()
        self.name_input = QtWidgets.QLineEdit()
        self.name_input.setPlaceholderText("Name")

        # read-only: filled by the range picker
        range_row = QtWidgets.QHBoxLayout()
        self.range_input = QtWidgets.QLineEdit()
        self.range_input.setReadOnly(True)
        self.range_input.setPlaceholderText("Select Date Range")
        self.btn_pick = QtWidgets.QPushButton("Choose...")
        range_row.addWidget(self.range_input, 1)
        range_row.addWidget(self.btn_pick)

        form.addRow("Name", self.name_input)
        form.addRow("Date range", range_row)
        layout.addLayout(form)

        layout.addSpacing(24)
        self.btn_save = QtWidgets.QPushButton("Save")
        self.btn_save.setObjectName("primaryButton")
        layout.addWidget(self.btn_save)
        layout.addStretch()

        # signals
        self.btn_back.clicked.connect(self._on_back_clicked)
        self.btn_pick.clicked.connect(self._on_pick_clicked)
        self.btn_save.clicked.connect(self._on_save_clicked)

    def set_date_range(self, arrival_date, departure_date):
        self.arrival_date = arrival_date
        self.departure_date = departure_date
        if arrival_date is not None and departure_date is not None:
            self.range_input.setText(
                format_date_range(arrival_date, departure_date, self.settings.date_format))
        else:
            self.range_input.setText("")

    def reset(self):
        self.name_input.clear()
        self.set_date_range(None, None)

    def _on_pick_clicked(self):
        initial = None
        if self.arrival_date is not None and self.departure_date is not None:
            initial = (self.arrival_date, self.departure_date)
        result = DateRangeDialog.get_range(self, date_format=self.settings.date_format, initial=initial)
        if result is not None:
            self.set_date_range(*result)

    def _on_save_clicked(self):
        try:
            entry = create_booking_entry(self.name_input.text(), self.arrival_date, self.departure_date)
        except BookingValidationError as e:
            QtWidgets.QMessageBox.warning(self, "Missing", str(e))
            return
        log.info("Adding booking for %r", entry.name)
        self.store.add(entry)
        self.reset()
        self._go_back()

    def _on_back_clicked(self):
        # leaving the page discards the draft
        self.reset()
        self._go_back()

    def _go_back(self):
        if callable(self.back_callback):
            self.back_callback()
