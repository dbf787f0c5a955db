# guestbook/ui/date_range.py
from datetime import date

from PyQt5 import QtWidgets, QtGui, QtCore

from guestbook.core.services import format_date, format_date_range, DEFAULT_DATE_FORMAT

RANGE_COLOR = "#113255"


class DateRangeSelection:
    """
    Click-driven range state behind the picker:
    first click = arrival, next click on/after it = departure.
    A click before the arrival, or any click once the range is complete,
    starts over at the clicked day.
    """

    def __init__(self):
        self.start = None
        self.end = None

    @property
    def is_complete(self):
        return self.start is not None and self.end is not None

    def select(self, day: date):
        if self.start is None or self.is_complete or day < self.start:
            self.start = day
            self.end = None
        else:
            self.end = day

    def clear(self):
        self.start = None
        self.end = None


def to_qdate(d: date) -> QtCore.QDate:
    return QtCore.QDate(d.year, d.month, d.day)


class DateRangeDialog(QtWidgets.QDialog):
    def __init__(self, parent=None, date_format=DEFAULT_DATE_FORMAT, initial=None):
        super().__init__(parent)
        self.date_format = date_format
        self.selection = DateRangeSelection()
        self._build_ui()
        if initial is not None:
            start, end = initial
            self.selection.select(start)
            self.selection.select(end)
            self.calendar.setSelectedDate(to_qdate(start))
        self._refresh()

    def _build_ui(self):
        self.setWindowTitle("Select Date Range")
        self.setModal(True)
        vbox = QtWidgets.QVBoxLayout(self)

        self.calendar = QtWidgets.QCalendarWidget()
        self.calendar.setGridVisible(True)
        vbox.addWidget(self.calendar)

        self.summary = QtWidgets.QLabel("")
        vbox.addWidget(self.summary)

        btn_box = QtWidgets.QHBoxLayout()
        btn_box.addStretch()
        self.btn_cancel = QtWidgets.QPushButton("Cancel")
        self.btn_ok = QtWidgets.QPushButton("OK")
        btn_box.addWidget(self.btn_cancel)
        btn_box.addWidget(self.btn_ok)
        vbox.addLayout(btn_box)

        # signals
        self.calendar.clicked.connect(self._on_day_clicked)
        self.btn_cancel.clicked.connect(self.reject)
        self.btn_ok.clicked.connect(self._on_ok)

    def _on_day_clicked(self, qdate):
        self.select_date(qdate.toPyDate())

    def select_date(self, day: date):
        self.selection.select(day)
        self._refresh()

    def _refresh(self):
        sel = self.selection
        if sel.is_complete:
            self.summary.setText(format_date_range(sel.start, sel.end, self.date_format))
        elif sel.start is not None:
            self.summary.setText(f"{format_date(sel.start, self.date_format)} - ...")
        else:
            self.summary.setText("Choose arrival and departure")
        self.btn_ok.setEnabled(sel.is_complete)
        self._paint_range()

    def _paint_range(self):
        # a null QDate resets the format of every day
        self.calendar.setDateTextFormat(QtCore.QDate(), QtGui.QTextCharFormat())
        sel = self.selection
        if sel.start is None:
            return
        fmt = QtGui.QTextCharFormat()
        fmt.setBackground(QtGui.QColor(RANGE_COLOR))
        fmt.setForeground(QtGui.QColor("#eaf6ff"))
        day = to_qdate(sel.start)
        last = to_qdate(sel.end or sel.start)
        while day <= last:
            self.calendar.setDateTextFormat(day, fmt)
            day = day.addDays(1)

    def _on_ok(self):
        # OK without both dates is ignored
        if self.selection.is_complete:
            self.accept()

    def selected_range(self):
        if not self.selection.is_complete:
            return None
        return self.selection.start, self.selection.end

    @staticmethod
    def get_range(parent=None, date_format=DEFAULT_DATE_FORMAT, initial=None):
        """Run the dialog; returns (arrival, departure) or None when cancelled."""
        dialog = DateRangeDialog(parent, date_format=date_format, initial=initial)
        if dialog.exec_() != QtWidgets.QDialog.Accepted:
            return None
        return dialog.selected_range()
