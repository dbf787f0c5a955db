# main.py (project root)
import logging
import sys

from PyQt5 import QtWidgets

from guestbook.core.config import load_settings
from guestbook.core.store import BookingStore
from guestbook.ui.main_window import MainWindow


def _setup_logging(level):
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )


def main():
    settings = load_settings()
    _setup_logging(settings.log_level)
    app = QtWidgets.QApplication(sys.argv)
    # one store per session, shared by every page
    store = BookingStore()
    win = MainWindow(store, settings)
    win.show()
    logging.getLogger(__name__).info("Guestbook started")
    sys.exit(app.exec_())

if __name__ == "__main__":
    main()
