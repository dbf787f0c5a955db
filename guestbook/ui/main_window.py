# guestbook/ui/main_window.py
import logging

from PyQt5 import QtWidgets

from guestbook.core.config import Settings
from guestbook.ui.add_page import AddPage
from guestbook.ui.home_page import APP_STYLE, HomePage

log = logging.getLogger(__name__)

HOME = "home"
ADD = "add"


class MainWindow(QtWidgets.QWidget):
    """
    Hosts both pages in a stack and navigates between them.
    The store is created by the caller and shared by both pages.
    """

    def __init__(self, store, settings=None):
        super().__init__()
        self.store = store
        self.settings = settings or Settings()
        self.back_stack = []
        self._build_ui()
        self.setStyleSheet(APP_STYLE)
        self.setWindowTitle("Gästebuch")
        self.resize(self.settings.window_width, self.settings.window_height)
        self.navigate(HOME)

    def _build_ui(self):
        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        self.stack = QtWidgets.QStackedWidget()
        layout.addWidget(self.stack)

        self.home_page = HomePage(self.store, self.settings, add_callback=lambda: self.navigate(ADD))
        self.add_page = AddPage(self.store, self.settings, back_callback=self.pop_back)
        self.routes = {HOME: self.home_page, ADD: self.add_page}
        for page in self.routes.values():
            self.stack.addWidget(page)

    @property
    def current_route(self):
        return self.back_stack[-1] if self.back_stack else None

    def navigate(self, route):
        if route not in self.routes:
            raise KeyError(f"Unknown route: {route}")
        log.debug("Navigate %s -> %s", self.current_route, route)
        self.back_stack.append(route)
        self.stack.setCurrentWidget(self.routes[route])

    def pop_back(self):
        # the start destination stays on the stack
        if len(self.back_stack) <= 1:
            return
        self.back_stack.pop()
        log.debug("Back to %s", self.current_route)
        self.stack.setCurrentWidget(self.routes[self.current_route])

    def closeEvent(self, event):
        self.home_page.detach()
        super().closeEvent(event)
