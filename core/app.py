# core/app.py

import logging
import sys
from typing     import Optional

from PySide6.QtWidgets import QApplication

from core.browser   import BrowserState
from core.catalog   import FontCatalog
from core.config    import FONT_PROVIDER, LOG_LEVEL
from core.providers import FontProvider, default_provider
from ui.windows.main_window import MainWindow

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.WARNING),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
log = logging.getLogger(__name__)


class App:
    """
    Owns the one FontCatalog and BrowserState of the session and hands them
    to the main window.  Created once; `App.instance()` returns the same object.
    """
    _instance = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, provider: Optional[FontProvider] = None):
        if getattr(self, "_initialized", False):
            return
        self._initialized = True

        self.qt_app = QApplication.instance() or QApplication(sys.argv)
        self.qt_app.setApplicationName("Font Browser")

        # Qt provider needs the QApplication above
        self.catalog = FontCatalog(provider or default_provider(FONT_PROVIDER))
        self.state = BrowserState(self.catalog)

        self.main_window: Optional[MainWindow] = None

    def start(self) -> int:
        self.catalog.load()
        if not len(self.catalog):
            log.warning("No fonts found; the browser will be empty")

        self.main_window = MainWindow(self.state)
        self.main_window.resize(1300, 800)
        self.main_window.show()
        return self.qt_app.exec()

    @classmethod
    def instance(cls):
        return cls()


def begin():
    sys.exit(App.instance().start())


if __name__ == "__main__":
    begin()
