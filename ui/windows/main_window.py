# ui/windows/main_window.py

import logging

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QSplitter, QFrame, QLabel, QLineEdit, QPlainTextEdit,
    QVBoxLayout, QHBoxLayout, QStatusBar, QToolBar
)

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui  import QAction, QActionGroup, QKeySequence

from core.browser import BrowserState
from core.models import DisplayMode
from ui.tools.clipboard import copy_text
from ui.widgets.comparison_panel import ComparisonPanel
from ui.widgets.fonts.font_view import FontView
from ui.widgets.size_slider import SizeSlider
from ui.widgets.toast import Toast
from ui.widgets.toggle_switch import ToggleSwitch

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, state: BrowserState):
        super().__init__()

        self.state = state

        # Window setup
        self.setWindowTitle("Font Browser")
        self.setMinimumSize(900, 600)

        # Menus, toolbar and status bar
        self._create_menu()
        self._create_toolbar()
        self._create_status_bar()

        # Central layout
        central = QWidget()
        layout = QHBoxLayout(central)
        layout.setContentsMargins(3, 0, 3, 0)
        layout.setSpacing(5)
        self.setCentralWidget(central)

        # Splitter: sidebar, fonts, comparison
        splitter = QSplitter(Qt.Horizontal)
        splitter.setHandleWidth(5)
        layout.addWidget(splitter)

        self.left_panel = self._create_sidebar()
        splitter.addWidget(self.left_panel)

        self.font_view = FontView(self.state.is_pinned)
        splitter.addWidget(self.font_view)

        self.comparison = ComparisonPanel()
        self.comparison.setMinimumWidth(220)
        splitter.addWidget(self.comparison)

        splitter.setStretchFactor(1, 1)
        splitter.setSizes([240, 760, 300])

        self._connect_signals()
        self._seed()
        QTimer.singleShot(0, self.search_edit.setFocus)

    # ─── Construction ───────────────────────────────────────────────────────

    def _create_menu(self):
        menu = self.menuBar()

        file_menu = menu.addMenu("&File")
        self.refresh_action = QAction("&Refresh Fonts", self)
        self.refresh_action.setShortcuts(QKeySequence.Refresh)
        self.refresh_action.triggered.connect(self.refresh_fonts)
        file_menu.addAction(self.refresh_action)
        file_menu.addSeparator()
        exit_action = QAction("E&xit", self)
        exit_action.setShortcuts(QKeySequence.Quit)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        edit_menu = menu.addMenu("&Edit")
        self.copy_pinned_action = QAction("&Copy Pinned Fonts", self)
        self.copy_pinned_action.setShortcut(QKeySequence("Ctrl+Shift+C"))
        self.copy_pinned_action.triggered.connect(self.copy_pinned)
        edit_menu.addAction(self.copy_pinned_action)
        self.clear_pins_action = QAction("C&lear Pins", self)
        self.clear_pins_action.triggered.connect(self.state.clear_pins)
        edit_menu.addAction(self.clear_pins_action)

        view_menu = menu.addMenu("&View")
        self.mode_group = QActionGroup(self)
        self.mode_actions: dict[DisplayMode, QAction] = {}
        for shortcut, mode in enumerate(DisplayMode, start=1):
            action = QAction(mode.label, self)
            action.setCheckable(True)
            action.setShortcut(QKeySequence(f"Ctrl+{shortcut}"))
            action.setData(mode.value)
            action.triggered.connect(lambda _=False, m=mode: self.state.set_display_mode(m))
            self.mode_group.addAction(action)
            view_menu.addAction(action)
            self.mode_actions[mode] = action

    def _create_toolbar(self):
        toolbar = QToolBar("View")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        for action in self.mode_actions.values():
            toolbar.addAction(action)
        toolbar.addSeparator()

        self.size_slider = SizeSlider(self.state.preview_size)
        toolbar.addWidget(self.size_slider)

    def _create_status_bar(self):
        status = QStatusBar()
        self.setStatusBar(status)
        status.showMessage("Ready")

    def _create_sidebar(self) -> QFrame:
        panel = QFrame()
        panel.setFrameShape(QFrame.StyledPanel)
        panel.setMinimumWidth(200)
        vbox = QVBoxLayout(panel)
        vbox.setSpacing(12)

        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText("Search (family / name / PostScript)")
        self.search_edit.setClearButtonEnabled(True)
        vbox.addWidget(self.search_edit)

        mono_row = QHBoxLayout()
        mono_row.addWidget(QLabel("Monospaced only"))
        mono_row.addStretch()
        self.mono_switch = ToggleSwitch(self.state.query.monospaced_only)
        mono_row.addWidget(self.mono_switch)
        vbox.addLayout(mono_row)

        vbox.addWidget(QLabel("Sample text"))
        self.sample_edit = QPlainTextEdit(self.state.sample_text)
        self.sample_edit.setMinimumHeight(100)
        vbox.addWidget(self.sample_edit)

        vbox.addStretch()
        return panel

    def _connect_signals(self):
        # Widgets → state
        self.search_edit.textChanged.connect(self.state.set_query_text)
        self.mono_switch.toggled.connect(self.state.set_monospaced_only)
        self.sample_edit.textChanged.connect(
            lambda: self.state.set_sample_text(self.sample_edit.toPlainText())
        )
        self.size_slider.sizeChanged.connect(self.state.set_preview_size)
        self.font_view.pinToggled.connect(self.state.toggle_pin)
        self.font_view.copyRequested.connect(self.copy_value)
        self.comparison.copyAllRequested.connect(self.copy_pinned)
        self.comparison.clearRequested.connect(self.state.clear_pins)
        self.comparison.unpinRequested.connect(self.state.pins.unpin)

        # State → widgets
        self.state.events.register("visible_changed", self._on_visible_changed)
        self.state.events.register("pins_changed", self._on_pins_changed)
        self.state.events.register("preview_changed", self._on_preview_changed)

    def _seed(self):
        self._on_preview_changed()
        self._on_visible_changed(self.state.visible)
        self._on_pins_changed(self.state.pins.all())

    # ─── Actions ────────────────────────────────────────────────────────────

    def refresh_fonts(self):
        self.state.catalog.reload()
        self.statusBar().showMessage(self.state.summary())

    def copy_value(self, text: str, what: str = "text"):
        if copy_text(text):
            Toast.flash(self, f"Copied {what}: {text}")

    def copy_pinned(self):
        if not len(self.state.pins):
            self.statusBar().showMessage("Nothing pinned", 2000)
            return
        if copy_text(self.state.pinned_text()):
            Toast.flash(self, f"Copied {len(self.state.pins)} pinned fonts")

    # ─── State Handlers ─────────────────────────────────────────────────────

    def _on_visible_changed(self, fonts):
        self.font_view.set_fonts(fonts)
        self.statusBar().showMessage(self.state.summary())

    def _on_pins_changed(self, _pins):
        self.font_view.refresh_pins()
        self._refresh_comparison()
        has_pins = bool(len(self.state.pins))
        self.copy_pinned_action.setEnabled(has_pins)
        self.clear_pins_action.setEnabled(has_pins)

    def _on_preview_changed(self):
        mode = self.state.display_mode
        self.mode_actions[mode].setChecked(True)
        self.font_view.set_mode(mode)
        self.font_view.set_preview(self.state.sample_text, self.state.preview_size)
        if self.size_slider.value() != self.state.preview_size:
            self.size_slider.set_value(self.state.preview_size)
        self._refresh_comparison()

    def _refresh_comparison(self):
        self.comparison.set_pins(
            self.state.pins.ordered(), self.state.sample_text, self.state.preview_size
        )

    def closeEvent(self, event):
        self.state.events.unregister("visible_changed", self._on_visible_changed)
        self.state.events.unregister("pins_changed", self._on_pins_changed)
        self.state.events.unregister("preview_changed", self._on_preview_changed)
        super().closeEvent(event)
