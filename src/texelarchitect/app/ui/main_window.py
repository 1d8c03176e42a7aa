"""
Main Application Window
=======================
The top-level window that holds the header, the work area and the footer.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the Store to the preview and global actions
   (Reset, Quit, outbound links) to their handlers.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, QUrl
from PySide6.QtGui import QAction, QDesktopServices
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame
)

from texelarchitect.app.state import Store
from texelarchitect.app.ui.workarea import WorkArea
from texelarchitect.config import (
    VISIBLE_APP_NAME, APP_TAGLINE, WINDOW_SIZE, DONATION_URL, PRO_URL
)

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: Store | None = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(*WINDOW_SIZE)

        # Global store
        self.store = store if store is not None else Store()

        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setContentsMargins(12, 12, 12, 12)

        v.addLayout(self._build_header(), 0)

        self.work_area = WorkArea(self.store, central)
        v.addWidget(self.work_area, 1)

        v.addWidget(self._build_footer(), 0)

        self.setCentralWidget(central)

        self._create_actions()
        self._create_menus()

        # Derived grid follows every state change
        self.store.state_changed.connect(self._on_state_changed)

        # Initial Render
        self._on_state_changed()

    # ------------------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------------------

    def _build_header(self) -> QHBoxLayout:
        header = QHBoxLayout()

        titles = QVBoxLayout()
        title = QLabel(VISIBLE_APP_NAME, self)
        title.setStyleSheet("font-size: 26px; font-weight: bold;")
        titles.addWidget(title)
        tagline = QLabel(APP_TAGLINE, self)
        tagline.setStyleSheet("color: gray;")
        titles.addWidget(tagline)
        header.addLayout(titles, 1)

        self.btn_donate = QPushButton("☕ Support This Tool", self)
        self.btn_donate.clicked.connect(lambda: self.open_link(DONATION_URL))
        header.addWidget(self.btn_donate, 0, Qt.AlignmentFlag.AlignTop)

        return header

    def _build_footer(self) -> QFrame:
        footer = QFrame(self)
        footer.setFrameShape(QFrame.Shape.StyledPanel)
        layout = QVBoxLayout(footer)

        cta_title = QLabel("🚀 Want More Power?", footer)
        cta_title.setStyleSheet("font-weight: bold;")
        layout.addWidget(cta_title, 0, Qt.AlignmentFlag.AlignHCenter)
        layout.addWidget(
            QLabel(
                "Upgrade to Texel Architect Pro for saved presets, export reports, and team templates",
                footer,
            ),
            0,
            Qt.AlignmentFlag.AlignHCenter,
        )

        self.btn_pro = QPushButton("Get Pro Version - $5", footer)
        self.btn_pro.clicked.connect(lambda: self.open_link(PRO_URL))
        layout.addWidget(self.btn_pro, 0, Qt.AlignmentFlag.AlignHCenter)

        credits = QLabel("Made with ❤️ by environment artists, for environment artists", footer)
        credits.setStyleSheet("color: gray;")
        layout.addWidget(credits, 0, Qt.AlignmentFlag.AlignHCenter)

        return footer

    def _create_actions(self) -> None:
        self.act_reset = QAction("Reset", self)
        self.act_reset.setShortcut("Ctrl+N")
        self.act_reset.triggered.connect(lambda: self.store.reset())

        self.act_exit = QAction("Exit", self)
        self.act_exit.setShortcut("Ctrl+Q")
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_file = self.menuBar().addMenu("File")
        menu_file.addAction(self.act_reset)
        menu_file.addSeparator()
        menu_file.addAction(self.act_exit)

    # ------------------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------------------

    def _on_state_changed(self, *_) -> None:
        self.work_area.preview.set_cell_size(self.store.outputs.grid_cell_px)

    def open_link(self, url: str) -> bool:
        """Open an outbound link in the system browser."""
        logger.info("Opening external link: %s", url)
        return QDesktopServices.openUrl(QUrl(url))
