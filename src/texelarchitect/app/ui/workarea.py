from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QSplitter, QVBoxLayout

from texelarchitect.app.state import Store
from texelarchitect.app.ui.panels.calculator import CalculatorPanel
from texelarchitect.app.ui.visualizer import GridVisualizer


class WorkArea(QWidget):
    """The main work area with a splitter between the calculator panel and the grid preview."""
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        v = QVBoxLayout(self)
        split = QSplitter(Qt.Orientation.Horizontal, self)
        split.setChildrenCollapsible(False)
        v.addWidget(split, 1)

        self.calculator = CalculatorPanel(store, split)
        self.preview = GridVisualizer(split)

        split.addWidget(self.calculator)
        split.addWidget(self.preview)
        split.setStretchFactor(0, 0)
        split.setStretchFactor(1, 1)
