from __future__ import annotations

import pyqtgraph as pg
from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor, QPen
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QGraphicsRectItem

from texelarchitect.config import VISUALIZER_SIZE_PX, VISUALIZER_AREA_CM
from texelarchitect.model.grid import grid_segments, is_saturated

GRID_COLOR = "#94a3b8"
BORDER_COLOR = "#1f2937"
SATURATED_COLOR = "#64748b"

HINT_TEXT = (
    "The grid represents the texel density on a 1m² surface.\n"
    "Denser grid = Sharper textures."
)


class GridVisualizer(QWidget):
    """
    pyqtgraph preview of a 1 m x 1 m surface with a density grid:
      - fixed square view in display pixels (no pan/zoom),
      - grid lines every ``cell_size_px``,
      - solid fill once the cells get too small to tell apart,
      - rulers on the bottom and left edges.
    """
    def __init__(self, parent: QWidget | None = None, size_px: float = VISUALIZER_SIZE_PX) -> None:
        super().__init__(parent)
        self.size_px = float(size_px)
        self.cell_size_px: float = 0.0
        self.line_count: int = 0

        layout = QVBoxLayout(self)

        title = QLabel(f"Visualizer ({VISUALIZER_AREA_CM / 100:g}m²)", self)
        title.setStyleSheet("font-size: 16px; font-weight: bold;")
        layout.addWidget(title, 0)

        self.plot = pg.PlotWidget(background="w")
        self._configure_view()
        layout.addWidget(self.plot, 1)

        hint = QLabel(HINT_TEXT, self)
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        hint.setStyleSheet("color: gray;")
        layout.addWidget(hint, 0)

        # actors
        s = self.size_px
        self._fill_item = QGraphicsRectItem(0.0, 0.0, s, s)
        self._fill_item.setBrush(QBrush(QColor(SATURATED_COLOR)))
        self._fill_item.setPen(QPen(Qt.PenStyle.NoPen))
        self._fill_item.setVisible(False)
        self.plot.addItem(self._fill_item)

        self._grid_curve = self.plot.plot([], [], pen=pg.mkPen(GRID_COLOR, width=1))

        self.plot.plot(
            [0.0, s, s, 0.0, 0.0], [0.0, 0.0, s, s, 0.0],
            pen=pg.mkPen(BORDER_COLOR, width=2),
        )
        self._add_rulers()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def set_cell_size(self, cell_size_px: float) -> None:
        """Redraw the grid with the given cell edge [display px]."""
        self.cell_size_px = cell_size_px
        xs, ys = grid_segments(cell_size_px, self.size_px)
        self._grid_curve.setData(xs, ys, connect="pairs")
        self.line_count = len(xs) // 2
        self._fill_item.setVisible(is_saturated(cell_size_px))

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _configure_view(self) -> None:
        """Lock to a square, non-interactive view of the reference area."""
        item = self.plot.getPlotItem()
        item.hideAxis("left")
        item.hideAxis("bottom")
        item.hideButtons()
        item.setMenuEnabled(False)
        item.setMouseEnabled(x=False, y=False)
        item.setAspectLocked(True)
        item.setXRange(0.0, self.size_px, padding=0.1)
        item.setYRange(0.0, self.size_px, padding=0.1)

    def _add_rulers(self) -> None:
        label = f"{VISUALIZER_AREA_CM:g}cm"
        s = self.size_px

        ruler_h = pg.TextItem(label, color="k", anchor=(0.5, 0.0))
        ruler_h.setPos(s / 2, 0.0)
        self.plot.addItem(ruler_h)

        ruler_v = pg.TextItem(label, color="k", anchor=(0.5, 0.0), angle=90)
        ruler_v.setPos(0.0, s / 2)
        self.plot.addItem(ruler_v)
