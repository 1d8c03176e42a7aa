from __future__ import annotations

import math

from PySide6.QtCore import Slot, Qt
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QFormLayout, QLineEdit, QComboBox, QLabel,
    QStackedWidget, QTabBar, QPushButton, QGridLayout, QHBoxLayout
)

from texelarchitect.app.state import Store
from texelarchitect.app.ui.panels.base import BasePanel
from texelarchitect.model.presets import PRESETS, TEXTURE_RESOLUTIONS, Preset
from texelarchitect.model.state import Mode, to_number

# Tab order must match the stacked pages
MODE_TABS: list[tuple[Mode, str]] = [
    (Mode.DENSITY, "Calculate Density"),
    (Mode.SIZE, "Calculate Texture Size"),
]

RESULT_STYLE = "font-size: 28px; font-weight: bold; color: {color};"
NEUTRAL_COLOR = "#111827"


def format_density(value: float) -> str:
    return f"{value:.2f}"


def format_size(value: int | float) -> str:
    return str(value) if isinstance(value, int) else f"{value:g}"


def _same_number(a: float, b: float) -> bool:
    if math.isnan(a) and math.isnan(b):
        return True
    return a == b


class CalculatorPanel(BasePanel):
    """
    Panel with the two calculator modes.

    Top: mode tabs (density / texture size).
    Below: shared object size input, then the page of the active mode.
    Every edit goes straight to the Store; results are read back from it.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)

        # mode selection
        self.tabs = QTabBar(self)
        self.tabs.setExpanding(True)
        self.tabs.setDrawBase(True)
        for _, label in MODE_TABS:
            self.tabs.addTab(label)
        root.addWidget(self.tabs, 0)

        # shared input
        shared = QGroupBox("", self)
        form = QFormLayout(shared)
        self.object_size_edit = QLineEdit(shared)
        form.addRow("Object Size (cm):", self.object_size_edit)
        self.unit_hint = QLabel("1m = 100cm", shared)
        self.unit_hint.setStyleSheet("color: gray;")
        form.addRow("", self.unit_hint)
        root.addWidget(shared, 0)

        # mode pages
        self.stack = QStackedWidget(self)
        self.page_density = QWidget()
        self._setup_density_page(self.page_density)
        self.page_size = QWidget()
        self._setup_size_page(self.page_size)
        self.stack.addWidget(self.page_density)
        self.stack.addWidget(self.page_size)
        root.addWidget(self.stack, 0)

        root.addStretch()

        # wiring
        self.tabs.currentChanged.connect(self._on_tab_changed)
        self.object_size_edit.textEdited.connect(self._on_object_size_edited)
        self.resolution_combo.currentIndexChanged.connect(self._on_resolution_changed)
        self.target_density_edit.textEdited.connect(self._on_target_density_edited)

        self.refresh()

    # ------------------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------------------

    def _setup_density_page(self, parent: QWidget) -> None:
        layout = QVBoxLayout(parent)
        layout.setContentsMargins(0, 0, 0, 0)

        form = QFormLayout()
        self.resolution_combo = QComboBox(parent)
        for resolution in TEXTURE_RESOLUTIONS:
            self.resolution_combo.addItem(resolution.label, userData=resolution.size)
        form.addRow("Texture Resolution:", self.resolution_combo)
        layout.addLayout(form)

        result = QGroupBox("Resulting Density", parent)
        result_layout = QHBoxLayout(result)
        self.density_value = QLabel(result)
        self.density_value.setAlignment(Qt.AlignmentFlag.AlignCenter)
        result_layout.addWidget(self.density_value, 1)
        result_layout.addWidget(QLabel("px/cm", result), 0)
        layout.addWidget(result)

    def _setup_size_page(self, parent: QWidget) -> None:
        layout = QVBoxLayout(parent)
        layout.setContentsMargins(0, 0, 0, 0)

        form = QFormLayout()
        self.target_density_edit = QLineEdit(parent)
        form.addRow("Target Density (px/cm):", self.target_density_edit)
        layout.addLayout(form)

        presets_box = QGroupBox("Presets", parent)
        grid = QGridLayout(presets_box)
        self.preset_buttons: dict[str, QPushButton] = {}
        for i, preset in enumerate(PRESETS):
            btn = QPushButton(f"{preset.name}\n{preset.label}", presets_box)
            btn.setToolTip(preset.description)
            btn.setMinimumHeight(48)
            btn.clicked.connect(lambda _=False, p=preset: self._on_preset_clicked(p))
            grid.addWidget(btn, i // 2, i % 2)
            self.preset_buttons[preset.name] = btn
        layout.addWidget(presets_box)

        result = QGroupBox("Required Texture Size", parent)
        result_layout = QVBoxLayout(result)
        row = QHBoxLayout()
        self.texture_size_value = QLabel(result)
        self.texture_size_value.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.texture_size_value.setStyleSheet(RESULT_STYLE.format(color=NEUTRAL_COLOR))
        row.addWidget(self.texture_size_value, 1)
        row.addWidget(QLabel("px", result), 0)
        result_layout.addLayout(row)
        self.recommendation_label = QLabel(result)
        self.recommendation_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        result_layout.addWidget(self.recommendation_label)
        layout.addWidget(result)

    # ------------------------------------------------------------------------------
    # Store -> widgets
    # ------------------------------------------------------------------------------

    def refresh(self, *_) -> None:
        state = self.store.state
        outputs = state.outputs
        index = [m for m, _ in MODE_TABS].index(state.mode)

        # programmatic updates must not echo back into the store
        self.tabs.blockSignals(True)
        self.tabs.setCurrentIndex(index)
        self.tabs.blockSignals(False)
        self.stack.setCurrentIndex(index)

        self._sync_line_edit(self.object_size_edit, state.inputs.object_size_cm)
        self._sync_line_edit(self.target_density_edit, state.inputs.target_density)

        combo_index = self.resolution_combo.findData(state.inputs.texture_size_px)
        if combo_index >= 0 and combo_index != self.resolution_combo.currentIndex():
            self.resolution_combo.blockSignals(True)
            self.resolution_combo.setCurrentIndex(combo_index)
            self.resolution_combo.blockSignals(False)

        self.density_value.setText(format_density(outputs.density))
        self.density_value.setStyleSheet(RESULT_STYLE.format(color=outputs.quality.color))
        self.density_value.setToolTip(f"Quality: {outputs.quality}")

        self.texture_size_value.setText(format_size(outputs.texture_size))
        self.recommendation_label.setText(
            f"Closest Power of 2: <b>{format_size(outputs.recommended_size)}</b>"
        )

    @staticmethod
    def _sync_line_edit(edit: QLineEdit, value: float) -> None:
        """Rewrite the field only if it no longer shows the stored value."""
        if not _same_number(to_number(edit.text()), value):
            edit.setText(f"{value:g}")

    # ------------------------------------------------------------------------------
    # Widgets -> store
    # ------------------------------------------------------------------------------

    @Slot(int)
    def _on_tab_changed(self, index: int) -> None:
        self.store.set_mode(MODE_TABS[index][0])

    @Slot(str)
    def _on_object_size_edited(self, text: str) -> None:
        self.store.set_object_size(to_number(text))

    @Slot(int)
    def _on_resolution_changed(self, index: int) -> None:
        self.store.set_texture_size(self.resolution_combo.itemData(index))

    @Slot(str)
    def _on_target_density_edited(self, text: str) -> None:
        self.store.set_target_density(to_number(text))

    def _on_preset_clicked(self, preset: Preset) -> None:
        self.store.apply_preset(preset)
