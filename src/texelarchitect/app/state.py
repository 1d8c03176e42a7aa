from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from texelarchitect.model.presets import Preset
from texelarchitect.model.state import CalculatorState, DerivedOutputs, Mode

logger = logging.getLogger(__name__)


class Store(QObject):
    """
    Central state store with signals for panel/preview sync.

    Every setter updates the inputs, recomputes the derived outputs and only
    then notifies listeners, so no listener ever sees a stale result.
    """
    state_changed = Signal(object)
    mode_changed = Signal(object)

    def __init__(self, state: CalculatorState | None = None) -> None:
        super().__init__()
        self.state = state if state is not None else CalculatorState()

    @property
    def mode(self) -> Mode:
        return self.state.mode

    @property
    def outputs(self) -> DerivedOutputs:
        return self.state.outputs

    def set_mode(self, mode: Mode) -> None:
        if mode == self.state.mode:
            return
        self.state.mode = Mode(mode)
        logger.info("Mode switched to '%s'.", self.state.mode)
        self._commit()
        self.mode_changed.emit(self.state.mode)

    def set_object_size(self, size_cm: float) -> None:
        self.state.inputs.object_size_cm = size_cm
        logger.debug("Object size set to %s cm.", size_cm)
        self._commit()

    def set_texture_size(self, size_px: int) -> None:
        self.state.inputs.texture_size_px = size_px
        logger.debug("Texture size set to %s px.", size_px)
        self._commit()

    def set_target_density(self, density: float) -> None:
        self.state.inputs.target_density = density
        logger.debug("Target density set to %s px/cm.", density)
        self._commit()

    def apply_preset(self, preset: Preset) -> None:
        """Overwrite the target density with the preset value."""
        logger.info("Preset '%s' applied (%s px/cm).", preset.name, preset.density)
        self.set_target_density(preset.density)

    def reset(self) -> None:
        """Restore the default inputs and mode."""
        old_mode = self.state.mode
        self.state = CalculatorState()
        logger.info("Calculator state has been reset.")
        self._commit()
        if self.state.mode != old_mode:
            self.mode_changed.emit(self.state.mode)

    def _commit(self) -> None:
        outputs = self.state.recompute()
        if not outputs.is_finite():
            logger.debug("Derived outputs are not finite: %s", outputs)
        self.state_changed.emit(self.state)
