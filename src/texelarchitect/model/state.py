"""
Calculator State (Data Model)
=============================
This module defines the data held by the calculator while the window is open.

Why is this file needed?
------------------------
1. State Management: It holds the mode, the user inputs and the derived
   results in one place.
2. Consistency: Derived results are produced only by ``derive()``, a pure
   function of the inputs and the mode. Nothing else writes them.
3. Decoupling: Views read from this object; the Store writes to it.

Classes:
    Mode: Which quantity is being calculated.
    CalculatorInputs: Values the user can edit.
    DerivedOutputs: Values computed from the inputs.
    CalculatorState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import math

from texelarchitect.model.density import (
    QualityTier, compute_density, compute_texture_size, nearest_power_of_two, classify_density
)
from texelarchitect.model.grid import grid_cell_size_px


class Mode(StrEnum):
    """Which derived quantity the calculator shows."""
    DENSITY = "density"
    SIZE = "size"


DEFAULT_OBJECT_SIZE_CM: float = 100.0
DEFAULT_TEXTURE_SIZE_PX: int = 2048
DEFAULT_TARGET_DENSITY: float = 10.24


@dataclass
class CalculatorInputs:
    object_size_cm: float = DEFAULT_OBJECT_SIZE_CM
    texture_size_px: int = DEFAULT_TEXTURE_SIZE_PX
    target_density: float = DEFAULT_TARGET_DENSITY  # px/cm


@dataclass(frozen=True)
class DerivedOutputs:
    density: float  # px/cm, 2 decimals
    texture_size: int | float  # px
    recommended_size: int | float  # power of two, px
    quality: QualityTier
    grid_cell_px: float

    def is_finite(self) -> bool:
        return all(
            math.isfinite(v)
            for v in (self.density, self.texture_size, self.recommended_size, self.grid_cell_px)
        )


def derive(inputs: CalculatorInputs, mode: Mode) -> DerivedOutputs:
    """Compute every derived value for the given inputs and mode."""
    density = compute_density(inputs.object_size_cm, inputs.texture_size_px)
    texture_size = compute_texture_size(inputs.object_size_cm, inputs.target_density)

    # The preview follows whichever density the current mode is about
    shown_density = density if mode == Mode.DENSITY else inputs.target_density

    return DerivedOutputs(
        density=density,
        texture_size=texture_size,
        recommended_size=nearest_power_of_two(texture_size),
        quality=classify_density(density),
        grid_cell_px=grid_cell_size_px(shown_density),
    )


@dataclass
class CalculatorState:
    """
    Holds the entire state of the calculator.
    Pass this instance to the Store; views only read it.
    """
    mode: Mode = Mode.DENSITY
    inputs: CalculatorInputs = field(default_factory=CalculatorInputs)
    outputs: DerivedOutputs = field(init=False)

    def __post_init__(self) -> None:
        self.recompute()

    def recompute(self) -> DerivedOutputs:
        self.outputs = derive(self.inputs, self.mode)
        return self.outputs

    @property
    def current_density(self) -> float:
        """Density shown in the preview for the active mode."""
        if self.mode == Mode.DENSITY:
            return self.outputs.density
        return self.inputs.target_density


def to_number(text: str) -> float:
    """
    Coerce text from an input field into a number.

    Blank text becomes 0.0 and anything unparsable becomes NaN. No range
    checks are applied.
    """
    stripped = text.strip()
    if not stripped:
        return 0.0
    try:
        return float(stripped)
    except ValueError:
        return math.nan
