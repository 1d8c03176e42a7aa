"""
Density Formulas
================
Pure conversions between object size, texture resolution and texel density.

Units:
    object size     -> centimeters (cm)
    texture size    -> pixels (px), edge length of a square texture
    texel density   -> pixels per centimeter (px/cm)

Degenerate input (zero, negative or NaN sizes) is NOT rejected. The results
follow IEEE float semantics and come back as ``inf`` or ``nan`` so the view can
show them as they are.
"""
from __future__ import annotations

from decimal import Context, Decimal, ROUND_HALF_UP
from enum import StrEnum
import math

import numpy as np


# ------------------------------------------------------------------------------
# Quality tiers
# ------------------------------------------------------------------------------
class QualityTier(StrEnum):
    HIGH = "High"
    GOOD = "Good"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def color(self) -> str:
        return TIER_COLORS[self]


# Inclusive lower bounds [px/cm], highest first
HIGH_THRESHOLD: float = 20.0
GOOD_THRESHOLD: float = 10.0
MEDIUM_THRESHOLD: float = 5.0

TIER_COLORS: dict[QualityTier, str] = {
    QualityTier.HIGH: "#10b981",
    QualityTier.GOOD: "#3b82f6",
    QualityTier.MEDIUM: "#f59e0b",
    QualityTier.LOW: "#ef4444",
}

_CENTS = Decimal("0.01")
# Wide enough to hold any finite double to the cent
_DECIMAL_CONTEXT = Context(prec=400)


# ------------------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------------------
def _round_half_up(value: float) -> float:
    """Round to the nearest integer, ties towards +infinity. Non-finite values pass through."""
    if not math.isfinite(value):
        return value
    floor = math.floor(value)
    return float(floor + 1 if value - floor >= 0.5 else floor)


def _round_cents(value: float) -> float:
    """Round to 2 decimals, exact ties away from zero (as the decimal display does)."""
    if not math.isfinite(value):
        return value
    return float(Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT))


# ------------------------------------------------------------------------------
# Formulas
# ------------------------------------------------------------------------------
def compute_density(object_size_cm: float, texture_size_px: float) -> float:
    """
    Texel density of a texture stretched over an object.

    Args:
        object_size_cm: Edge length of the object [cm].
        texture_size_px: Edge length of the texture [px].

    Returns:
        Density [px/cm] rounded to 2 decimals. ``inf``/``nan`` for a zero size.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        density = np.divide(np.float64(texture_size_px), np.float64(object_size_cm))
    return _round_cents(float(density))


def compute_texture_size(object_size_cm: float, target_density: float) -> int | float:
    """
    Texture edge length needed to reach ``target_density`` on the object.

    Returns:
        Size [px] rounded half up. Non-finite products are returned unchanged.
    """
    with np.errstate(invalid="ignore", over="ignore"):
        size = float(np.multiply(np.float64(target_density), np.float64(object_size_cm)))
    if not math.isfinite(size):
        return size
    return int(_round_half_up(size))


def nearest_power_of_two(value: float) -> int | float:
    """
    Closest power of two, measured in log space (1500 -> 2048, not 1024).

    ``0`` maps to ``0.0`` and negative values to ``nan``.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        exponent = _round_half_up(float(np.log2(np.float64(value))))
    if not math.isfinite(exponent) or exponent < 0:
        return float(np.exp2(exponent))
    return 2 ** int(exponent)


def classify_density(density: float) -> QualityTier:
    """Map a density [px/cm] onto its quality tier. NaN is LOW."""
    if density >= HIGH_THRESHOLD:
        return QualityTier.HIGH
    if density >= GOOD_THRESHOLD:
        return QualityTier.GOOD
    if density >= MEDIUM_THRESHOLD:
        return QualityTier.MEDIUM
    return QualityTier.LOW
