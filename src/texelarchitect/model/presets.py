"""Predefined density targets and texture resolutions (Catalog)."""
from __future__ import annotations

from dataclasses import dataclass


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class Preset:
    """A named texel density target for a common use case."""
    name: str
    density: float  # px/cm
    description: str

    @property
    def label(self) -> str:
        return f"{self.density:g} px/cm"


@dataclass(frozen=True)
class TextureResolution:
    """A square texture size offered by the resolution selector."""
    size: int  # px

    @property
    def label(self) -> str:
        return f"{self.size} x {self.size}"


# ------------------------------------------------------------------------------
# Catalog
# ------------------------------------------------------------------------------
PRESETS: tuple[Preset, ...] = (
    Preset(name="First Person (High)", density=20.48, description="Hero assets, weapons"),
    Preset(name="First Person (Std)", density=10.24, description="Environment, props"),
    Preset(name="Third Person", density=5.12, description="General gameplay"),
    Preset(name="Background", density=2.56, description="Distant objects"),
)

TEXTURE_RESOLUTIONS: tuple[TextureResolution, ...] = tuple(
    TextureResolution(size) for size in (512, 1024, 2048, 4096, 8192)
)


def get_preset(name: str) -> Preset:
    """Look up a preset by its display name."""
    for preset in PRESETS:
        if preset.name == name:
            return preset
    raise KeyError(f"Preset '{name}' not found.")
