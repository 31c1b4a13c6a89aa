# ============================================================================
# Rebar Tools - Reinforcement Mass and Centre of Gravity
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
# Licensed under the GNU General Public License v3
# ============================================================================
"""
Unit and Density Configuration
==============================

Geometry comes in whatever length unit the model uses. Mass is always
reported in kilograms, so the steel density has to be expressed per cubic
model unit:

    density = 7850 kg/m^3 * (metres per unit)^3

    METRE       7850.0             kg/m^3
    MILLIMETRE  7.85e-06           kg/mm^3
    FOOT        222.2872457472     kg/ft^3

Arc centroid models:
    ANNULAR   - centroid of the annular sector swept by the bar's mid-plane
                section (default)
    TOROIDAL  - exact centroid of the torus sector occupied by the bar
"""

import math
from dataclasses import dataclass, replace

# Steel density (kg/m^3)
STEEL_DENSITY_KG_PER_M3 = 7850.0

ARC_CENTROID_MODELS = ("ANNULAR", "TOROIDAL")


@dataclass(frozen=True)
class UnitSystem:
    """Working length unit and the matching steel density.

    Attributes:
        name: Unit name (e.g., "MILLIMETRE")
        metres_per_unit: Size of one model length unit in metres
        density_kg_per_m3: Steel density in SI units
        arc_centroid: Arc centroid model, one of ARC_CENTROID_MODELS

    Example:
        >>> round(MILLIMETRE.density * 1e9, 6)
        7850.0
        >>> FOOT.with_arc_centroid("TOROIDAL").arc_centroid
        'TOROIDAL'
    """

    name: str
    metres_per_unit: float
    density_kg_per_m3: float = STEEL_DENSITY_KG_PER_M3
    arc_centroid: str = "ANNULAR"

    def __post_init__(self):
        if self.metres_per_unit <= 0:
            raise ValueError(f"metres_per_unit must be positive, got {self.metres_per_unit}")
        if self.density_kg_per_m3 <= 0:
            raise ValueError(f"density_kg_per_m3 must be positive, got {self.density_kg_per_m3}")
        if self.arc_centroid not in ARC_CENTROID_MODELS:
            raise ValueError(
                f"Unknown arc centroid model '{self.arc_centroid}'. "
                f"Expected one of {', '.join(ARC_CENTROID_MODELS)}"
            )

    @property
    def density(self) -> float:
        """Steel density in kg per cubic model unit."""
        return self.density_kg_per_m3 * self.metres_per_unit ** 3

    def with_arc_centroid(self, model: str) -> "UnitSystem":
        """Return a copy using another arc centroid model."""
        return replace(self, arc_centroid=model)

    @classmethod
    def from_scale(cls, metres_per_unit: float, **kwargs) -> "UnitSystem":
        """Build a unit system from a length unit scale.

        Well known scales reuse the preset name; anything else is
        called "PROJECT".

        Args:
            metres_per_unit: Size of one model length unit in metres
            **kwargs: Other UnitSystem fields

        Returns:
            UnitSystem for the scale
        """
        for preset in (METRE, MILLIMETRE, FOOT):
            if math.isclose(metres_per_unit, preset.metres_per_unit, rel_tol=1e-9):
                return replace(preset, **kwargs)
        return cls("PROJECT", metres_per_unit, **kwargs)


METRE = UnitSystem("METRE", 1.0)
MILLIMETRE = UnitSystem("MILLIMETRE", 0.001)
FOOT = UnitSystem("FOOT", 0.3048)


__all__ = [
    "STEEL_DENSITY_KG_PER_M3",
    "ARC_CENTROID_MODELS",
    "UnitSystem",
    "METRE",
    "MILLIMETRE",
    "FOOT",
]
