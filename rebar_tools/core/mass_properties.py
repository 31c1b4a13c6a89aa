# ============================================================================
# Rebar Tools - Reinforcement Mass and Centre of Gravity
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
# Licensed under the GNU General Public License v3
# ============================================================================
"""
Mass Properties Module
======================

Mass and centroid of single centerline segments, and the mass-weighted
combination used to roll them up.

Segment mass:
    r = d / 2
    A = pi * r^2
    m = A * L * density

Segment centroid:
    Line: midpoint of the endpoints
    Arc:  on the line from the arc center through the arc midpoint, at

              alpha = L / (2R)                      (half sweep, radians)
              p = 2 sin(alpha) / (3 alpha)
                  * ((R+r)^3 - (R-r)^3) / ((R+r)^2 - (R-r)^2)

          from the center (ANNULAR model), or

              p = sin(alpha) / alpha * (R + r^2 / (4R))

          (TOROIDAL model).

Combination:
    M = sum(m_i)
    c = sum(m_i * c_i) / M
"""
import math
from dataclasses import dataclass
from typing import Iterable, Dict, Any

from .exceptions import DegenerateGeometry, EmptyInput, UnsupportedGeometry, ZeroMass
from .geometry import ArcSegment, CurveSegment, LineSegment, Vector3
from .units import MILLIMETRE, UnitSystem


# =============================================================================
# Data Structures
# =============================================================================

@dataclass(frozen=True)
class WeightedPoint:
    """A located mass.

    Attributes:
        location: Centroid (model units)
        mass: Mass (kg)
    """

    location: Vector3
    mass: float


@dataclass(frozen=True)
class CoGResult:
    """Total mass and centre of gravity of a rebar selection.

    Attributes:
        location: Centre of gravity (model units)
        total_mass: Total steel mass (kg), full precision
    """

    location: Vector3
    total_mass: float

    def rounded_mass(self, precision: int = 2) -> float:
        """Mass rounded for display."""
        return round(self.total_mass, precision)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_mass": self.total_mass,
            "center_of_gravity": list(self.location.to_tuple()),
        }


# =============================================================================
# Segment Calculator
# =============================================================================

def cross_section_area(diameter: float) -> float:
    """Area of a round bar section."""
    radius = diameter / 2
    return math.pi * radius ** 2


def compute_segment(
    curve: CurveSegment,
    diameter: float,
    units: UnitSystem = MILLIMETRE
) -> WeightedPoint:
    """Compute mass and centroid of one centerline segment.

    Args:
        curve: LineSegment or ArcSegment
        diameter: Bar diameter (model units)
        units: Unit and density configuration

    Returns:
        WeightedPoint at the segment centroid

    Raises:
        UnsupportedGeometry: If curve is neither a line nor an arc
        DegenerateGeometry: If the segment length, arc radius or arc
            direction is zero
    """
    if not isinstance(curve, (LineSegment, ArcSegment)):
        raise UnsupportedGeometry(f"Unsupported curve type: {type(curve).__name__}")

    if curve.length <= 0:
        raise DegenerateGeometry(f"Segment length must be positive, got {curve.length}")

    if isinstance(curve, LineSegment):
        location = curve.midpoint
    else:
        location = _arc_centroid(curve, diameter / 2, units.arc_centroid)

    mass = cross_section_area(diameter) * curve.length * units.density
    return WeightedPoint(location=location, mass=mass)


def arc_centroid_offset(
    arc_radius: float,
    bar_radius: float,
    length: float,
    model: str = "ANNULAR"
) -> float:
    """Distance from the arc center to the bent bar's centroid.

    Args:
        arc_radius: Centerline bend radius R
        bar_radius: Bar section radius r
        length: Centerline arc length
        model: "ANNULAR" or "TOROIDAL"

    Returns:
        Radial offset p
    """
    R = arc_radius
    r = bar_radius
    alpha = length / (2 * R)
    sweep_factor = math.sin(alpha) / alpha

    if r == 0:
        # Both models reduce to the centroid of the centerline arc
        return sweep_factor * R

    if model == "TOROIDAL":
        return sweep_factor * (R + r ** 2 / (4 * R))

    return (
        (2 * math.sin(alpha) / (3 * alpha))
        * ((R + r) ** 3 - (R - r) ** 3)
        / ((R + r) ** 2 - (R - r) ** 2)
    )


def _arc_centroid(arc: ArcSegment, bar_radius: float, model: str) -> Vector3:
    if arc.radius <= 0:
        raise DegenerateGeometry(f"Arc radius must be positive, got {arc.radius}")

    direction = arc.midpoint - arc.center
    if direction.length == 0:
        raise DegenerateGeometry("Arc midpoint coincides with its center")

    p = arc_centroid_offset(arc.radius, bar_radius, arc.length, model)
    return arc.center + direction.normalized() * p


# =============================================================================
# Weighted Aggregator
# =============================================================================

def combine(points: Iterable[WeightedPoint]) -> WeightedPoint:
    """Combine located masses into one at their mass-weighted centroid.

    Used for every roll-up level: segments into a bar position, positions
    into a rebar, rebars into the selection.

    Args:
        points: WeightedPoints to combine

    Returns:
        WeightedPoint with the summed mass

    Raises:
        EmptyInput: If there are no points
        ZeroMass: If the masses sum to exactly zero
    """
    points = list(points)
    if not points:
        raise EmptyInput("No weighted points to combine")

    total_mass = sum(p.mass for p in points)
    if total_mass == 0:
        raise ZeroMass(f"Total mass of {len(points)} point(s) is zero, centroid undefined")

    sum_x = sum(p.mass * p.location.x for p in points)
    sum_y = sum(p.mass * p.location.y for p in points)
    sum_z = sum(p.mass * p.location.z for p in points)

    location = Vector3(sum_x / total_mass, sum_y / total_mass, sum_z / total_mass)
    return WeightedPoint(location=location, mass=total_mass)


__all__ = [
    "WeightedPoint",
    "CoGResult",
    "cross_section_area",
    "compute_segment",
    "arc_centroid_offset",
    "combine",
]
