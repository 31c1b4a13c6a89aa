# ============================================================================
# Rebar Tools - Reinforcement Mass and Centre of Gravity
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
# Licensed under the GNU General Public License v3
# ============================================================================
"""
Centerline Segments Module
==========================

Defines the two centerline primitives a bar path is made of:
- LineSegment: straight run between two points
- ArcSegment: circular bend

CurveSegment is the closed union of the two. Code that handles segments
dispatches on exactly these types and rejects anything else.
"""

from dataclasses import dataclass
from typing import Union

from ..exceptions import DegenerateGeometry
from .vector import Vector3


@dataclass(frozen=True)
class LineSegment:
    """Straight centerline segment.

    Attributes:
        start: Start point
        end: End point
        length: Segment length (model units)

    Example:
        >>> line = LineSegment.from_points((0, 0, 0), (1000, 0, 0))
        >>> line.length
        1000.0
    """

    start: Vector3
    end: Vector3
    length: float

    @classmethod
    def from_points(cls, start, end) -> "LineSegment":
        """Create a line, deriving its length from the endpoints."""
        start = Vector3(start)
        end = Vector3(end)
        return cls(start=start, end=end, length=start.distance_to(end))

    @property
    def midpoint(self) -> Vector3:
        return (self.start + self.end) / 2.0


@dataclass(frozen=True)
class ArcSegment:
    """Circular arc centerline segment.

    Attributes:
        center: Arc center
        radius: Arc (bend) radius
        midpoint: Point on the arc halfway along its length
        length: Arc length (model units)

    The midpoint gives the side of the center the arc bulges toward.
    """

    center: Vector3
    radius: float
    midpoint: Vector3
    length: float

    @property
    def sweep(self) -> float:
        """Swept angle in radians."""
        return self.length / self.radius

    @classmethod
    def from_three_points(cls, start, through, end) -> "ArcSegment":
        """Create an arc from its start, any intermediate point and its end.

        Args:
            start: First point of the arc
            through: Any point on the arc between start and end
            end: Last point of the arc

        Returns:
            ArcSegment with derived center, radius, length and true midpoint

        Raises:
            DegenerateGeometry: If the points are collinear or coincident
        """
        p1, p2, p3 = Vector3(start), Vector3(through), Vector3(end)

        # Circumcenter of the triangle p1, p2, p3
        a = p1 - p3
        b = p2 - p3
        normal = a.cross(b)
        normal_sq = normal.length_squared
        if normal_sq == 0:
            raise DegenerateGeometry("Arc points are collinear")
        offset = (b * a.length_squared - a * b.length_squared).cross(normal)
        center = p3 + offset / (2 * normal_sq)
        radius = center.distance_to(p1)

        # Traversal p1 -> p2 -> p3 is counter-clockwise around this axis
        axis = (p2 - p1).cross(p3 - p2).normalized()
        r1, r2, r3 = p1 - center, p2 - center, p3 - center
        sweep = r1.angle_to(r2, axis) + r2.angle_to(r3, axis)

        midpoint = center + r1.rotate_about(axis, sweep / 2)
        return cls(center=center, radius=radius, midpoint=midpoint, length=radius * sweep)


CurveSegment = Union[LineSegment, ArcSegment]


__all__ = ["LineSegment", "ArcSegment", "CurveSegment"]
