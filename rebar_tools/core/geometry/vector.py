# ============================================================================
# Rebar Tools - Reinforcement Mass and Centre of Gravity
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
# Licensed under the GNU General Public License v3
# ============================================================================
"""
3D Vector Utilities
===================

Provides a lightweight 3D vector class for centerline geometry calculations.
This keeps the core free of numpy for pure Python operations.
"""

import math


class Vector3:
    """Lightweight 3D vector for points and directions.

    Attributes:
        x: X coordinate
        y: Y coordinate
        z: Z coordinate

    Example:
        >>> start = Vector3(0.0, 0.0, 0.0)
        >>> end = Vector3(1000.0, 0.0, 0.0)
        >>> mid = (start + end) / 2
        >>> print(f"Length: {(end - start).length:.1f}")
    """

    def __init__(self, x, y=0, z=0):
        """Initialize vector from coordinates or tuple/list.

        Args:
            x: X coordinate, or tuple/list of (x, y) or (x, y, z)
            y: Y coordinate (ignored if x is tuple/list)
            z: Z coordinate (ignored if x is tuple/list)
        """
        if isinstance(x, Vector3):
            self.x, self.y, self.z = x.x, x.y, x.z
        elif isinstance(x, (list, tuple)):
            self.x = float(x[0])
            self.y = float(x[1])
            self.z = float(x[2]) if len(x) > 2 else 0.0
        else:
            self.x = float(x)
            self.y = float(y)
            self.z = float(z)

    def __sub__(self, other):
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __add__(self, other):
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __mul__(self, scalar):
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self):
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __eq__(self, other):
        """Check equality with tolerance."""
        if not isinstance(other, Vector3):
            return False
        return (
            abs(self.x - other.x) < 1e-9
            and abs(self.y - other.y) < 1e-9
            and abs(self.z - other.z) < 1e-9
        )

    def __hash__(self):
        return hash((round(self.x, 6), round(self.y, 6), round(self.z, 6)))

    def __repr__(self):
        return f"Vector3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"

    @property
    def length(self) -> float:
        """Vector magnitude (length)."""
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    @property
    def length_squared(self) -> float:
        """Squared length (avoids sqrt for comparisons)."""
        return self.x**2 + self.y**2 + self.z**2

    def normalized(self) -> "Vector3":
        """Return unit vector in same direction.

        Returns:
            Unit vector, or zero vector if length is zero.
        """
        length = self.length
        if length > 0:
            return Vector3(self.x / length, self.y / length, self.z / length)
        return Vector3(0, 0, 0)

    def dot(self, other: "Vector3") -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        """Cross product with another vector."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def angle_to(self, other: "Vector3", axis: "Vector3") -> float:
        """Counter-clockwise angle from this vector to another around an axis.

        Args:
            other: Target vector
            axis: Unit rotation axis, perpendicular to both vectors

        Returns:
            Angle in radians in [0, 2*pi)
        """
        angle = math.atan2(axis.dot(self.cross(other)), self.dot(other))
        if angle < 0:
            angle += 2 * math.pi
        return angle

    def rotate_about(self, axis: "Vector3", angle: float) -> "Vector3":
        """Rotate vector around a unit axis (Rodrigues' formula).

        Args:
            axis: Unit rotation axis
            angle: Rotation angle in radians (counter-clockwise positive)

        Returns:
            Rotated vector
        """
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return (
            self * cos_a
            + axis.cross(self) * sin_a
            + axis * (axis.dot(self) * (1 - cos_a))
        )

    def to_tuple(self) -> tuple:
        """Convert to (x, y, z) tuple."""
        return (self.x, self.y, self.z)

    def distance_to(self, other: "Vector3") -> float:
        """Calculate distance to another point."""
        return (other - self).length


__all__ = ["Vector3"]
