# ============================================================================
# Rebar Tools - Reinforcement Mass and Centre of Gravity
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
# Licensed under the GNU General Public License v3
# ============================================================================
"""
Centerline Geometry Package
===========================

Pure Python geometry for bar centerlines.

Example:
    >>> from rebar_tools.core.geometry import LineSegment, ArcSegment
    >>> leg = LineSegment.from_points((0, 0, 0), (500, 0, 0))
    >>> bend = ArcSegment.from_three_points((500, 0, 0), (535.36, 14.64, 0), (550, 50, 0))
"""

from .vector import Vector3
from .segments import LineSegment, ArcSegment, CurveSegment

__all__ = [
    "Vector3",
    "LineSegment",
    "ArcSegment",
    "CurveSegment",
]
