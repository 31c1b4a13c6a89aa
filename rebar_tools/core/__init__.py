# ============================================================================
# Rebar Tools - Reinforcement Mass and Centre of Gravity
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
# Licensed under the GNU General Public License v3
# ============================================================================
"""
Rebar Tools Core Module

Core functionality and data structures for Rebar Tools.
This module contains:
- Interface definitions (tool.py) for the three-layer architecture
- Centerline geometry and mass properties
- The rebar mass / centre of gravity engine

Architecture:
    Layer 1: Core (this module) - Pure Python interfaces and business logic
    Layer 2: Tool (rebar_tools.tool) - IFC implementations
    Layer 3: Commands - the rebar-tools CLI
"""

# Import logging configuration first (no dependencies)
from .logging_config import get_logger, setup_logging

# Import interface definitions (no external dependencies)
from .tool import interface, Ifc, Rebar

from .exceptions import (
    RebarMassError,
    EmptyInput,
    ZeroMass,
    UnsupportedGeometry,
    DegenerateGeometry,
)
from .geometry import Vector3, LineSegment, ArcSegment, CurveSegment
from .units import UnitSystem, METRE, MILLIMETRE, FOOT
from .mass_properties import WeightedPoint, CoGResult, compute_segment, combine
from .rebar_mass import RebarSpec, compute_cog, get_mass, format_mass_message

__all__ = [
    "get_logger",
    "setup_logging",
    "interface",
    "Ifc",
    "Rebar",
    "RebarMassError",
    "EmptyInput",
    "ZeroMass",
    "UnsupportedGeometry",
    "DegenerateGeometry",
    "Vector3",
    "LineSegment",
    "ArcSegment",
    "CurveSegment",
    "UnitSystem",
    "METRE",
    "MILLIMETRE",
    "FOOT",
    "WeightedPoint",
    "CoGResult",
    "compute_segment",
    "combine",
    "RebarSpec",
    "compute_cog",
    "get_mass",
    "format_mass_message",
]
