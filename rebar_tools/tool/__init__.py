# ============================================================================
# Rebar Tools - Reinforcement Mass and Centre of Gravity
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
# Licensed under the GNU General Public License v3
# ============================================================================
"""
Tool layer - ifcopenshell implementations of core interfaces.

This module provides the bridge between pure business logic (core) and
the IFC model. Tools implement the interfaces defined in core.tool and
handle all ifcopenshell interactions.

Usage:
    import rebar_tools.tool as tool

    # Open a model
    tool.Ifc.open("structure.ifc")

    # Read a bar
    bar = tool.Ifc.by_type("IfcReinforcingBar")[0]
    segments = tool.Rebar.get_centerline_segments(bar, 0)

    # In core functions, tools are passed as parameters:
    def my_core_function(ifc: type[tool.Ifc], rebar: type[tool.Rebar]):
        bars = ifc.by_type("IfcReinforcingBar")
        return [rebar.get_diameter(bar) for bar in bars]
"""

from .ifc import Ifc
from .rebar import Rebar

__all__ = [
    "Ifc",
    "Rebar",
]
