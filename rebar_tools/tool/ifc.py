# ============================================================================
# Rebar Tools - Reinforcement Mass and Centre of Gravity
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
# Licensed under the GNU General Public License v3
# ============================================================================
"""
Ifc tool implementation - holds the active IFC file.

Usage:
    from rebar_tools.tool import Ifc

    # Open a model
    ifc_file = Ifc.open("structure.ifc")

    # Query it
    bars = Ifc.by_type("IfcReinforcingBar")
    bar = Ifc.by_guid("2O2Fr$t4X7Zf8NOew3FLOH")
"""
from typing import Optional, List

import ifcopenshell
import ifcopenshell.util.unit

from ..core import tool as core_tool
from ..core.logging_config import get_logger

logger = get_logger(__name__)


class Ifc(core_tool.Ifc):
    """
    ifcopenshell backed IFC operations.

    The active file is kept on the class, like every tool the state is
    shared by all callers.
    """

    file: Optional[ifcopenshell.file] = None

    @classmethod
    def get(cls) -> Optional[ifcopenshell.file]:
        """Get the current IFC file."""
        return cls.file

    @classmethod
    def set(cls, ifc_file: ifcopenshell.file) -> None:
        """Set the current IFC file."""
        cls.file = ifc_file

    @classmethod
    def open(cls, path: str) -> ifcopenshell.file:
        """Open an IFC file and make it the current file."""
        ifc_file = ifcopenshell.open(path)
        logger.debug(f"Opened {path} ({ifc_file.schema})")
        cls.set(ifc_file)
        return ifc_file

    @classmethod
    def _require(cls) -> ifcopenshell.file:
        ifc = cls.get()
        if ifc is None:
            raise RuntimeError("No IFC file loaded. Open a file first.")
        return ifc

    @classmethod
    def by_type(cls, ifc_class: str) -> List[ifcopenshell.entity_instance]:
        """Get all entities of a given IFC class."""
        return list(cls._require().by_type(ifc_class))

    @classmethod
    def by_guid(cls, guid: str) -> Optional[ifcopenshell.entity_instance]:
        """Get an entity by GlobalId, None if it is not in the file."""
        ifc = cls._require()
        try:
            return ifc.by_guid(guid)
        except RuntimeError:
            return None

    @classmethod
    def get_length_unit_scale(cls) -> float:
        """Get metres per project length unit."""
        ifc = cls._require()
        if not ifc.by_type("IfcUnitAssignment"):
            logger.warning("No IfcUnitAssignment in model, assuming metres")
            return 1.0
        return ifcopenshell.util.unit.calculate_unit_scale(ifc)
