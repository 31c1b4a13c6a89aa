# ============================================================================
# Rebar Tools - Reinforcement Mass and Centre of Gravity
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
# Licensed under the GNU General Public License v3
# ============================================================================
"""
Interface definitions for Rebar Tools.

This module defines abstract interfaces that separate business logic from
host-specific implementations:

    Layer 1: Core (this module) - Pure Python interfaces and business logic
    Layer 2: Tool (rebar_tools.tool) - ifcopenshell implementations
    Layer 3: Commands - the command line front end

Usage:
    from typing import TYPE_CHECKING

    if TYPE_CHECKING:
        import rebar_tools.tool as tool

    def my_function(ifc: type[tool.Ifc], rebar: type[tool.Rebar]):
        for element in ifc.by_type("IfcReinforcingBar"):
            diameter = rebar.get_diameter(element)
"""
from typing import TYPE_CHECKING, Optional, List, Any
import abc

if TYPE_CHECKING:
    import ifcopenshell
    from .geometry import CurveSegment


def interface(cls):
    """
    Decorator that converts all public methods to @classmethod @abstractmethod.

    This enables the dependency injection pattern where tool classes are passed
    as types (not instances) to core functions, and all methods are called as
    class methods.

    Example:
        @interface
        class Rebar:
            def get_diameter(cls, element): pass  # Becomes @classmethod @abstractmethod

        # In tool implementation:
        class Rebar(core.tool.Rebar):
            @classmethod
            def get_diameter(cls, element):
                return element.NominalDiameter

        # In core function:
        def do_something(rebar: type[tool.Rebar]):
            d = rebar.get_diameter(element)  # Called on the class, not an instance
    """
    for name, method in list(cls.__dict__.items()):
        if callable(method) and not name.startswith('_'):
            setattr(cls, name, classmethod(abc.abstractmethod(method)))
    cls.__original_qualname__ = cls.__qualname__
    return cls


# =============================================================================
# Core Interfaces
# =============================================================================

@interface
class Ifc:
    """
    Interface for access to the host model.

    The model holds the rebar elements; all element lookups go through
    this interface.
    """

    def get(cls) -> Optional["ifcopenshell.file"]:
        """
        Get the current IFC file.

        Returns:
            The active IFC file, or None if no file is loaded.
        """
        pass

    def set(cls, ifc_file: "ifcopenshell.file") -> None:
        """
        Set the current IFC file.

        Args:
            ifc_file: The IFC file to set as active.
        """
        pass

    def open(cls, path: str) -> "ifcopenshell.file":
        """
        Open an IFC file from disk and make it the active file.

        Args:
            path: Path to the .ifc file

        Returns:
            The opened IFC file
        """
        pass

    def by_type(cls, ifc_class: str) -> List["ifcopenshell.entity_instance"]:
        """
        Get all entities of a given IFC class.

        Args:
            ifc_class: The IFC class name (e.g., "IfcReinforcingBar")

        Returns:
            List of matching entities

        Raises:
            RuntimeError: If no IFC file is loaded
        """
        pass

    def by_guid(cls, guid: str) -> Optional["ifcopenshell.entity_instance"]:
        """
        Get an entity by its GlobalId.

        Args:
            guid: The entity's GlobalId

        Returns:
            The entity, or None if not found
        """
        pass

    def get_length_unit_scale(cls) -> float:
        """
        Get the size of one project length unit in metres.

        Returns:
            Metres per project length unit (e.g., 0.001 for millimetres)
        """
        pass


@interface
class Rebar:
    """
    Interface for reading rebar geometry from the host model.

    A rebar is either a single bar or a patterned set of bars. Each bar in
    the pattern is a "position"; positions are numbered from 0 and some of
    them may be absent (e.g. around openings).
    """

    def is_rebar(cls, element: Any) -> bool:
        """
        Check whether an element is a reinforcement bar.

        Args:
            element: Any host element

        Returns:
            True if the element is a rebar
        """
        pass

    def get_label(cls, element: Any) -> str:
        """
        Get a human readable identifier used in logs and error messages.

        Args:
            element: The rebar element

        Returns:
            Label string
        """
        pass

    def get_diameter(cls, element: Any) -> float:
        """
        Get the nominal bar diameter.

        Args:
            element: The rebar element

        Returns:
            Diameter in project length units
        """
        pass

    def get_position_count(cls, element: Any) -> int:
        """
        Get the number of bar positions in the rebar pattern.

        Args:
            element: The rebar element

        Returns:
            Number of positions (1 for a single bar)
        """
        pass

    def does_position_exist(cls, element: Any, position: int) -> bool:
        """
        Check whether a bar physically exists at a position.

        Args:
            element: The rebar element
            position: Position index in [0, position count)

        Returns:
            True if the bar exists
        """
        pass

    def get_centerline_segments(cls, element: Any, position: int) -> List["CurveSegment"]:
        """
        Get the ordered centerline segments of the bar at a position.

        Segments are in world coordinates, with any position specific
        transform already applied.

        Args:
            element: The rebar element
            position: Position index in [0, position count)

        Returns:
            List of LineSegment / ArcSegment

        Raises:
            UnsupportedGeometry: If the centerline uses other curve types
        """
        pass
