# ============================================================================
# Rebar Tools - Reinforcement Mass and Centre of Gravity
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
# Licensed under the GNU General Public License v3
# ============================================================================
"""
Rebar Tool Implementation
=========================

IFC implementation of the Rebar interface.

A reinforcing bar in IFC is an IfcReinforcingBar whose Body representation
holds one IfcSweptDiskSolid per physical bar. Bar sets usually reuse one
shape through IfcMappedItem, each mapping placing a copy of the bar. Every
swept disk solid found, directly or through a mapping, is one bar position.

The centerline is the solid's Directrix:
- IfcPolyline           -> straight segments
- IfcIndexedPolyCurve   -> IfcLineIndex / IfcArcIndex segments

Usage:
    from rebar_tools.tool import Ifc, Rebar

    for bar in Ifc.by_type("IfcReinforcingBar"):
        for position in range(Rebar.get_position_count(bar)):
            segments = Rebar.get_centerline_segments(bar, position)
"""
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

import ifcopenshell
import ifcopenshell.util.element
import ifcopenshell.util.placement

from ..core import tool as core_tool
from ..core.exceptions import DegenerateGeometry, UnsupportedGeometry
from ..core.geometry import ArcSegment, CurveSegment, LineSegment
from ..core.logging_config import get_logger

logger = get_logger(__name__)

BODY_IDENTIFIER = "Body"


class Rebar(core_tool.Rebar):
    """
    ifcopenshell backed rebar geometry.

    Positions are listed in representation order, mapped items expanded in
    place.
    """

    _positions: Optional[Tuple[ifcopenshell.entity_instance, List]] = None

    @classmethod
    def is_rebar(cls, element: Any) -> bool:
        """Check whether an element is an IfcReinforcingBar."""
        return isinstance(element, ifcopenshell.entity_instance) and element.is_a(
            "IfcReinforcingBar"
        )

    @classmethod
    def get_label(cls, element: ifcopenshell.entity_instance) -> str:
        """GlobalId, followed by the Name when there is one."""
        if element.Name:
            return f"{element.GlobalId} ({element.Name})"
        return element.GlobalId

    @classmethod
    def get_diameter(cls, element: ifcopenshell.entity_instance) -> float:
        """
        Get the nominal bar diameter.

        Looks at the occurrence NominalDiameter, then the bar type's, then
        the swept disk radius of the first bar.

        Raises:
            DegenerateGeometry: If no diameter can be found
        """
        diameter = getattr(element, "NominalDiameter", None)
        if diameter:
            return float(diameter)

        element_type = ifcopenshell.util.element.get_type(element)
        diameter = getattr(element_type, "NominalDiameter", None) if element_type else None
        if diameter:
            return float(diameter)

        positions = cls._get_positions(element)
        if positions:
            _, solid = positions[0]
            logger.debug(f"{cls.get_label(element)}: diameter from swept disk radius")
            return 2.0 * float(solid.Radius)

        raise DegenerateGeometry(f"No bar diameter for {cls.get_label(element)}")

    @classmethod
    def get_position_count(cls, element: ifcopenshell.entity_instance) -> int:
        """Number of swept disk solids in the Body representation."""
        return len(cls._get_positions(element))

    @classmethod
    def does_position_exist(cls, element: ifcopenshell.entity_instance, position: int) -> bool:
        """Every position with a solid in the model is a physical bar."""
        return 0 <= position < len(cls._get_positions(element))

    @classmethod
    def get_centerline_segments(
        cls,
        element: ifcopenshell.entity_instance,
        position: int
    ) -> List[CurveSegment]:
        """
        Get the centerline of one bar in world coordinates.

        Args:
            element: IfcReinforcingBar
            position: Position index

        Returns:
            Ordered LineSegment / ArcSegment list

        Raises:
            IndexError: If the position is out of range
            UnsupportedGeometry: If the directrix is not a supported curve
        """
        positions = cls._get_positions(element)
        if not 0 <= position < len(positions):
            raise IndexError(
                f"Position {position} out of range for {len(positions)} position(s)"
            )

        matrix, solid = positions[position]
        matrix = cls._get_object_matrix(element) @ matrix
        return cls._get_directrix_segments(solid.Directrix, matrix)

    # =========================================================================
    # Representation Traversal
    # =========================================================================

    @classmethod
    def _get_positions(
        cls,
        element: ifcopenshell.entity_instance
    ) -> List[Tuple[np.ndarray, ifcopenshell.entity_instance]]:
        """
        Swept disk solids with their transform relative to the object.

        The walk for the most recent element is kept, so reading every
        position of a bar set walks its body once.
        """
        if cls._positions is not None and cls._positions[0] is element:
            return cls._positions[1]

        positions = []
        for representation in cls._get_body_representations(element):
            for item in representation.Items:
                positions.extend(cls._expand_item(item, np.eye(4)))
        cls._positions = (element, positions)
        return positions

    @classmethod
    def _get_body_representations(
        cls,
        element: ifcopenshell.entity_instance
    ) -> List[ifcopenshell.entity_instance]:
        shape = element.Representation
        if shape is None:
            return []
        return [
            rep for rep in shape.Representations
            if rep.RepresentationIdentifier == BODY_IDENTIFIER
        ]

    @classmethod
    def _expand_item(
        cls,
        item: ifcopenshell.entity_instance,
        matrix: np.ndarray
    ) -> List[Tuple[np.ndarray, ifcopenshell.entity_instance]]:
        if item.is_a("IfcSweptDiskSolid"):
            return [(matrix, item)]

        if item.is_a("IfcMappedItem"):
            source = item.MappingSource
            mapped = matrix @ ifcopenshell.util.placement.get_mappeditem_transformation(item)
            positions = []
            for mapped_item in source.MappedRepresentation.Items:
                positions.extend(cls._expand_item(mapped_item, mapped))
            return positions

        logger.debug(f"Skipping {item.is_a()} in rebar body")
        return []

    # =========================================================================
    # Transforms
    # =========================================================================

    @classmethod
    def _get_object_matrix(cls, element: ifcopenshell.entity_instance) -> np.ndarray:
        if element.ObjectPlacement is None:
            return np.eye(4)
        return ifcopenshell.util.placement.get_local_placement(element.ObjectPlacement)

    # =========================================================================
    # Directrix
    # =========================================================================

    @classmethod
    def _get_directrix_segments(
        cls,
        curve: ifcopenshell.entity_instance,
        matrix: np.ndarray
    ) -> List[CurveSegment]:
        if curve.is_a("IfcPolyline"):
            points = _transform([p.Coordinates for p in curve.Points], matrix)
            return _polyline_segments(points)

        if curve.is_a("IfcIndexedPolyCurve"):
            points = _transform(curve.Points.CoordList, matrix)
            return cls._get_indexed_segments(curve.Segments, points)

        raise UnsupportedGeometry(f"Unsupported bar directrix: {curve.is_a()}")

    @classmethod
    def _get_indexed_segments(
        cls,
        segments: Optional[Sequence[Any]],
        points: List[Tuple[float, float, float]]
    ) -> List[CurveSegment]:
        if not segments:
            return _polyline_segments(points)

        result = []
        for segment in segments:
            # IfcLineIndex / IfcArcIndex hold 1-based point indices
            indices = [i - 1 for i in segment.wrappedValue]
            if segment.is_a("IfcLineIndex"):
                result.extend(_polyline_segments([points[i] for i in indices]))
            elif segment.is_a("IfcArcIndex"):
                start, through, end = (points[i] for i in indices)
                result.append(ArcSegment.from_three_points(start, through, end))
            else:
                raise UnsupportedGeometry(f"Unsupported curve segment: {segment.is_a()}")
        return result


def _pad(coordinates: Sequence[float]) -> Tuple[float, float, float]:
    """Extend 2D coordinates to 3D."""
    padded = tuple(float(c) for c in coordinates) + (0.0, 0.0)
    return padded[:3]


def _transform(
    coordinates: Sequence[Sequence[float]],
    matrix: np.ndarray
) -> List[Tuple[float, float, float]]:
    points = np.array([_pad(c) + (1.0,) for c in coordinates])
    world = (matrix @ points.T).T[:, :3]
    return [tuple(float(v) for v in row) for row in world]


def _polyline_segments(points: List[Tuple[float, float, float]]) -> List[LineSegment]:
    segments = []
    for start, end in zip(points, points[1:]):
        line = LineSegment.from_points(start, end)
        if line.length == 0:
            logger.warning(f"Skipping zero length polyline span at {start}")
            continue
        segments.append(line)
    return segments
