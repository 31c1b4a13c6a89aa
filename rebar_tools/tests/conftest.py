# ============================================================================
# Rebar Tools - Reinforcement Mass and Centre of Gravity
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
# Licensed under the GNU General Public License v3
# ============================================================================
"""
Pytest Configuration and Fixtures
==================================

Shared fixtures for the Rebar Tools test suite.
"""

from typing import Generator, Optional, Sequence

import pytest


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external deps)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "ifc: Requires ifcopenshell")


# =============================================================================
# Conditional Imports
# =============================================================================

# Check if ifcopenshell is available
try:
    import ifcopenshell
    import ifcopenshell.guid
    HAS_IFC = True
except ImportError:
    HAS_IFC = False
    ifcopenshell = None


# =============================================================================
# Skip Decorators
# =============================================================================

requires_ifc = pytest.mark.skipif(
    not HAS_IFC,
    reason="ifcopenshell not installed"
)


# =============================================================================
# IFC Model Builder
# =============================================================================

class RebarModelBuilder:
    """Builds small IFC4 models holding reinforcing bars.

    Example:
        builder = RebarModelBuilder(unit_prefix="MILLI")
        line = builder.polyline([(0, 0, 0), (1000, 0, 0)])
        bar = builder.bar([builder.swept_disk(line, radius=5.0)], diameter=10.0)
    """

    def __init__(self, unit_prefix: Optional[str] = "MILLI", with_units: bool = True):
        self.file = ifcopenshell.file(schema="IFC4")
        self.context = self.file.create_entity(
            "IfcGeometricRepresentationContext",
            ContextIdentifier="Model",
            ContextType="Model",
            CoordinateSpaceDimension=3,
            Precision=1.0e-5,
            WorldCoordinateSystem=self.axis_placement((0.0, 0.0, 0.0)),
        )

        units = None
        if with_units:
            length = self.file.create_entity(
                "IfcSIUnit", UnitType="LENGTHUNIT", Prefix=unit_prefix, Name="METRE"
            )
            units = self.file.create_entity("IfcUnitAssignment", Units=[length])

        self.project = self.file.create_entity(
            "IfcProject",
            GlobalId=ifcopenshell.guid.new(),
            Name="Rebar Test Project",
            RepresentationContexts=[self.context],
            UnitsInContext=units,
        )

    # -------------------------------------------------------------------------
    # Placement
    # -------------------------------------------------------------------------

    def point(self, coordinates: Sequence[float]):
        return self.file.create_entity(
            "IfcCartesianPoint", Coordinates=tuple(float(c) for c in coordinates)
        )

    def axis_placement(self, origin: Sequence[float]):
        return self.file.create_entity("IfcAxis2Placement3D", Location=self.point(origin))

    def local_placement(self, origin: Sequence[float]):
        return self.file.create_entity(
            "IfcLocalPlacement", PlacementRelTo=None, RelativePlacement=self.axis_placement(origin)
        )

    # -------------------------------------------------------------------------
    # Curves and Solids
    # -------------------------------------------------------------------------

    def polyline(self, points: Sequence[Sequence[float]]):
        return self.file.create_entity("IfcPolyline", Points=[self.point(p) for p in points])

    def indexed_curve(self, points: Sequence[Sequence[float]], segments=None):
        """Indexed poly curve; segments are ("line", (i, j)) / ("arc", (i, j, k))."""
        point_list = self.file.create_entity(
            "IfcCartesianPointList3D",
            CoordList=[tuple(float(c) for c in p) for p in points],
        )
        ifc_segments = None
        if segments is not None:
            ifc_segments = []
            for kind, indices in segments:
                ifc_class = "IfcLineIndex" if kind == "line" else "IfcArcIndex"
                ifc_segments.append(self.file.create_entity(ifc_class, tuple(indices)))
        return self.file.create_entity(
            "IfcIndexedPolyCurve", Points=point_list, Segments=ifc_segments, SelfIntersect=False
        )

    def circle(self, radius: float):
        return self.file.create_entity(
            "IfcCircle", Position=self.axis_placement((0.0, 0.0, 0.0)), Radius=radius
        )

    def swept_disk(self, directrix, radius: float = 5.0):
        return self.file.create_entity("IfcSweptDiskSolid", Directrix=directrix, Radius=radius)

    def body(self, items, representation_type: str = "AdvancedSweptSolid"):
        return self.file.create_entity(
            "IfcShapeRepresentation",
            ContextOfItems=self.context,
            RepresentationIdentifier="Body",
            RepresentationType=representation_type,
            Items=list(items),
        )

    def direction(self, ratios: Sequence[float]):
        return self.file.create_entity(
            "IfcDirection", DirectionRatios=tuple(float(r) for r in ratios)
        )

    def transformation_operator(
        self,
        origin: Sequence[float],
        axis1=None,
        axis2=None,
        axis3=None,
        scale: Optional[float] = None,
        scale2: Optional[float] = None,
        scale3: Optional[float] = None,
    ):
        """IfcCartesianTransformationOperator3D, nonUniform when scale2/scale3 are given."""
        attributes = {"LocalOrigin": self.point(origin), "Scale": scale}
        for name, ratios in (("Axis1", axis1), ("Axis2", axis2), ("Axis3", axis3)):
            if ratios is not None:
                attributes[name] = self.direction(ratios)

        if scale2 is None and scale3 is None:
            return self.file.create_entity("IfcCartesianTransformationOperator3D", **attributes)
        return self.file.create_entity(
            "IfcCartesianTransformationOperator3DnonUniform",
            Scale2=scale2,
            Scale3=scale3,
            **attributes,
        )

    def mapped_items(self, solid, origins: Sequence[Sequence[float]], **operator):
        """One IfcMappedItem per origin, all sharing the same bar shape."""
        source = self.file.create_entity(
            "IfcRepresentationMap",
            MappingOrigin=self.axis_placement((0.0, 0.0, 0.0)),
            MappedRepresentation=self.body([solid]),
        )
        items = []
        for origin in origins:
            target = self.transformation_operator(origin, **operator)
            items.append(self.file.create_entity(
                "IfcMappedItem", MappingSource=source, MappingTarget=target
            ))
        return items

    # -------------------------------------------------------------------------
    # Elements
    # -------------------------------------------------------------------------

    def bar(
        self,
        items,
        diameter: Optional[float] = 10.0,
        name: Optional[str] = "B1",
        origin: Sequence[float] = (0.0, 0.0, 0.0),
        representation_type: str = "AdvancedSweptSolid",
    ):
        shape = self.file.create_entity(
            "IfcProductDefinitionShape",
            Representations=[self.body(items, representation_type)],
        )
        return self.file.create_entity(
            "IfcReinforcingBar",
            GlobalId=ifcopenshell.guid.new(),
            Name=name,
            ObjectPlacement=self.local_placement(origin),
            Representation=shape,
            NominalDiameter=diameter,
        )

    def straight_bar(self, start, end, diameter: Optional[float] = 10.0, **kwargs):
        solid = self.swept_disk(self.polyline([start, end]), radius=(diameter or 10.0) / 2)
        return self.bar([solid], diameter=diameter, **kwargs)

    def bar_type(self, bar, diameter: float):
        bar_type = self.file.create_entity(
            "IfcReinforcingBarType",
            GlobalId=ifcopenshell.guid.new(),
            Name=f"D{diameter:g}",
            PredefinedType="MAIN",
            NominalDiameter=diameter,
        )
        self.file.create_entity(
            "IfcRelDefinesByType",
            GlobalId=ifcopenshell.guid.new(),
            RelatedObjects=[bar],
            RelatingType=bar_type,
        )
        return bar_type

    def wall(self):
        return self.file.create_entity(
            "IfcWall", GlobalId=ifcopenshell.guid.new(), Name="W1"
        )


# =============================================================================
# IFC Fixtures (require ifcopenshell)
# =============================================================================

@pytest.fixture
def ifc_file() -> Generator[Optional["ifcopenshell.file"], None, None]:
    """Create a fresh IFC4 file for testing.

    Yields:
        New ifcopenshell.file instance or None if not available
    """
    if not HAS_IFC:
        yield None
        return

    yield ifcopenshell.file(schema="IFC4")


@pytest.fixture
def rebar_model() -> Generator[Optional[RebarModelBuilder], None, None]:
    """Millimetre model builder with the active tool file reset afterwards."""
    if not HAS_IFC:
        yield None
        return

    from rebar_tools.tool import Ifc

    builder = RebarModelBuilder()
    Ifc.set(builder.file)
    yield builder
    Ifc.set(None)
