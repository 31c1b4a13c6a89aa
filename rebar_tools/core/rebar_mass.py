# ============================================================================
# Rebar Tools - Reinforcement Mass and Centre of Gravity
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
# Licensed under the GNU General Public License v3
# ============================================================================
"""
Rebar Mass Core Logic
=====================

Pure business logic for the "get mass" command.
NO ifcopenshell imports - uses TYPE_CHECKING only for type hints.

The engine rolls segment masses up in three steps:

    segments  -> bar position   (one bar of a pattern)
    positions -> rebar          (only positions where a bar exists)
    rebars    -> selection

Tool interfaces are passed as parameters, so the same code runs against
the IFC tools or against test doubles.

Usage:
    from typing import TYPE_CHECKING
    if TYPE_CHECKING:
        import rebar_tools.tool as tool

    import rebar_tools.core.rebar_mass as rebar_mass_core

    result = rebar_mass_core.get_mass(tool.Ifc, tool.Rebar)
    print(rebar_mass_core.format_mass_message(result))
"""
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, List, Dict, Sequence, Iterable, Any

from .exceptions import EmptyInput, RebarMassError
from .geometry import CurveSegment
from .logging_config import get_logger
from .mass_properties import CoGResult, WeightedPoint, combine, compute_segment
from .units import MILLIMETRE, UnitSystem

if TYPE_CHECKING:
    import rebar_tools.tool as tool

logger = get_logger(__name__)

REBAR_CLASS = "IfcReinforcingBar"


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class RebarSpec:
    """A rebar and the centerline geometry of its bars.

    Attributes:
        label: Identifier used in logs and error messages
        diameter: Bar diameter (model units)
        position_count: Number of bar positions in the pattern (>= 1)
        existing_positions: Positions where a bar physically exists.
            None means every position exists.
        centerlines: Ordered centerline segments keyed by position

    Example:
        >>> spec = RebarSpec(
        ...     label="B1",
        ...     diameter=10.0,
        ...     centerlines={0: [LineSegment.from_points((0, 0, 0), (1000, 0, 0))]},
        ... )
        >>> spec.is_grouped
        False
    """

    label: str
    diameter: float
    position_count: int = 1
    existing_positions: Optional[Sequence[int]] = None
    centerlines: Dict[int, List[CurveSegment]] = field(default_factory=dict)

    def __post_init__(self):
        """Validate the pattern description."""
        if self.position_count < 1:
            raise ValueError(f"position_count must be >= 1, got {self.position_count}")

        if self.existing_positions is None:
            self.existing_positions = list(range(self.position_count))
            return

        positions = sorted(set(self.existing_positions))
        for position in positions:
            if not 0 <= position < self.position_count:
                raise ValueError(
                    f"Position {position} out of range for {self.position_count} position(s)"
                )
        self.existing_positions = positions

    @property
    def is_grouped(self) -> bool:
        """True if the rebar is a pattern of several bars."""
        return self.position_count > 1

    def segments_at(self, position: int) -> List[CurveSegment]:
        """Centerline segments of the bar at a position."""
        return list(self.centerlines.get(position, []))


# =============================================================================
# Engine
# =============================================================================

def compute_position(
    segments: Iterable[CurveSegment],
    diameter: float,
    units: UnitSystem = MILLIMETRE
) -> WeightedPoint:
    """Combined mass and centroid of one bar.

    Raises:
        EmptyInput: If the bar has no segments
        UnsupportedGeometry, DegenerateGeometry: From the segment calculator,
            tagged with the segment index
    """
    points = []
    for index, segment in enumerate(segments):
        try:
            points.append(compute_segment(segment, diameter, units))
        except RebarMassError as exc:
            raise exc.with_context(segment=index)
    return combine(points)


def compute_rebar(rebar: RebarSpec, units: UnitSystem = MILLIMETRE) -> WeightedPoint:
    """Combined mass and centroid of every existing bar of a rebar.

    Positions that are not in ``rebar.existing_positions`` are skipped even
    when geometry is available for them.
    """
    try:
        points = []
        for position in rebar.existing_positions:
            try:
                points.append(
                    compute_position(rebar.segments_at(position), rebar.diameter, units)
                )
            except RebarMassError as exc:
                raise exc.with_context(position=position)
        weighted = combine(points)
    except RebarMassError as exc:
        raise exc.with_context(rebar=rebar.label)

    logger.debug(
        "Rebar %s: %d of %d position(s), %.4f kg",
        rebar.label, len(points), rebar.position_count, weighted.mass
    )
    return weighted


def compute_cog(
    rebars: Sequence[RebarSpec],
    units: UnitSystem = MILLIMETRE
) -> CoGResult:
    """Compute total mass and centre of gravity of a set of rebars.

    Any failure aborts the whole computation; there are no partial results.

    Args:
        rebars: Rebars with their centerline geometry
        units: Unit and density configuration

    Returns:
        CoGResult with full precision mass (kg)

    Raises:
        EmptyInput: If there are no rebars, or a rebar/position has nothing
            to combine
        ZeroMass: If masses at some level sum to zero
        UnsupportedGeometry: If a segment is neither a line nor an arc
        DegenerateGeometry: If an arc or segment is degenerate
    """
    rebars = list(rebars)
    if not rebars:
        raise EmptyInput("No rebars to compute")

    points = [compute_rebar(rebar, units) for rebar in rebars]
    total = combine(points)

    result = CoGResult(location=total.location, total_mass=total.mass)
    logger.info(
        "Computed %d rebar(s): %.4f kg at (%.3f, %.3f, %.3f) [%s]",
        len(rebars), result.total_mass, *result.location.to_tuple(), units.name
    )
    return result


# =============================================================================
# Geometry Provider Access
# =============================================================================

def load_rebar(rebar: type["tool.Rebar"], element: Any) -> RebarSpec:
    """Read a rebar element into a RebarSpec.

    Centerlines are fetched only for positions where a bar exists.

    Args:
        rebar: Rebar tool
        element: The rebar element

    Returns:
        RebarSpec for the element
    """
    label = rebar.get_label(element)
    count = rebar.get_position_count(element)
    existing = [i for i in range(count) if rebar.does_position_exist(element, i)]

    centerlines = {}
    for position in existing:
        try:
            centerlines[position] = list(rebar.get_centerline_segments(element, position))
        except RebarMassError as exc:
            raise exc.with_context(position=position, rebar=label)

    if len(existing) < count:
        logger.debug("Rebar %s: positions %s absent", label,
                     sorted(set(range(count)) - set(existing)))

    return RebarSpec(
        label=label,
        diameter=rebar.get_diameter(element),
        position_count=count,
        existing_positions=existing,
        centerlines=centerlines,
    )


def select_rebars(rebar: type["tool.Rebar"], elements: Iterable[Any]) -> List[Any]:
    """Keep only the rebar elements of a selection.

    Args:
        rebar: Rebar tool
        elements: Any host elements

    Returns:
        Rebar elements in selection order
    """
    elements = list(elements)
    rebars = [element for element in elements if rebar.is_rebar(element)]
    if len(rebars) < len(elements):
        logger.debug("Ignored %d non-rebar element(s)", len(elements) - len(rebars))
    return rebars


# =============================================================================
# Command
# =============================================================================

def get_mass(
    ifc: type["tool.Ifc"],
    rebar: type["tool.Rebar"],
    elements: Optional[Iterable[Any]] = None,
    units: Optional[UnitSystem] = None
) -> CoGResult:
    """Compute mass and centre of gravity of rebars in the model.

    Args:
        ifc: Ifc tool
        rebar: Rebar tool
        elements: Elements to measure; non-rebars are ignored.
            None measures every rebar in the model.
        units: Unit configuration. None uses the model's length unit.

    Returns:
        CoGResult for the selected rebars
    """
    if units is None:
        units = UnitSystem.from_scale(ifc.get_length_unit_scale())

    if elements is None:
        elements = ifc.by_type(REBAR_CLASS)

    specs = [load_rebar(rebar, element) for element in select_rebars(rebar, elements)]
    return compute_cog(specs, units)


def format_mass_message(result: CoGResult, precision: int = 2) -> str:
    """User facing summary of a mass result."""
    return f"Calculated mass: {result.rounded_mass(precision)} kg."


__all__ = [
    "REBAR_CLASS",
    "RebarSpec",
    "compute_position",
    "compute_rebar",
    "compute_cog",
    "load_rebar",
    "select_rebars",
    "get_mass",
    "format_mass_message",
]
