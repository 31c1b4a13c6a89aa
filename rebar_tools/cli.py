# ============================================================================
# Rebar Tools - Reinforcement Mass and Centre of Gravity
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
# Licensed under the GNU General Public License v3
# ============================================================================
"""
Command-line interface for rebar-tools.

Usage:
  rebar-tools mass <file.ifc> [--guid GUID ...] [--precision N]
                   [--arc-centroid ANNULAR|TOROIDAL] [--json] [--verbose]
  rebar-tools --version

Examples:
  # Mass and centre of gravity of every bar in the model
  rebar-tools mass slab.ifc

  # Only two bar sets, machine readable
  rebar-tools mass slab.ifc --guid 2O2Fr$t4X7Zf8NOew3FLOH --guid 1kTvXnbbzCWw8lcMd1dR4o --json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import ifcopenshell

from rebar_tools import __version__
from rebar_tools import tool
from rebar_tools.core import rebar_mass as rebar_mass_core
from rebar_tools.core.exceptions import RebarMassError
from rebar_tools.core.logging_config import setup_logging
from rebar_tools.core.units import ARC_CENTROID_MODELS, UnitSystem


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="rebar-tools",
        description="Reinforcement mass and centre of gravity for IFC models",
    )
    parser.add_argument("--version", action="version", version=f"rebar-tools {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    # --- mass ---
    mass_parser = subparsers.add_parser("mass", help="Compute rebar mass and centre of gravity")
    mass_parser.add_argument("input_file", help="IFC file")
    mass_parser.add_argument(
        "--guid", action="append", default=None, metavar="GUID",
        help="GlobalId of a bar to include (repeatable, default: all bars)"
    )
    mass_parser.add_argument(
        "--precision", type=int, default=2,
        help="Decimal places for the reported mass (default: 2)"
    )
    mass_parser.add_argument(
        "--arc-centroid", choices=ARC_CENTROID_MODELS, default="ANNULAR",
        help="Centroid model for bent segments (default: ANNULAR)"
    )
    mass_parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    mass_parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "mass":
        return _cmd_mass(args)

    return 0


def _cmd_mass(args) -> int:
    """Compute and print the mass of the selected bars."""
    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    path = Path(args.input_file)
    if not path.exists():
        print(f"Error: file not found: {args.input_file}", file=sys.stderr)
        return 1

    try:
        tool.Ifc.open(str(path))
    except (ifcopenshell.Error, OSError) as e:
        print(f"Error: cannot read {args.input_file}: {e}", file=sys.stderr)
        return 1

    elements = None
    if args.guid:
        elements = []
        for guid in args.guid:
            element = tool.Ifc.by_guid(guid)
            if element is None:
                print(f"Error: no element with GlobalId {guid}", file=sys.stderr)
                return 1
            elements.append(element)

    units = UnitSystem.from_scale(
        tool.Ifc.get_length_unit_scale(), arc_centroid=args.arc_centroid
    )

    try:
        result = rebar_mass_core.get_mass(tool.Ifc, tool.Rebar, elements=elements, units=units)
    except RebarMassError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        output = result.to_dict()
        output["rounded_mass"] = result.rounded_mass(args.precision)
        output["unit"] = units.name
        output["arc_centroid"] = units.arc_centroid
        print(json.dumps(output, indent=2))
        return 0

    x, y, z = result.location.to_tuple()
    print(rebar_mass_core.format_mass_message(result, args.precision))
    print(f"Centre of gravity: ({x:.3f}, {y:.3f}, {z:.3f}) [{units.name}]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
