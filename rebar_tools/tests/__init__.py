# ============================================================================
# Rebar Tools - Reinforcement Mass and Centre of Gravity
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
# Licensed under the GNU General Public License v3
# ============================================================================
"""
Rebar Tools Test Suite
======================

Test organization:
- tests/core/   - Pure core tests (geometry, mass properties, engine)
- tests/tool/   - ifcopenshell backed tool tests
- tests/test_cli.py - Command line tests

Running tests:
    pytest                      # Run all tests
    pytest -m unit              # Run only unit tests
    pytest -m "not ifc"         # Skip ifcopenshell dependent tests
    pytest rebar_tools/tests/core/
    pytest -k "arc"             # Run tests matching "arc"
"""
