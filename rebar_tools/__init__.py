# ============================================================================
# Rebar Tools - Reinforcement Mass and Centre of Gravity
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
# Licensed under the GNU General Public License v3
# ============================================================================
"""
Rebar Tools
===========

Total steel mass and centre of gravity for reinforcing bars in IFC models.

Packages:
    core - pure Python geometry, mass properties and the CoG engine
    tool - IFC implementations of the core interfaces
    cli  - the ``rebar-tools`` command
"""

__version__ = "0.1.0"
