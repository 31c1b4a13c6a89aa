# ============================================================================
# Rebar Tools - Reinforcement Mass and Centre of Gravity
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
# Licensed under the GNU General Public License v3
# ============================================================================
"""
Errors raised by the mass and centre of gravity computation.

None of these are recovered inside the engine. Each level that lets one
through (segment, position, rebar) records where it happened, so the final
message names the offending part:

    Arc midpoint coincides with its center (segment=2, position=1, rebar=B12)
"""
from typing import Any


class RebarMassError(Exception):
    """Base class for rebar mass computation errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = dict(context)

    def with_context(self, **context: Any) -> "RebarMassError":
        """Attach identifying context, keeping any set closer to the failure.

        Returns:
            The same exception, so it can be re-raised directly.
        """
        for key, value in context.items():
            self.context.setdefault(key, value)
        return self

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} ({details})"


class EmptyInput(RebarMassError):
    """Nothing to compute: no rebars, or no points at some aggregation level."""


class ZeroMass(RebarMassError):
    """Masses sum to zero, so the centroid is undefined."""


class UnsupportedGeometry(RebarMassError):
    """A centerline segment is neither a line nor a circular arc."""


class DegenerateGeometry(RebarMassError):
    """A derived length or direction is zero."""


__all__ = [
    "RebarMassError",
    "EmptyInput",
    "ZeroMass",
    "UnsupportedGeometry",
    "DegenerateGeometry",
]
