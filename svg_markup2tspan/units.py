"""Absolute length units.

Points are the internal unit: Pango reports extents in 1/1024 pt and font
sizes are handed to it in points. Everything user-facing can be expressed in
any of the absolute units below.
"""

from __future__ import annotations

import re

from svg_markup2tspan.exceptions import UnitError

# Points per unit
POINTS_PER_UNIT: dict[str, float] = {
    "pt": 1.0,
    "px": 1.0,  # Pango layouts are created at 72 dpi
    "mm": 72.0 / 25.4,
    "cm": 72.0 / 2.54,
    "in": 72.0,
    "pc": 12.0,
}

RELATIVE_UNITS = frozenset({"em", "ex", "ch", "rem", "%", "vw", "vh", "vmin", "vmax"})

_LENGTH_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*([a-zA-Z%]*)\s*$")


def to_points(value: float, unit: str) -> float:
    """Convert a value in ``unit`` to points."""
    try:
        return value * POINTS_PER_UNIT[unit]
    except KeyError:
        raise UnitError(f"Unsupported length unit: {unit!r}") from None


def from_points(points: float, unit: str) -> float:
    """Convert a value in points to ``unit``."""
    try:
        return points / POINTS_PER_UNIT[unit]
    except KeyError:
        raise UnitError(f"Unsupported length unit: {unit!r}") from None


def parse_length(length: float | int | str) -> float:
    """Parse a font size into points.

    Numbers are taken as points. Strings carry their unit (``"10pt"``,
    ``"4.2mm"``); a bare numeric string is points as well.

    Raises:
        UnitError: If the unit is relative or unknown, or the string is not a length.
    """
    if isinstance(length, (int, float)):
        return float(length)

    match = _LENGTH_RE.match(length)
    if match is None:
        raise UnitError(f"Not a length: {length!r}")

    number, unit = float(match.group(1)), match.group(2).lower() or "pt"
    if unit in RELATIVE_UNITS:
        raise UnitError(f"Font size must be in absolute units, got {length!r}")
    return to_points(number, unit)
