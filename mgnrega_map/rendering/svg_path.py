"""Ring and geometry to SVG path data.

Each ring becomes one closed subpath::

    M x0 y0 L x1 y1 ... L xn yn Z

Rings of a feature are joined with single spaces; polygons of a
MultiPolygon are joined the same way, so the output is flat (no
per-polygon fill-rule hints).  Coordinates are printed the way the
browser map components print JavaScript numbers (``400`` not ``400.0``),
so paths generated here are byte-identical to the dashboard's.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from mgnrega_map.models.geometry import (
    EmptyGeometry,
    Geometry,
    MultiPolygonGeometry,
    PolygonGeometry,
    Ring,
    geometry_from_coordinates,
    is_sequence,
)
from mgnrega_map.rendering.projection import Projector

if TYPE_CHECKING:
    from mgnrega_map.models.projection import ProjectionParameters

# Exponent thresholds of ECMAScript Number::toString
_MAX_FIXED_EXPONENT = 21
_MIN_FIXED_EXPONENT = -6


def format_number(value: float) -> str:
    """Format *value* as ECMAScript ``String(number)`` would.

    Uses Python's shortest round-trip digits and re-applies the
    JavaScript rules for where to place the decimal point and when to
    switch to exponent notation.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    mantissa, _, exp_text = repr(abs(float(value))).partition("e")
    int_part, _, frac_part = mantissa.partition(".")
    all_digits = int_part + frac_part
    leading_zeros = len(all_digits) - len(all_digits.lstrip("0"))
    digits = all_digits.strip("0")

    # value == 0.<digits> * 10**n
    k = len(digits)
    n = len(int_part) + int(exp_text or 0) - leading_zeros

    if k <= n <= _MAX_FIXED_EXPONENT:
        text = digits + "0" * (n - k)
    elif 0 < n <= _MAX_FIXED_EXPONENT:
        text = f"{digits[:n]}.{digits[n:]}"
    elif _MIN_FIXED_EXPONENT < n <= 0:
        text = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        head = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{head}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + text


def _lon_lat(point: object) -> tuple[float, float]:
    if not is_sequence(point):
        msg = f"Coordinate must be a [lon, lat] sequence, got {type(point).__name__}"
        raise TypeError(msg)
    return float(point[0]), float(point[1])  # type: ignore[index]


def ring_to_path(ring: Ring | object, projector: Projector) -> str:
    """Render one ring as a closed subpath.

    Returns ``""`` when the ring is empty or its first element is not a
    coordinate pair.

    Raises:
        TypeError: If a later point is not a sequence of numbers.
        ValueError: If a point cannot be projected (e.g. ``lat <= -90``).
        IndexError: If a point has fewer than two values.
    """
    points = ring.points if isinstance(ring, Ring) else ring
    if not is_sequence(points) or not points or not is_sequence(points[0]):  # type: ignore[index]
        return ""

    projected = [projector(*_lon_lat(point)) for point in points]  # type: ignore[union-attr]

    x0, y0 = projected[0]
    commands = [f"M {format_number(x0)} {format_number(y0)}"]
    commands.extend(f"L {format_number(x)} {format_number(y)}" for x, y in projected[1:])
    commands.append("Z")
    return " ".join(commands)


def geometry_to_path(geometry: Geometry, projector: Projector) -> str:
    """Render every ring of *geometry*, joined with single spaces.

    Raises:
        TypeError, ValueError, IndexError: On malformed coordinates
            (see ``ring_to_path``).
    """
    if isinstance(geometry, Ring):
        return ring_to_path(geometry, projector)
    if isinstance(geometry, PolygonGeometry):
        return " ".join(ring_to_path(ring, projector) for ring in geometry.iter_rings())
    if isinstance(geometry, MultiPolygonGeometry):
        return " ".join(
            " ".join(ring_to_path(ring, projector) for ring in polygon.iter_rings())
            for polygon in geometry.iter_polygons()
        )
    if isinstance(geometry, EmptyGeometry):
        return ""
    msg = f"Unsupported geometry type: {type(geometry).__name__}"
    raise TypeError(msg)


def coordinates_to_path(coordinates: object, params: ProjectionParameters) -> str:
    """Classify untyped *coordinates* and render them in one call."""
    return geometry_to_path(geometry_from_coordinates(coordinates), Projector(params))


def count_subpaths(path: str) -> int:
    """Number of move-to commands (one per rendered ring) in *path*."""
    return path.count("M")
