"""Tagged geometry variants for map features.

GeoJSON boundaries arrive as untyped nested lists.  At the data boundary
they are wrapped in one of four explicit variants so that the renderer
dispatches on type rather than re-inspecting nesting depth:

- ``Ring``: one closed boundary loop, a sequence of ``[lon, lat]`` points.
- ``PolygonGeometry``: a sequence of rings (outer boundary, then holes).
- ``MultiPolygonGeometry``: a sequence of polygons.
- ``EmptyGeometry``: nothing to draw.

Coordinates are kept exactly as received.  Malformed points are not
rejected here; they surface when the renderer projects them, where the
batch converter degrades the owning feature to an empty path.

Untyped data is classified by ``classify_coordinates`` using the
depth-sniffing rule of the dashboard's map worker:

1. ``coordinates[0][0][0]`` is a sequence → MultiPolygon
2. else ``coordinates[0][0]`` is a sequence → Polygon
3. else → Empty
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger("mgnrega_map.models.geometry")


class GeometryKind(enum.Enum):
    """Variant tag; values match GeoJSON ``type`` names."""

    RING = "Ring"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"
    EMPTY = "Empty"


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Ring:
    """One boundary loop.  First and last point need not be equal."""

    points: Sequence[Any] = field(default_factory=tuple)

    kind = GeometryKind.RING

    @property
    def ring_count(self) -> int:
        return 1


@dataclass(frozen=True, slots=True)
class PolygonGeometry:
    """A polygon: outer ring followed by zero or more hole rings."""

    rings: Sequence[Any] = field(default_factory=tuple)

    kind = GeometryKind.POLYGON

    @property
    def ring_count(self) -> int:
        return len(self.rings)

    def iter_rings(self) -> Iterator[Ring]:
        for ring in self.rings:
            yield Ring(ring)

    def to_geojson(self) -> dict[str, object]:
        return {"type": self.kind.value, "coordinates": self.rings}


@dataclass(frozen=True, slots=True)
class MultiPolygonGeometry:
    """Several independent polygons, each possibly with holes."""

    polygons: Sequence[Any] = field(default_factory=tuple)

    kind = GeometryKind.MULTI_POLYGON

    @property
    def ring_count(self) -> int:
        return sum(len(polygon) for polygon in self.polygons if is_sequence(polygon))

    def iter_polygons(self) -> Iterator[PolygonGeometry]:
        """Yield each member polygon.

        Raises:
            TypeError: If a member is not a sequence of rings.
        """
        for polygon in self.polygons:
            if not is_sequence(polygon):
                msg = f"MultiPolygon member must be a sequence, got {type(polygon).__name__}"
                raise TypeError(msg)
            yield PolygonGeometry(polygon)

    def to_geojson(self) -> dict[str, object]:
        return {"type": self.kind.value, "coordinates": self.polygons}


@dataclass(frozen=True, slots=True)
class EmptyGeometry:
    """Absent, empty or unclassifiable geometry."""

    kind = GeometryKind.EMPTY

    @property
    def ring_count(self) -> int:
        return 0


Geometry = Ring | PolygonGeometry | MultiPolygonGeometry | EmptyGeometry


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def is_sequence(value: object) -> bool:
    """Return ``True`` for JSON arrays (lists or tuples, never strings)."""
    return isinstance(value, list | tuple)


def _first(value: object) -> object:
    if is_sequence(value) and len(value) > 0:  # type: ignore[arg-type]
        return value[0]  # type: ignore[index]
    return None


def classify_coordinates(coordinates: object) -> GeometryKind:
    """Classify untyped GeoJSON coordinates by the nesting depth of the first element.

    Only the first element is inspected; later elements are assumed to
    share its depth.

    Args:
        coordinates: The raw ``geometry.coordinates`` value (may be ``None``).

    Returns:
        ``MULTI_POLYGON``, ``POLYGON`` or ``EMPTY``.
    """
    level1 = _first(coordinates)
    level2 = _first(level1)
    level3 = _first(level2)

    if is_sequence(level3):
        return GeometryKind.MULTI_POLYGON
    if is_sequence(level1) and is_sequence(level2):
        return GeometryKind.POLYGON
    return GeometryKind.EMPTY


def geometry_from_coordinates(coordinates: object) -> Geometry:
    """Build the tagged variant for untyped coordinates."""
    kind = classify_coordinates(coordinates)
    if kind is GeometryKind.MULTI_POLYGON:
        return MultiPolygonGeometry(coordinates)  # type: ignore[arg-type]
    if kind is GeometryKind.POLYGON:
        return PolygonGeometry(coordinates)  # type: ignore[arg-type]
    return EmptyGeometry()


def geometry_from_geojson(geometry: object) -> Geometry:
    """Build the tagged variant for a GeoJSON geometry object.

    The declared ``type`` is trusted only when it agrees with the shape of
    the coordinates; otherwise the coordinates win and a warning is
    logged, so that a mislabelled geometry still renders.

    Args:
        geometry: A GeoJSON geometry mapping, or ``None``.

    Returns:
        The matching ``Geometry`` variant.
    """
    if not isinstance(geometry, Mapping):
        return EmptyGeometry()

    coordinates = geometry.get("coordinates")
    result = geometry_from_coordinates(coordinates)

    declared = geometry.get("type")
    if (
        declared in (GeometryKind.POLYGON.value, GeometryKind.MULTI_POLYGON.value)
        and declared != result.kind.value
    ):
        logger.warning(
            "Geometry type mismatch | declared=%s | detected=%s | using detected",
            declared,
            result.kind.value,
        )

    return result
