"""Shapely-backed helpers for map layout: bounds, fitting and label anchors.

- ``bounds_from_features``: lat/lon bounds of all outer rings.
- ``fit_projection``: scale and centre that fit features on the canvas.
- ``label_anchor``: canvas position guaranteed to fall inside a feature.

Features that cannot be measured are skipped with a log line; none of
these helpers raise on bad geometry.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from mgnrega_map.core.constants import CANVAS_OFFSET_X, CANVAS_OFFSET_Y
from mgnrega_map.models.feature import MapFeature
from mgnrega_map.models.geometry import MultiPolygonGeometry, PolygonGeometry, is_sequence
from mgnrega_map.models.projection import ProjectionParameters
from mgnrega_map.rendering.projection import Projector, inverse_mercator_lat

logger = logging.getLogger("mgnrega_map.rendering.geometry_ops")

DEFAULT_FIT_PADDING_PX = 20.0

Bounds = tuple[tuple[float, float], tuple[float, float]]
"""``((min_lat, min_lon), (max_lat, max_lon))`` — south-west, north-east."""


def _outer_rings(feature: MapFeature) -> list[object]:
    geometry = feature.geometry
    if isinstance(geometry, PolygonGeometry):
        return list(geometry.rings[:1])
    if isinstance(geometry, MultiPolygonGeometry):
        return [p[0] for p in geometry.polygons if is_sequence(p) and len(p) > 0]
    return []


def bounds_from_features(features: Iterable[MapFeature]) -> Bounds | None:
    """Return the south-west and north-east corners of all outer rings.

    Holes are ignored; they lie inside their outer ring.

    Returns:
        ``((min_lat, min_lon), (max_lat, max_lon))``, or ``None`` when no
        feature has a measurable outer ring.
    """
    from shapely.geometry import MultiPoint

    points: list[tuple[float, float]] = []
    for index, feature in enumerate(features):
        for ring in _outer_rings(feature):
            try:
                ring_points = [
                    (float(p[0]), float(p[1]))  # type: ignore[index]
                    for p in ring  # type: ignore[attr-defined]
                ]
            except (TypeError, ValueError, IndexError) as exc:
                logger.debug("Skipping unmeasurable ring | feature_index=%d | error=%s", index, exc)
                continue
            points.extend(ring_points)

    if not points:
        return None

    min_lon, min_lat, max_lon, max_lat = MultiPoint(points).bounds
    return ((min_lat, min_lon), (max_lat, max_lon))


def fit_projection(
    features: Iterable[MapFeature],
    *,
    width: float,
    height: float,
    padding: float = DEFAULT_FIT_PADDING_PX,
) -> ProjectionParameters | None:
    """Choose a scale and centre so that *features* fill the canvas.

    The projection centre always lands on canvas pixel ``(400, 450)``, so
    the usable half-extent on each axis is the smaller distance from that
    pixel to a canvas edge, minus *padding*.

    Returns:
        Fitted parameters, or ``None`` if the features have no bounds,
        zero extent, or the canvas leaves no room after padding.
    """
    bounds = bounds_from_features(features)
    if bounds is None:
        return None
    (min_lat, min_lon), (max_lat, max_lon) = bounds

    try:
        min_merc = math.log(math.tan(math.pi / 4 + min_lat * math.pi / 360))
        max_merc = math.log(math.tan(math.pi / 4 + max_lat * math.pi / 360))
    except ValueError:
        logger.warning("Cannot fit projection to polar bounds | bounds=%s", bounds)
        return None

    half_w = min(CANVAS_OFFSET_X, width - CANVAS_OFFSET_X) - padding
    half_h = min(CANVAS_OFFSET_Y, height - CANVAS_OFFSET_Y) - padding
    if half_w <= 0 or half_h <= 0:
        return None

    candidates: list[float] = []
    if max_lon > min_lon:
        candidates.append(2 * half_w / (max_lon - min_lon))
    if max_merc > min_merc:
        candidates.append(2 * half_h / (max_merc - min_merc))
    if not candidates:
        return None

    params = ProjectionParameters(
        scale=min(candidates),
        center_lon=(min_lon + max_lon) / 2,
        center_lat=inverse_mercator_lat((min_merc + max_merc) / 2),
    )
    logger.debug(
        "Projection fitted | scale=%.3f | center=(%.4f, %.4f)",
        params.scale,
        params.center_lon,
        params.center_lat,
    )
    return params


def label_anchor(
    feature: MapFeature,
    projector: Projector,
) -> tuple[float, float] | None:
    """Return the canvas position for *feature*'s label.

    Uses shapely's ``representative_point`` (always inside the shape,
    unlike the centroid of a crescent-shaped district), repairing
    invalid geometry with ``make_valid`` first.

    Returns:
        ``(x, y)`` in canvas pixels, or ``None`` if the feature has no
        usable geometry.
    """
    if not isinstance(feature.geometry, PolygonGeometry | MultiPolygonGeometry):
        return None

    from shapely.errors import GEOSException
    from shapely.geometry import shape
    from shapely.validation import make_valid

    try:
        geom = shape(feature.geometry.to_geojson())
        if not geom.is_valid:
            geom = make_valid(geom)
        if geom.is_empty:
            return None
        point = geom.representative_point()
        return projector(point.x, point.y)
    except (GEOSException, TypeError, ValueError, IndexError, AttributeError) as exc:
        logger.debug("No label anchor | name=%s | error=%s", feature.display_name(), exc)
        return None
