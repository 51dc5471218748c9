"""Batch conversion of map features into SVG paths.

Converts an ordered list of GeoJSON features into one ``PathResult`` per
feature.  Output order and ``id`` follow input order exactly.

Failure policy:
- A feature whose geometry is empty, unclassifiable or malformed yields
  ``path == ""``; the rest of the batch is unaffected.
- A projection centre outside the domain of the projection (``center_lat
  <= -90``) cannot project anything, so every path in the batch is empty.
- ``scale`` is never validated.
- Degraded features are logged at WARNING with their index and name.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from mgnrega_map.core.constants import DEFAULT_NAME_KEYS
from mgnrega_map.models.feature import MapFeature
from mgnrega_map.models.path_result import PathResult
from mgnrega_map.models.projection import ProjectionParameters
from mgnrega_map.rendering.projection import Projector
from mgnrega_map.rendering.svg_path import geometry_to_path

logger = logging.getLogger("mgnrega_map.rendering.generate_paths")

# Errors raised by the projector and ring renderer on malformed input
_GEOMETRY_ERRORS = (TypeError, ValueError, IndexError, OverflowError)


def generate_paths(
    features: Iterable[MapFeature | Mapping[str, object]],
    params: ProjectionParameters,
    *,
    name_keys: Sequence[str] = DEFAULT_NAME_KEYS,
) -> list[PathResult]:
    """Convert *features* to SVG paths, preserving input order.

    Args:
        features: ``MapFeature`` instances or raw GeoJSON feature dicts.
        params: Projection scale and centre.
        name_keys: Properties tried in order for each display name.

    Returns:
        One ``PathResult`` per feature with ``id`` equal to its index.
    """
    map_features = [
        f if isinstance(f, MapFeature) else MapFeature.from_geojson(f) for f in features
    ]

    try:
        projector: Projector | None = Projector(params)
    except _GEOMETRY_ERRORS as exc:
        logger.warning(
            "Projection centre cannot be projected; all paths empty | center_lat=%s | error=%s",
            params.center_lat,
            exc,
        )
        projector = None

    results: list[PathResult] = []
    degraded = 0
    for index, feature in enumerate(map_features):
        name = feature.display_name(name_keys)
        path = ""
        if projector is not None:
            try:
                path = geometry_to_path(feature.geometry, projector)
            except _GEOMETRY_ERRORS as exc:
                degraded += 1
                logger.warning(
                    "Feature degraded to empty path | index=%d | name=%s | error=%s",
                    index,
                    name,
                    exc,
                )
        results.append(PathResult(id=index, name=name, path=path))

    logger.info(
        "Paths generated | features=%d | degraded=%d | empty=%d | scale=%s | center=(%s, %s)",
        len(results),
        degraded,
        sum(1 for r in results if r.is_empty),
        params.scale,
        params.center_lon,
        params.center_lat,
    )
    return results
