"""Data models and message contracts.

Defines the data structures used throughout the generator:
- MapFeature: A GeoJSON boundary feature with a tagged geometry
- Geometry variants: Ring, PolygonGeometry, MultiPolygonGeometry, EmptyGeometry
- ProjectionParameters: Scale and centre of the Mercator projection
- PathResult: One generated SVG path
"""

from mgnrega_map.models.feature import MapFeature
from mgnrega_map.models.geometry import (
    EmptyGeometry,
    Geometry,
    GeometryKind,
    MultiPolygonGeometry,
    PolygonGeometry,
    Ring,
    classify_coordinates,
    geometry_from_coordinates,
    geometry_from_geojson,
)
from mgnrega_map.models.path_result import PathResult
from mgnrega_map.models.projection import ProjectionParameters

__all__ = [
    "MapFeature",
    "Geometry",
    "GeometryKind",
    "Ring",
    "PolygonGeometry",
    "MultiPolygonGeometry",
    "EmptyGeometry",
    "classify_coordinates",
    "geometry_from_coordinates",
    "geometry_from_geojson",
    "PathResult",
    "ProjectionParameters",
]
