"""Data model for a map feature (one district or state boundary).

A MapFeature is the typed form of a GeoJSON ``Feature``: its
``properties`` mapping and its geometry wrapped in a tagged variant.
It is the input to the path generator and to the shapely-based
bounds and label helpers.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from mgnrega_map.core.constants import DEFAULT_NAME_KEYS
from mgnrega_map.models.geometry import (
    EmptyGeometry,
    Geometry,
    MultiPolygonGeometry,
    PolygonGeometry,
    geometry_from_geojson,
)


@dataclass(frozen=True, slots=True)
class MapFeature:
    """A single boundary feature.

    Attributes:
        properties: GeoJSON properties (e.g. ``{"NAME_1": "Maharashtra"}``).
        geometry: Tagged geometry variant.
    """

    properties: dict[str, object] = field(default_factory=dict)
    geometry: Geometry = field(default_factory=EmptyGeometry)

    @classmethod
    def from_geojson(cls, data: object) -> MapFeature:
        """Build from a GeoJSON feature mapping.

        Missing or non-mapping ``properties`` and ``geometry`` become
        empty values rather than raising, so one bad feature cannot fail
        a batch.
        """
        if not isinstance(data, Mapping):
            return cls()

        properties_raw = data.get("properties")
        properties = dict(properties_raw) if isinstance(properties_raw, Mapping) else {}

        return cls(
            properties={str(k): v for k, v in properties.items()},
            geometry=geometry_from_geojson(data.get("geometry")),
        )

    def display_name(self, keys: Sequence[str] = DEFAULT_NAME_KEYS) -> str:
        """Return the first non-empty property among *keys*, else ``""``."""
        for key in keys:
            value = self.properties.get(key)
            if value:
                return str(value)
        return ""

    def to_geojson(self) -> dict[str, object]:
        geometry = None
        if isinstance(self.geometry, PolygonGeometry | MultiPolygonGeometry):
            geometry = self.geometry.to_geojson()
        return {
            "type": "Feature",
            "properties": dict(self.properties),
            "geometry": geometry,
        }
