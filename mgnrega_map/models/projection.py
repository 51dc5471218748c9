"""Projection parameters for the fixed-center Mercator renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mgnrega_map.core.config import MapConfig


@dataclass(frozen=True, slots=True)
class ProjectionParameters:
    """Scale and reference point of a map projection.

    ``scale`` is not validated: zero collapses the map to a point and a
    negative value mirrors it.

    Attributes:
        scale: Pixels per radian-equivalent unit.
        center_lon: Longitude mapped to the canvas centre (degrees).
        center_lat: Latitude mapped to the canvas centre (degrees).
    """

    scale: float
    center_lon: float
    center_lat: float

    @classmethod
    def from_config(cls, config: MapConfig) -> ProjectionParameters:
        return cls(
            scale=config.default_scale,
            center_lon=config.default_center_lon,
            center_lat=config.default_center_lat,
        )

    def to_dict(self) -> dict[str, float]:
        """Serialise using the worker message field names."""
        return {
            "scale": self.scale,
            "centerLon": self.center_lon,
            "centerLat": self.center_lat,
        }
