"""Fixed-center Mercator projection: WGS84 lon/lat -> SVG canvas pixels.

    x = scale * (lon - center_lon)
    mercator_y(lat) = -scale * ln(tan(pi/4 + lat*pi/360))
    y = mercator_y(lat) - mercator_y(center_lat)

The result is translated so that ``(center_lon, center_lat)`` lands on
canvas pixel ``(400, 450)``.  Note that ``x`` is in degrees while
``mercator_y`` is in radians, so the map is stretched horizontally by
180/pi relative to a true Mercator; dashboard scales are tuned for it.

Latitudes at or beyond the poles are not guarded: ``-90`` and below
leave the domain of ``ln`` and raise ``ValueError``; ``+90`` yields a
huge but finite coordinate.
"""

from __future__ import annotations

import math

from mgnrega_map.core.constants import CANVAS_OFFSET_X, CANVAS_OFFSET_Y
from mgnrega_map.models.projection import ProjectionParameters


def mercator_y(lat: float, scale: float) -> float:
    """Return the unshifted Mercator y for *lat* (degrees).

    Raises:
        ValueError: If *lat* is at or below -90 (math domain error).
    """
    return -scale * math.log(math.tan(math.pi / 4 + lat * math.pi / 360))


def project(lon: float, lat: float, params: ProjectionParameters) -> tuple[float, float]:
    """Project one point onto the canvas."""
    return Projector(params)(lon, lat)


def inverse_mercator_lat(merc: float) -> float:
    """Latitude (degrees) whose ``ln(tan(pi/4 + lat*pi/360))`` equals *merc*."""
    return (math.atan(math.exp(merc)) - math.pi / 4) * 360 / math.pi


class Projector:
    """Projects lon/lat to canvas pixels for one set of parameters.

    The centre term is computed once per instance rather than per point.

    Raises:
        ValueError: On construction, if ``center_lat`` is outside the
            domain of the projection.
    """

    def __init__(self, params: ProjectionParameters) -> None:
        self.params = params
        self._center_y = mercator_y(params.center_lat, params.scale)

    def __call__(self, lon: float, lat: float) -> tuple[float, float]:
        x = self.params.scale * (lon - self.params.center_lon)
        y = mercator_y(lat, self.params.scale) - self._center_y
        return (x + CANVAS_OFFSET_X, y + CANVAS_OFFSET_Y)
