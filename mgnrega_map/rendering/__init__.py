"""Map rendering: projection, SVG path data, batch conversion and documents."""

from mgnrega_map.rendering.generate_paths import generate_paths
from mgnrega_map.rendering.projection import Projector, mercator_y, project
from mgnrega_map.rendering.svg_path import (
    coordinates_to_path,
    format_number,
    geometry_to_path,
    ring_to_path,
)

__all__ = [
    "Projector",
    "coordinates_to_path",
    "format_number",
    "generate_paths",
    "geometry_to_path",
    "mercator_y",
    "project",
    "ring_to_path",
]
