"""Shared pytest fixtures for the map path generator test suite."""

import json
from pathlib import Path

import pytest

from mgnrega_map.models.projection import ProjectionParameters

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def sample_geojson_path(data_dir: Path) -> Path:
    """Path to a 4-feature Maharashtra district sample.

    Pune (Polygon), Ratnagiri (MultiPolygon: 2 polygons, 3 rings),
    Nagpur (Polygon, ``NAME`` only) and Mumbai (``geometry: null``).
    """
    return data_dir / "maharashtra_districts_sample.geojson"


@pytest.fixture()
def sample_features(sample_geojson_path: Path) -> list[dict[str, object]]:
    """Raw GeoJSON feature dicts from the sample collection."""
    return json.loads(sample_geojson_path.read_text(encoding="utf-8"))["features"]


# ---------------------------------------------------------------------------
# Projection fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def unit_params() -> ProjectionParameters:
    """Scale 1 centred on (0, 0)."""
    return ProjectionParameters(scale=1.0, center_lon=0.0, center_lat=0.0)


@pytest.fixture()
def maharashtra_params() -> ProjectionParameters:
    """Roughly centred on Maharashtra; fits the sample on an 800 px canvas."""
    return ProjectionParameters(scale=100.0, center_lon=76.0, center_lat=19.0)


@pytest.fixture()
def generate_message(sample_features: list[dict[str, object]]) -> dict[str, object]:
    """A valid ``GENERATE_PATHS`` message for the sample features."""
    return {
        "type": "GENERATE_PATHS",
        "data": {
            "features": sample_features,
            "scale": 100,
            "centerLon": 76.0,
            "centerLat": 19.0,
        },
    }
