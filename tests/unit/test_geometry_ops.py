"""Tests for shapely-backed bounds, projection fitting and label anchors."""

from __future__ import annotations

import pytest

from mgnrega_map.models.feature import MapFeature
from mgnrega_map.models.projection import ProjectionParameters
from mgnrega_map.rendering.geometry_ops import (
    bounds_from_features,
    fit_projection,
    label_anchor,
)
from mgnrega_map.rendering.projection import Projector


def _features(raw: list[dict[str, object]]) -> list[MapFeature]:
    return [MapFeature.from_geojson(f) for f in raw]


def _polygon(*rings: list[list[float]]) -> MapFeature:
    return MapFeature.from_geojson(
        {"properties": {}, "geometry": {"type": "Polygon", "coordinates": list(rings)}}
    )


class TestBoundsFromFeatures:
    """South-west / north-east corners of outer rings."""

    def test_sample_bounds(self, sample_features: list[dict[str, object]]) -> None:
        bounds = bounds_from_features(_features(sample_features))
        assert bounds == ((16.6, 72.9), (21.6, 79.6))

    def test_no_features(self) -> None:
        assert bounds_from_features([]) is None

    def test_only_empty_geometry(self) -> None:
        assert bounds_from_features([MapFeature(), MapFeature()]) is None

    def test_holes_ignored(self) -> None:
        outer = [[0, 0], [4, 0], [4, 4], [0, 4], [0, 0]]
        bad_hole = [[-50, -50], [50, -50], [50, 50], [-50, -50]]
        assert bounds_from_features([_polygon(outer, bad_hole)]) == ((0, 0), (4, 4))

    def test_unmeasurable_ring_skipped(self) -> None:
        good = _polygon([[1, 2], [3, 2], [3, 5], [1, 2]])
        bad = _polygon([[0, 0], ["x", "y"], [9, 9]])
        assert bounds_from_features([good, bad]) == ((2, 1), (5, 3))


class TestFitProjection:
    """Scale and centre chosen to fill the canvas."""

    def test_sample_fills_width(self, sample_features: list[dict[str, object]]) -> None:
        features = _features(sample_features)
        params = fit_projection(features, width=800, height=900)
        assert params is not None

        projector = Projector(params)
        west, _ = projector(72.9, 19.0)
        east, _ = projector(79.6, 19.0)
        assert west == pytest.approx(20.0)
        assert east == pytest.approx(780.0)

    def test_fitted_features_stay_inside_padding(
        self, sample_features: list[dict[str, object]]
    ) -> None:
        features = _features(sample_features)
        params = fit_projection(features, width=800, height=900, padding=20.0)
        assert params is not None
        projector = Projector(params)
        for lon, lat in [(72.9, 16.6), (79.6, 21.6), (73.3, 19.3), (78.5, 20.6)]:
            x, y = projector(lon, lat)
            assert 20.0 - 1e-6 <= x <= 780.0 + 1e-6
            assert 20.0 - 1e-6 <= y <= 880.0 + 1e-6

    def test_centre_is_mid_longitude(self, sample_features: list[dict[str, object]]) -> None:
        params = fit_projection(_features(sample_features), width=800, height=900)
        assert params is not None
        assert params.center_lon == pytest.approx((72.9 + 79.6) / 2)
        assert 16.6 < params.center_lat < 21.6

    def test_tall_feature_limited_by_height(self) -> None:
        feature = _polygon([[0, 0], [0.1, 0], [0.1, 10], [0, 10], [0, 0]])
        params = fit_projection([feature], width=800, height=900)
        assert params is not None
        projector = Projector(params)
        _, top = projector(0.05, 10)
        _, bottom = projector(0.05, 0)
        assert top == pytest.approx(20.0)
        assert bottom == pytest.approx(880.0)

    def test_no_bounds(self) -> None:
        assert fit_projection([MapFeature()], width=800, height=900) is None

    def test_single_point_has_no_extent(self) -> None:
        assert fit_projection([_polygon([[5, 5], [5, 5]])], width=800, height=900) is None

    def test_canvas_too_small(self, sample_features: list[dict[str, object]]) -> None:
        assert fit_projection(_features(sample_features), width=400, height=900) is None

    def test_polar_bounds(self) -> None:
        feature = _polygon([[0, -90], [10, -80], [0, -80], [0, -90]])
        assert fit_projection([feature], width=800, height=900) is None


class TestLabelAnchor:
    """Label positions fall inside their feature."""

    def test_anchor_inside_polygon(self, maharashtra_params: ProjectionParameters) -> None:
        projector = Projector(maharashtra_params)
        feature = _polygon([[73.3, 18.4], [74.6, 18.4], [74.6, 19.3], [73.3, 19.3], [73.3, 18.4]])
        anchor = label_anchor(feature, projector)
        assert anchor is not None

        x, y = anchor
        west, south = projector(73.3, 18.4)
        east, north = projector(74.6, 19.3)
        assert west < x < east
        assert north < y < south

    def test_anchor_avoids_hole(self, unit_params: ProjectionParameters) -> None:
        """A ring-shaped feature is labelled on the ring, not in the hole."""
        projector = Projector(unit_params)
        outer = [[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]]
        hole = [[1, 1], [9, 1], [9, 9], [1, 9], [1, 1]]
        anchor = label_anchor(_polygon(outer, hole), projector)
        assert anchor is not None
        hole_west, hole_south = projector(1, 1)
        hole_east, hole_north = projector(9, 9)
        x, y = anchor
        assert not (hole_west < x < hole_east and hole_north < y < hole_south)

    def test_multipolygon(
        self,
        sample_features: list[dict[str, object]],
        maharashtra_params: ProjectionParameters,
    ) -> None:
        ratnagiri = _features(sample_features)[1]
        assert label_anchor(ratnagiri, Projector(maharashtra_params)) is not None

    def test_self_intersecting_polygon_repaired(self, unit_params: ProjectionParameters) -> None:
        bowtie = _polygon([[0, 0], [2, 2], [2, 0], [0, 2], [0, 0]])
        assert label_anchor(bowtie, Projector(unit_params)) is not None

    def test_empty_geometry(self, unit_params: ProjectionParameters) -> None:
        assert label_anchor(MapFeature(), Projector(unit_params)) is None

    def test_malformed_coordinates(self, unit_params: ProjectionParameters) -> None:
        feature = _polygon([[0, 0], ["x", "y"], [1, 1], [0, 0]])
        assert label_anchor(feature, Projector(unit_params)) is None
