"""
Tests for excavation geometry.
"""

import pytest

from trenchcalc.core.estimator.dimensions import ResolvedSegment
from trenchcalc.core.estimator.geometry import (
    SegmentAccumulator,
    bellhole_geometry,
    prism_volume_cf,
    segmented_geometry,
    top_width_ft,
    trench_geometry,
)
from trenchcalc.models.excavation import ExcShape
from trenchcalc.models.reference import ShoringType


class TestCrossSection:
    """Test cross-section rules by wall treatment."""

    def test_vertical_walls(self):
        for shoring in (ShoringType.NONE, ShoringType.SHORED):
            assert top_width_ft(2, 5, shoring, 1.0) == 2
            assert prism_volume_cf(20, 2, 5, shoring, 1.0) == pytest.approx(200)

    def test_sloped_one_to_one(self):
        """A 1:1 slope widens the top by twice the depth."""
        assert top_width_ft(2, 5, ShoringType.SLOPED, 1.0) == pytest.approx(12)
        # 20 x (2 + 12) / 2 x 5
        assert prism_volume_cf(20, 2, 5, ShoringType.SLOPED, 1.0) == pytest.approx(700)

    def test_sloped_vertical_soil(self):
        assert top_width_ft(2, 5, ShoringType.SLOPED, 0.0) == 2

    def test_benched(self):
        """Benches are half the depth on each side."""
        assert top_width_ft(2, 5, ShoringType.BENCHED, 1.0) == pytest.approx(7)
        # 20 x 4.5 x 5
        assert prism_volume_cf(20, 2, 5, ShoringType.BENCHED, 1.0) == pytest.approx(450)


class TestTrenchGeometry:
    """Test single-depth trench geometry."""

    def test_rectangular_trench(self):
        geometry = trench_geometry(20, 2, 5, ShoringType.NONE, 1.0)

        assert geometry.bank_vol_cf == pytest.approx(200)
        assert geometry.surface_area_sf == pytest.approx(40)
        assert geometry.floor_area_sf == pytest.approx(40)
        assert geometry.perimeter_ft == pytest.approx(44)
        assert (geometry.effective_length, geometry.effective_width, geometry.effective_depth) == (20, 2, 5)

    def test_sloped_trench_surface_uses_top_width(self):
        geometry = trench_geometry(20, 2, 5, ShoringType.SLOPED, 1.0)

        assert geometry.bank_vol_cf == pytest.approx(700)
        assert geometry.surface_area_sf == pytest.approx(240)
        assert geometry.floor_area_sf == pytest.approx(40)


class TestBellholeGeometry:
    """Test single-depth bell-hole geometry."""

    def test_square(self):
        geometry = bellhole_geometry(ExcShape.SQUARE, 6, 99, 5)

        assert geometry.bank_vol_cf == pytest.approx(180)
        assert geometry.perimeter_ft == pytest.approx(24)
        assert geometry.effective_width == 6

    def test_rectangle(self):
        geometry = bellhole_geometry(ExcShape.RECTANGLE, 8, 6, 5)

        assert geometry.bank_vol_cf == pytest.approx(240)
        assert geometry.surface_area_sf == pytest.approx(48)
        assert geometry.perimeter_ft == pytest.approx(28)

    def test_nonstandard_shape_factor(self):
        """Irregular footprints use perimeter x width x 0.25."""
        geometry = bellhole_geometry(ExcShape.NONSTANDARD, 0, 4, 5, [10, 8, 10, 8, 6])

        assert geometry.perimeter_ft == pytest.approx(42)
        assert geometry.surface_area_sf == pytest.approx(42)
        assert geometry.bank_vol_cf == pytest.approx(210)


class TestSegmentedGeometry:
    """Test variable-depth aggregation."""

    def test_weighted_averages(self):
        """Effective width and depth are weighted by segment length."""
        segments = [
            ResolvedSegment(length_ft=10, width_ft=2, depth_ft=4),
            ResolvedSegment(length_ft=30, width_ft=3, depth_ft=8),
        ]
        geometry = segmented_geometry(segments, ShoringType.NONE, 1.0, 1.5, 5)

        assert geometry.bank_vol_cf == pytest.approx(800)
        assert geometry.effective_length == pytest.approx(40)
        assert geometry.effective_width == pytest.approx(2.75)
        assert geometry.effective_depth == pytest.approx(7.0)
        assert geometry.floor_area_sf == pytest.approx(110)
        assert geometry.surface_area_sf == pytest.approx(110)
        assert geometry.perimeter_ft == pytest.approx(85.5)

    def test_not_simple_average(self):
        segments = [
            ResolvedSegment(length_ft=1, width_ft=2, depth_ft=10),
            ResolvedSegment(length_ft=9, width_ft=2, depth_ft=0),
        ]
        geometry = segmented_geometry(segments, ShoringType.NONE, 1.0, 2, 5)

        assert geometry.effective_depth == pytest.approx(1.0)

    def test_sloped_segments(self):
        segments = [ResolvedSegment(length_ft=10, width_ft=2, depth_ft=5)]
        geometry = segmented_geometry(segments, ShoringType.SLOPED, 1.0, 2, 5)

        assert geometry.bank_vol_cf == pytest.approx(350)
        assert geometry.surface_area_sf == pytest.approx(120)
        assert geometry.floor_area_sf == pytest.approx(20)

    def test_zero_length_falls_back(self):
        segments = [ResolvedSegment(length_ft=0, width_ft=3, depth_ft=8)]
        geometry = segmented_geometry(segments, ShoringType.NONE, 1.0, 1.5, 5)

        assert geometry.bank_vol_cf == 0
        assert geometry.effective_width == 1.5
        assert geometry.effective_depth == 5

    def test_accumulator_totals(self):
        acc = SegmentAccumulator(ShoringType.NONE, 1.0)
        acc.add(ResolvedSegment(length_ft=10, width_ft=2, depth_ft=4))
        acc.add(ResolvedSegment(length_ft=10, width_ft=4, depth_ft=6))

        assert acc.total_length_ft == 20
        assert acc.sum_length_width == 60
        assert acc.sum_length_depth == 100
        assert acc.weighted_width(0) == 3
        assert acc.weighted_depth(0) == 5
