# tests/raster/test_sampling.py
import math

import numpy as np
import pytest

from road_raster.domain.entities.geography import Point
from road_raster.raster.sampling import (
    STEP_FLOOR_M,
    sample_count,
    sample_edge,
    sample_polyline,
    step_meters,
)


def test_step_is_factor_of_cell_size():
    assert step_meters(5.0, 0.5) == 2.5


@pytest.mark.parametrize("factor", [0.0, -1.0])
def test_non_positive_factor_is_clamped_to_min_step(factor):
    assert step_meters(5.0, factor) == 0.01
    assert step_meters(5.0, factor, min_step_m=0.5) == 0.5


def test_min_step_itself_cannot_reach_zero():
    assert STEP_FLOOR_M == 0.01
    assert step_meters(5.0, 0.0, min_step_m=0.0) == STEP_FLOOR_M
    assert step_meters(5.0, -2.0, min_step_m=-3.0) == STEP_FLOOR_M
    assert step_meters(5.0, 0.0, min_step_m=1e-9) == STEP_FLOOR_M


def test_sample_count_stays_bounded_with_zeroed_inputs():
    step = step_meters(1.0, 0.0, min_step_m=0.0)
    assert sample_count(1000.0, step) <= 100_001


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_edge_yields_nothing(bad):
    assert sample_edge(Point(0.0, 0.0), Point(bad, 1.0), 1.0).shape == (0, 2)


def test_sample_count_rounds_up():
    assert sample_count(20.0, 2.5) == 8
    assert sample_count(20.1, 2.5) == 9
    assert sample_count(0.1, 2.5) == 1


def test_straight_edge_samples_are_evenly_spaced():
    s = sample_edge(Point(0.0, 0.0), Point(20.0, 0.0), 2.5)
    assert s.shape == (9, 2)
    assert s[:, 0].tolist() == [0.0, 2.5, 5.0, 7.5, 10.0, 12.5, 15.0, 17.5, 20.0]
    assert np.all(s[:, 1] == 0.0)


def test_endpoints_included_and_spacing_bounded():
    a, b, step = Point(1.3, -2.7), Point(17.9, 8.4), 2.5
    s = sample_edge(a, b, step)
    assert s[0].tolist() == [a.x, a.y]
    assert s[-1] == pytest.approx([b.x, b.y])
    gaps = np.hypot(*np.diff(s, axis=0).T)
    assert np.all(gaps <= step + 1e-9)
    assert len(s) == math.ceil(math.hypot(b.x - a.x, b.y - a.y) / step) + 1


def test_degenerate_edge_yields_nothing():
    a = Point(3.0, 4.0)
    assert sample_edge(a, a, 1.0).shape == (0, 2)
    assert sample_edge(a, Point(3.0 + 1e-9, 4.0), 1.0).shape == (0, 2)


def test_polyline_skips_degenerate_edges_only():
    a, b, c = Point(0.0, 0.0), Point(10.0, 0.0), Point(10.0, 10.0)
    chunks = list(sample_polyline([a, a, b, b, c], 5.0))
    assert len(chunks) == 2
    assert chunks[0][0].tolist() == [0.0, 0.0]
    assert chunks[1][-1].tolist() == [10.0, 10.0]


def test_polyline_with_one_point_yields_nothing():
    assert list(sample_polyline([Point(1.0, 1.0)], 1.0)) == []
