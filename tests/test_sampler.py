from __future__ import annotations

import math
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from function_lab.analyzer import rational_evaluator  # noqa: E402
from function_lab.models import Point  # noqa: E402
from function_lab.sampler import (  # noqa: E402
    generate_x_samples,
    resolve_point_count,
    sample,
    split_segments,
)


def test_generate_x_samples_even_grid() -> None:
    assert generate_x_samples(0.0, 1.0, 3) == [0.0, 0.5, 1.0]
    assert generate_x_samples(2.0, 4.0, 1) == [2.0]


def test_resolve_point_count_matches_pixel_density() -> None:
    assert resolve_point_count(-5.0, 5.0, 800, 10.0) == 800
    assert resolve_point_count(0.0, 5.0, 800, 10.0) == 400
    assert resolve_point_count(-5.0, 5.0, 800, 0.0) == 0


@pytest.mark.parametrize("count, x_min, x_max", [(0, -1.0, 1.0), (1, -1.0, 1.0), (10, 1.0, 1.0), (10, 2.0, 1.0)])
def test_degenerate_requests_return_empty(count: int, x_min: float, x_max: float) -> None:
    assert sample(lambda x: x, x_min, x_max, count) == []


def test_everywhere_undefined_function_samples_empty() -> None:
    f = rational_evaluator((1.0, 1.0, 0.0, 0.0))
    assert sample(f, -5.0, 5.0, 200) == []
    assert sample(lambda x: None, -5.0, 5.0, 200) == []


def test_undefined_and_raising_samples_are_skipped() -> None:
    points = sample(lambda x: 1 / x, -1.0, 1.0, 3)
    assert points == [Point(-1.0, -1.0), Point(1.0, 1.0)]
    assert sample(lambda x: math.nan, 0.0, 1.0, 5) == []
    assert sample(lambda x: math.sqrt(x), -1.0, 1.0, 3) == [Point(0.0, 0.0), Point(1.0, 1.0)]


def test_clamps_and_inserts_boundary_point() -> None:
    points = sample(lambda x: 100 * x, -1.0, 1.0, 5)
    assert points == [
        Point(-1.0, -10.0),
        Point(-0.5, -10.0),
        Point(0.0, 0.0),
        Point(0.25, 5.0),
        Point(0.5, 10.0),
        Point(1.0, 10.0),
    ]


def test_custom_cutoff() -> None:
    points = sample(lambda x: x, -3.0, 3.0, 7, cutoff=2.0)
    assert max(abs(p.y) for p in points) == 2.0


def test_output_is_non_decreasing_in_x() -> None:
    f = rational_evaluator((1.0, 1.0, 1.0, -2.0))
    points = sample(f, -5.0, 5.0, 2400)
    xs = [p.x for p in points]
    assert xs == sorted(xs)
    assert all(abs(p.y) <= 10.0 for p in points)


def test_split_segments_on_jump_gap_and_break() -> None:
    points = [Point(0.0, 0.0), Point(1.0, 1.0), Point(2.0, 9.0), Point(5.0, 9.5), Point(6.0, 9.0)]
    assert len(split_segments(points)) == 2
    assert len(split_segments(points, max_gap=1.5)) == 3
    assert len(split_segments(points, max_jump=100.0, breaks=[0.5])) == 2
    assert split_segments([]) == []
