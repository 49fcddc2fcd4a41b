from __future__ import annotations

import logging
import math
import random
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from function_lab import config  # noqa: E402
from function_lab.generator import build, generate  # noqa: E402
from function_lab.models import FunctionFamily, GuideCategory, MarkerCategory, PlotScene, Point  # noqa: E402
from function_lab.projector import (  # noqa: E402
    SampleConfig,
    circle_points,
    default_point_count,
    fit_y_range,
    project,
    tile_periodic,
)


def test_rational_scene_splits_around_the_asymptote() -> None:
    scene = project(build("rational", "easy", [1, 1, 1, -2]))
    assert len(scene.segments) >= 2
    for segment in scene.segments:
        xs = [p.x for p in segment]
        assert max(xs) < 2 or min(xs) > 2
    near = [p for segment in scene.segments for p in segment if abs(p.x - 2) < 0.05]
    assert near and all(abs(p.y) >= config.DISPLAY_CUTOFF for p in near)
    guides = [g for g in scene.guides if g.category is GuideCategory.ASYMPTOTE]
    assert {g.label for g in guides} == {"x = 2", "y = 1"}


def test_generated_rational_curves_never_cross_vertical_asymptotes() -> None:
    for tier in ("easy", "medium", "hard"):
        for seed in range(30):
            generated = generate("rational", tier, random.Random(seed))
            scene = project(generated)
            for v in generated.characteristics.asymptotes.vertical:
                for segment in scene.segments:
                    xs = [p.x for p in segment]
                    assert max(xs) < v or min(xs) > v


def test_default_point_counts() -> None:
    assert default_point_count(FunctionFamily.QUADRATIC, config.DEFAULT_X_RANGE) == 800
    assert default_point_count(FunctionFamily.RATIONAL, config.DEFAULT_X_RANGE) == 2400
    assert default_point_count(FunctionFamily.TRIGONOMETRIC, config.TRIG_X_RANGE) == 1600


def test_quadratic_scene_markers_and_range() -> None:
    scene = project(build("quadratic", "easy", [1, 0, -4]))
    assert scene.x_range == (-5.0, 5.0)
    assert scene.markers[MarkerCategory.ROOT] == (Point(-2.0, 0.0), Point(2.0, 0.0))
    assert scene.markers[MarkerCategory.CRITICAL] == (Point(0.0, -4.0),)
    assert len(scene.segments) == 1
    low, high = scene.y_range
    assert low == pytest.approx(-5.4)
    assert high == config.Y_LIMIT
    assert scene.guides == ()


def test_custom_sample_config() -> None:
    scene = project(build("linear", "easy", [1, 0]), SampleConfig(x_range=(0.0, 2.0), point_count=5))
    assert scene.point_count == 5
    assert scene.segments[0][0] == Point(0.0, 0.0)
    assert scene.x_range == (0.0, 2.0)


def test_trigonometric_markers_are_tiled_across_the_view() -> None:
    scene = project(build("trigonometric", "easy", [1, 1, 0, 0]))
    roots = [p.x for p in scene.markers[MarkerCategory.ROOT]]
    assert roots == pytest.approx([-2 * math.pi, -math.pi, 0.0, math.pi, 2 * math.pi])
    assert len(scene.markers[MarkerCategory.CRITICAL]) == 4


def test_tile_periodic() -> None:
    tiled = tile_periodic([Point(0.5, 1.0)], 2.0, (-3.0, 3.0))
    assert [p.x for p in tiled] == [-1.5, 0.5, 2.5]


def test_polynomial_scene_has_inflection_marker() -> None:
    scene = project(build("polynomial", "easy", [1, 0, -3, 0]))
    assert scene.markers[MarkerCategory.INFLECTION] == (Point(0.0, 0.0),)
    assert len(scene.markers[MarkerCategory.CRITICAL]) == 2


def test_rational_hole_marker() -> None:
    scene = project(build("rational", "easy", [1, -2, 1, -2]))
    assert scene.markers[MarkerCategory.HOLE] == (Point(2.0, 1.0),)


def test_circle_scene() -> None:
    scene = project(build("circle", "hard", [0, 0, 3, 0, 1]))
    (outline,) = scene.segments
    assert len(outline) == config.CIRCLE_ANGULAR_STEPS + 1
    assert outline[0] == pytest.approx(outline[-1])
    assert all(math.hypot(p.x, p.y) == pytest.approx(3.0) for p in outline)
    assert scene.markers[MarkerCategory.CENTER] == (Point(0.0, 0.0),)
    assert len(scene.markers[MarkerCategory.ROOT]) == 2
    assert len(scene.markers[MarkerCategory.INTERSECTION]) == 4
    (secant,) = scene.guides
    assert secant.category is GuideCategory.SECANT
    assert scene.x_range == (-4.0, 4.0)
    assert scene.y_range == (-4.0, 4.0)


def test_degenerate_circle_scene_is_empty() -> None:
    scene = project(build("circle", "easy", [1, 1, 0]))
    assert scene.segments == ()
    assert scene.markers == {MarkerCategory.CENTER: (Point(1.0, 1.0),)}


def test_circle_points_closed() -> None:
    points = circle_points(1.0, 2.0, 1.0, 4)
    assert len(points) == 5
    assert points[0] == pytest.approx((2.0, 2.0))
    assert circle_points(0.0, 0.0, 1.0, 0) == []


def test_fit_y_range_rules() -> None:
    assert fit_y_range([], []) == (-6.0, 6.0)
    assert fit_y_range([3.0], [3.0]) == pytest.approx((1.8, 4.2))
    assert fit_y_range([], [-100.0, 100.0]) == (-10.0, 10.0)
    low, high = fit_y_range([2.0, 4.0], [], has_roots=True)
    assert low == -1.0
    assert high == pytest.approx(4.2)


def test_projection_is_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="function_lab"):
        project(build("linear", "easy", [2, -4]))
    assert any('"event": "project"' in record.getMessage() for record in caplog.records)


def test_scene_markers_are_read_only() -> None:
    scene = project(build("quadratic", "easy", [1, 0, -4]))
    with pytest.raises(TypeError):
        scene.markers[MarkerCategory.ROOT] = ()  # type: ignore[index]
    assert scene.markers[MarkerCategory.ROOT] == (Point(-2.0, 0.0), Point(2.0, 0.0))


def test_scene_copies_the_callers_markers() -> None:
    markers = {MarkerCategory.CENTER: (Point(0.0, 0.0),)}
    scene = PlotScene(segments=(), markers=markers)
    markers[MarkerCategory.ROOT] = (Point(1.0, 0.0),)
    assert list(scene.markers) == [MarkerCategory.CENTER]


def test_vertical_asymptote_label_keeps_four_digits() -> None:
    scene = project(build("rational", "easy", [1, 0, 8, -1]))
    labels = {g.label for g in scene.guides if g.category is GuideCategory.ASYMPTOTE}
    assert "x = 0.125" in labels
