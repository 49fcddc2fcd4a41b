from __future__ import annotations

import json
import logging
import math
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from function_lab import config  # noqa: E402
from function_lab.generator import build  # noqa: E402
from function_lab.logger import configure_logging, format_record, generation_record, scene_record  # noqa: E402
from function_lab.models import DifficultyTier, FunctionFamily, Point  # noqa: E402
from function_lab.projector import project  # noqa: E402
from function_lab.sketch import compare_sketch, simplify_stroke  # noqa: E402
from function_lab.verbal_descriptions import (  # noqa: E402
    FAMILY_STEPS,
    GRAPH_STEPS,
    SKETCH_STEPS,
    describe_characteristics,
    investigation_steps,
)


def test_investigation_steps_combine_general_and_family_lists() -> None:
    steps = investigation_steps("quadratic", "easy")
    assert steps[: len(GRAPH_STEPS[DifficultyTier.EASY])] == GRAPH_STEPS[DifficultyTier.EASY]
    assert "Find the vertex." in steps
    sketch_steps = investigation_steps("quadratic", "easy", sketch=True)
    assert sketch_steps[0] == SKETCH_STEPS[DifficultyTier.EASY][0]
    expected = len(GRAPH_STEPS[DifficultyTier.HARD]) + len(FAMILY_STEPS[FunctionFamily.CIRCLE][DifficultyTier.HARD])
    assert len(investigation_steps("circle", "hard")) == expected


def test_describe_rational() -> None:
    lines = describe_characteristics(build("rational", "easy", [1, 1, 1, -2]))
    assert lines[0] == "Expression: f(x) = (x + 1)/(x - 2)"
    assert "Domain: ℝ \\ {2}" in lines
    assert "Vertical asymptote x = 2" in lines
    assert "Horizontal asymptote y = 1" in lines
    assert "Zeros: (-1, 0)" in lines


def test_describe_quadratic_and_trig() -> None:
    lines = describe_characteristics(build("quadratic", "easy", [1, 0, -4]))
    assert "Range: [-4, ∞)" in lines
    assert "Extreme points: (0, -4)" in lines
    assert "Signed area between -2 and 2: -10.67" in lines
    trig = describe_characteristics(build("trigonometric", "easy", [2, 1, 0, 0]))
    assert any(line.startswith("Period 6.28, amplitude 2") for line in trig)


def test_describe_circle_and_degenerate() -> None:
    lines = describe_characteristics(build("circle", "hard", [0, 0, 2, 0, 5]))
    assert "Center (0, 0), radius 2." in lines
    assert "The line misses the circle." in lines
    flat = describe_characteristics(build("linear", "easy", [0, 0]))
    assert "The function is zero everywhere it is defined." in flat
    assert any("collapse" in line for line in flat)


def test_sketch_on_the_curve_passes() -> None:
    generated = build("quadratic", "easy", [1, 0, -4])
    sketch = [Point(x / 2, (x / 2) ** 2 - 4 + 0.1) for x in range(-6, 7)]
    result = compare_sketch(sketch, generated)
    assert result.compared == len(sketch)
    assert result.mean_error == pytest.approx(0.1)
    assert result.within_tolerance == 1.0
    assert result.passed


def test_sketch_far_from_curve_fails() -> None:
    generated = build("linear", "easy", [1, 0])
    result = compare_sketch([(0, 3), (1, 4), (2, 2.2)], generated)
    assert result.max_error == pytest.approx(3.0)
    assert result.within_tolerance == pytest.approx(1 / 3)
    assert not result.passed


def test_sketch_skips_undefined_points_and_handles_circles() -> None:
    rational = build("rational", "easy", [1, 1, 1, -2])
    result = compare_sketch([(2, 5), (3, 4)], rational)
    assert result.compared == 1
    assert compare_sketch([(2, 5)], rational).compared == 0
    assert math.isinf(compare_sketch([], rational).mean_error)
    circle = build("circle", "easy", [0, 0, 2])
    ring = compare_sketch([(2, 0), (0, 2.2), (-2, 0)], circle)
    assert ring.max_error == pytest.approx(0.2)
    assert ring.passed


def test_simplify_stroke_drops_close_points() -> None:
    stroke = [(0, 0), (0.05, 0), (0.2, 0), (0.25, 0.01), (1, 1)]
    assert simplify_stroke(stroke) == [Point(0.0, 0.0), Point(0.2, 0.0), Point(1.0, 1.0)]


def test_records_are_json_serializable() -> None:
    generated = build("rational", "medium", [1, -3, 2, 1, -2])
    record = generation_record(generated)
    assert record["holes"] == [[2.0, 1.0]]
    assert record["asymptotes"]["oblique"] == [1.0, -1.0]
    scene = scene_record(project(generated))
    assert scene["markers"]["hole"] == 1
    assert json.loads(format_record(scene))["event"] == "project"


def test_configure_logging_installs_one_handler() -> None:
    logger = configure_logging("DEBUG")
    configure_logging()
    assert logger.name == config.LOGGER_NAME
    assert len(logger.handlers) == 1
    assert logger.level == logging.getLevelName(config.LOG_LEVEL)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
