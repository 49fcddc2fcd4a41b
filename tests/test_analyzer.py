from __future__ import annotations

import math
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from function_lab.analyzer import (  # noqa: E402
    analyze,
    circle_line_intersections,
    classify_point,
    cubic_roots,
    evaluator,
    format_interval,
    format_intervals,
    format_line,
    format_number,
    quadratic_roots,
)
from function_lab.errors import UnsupportedFamilyError  # noqa: E402
from function_lab.models import REAL_LINE, Interval, ObliqueAsymptote, Point, PointPosition  # noqa: E402


def test_scenario_linear() -> None:
    chars = analyze("linear", [2, -4])
    assert chars.roots == (Point(2.0, 0.0),)
    assert chars.y_intercept == -4
    assert chars.sign_intervals.negative == (Interval(-math.inf, 2.0),)
    assert chars.sign_intervals.positive == (Interval(2.0, math.inf),)
    assert chars.monotonic.increasing == (REAL_LINE,)
    assert format_intervals(chars.sign_intervals.negative) == "(-∞, 2)"
    assert not chars.degenerate


def test_scenario_quadratic() -> None:
    chars = analyze("quadratic", [1, 0, -4])
    assert chars.critical_points == (Point(0.0, -4.0),)
    assert chars.roots == (Point(-2.0, 0.0), Point(2.0, 0.0))
    assert chars.range == "[-4, ∞)"
    assert chars.area.between == (-2.0, 2.0)
    assert chars.area.value == pytest.approx(-32 / 3)
    assert chars.monotonic.decreasing == (Interval(-math.inf, 0.0),)


def test_scenario_circle() -> None:
    facts = analyze("circle", [0, 0, 3]).circle
    assert facts.area == pytest.approx(9 * math.pi)
    assert facts.circumference == pytest.approx(6 * math.pi)
    assert facts.x_intersections == (Point(-3.0, 0.0), Point(3.0, 0.0))
    assert facts.y_intersections == (Point(0.0, -3.0), Point(0.0, 3.0))


def test_scenario_rational_vertical_asymptote() -> None:
    chars = analyze("rational", [1, 1, 1, -2])
    assert chars.asymptotes.vertical == (2.0,)
    assert chars.asymptotes.horizontal == 1.0
    assert chars.roots == (Point(-1.0, 0.0),)
    assert chars.y_intercept == -0.5
    assert chars.domain == "ℝ \\ {2}"
    assert chars.range == "ℝ \\ {1}"


def test_linear_degenerate_branches() -> None:
    zero = analyze("linear", [0, 0])
    assert zero.degenerate and zero.identically_zero
    assert zero.roots == ()
    assert zero.sign_intervals.positive == () and zero.sign_intervals.negative == ()

    flat = analyze("linear", [0, 3])
    assert flat.degenerate and not flat.identically_zero
    assert flat.roots == ()
    assert flat.sign_intervals.positive == (REAL_LINE,)
    assert flat.range == "{3}"


def test_quadratic_without_leading_term_is_linear() -> None:
    chars = analyze("quadratic", [0, 2, -4])
    assert chars.degenerate
    assert chars.roots == (Point(2.0, 0.0),)


def test_quadratic_repeated_and_missing_roots() -> None:
    assert quadratic_roots(1, -2, 1) == [1.0]
    assert quadratic_roots(1, 0, 1) == []
    assert analyze("quadratic", [-1, 0, -1]).range == "(-∞, -1]"


def test_cubic_roots_three_real() -> None:
    roots = cubic_roots(1, 0, -3, 0)
    assert roots == pytest.approx([-math.sqrt(3), 0.0, math.sqrt(3)])
    assert cubic_roots(1, -3, 3, -1) == pytest.approx([1.0])
    assert cubic_roots(1, 0, 0, -8) == pytest.approx([2.0])


def test_polynomial_nice_critical_points() -> None:
    chars = analyze("polynomial", [1, 0, -3, 0])
    assert chars.critical_points == (Point(-1.0, 2.0), Point(1.0, -2.0))
    assert chars.inflection_points == (Point(0.0, 0.0),)
    assert len(chars.roots) == 3


def test_polynomial_drops_non_integer_critical_points() -> None:
    chars = analyze("polynomial", [1, 0, -2, 0])
    assert chars.critical_points == ()
    assert len(chars.monotonic.increasing) == 2
    assert len(chars.monotonic.decreasing) == 1


def test_polynomial_without_cubic_term_is_quadratic() -> None:
    chars = analyze("polynomial", [0, 1, 0, -4])
    assert chars.degenerate
    assert chars.critical_points == (Point(0.0, -4.0),)


def test_rational_hole_linear_over_linear() -> None:
    chars = analyze("rational", [1, -2, 1, -2])
    assert chars.holes == (Point(2.0, 1.0),)
    assert chars.asymptotes.vertical == ()
    assert chars.range == "{1}"


def test_rational_hole_with_oblique_asymptote() -> None:
    chars = analyze("rational", [1, -3, 2, 1, -2])
    assert chars.holes == (Point(2.0, 1.0),)
    assert chars.roots == (Point(1.0, 0.0),)
    assert chars.asymptotes.oblique == ObliqueAsymptote(1.0, -1.0)
    assert chars.asymptotes.horizontal is None


def test_rational_critical_points_and_range() -> None:
    chars = analyze("rational", [1, 0, 1, 1, 0])
    assert chars.critical_points == (Point(-1.0, -2.0), Point(1.0, 2.0))
    assert chars.range == "(-∞, -2] ∪ [2, ∞)"
    assert chars.y_intercept is None


def test_rational_degenerate_denominators() -> None:
    empty = analyze("rational", [1, 1, 0, 0])
    assert empty.degenerate and empty.domain == "∅"
    flat = analyze("rational", [1, 0, 0, 2])
    assert flat.degenerate
    assert flat.roots == (Point(0.0, 0.0),)


def test_rational_constant_numerator() -> None:
    chars = analyze("rational", [0, 3, 1, 0])
    assert chars.asymptotes.horizontal == 0.0
    assert chars.roots == ()
    assert chars.y_intercept is None


def test_rational_evaluator_guards() -> None:
    f = evaluator("rational", [1, 1, 1, -2])
    assert f(2.0) is None
    assert f(2.0 + 1e-6) is None
    assert f(3.0) == pytest.approx(4.0)


def test_rational_root_next_to_asymptote_keeps_signs() -> None:
    # numerator root 2 sits 1e-7 left of the pole, so there is no hole
    chars = analyze("rational", [1, -2, 1, -2.0000001])
    v = 2.0000001
    assert chars.holes == ()
    assert chars.asymptotes.vertical == (v,)
    assert chars.roots == (Point(2.0, 0.0),)
    signs = chars.sign_intervals
    assert signs.negative == (Interval(2.0, v),)
    assert signs.positive == (Interval(-math.inf, 2.0), Interval(v, math.inf))
    assert not any(piece.contains(v) for piece in signs.positive + signs.negative)
    x = 2.00000005
    assert (x - 2) / (x - v) < 0
    assert signs.negative[0].contains(x)


def test_excluded_values_keep_four_digits() -> None:
    chars = analyze("rational", [1, 0, 8, -1])
    assert chars.domain == "ℝ \\ {0.125}"
    assert chars.range == "ℝ \\ {0.125}"


def test_trigonometric_basic_sine() -> None:
    chars = analyze("trigonometric", [1, 1, 0, 0])
    assert chars.period == pytest.approx(2 * math.pi)
    assert chars.amplitude == 1
    assert chars.phase_shift == 0
    assert [p.x for p in chars.roots] == pytest.approx([0.0, math.pi])
    assert chars.critical_points[0].x == pytest.approx(math.pi / 2)
    assert chars.critical_points[0].y == 1.0
    assert chars.range == "[-1, 1]"
    (positive,) = chars.sign_intervals.positive
    assert positive.upper == pytest.approx(math.pi)


def test_trigonometric_shifted_out_of_reach_has_no_roots() -> None:
    chars = analyze("trigonometric", [1, 2, 0, 3])
    assert chars.roots == ()
    assert chars.range == "[2, 4]"
    assert chars.period == pytest.approx(math.pi)


def test_trigonometric_degenerate() -> None:
    assert analyze("trigonometric", [0, 1, 0, 2]).degenerate
    chars = analyze("trigonometric", [2, 0, 1, 0])
    assert chars.degenerate
    assert chars.y_intercept == pytest.approx(2 * math.sin(1))


def test_circle_degenerate_radius() -> None:
    point = analyze("circle", [1, 2, 0])
    assert point.degenerate and point.domain == "{1}"
    assert analyze("circle", [1, 2, -1]).domain == "∅"


def test_circle_tangent_axis_and_secant() -> None:
    chars = analyze("circle", [0, 3, 3, 0, 3])
    assert chars.circle.x_intersections == (Point(0.0, 0.0),)
    assert chars.circle.secant_intersections == (Point(-3.0, 3.0), Point(3.0, 3.0))
    assert circle_line_intersections(0, 0, 1, 0, 5) == ()


def test_classify_point() -> None:
    center = Point(0.0, 0.0)
    assert classify_point(center, 5.0, Point(3.0, 4.0)) is PointPosition.ON
    assert classify_point(center, 5.0, Point(1.0, 1.0)) is PointPosition.INSIDE
    assert classify_point(center, 5.0, Point(6.0, 0.0)) is PointPosition.OUTSIDE


def test_analysis_is_deterministic() -> None:
    assert analyze("rational", [2, -1, 3, 1, -2]) == analyze("rational", [2, -1, 3, 1, -2])
    assert analyze("polynomial", [1, -2, -1, 2]) == analyze("polynomial", [1, -2, -1, 2])


def test_unsupported_family_and_bad_lengths() -> None:
    with pytest.raises(UnsupportedFamilyError):
        analyze("exponential", [1, 2])
    with pytest.raises(UnsupportedFamilyError):
        evaluator("circle", [0, 0, 1])
    with pytest.raises(ValueError):
        analyze("linear", [1, 2, 3])
    with pytest.raises(ValueError):
        evaluator("rational", [1, 2])


def test_formatting() -> None:
    assert format_number(2.0) == "2"
    assert format_number(-0.5) == "-0.5"
    assert format_number(1 / 3) == "0.33"
    assert format_interval(Interval(-1.0, math.inf, lower_closed=True)) == "[-1, ∞)"
    assert format_intervals([]) == "∅"
    assert format_line(2.0, -3.0) == "y = 2x - 3"
    assert format_line(-1.0, 0.0) == "y = -x"
    assert format_line(0.0, 4.0) == "y = 4"
