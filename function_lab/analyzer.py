"""Closed-form characteristics for every supported function family.

Each family has one analyzer ``coefficients -> Characteristics`` and, except
for the circle, one evaluator ``coefficients -> f(x)``. Both are looked up in
dispatch tables keyed by :class:`FunctionFamily`.

Zero leading or denominator coefficients never divide by zero: they take an
explicit branch and come back as a record flagged ``degenerate``.
"""
from __future__ import annotations

import math
from dataclasses import replace
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from . import config
from .errors import UnsupportedFamilyError
from .models import (
    REAL_LINE,
    AreaInfo,
    Asymptotes,
    Characteristics,
    CircleFacts,
    FunctionFamily,
    Interval,
    MonotonicIntervals,
    ObliqueAsymptote,
    Point,
    PointPosition,
    SignIntervals,
)

Evaluator = Callable[[float], Optional[float]]

REALS = "ℝ"
EMPTY_SET = "∅"
INFINITY = "∞"


# Formatting ---------------------------------------------------------------


def format_number(value: float, digits: int = 2) -> str:
    if math.isinf(value):
        return INFINITY if value > 0 else f"-{INFINITY}"
    nearest = round(value)
    if abs(value - nearest) < 1e-9:
        return str(int(nearest))
    text = f"{value:.{digits}f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def format_interval(interval: Interval) -> str:
    left = "[" if interval.lower_closed and math.isfinite(interval.lower) else "("
    right = "]" if interval.upper_closed and math.isfinite(interval.upper) else ")"
    return f"{left}{format_number(interval.lower)}, {format_number(interval.upper)}{right}"


def format_intervals(intervals: Iterable[Interval]) -> str:
    parts = [format_interval(iv) for iv in intervals]
    return " ∪ ".join(parts) if parts else EMPTY_SET


def format_line(slope: float, intercept: float) -> str:
    """``y = 2x - 3`` style text for a straight line."""
    if abs(slope) < config.EPS_ZERO:
        return f"y = {format_number(intercept)}"
    if abs(abs(slope) - 1) < config.EPS_ZERO:
        text = "x" if slope > 0 else "-x"
    else:
        text = f"{format_number(slope)}x"
    if abs(intercept) >= config.EPS_ZERO:
        sign = "-" if intercept < 0 else "+"
        text += f" {sign} {format_number(abs(intercept))}"
    return f"y = {text}"


def _punctured(excluded: Sequence[float]) -> str:
    if not excluded:
        return REALS
    return f"{REALS} \\ {{{', '.join(format_number(x, digits=4) for x in excluded)}}}"


def _singleton(value: float) -> str:
    return f"{{{format_number(value, digits=4)}}}"


# Numeric helpers ----------------------------------------------------------


def _clean(value: float) -> float:
    if not math.isfinite(value):
        return value
    nearest = round(value)
    if abs(value - nearest) < 1e-9:
        return float(nearest)
    return value + 0.0


def _poly_eval(coefficients: Sequence[float], x: float) -> float:
    result = 0.0
    for coef in coefficients:
        result = result * x + coef
    return result


def _dedupe(values: Iterable[float], tol: float = 1e-6) -> List[float]:
    unique: List[float] = []
    for value in sorted(values):
        if not unique or abs(value - unique[-1]) > tol:
            unique.append(value)
    return unique


def _trim_leading_zeros(coefficients: Sequence[float], eps: float = config.EPS_ZERO) -> List[float]:
    trimmed = list(coefficients)
    while trimmed and abs(trimmed[0]) < eps:
        trimmed.pop(0)
    return trimmed


def _expect_length(family: FunctionFamily, coefficients: Sequence[float], *lengths: int) -> None:
    if len(coefficients) not in lengths:
        expected = " or ".join(str(n) for n in lengths)
        raise ValueError(f"{family.value} expects {expected} coefficients, got {len(coefficients)}")


def linear_root(m: float, b: float, *, eps: float = config.EPS_ZERO) -> Optional[float]:
    if abs(m) < eps:
        return None
    return _clean(-b / m)


def quadratic_roots(a: float, b: float, c: float, *, eps: float = config.EPS_ZERO) -> List[float]:
    """Real roots in ascending order; a repeated root is returned once."""
    if abs(a) < eps:
        root = linear_root(b, c, eps=eps)
        return [] if root is None else [root]
    disc = b * b - 4 * a * c
    if disc < -eps:
        return []
    if abs(disc) <= eps:
        return [_clean(-b / (2 * a))]
    sqrt_disc = math.sqrt(disc)
    roots = [(-b - sqrt_disc) / (2 * a), (-b + sqrt_disc) / (2 * a)]
    return sorted(_clean(r) for r in roots if math.isfinite(r))


def _cbrt(value: float) -> float:
    return math.copysign(abs(value) ** (1.0 / 3.0), value)


def _newton_polish(coefficients: Sequence[float], x: float) -> float:
    a, b, c, _ = coefficients
    for _ in range(config.NEWTON_ITERATIONS):
        slope = 3 * a * x * x + 2 * b * x + c
        if abs(slope) < config.EPS_ZERO:
            break
        x -= _poly_eval(coefficients, x) / slope
    return x


def cubic_roots(a: float, b: float, c: float, d: float, *, eps: float = config.EPS_ZERO) -> List[float]:
    """Real roots of ``ax³+bx²+cx+d`` by the depressed-cubic closed form."""
    if abs(a) < eps:
        return quadratic_roots(b, c, d, eps=eps)
    B, C, D = b / a, c / a, d / a
    shift = B / 3
    p = C - B * B / 3
    q = 2 * B ** 3 / 27 - B * C / 3 + D
    disc = (q / 2) ** 2 + (p / 3) ** 3
    if abs(p) < eps and abs(q) < eps:
        ts = [0.0]
    elif abs(disc) < 1e-9:
        ts = [3 * q / p, -3 * q / (2 * p)]
    elif disc > 0:
        s = math.sqrt(disc)
        ts = [_cbrt(-q / 2 + s) + _cbrt(-q / 2 - s)]
    else:
        radius = 2 * math.sqrt(-p / 3)
        cos_arg = max(-1.0, min(1.0, (3 * q) / (2 * p) * math.sqrt(-3 / p)))
        phi = math.acos(cos_arg)
        ts = [radius * math.cos(phi / 3 - 2 * math.pi * k / 3) for k in range(3)]
    coefficients = (a, b, c, d)
    roots = [_clean(_newton_polish(coefficients, t - shift)) for t in ts]
    return _dedupe(roots)


def _classify(fn: Evaluator, breakpoints: Iterable[float], window: Interval) -> Tuple[List[Interval], List[Interval]]:
    """Split ``window`` at ``breakpoints`` and sort the pieces by the sign of ``fn``."""
    inner = sorted({x for x in breakpoints if window.lower < x < window.upper})
    edges = [window.lower, *inner, window.upper]
    positive: List[Interval] = []
    negative: List[Interval] = []
    for lower, upper in zip(edges, edges[1:]):
        piece = Interval(lower, upper)
        value = fn(piece.midpoint)
        if value is None or value == 0:
            continue
        (positive if value > 0 else negative).append(piece)
    return positive, negative


def _sign_intervals(
    fn: Evaluator,
    roots: Sequence[float],
    excluded: Sequence[float] = (),
    window: Interval = REAL_LINE,
) -> SignIntervals:
    positive, negative = _classify(fn, [*roots, *excluded], window)
    zero = tuple(Point(x, 0.0) for x in roots)
    return SignIntervals(positive=tuple(positive), negative=tuple(negative), zero=zero)


def _monotonic(
    derivative: Evaluator,
    critical_xs: Sequence[float],
    excluded: Sequence[float] = (),
    window: Interval = REAL_LINE,
) -> MonotonicIntervals:
    increasing, decreasing = _classify(derivative, [*critical_xs, *excluded], window)
    return MonotonicIntervals(increasing=tuple(increasing), decreasing=tuple(decreasing))


# Linear -------------------------------------------------------------------


def linear_evaluator(coefficients: Sequence[float]) -> Evaluator:
    m, b = coefficients
    return lambda x: m * x + b


def _constant(value: float) -> Characteristics:
    if abs(value) < config.EPS_ZERO:
        return Characteristics(
            domain=REALS,
            range=_singleton(0.0),
            y_intercept=0.0,
            sign_intervals=SignIntervals(),
            monotonic=MonotonicIntervals(),
            degenerate=True,
            identically_zero=True,
        )
    if value > 0:
        signs = SignIntervals(positive=(REAL_LINE,))
    else:
        signs = SignIntervals(negative=(REAL_LINE,))
    return Characteristics(
        domain=REALS,
        range=_singleton(value),
        y_intercept=value,
        sign_intervals=signs,
        monotonic=MonotonicIntervals(),
        degenerate=True,
    )


def analyze_linear(coefficients: Sequence[float]) -> Characteristics:
    _expect_length(FunctionFamily.LINEAR, coefficients, 2)
    m, b = coefficients
    root = linear_root(m, b)
    if root is None:
        return _constant(b)
    f = linear_evaluator(coefficients)
    if m > 0:
        monotonic = MonotonicIntervals(increasing=(REAL_LINE,))
    else:
        monotonic = MonotonicIntervals(decreasing=(REAL_LINE,))
    return Characteristics(
        domain=REALS,
        range=REALS,
        roots=(Point(root, 0.0),),
        y_intercept=_clean(b),
        sign_intervals=_sign_intervals(f, [root]),
        monotonic=monotonic,
    )


# Quadratic ----------------------------------------------------------------


def quadratic_evaluator(coefficients: Sequence[float]) -> Evaluator:
    a, b, c = coefficients
    return lambda x: a * x * x + b * x + c


def quadratic_area(a: float, b: float, c: float, x1: float, x2: float) -> float:
    """Signed definite integral of ``ax²+bx+c`` from ``x1`` to ``x2``."""
    return (a / 3) * (x2 ** 3 - x1 ** 3) + (b / 2) * (x2 ** 2 - x1 ** 2) + c * (x2 - x1)


def analyze_quadratic(coefficients: Sequence[float]) -> Characteristics:
    _expect_length(FunctionFamily.QUADRATIC, coefficients, 3)
    a, b, c = coefficients
    if abs(a) < config.EPS_ZERO:
        return replace(analyze_linear((b, c)), degenerate=True)
    f = quadratic_evaluator(coefficients)
    vx = _clean(-b / (2 * a))
    vy = _clean(f(vx))
    roots = quadratic_roots(a, b, c)
    if a > 0:
        value_range = format_interval(Interval(vy, math.inf, lower_closed=True))
    else:
        value_range = format_interval(Interval(-math.inf, vy, upper_closed=True))
    area = None
    if len(roots) == 2:
        x1, x2 = roots
        area = AreaInfo(between=(x1, x2), value=quadratic_area(a, b, c, x1, x2))
    return Characteristics(
        domain=REALS,
        range=value_range,
        roots=tuple(Point(x, 0.0) for x in roots),
        critical_points=(Point(vx, vy),),
        y_intercept=_clean(c),
        sign_intervals=_sign_intervals(f, roots),
        monotonic=_monotonic(lambda x: 2 * a * x + b, [vx]),
        area=area,
    )


# Polynomial (cubic) -------------------------------------------------------


def polynomial_evaluator(coefficients: Sequence[float]) -> Evaluator:
    coeffs = tuple(coefficients)
    return lambda x: _poly_eval(coeffs, x)


def is_nice(x: float, tolerance: float = config.NICE_TOLERANCE) -> bool:
    frac = abs(x) % 1
    return frac < tolerance or frac > 1 - tolerance


def analyze_polynomial(coefficients: Sequence[float]) -> Characteristics:
    _expect_length(FunctionFamily.POLYNOMIAL, coefficients, 4)
    a, b, c, d = coefficients
    if abs(a) < config.EPS_ZERO:
        return replace(analyze_quadratic((b, c, d)), degenerate=True)
    f = polynomial_evaluator(coefficients)

    def derivative(x: float) -> float:
        return 3 * a * x * x + 2 * b * x + c

    disc = 4 * b * b - 12 * a * c
    derivative_roots: List[float] = []
    critical: List[Point] = []
    if disc > 0:
        sqrt_disc = math.sqrt(disc)
        derivative_roots = sorted([(-2 * b + sqrt_disc) / (6 * a), (-2 * b - sqrt_disc) / (6 * a)])
        for x in derivative_roots:
            if not config.POLYNOMIAL_NICE_CRITICAL_POINTS:
                critical.append(Point(_clean(x), _clean(f(x))))
            elif is_nice(x):
                rounded = float(round(x))
                critical.append(Point(rounded, _clean(f(rounded))))
    elif abs(disc) <= config.EPS_ZERO:
        derivative_roots = [-b / (3 * a)]

    seen = set()
    unique_critical = []
    for point in sorted(critical):
        if point.x not in seen:
            seen.add(point.x)
            unique_critical.append(point)

    roots = cubic_roots(a, b, c, d)
    inflection_x = _clean(-b / (3 * a))
    return Characteristics(
        domain=REALS,
        range=REALS,
        roots=tuple(Point(x, 0.0) for x in roots),
        critical_points=tuple(unique_critical),
        inflection_points=(Point(inflection_x, _clean(f(inflection_x))),),
        y_intercept=_clean(d),
        sign_intervals=_sign_intervals(f, roots),
        monotonic=_monotonic(derivative, derivative_roots),
    )


# Rational -----------------------------------------------------------------


def _split_rational(coefficients: Sequence[float]) -> Tuple[List[float], float, float]:
    _expect_length(FunctionFamily.RATIONAL, coefficients, 4, 5)
    numerator = list(coefficients[:-2])
    q1, q0 = coefficients[-2:]
    return numerator, q1, q0


def rational_evaluator(coefficients: Sequence[float]) -> Evaluator:
    numerator, q1, q0 = _split_rational(coefficients)

    def f(x: float) -> Optional[float]:
        den = q1 * x + q0
        if abs(den) < config.DENOMINATOR_EPS:
            return None
        y = _poly_eval(numerator, x) / den
        if not math.isfinite(y) or abs(y) > config.REASONABLE_BOUND:
            return None
        return y

    return f


def _rational_raw(numerator: Sequence[float], q1: float, q0: float) -> Evaluator:
    def f(x: float) -> Optional[float]:
        den = q1 * x + q0
        if den == 0:
            return None
        return _poly_eval(numerator, x) / den

    return f


def _polynomial_characteristics(coefficients: Sequence[float]) -> Characteristics:
    padded = _trim_leading_zeros(coefficients)
    if len(padded) <= 2:
        padded = [0.0] * (2 - len(padded)) + padded
        return analyze_linear(padded)
    if len(padded) == 3:
        return analyze_quadratic(padded)
    return analyze_polynomial(padded)


def analyze_rational(coefficients: Sequence[float]) -> Characteristics:
    numerator, q1, q0 = _split_rational(coefficients)
    eps = config.EPS_ZERO
    if abs(q1) < eps and abs(q0) < eps:
        return Characteristics(domain=EMPTY_SET, range=EMPTY_SET, degenerate=True)
    if abs(q1) < eps:
        return replace(_polynomial_characteristics([c / q0 for c in numerator]), degenerate=True)

    v = _clean(-q0 / q1)
    num = _trim_leading_zeros(numerator)
    raw = _rational_raw(num, q1, q0)
    domain = _punctured([v])
    if not num:
        return Characteristics(
            domain=domain,
            range=_singleton(0.0),
            y_intercept=0.0 if v != 0 else None,
            holes=(Point(v, 0.0),),
            excluded=(v,),
            asymptotes=Asymptotes(horizontal=0.0),
            sign_intervals=SignIntervals(),
            monotonic=MonotonicIntervals(),
            degenerate=True,
            identically_zero=True,
        )

    degree = len(num) - 1
    if degree == 0:
        numerator_roots: List[float] = []
    elif degree == 1:
        numerator_roots = [linear_root(num[0], num[1])]
    else:
        numerator_roots = quadratic_roots(*num)

    # exact comparison: near-coincident roots are not treated as a hole
    holes = []
    if v in numerator_roots:
        h = config.HOLE_PROBE_STEP
        limit = (raw(v + h) + raw(v - h)) / 2
        holes.append(Point(v, _clean(limit)))
    roots = [r for r in numerator_roots if r != v]

    horizontal = None
    oblique = None
    if degree == 0:
        horizontal = 0.0
    elif degree == 1:
        horizontal = _clean(num[0] / q1)
    else:
        slope = num[0] / q1
        oblique = ObliqueAsymptote(_clean(slope), _clean((num[1] - slope * q0) / q1))

    n2, n1, n0 = ([0.0] * (3 - len(num)) + num)[-3:]

    def derivative_numerator(x: float) -> float:
        return n2 * q1 * x * x + 2 * n2 * q0 * x + (n1 * q0 - n0 * q1)

    critical_xs: List[float] = []
    if abs(n2) >= eps:
        critical_xs = [x for x in quadratic_roots(n2 * q1, 2 * n2 * q0, n1 * q0 - n0 * q1) if x != v]
    critical = tuple(Point(x, _clean(raw(x))) for x in critical_xs)

    if holes:
        value_range = _singleton(horizontal) if degree == 1 else _punctured([holes[0].y])
    elif degree <= 1:
        value_range = _punctured([horizontal])
    elif len(critical) == 2:
        low, high = sorted(p.y for p in critical)
        value_range = format_intervals(
            [Interval(-math.inf, low, upper_closed=True), Interval(high, math.inf, lower_closed=True)]
        )
    else:
        value_range = REALS

    return Characteristics(
        domain=domain,
        range=value_range,
        roots=tuple(Point(x, 0.0) for x in roots),
        critical_points=critical,
        y_intercept=_clean(num[-1] / q0) if v != 0 else None,
        asymptotes=Asymptotes(vertical=() if holes else (v,), horizontal=horizontal, oblique=oblique),
        holes=tuple(holes),
        excluded=(v,),
        sign_intervals=_sign_intervals(raw, roots, excluded=[v]),
        monotonic=_monotonic(derivative_numerator, critical_xs, excluded=[v]),
    )


# Trigonometric ------------------------------------------------------------


def trigonometric_evaluator(coefficients: Sequence[float]) -> Evaluator:
    a, b, c, d = coefficients
    return lambda x: a * math.sin(b * x + c) + d


def _into_window(x: float, start: float, period: float) -> float:
    shifted = start + (x - start) % period
    if abs(shifted - (start + period)) < 1e-9:
        shifted = start
    return _clean(shifted)


def analyze_trigonometric(coefficients: Sequence[float]) -> Characteristics:
    _expect_length(FunctionFamily.TRIGONOMETRIC, coefficients, 4)
    a, b, c, d = coefficients
    if abs(b) < config.EPS_ZERO:
        return _constant(_clean(a * math.sin(c) + d))
    if abs(a) < config.EPS_ZERO:
        return _constant(d)
    f = trigonometric_evaluator(coefficients)
    amplitude = abs(a)
    period = 2 * math.pi / abs(b)
    start = _clean(-c / b)
    window = Interval(start, start + period)

    critical = sorted(
        Point(_into_window((theta - c) / b, start, period), _clean(d + a * peak))
        for theta, peak in ((math.pi / 2, 1.0), (3 * math.pi / 2, -1.0))
    )

    roots: List[float] = []
    ratio = -d / a
    if abs(ratio) <= 1 + 1e-12:
        base = math.asin(max(-1.0, min(1.0, ratio)))
        roots = _dedupe(_into_window((theta - c) / b, start, period) for theta in (base, math.pi - base))

    return Characteristics(
        domain=REALS,
        range=format_interval(Interval(d - amplitude, d + amplitude, True, True)),
        roots=tuple(Point(x, 0.0) for x in roots),
        critical_points=tuple(critical),
        y_intercept=_clean(a * math.sin(c) + d),
        period=period,
        amplitude=amplitude,
        phase_shift=start,
        vertical_shift=d,
        sign_intervals=_sign_intervals(f, roots, window=window),
        monotonic=_monotonic(lambda x: a * b * math.cos(b * x + c), [p.x for p in critical], window=window),
    )


# Circle -------------------------------------------------------------------


def _axis_hits(center_along: float, offset: float, radius: float) -> List[float]:
    gap = radius * radius - offset * offset
    if abs(abs(offset) - radius) <= config.EPS_ZERO:
        return [_clean(center_along)]
    if gap < 0:
        return []
    half = math.sqrt(gap)
    return [_clean(center_along - half), _clean(center_along + half)]


def circle_line_intersections(h: float, k: float, r: float, m: float, n: float) -> Tuple[Point, ...]:
    """Points where ``y = mx + n`` meets the circle centred at ``(h, k)``."""
    xs = quadratic_roots(1 + m * m, 2 * m * (n - k) - 2 * h, h * h + (n - k) ** 2 - r * r)
    return tuple(Point(x, _clean(m * x + n)) for x in xs)


def classify_point(center: Point, radius: float, point: Point, *, eps: float = 1e-9) -> PointPosition:
    distance = math.hypot(point.x - center.x, point.y - center.y)
    if abs(distance - radius) <= eps * max(1.0, radius):
        return PointPosition.ON
    return PointPosition.INSIDE if distance < radius else PointPosition.OUTSIDE


def analyze_circle(coefficients: Sequence[float]) -> Characteristics:
    _expect_length(FunctionFamily.CIRCLE, coefficients, 3, 5)
    h, k, r = coefficients[:3]
    center = Point(h, k)
    if r <= config.EPS_ZERO:
        facts = CircleFacts(center=center, radius=r, area=0.0, circumference=0.0)
        point_like = abs(r) <= config.EPS_ZERO
        return Characteristics(
            domain=_singleton(h) if point_like else EMPTY_SET,
            range=_singleton(k) if point_like else EMPTY_SET,
            circle=facts,
            degenerate=True,
        )

    x_hits = tuple(Point(x, 0.0) for x in _axis_hits(h, k, r))
    y_hits = tuple(Point(0.0, y) for y in _axis_hits(k, h, r))
    secant = None
    secant_hits: Tuple[Point, ...] = ()
    if len(coefficients) == 5:
        m, n = coefficients[3:]
        secant = ObliqueAsymptote(m, n)
        secant_hits = circle_line_intersections(h, k, r, m, n)

    facts = CircleFacts(
        center=center,
        radius=r,
        area=math.pi * r * r,
        circumference=2 * math.pi * r,
        x_intersections=x_hits,
        y_intersections=y_hits,
        secant=secant,
        secant_intersections=secant_hits,
    )
    return Characteristics(
        domain=format_interval(Interval(h - r, h + r, True, True)),
        range=format_interval(Interval(k - r, k + r, True, True)),
        roots=x_hits,
        critical_points=(Point(h, k + r), Point(h, k - r)),
        circle=facts,
    )


# Dispatch -----------------------------------------------------------------

ANALYZERS: Dict[FunctionFamily, Callable[[Sequence[float]], Characteristics]] = {
    FunctionFamily.LINEAR: analyze_linear,
    FunctionFamily.QUADRATIC: analyze_quadratic,
    FunctionFamily.POLYNOMIAL: analyze_polynomial,
    FunctionFamily.RATIONAL: analyze_rational,
    FunctionFamily.TRIGONOMETRIC: analyze_trigonometric,
    FunctionFamily.CIRCLE: analyze_circle,
}

COEFFICIENT_COUNTS: Dict[FunctionFamily, Tuple[int, ...]] = {
    FunctionFamily.LINEAR: (2,),
    FunctionFamily.QUADRATIC: (3,),
    FunctionFamily.POLYNOMIAL: (4,),
    FunctionFamily.RATIONAL: (4, 5),
    FunctionFamily.TRIGONOMETRIC: (4,),
    FunctionFamily.CIRCLE: (3, 5),
}

EVALUATORS: Dict[FunctionFamily, Callable[[Sequence[float]], Evaluator]] = {
    FunctionFamily.LINEAR: linear_evaluator,
    FunctionFamily.QUADRATIC: quadratic_evaluator,
    FunctionFamily.POLYNOMIAL: polynomial_evaluator,
    FunctionFamily.RATIONAL: rational_evaluator,
    FunctionFamily.TRIGONOMETRIC: trigonometric_evaluator,
}


def analyze(family, coefficients: Sequence[float]) -> Characteristics:
    """Characteristics of ``family`` with the given coefficients."""
    fam = FunctionFamily.parse(family)
    return ANALYZERS[fam](tuple(float(c) for c in coefficients))


def evaluator(family, coefficients: Sequence[float]) -> Evaluator:
    fam = FunctionFamily.parse(family)
    try:
        factory = EVALUATORS[fam]
    except KeyError:
        raise UnsupportedFamilyError(f"{fam.value} is not a function of x and has no evaluator") from None
    coeffs = tuple(float(c) for c in coefficients)
    _expect_length(fam, coeffs, *COEFFICIENT_COUNTS[fam])
    return factory(coeffs)
