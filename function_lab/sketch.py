"""Score a hand-drawn sketch against the generated curve."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from . import config
from .analyzer import evaluator
from .models import FunctionFamily, GeneratedFunction, Point

MIN_STROKE_DISTANCE = 0.1


@dataclass(frozen=True)
class SketchComparison:
    mean_error: float
    max_error: float
    within_tolerance: float
    compared: int
    passed: bool


def simplify_stroke(points: Iterable[Point], min_distance: float = MIN_STROKE_DISTANCE) -> List[Point]:
    """Drop stroke points closer than ``min_distance`` to the last kept one."""
    kept: List[Point] = []
    for x, y in points:
        point = Point(float(x), float(y))
        if not kept or math.hypot(point.x - kept[-1].x, point.y - kept[-1].y) > min_distance:
            kept.append(point)
    return kept


def _errors(sketch: Sequence[Point], generated: GeneratedFunction) -> List[float]:
    if generated.family is FunctionFamily.CIRCLE:
        h, k, r = generated.coefficients[:3]
        return [abs(math.hypot(p.x - h, p.y - k) - r) for p in sketch]
    f = evaluator(generated.family, generated.coefficients)
    errors: List[float] = []
    for p in sketch:
        y: Optional[float] = f(p.x)
        if y is None or not math.isfinite(y):
            continue
        errors.append(abs(p.y - y))
    return errors


def compare_sketch(
    sketch_points: Iterable[Point],
    generated: GeneratedFunction,
    *,
    tolerance: float = config.SKETCH_TOLERANCE,
) -> SketchComparison:
    """Vertical distance to ``f(x)`` per point; radial distance for circles."""
    errors = _errors([Point(float(x), float(y)) for x, y in sketch_points], generated)
    if not errors:
        return SketchComparison(
            mean_error=math.inf, max_error=math.inf, within_tolerance=0.0, compared=0, passed=False
        )
    within = sum(1 for e in errors if e <= tolerance) / len(errors)
    return SketchComparison(
        mean_error=sum(errors) / len(errors),
        max_error=max(errors),
        within_tolerance=within,
        compared=len(errors),
        passed=within >= config.SKETCH_PASS_RATIO,
    )
