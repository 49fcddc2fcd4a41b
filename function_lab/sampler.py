from __future__ import annotations

import math
from typing import Callable, List, Optional, Sequence

from . import config
from .models import Point

Evaluator = Callable[[float], Optional[float]]


def generate_x_samples(x_min: float, x_max: float, count: int) -> List[float]:
    if count < 2:
        return [x_min]
    step = (x_max - x_min) / (count - 1)
    return [x_min + i * step for i in range(count)]


def resolve_point_count(x_min: float, x_max: float, pixels: int, x_span: float) -> int:
    """Number of samples for a plot ``pixels`` wide showing ``x_span`` units."""
    if x_span <= 0:
        return 0
    scale = pixels / x_span
    return max(int(math.floor(scale * (x_max - x_min) + 1e-9)), 0)


def _safe_eval(f: Evaluator, x: float) -> Optional[float]:
    try:
        y = f(x)
    except (ArithmeticError, ValueError):
        return None
    if y is None:
        return None
    y = float(y)
    if not math.isfinite(y):
        return None
    return y


def sample(
    f: Evaluator,
    x_min: float,
    x_max: float,
    count: int,
    *,
    cutoff: float = config.DISPLAY_CUTOFF,
) -> List[Point]:
    """Sample ``f`` on an even grid, dropping undefined values.

    Values beyond ``cutoff`` are pinned to ``±cutoff``. When the curve leaves
    the band right after an in-band sample, a boundary point is inserted half a
    step earlier at the average of the last in-band value and the cutoff.
    """
    if count < 2 or not x_max > x_min:
        return []
    step = (x_max - x_min) / (count - 1)
    points: List[Point] = []
    last_in_band: Optional[float] = None
    for x in generate_x_samples(x_min, x_max, count):
        y = _safe_eval(f, x)
        if y is None:
            last_in_band = None
            continue
        if abs(y) > cutoff:
            bound = math.copysign(cutoff, y)
            if last_in_band is not None:
                points.append(Point(x - step / 2, (last_in_band + bound) / 2))
            points.append(Point(x, bound))
            last_in_band = None
        else:
            points.append(Point(x, y))
            last_in_band = y
    return points


def split_segments(
    points: Sequence[Point],
    *,
    max_jump: float = config.MAX_SEGMENT_JUMP,
    max_gap: Optional[float] = None,
    breaks: Sequence[float] = (),
) -> List[List[Point]]:
    """Break a sampled polyline wherever it jumps, skips samples or crosses a break."""
    segments: List[List[Point]] = []
    current: List[Point] = []
    for point in points:
        if current:
            prev = current[-1]
            jumped = abs(point.y - prev.y) > max_jump
            gapped = max_gap is not None and point.x - prev.x > max_gap
            crossed = any(prev.x < b < point.x for b in breaks)
            if jumped or gapped or crossed:
                segments.append(current)
                current = []
        current.append(point)
    if current:
        segments.append(current)
    return segments
