"""Turn a generated function into a renderer-agnostic :class:`PlotScene`."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from . import config
from .analyzer import evaluator, format_line, format_number
from .logger import format_record, scene_record
from .models import (
    FunctionFamily,
    GeneratedFunction,
    Guide,
    GuideCategory,
    MarkerCategory,
    PlotScene,
    Point,
)
from .sampler import resolve_point_count, sample, split_segments

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SampleConfig:
    x_range: Optional[Tuple[float, float]] = None
    point_count: Optional[int] = None
    cutoff: float = config.DISPLAY_CUTOFF
    angular_steps: int = config.CIRCLE_ANGULAR_STEPS
    max_jump: float = config.MAX_SEGMENT_JUMP


def default_x_range(family: FunctionFamily) -> Tuple[float, float]:
    if family is FunctionFamily.TRIGONOMETRIC:
        return config.TRIG_X_RANGE
    return config.DEFAULT_X_RANGE


def default_point_count(family: FunctionFamily, x_range: Tuple[float, float]) -> int:
    x_min, x_max = x_range
    base = resolve_point_count(x_min, x_max, config.GRAPH_WIDTH_PX, x_max - x_min)
    return base * config.SAMPLE_DENSITY_MULTIPLIER.get(family.value, 1)


def fit_y_range(
    special_ys: Iterable[float],
    curve_ys: Iterable[float],
    *,
    has_roots: bool = False,
) -> Tuple[float, float]:
    """Vertical axis range covering the special points and the sampled curve."""
    ys = [y for y in special_ys if math.isfinite(y)]
    if not ys:
        ys = [-config.DEFAULT_Y_SPAN, config.DEFAULT_Y_SPAN]
    ys.extend(y for y in curve_ys if math.isfinite(y))
    low, high = min(ys), max(ys)
    if high - low < config.EPS_ZERO:
        low, high = low - 1.0, high + 1.0
    padding = min((high - low) * config.Y_PADDING_RATIO, config.Y_PADDING_MAX)
    low = max(low - padding, -config.Y_LIMIT)
    high = min(high + padding, config.Y_LIMIT)
    if has_roots:
        if low >= 0:
            low = -1.0
        if high <= 0:
            high = 1.0
    return low, high


def _within(points: Iterable[Point], x_range: Tuple[float, float]) -> Tuple[Point, ...]:
    x_min, x_max = x_range
    return tuple(p for p in points if x_min <= p.x <= x_max)


def tile_periodic(points: Sequence[Point], period: float, x_range: Tuple[float, float]) -> Tuple[Point, ...]:
    """Repeat one period's worth of points across ``x_range``."""
    x_min, x_max = x_range
    tiled: List[Point] = []
    for point in points:
        first = math.ceil((x_min - point.x) / period - 1e-9)
        last = math.floor((x_max - point.x) / period + 1e-9)
        tiled.extend(Point(point.x + n * period, point.y) for n in range(first, last + 1))
    return tuple(sorted(tiled))


def _markers(groups: Dict[MarkerCategory, Tuple[Point, ...]]) -> Dict[MarkerCategory, Tuple[Point, ...]]:
    return {category: points for category, points in groups.items() if points}


def _asymptote_guides(
    generated: GeneratedFunction,
    x_range: Tuple[float, float],
    y_range: Tuple[float, float],
) -> Tuple[Guide, ...]:
    asymptotes = generated.characteristics.asymptotes
    if asymptotes is None:
        return ()
    x_min, x_max = x_range
    y_min, y_max = y_range
    guides: List[Guide] = []
    for v in asymptotes.vertical:
        if x_min <= v <= x_max:
            label = f"x = {format_number(v, digits=4)}"
            guides.append(Guide(GuideCategory.ASYMPTOTE, Point(v, y_min), Point(v, y_max), label))
    if asymptotes.horizontal is not None:
        h = asymptotes.horizontal
        label = f"y = {format_number(h, digits=4)}"
        guides.append(Guide(GuideCategory.ASYMPTOTE, Point(x_min, h), Point(x_max, h), label))
    if asymptotes.oblique is not None:
        slope, intercept = asymptotes.oblique
        guides.append(
            Guide(
                GuideCategory.ASYMPTOTE,
                Point(x_min, slope * x_min + intercept),
                Point(x_max, slope * x_max + intercept),
                format_line(slope, intercept),
            )
        )
    return tuple(guides)


def _project_function(generated: GeneratedFunction, cfg: SampleConfig) -> PlotScene:
    family = generated.family
    chars = generated.characteristics
    x_range = tuple(cfg.x_range or default_x_range(family))
    x_min, x_max = x_range
    count = cfg.point_count if cfg.point_count is not None else default_point_count(family, x_range)

    f = evaluator(family, generated.coefficients)
    points = sample(f, x_min, x_max, count, cutoff=cfg.cutoff)
    max_gap = None
    if count > 1:
        max_gap = config.SEGMENT_GAP_FACTOR * (x_max - x_min) / (count - 1)
    breaks = chars.asymptotes.vertical if chars.asymptotes is not None else ()
    segments = split_segments(points, max_jump=cfg.max_jump, max_gap=max_gap, breaks=breaks)

    roots, critical = chars.roots, chars.critical_points
    if family is FunctionFamily.TRIGONOMETRIC and chars.period:
        roots = tile_periodic(roots, chars.period, x_range)
        critical = tile_periodic(critical, chars.period, x_range)
    markers = _markers(
        {
            MarkerCategory.ROOT: _within(roots, x_range),
            MarkerCategory.CRITICAL: _within(critical, x_range),
            MarkerCategory.INFLECTION: _within(chars.inflection_points, x_range),
            MarkerCategory.HOLE: _within(chars.holes, x_range),
        }
    )

    special_ys = [p.y for group in markers.values() for p in group]
    y_range = fit_y_range(special_ys, (p.y for p in points), has_roots=MarkerCategory.ROOT in markers)
    return PlotScene(
        segments=tuple(tuple(segment) for segment in segments),
        markers=markers,
        guides=_asymptote_guides(generated, x_range, y_range),
        x_range=x_range,
        y_range=y_range,
    )


def circle_points(h: float, k: float, r: float, steps: int) -> List[Point]:
    """Closed polyline around the circle, ``steps + 1`` points."""
    if steps < 1:
        return []
    return [
        Point(h + r * math.cos(2 * math.pi * i / steps), k + r * math.sin(2 * math.pi * i / steps))
        for i in range(steps + 1)
    ]


def _project_circle(generated: GeneratedFunction, cfg: SampleConfig) -> PlotScene:
    chars = generated.characteristics
    h, k, r = generated.coefficients[:3]
    margin = config.CIRCLE_VIEW_MARGIN
    reach = max(r, 0.0) + margin
    x_range = tuple(cfg.x_range or (h - reach, h + reach))
    y_range = (k - reach, k + reach)
    center = {MarkerCategory.CENTER: (Point(h, k),)}
    if chars.degenerate or chars.circle is None:
        return PlotScene(segments=(), markers=center, x_range=x_range, y_range=y_range)

    facts = chars.circle
    markers = _markers(
        {
            **center,
            MarkerCategory.ROOT: facts.x_intersections,
            MarkerCategory.CRITICAL: chars.critical_points,
            MarkerCategory.INTERSECTION: facts.y_intersections + facts.secant_intersections,
        }
    )
    guides: Tuple[Guide, ...] = ()
    if facts.secant is not None:
        slope, intercept = facts.secant
        x_min, x_max = x_range
        guides = (
            Guide(
                GuideCategory.SECANT,
                Point(x_min, slope * x_min + intercept),
                Point(x_max, slope * x_max + intercept),
                format_line(slope, intercept),
            ),
        )
    outline = tuple(circle_points(h, k, r, cfg.angular_steps))
    return PlotScene(
        segments=(outline,) if outline else (),
        markers=markers,
        guides=guides,
        x_range=x_range,
        y_range=y_range,
    )


def project(generated: GeneratedFunction, sample_config: Optional[SampleConfig] = None) -> PlotScene:
    """Build the plot scene for ``generated``; nothing is cached between calls."""
    cfg = sample_config or SampleConfig()
    if generated.family is FunctionFamily.CIRCLE:
        scene = _project_circle(generated, cfg)
    else:
        scene = _project_function(generated, cfg)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(format_record(scene_record(scene)))
    return scene
