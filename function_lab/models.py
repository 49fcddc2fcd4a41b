"""Value types shared by the analyzer, generator and projector.

Everything here is immutable: a new function or a new scene replaces the old
one wholesale.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, NamedTuple, Optional, Tuple

from .errors import UnsupportedFamilyError


class FunctionFamily(str, Enum):
    LINEAR = "linear"
    QUADRATIC = "quadratic"
    POLYNOMIAL = "polynomial"
    RATIONAL = "rational"
    TRIGONOMETRIC = "trigonometric"
    CIRCLE = "circle"

    @classmethod
    def parse(cls, value: Any) -> "FunctionFamily":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            options = ", ".join(f.value for f in cls)
            raise UnsupportedFamilyError(f"unsupported function family {value!r} (expected one of: {options})") from None


class DifficultyTier(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: Any) -> "DifficultyTier":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            options = ", ".join(d.value for d in cls)
            raise ValueError(f"unknown difficulty {value!r} (expected one of: {options})") from None


class Point(NamedTuple):
    x: float
    y: float


class Interval(NamedTuple):
    lower: float
    upper: float
    lower_closed: bool = False
    upper_closed: bool = False

    @property
    def midpoint(self) -> float:
        if math.isinf(self.lower) and math.isinf(self.upper):
            return 0.0
        if math.isinf(self.lower):
            return self.upper - 1.0
        if math.isinf(self.upper):
            return self.lower + 1.0
        return (self.lower + self.upper) / 2

    def contains(self, x: float) -> bool:
        above = x >= self.lower if self.lower_closed else x > self.lower
        below = x <= self.upper if self.upper_closed else x < self.upper
        return above and below


REAL_LINE = Interval(-math.inf, math.inf)


class ObliqueAsymptote(NamedTuple):
    slope: float
    intercept: float


class PointPosition(str, Enum):
    INSIDE = "inside"
    ON = "on"
    OUTSIDE = "outside"


@dataclass(frozen=True)
class Asymptotes:
    vertical: Tuple[float, ...] = ()
    horizontal: Optional[float] = None
    oblique: Optional[ObliqueAsymptote] = None


@dataclass(frozen=True)
class SignIntervals:
    positive: Tuple[Interval, ...] = ()
    negative: Tuple[Interval, ...] = ()
    zero: Tuple[Point, ...] = ()


@dataclass(frozen=True)
class MonotonicIntervals:
    increasing: Tuple[Interval, ...] = ()
    decreasing: Tuple[Interval, ...] = ()


@dataclass(frozen=True)
class AreaInfo:
    between: Tuple[float, float]
    value: float


@dataclass(frozen=True)
class CircleFacts:
    center: Point
    radius: float
    area: float
    circumference: float
    x_intersections: Tuple[Point, ...] = ()
    y_intersections: Tuple[Point, ...] = ()
    secant: Optional[ObliqueAsymptote] = None
    secant_intersections: Tuple[Point, ...] = ()


@dataclass(frozen=True)
class Characteristics:
    domain: str
    range: str
    roots: Tuple[Point, ...] = ()
    critical_points: Tuple[Point, ...] = ()
    inflection_points: Tuple[Point, ...] = ()
    y_intercept: Optional[float] = None
    asymptotes: Optional[Asymptotes] = None
    holes: Tuple[Point, ...] = ()
    excluded: Tuple[float, ...] = ()
    period: Optional[float] = None
    amplitude: Optional[float] = None
    phase_shift: Optional[float] = None
    vertical_shift: Optional[float] = None
    sign_intervals: Optional[SignIntervals] = None
    monotonic: Optional[MonotonicIntervals] = None
    area: Optional[AreaInfo] = None
    circle: Optional[CircleFacts] = None
    degenerate: bool = False
    identically_zero: bool = False


@dataclass(frozen=True)
class GeneratedFunction:
    family: FunctionFamily
    difficulty: DifficultyTier
    coefficients: Tuple[float, ...]
    expression: str
    characteristics: Characteristics

    def evaluate(self, x: float) -> Optional[float]:
        from .analyzer import evaluator

        return evaluator(self.family, self.coefficients)(x)


class MarkerCategory(str, Enum):
    ROOT = "root"
    CRITICAL = "critical"
    INFLECTION = "inflection"
    HOLE = "hole"
    INTERSECTION = "intersection"
    CENTER = "center"


class GuideCategory(str, Enum):
    ASYMPTOTE = "asymptote"
    SECANT = "secant"


@dataclass(frozen=True)
class Guide:
    category: GuideCategory
    start: Point
    end: Point
    label: str = ""


@dataclass(frozen=True)
class PlotScene:
    segments: Tuple[Tuple[Point, ...], ...]
    markers: Mapping[MarkerCategory, Tuple[Point, ...]] = field(default_factory=dict)
    guides: Tuple[Guide, ...] = ()
    x_range: Tuple[float, float] = (-10.0, 10.0)
    y_range: Tuple[float, float] = (-10.0, 10.0)

    def __post_init__(self) -> None:
        # read-only view over a private copy of the caller's dict
        object.__setattr__(self, "markers", MappingProxyType(dict(self.markers)))

    @property
    def point_count(self) -> int:
        return sum(len(segment) for segment in self.segments)
