"""Random function problems per family and difficulty.

Coefficients are drawn on the tier's grid from ``config.GENERATION_RANGES``
with an injected :class:`random.Random`, so a fixed seed always yields the
same problem.
"""
from __future__ import annotations

import logging
import random
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from . import config
from .analyzer import analyze, format_number
from .errors import DegenerateCoefficientsError
from .logger import format_record, generation_record
from .models import DifficultyTier, FunctionFamily, GeneratedFunction

logger = logging.getLogger(__name__)

SUPERSCRIPTS = {2: "²", 3: "³"}


def quantize(value: float, bounds: Dict[str, Any]) -> float:
    """Clamp ``value`` into ``bounds`` and snap it to the bounds' step."""
    num = max(bounds["min"], min(bounds["max"], float(value)))
    step = bounds.get("step", 0.1) or 0.1
    quantized = round(num / step) * step
    if quantized == -0.0:
        quantized = 0.0
    return float(f"{quantized:.12g}")


def _draw(rng: random.Random, bounds: Dict[str, Any]) -> float:
    step = bounds["step"]
    slots = int(round((bounds["max"] - bounds["min"]) / step))
    return quantize(bounds["min"] + rng.randint(0, slots) * step, bounds)


def _draw_coefficient(rng: random.Random, name: str, bounds: Dict[str, Any]) -> float:
    value = _draw(rng, bounds)
    if bounds.get("nonzero") and abs(value) < config.EPS_ZERO:
        raise DegenerateCoefficientsError(name, value)
    return value


def draw_coefficients(family, difficulty, rng: random.Random) -> Tuple[float, ...]:
    fam = FunctionFamily.parse(family)
    tier = DifficultyTier.parse(difficulty)
    ranges = config.GENERATION_RANGES[fam.value][tier.value]
    values: List[float] = []
    for name, bounds in ranges.items():
        for _ in range(config.MAX_RESAMPLES):
            try:
                values.append(_draw_coefficient(rng, name, bounds))
                break
            except DegenerateCoefficientsError as exc:
                logger.debug("resampling: %s", exc)
        else:
            logger.debug("falling back to %s=%s", name, config.NONZERO_FALLBACK)
            values.append(config.NONZERO_FALLBACK)
    return tuple(values)


# Expression formatting ----------------------------------------------------


def _num(value: float) -> str:
    return format_number(value, digits=4)


def _power(degree: int) -> str:
    if degree == 0:
        return ""
    if degree == 1:
        return "x"
    return "x" + SUPERSCRIPTS.get(degree, f"^{degree}")


def format_terms(terms: Sequence[Tuple[float, str]]) -> str:
    """Join ``(coefficient, variable)`` pairs into ``2x - 4`` style text."""
    parts: List[str] = []
    for coef, var in terms:
        if abs(coef) < config.EPS_ZERO:
            continue
        magnitude = abs(coef)
        if var and abs(magnitude - 1) < config.EPS_ZERO:
            body = var
        else:
            body = f"{_num(magnitude)}{var}"
        if not parts:
            parts.append(f"-{body}" if coef < 0 else body)
        else:
            parts.append(f" - {body}" if coef < 0 else f" + {body}")
    return "".join(parts) if parts else "0"


def format_polynomial(coefficients: Sequence[float]) -> str:
    degree = len(coefficients) - 1
    return format_terms([(coef, _power(degree - i)) for i, coef in enumerate(coefficients)])


def _term_count(coefficients: Sequence[float]) -> int:
    return sum(1 for c in coefficients if abs(c) >= config.EPS_ZERO)


def _shifted_square(var: str, center: float) -> str:
    if abs(center) < config.EPS_ZERO:
        return f"{var}²"
    sign = "-" if center > 0 else "+"
    return f"({var} {sign} {_num(abs(center))})²"


def format_expression(family, coefficients: Sequence[float]) -> str:
    fam = FunctionFamily.parse(family)
    if fam in (FunctionFamily.LINEAR, FunctionFamily.QUADRATIC, FunctionFamily.POLYNOMIAL):
        return f"f(x) = {format_polynomial(coefficients)}"

    if fam is FunctionFamily.RATIONAL:
        numerator, denominator = coefficients[:-2], coefficients[-2:]
        top = format_polynomial(numerator)
        bottom = format_polynomial(denominator)
        if _term_count(numerator) > 1:
            top = f"({top})"
        if _term_count(denominator) > 1 or (bottom != "x" and abs(denominator[0]) >= config.EPS_ZERO):
            bottom = f"({bottom})"
        return f"f(x) = {top}/{bottom}"

    if fam is FunctionFamily.TRIGONOMETRIC:
        a, b, c, d = coefficients
        inner = format_terms([(b, "x"), (c, "")])
        wave = format_terms([(a, f"sin({inner})"), (d, "")])
        return f"f(x) = {wave}"

    h, k, r = coefficients[:3]
    text = f"{_shifted_square('x', h)} + {_shifted_square('y', k)} = {_num(r * r)}"
    if len(coefficients) == 5:
        m, n = coefficients[3:]
        text += f"; y = {format_terms([(m, 'x'), (n, '')])}"
    return text


# Generation ---------------------------------------------------------------


def build(family, difficulty, coefficients: Sequence[float]) -> GeneratedFunction:
    """Wrap fixed coefficients into a :class:`GeneratedFunction`."""
    fam = FunctionFamily.parse(family)
    coeffs = tuple(float(c) for c in coefficients)
    return GeneratedFunction(
        family=fam,
        difficulty=DifficultyTier.parse(difficulty),
        coefficients=coeffs,
        expression=format_expression(fam, coeffs),
        characteristics=analyze(fam, coeffs),
    )


def generate(family, difficulty, rng: Optional[random.Random] = None) -> GeneratedFunction:
    """Draw a random member of ``family`` at ``difficulty`` and analyze it."""
    rng = rng or random.Random()
    coefficients = draw_coefficients(family, difficulty, rng)
    generated = build(family, difficulty, coefficients)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(format_record(generation_record(generated)))
    return generated


def generate_from_request(request: Mapping[str, Any], rng: Optional[random.Random] = None) -> GeneratedFunction:
    """Entry point for UI requests shaped like ``{"family": ..., "difficulty": ...}``.

    A ``seed`` key is honoured when no ``rng`` is passed.
    """
    if rng is None and request.get("seed") is not None:
        rng = random.Random(request["seed"])
    return generate(
        request.get("family", config.DEFAULT_FAMILY),
        request.get("difficulty", config.DEFAULT_DIFFICULTY),
        rng,
    )
