from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from . import config
from .models import GeneratedFunction, PlotScene, Point


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    logger = logging.getLogger(config.LOGGER_NAME)
    logger.setLevel(level or config.LOG_LEVEL)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def _points(points: Iterable[Point]) -> List[List[float]]:
    return [[round(p.x, 4), round(p.y, 4)] for p in points]


def generation_record(generated: GeneratedFunction) -> Dict[str, Any]:
    chars = generated.characteristics
    record: Dict[str, Any] = {
        "event": "generate",
        "family": generated.family.value,
        "difficulty": generated.difficulty.value,
        "coefficients": list(generated.coefficients),
        "expression": generated.expression,
        "domain": chars.domain,
        "range": chars.range,
        "roots": _points(chars.roots),
        "critical_points": _points(chars.critical_points),
        "degenerate": chars.degenerate,
    }
    if chars.asymptotes is not None:
        record["asymptotes"] = {
            "vertical": list(chars.asymptotes.vertical),
            "horizontal": chars.asymptotes.horizontal,
            "oblique": list(chars.asymptotes.oblique) if chars.asymptotes.oblique else None,
        }
    if chars.holes:
        record["holes"] = _points(chars.holes)
    return record


def scene_record(scene: PlotScene) -> Dict[str, Any]:
    xs = [p.x for segment in scene.segments for p in segment]
    ys = [p.y for segment in scene.segments for p in segment]
    return {
        "event": "project",
        "segments": len(scene.segments),
        "points": len(xs),
        "x_extent": [round(min(xs), 4), round(max(xs), 4)] if xs else None,
        "y_extent": [round(min(ys), 4), round(max(ys), 4)] if ys else None,
        "x_range": [round(v, 4) for v in scene.x_range],
        "y_range": [round(v, 4) for v in scene.y_range],
        "markers": {category.value: len(points) for category, points in scene.markers.items()},
        "guides": len(scene.guides),
    }


def format_record(record: Dict[str, Any]) -> str:
    return json.dumps(record, ensure_ascii=False, sort_keys=True)
