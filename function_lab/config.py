from __future__ import annotations

import math

# Sampling grid
DEFAULT_X_RANGE = (-5.0, 5.0)
TRIG_X_RANGE = (-2 * math.pi, 2 * math.pi)
GRAPH_WIDTH_PX = 800
SAMPLE_DENSITY_MULTIPLIER = {"rational": 3, "trigonometric": 2}
CIRCLE_ANGULAR_STEPS = 100
CIRCLE_VIEW_MARGIN = 1.0

# Display clamping and axis fitting
DISPLAY_CUTOFF = 10.0
Y_LIMIT = 10.0
DEFAULT_Y_SPAN = 5.0
Y_PADDING_RATIO = 0.1
Y_PADDING_MAX = 2.0
MAX_SEGMENT_JUMP = 5.0
SEGMENT_GAP_FACTOR = 1.5

# Precision / guard rails
EPS_ZERO = 1e-6
ROOT_EPS = 1e-3
DENOMINATOR_EPS = 1e-10
REASONABLE_BOUND = 1000.0
HOLE_PROBE_STEP = 1e-4
NEWTON_ITERATIONS = 3

# Cubic critical points are only reported when they land near an integer, so
# that generated problems stay solvable by hand.
POLYNOMIAL_NICE_CRITICAL_POINTS = True
NICE_TOLERANCE = 0.1

# Generation ranges: integers at easy, halves at medium, quarters at hard.
GENERATION_RANGES = {
    "linear": {
        "easy": {
            "m": {"min": -3.0, "max": 3.0, "step": 1.0, "nonzero": True},
            "b": {"min": -5.0, "max": 5.0, "step": 1.0},
        },
        "medium": {
            "m": {"min": -4.0, "max": 4.0, "step": 0.5, "nonzero": True},
            "b": {"min": -6.0, "max": 6.0, "step": 0.5},
        },
        "hard": {
            "m": {"min": -5.0, "max": 5.0, "step": 0.25, "nonzero": True},
            "b": {"min": -8.0, "max": 8.0, "step": 0.25},
        },
    },
    "quadratic": {
        "easy": {
            "a": {"min": -3.0, "max": 3.0, "step": 1.0, "nonzero": True},
            "b": {"min": -4.0, "max": 4.0, "step": 1.0},
            "c": {"min": -4.0, "max": 4.0, "step": 1.0},
        },
        "medium": {
            "a": {"min": -4.0, "max": 4.0, "step": 0.5, "nonzero": True},
            "b": {"min": -5.0, "max": 5.0, "step": 0.5},
            "c": {"min": -6.0, "max": 6.0, "step": 0.5},
        },
        "hard": {
            "a": {"min": -5.0, "max": 5.0, "step": 0.25, "nonzero": True},
            "b": {"min": -6.0, "max": 6.0, "step": 0.25},
            "c": {"min": -8.0, "max": 8.0, "step": 0.25},
        },
    },
    "polynomial": {
        "easy": {
            "a": {"min": -1.0, "max": 1.0, "step": 1.0, "nonzero": True},
            "b": {"min": -3.0, "max": 3.0, "step": 1.0},
            "c": {"min": -3.0, "max": 3.0, "step": 1.0},
            "d": {"min": -3.0, "max": 3.0, "step": 1.0},
        },
        "medium": {
            "a": {"min": -2.0, "max": 2.0, "step": 0.5, "nonzero": True},
            "b": {"min": -4.0, "max": 4.0, "step": 0.5},
            "c": {"min": -4.0, "max": 4.0, "step": 0.5},
            "d": {"min": -4.0, "max": 4.0, "step": 0.5},
        },
        "hard": {
            "a": {"min": -3.0, "max": 3.0, "step": 0.25, "nonzero": True},
            "b": {"min": -5.0, "max": 5.0, "step": 0.25},
            "c": {"min": -5.0, "max": 5.0, "step": 0.25},
            "d": {"min": -6.0, "max": 6.0, "step": 0.25},
        },
    },
    "rational": {
        # linear over linear
        "easy": {
            "p1": {"min": -3.0, "max": 3.0, "step": 1.0, "nonzero": True},
            "p0": {"min": -4.0, "max": 4.0, "step": 1.0},
            "q1": {"min": -3.0, "max": 3.0, "step": 1.0, "nonzero": True},
            "q0": {"min": -4.0, "max": 4.0, "step": 1.0},
        },
        # quadratic over linear
        "medium": {
            "p2": {"min": -2.0, "max": 2.0, "step": 0.5, "nonzero": True},
            "p1": {"min": -4.0, "max": 4.0, "step": 0.5},
            "p0": {"min": -5.0, "max": 5.0, "step": 0.5},
            "q1": {"min": -4.0, "max": 4.0, "step": 0.5, "nonzero": True},
            "q0": {"min": -5.0, "max": 5.0, "step": 0.5},
        },
        "hard": {
            "p2": {"min": -3.0, "max": 3.0, "step": 0.25, "nonzero": True},
            "p1": {"min": -5.0, "max": 5.0, "step": 0.25},
            "p0": {"min": -6.0, "max": 6.0, "step": 0.25},
            "q1": {"min": -5.0, "max": 5.0, "step": 0.25, "nonzero": True},
            "q0": {"min": -6.0, "max": 6.0, "step": 0.25},
        },
    },
    "trigonometric": {
        "easy": {
            "a": {"min": -3.0, "max": 3.0, "step": 1.0, "nonzero": True},
            "b": {"min": 1.0, "max": 2.0, "step": 1.0, "nonzero": True},
            "c": {"min": 0.0, "max": 0.0, "step": 1.0},
            "d": {"min": 0.0, "max": 0.0, "step": 1.0},
        },
        "medium": {
            "a": {"min": -4.0, "max": 4.0, "step": 0.5, "nonzero": True},
            "b": {"min": 0.5, "max": 3.0, "step": 0.5, "nonzero": True},
            "c": {"min": -2.0, "max": 2.0, "step": 0.5},
            "d": {"min": -2.0, "max": 2.0, "step": 0.5},
        },
        "hard": {
            "a": {"min": -5.0, "max": 5.0, "step": 0.25, "nonzero": True},
            "b": {"min": 0.25, "max": 4.0, "step": 0.25, "nonzero": True},
            "c": {"min": -3.0, "max": 3.0, "step": 0.25},
            "d": {"min": -3.0, "max": 3.0, "step": 0.25},
        },
    },
    "circle": {
        "easy": {
            "h": {"min": -3.0, "max": 3.0, "step": 1.0},
            "k": {"min": -3.0, "max": 3.0, "step": 1.0},
            "r": {"min": 1.0, "max": 4.0, "step": 1.0, "nonzero": True},
        },
        "medium": {
            "h": {"min": -4.0, "max": 4.0, "step": 0.5},
            "k": {"min": -4.0, "max": 4.0, "step": 0.5},
            "r": {"min": 1.0, "max": 5.0, "step": 0.5, "nonzero": True},
        },
        # hard circles come with a secant line y = mx + n
        "hard": {
            "h": {"min": -5.0, "max": 5.0, "step": 0.25},
            "k": {"min": -5.0, "max": 5.0, "step": 0.25},
            "r": {"min": 0.75, "max": 6.0, "step": 0.25, "nonzero": True},
            "m": {"min": -2.0, "max": 2.0, "step": 0.25},
            "n": {"min": -3.0, "max": 3.0, "step": 0.25},
        },
    },
}

# A zero draw for a "nonzero" coefficient is resampled, then replaced by the fallback.
NONZERO_FALLBACK = 1.0
MAX_RESAMPLES = 20

# Sketch comparison
SKETCH_TOLERANCE = 0.5
SKETCH_PASS_RATIO = 0.8

# Logging
LOGGER_NAME = "function_lab"
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# UI
APP_TITLE = "Function Investigation Lab"
DEFAULT_FAMILY = "quadratic"
DEFAULT_DIFFICULTY = "medium"
UI_REVISION = "function-lab"

# Plot palette and styles (Okabe-Ito)
FIGURE_COLORS = {
    "curve": "#0072B2",
    "root": "#000000",
    "critical": "#D55E00",
    "inflection": "#CC79A7",
    "hole": "#0072B2",
    "intersection": "#009E73",
    "center": "#E69F00",
    "asymptote": "#D55E00",
    "secant": "#56B4E9",
    "sketch": "#999999",
}
CURVE_LINE_STYLE = {"color": FIGURE_COLORS["curve"], "width": 3}
SKETCH_LINE_STYLE = {"color": FIGURE_COLORS["sketch"], "width": 2}
MARKER_STYLES = {
    "root": {"color": FIGURE_COLORS["root"], "size": 9, "symbol": "x", "line": {"color": "#ffffff", "width": 1}},
    "critical": {
        "color": FIGURE_COLORS["critical"],
        "size": 10,
        "symbol": "circle",
        "line": {"color": "#ffffff", "width": 1},
    },
    "inflection": {"color": FIGURE_COLORS["inflection"], "size": 9, "symbol": "diamond"},
    "hole": {"color": "#ffffff", "size": 10, "symbol": "circle", "line": {"color": FIGURE_COLORS["hole"], "width": 2}},
    "intersection": {"color": FIGURE_COLORS["intersection"], "size": 9, "symbol": "square"},
    "center": {"color": FIGURE_COLORS["center"], "size": 9, "symbol": "cross"},
}
GUIDE_LINE_STYLES = {
    "asymptote": {"color": FIGURE_COLORS["asymptote"], "width": 1, "dash": "dash"},
    "secant": {"color": FIGURE_COLORS["secant"], "width": 2, "dash": "dot"},
}
AXIS_LINE_STYLE = {"zerolinecolor": "#777777"}
