"""Investigation checklists and plain-English summaries of a generated function."""
from __future__ import annotations

from typing import List

from .analyzer import format_intervals, format_line, format_number
from .models import DifficultyTier, FunctionFamily, GeneratedFunction, Point

GRAPH_STEPS = {
    DifficultyTier.EASY: [
        "Look at the graph and identify the type of function.",
        "Read the intersections with the axes off the graph.",
        "Decide from the graph whether the function increases or decreases.",
        "Find where the function is positive and where it is negative.",
        "Write down the algebraic expression of the function.",
    ],
    DifficultyTier.MEDIUM: [
        "Look at the graph and identify the type of function.",
        "Read the intersections with the axes off the graph.",
        "Estimate the slope of the function from the graph.",
        "Find where the function is positive and where it is negative.",
        "Explain how the slope shapes the graph.",
        "Write down the algebraic expression of the function.",
    ],
    DifficultyTier.HARD: [
        "Look at the graph and identify the type of function.",
        "Read the intersections with the axes off the graph.",
        "Estimate the slope of the function from the graph.",
        "Find where the function is positive and where it is negative.",
        "Explain how the slope and the y-intercept shape the graph.",
        "Write down the exact algebraic expression of the function.",
    ],
}

SKETCH_STEPS = {
    DifficultyTier.EASY: [
        "Read the algebraic expression of the function.",
        "Find the intersections with the axes.",
        "Decide whether the function increases or decreases.",
        "Sketch the function.",
        "Compare your sketch with the solution.",
    ],
    DifficultyTier.MEDIUM: [
        "Read the algebraic expression of the function.",
        "Compute the intersections with the axes.",
        "Compute the slope and decide the direction of the function.",
        "Find where the function is positive and where it is negative.",
        "Sketch the function.",
        "Compare your sketch with the solution and explain the differences.",
    ],
    DifficultyTier.HARD: [
        "Read the algebraic expression of the function.",
        "Compute the intersections with the axes.",
        "Compute the slope and decide the direction of the function.",
        "Find where the function is positive and where it is negative.",
        "Sketch the function as precisely as you can.",
        "Compare your sketch with the solution and explain the differences.",
        "Explain how the slope and the y-intercept affect the accuracy of your sketch.",
    ],
}

FAMILY_STEPS = {
    FunctionFamily.LINEAR: {
        DifficultyTier.EASY: [
            "Identify the slope.",
            "Find the y-intercept.",
            "Find the x-intercept.",
            "Decide whether the line rises or falls.",
            "Find where the function is positive and where it is negative.",
        ],
        DifficultyTier.MEDIUM: [
            "Compute the slope.",
            "Find the intersections with the axes.",
            "Relate the slope to the rate of change.",
            "Find where the function is positive and where it is negative.",
            "Write the line in the form y = mx + b.",
        ],
        DifficultyTier.HARD: [
            "Compute the exact slope.",
            "Find the exact intersections with the axes.",
            "Relate the slope to the angle the line makes with the x-axis.",
            "Find where the function is positive and where it is negative.",
            "Write the line in every form you know.",
        ],
    },
    FunctionFamily.QUADRATIC: {
        DifficultyTier.EASY: [
            "Decide whether the parabola opens up or down.",
            "Find the vertex.",
            "Find the intersections with the axes.",
            "Identify the axis of symmetry.",
            "Find where the function increases and where it decreases.",
        ],
        DifficultyTier.MEDIUM: [
            "Find the vertex and explain what it means.",
            "Compute the intersections with the axes.",
            "Identify the axis of symmetry and describe its properties.",
            "Find where the function increases, decreases and is positive.",
            "Describe how each coefficient changes the graph.",
        ],
        DifficultyTier.HARD: [
            "Analyze how every coefficient shapes the parabola.",
            "Compute the intersections and the vertex exactly.",
            "Explain the link between the coefficients and the features of the graph.",
            "Find where the function increases, decreases and is positive.",
            "Write the parabola in standard, vertex and factored form.",
        ],
    },
    FunctionFamily.POLYNOMIAL: {
        DifficultyTier.EASY: [
            "Identify the degree of the polynomial.",
            "Find the intersections with the axes.",
            "Find the extreme points.",
            "Find where the function increases and where it decreases.",
            "Find where the function is positive and where it is negative.",
        ],
        DifficultyTier.MEDIUM: [
            "State the degree of the polynomial and explain why.",
            "Find all intersections and extreme points.",
            "Find the inflection point.",
            "Describe where the function increases, decreases and changes concavity.",
            "Explain how the function behaves as x grows without bound.",
        ],
        DifficultyTier.HARD: [
            "Analyze the effect of the leading coefficient.",
            "Find every special point exactly.",
            "Study where the function increases, decreases and changes concavity.",
            "Describe the behaviour at infinity.",
            "Relate the degree of the polynomial to the number of extreme points.",
        ],
    },
    FunctionFamily.RATIONAL: {
        DifficultyTier.EASY: [
            "Identify the vertical asymptotes.",
            "Identify the horizontal asymptote.",
            "Find the intersections with the axes.",
            "Find where the function is positive and where it is negative.",
            "Decide where the function is undefined.",
        ],
        DifficultyTier.MEDIUM: [
            "Find all asymptotes.",
            "Compute the intersections with the axes.",
            "Find the points of discontinuity.",
            "Find where the function increases and where it decreases.",
            "Explain how the function behaves near the asymptotes.",
        ],
        DifficultyTier.HARD: [
            "Analyze all asymptotes, including oblique ones.",
            "Find every special point.",
            "Study where the function increases, decreases and is continuous.",
            "Analyze the behaviour around points of discontinuity.",
            "Explain the relation between the numerator and the denominator.",
        ],
    },
    FunctionFamily.TRIGONOMETRIC: {
        DifficultyTier.EASY: [
            "Identify the basic function.",
            "Find the period.",
            "Find the intersections with the axes.",
            "Find the extreme points.",
            "Find where the function is positive and where it is negative.",
        ],
        DifficultyTier.MEDIUM: [
            "Find the period and the frequency.",
            "Find the amplitude.",
            "Compute the horizontal and vertical shifts.",
            "Find the extreme points and the zeros.",
            "Find where the function increases and where it decreases.",
        ],
        DifficultyTier.HARD: [
            "Analyze every parameter of the function.",
            "Compute every special point.",
            "Explain the effect of each parameter.",
            "Study where the function increases, decreases and repeats.",
            "Identify symmetries and patterns.",
        ],
    },
    FunctionFamily.CIRCLE: {
        DifficultyTier.EASY: [
            "Find the center of the circle.",
            "Compute the radius.",
            "Find the intersections with the axes.",
            "Decide whether a given point lies on the circle.",
            "Find the top, bottom, left and right points.",
        ],
        DifficultyTier.MEDIUM: [
            "Compute the center and the radius.",
            "Find the intersections with the axes.",
            "Identify tangent lines at the special points.",
            "Compute the circumference and the area.",
            "Describe the symmetries of the circle.",
        ],
        DifficultyTier.HARD: [
            "Analyze the full equation of the circle.",
            "Compute every special point.",
            "Find equations of tangent lines.",
            "Find where the given line cuts the circle.",
            "Study the geometric properties of the figure.",
        ],
    },
}


def investigation_steps(family, difficulty, *, sketch: bool = False) -> List[str]:
    """General steps for the tier followed by the family's own checklist."""
    fam = FunctionFamily.parse(family)
    tier = DifficultyTier.parse(difficulty)
    general = (SKETCH_STEPS if sketch else GRAPH_STEPS)[tier]
    return [*general, *FAMILY_STEPS[fam][tier]]


def _point(p: Point) -> str:
    return f"({format_number(p.x)}, {format_number(p.y)})"


def _points(points) -> str:
    return ", ".join(_point(p) for p in points)


def describe_characteristics(generated: GeneratedFunction) -> List[str]:
    chars = generated.characteristics
    lines = [f"Expression: {generated.expression}"]
    if chars.degenerate:
        lines.append("These coefficients collapse the function to a simpler member of its family.")
    lines.append(f"Domain: {chars.domain}")
    lines.append(f"Range: {chars.range}")

    if chars.circle is not None:
        facts = chars.circle
        lines.append(f"Center {_point(facts.center)}, radius {format_number(facts.radius)}.")
        lines.append(
            f"Area {format_number(facts.area)}, circumference {format_number(facts.circumference)}."
        )
        if facts.x_intersections:
            lines.append(f"Meets the x-axis at {_points(facts.x_intersections)}.")
        if facts.y_intersections:
            lines.append(f"Meets the y-axis at {_points(facts.y_intersections)}.")
        if facts.secant is not None:
            if facts.secant_intersections:
                lines.append(f"The line meets the circle at {_points(facts.secant_intersections)}.")
            else:
                lines.append("The line misses the circle.")
        return lines

    if chars.identically_zero:
        lines.append("The function is zero everywhere it is defined.")
    elif chars.roots:
        lines.append(f"Zeros: {_points(chars.roots)}")
    else:
        lines.append("The function has no real zeros.")
    if chars.y_intercept is not None:
        lines.append(f"y-intercept: {format_number(chars.y_intercept)}")
    if chars.critical_points:
        lines.append(f"Extreme points: {_points(chars.critical_points)}")
    if chars.inflection_points:
        lines.append(f"Inflection point: {_points(chars.inflection_points)}")
    if chars.holes:
        lines.append(f"Hole at {_points(chars.holes)}")
    asymptotes = chars.asymptotes
    if asymptotes is not None:
        for v in asymptotes.vertical:
            lines.append(f"Vertical asymptote x = {format_number(v, digits=4)}")
        if asymptotes.horizontal is not None:
            lines.append(f"Horizontal asymptote y = {format_number(asymptotes.horizontal, digits=4)}")
        if asymptotes.oblique is not None:
            slope, intercept = asymptotes.oblique
            lines.append(f"Oblique asymptote {format_line(slope, intercept)}")
    if chars.period is not None:
        lines.append(
            f"Period {format_number(chars.period)}, amplitude {format_number(chars.amplitude)}, "
            f"phase shift {format_number(chars.phase_shift)}, vertical shift {format_number(chars.vertical_shift)}"
        )
    signs = chars.sign_intervals
    if signs is not None and (signs.positive or signs.negative):
        lines.append(f"Positive on {format_intervals(signs.positive)}")
        lines.append(f"Negative on {format_intervals(signs.negative)}")
    monotonic = chars.monotonic
    if monotonic is not None and (monotonic.increasing or monotonic.decreasing):
        lines.append(f"Increasing on {format_intervals(monotonic.increasing)}")
        lines.append(f"Decreasing on {format_intervals(monotonic.decreasing)}")
    if chars.area is not None:
        x1, x2 = chars.area.between
        lines.append(
            f"Signed area between {format_number(x1)} and {format_number(x2)}: {format_number(chars.area.value)}"
        )
    return lines
