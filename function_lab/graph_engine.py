from __future__ import annotations

from typing import List, Optional, Sequence

import plotly.graph_objects as go

from . import config
from .models import Guide, MarkerCategory, PlotScene, Point

MARKER_LABELS = {
    MarkerCategory.ROOT: "Zeros",
    MarkerCategory.CRITICAL: "Extrema",
    MarkerCategory.INFLECTION: "Inflection",
    MarkerCategory.HOLE: "Hole",
    MarkerCategory.INTERSECTION: "Intersections",
    MarkerCategory.CENTER: "Center",
}


def curve_traces(segments: Sequence[Sequence[Point]], *, name: str = "f(x)") -> List[go.Scatter]:
    return [
        go.Scatter(
            x=[p.x for p in segment],
            y=[p.y for p in segment],
            mode="lines",
            name=name,
            line=dict(config.CURVE_LINE_STYLE),
            showlegend=False,
        )
        for segment in segments
        if segment
    ]


def marker_traces(scene: PlotScene) -> List[go.Scatter]:
    traces: List[go.Scatter] = []
    for category in MarkerCategory:
        points = scene.markers.get(category, ())
        if not points:
            continue
        label = MARKER_LABELS[category]
        traces.append(
            go.Scatter(
                x=[p.x for p in points],
                y=[p.y for p in points],
                mode="markers",
                name=label,
                marker=dict(config.MARKER_STYLES[category.value]),
                hovertemplate=f"{label}<br>x=%{{x:.2f}}<br>y=%{{y:.2f}}<extra></extra>",
                showlegend=False,
            )
        )
    return traces


def guide_traces(guides: Sequence[Guide]) -> List[go.Scatter]:
    return [
        go.Scatter(
            x=[guide.start.x, guide.end.x],
            y=[guide.start.y, guide.end.y],
            mode="lines",
            name=guide.label or guide.category.value,
            line=dict(config.GUIDE_LINE_STYLES[guide.category.value]),
            hoverinfo="name",
            showlegend=False,
        )
        for guide in guides
    ]


def sketch_trace(points: Sequence[Point]) -> go.Scatter:
    return go.Scatter(
        x=[p.x for p in points],
        y=[p.y for p in points],
        mode="lines+markers",
        name="Sketch",
        line=dict(config.SKETCH_LINE_STYLE),
        marker=dict(color=config.SKETCH_LINE_STYLE["color"], size=5),
        hoverinfo="skip",
        showlegend=False,
    )


def build_figure(
    scene: PlotScene,
    *,
    uirevision: str = config.UI_REVISION,
    title: str = "",
    sketch: Optional[Sequence[Point]] = None,
) -> go.Figure:
    """Render ``scene``; a user ``sketch`` goes underneath so the solution stays on top."""
    fig = go.Figure(
        data=[
            *([sketch_trace(sketch)] if sketch else []),
            *guide_traces(scene.guides),
            *curve_traces(scene.segments),
            *marker_traces(scene),
        ]
    )
    fig.update_layout(
        height=560,
        margin=dict(l=36, r=16, t=32, b=32),
        xaxis=dict(
            title="x",
            range=list(scene.x_range),
            showgrid=True,
            zeroline=True,
            zerolinecolor=config.AXIS_LINE_STYLE["zerolinecolor"],
        ),
        yaxis=dict(
            title="y",
            range=list(scene.y_range),
            showgrid=True,
            zeroline=True,
            zerolinecolor=config.AXIS_LINE_STYLE["zerolinecolor"],
        ),
        showlegend=False,
        uirevision=uirevision,
    )
    if title:
        fig.update_layout(title=title)
    return fig
