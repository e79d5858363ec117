from __future__ import annotations

from typing import Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

import networkx as nx
import plotly.colors
import plotly.graph_objects as go

from ...config import settings

Point = Tuple[float, float]

STAIN_BINS = 16


def _hex(colour: str) -> str:
    return "#" + colour.lstrip("#")


def _polylines_xy(lines: Iterable[Sequence[Point]]) -> Tuple[List[Optional[float]], List[Optional[float]]]:
    """Склеиваем все отрезки в один trace через None, плотли так в разы быстрее."""
    xs: List[Optional[float]] = []
    ys: List[Optional[float]] = []
    for line in lines:
        for x, y in line:
            xs.append(float(x))
            ys.append(float(y))
        xs.append(None)
        ys.append(None)
    return xs, ys


def stain_colours(n: int) -> List[str]:
    a = plotly.colors.hex_to_rgb(_hex(settings.STAIN_A))
    b = plotly.colors.hex_to_rgb(_hex(settings.STAIN_B))
    if n <= 1:
        return [plotly.colors.label_rgb(a)]
    return [plotly.colors.label_rgb(tuple(int(round(c)) for c in t)) for t in plotly.colors.n_colors(a, b, n)]


def _stain_traces(lattice: nx.Graph, dist: Dict[Hashable, int]) -> List[go.Scatter]:
    if not dist:
        return []
    far = max(dist.values()) or 1
    bins: Dict[int, List[Sequence[Point]]] = {}
    for cell, d in dist.items():
        b = min(STAIN_BINS - 1, int(d * STAIN_BINS / (far + 1)))
        poly = list(lattice.nodes[cell]["polygon"])
        bins.setdefault(b, []).append(poly + [poly[0]])
    colours = stain_colours(STAIN_BINS)
    traces = []
    for b in sorted(bins):
        xs, ys = _polylines_xy(bins[b])
        traces.append(
            go.Scatter(
                x=xs,
                y=ys,
                mode="lines",
                fill="toself",
                fillcolor=colours[b],
                line=dict(width=0, color=colours[b]),
                hoverinfo="skip",
                showlegend=False,
            )
        )
    return traces


def make_maze_figure(
    lattice: nx.Graph,
    maze: nx.Graph,
    *,
    colour: str,
    stroke_width: float,
    solution: Optional[List[Hashable]] = None,
    distances: Optional[Dict[Hashable, int]] = None,
    height: int = settings.PLOT_HEIGHT,
) -> go.Figure:
    """Нарисовать лабиринт: заливка (опц.), стены, путь (опц.)."""
    fig = go.Figure()

    if distances:
        for tr in _stain_traces(lattice, distances):
            fig.add_trace(tr)

    walls = [d["wall"] for u, v, d in lattice.edges(data=True) if not maze.has_edge(u, v)]
    walls.extend(lattice.graph.get("boundary", []))
    wx, wy = _polylines_xy(walls)
    fig.add_trace(
        go.Scatter(
            x=wx,
            y=wy,
            mode="lines",
            line=dict(color=_hex(colour), width=max(1.0, stroke_width / 2.0)),
            hoverinfo="skip",
            showlegend=False,
            name="walls",
        )
    )

    if solution:
        pts = [lattice.nodes[c]["pos"] for c in solution]
        sx, sy = _polylines_xy([pts])
        fig.add_trace(
            go.Scatter(
                x=sx,
                y=sy,
                mode="lines",
                line=dict(color=_hex(settings.SOLUTION), width=max(1.0, stroke_width)),
                hoverinfo="skip",
                showlegend=False,
                name="solution",
            )
        )

    for key, symbol in (("start", "circle"), ("end", "star")):
        cell = lattice.graph.get(key)
        if cell is None:
            continue
        x, y = lattice.nodes[cell]["pos"]
        fig.add_trace(
            go.Scatter(
                x=[x],
                y=[y],
                mode="markers",
                marker=dict(symbol=symbol, size=10, color=_hex(settings.SOLUTION)),
                hoverinfo="skip",
                showlegend=False,
                name=key,
            )
        )

    fig.update_layout(
        height=height,
        margin=dict(l=10, r=10, t=10, b=10),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
    )
    fig.update_xaxes(visible=False)
    # одинаковый масштаб по осям, иначе круги становятся овалами
    fig.update_yaxes(visible=False, scaleanchor="x", scaleratio=1)
    return fig
