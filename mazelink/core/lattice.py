"""Решётки клеток для трёх типов фигур.

A lattice is an ``nx.Graph`` of cells. Every node carries ``pos`` (centre)
and ``polygon`` (outline, used for stain fills); every edge is a potential
passage and carries ``wall``, the polyline drawn when the passage stays
closed. ``G.graph`` holds ``boundary`` (outer polylines), ``start`` and
``end`` cells.
"""

from __future__ import annotations

import math
from typing import Dict, List, Tuple

import networkx as nx

from ..config import settings
from ..state_models import Shape, ShapeKind

Point = Tuple[float, float]

SQRT3 = math.sqrt(3.0)


def _key(p: Point) -> Tuple[float, float]:
    return (round(p[0], 6), round(p[1], 6))


def _polygon_lattice(cells: Dict, polygons: Dict, normals: List[float], spacing: float) -> nx.Graph:
    """Общий построитель для квадратов и шестиугольников.

    Edge ``k`` of every polygon runs from vertex ``k`` to ``k+1`` and faces
    ``normals[k]`` degrees; the neighbour across it sits ``spacing`` away.
    """
    G = nx.Graph()
    by_centre = {_key(pos): cell for cell, pos in cells.items()}
    for cell, pos in cells.items():
        G.add_node(cell, pos=pos, polygon=polygons[cell])

    boundary: List[List[Point]] = []
    for cell, pos in cells.items():
        poly = polygons[cell]
        for k, angle in enumerate(normals):
            a = math.radians(angle)
            other = by_centre.get(_key((pos[0] + spacing * math.cos(a), pos[1] + spacing * math.sin(a))))
            segment = [poly[k], poly[(k + 1) % len(poly)]]
            if other is None:
                boundary.append(segment)
            elif not G.has_edge(cell, other):
                G.add_edge(cell, other, wall=segment)
    G.graph["boundary"] = boundary
    return G


def rectilinear(width: int, height: int) -> nx.Graph:
    s = settings.CELL_SIZE
    cells: Dict = {}
    polygons: Dict = {}
    for y in range(height):
        for x in range(width):
            # y растёт вниз, рисуем с минусом
            cx, cy = (x + 0.5) * s, -(y + 0.5) * s
            cells[(x, y)] = (cx, cy)
            h = s / 2
            # вершины против часовой, начиная с правого нижнего: рёбра смотрят на 0, 90, 180, 270
            polygons[(x, y)] = [(cx + h, cy - h), (cx + h, cy + h), (cx - h, cy + h), (cx - h, cy - h)]
    G = _polygon_lattice(cells, polygons, [0.0, 90.0, 180.0, 270.0], s)
    G.graph["start"] = (0, 0)
    G.graph["end"] = (width - 1, height - 1)
    return G


def sigma(size: int) -> nx.Graph:
    """Flat-top hexagons, odd columns shifted half a cell down."""
    r = settings.CELL_SIZE
    cells: Dict = {}
    polygons: Dict = {}
    for x in range(size):
        for y in range(size):
            cx = 1.5 * r * x
            cy = -SQRT3 * r * (y + 0.5 * (x % 2))
            cells[(x, y)] = (cx, cy)
            polygons[(x, y)] = [
                (cx + r * math.cos(math.radians(60 * k)), cy + r * math.sin(math.radians(60 * k))) for k in range(6)
            ]
    G = _polygon_lattice(cells, polygons, [30.0 + 60.0 * k for k in range(6)], SQRT3 * r)
    G.graph["start"] = (0, 0)
    G.graph["end"] = (size - 1, size - 1)
    return G


def ring_sizes(rings: int) -> List[int]:
    """Число клеток в каждом кольце: центр 1, потом удвоение по длине дуги."""
    sizes = [1]
    for i in range(1, rings):
        if i == 1:
            sizes.append(settings.THETA_FIRST_RING)
            continue
        prev = sizes[-1]
        sizes.append(prev * 2 if (2 * math.pi * i / prev) > settings.THETA_MAX_ARC else prev)
    return sizes


def _arc(radius: float, a0: float, a1: float, steps: int = 8) -> List[Point]:
    return [
        (radius * math.cos(a0 + (a1 - a0) * t / steps), radius * math.sin(a0 + (a1 - a0) * t / steps))
        for t in range(steps + 1)
    ]


def theta(rings: int) -> nx.Graph:
    """Concentric rings around a single centre cell ``(0, 0)``."""
    s = settings.CELL_SIZE
    sizes = ring_sizes(rings)
    G = nx.Graph()
    G.add_node((0, 0), pos=(0.0, 0.0), polygon=_arc(s, 0.0, 2 * math.pi, 32)[:-1])

    for ring in range(1, rings):
        n = sizes[ring]
        step = 2 * math.pi / n
        r0, r1 = ring * s, (ring + 1) * s
        for col in range(n):
            a0, a1 = col * step, (col + 1) * step
            mid = (a0 + a1) / 2
            rm = (r0 + r1) / 2
            polygon = _arc(r0, a0, a1) + _arc(r1, a1, a0)
            G.add_node((ring, col), pos=(rm * math.cos(mid), rm * math.sin(mid)), polygon=polygon)

    for ring in range(1, rings):
        n = sizes[ring]
        step = 2 * math.pi / n
        r0, r1 = ring * s, (ring + 1) * s
        for col in range(n):
            # сосед по часовой: радиальная стенка на углу (col+1)*step
            nxt = (ring, (col + 1) % n)
            if nxt != (ring, col) and not G.has_edge((ring, col), nxt):
                a = (col + 1) * step
                G.add_edge((ring, col), nxt, wall=[(r0 * math.cos(a), r0 * math.sin(a)), (r1 * math.cos(a), r1 * math.sin(a))])
            if ring == 1:
                parent = (0, 0)
            elif sizes[ring - 1] < n:
                parent = (ring - 1, col // 2)
            else:
                parent = (ring - 1, col)
            G.add_edge((ring, col), parent, wall=_arc(r0, col * step, (col + 1) * step))

    G.graph["boundary"] = [_arc(rings * s, 0.0, 2 * math.pi, 64)]
    G.graph["start"] = (0, 0)
    G.graph["end"] = (rings - 1, 0) if rings > 1 else (0, 0)
    return G


def build(shape: Shape) -> nx.Graph:
    if shape.kind is ShapeKind.RECTILINEAR:
        return rectilinear(shape.width, shape.height)
    if shape.kind is ShapeKind.THETA:
        return theta(shape.rings)
    if shape.kind is ShapeKind.SIGMA:
        return sigma(shape.rings)
    raise ValueError(f"unknown shape kind: {shape.kind!r}")
