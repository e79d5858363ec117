"""Алгоритмы прокладки ходов.

Both take a lattice and a numpy ``Generator`` and return the carved maze as
a spanning tree of the lattice (``nx.Graph`` with the same nodes, edges =
open passages). The lattice itself is never modified.
"""

from __future__ import annotations

from typing import Callable, Dict

import networkx as nx
import numpy as np

from ..config import settings
from ..state_models import Algorithm


def kruskal(lattice: nx.Graph, rng: np.random.Generator) -> nx.Graph:
    """Random weights + Kruskal MST = uniform-ish random spanning tree."""
    weighted = nx.Graph()
    weighted.add_nodes_from(lattice.nodes())
    weights = rng.random(lattice.number_of_edges())
    for (u, v), w in zip(lattice.edges(), weights):
        weighted.add_edge(u, v, w=float(w))
    tree = nx.minimum_spanning_tree(weighted, weight="w", algorithm="kruskal")
    for _, _, d in tree.edges(data=True):
        d.pop("w", None)
    return tree


def growing_tree(lattice: nx.Graph, rng: np.random.Generator, newest: float = settings.GROWING_TREE_NEWEST) -> nx.Graph:
    """Growing tree: с вероятностью ``newest`` берём последнюю клетку, иначе случайную."""
    tree = nx.Graph()
    nodes = list(lattice.nodes())
    if not nodes:
        return tree
    tree.add_nodes_from(nodes)

    start = nodes[int(rng.integers(len(nodes)))]
    visited = {start}
    active = [start]
    while active:
        idx = len(active) - 1 if rng.random() < newest else int(rng.integers(len(active)))
        cell = active[idx]
        fresh = [n for n in lattice.neighbors(cell) if n not in visited]
        if not fresh:
            active.pop(idx)
            continue
        nxt = fresh[int(rng.integers(len(fresh)))]
        tree.add_edge(cell, nxt)
        visited.add(nxt)
        active.append(nxt)
    return tree


ALGORITHMS: Dict[Algorithm, Callable[[nx.Graph, np.random.Generator], nx.Graph]] = {
    Algorithm.KRUSKAL: kruskal,
    Algorithm.GROWING_TREE: growing_tree,
}


def carve(lattice: nx.Graph, algorithm: Algorithm, rng: np.random.Generator) -> nx.Graph:
    return ALGORITHMS[Algorithm(algorithm)](lattice, rng)
