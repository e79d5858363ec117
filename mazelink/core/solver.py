from __future__ import annotations

from typing import Dict, Hashable, List

import networkx as nx


def solve(maze: nx.Graph, start: Hashable, end: Hashable) -> List[Hashable]:
    """Путь от входа к выходу. В дереве он единственный."""
    if start == end:
        return [start]
    return nx.shortest_path(maze, start, end)


def distances(maze: nx.Graph, start: Hashable) -> Dict[Hashable, int]:
    """BFS-расстояния от входа, для заливки (Stain)."""
    return dict(nx.single_source_shortest_path_length(maze, start))
