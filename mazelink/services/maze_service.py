from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional

import networkx as nx
import plotly.graph_objects as go

from .. import codec
from ..config import settings
from ..core import generators, lattice, solver
from ..profiling import timeit
from ..seeds import SEED_BITS, seed_stream
from ..state_models import Configuration, Feature
from ..ui.plots.maze_figure import make_maze_figure

logger = logging.getLogger("mazelink.generator")


@dataclass
class RenderedMaze:
    """Результат генерации: фигура + то, из чего она собрана."""

    figure: go.Figure
    lattice: nx.Graph
    maze: nx.Graph
    solution: List[Hashable]
    distances: Optional[Dict[Hashable, int]]
    next_seed: int


class MazeService:
    """Генератор лабиринтов: конфигурация -> картинка. Детерминирован по сиду."""

    @staticmethod
    def canonicalize(configuration: Configuration) -> str:
        return codec.encode(configuration)

    @staticmethod
    @timeit("generate_maze")
    def generate(configuration: Configuration, height: int = settings.PLOT_HEIGHT) -> RenderedMaze:
        rng = seed_stream(configuration.seed)
        grid = lattice.build(configuration.shape)
        maze = generators.carve(grid, configuration.algorithm, rng)
        path = solver.solve(maze, grid.graph["start"], grid.graph["end"])
        dist = solver.distances(maze, grid.graph["start"]) if Feature.STAIN in configuration.features else None

        fig = make_maze_figure(
            grid,
            maze,
            colour=configuration.colour,
            stroke_width=configuration.stroke_width,
            solution=path if Feature.SOLVE in configuration.features else None,
            distances=dist,
            height=height,
        )
        # следующий сид из того же потока: печать страниц подряд
        next_seed = int(rng.integers(0, 2**SEED_BITS, dtype="uint64"))
        logger.debug(
            "generated %s: %d cells, path %d",
            codec.encode(configuration),
            grid.number_of_nodes(),
            len(path),
        )
        return RenderedMaze(
            figure=fig,
            lattice=grid,
            maze=maze,
            solution=path,
            distances=dist,
            next_seed=next_seed,
        )
