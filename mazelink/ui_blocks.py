from __future__ import annotations

import streamlit as st

from .config_loader import load_css, load_help_text
from .services.maze_service import RenderedMaze
from .state_models import Configuration


def help_icon(key: str) -> str:
    """Короткая справка для контролов."""
    info = load_help_text()
    return info.get("help_text", {}).get(key, "")


def label(key: str) -> str:
    """Человеческое имя для enum-значения (Theta -> Circle)."""
    return load_help_text().get("labels", {}).get(key, key)


def inject_custom_css() -> None:
    """Подключить общий CSS один раз на запуск."""
    css = load_css()
    if not css:
        return
    st.markdown(f"<style>\n{css}\n</style>", unsafe_allow_html=True)


def maze_stats(rendered: RenderedMaze) -> dict:
    maze = rendered.maze
    return {
        "cells": maze.number_of_nodes(),
        "passages": maze.number_of_edges(),
        "dead_ends": sum(1 for _, d in maze.degree() if d == 1),
        "solution": max(0, len(rendered.solution) - 1),
    }


def render_maze_metrics(configuration: Configuration, rendered: RenderedMaze) -> None:
    """Карточка с цифрами по текущему лабиринту."""
    met = maze_stats(rendered)
    with st.container(border=True):
        k1, k2, k3, k4 = st.columns(4)
        k1.metric("Shape", label(configuration.shape.kind.value), configuration.shape.size, delta_color="off")
        k2.metric("Cells", met["cells"])
        k3.metric("Dead ends", met["dead_ends"])
        k4.metric("Solution length", met["solution"])
