"""Настройки приложения.

Без pydantic и env-магии: если надо поменять дефолты — правь здесь.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Набор параметров по умолчанию для лабиринта и отрисовки."""

    # URL
    QUERY_PARAM: str = "maze"

    # Дефолтная конфигурация
    DEFAULT_MAZE_SIZE: int = 10
    DEFAULT_COLOUR: str = "EEEEEE"
    DEFAULT_STROKE_WIDTH: float = 8.0

    # Домены размеров (нижняя граница общая)
    MIN_SIZE: int = 2
    MAX_RECTILINEAR: int = 100
    MAX_THETA: int = 50
    MAX_SIGMA: int = 100

    # Визуал
    PLOT_HEIGHT: int = 800
    SLOW_CALL_MS: float = 1500.0
    CELL_SIZE: float = 1.0
    STAIN_A: str = "FFDC80"
    STAIN_B: str = "B9327D"
    SOLUTION: str = "8FE080"

    # Тета: кольцо 1 и правило удвоения
    THETA_FIRST_RING: int = 8
    THETA_MAX_ARC: float = 2.0

    # Growing tree: доля "newest" при выборе клетки
    GROWING_TREE_NEWEST: float = 0.5

    # Печать
    PRINT_STROKE_WIDTH: float = 2.0
    PRINT_COLOUR: str = "000000"
    DEFAULT_PRINT_PAGES: int = 4
    MAX_PRINT_PAGES: int = 50


settings = Settings()
