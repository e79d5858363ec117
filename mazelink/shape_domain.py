"""Числовые домены фигур и переходы между ними."""

from __future__ import annotations

import math
from typing import Callable

from .config import settings
from .state_models import Shape, ShapeKind

_MAX_BY_KIND = {
    ShapeKind.RECTILINEAR: settings.MAX_RECTILINEAR,
    ShapeKind.THETA: settings.MAX_THETA,
    ShapeKind.SIGMA: settings.MAX_SIGMA,
}


def domain(kind: ShapeKind) -> tuple[int, int]:
    """(min, max) inclusive for a shape kind."""
    return settings.MIN_SIZE, _MAX_BY_KIND[kind]


def clamp(kind: ShapeKind, value: float) -> int:
    """Floor, then bound into the kind's domain."""
    lo, hi = domain(kind)
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"size must be finite, got {value!r}")
    return int(math.floor(max(lo, min(hi, value))))


def convert(shape: Shape, target: ShapeKind) -> Shape:
    """Сменить тип фигуры, сохранив примерный визуальный масштаб.

    Из Theta размер умножается на 2, в Theta делится пополам (floor).
    Rectilinear <-> Sigma: значение как есть, домены совпадают.
    """
    if shape.kind is target:
        return shape
    size = shape.size
    if shape.kind is ShapeKind.THETA:
        size = size * 2
    elif target is ShapeKind.THETA:
        size = size // 2
    return Shape.of_kind(target, clamp(target, size))


def adjust_size(shape: Shape, by: Callable[[int], float]) -> Shape:
    """Apply ``by`` to the primary size and clamp into the same kind."""
    return Shape.of_kind(shape.kind, clamp(shape.kind, by(shape.size)))
