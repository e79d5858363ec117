"""Typed configuration models shared by the codec, the store and the UI."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, FrozenSet, Optional

from .config import settings


class Algorithm(str, Enum):
    KRUSKAL = "Kruskal"
    GROWING_TREE = "GrowingTree"


class Feature(str, Enum):
    STAIN = "Stain"
    SOLVE = "Solve"


class ShapeKind(str, Enum):
    RECTILINEAR = "Rectilinear"
    THETA = "Theta"
    SIGMA = "Sigma"

    @property
    def letter(self) -> str:
        """Discriminator character used in the fragment."""
        return self.value[0]

    @classmethod
    def from_letter(cls, letter: str) -> Optional["ShapeKind"]:
        for kind in cls:
            if kind.letter == letter:
                return kind
        return None


@dataclass(frozen=True)
class Shape:
    """Tagged shape variant.

    Rectilinear uses ``width``/``height``; Theta and Sigma use ``rings``.
    The unused payload fields stay ``None`` so two shapes of different kinds
    never compare equal.
    """

    kind: ShapeKind
    width: Optional[int] = None
    height: Optional[int] = None
    rings: Optional[int] = None

    @classmethod
    def rectilinear(cls, width: int, height: int | None = None) -> "Shape":
        return cls(ShapeKind.RECTILINEAR, width=int(width), height=int(width if height is None else height))

    @classmethod
    def theta(cls, rings: int) -> "Shape":
        return cls(ShapeKind.THETA, rings=int(rings))

    @classmethod
    def sigma(cls, rings: int) -> "Shape":
        return cls(ShapeKind.SIGMA, rings=int(rings))

    @classmethod
    def of_kind(cls, kind: ShapeKind, size: int) -> "Shape":
        if kind is ShapeKind.RECTILINEAR:
            return cls.rectilinear(size)
        if kind is ShapeKind.THETA:
            return cls.theta(size)
        if kind is ShapeKind.SIGMA:
            return cls.sigma(size)
        raise ValueError(f"unknown shape kind: {kind!r}")

    @property
    def size(self) -> int:
        """Primary size value (width for Rectilinear, rings otherwise)."""
        if self.kind is ShapeKind.RECTILINEAR:
            return int(self.width)
        return int(self.rings)

    def same_as(self, other: "Shape") -> bool:
        """Tag + primary size equality, the comparison used for URL sync."""
        return self.kind is other.kind and self.size == other.size

    def label(self) -> str:
        if self.kind is ShapeKind.RECTILINEAR:
            return f"Rectilinear {self.width}x{self.height}"
        return f"{self.kind.value} {self.rings}"


@dataclass(frozen=True)
class Configuration:
    """Полная, всегда валидная конфигурация лабиринта."""

    algorithm: Algorithm
    seed: int
    shape: Shape
    colour: str = settings.DEFAULT_COLOUR
    features: FrozenSet[Feature] = field(default_factory=frozenset)
    stroke_width: float = settings.DEFAULT_STROKE_WIDTH

    def evolve(self, **changes) -> "Configuration":
        return replace(self, **changes)


def default_configuration(seed_source: Callable[[], int]) -> Configuration:
    """Rectilinear 10x10, GrowingTree, fresh seed, no features."""
    return Configuration(
        algorithm=Algorithm.GROWING_TREE,
        seed=int(seed_source()),
        shape=Shape.rectilinear(settings.DEFAULT_MAZE_SIZE),
    )


def url_fields_equal(a: Configuration, b: Configuration) -> bool:
    """Compare only what the fragment carries: shape, algorithm, seed."""
    return a.seed == b.seed and a.algorithm is b.algorithm and a.shape.same_as(b.shape)
