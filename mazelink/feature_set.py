"""Set-of-enum toggles. Порядок не важен, дубликатов не бывает."""

from __future__ import annotations

from typing import FrozenSet, Iterable

from .state_models import Feature

FeatureSet = FrozenSet[Feature]


def make(features: Iterable[Feature] = ()) -> FeatureSet:
    return frozenset(Feature(f) for f in features)


def add(features: FeatureSet, feature: Feature) -> FeatureSet:
    return frozenset(features) | {feature}


def remove(features: FeatureSet, feature: Feature) -> FeatureSet:
    return frozenset(features) - {feature}


def toggle(features: FeatureSet, feature: Feature) -> FeatureSet:
    if feature in features:
        return remove(features, feature)
    return add(features, feature)


def ordered(features: FeatureSet) -> list[Feature]:
    """Stable order for drawing and display (declaration order)."""
    return [f for f in Feature if f in features]
