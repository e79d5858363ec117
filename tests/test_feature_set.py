"""FeatureSet: add/remove/toggle."""

from itertools import chain, combinations

from mazelink import feature_set
from mazelink.state_models import Feature


def _all_sets():
    items = list(Feature)
    return [frozenset(c) for c in chain.from_iterable(combinations(items, r) for r in range(len(items) + 1))]


def test_toggle_is_involution() -> None:
    for s in _all_sets():
        for f in Feature:
            assert feature_set.toggle(feature_set.toggle(s, f), f) == s


def test_add_and_remove_are_idempotent() -> None:
    s = feature_set.add(frozenset(), Feature.STAIN)
    assert feature_set.add(s, Feature.STAIN) == s == frozenset({Feature.STAIN})
    empty = feature_set.remove(s, Feature.STAIN)
    assert feature_set.remove(empty, Feature.STAIN) == empty == frozenset()


def test_make_drops_duplicates_and_order() -> None:
    a = feature_set.make(["Solve", "Stain", "Solve"])
    b = feature_set.make([Feature.STAIN, Feature.SOLVE])
    assert a == b
    assert feature_set.ordered(a) == [Feature.STAIN, Feature.SOLVE]
