"""ConfigurationStore: mutations, fragment writes, reconciliation."""

import pytest

from mazelink import codec
from mazelink.fragment_io import MemoryFragmentIO
from mazelink.state.store import ConfigurationStore, normalize_colour
from mazelink.state_models import Algorithm, Feature, Shape, ShapeKind


def _store(fragment, seeds):
    io = MemoryFragmentIO(fragment)
    store = ConfigurationStore(io, seed_source=seeds)
    seen = []
    store.subscribe(seen.append)
    return io, store, seen


def test_canonical_fragment_is_left_alone(seeds) -> None:
    io, store, _ = _store("T7|Kruskal|1234", seeds)
    assert store.configuration.shape == Shape.theta(7)
    assert io.writes == []
    assert seeds.calls == 0


def test_legacy_fragment_is_rewritten_canonically(seeds) -> None:
    io, store, seen = _store("42", seeds)
    assert io.read() == "R42|GrowingTree|1000"
    assert store.last_written == io.read()
    assert seen == []


def test_mutation_writes_fragment_and_notifies_once(seeds) -> None:
    io, store, seen = _store("R10|GrowingTree|1", seeds)
    cfg = store.increment()
    assert cfg.shape == Shape.rectilinear(11)
    assert io.read() == "R11|GrowingTree|1"
    assert seen == [cfg]
    assert store.revision == 1


def test_no_loop_after_local_mutation(seeds) -> None:
    """Запись своего же фрагмента не должна ничего коммитить повторно."""
    io, store, seen = _store("R10|GrowingTree|1", seeds)
    store.set_shape_kind(ShapeKind.THETA)
    rev, n = store.revision, len(seen)

    decoded = codec.decode(codec.encode(store.configuration), seed_source=seeds)
    store.last_written = None  # даже без короткого пути по last_written
    assert store.reconcile(codec.encode(decoded)) is False
    assert store.reconcile(io.read()) is False
    assert store.revision == rev
    assert len(seen) == n


def test_external_navigation_is_applied(seeds) -> None:
    io, store, seen = _store("R10|GrowingTree|1", seeds)
    store.toggle_feature(Feature.STAIN)
    store.set_colour("#ff00ff")
    io.navigate("T7|Kruskal|1234")

    cfg = store.configuration
    assert cfg.shape == Shape.theta(7)
    assert cfg.algorithm is Algorithm.KRUSKAL
    assert cfg.seed == 1234
    # визуальные поля не теряются
    assert cfg.features == frozenset({Feature.STAIN})
    assert cfg.colour == "FF00FF"
    assert seen[-1] == cfg


def test_equivalent_non_canonical_navigation_is_not_a_change(seeds) -> None:
    io, store, seen = _store("T7|Kruskal|1234", seeds)
    io.navigate("T7|Kruskal|01234")
    assert seen == []
    assert store.revision == 0
    assert io.read() == "T7|Kruskal|1234"


def test_navigation_to_garbage_converges(seeds) -> None:
    io, store, seen = _store("S30|Kruskal|5", seeds)
    io.navigate("garbage|||")
    cfg = store.configuration
    assert cfg.shape == Shape.rectilinear(10)
    assert cfg.algorithm is Algorithm.GROWING_TREE
    assert cfg.seed == 1000
    assert io.read() == "R10|GrowingTree|1000"
    assert len(seen) == 1


def test_shape_switch_preserves_scale(seeds) -> None:
    io, store, _ = _store("R20|GrowingTree|1", seeds)
    assert store.set_shape_kind(ShapeKind.THETA).shape == Shape.theta(10)
    assert store.set_shape_kind(ShapeKind.SIGMA).shape == Shape.sigma(20)
    assert io.read() == "S20|GrowingTree|1"


def test_noop_mutation_does_not_notify(seeds) -> None:
    io, store, seen = _store("R100|GrowingTree|1", seeds)
    store.increment()
    store.set_algorithm(Algorithm.GROWING_TREE)
    store.remove_feature(Feature.SOLVE)
    assert seen == []
    assert store.revision == 0


def test_set_size_clamps(seeds) -> None:
    _, store, _ = _store("T10|GrowingTree|1", seeds)
    assert store.set_size(500).shape == Shape.theta(50)
    assert store.set_size(0).shape == Shape.theta(2)
    assert store.decrement().shape == Shape.theta(2)


def test_new_seed_and_algorithm(seeds) -> None:
    io, store, _ = _store("R10|GrowingTree|1", seeds)
    store.new_seed()
    store.set_algorithm(Algorithm.KRUSKAL)
    assert io.read() == "R10|Kruskal|1000"


def test_visual_fields_do_not_touch_the_fragment(seeds) -> None:
    io, store, seen = _store("R10|GrowingTree|1", seeds)
    store.add_feature(Feature.SOLVE)
    store.set_stroke_width(2)
    store.set_colour("000000")
    assert io.read() == "R10|GrowingTree|1"
    assert len(seen) == 3
    assert store.configuration.stroke_width == 2.0


def test_toggle_twice_restores(seeds) -> None:
    _, store, _ = _store("R10|GrowingTree|1", seeds)
    before = store.configuration
    store.toggle_feature(Feature.SOLVE)
    store.toggle_feature(Feature.SOLVE)
    assert store.configuration == before


def test_bad_visual_values_raise(seeds) -> None:
    _, store, _ = _store("R10|GrowingTree|1", seeds)
    with pytest.raises(ValueError):
        store.set_colour("zzzzzz")
    with pytest.raises(ValueError):
        store.set_stroke_width(0)
    assert normalize_colour("#a0B1c2") == "A0B1C2"


def test_unsubscribe_and_close(seeds) -> None:
    io, store, seen = _store("R10|GrowingTree|1", seeds)
    other = []
    unsubscribe = store.subscribe(other.append)
    unsubscribe()
    store.increment()
    assert other == []
    assert len(seen) == 1

    store.close()
    io.navigate("T5|Kruskal|9")
    assert store.configuration.shape == Shape.rectilinear(11)


def test_navigation_to_overlong_seed_does_not_crash(seeds) -> None:
    io, store, seen = _store("R10|GrowingTree|1", seeds)
    io.navigate("T5|Kruskal|" + "9" * 5000)
    assert store.configuration.shape == Shape.theta(5)
    assert store.configuration.seed == 1000
    assert io.read() == "T5|Kruskal|1000"
    assert len(seen) == 1
