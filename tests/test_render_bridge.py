"""RenderBridge: caching, failures, stale background renders."""

from concurrent.futures import Future

import pytest

from mazelink import codec
from mazelink.errors import RenderFailure
from mazelink.fragment_io import MemoryFragmentIO
from mazelink.render_bridge import RenderBridge
from mazelink.state.store import ConfigurationStore
from mazelink.state_models import Algorithm, Configuration, Shape


def _cfg(seed=1, size=10):
    return Configuration(algorithm=Algorithm.KRUSKAL, seed=seed, shape=Shape.rectilinear(size))


class ManualExecutor:
    """Executor, который запускает задачи только по команде."""

    def __init__(self):
        self.jobs = []

    def submit(self, fn):
        fut = Future()
        self.jobs.append((fn, fut))
        return fut

    def run(self, index):
        fn, fut = self.jobs[index]
        try:
            fut.set_result(fn())
        except Exception as exc:
            fut.set_exception(exc)
        return fut


def test_render_returns_artifact_and_canonical_hash() -> None:
    bridge = RenderBridge(generate=lambda c: ("maze", c.seed))
    result = bridge.render(_cfg(seed=5))
    assert result.artifact == ("maze", 5)
    assert result.canonical_hash == codec.encode(_cfg(seed=5))
    assert bridge.last_result is result


def test_failure_keeps_previous_result() -> None:
    def generate(c):
        if c.seed == 2:
            raise RuntimeError("boom")
        return c.seed

    bridge = RenderBridge(generate=generate)
    good = bridge.render(_cfg(seed=1))
    with pytest.raises(RenderFailure):
        bridge.render(_cfg(seed=2))
    assert bridge.last_result is good
    assert bridge.artifact == 1


def test_refresh_records_error_instead_of_raising() -> None:
    bridge = RenderBridge(generate=lambda c: 1 / 0)
    assert bridge.refresh(_cfg()) is None
    assert isinstance(bridge.last_error, RenderFailure)
    assert bridge.last_result is None


def test_stale_background_result_is_discarded() -> None:
    bridge = RenderBridge(generate=lambda c: c.seed)
    ex = ManualExecutor()
    bridge.submit(_cfg(seed=1), ex)
    bridge.submit(_cfg(seed=2), ex)

    ex.run(1)
    assert bridge.artifact == 2
    old = ex.run(0)
    assert old.result().artifact == 1  # результат отдан, но не принят
    assert bridge.artifact == 2


def test_background_failure_surfaces_on_future() -> None:
    bridge = RenderBridge(generate=lambda c: 1 / 0)
    ex = ManualExecutor()
    fut = bridge.submit(_cfg(), ex)
    ex.run(0)
    with pytest.raises(RenderFailure):
        fut.result()
    assert isinstance(bridge.last_error, RenderFailure)


def test_store_drives_bridge() -> None:
    io = MemoryFragmentIO("R10|Kruskal|1")
    store = ConfigurationStore(io, seed_source=lambda: 42)
    calls = []
    bridge = RenderBridge(generate=lambda c: calls.append(codec.encode(c)) or len(calls))
    store.subscribe(bridge.refresh)

    store.increment()
    io.navigate("T5|Kruskal|9")
    io.navigate("T5|Kruskal|9")
    assert calls == ["R11|Kruskal|1", "T5|Kruskal|9"]
    assert bridge.last_result.canonical_hash == "T5|Kruskal|9"
