"""QueryParamFragmentIO поверх st.query_params (подменяем словарём)."""

import pytest
import streamlit as st

from mazelink.fragment_io import MemoryFragmentIO, QueryParamFragmentIO
from mazelink.state.store import ConfigurationStore
from mazelink.state_models import Shape


@pytest.fixture
def query_params(monkeypatch):
    params = {}
    monkeypatch.setattr(st, "query_params", params)
    return params


def test_poll_detects_external_change(query_params) -> None:
    query_params["maze"] = "R10|GrowingTree|1"
    io = QueryParamFragmentIO()
    seen = []
    io.on_change(seen.append)

    io.poll()
    assert seen == []

    query_params["maze"] = "T5|Kruskal|9"
    io.poll()
    io.poll()
    assert seen == ["T5|Kruskal|9"]


def test_own_write_is_not_seen_again_by_poll(query_params) -> None:
    io = QueryParamFragmentIO()
    seen = []
    io.on_change(seen.append)

    io.write("S7|Kruskal|3")
    assert query_params["maze"] == "S7|Kruskal|3"
    io.write("S7|Kruskal|3")
    io.poll()
    assert seen == ["S7|Kruskal|3"]


def test_store_over_query_params(query_params, seeds) -> None:
    """Полный путь приложения: старт, локальная правка, ручная правка URL."""
    query_params["maze"] = "42"
    io = QueryParamFragmentIO()
    store = ConfigurationStore(io, seed_source=seeds)
    assert query_params["maze"] == "R42|GrowingTree|1000"

    changes = []
    store.subscribe(changes.append)
    store.increment()
    io.poll()
    assert query_params["maze"] == "R43|GrowingTree|1000"
    assert len(changes) == 1

    query_params["maze"] = "T6|Kruskal|77"
    io.poll()
    assert store.configuration.shape == Shape.theta(6)
    assert store.configuration.seed == 77
    assert len(changes) == 2
    io.poll()
    assert len(changes) == 2


def test_memory_io_write_notifies_only_on_change() -> None:
    io = MemoryFragmentIO("a")
    seen = []
    unsubscribe = io.on_change(seen.append)
    io.write("a")
    io.write("b")
    unsubscribe()
    io.write("c")
    assert seen == ["b"]
    assert io.writes == ["a", "b", "c"]
