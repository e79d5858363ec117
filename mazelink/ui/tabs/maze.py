from __future__ import annotations

import streamlit as st

from ... import codec
from ...config import settings
from ...render_bridge import RenderBridge
from ...state.store import ConfigurationStore
from ...state_models import Algorithm, Feature, ShapeKind
from ...ui_blocks import help_icon, label, render_maze_metrics

# ключи виджетов; значения выставляются из store перед отрисовкой
W_SIZE = "w_size"
W_SHAPE = "w_shape"
W_ALGO = "w_algorithm"
W_COLOUR = "w_colour"
W_FEATURE = "w_feature_{}"


def sync_widgets(store: ConfigurationStore) -> None:
    """Store -> session_state. Иначе после навигации виджеты показывают старое."""
    cfg = store.configuration
    st.session_state[W_SIZE] = cfg.shape.size
    st.session_state[W_SHAPE] = cfg.shape.kind
    st.session_state[W_ALGO] = cfg.algorithm
    st.session_state[W_COLOUR] = "#" + cfg.colour
    for f in Feature:
        st.session_state[W_FEATURE.format(f.value)] = f in cfg.features


def render_controls(store: ConfigurationStore) -> None:
    sync_widgets(store)

    st.subheader("Size")
    c1, c2, c3 = st.columns([1, 3, 1])
    c1.button("−", on_click=store.decrement, use_container_width=True)
    c2.number_input(
        "Size",
        min_value=settings.MIN_SIZE,
        step=1,
        key=W_SIZE,
        label_visibility="collapsed",
        help=help_icon("size"),
        on_change=lambda: store.set_size(st.session_state[W_SIZE]),
    )
    c3.button("+", on_click=store.increment, use_container_width=True)

    st.subheader("Shape")
    st.radio(
        "Shape",
        list(ShapeKind),
        key=W_SHAPE,
        format_func=lambda k: label(k.value),
        horizontal=True,
        label_visibility="collapsed",
        help=help_icon("shape"),
        on_change=lambda: store.set_shape_kind(st.session_state[W_SHAPE]),
    )

    st.subheader("Algorithm")
    st.radio(
        "Algorithm",
        [Algorithm.GROWING_TREE, Algorithm.KRUSKAL],
        key=W_ALGO,
        format_func=lambda a: label(a.value),
        horizontal=True,
        label_visibility="collapsed",
        help=help_icon("algorithm"),
        on_change=lambda: store.set_algorithm(st.session_state[W_ALGO]),
    )

    st.subheader("Look")
    for f in Feature:
        st.checkbox(
            label(f.value),
            key=W_FEATURE.format(f.value),
            on_change=store.toggle_feature,
            args=(f,),
        )
    st.color_picker(
        "Colour",
        key=W_COLOUR,
        help=help_icon("colour"),
        on_change=lambda: store.set_colour(st.session_state[W_COLOUR]),
    )


def render(store: ConfigurationStore, bridge: RenderBridge) -> None:
    """Основная вкладка: лабиринт + ссылка."""
    if bridge.last_error is not None:
        st.error(f"Не получилось сгенерировать лабиринт: {bridge.last_error}")

    result = bridge.last_result
    if result is None:
        st.info("Лабиринта пока нет.")
    else:
        st.plotly_chart(result.artifact.figure, use_container_width=True, config={"displayModeBar": False})
        render_maze_metrics(result.configuration, result.artifact)

    st.button("🎲 Refresh", on_click=store.new_seed, help=help_icon("refresh"), type="primary")

    with st.expander("🔗 Share", expanded=False):
        st.caption(help_icon("share"))
        st.code(f"?{settings.QUERY_PARAM}={codec.encode(store.configuration)}", language=None)
