from __future__ import annotations

import logging

import streamlit as st

from ..fragment_io import QueryParamFragmentIO
from ..render_bridge import RenderBridge
from .store import ConfigurationStore

logger = logging.getLogger("mazelink.session")


class SessionManager:
    """Держит store + bridge в session_state (один набор на вкладку)."""

    def ensure_initialized(self) -> None:
        if "fragment_io" not in st.session_state:
            st.session_state["fragment_io"] = QueryParamFragmentIO()
        if "store" not in st.session_state:
            st.session_state["store"] = ConfigurationStore(st.session_state["fragment_io"])
        if "bridge" not in st.session_state:
            bridge = RenderBridge()
            st.session_state["store"].subscribe(bridge.refresh)
            bridge.refresh(st.session_state["store"].configuration)
            st.session_state["bridge"] = bridge

        self.fragment_io = st.session_state["fragment_io"]
        self.store = st.session_state["store"]
        self.bridge = st.session_state["bridge"]

        # новый прогон скрипта = возможно, URL поменяли руками / кнопкой "назад"
        self.fragment_io.poll()

    def reset(self) -> None:
        store = st.session_state.pop("store", None)
        if store is not None:
            store.close()
        st.session_state.pop("bridge", None)
        logger.info("session reset")


ctx = SessionManager()
