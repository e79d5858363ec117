from __future__ import annotations

import logging

import streamlit as st

from ...config import settings
from ...errors import ExportFailure
from ...export import export_document
from ...state.store import ConfigurationStore
from ...ui_blocks import help_icon

logger = logging.getLogger("mazelink.ui.print")


def _base_url() -> str:
    # у streamlit нет location.origin; берём то, что дал пользователь
    return st.session_state.get("print_base_url") or "http://localhost:8501/"


def render(store: ConfigurationStore) -> None:
    """Печать: N страниц, на каждой свой лабиринт и ссылка."""
    st.header("Print")
    pages = st.number_input(
        "Pages",
        min_value=1,
        max_value=settings.MAX_PRINT_PAGES,
        value=settings.DEFAULT_PRINT_PAGES,
        step=1,
        help=help_icon("pages"),
    )
    st.text_input("Base URL", key="print_base_url", placeholder="http://localhost:8501/")

    if st.button("Build document"):
        try:
            with st.spinner("Генерим страницы..."):
                doc = export_document(store.configuration, int(pages), _base_url())
        except ExportFailure as e:
            st.error(f"Экспорт не удался: {e}")
            return
        st.session_state["__print_doc"] = doc

    doc = st.session_state.get("__print_doc")
    if doc:
        st.download_button("Download (HTML)", doc, "mazes.html", "text/html")
