from __future__ import annotations

import logging
from pathlib import Path

import streamlit as st

# 1) Config & Logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("mazelink")

try:
    _logdir = Path(__file__).resolve().parent / "logs"
    _logdir.mkdir(parents=True, exist_ok=True)
    _fh = logging.FileHandler(_logdir / "mazelink.log", encoding="utf-8")
    _fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(_fh)
except OSError as e:
    # read-only FS и т.п.: живём с консолью
    logger.warning("file logging disabled: %s", e)

st.set_page_config(
    page_title="Generate Mazes",
    layout="wide",
    page_icon="🌀",
    initial_sidebar_state="expanded",
)
st.title("Generate Mazes")

# 2) Imports from modular architecture
from mazelink.state.session import ctx
from mazelink.ui_blocks import inject_custom_css

# Tabs
from mazelink.ui.tabs import maze as tab_maze
from mazelink.ui.tabs import printing as tab_printing

# 3) Init
inject_custom_css()
ctx.ensure_initialized()
store = ctx.store
bridge = ctx.bridge


# ============================================================
# 4) SIDEBAR
# ============================================================
with st.sidebar:
    st.title("🎛️ Maze")
    tab_maze.render_controls(store)

    st.markdown("---")
    if st.button("🗑️ Reset", help="Сбросить сессию (ссылка в адресной строке остаётся)"):
        ctx.reset()
        st.rerun()


# ============================================================
# 5) MAIN
# ============================================================
t_maze, t_print = st.tabs(["Maze", "Print"])
with t_maze:
    tab_maze.render(store, bridge)
with t_print:
    tab_printing.render(store)
