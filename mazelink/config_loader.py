"""Загрузка конфигов и статических ассетов.

Здесь живёт то, что не должно размазываться по app.py/ui_blocks.py:
- подписи и справка для контролов (yaml)
- общий CSS (assets/style.css)

Streamlit-кэш держит это в памяти между перерендерами.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict

import streamlit as st
import yaml


def _project_root() -> Path:
    # mazelink/.. -> корень репо
    return Path(__file__).resolve().parents[1]


def parse_help_text(text: str) -> Dict[str, Dict[str, str]]:
    """Разобрать yaml со справкой; ожидаем {"labels": {...}, "help_text": {...}}."""
    data = yaml.safe_load(text) or {}
    return {
        "labels": {str(k): str(v) for k, v in (data.get("labels", {}) or {}).items()},
        "help_text": {str(k): str(v) for k, v in (data.get("help_text", {}) or {}).items()},
    }


@st.cache_data(show_spinner=False)
def load_help_text() -> Dict[str, Dict[str, str]]:
    """Прочитать config/help_text.yaml."""
    path = _project_root() / "config" / "help_text.yaml"
    if not path.exists():
        return {"labels": {}, "help_text": {}}
    return parse_help_text(path.read_text(encoding="utf-8"))


@st.cache_data(show_spinner=False)
def load_css() -> str:
    """Прочитать assets/style.css."""
    path = _project_root() / "assets" / "style.css"
    return path.read_text(encoding="utf-8") if path.exists() else ""
