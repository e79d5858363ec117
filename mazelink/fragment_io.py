"""Доступ к фрагменту навигации как к инъецируемой зависимости.

The store never touches the address bar directly: it reads, writes and
listens through a :class:`FragmentIO`. Tests use :class:`MemoryFragmentIO`,
the Streamlit app uses :class:`QueryParamFragmentIO`.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Protocol

import streamlit as st

from .config import settings

logger = logging.getLogger("mazelink.fragment")

ChangeCallback = Callable[[str], None]
Unsubscribe = Callable[[], None]


class FragmentIO(Protocol):
    def read(self) -> str: ...

    def write(self, fragment: str) -> None: ...

    def on_change(self, callback: ChangeCallback) -> Unsubscribe: ...


class _Listeners:
    """Общая обвязка для списка подписчиков."""

    def __init__(self) -> None:
        self._callbacks: List[ChangeCallback] = []

    def on_change(self, callback: ChangeCallback) -> Unsubscribe:
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe

    def _emit(self, fragment: str) -> None:
        # копия: колбэк может отписаться прямо во время рассылки
        for callback in list(self._callbacks):
            callback(fragment)


class MemoryFragmentIO(_Listeners):
    """In-process fragment, behaves like ``location.hash``.

    ``write`` notifies listeners when the value actually changes, the same
    way a browser fires ``hashchange`` for programmatic assignments.
    ``navigate`` simulates the user editing the URL or pressing back.
    """

    def __init__(self, fragment: str = "") -> None:
        super().__init__()
        self._fragment = fragment
        self.writes: List[str] = []

    def read(self) -> str:
        return self._fragment

    def write(self, fragment: str) -> None:
        self.writes.append(fragment)
        if fragment == self._fragment:
            return
        self._fragment = fragment
        self._emit(fragment)

    def navigate(self, fragment: str) -> None:
        self._fragment = fragment
        self._emit(fragment)


class QueryParamFragmentIO(_Listeners):
    """Фрагмент в ``st.query_params``.

    Streamlit has no hashchange event: the whole script reruns when the URL
    changes. ``poll`` is called at the top of every run and emits a change
    when the parameter differs from what this object last saw.
    """

    def __init__(self, key: str = settings.QUERY_PARAM) -> None:
        super().__init__()
        self.key = key
        self._seen = self.read()

    def read(self) -> str:
        return str(st.query_params.get(self.key, "") or "")

    def write(self, fragment: str) -> None:
        if fragment == self.read():
            return
        st.query_params[self.key] = fragment
        self._seen = fragment
        self._emit(fragment)

    def poll(self) -> None:
        current = self.read()
        if current != self._seen:
            logger.info("query param changed externally: %r -> %r", self._seen, current)
            self._seen = current
            self._emit(current)
