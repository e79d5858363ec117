"""Мини-профилирование: декоратор timeit."""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, TypeVar, cast

from .config import settings

F = TypeVar("F", bound=Callable[..., Any])


def timeit(name: str | None = None, slow_ms: float | None = None) -> Callable[[F], F]:
    """Замер времени; всё дольше ``slow_ms`` пишем как warning."""
    threshold = settings.SLOW_CALL_MS if slow_ms is None else float(slow_ms)

    def deco(fn: F) -> F:
        label = name or fn.__name__
        logger = logging.getLogger("mazelink.perf")

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any):
            t0 = time.perf_counter()
            try:
                return fn(*args, **kwargs)
            finally:
                dt = (time.perf_counter() - t0) * 1000.0
                level = logging.WARNING if dt > threshold else logging.INFO
                logger.log(level, "%s: %.1f ms", label, dt)

        return cast(F, wrapper)

    return deco
