"""Adapter between the configuration store and the maze generator.

Keeps the last successful render so a failed generation never blanks the
screen. ``submit`` runs generation on an executor; only the newest
submission may replace the cached result (last write wins).
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Executor, Future
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .errors import RenderFailure
from .services.maze_service import MazeService
from .state_models import Configuration

logger = logging.getLogger("mazelink.render")


@dataclass(frozen=True)
class RenderResult:
    artifact: Any
    canonical_hash: str
    configuration: Configuration


class RenderBridge:
    def __init__(
        self,
        generate: Callable[[Configuration], Any] = MazeService.generate,
        canonicalize: Callable[[Configuration], str] = MazeService.canonicalize,
    ) -> None:
        self._generate = generate
        self._canonicalize = canonicalize
        self.last_result: Optional[RenderResult] = None
        self.last_error: Optional[RenderFailure] = None
        self._lock = threading.Lock()
        self._ticket = 0

    def _run(self, configuration: Configuration) -> RenderResult:
        try:
            artifact = self._generate(configuration)
            canonical = self._canonicalize(configuration)
        except Exception as exc:  # генератор внешний: ловим всё и переупаковываем
            raise RenderFailure(f"maze generation failed: {exc}") from exc
        return RenderResult(artifact=artifact, canonical_hash=canonical, configuration=configuration)

    def render(self, configuration: Configuration) -> RenderResult:
        """Synchronous render. Raises RenderFailure, keeps the previous result."""
        with self._lock:
            self._ticket += 1
        result = self._run(configuration)
        with self._lock:
            self.last_result = result
            self.last_error = None
        return result

    def refresh(self, configuration: Configuration) -> Optional[RenderResult]:
        """Store observer: render, remember the failure instead of raising."""
        try:
            return self.render(configuration)
        except RenderFailure as exc:
            logger.warning("render failed, keeping previous maze: %s", exc)
            self.last_error = exc
            return None

    def submit(self, configuration: Configuration, executor: Executor) -> Future:
        """Render in the background; stale results are discarded.

        The returned future resolves to the RenderResult (or raises
        RenderFailure) whether or not it was accepted as the current one.
        """
        with self._lock:
            self._ticket += 1
            ticket = self._ticket

        def job() -> RenderResult:
            try:
                result = self._run(configuration)
            except RenderFailure as exc:
                with self._lock:
                    if ticket == self._ticket:
                        self.last_error = exc
                logger.warning("background render failed: %s", exc)
                raise
            with self._lock:
                if ticket == self._ticket:
                    self.last_result = result
                    self.last_error = None
                else:
                    logger.debug("discarding stale render %s (ticket %d < %d)", result.canonical_hash, ticket, self._ticket)
            return result

        return executor.submit(job)

    @property
    def artifact(self) -> Any:
        return self.last_result.artifact if self.last_result is not None else None
