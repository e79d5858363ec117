from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .. import codec, feature_set, shape_domain
from ..fragment_io import FragmentIO
from ..seeds import fresh_seed
from ..state_models import (
    Algorithm,
    Configuration,
    Feature,
    ShapeKind,
    url_fields_equal,
)

logger = logging.getLogger("mazelink.store")

Observer = Callable[[Configuration], None]


class ConfigurationStore:
    """Каноническая конфигурация + синхронизация с фрагментом.

    Local mutations commit, write the canonical fragment and notify
    observers. Navigation changes are decoded and compared on
    shape/algorithm/seed only; equal values are ignored, which is what stops
    our own writes from echoing back forever.
    """

    def __init__(
        self,
        fragment_io: FragmentIO,
        seed_source: Callable[[], int] = fresh_seed,
    ) -> None:
        self.io = fragment_io
        self.seed_source = seed_source
        self.observers: List[Observer] = []
        self.revision = 0
        self.last_written: Optional[str] = None

        observed = self.io.read()
        self.configuration = codec.decode(observed, seed_source=seed_source)
        self._unsubscribe_io = self.io.on_change(self.reconcile)
        self._publish(observed)

    # --- observers ---
    def subscribe(self, observer: Observer) -> Callable[[], None]:
        self.observers.append(observer)

        def unsubscribe() -> None:
            if observer in self.observers:
                self.observers.remove(observer)

        return unsubscribe

    def close(self) -> None:
        self._unsubscribe_io()
        self.observers.clear()

    # --- internals ---
    def _commit(self, new: Configuration) -> bool:
        if new == self.configuration:
            return False
        self.configuration = new
        self.revision += 1
        return True

    def _publish(self, observed: Optional[str] = None) -> None:
        fragment = codec.encode(self.configuration)
        if fragment == observed:
            self.last_written = fragment
            return
        # сначала запоминаем, потом пишем: запись может сразу вызвать reconcile
        self.last_written = fragment
        self.io.write(fragment)

    def _notify(self) -> None:
        for observer in list(self.observers):
            observer(self.configuration)

    def apply(self, new: Configuration) -> Configuration:
        """Commit a locally computed configuration."""
        if self._commit(new):
            logger.debug("commit r%d: %s", self.revision, codec.encode(new))
            self._publish()
            self._notify()
        return self.configuration

    # --- navigation ---
    def reconcile(self, fragment: str) -> bool:
        """Merge an externally observed fragment. Returns True if state changed."""
        if fragment == self.last_written:
            logger.debug("ignoring echo of own write: %s", fragment)
            return False
        decoded = codec.decode(fragment, seed_source=self.seed_source)
        if url_fields_equal(decoded, self.configuration):
            # не канон, но то же самое по смыслу (например "R12|Kruskal|007")
            self._publish(fragment)
            return False
        # colour/features/stroke в URL не живут, берём текущие
        self._commit(
            self.configuration.evolve(shape=decoded.shape, algorithm=decoded.algorithm, seed=decoded.seed)
        )
        logger.info("navigation -> %s", codec.encode(self.configuration))
        self._publish(fragment)
        self._notify()
        return True

    # --- mutations ---
    @property
    def size(self) -> int:
        return self.configuration.shape.size

    def set_shape_kind(self, kind: ShapeKind) -> Configuration:
        shape = shape_domain.convert(self.configuration.shape, ShapeKind(kind))
        return self.apply(self.configuration.evolve(shape=shape))

    def set_size(self, size: float) -> Configuration:
        return self._adjust_size(lambda _old: size)

    def increment(self) -> Configuration:
        return self._adjust_size(lambda old: old + 1)

    def decrement(self) -> Configuration:
        return self._adjust_size(lambda old: old - 1)

    def _adjust_size(self, by: Callable[[int], float]) -> Configuration:
        shape = shape_domain.adjust_size(self.configuration.shape, by)
        return self.apply(self.configuration.evolve(shape=shape))

    def new_seed(self) -> Configuration:
        return self.apply(self.configuration.evolve(seed=int(self.seed_source())))

    def set_algorithm(self, algorithm: Algorithm) -> Configuration:
        return self.apply(self.configuration.evolve(algorithm=Algorithm(algorithm)))

    def add_feature(self, feature: Feature) -> Configuration:
        return self.apply(self.configuration.evolve(features=feature_set.add(self.configuration.features, feature)))

    def remove_feature(self, feature: Feature) -> Configuration:
        return self.apply(
            self.configuration.evolve(features=feature_set.remove(self.configuration.features, feature))
        )

    def toggle_feature(self, feature: Feature) -> Configuration:
        return self.apply(
            self.configuration.evolve(features=feature_set.toggle(self.configuration.features, feature))
        )

    def set_colour(self, colour: str) -> Configuration:
        return self.apply(self.configuration.evolve(colour=normalize_colour(colour)))

    def set_stroke_width(self, width: float) -> Configuration:
        width = float(width)
        if not width > 0:
            raise ValueError(f"stroke width must be positive, got {width!r}")
        return self.apply(self.configuration.evolve(stroke_width=width))


def normalize_colour(colour: str) -> str:
    """'#a0B1c2' -> 'A0B1C2'. Raises ValueError for anything else."""
    text = str(colour).strip().lstrip("#").upper()
    if len(text) != 6 or any(ch not in "0123456789ABCDEF" for ch in text):
        raise ValueError(f"colour must be 6 hex digits, got {colour!r}")
    return text
