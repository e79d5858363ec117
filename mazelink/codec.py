"""Кодек фрагмента URL <-> конфигурация.

Canonical form: ``<R|T|S><size>|<algorithm>|<seed>``, e.g. ``T7|Kruskal|1234``.
Decoding is more permissive than encoding: a bare integer shape token is the
legacy square size, missing or broken tokens fall back to defaults per field.
Other historical orderings (``size|seed|algorithm`` and friends) are not
recognised; their tokens simply fail to parse in the wrong position.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional
from urllib.parse import unquote

from . import shape_domain
from .errors import DecodeFieldError
from .seeds import fresh_seed
from .state_models import Algorithm, Configuration, Shape, ShapeKind, default_configuration

logger = logging.getLogger("mazelink.codec")

SEPARATOR = "|"

_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class FragmentFields:
    """Partial configuration: whatever the fragment managed to carry."""

    shape: Optional[Shape] = None
    algorithm: Optional[Algorithm] = None
    seed: Optional[int] = None


def _parse_uint(token: str, field: str) -> int:
    if not _DIGITS.fullmatch(token):
        raise DecodeFieldError(field, token)
    try:
        return int(token)
    except ValueError as exc:
        # слишком длинная строка цифр (лимит int() в 3.11+)
        raise DecodeFieldError(field, token[:32] + "...") from exc


def parse_shape(token: str) -> Shape:
    if not token:
        raise DecodeFieldError("shape", token)
    kind = ShapeKind.from_letter(token[0])
    if kind is None:
        # легаси: голое число = квадрат
        size = _parse_uint(token, "shape")
        kind = ShapeKind.RECTILINEAR
    else:
        size = _parse_uint(token[1:], "shape")
    return Shape.of_kind(kind, shape_domain.clamp(kind, size))


def parse_algorithm(token: str) -> Algorithm:
    for algorithm in Algorithm:
        if algorithm.value == token:
            return algorithm
    raise DecodeFieldError("algorithm", token)


def parse_seed(token: str) -> int:
    return _parse_uint(token, "seed")


_PARSERS = (
    ("shape", parse_shape),
    ("algorithm", parse_algorithm),
    ("seed", parse_seed),
)


def parse_fragment(fragment: str | None) -> FragmentFields:
    """Split a fragment into positional fields; never raises."""
    text = unquote(fragment or "")
    if text.startswith("#"):
        text = text[1:]
    tokens = text.split(SEPARATOR)
    values: dict = {}
    for (name, parser), token in zip(_PARSERS, tokens):
        try:
            values[name] = parser(token.strip())
        except DecodeFieldError as exc:
            if token:
                logger.debug("dropping field: %s", exc)
    return FragmentFields(**values)


def merge(fields: FragmentFields, base: Configuration) -> Configuration:
    """Overlay decoded URL fields onto ``base``; visual fields come from ``base``."""
    return base.evolve(
        shape=fields.shape if fields.shape is not None else base.shape,
        algorithm=fields.algorithm if fields.algorithm is not None else base.algorithm,
        seed=fields.seed if fields.seed is not None else base.seed,
    )


def decode(
    fragment: str | None,
    defaults: Configuration | None = None,
    seed_source: Callable[[], int] = fresh_seed,
) -> Configuration:
    """Fragment -> full Configuration, defaults filled per field.

    The seed source is only consulted when neither the fragment nor
    ``defaults`` provides a seed.
    """
    fields = parse_fragment(fragment)
    if defaults is None:
        if fields.seed is not None:
            defaults = default_configuration(lambda: fields.seed)
        else:
            defaults = default_configuration(seed_source)
    return merge(fields, defaults)


def encode_shape(shape: Shape) -> str:
    return f"{shape.kind.letter}{shape.size}"


def encode(configuration: Configuration) -> str:
    return SEPARATOR.join(
        [
            encode_shape(configuration.shape),
            configuration.algorithm.value,
            str(int(configuration.seed)),
        ]
    )
