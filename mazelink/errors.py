"""Ошибки ядра. Ни одна из них не фатальна."""

from __future__ import annotations


class MazelinkError(Exception):
    """Base class for everything mazelink raises on purpose."""


class DecodeFieldError(MazelinkError, ValueError):
    """One fragment token could not be parsed. Never leaves the codec."""

    def __init__(self, field: str, token: str) -> None:
        super().__init__(f"cannot decode {field} from {token!r}")
        self.field = field
        self.token = token


class RenderFailure(MazelinkError):
    """The maze generator failed; the previous render stays on screen."""


class ExportFailure(MazelinkError):
    """The printable document could not be produced; nothing partial is returned."""
