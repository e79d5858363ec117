"""Печать: многостраничный документ, по лабиринту на страницу.

Each page gets its own maze: the seed advances from the previous page's rng
stream, so page N can be reopened from the link (and QR code) printed on it. Print
pages are black on white, thin strokes, no stain and no solution.
"""

from __future__ import annotations

import html
import logging
from typing import Callable, List
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

import segno

from . import codec
from .config import settings
from .errors import ExportFailure
from .services.maze_service import MazeService, RenderedMaze
from .state_models import Configuration

logger = logging.getLogger("mazelink.export")

PAGE_CSS = """
body { font-family: sans-serif; margin: 0; }
.page { page-break-after: always; break-after: page; padding: 1cm; }
.page:last-child { page-break-after: auto; break-after: auto; }
.meta { font-size: 11pt; line-height: 1.4; }
.meta a { color: #000; word-break: break-all; }
.qr-box { float: right; margin-left: 1em; }
"""


def print_configuration(configuration: Configuration) -> Configuration:
    return configuration.evolve(
        stroke_width=settings.PRINT_STROKE_WIDTH,
        colour=settings.PRINT_COLOUR,
        features=frozenset(),
    )


def page_link(base_url: str, configuration: Configuration) -> str:
    """Ссылка, которую приложение прочитает обратно: ``base?maze=<fragment>``.

    The browser never sends ``#...`` to the server, so the fragment goes into
    the query string; other query parameters of ``base_url`` are kept.
    """
    parts = urlsplit(base_url)
    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != settings.QUERY_PARAM]
    query.append((settings.QUERY_PARAM, codec.encode(configuration)))
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(query, quote_via=quote), ""))


def qr_svg(link: str) -> str:
    """Inline SVG QR code of ``link`` for the printed page."""
    return segno.make_qr(link, error="m").svg_inline(scale=3, border=2, svgclass="qr")


def _page_html(index: int, rendered: RenderedMaze, configuration: Configuration, base_url: str) -> str:
    link = page_link(base_url, configuration)
    figure_html = rendered.figure.to_html(
        full_html=False,
        include_plotlyjs="cdn" if index == 0 else False,
        config={"staticPlot": True},
    )
    meta = (
        f"<div>Shape: {html.escape(configuration.shape.label())}</div>"
        f"<div>Algorithm: {html.escape(configuration.algorithm.value)}</div>"
        f"<div>Seed: {configuration.seed}</div>"
        f'<div><a href="{html.escape(link)}">{html.escape(link)}</a></div>'
    )
    return (
        f'<section class="page">{figure_html}'
        f'<div class="meta"><div class="qr-box">{qr_svg(link)}</div>{meta}</div></section>'
    )


def export_document(
    configuration: Configuration,
    pages: int,
    base_url: str,
    generate: Callable[[Configuration], RenderedMaze] = MazeService.generate,
) -> bytes:
    """Собрать HTML для печати. Либо весь документ, либо ExportFailure."""
    pages = int(pages)
    if pages < 1:
        raise ValueError(f"pages must be >= 1, got {pages}")

    current = print_configuration(configuration)
    parts: List[str] = []
    for index in range(pages):
        try:
            rendered = generate(current)
            parts.append(_page_html(index, rendered, current, base_url))
        except Exception as exc:
            logger.warning("export failed on page %d/%d: %s", index + 1, pages, exc)
            raise ExportFailure(f"page {index + 1} of {pages} failed: {exc}") from exc
        current = current.evolve(seed=rendered.next_seed)

    doc = (
        "<!DOCTYPE html><html><head><meta charset=\"utf-8\"><title>Mazes</title>"
        f"<style>{PAGE_CSS}</style></head><body>" + "".join(parts) + "</body></html>"
    )
    logger.info("exported %d pages starting at %s", pages, codec.encode(print_configuration(configuration)))
    return doc.encode("utf-8")
