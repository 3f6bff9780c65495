# === FILE: site_word_scanner/parser/html_parser.py ===
"""HTML parsing utilities for SiteWordScanner.

The crawler needs exactly two things from a fetched page:

* text:  the visible text of ``<body>`` (used for keyword search);
* hrefs: the raw ``href`` attribute of every ``<a>`` tag, in document order
  (used both for occurrence search and for link discovery).

Parsing is lenient: broken markup produces empty fields instead of errors.
When the ``<body>`` tag is omitted (allowed by HTML5, common in minified
pages and plain-text responses) the text of the whole document minus
``<head>`` is used, the way a browser renders it.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import Tag

__all__: Sequence[str] = ("ParsedPage", "parse_html")

_INVISIBLE_TAGS = ("script", "style", "noscript", "template")
_HEAD_TAGS = ("head", "title", "meta", "link", "base")


@dataclass(slots=True)
class ParsedPage:
    """Lightweight representation of an HTML page."""

    url: str
    text: str = ""
    hrefs: list[str] = field(default_factory=list)


def parse_html(markup: str | bytes, url: str) -> ParsedPage:
    """Parse raw markup fetched from *url* into a :class:`ParsedPage`."""
    try:
        soup = BeautifulSoup(markup, "html.parser")
    except ParserRejectedMarkup:
        return ParsedPage(url=url)

    hrefs: list[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href = tag.get("href")
        if isinstance(href, str) and href:
            hrefs.append(href)

    body = soup.body
    if body is None:
        # implied body: everything outside <head>
        body = soup
        for element in soup(list(_HEAD_TAGS)):
            element.decompose()

    for element in body(list(_INVISIBLE_TAGS)):
        element.decompose()
    return ParsedPage(url=url, text=body.get_text(), hrefs=hrefs)
