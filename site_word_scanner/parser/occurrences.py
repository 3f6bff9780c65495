# site_word_scanner/parser/occurrences.py
"""
Keyword occurrence extraction: page text, ``mailto:`` targets and link hostnames.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List
from urllib.parse import urlsplit

from site_word_scanner.crawler.link_extractor import absolute_url
from site_word_scanner.parser.html_parser import ParsedPage

SNIPPET_BEFORE = 30
SNIPPET_AFTER = 36

_WHITESPACE_RE = re.compile(r"\s+")
_MAILTO = "mailto:"


@dataclass(slots=True)
class Occurrences:
    text: List[str] = field(default_factory=list)
    mail: List[str] = field(default_factory=list)
    link: List[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.text) + len(self.mail) + len(self.link)


def find_text_occurrences(text: str, keyword: str) -> List[str]:
    """
    Context snippets around every non-overlapping match of *keyword* in *text*.

    The snippet spans from 30 characters before the match start to 36
    characters after it, with whitespace runs collapsed and ends trimmed.
    """
    if not keyword:
        return []
    haystack = text.lower()
    snippets: List[str] = []
    index = haystack.find(keyword)
    while index != -1:
        start = max(0, index - SNIPPET_BEFORE)
        end = min(len(haystack), index + SNIPPET_AFTER)
        snippets.append(_WHITESPACE_RE.sub(" ", haystack[start:end]).strip())
        index = haystack.find(keyword, index + len(keyword))
    return snippets


def find_mail_occurrences(hrefs: Iterable[str], keyword: str) -> List[str]:
    """Mail targets (text after ``mailto:``) that contain *keyword*."""
    found: List[str] = []
    for href in hrefs:
        if not href.lower().startswith(_MAILTO):
            continue
        target = href[len(_MAILTO):]
        if keyword in target.lower():
            found.append(target)
    return found


def find_link_occurrences(hrefs: Iterable[str], page_url: str, keyword: str) -> List[str]:
    """Absolute URLs whose hostname contains *keyword* immediately followed by a dot."""
    needle = f"{keyword}."
    found: List[str] = []
    for href in hrefs:
        resolved = absolute_url(href, page_url)
        if resolved is None:
            continue
        if needle in (urlsplit(resolved).hostname or ""):
            found.append(resolved)
    return found


def extract_occurrences(page: ParsedPage, keyword: str) -> Occurrences:
    """Run the three searches over a parsed page; *keyword* must be lower-case."""
    return Occurrences(
        text=find_text_occurrences(page.text, keyword),
        mail=find_mail_occurrences(page.hrefs, keyword),
        link=find_link_occurrences(page.hrefs, page.url, keyword),
    )
