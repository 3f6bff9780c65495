# site_word_scanner/crawler/link_extractor.py
"""
Link classification for SiteWordScanner: which hrefs are crawlable pages
and which of them stay on the scanned domain.
"""
from __future__ import annotations

from typing import FrozenSet, Iterable, List, Optional, Tuple
from urllib.parse import urljoin, urlsplit, urlunsplit

from site_word_scanner.logger import logger
from site_word_scanner.utils import extract_domain, normalize_url, string_to_url

IGNORED_PREFIXES: Tuple[str, ...] = ("#", "mailto:", "tel:", "ftp:", "javascript:", "data:")

WEB_PAGE_EXTENSIONS: FrozenSet[str] = frozenset(
    {
        "html", "htm", "php", "asp", "aspx", "jsp", "xhtml", "cfm", "shtm", "shtml",
        "rhtml", "dhtml", "py", "rb", "pl", "cgi", "jhtml", "do", "action", "erb",
        "ejs", "vue", "cshtml", "tsx", "jsx",
    }
)


def is_ignored_href(href: str) -> bool:
    """True for fragment-only links and non-page schemes (mailto:, tel:, ...)."""
    return href.startswith(IGNORED_PREFIXES)


def absolute_url(href: str, base_url: str) -> Optional[str]:
    """Resolve *href* against *base_url* and serialise it browser-style.

    The host is lower-cased and an empty path becomes ``/``. Returns None
    when the result has no valid host.
    """
    try:
        resolved = urljoin(base_url, href.strip())
        if urlsplit(resolved).scheme.lower() not in ("http", "https"):
            return None
        parts = string_to_url(resolved)
    except ValueError:
        return None
    userinfo, sep, hostport = parts.netloc.rpartition("@")
    netloc = f"{userinfo}{sep}{hostport.lower()}"
    return urlunsplit((parts.scheme.lower(), netloc, parts.path or "/", parts.query, parts.fragment))


def is_same_domain(url1: str, url2: str) -> bool:
    """Both URLs have the same host once a leading ``www.`` is stripped."""
    domain1 = extract_domain(url1)
    domain2 = extract_domain(url2)
    if domain1 is None or domain2 is None:
        logger.debug("Error during domain comparison between %s and %s", url1, url2)
        return False
    return domain1 == domain2


def is_web_page_link(href: str, source_url: str) -> bool:
    """
    Guess from the extension of the last path segment whether *href* is a page.

    Paths ending with ``/``, empty paths and segments without a dot count as
    pages; otherwise the extension must be in :data:`WEB_PAGE_EXTENSIONS`.
    """
    if not href or not href.strip():
        return False
    if is_ignored_href(href):
        return False

    resolved = absolute_url(href, source_url)
    if resolved is None:
        logger.debug("Error isWebPageLink for %s", href)
        return False

    path = urlsplit(resolved).path
    if path == "/" or path.endswith("/"):
        return True

    last_segment = path.rsplit("/", 1)[-1]
    if not last_segment:
        return True
    if "." in last_segment:
        extension = last_segment.rsplit(".", 1)[-1]
        return bool(extension) and extension.lower() in WEB_PAGE_EXTENSIONS
    return True


def resolve_same_domain_link(href: str, source_url: str) -> Optional[str]:
    """
    Resolve *href* found on *source_url* into a canonical same-domain URL.

    Returns None for ignored schemes, unresolvable links and links that
    leave the domain of *source_url*.
    """
    if is_ignored_href(href):
        return None

    resolved = absolute_url(href, source_url)
    if resolved is None:
        logger.debug("Error during link analysis: cannot resolve %r on %s", href, source_url)
        return None
    if not is_same_domain(resolved, source_url):
        return None
    return normalize_url(resolved)


def extract_links(hrefs: Iterable[str], source_url: str) -> List[str]:
    """Canonical same-domain page links among *hrefs*, in document order, without repeats."""
    links: List[str] = []
    for href in hrefs:
        if not is_web_page_link(href, source_url):
            continue
        link = resolve_same_domain_link(href, source_url)
        if link is not None and link not in links:
            links.append(link)
    return links
