# === FILE: site_word_scanner/crawler/crawler.py ===
from __future__ import annotations

import logging
import time
from typing import List, Optional

from aiohttp import ClientSession

from site_word_scanner.config import RequestOptions
from site_word_scanner.crawler.fetcher import Fetcher, build_session
from site_word_scanner.crawler.frontier import Frontier
from site_word_scanner.crawler.link_extractor import extract_links
from site_word_scanner.crawler.models import FetchResult, PageResult, ScanResult
from site_word_scanner.parser.html_parser import parse_html
from site_word_scanner.parser.occurrences import extract_occurrences
from site_word_scanner.utils import extract_domain, normalize_url

__all__ = ("AsyncCrawler", "scan", "INVALID_URL_MESSAGE")

INVALID_URL_MESSAGE = "The URL is not valid"


class AsyncCrawler:
    """
    Sequential same-domain crawler searching every page for one keyword.

    One instance scans one seed: it owns its frontier, its visited set and
    its HTTP session, and fetches a single page at a time.
    """

    def __init__(self, keyword: str, url: str, options: Optional[RequestOptions] = None) -> None:
        self.keyword = keyword.lower()
        self.url = url
        self.options = options or RequestOptions()
        self.session: Optional[ClientSession] = None
        self.fetcher: Optional[Fetcher] = None
        self.results: List[PageResult] = []
        self.logger = logging.getLogger("SiteWordScanner")

    async def __aenter__(self) -> AsyncCrawler:
        self.session = build_session(self.options)
        self.fetcher = Fetcher(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self) -> ScanResult:
        seed = normalize_url(self.url)
        domain = extract_domain(self.url)
        if not seed or not domain:
            self.logger.error("Invalid seed URL: %s", self.url)
            return ScanResult.invalid_seed(self.url, INVALID_URL_MESSAGE)
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")

        self.logger.info("Start crawl: %s (keyword %r)", seed, self.keyword)
        start = time.monotonic()
        frontier = Frontier(seed)
        self.results = []

        while frontier:
            self.logger.info(
                "%s %d%% [Visited:%d | Remaining:%d]",
                seed, frontier.progress(), len(frontier.visited), frontier.pending,
            )
            url = frontier.pop()
            fetched = await self.fetcher.fetch(url)
            page = self._process(fetched, frontier)
            self.results.append(page)

        duration = time.monotonic() - start
        self.logger.info("Done: %s, %d pages in %.2f s", seed, len(self.results), duration)
        return ScanResult(
            domain=domain,
            success=True,
            total_visited_urls=len(frontier.visited),
            visited_urls_data=list(self.results),
        )

    def _process(self, fetched: FetchResult, frontier: Frontier) -> PageResult:
        """Build the page result and push newly discovered links into *frontier*."""
        if not fetched.ok:
            return PageResult.failed(fetched.url, fetched.outcome)

        parsed = parse_html(fetched.body, fetched.url)
        found = extract_occurrences(parsed, self.keyword)
        for link in extract_links(parsed.hrefs, fetched.url):
            frontier.push(link)

        return PageResult(
            url=fetched.url,
            status=fetched.outcome,
            count=found.count,
            text=found.text,
            mail=found.mail,
            link=found.link,
        )


async def scan(keyword: str, url: str, options: Optional[RequestOptions] = None) -> ScanResult:
    """Scan the domain of *url* for *keyword* and return the aggregated result."""
    async with AsyncCrawler(keyword, url, options) as crawler:
        return await crawler.crawl()
