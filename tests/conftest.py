# File: tests/conftest.py
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Dict

import pytest
from aiohttp import web

from site_word_scanner.crawler.fetcher import Fetcher
from site_word_scanner.crawler.models import FetchResult

TURTLE_PAGE = (
    '<html lang="en"><body>lorem ipsum TURTLE, oh look a link '
    '<a href="https://wwww.tUrtle.com">i\'m a link</a> send me a mail here '
    '<a href="mailto:donatello@turtle.com">mail me</a> '
    '<a href="mailto:turtle@pizza.com">or here</a></body></html>'
)


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on 127.0.0.1:*port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", port)
    await site.start()
    try:
        yield f"http://127.0.0.1:{port}"
    finally:
        await runner.cleanup()


def html(text: str, status: int = 200) -> Callable[[web.Request], Awaitable[web.Response]]:
    """Build an aiohttp handler returning fixed HTML."""

    async def handler(_: web.Request) -> web.Response:
        return web.Response(text=text, status=status, content_type="text/html")

    return handler


class FakeSite:
    """
    Stand-in for the network: maps canonical URLs to HTML or FetchResult.
    Unknown URLs answer 404.
    """

    def __init__(self, pages: Dict[str, object]) -> None:
        self.pages = pages
        self.requested: list[str] = []

    async def fetch(self, url: str) -> FetchResult:
        self.requested.append(url)
        page = self.pages.get(url)
        if isinstance(page, FetchResult):
            return page
        if page is None:
            return FetchResult(url=url, status=404)
        return FetchResult(url=url, status=200, body=str(page))


@pytest.fixture()
def fake_site(monkeypatch) -> Callable[[Dict[str, object]], FakeSite]:
    """Patch Fetcher.fetch so that crawls are served from an in-memory site."""

    def install(pages: Dict[str, object]) -> FakeSite:
        site = FakeSite(pages)

        async def fake_fetch(self, url):
            return await site.fetch(url)

        monkeypatch.setattr(Fetcher, "fetch", fake_fetch)
        return site

    return install
