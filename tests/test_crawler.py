# Test-suite for the SiteWordScanner crawl engine
from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from aiohttp import web

from conftest import TURTLE_PAGE, html, serve_app
from site_word_scanner.config import RequestOptions
from site_word_scanner.crawler.crawler import INVALID_URL_MESSAGE, AsyncCrawler, scan
from site_word_scanner.crawler.models import ErrorKind, FetchResult

OPTIONS = RequestOptions(user_agent="TestAgent/1.0", timeout_millis=2000)


def visited(result) -> list[str]:
    return [page.url for page in result.visited_urls_data]


# --------------------------------------------------------------------------- #
#                            Test-server fixtures                             #
# --------------------------------------------------------------------------- #


@pytest_asyncio.fixture
async def test_server_site(unused_tcp_port: int) -> AsyncIterator[str]:
    app = web.Application()
    app.router.add_get(
        "/",
        html(
            '<a href="/page1">Page1</a>'
            '<a href="/page2/">Page2</a>'
            '<a href="/page1#section">Page1 again</a>'
            '<a href="/report.pdf">PDF</a>'
            '<a href="https://otherdomain.com/">External</a>'
            '<a href="mailto:someone@example.com">Mail</a>'
            '<a href="javascript:void(0)">JS</a>'
        ),
    )
    app.router.add_get("/page1", html('<body>a turtle here</body><a href="/">Home</a><a href="/page2">P2</a>'))
    app.router.add_get("/page2", html("<body>nothing</body>"))
    app.router.add_get("/report.pdf", html("not a page"))

    async for url in serve_app(app, unused_tcp_port):
        yield url


@pytest_asyncio.fixture
async def test_server_errors(unused_tcp_port: int) -> AsyncIterator[str]:
    app = web.Application()

    async def slow(_):
        await asyncio.sleep(1.0)
        return web.Response(text="<body>late turtle</body>", content_type="text/html")

    app.router.add_get(
        "/",
        html('<a href="/missing">Broken</a><a href="/slow">Slow</a><a href="/boom">Boom</a>'),
    )
    app.router.add_get("/missing", html('<body>turtle</body><a href="/hidden">Hidden</a>', status=404))
    app.router.add_get("/boom", html("<body>turtle</body>", status=500))
    app.router.add_get("/slow", slow)
    app.router.add_get("/hidden", html("<body>hidden</body>"))

    async for url in serve_app(app, unused_tcp_port):
        yield url


# --------------------------------------------------------------------------- #
#                                   Tests                                     #
# --------------------------------------------------------------------------- #


@pytest.mark.asyncio()
async def test_basic_crawl(test_server_site: str):
    result = await scan("turtle", test_server_site, OPTIONS)

    assert result.success is True
    assert result.error is None
    assert result.domain == "127.0.0.1"
    assert set(visited(result)) == {
        f"{test_server_site}/",
        f"{test_server_site}/page1",
        f"{test_server_site}/page2",
    }
    assert result.total_visited_urls == len(result.visited_urls_data) == 3
    assert visited(result)[0] == f"{test_server_site}/"
    assert all(page.status == 200 for page in result.visited_urls_data)


@pytest.mark.asyncio()
async def test_crawl_records_occurrences(test_server_site: str):
    result = await scan("TURTLE", test_server_site, OPTIONS)

    pages = {page.url: page for page in result.visited_urls_data}
    page1 = pages[f"{test_server_site}/page1"]
    assert page1.count == 1
    assert page1.text == ("a turtle here",)
    assert pages[f"{test_server_site}/"].count == 0


@pytest.mark.asyncio()
async def test_keyword_in_text_mail_and_links(unused_tcp_port: int):
    app = web.Application()
    app.router.add_get("/", html(TURTLE_PAGE))

    async for base in serve_app(app, unused_tcp_port):
        result = await scan("turtle", base, OPTIONS)

    assert result.total_visited_urls == 1
    page = result.visited_urls_data[0]
    assert page.status == 200
    assert page.count == 4
    assert page.text == ("lorem ipsum turtle, oh look a link i'm a link se",)
    assert page.mail == ("donatello@turtle.com", "turtle@pizza.com")
    assert page.link == ("https://wwww.turtle.com/",)


@pytest.mark.asyncio()
async def test_error_pages_are_recorded(test_server_errors: str):
    options = RequestOptions(user_agent="TestAgent/1.0", timeout_millis=200)
    result = await scan("turtle", test_server_errors, options)

    pages = {page.url: page for page in result.visited_urls_data}
    assert result.success is True
    assert pages[f"{test_server_errors}/missing"].status == 404
    assert pages[f"{test_server_errors}/boom"].status == 500
    assert pages[f"{test_server_errors}/slow"].status == ErrorKind.TIMEOUT
    for url in ("missing", "boom", "slow"):
        page = pages[f"{test_server_errors}/{url}"]
        assert page.count == 0
        assert page.text == page.mail == page.link == ()
    # ссылки со страницы 404 не обходятся
    assert f"{test_server_errors}/hidden" not in pages
    assert result.total_visited_urls == 4


@pytest.mark.asyncio()
async def test_connection_refused(unused_tcp_port: int):
    result = await scan("turtle", f"http://127.0.0.1:{unused_tcp_port}", OPTIONS)

    assert result.success is True
    assert result.total_visited_urls == 1
    assert result.visited_urls_data[0].status == ErrorKind.CONNECTION_REFUSED
    assert result.visited_urls_data[0].count == 0


@pytest.mark.asyncio()
async def test_query_strings_are_distinct_pages(unused_tcp_port: int):
    app = web.Application()
    app.router.add_get("/", html('<a href="/page?x=1">1</a><a href="/page?x=2">2</a><a href="/page?x=1#top">1</a>'))
    app.router.add_get("/page", html("<body>page</body>"))

    async for base in serve_app(app, unused_tcp_port):
        result = await scan("turtle", base, OPTIONS)

    assert sorted(visited(result)) == [f"{base}/", f"{base}/page?x=1", f"{base}/page?x=2"]


@pytest.mark.asyncio()
@pytest.mark.parametrize("seed", ["not a url", "http://localhost", "", "https://"])
async def test_invalid_seed(seed: str):
    result = await scan("turtle", seed, OPTIONS)

    assert result.success is False
    assert result.error == INVALID_URL_MESSAGE
    assert result.domain == seed
    assert result.total_visited_urls == 0
    assert result.visited_urls_data == []


# --------------------------------------------------------------------------- #
#                       Scenarios on a faked network                          #
# --------------------------------------------------------------------------- #


@pytest.mark.asyncio()
async def test_end_to_end_domain_scoping(fake_site):
    site = fake_site(
        {
            "https://example.com/": (
                '<html lang="fr"><a href="/page1">Lien 1</a>'
                '<a href="https://example.com/page2">Lien 2</a>'
                '<a href="https://otherdomain.com">Lien Externe</a></html>'
            ),
            "https://example.com/page1": "<html></html>",
            "https://example.com/page2": "<html></html>",
        }
    )

    result = await scan("test", "https://example.com", OPTIONS)

    assert result.success is True
    assert result.domain == "example.com"
    assert set(visited(result)) == {
        "https://example.com/",
        "https://example.com/page1",
        "https://example.com/page2",
    }
    assert result.total_visited_urls == 3
    assert "https://otherdomain.com/" not in site.requested


@pytest.mark.asyncio()
async def test_www_prefix_is_same_domain(fake_site):
    fake_site(
        {
            "https://www.example.com/": '<a href="https://example.com/about">About</a><a href="https://blog.example.com/">Blog</a>',
            "https://example.com/about": '<a href="https://www.example.com/">Home</a>',
        }
    )

    result = await scan("test", "www.example.com", OPTIONS)

    assert result.domain == "example.com"
    assert visited(result) == ["https://www.example.com/", "https://example.com/about"]


@pytest.mark.asyncio()
async def test_each_url_fetched_once(fake_site):
    site = fake_site(
        {
            "https://example.com/": '<a href="/a">a</a><a href="/b/">b</a><a href="/a#x">a</a>',
            "https://example.com/a": '<a href="/">home</a><a href="/b">b</a><a href="/c">c</a>',
            "https://example.com/b": '<a href="/a/">a</a><a href="/c#frag">c</a>',
            "https://example.com/c": '<a href="https://example.com">home</a>',
        }
    )

    result = await scan("test", "https://example.com/", OPTIONS)

    assert len(site.requested) == len(set(site.requested)) == 4
    assert visited(result) == site.requested
    assert result.total_visited_urls == len(result.visited_urls_data) == 4


@pytest.mark.asyncio()
@pytest.mark.parametrize(
    "kind", [ErrorKind.TIMEOUT, ErrorKind.DNS_ERROR, ErrorKind.CONNECTION_REFUSED, ErrorKind.UNKNOWN_ERROR]
)
async def test_fetch_failures_become_page_results(fake_site, kind: ErrorKind):
    fake_site({"https://example.com/": FetchResult(url="https://example.com/", error=kind)})

    result = await scan("test", "https://example.com", OPTIONS)

    assert result.success is True
    page = result.visited_urls_data[0]
    assert page.status == kind
    assert page.count == 0
    assert page.text == page.mail == page.link == ()


@pytest.mark.asyncio()
async def test_crawler_requires_context_manager():
    crawler = AsyncCrawler("test", "https://example.com", OPTIONS)
    with pytest.raises(RuntimeError):
        await crawler.crawl()
