"""site_word_scanner.crawler: обход домена, загрузка страниц и классификация ссылок."""

from site_word_scanner.crawler.models import ErrorKind, FetchResult, PageResult, ScanResult
from site_word_scanner.crawler.link_extractor import is_web_page_link, resolve_same_domain_link
from site_word_scanner.crawler.fetcher import Fetcher, classify_error
from site_word_scanner.crawler.crawler import AsyncCrawler, scan

__all__ = [
    "AsyncCrawler",
    "ErrorKind",
    "FetchResult",
    "Fetcher",
    "PageResult",
    "ScanResult",
    "classify_error",
    "is_web_page_link",
    "resolve_same_domain_link",
    "scan",
]
