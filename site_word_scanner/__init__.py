"""
SiteWordScanner package initializer.
Defines package version and exposes the scan API and CLI.
"""
__version__ = "1.0.1"

from site_word_scanner.config import RequestOptions, ScanConfig
from site_word_scanner.crawler import AsyncCrawler, ErrorKind, PageResult, ScanResult, scan
from site_word_scanner.cli import cli

__all__ = [
    "__version__",
    "AsyncCrawler",
    "ErrorKind",
    "PageResult",
    "RequestOptions",
    "ScanConfig",
    "ScanResult",
    "cli",
    "scan",
]
