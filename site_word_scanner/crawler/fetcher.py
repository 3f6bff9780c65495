# site_word_scanner/crawler/fetcher.py
"""
Fetcher module: one HTTP GET per URL, with transport failures mapped to
a closed set of error kinds instead of exceptions.
"""
from __future__ import annotations

import asyncio
import errno
import socket
from typing import Optional

from aiohttp import (
    ClientConnectorDNSError,
    ClientConnectorError,
    ClientError,
    ClientSession,
    ClientTimeout,
)

from site_word_scanner.config import RequestOptions
from site_word_scanner.crawler.models import ErrorKind, FetchResult
from site_word_scanner.logger import logger


def build_timeout(options: RequestOptions) -> ClientTimeout:
    """Total per-request timeout, or no limit at all when none is configured."""
    seconds = options.timeout_seconds
    if seconds is None:
        return ClientTimeout(total=None, connect=None, sock_read=None, sock_connect=None)
    return ClientTimeout(total=seconds)


def build_session(options: RequestOptions) -> ClientSession:
    """Create the session used for every request of one domain scan."""
    return ClientSession(
        timeout=build_timeout(options),
        headers=options.headers,
        raise_for_status=False,
    )


def classify_error(exc: BaseException) -> ErrorKind:
    """
    Map a transport exception to an :class:`ErrorKind`.

    Precedence: timeout, DNS failure, refused connection, anything else.
    A connect attempt abandoned by the OS (ETIMEDOUT) counts as a timeout.
    """
    if isinstance(exc, asyncio.TimeoutError):
        return ErrorKind.TIMEOUT
    if isinstance(exc, ClientConnectorError):
        os_error: Optional[OSError] = exc.os_error
        if isinstance(os_error, TimeoutError) or (
            os_error is not None and os_error.errno == errno.ETIMEDOUT
        ):
            return ErrorKind.TIMEOUT
        if isinstance(exc, ClientConnectorDNSError) or isinstance(os_error, socket.gaierror):
            return ErrorKind.DNS_ERROR
        if isinstance(os_error, ConnectionRefusedError) or (
            os_error is not None and os_error.errno == errno.ECONNREFUSED
        ):
            return ErrorKind.CONNECTION_REFUSED
    return ErrorKind.UNKNOWN_ERROR


class Fetcher:
    """Issues GET requests through a shared session and never raises on network errors."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> FetchResult:
        """
        Fetch *url* once (redirects are followed).

        Returns a FetchResult with the HTTP status and, for 2xx responses,
        the decoded body; transport failures come back as an error kind.
        """
        try:
            async with self.session.get(url) as resp:
                status = resp.status
                body = await resp.text(errors="replace") if 200 <= status < 300 else ""
                return FetchResult(url=url, status=status, body=body)
        except (ClientError, asyncio.TimeoutError, OSError, ValueError) as exc:
            kind = classify_error(exc)
            logger.warning("Failed %s: %s (%s)", url, kind, exc.__class__.__name__)
            return FetchResult(url=url, error=kind)
