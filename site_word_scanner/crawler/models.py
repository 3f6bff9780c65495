# site_word_scanner/crawler/models.py
"""
Data models for the SiteWordScanner crawler.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union


class ErrorKind(str, Enum):
    """Symbolic outcome of a fetch that produced no HTTP response."""

    TIMEOUT = "TIMEOUT"
    DNS_ERROR = "DNS_ERROR"
    CONNECTION_REFUSED = "CONNECTION_REFUSED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    def __str__(self) -> str:
        return self.value


Status = Union[int, ErrorKind]


@dataclass(slots=True, frozen=True)
class FetchResult:
    """Outcome of a single GET: either a response (status + body) or an error kind."""

    url: str
    status: Optional[int] = None
    body: str = ""
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.status is not None and 200 <= self.status < 300

    @property
    def outcome(self) -> Status:
        """Value recorded in the page result: the error kind or the numeric status."""
        if self.error is not None:
            return self.error
        return self.status if self.status is not None else ErrorKind.UNKNOWN_ERROR


@dataclass(slots=True, frozen=True)
class PageResult:
    """Per-URL record of the fetch outcome and the keyword occurrences found."""

    url: str
    status: Status
    count: int = 0
    text: Tuple[str, ...] = ()
    mail: Tuple[str, ...] = ()
    link: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # списки от вызывающего кода замораживаются в кортежи
        for name in ("text", "mail", "link"):
            value: Iterable[str] = getattr(self, name)
            object.__setattr__(self, name, tuple(value))

    @classmethod
    def failed(cls, url: str, status: Status) -> PageResult:
        return cls(url=url, status=status)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "status": self.status.value if isinstance(self.status, ErrorKind) else self.status,
            "count": self.count,
            "text": list(self.text),
            "mail": list(self.mail),
            "link": list(self.link),
        }


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(slots=True)
class ScanResult:
    """Aggregate output of one domain scan."""

    domain: str
    success: bool
    error: Optional[str] = None
    total_visited_urls: int = 0
    visited_urls_data: List[PageResult] = field(default_factory=list)
    generated_at: str = field(default_factory=_now_iso)

    @classmethod
    def invalid_seed(cls, url: str, message: str) -> ScanResult:
        return cls(domain=url, success=False, error=message)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "generatedAt": self.generated_at,
            "domain": self.domain,
            "success": self.success,
        }
        if self.error is not None:
            data["error"] = self.error
        data["totalVisitedUrls"] = self.total_visited_urls
        data["visitedUrlsData"] = [page.to_dict() for page in self.visited_urls_data]
        return data

    def json(self, *, pretty: bool = False) -> str:
        """Return the JSON representation used by reports and the CLI."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)
