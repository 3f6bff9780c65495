# File: site_word_scanner/utils.py
"""site_word_scanner.utils: канонизация URL и извлечение домена."""

from __future__ import annotations

import re
from typing import Optional, Sequence
from urllib.parse import SplitResult, urlsplit, urlunsplit

from site_word_scanner.logger import logger

__all__: Sequence[str] = (
    "string_to_url",
    "normalize_url",
    "extract_domain",
)

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)
_FORBIDDEN_HOST_RE = re.compile(r"[\s#%/:<>?@\[\\\]^|]")
_DEFAULT_PORTS = {"http": 80, "https": 443}


def string_to_url(url: str) -> SplitResult:
    """Разбирает строку в URL, подставляя ``https://`` при отсутствии схемы.

    Бросает ``ValueError``, если хост пустой, содержит недопустимые символы
    или порт некорректен.
    """
    url = url.strip()
    if not _SCHEME_RE.match(url):
        url = "https://" + url
    parts = urlsplit(url)
    host = parts.hostname
    if not host:
        raise ValueError(f"URL has no host: {url!r}")
    if _FORBIDDEN_HOST_RE.search(host):
        raise ValueError(f"Invalid host in URL: {url!r}")
    # .port бросает ValueError на нечисловом или слишком большом порте
    _ = parts.port
    return parts


def _netloc(parts: SplitResult) -> str:
    host = (parts.hostname or "").lower()
    port = parts.port
    if port is not None and port != _DEFAULT_PORTS.get(parts.scheme.lower()):
        host = f"{host}:{port}"
    userinfo, sep, _ = parts.netloc.rpartition("@")
    return f"{userinfo}@{host}" if sep else host


def normalize_url(url: str) -> Optional[str]:
    """Канонизирует URL для дедупликации.

    * схема ``https`` подставляется, если её нет;
    * схема и хост приводятся к нижнему регистру, порт по умолчанию удаляется;
    * завершающие ``/`` пути удаляются (кроме корня ``/``);
    * фрагмент отбрасывается, query сохраняется как есть.

    Возвращает ``None``, если URL не разбирается или в хосте нет точки.
    """
    try:
        parts = string_to_url(url)
    except ValueError as exc:
        logger.debug("Error during URL normalization: %s", exc)
        return None

    if "." not in (parts.hostname or ""):
        return None

    path = parts.path.rstrip("/") or "/"
    return urlunsplit((parts.scheme.lower(), _netloc(parts), path, parts.query, ""))


def extract_domain(url: str) -> Optional[str]:
    """Возвращает хост URL без префикса ``www.`` или ``None`` для некорректного URL."""
    try:
        host = string_to_url(url).hostname or ""
    except ValueError:
        return None
    return host.lower().removeprefix("www.")
