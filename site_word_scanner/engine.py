# File: site_word_scanner/engine.py
"""site_word_scanner.engine: оркестрация сканирования нескольких доменов и сохранение результатов."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Sequence

from site_word_scanner.config import ScanConfig
from site_word_scanner.crawler.crawler import scan
from site_word_scanner.crawler.models import ScanResult
from site_word_scanner.logger import logger
from site_word_scanner.report import generate_output_filename, render

__all__ = ["Engine", "load_urls"]

_URL_PREFIXES = ("http://", "https://")


def load_urls(source: str) -> List[str]:
    """Возвращает [source], если это URL, иначе читает URL из файла (по одному в строке)."""
    if source.startswith(_URL_PREFIXES):
        return [source]

    logger.info("Reading URLs from file: %s", source)
    path = Path(source).expanduser()
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FileNotFoundError(
            f"Failed to read {source}; if you meant to provide a URL, "
            "please ensure it starts with http:// or https://"
        ) from exc
    urls = [line.strip() for line in content.splitlines() if line.strip()]
    logger.info("Found %d URLs to process", len(urls))
    return urls


class Engine:
    """Фасад для CLI и тестов: параллельный запуск сканирований и сохранение отчётов."""

    def __init__(self, config: ScanConfig, *, save: bool = True) -> None:
        """Инициализирует Engine; save=False отключает запись файлов."""
        self.config = config
        self.save = save
        self.failed_saves: List[str] = []

    async def run(self, urls: Sequence[str], keyword: str) -> List[ScanResult]:
        """
        Сканирует все URL, не более ``parallel_scans`` доменов одновременно.

        Результаты возвращаются в порядке входного списка. Ошибка записи
        отчёта одного домена не прерывает остальные: URL попадает в
        ``failed_saves``.
        """
        self.failed_saves = []
        semaphore = asyncio.Semaphore(self.config.parallel_scans)
        logger.info(
            "Number of parallel domain scans: %d", min(self.config.parallel_scans, len(urls))
        )
        remaining = len(urls)

        async def _one(url: str) -> ScanResult:
            nonlocal remaining
            async with semaphore:
                remaining -= 1
                logger.info("Start domain scan for: %s (domains remaining: %d)", url, remaining)
                result = await scan(keyword, url, self.config.request_options())
                if result.success:
                    if self.save:
                        try:
                            self.save_result(result, url)
                        except OSError as exc:
                            logger.error("Failed to save results for %s: %s", url, exc)
                            self.failed_saves.append(url)
                else:
                    logger.error("Scan of %s failed: %s", url, result.error)
                return result

        return list(await asyncio.gather(*(_one(url) for url in urls)))

    def run_sync(self, urls: Sequence[str], keyword: str) -> List[ScanResult]:
        """Синхронная обёртка над :meth:`run` для CLI."""
        return asyncio.run(self.run(urls, keyword))

    def save_result(self, result: ScanResult, url: str) -> Path:
        """Сохраняет результат в output_directory в формате output_format."""
        fmt = self.config.output_format
        path = Path(self.config.output_directory) / generate_output_filename(url, fmt)
        saved = render(result, fmt, path)
        logger.info("> Results for %s saved in: %s", url, saved)
        return saved
