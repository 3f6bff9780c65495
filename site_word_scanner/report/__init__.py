"""site_word_scanner.report: сохранение результатов сканирования (JSON и CSV)."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from site_word_scanner.config import OutputFormat
from site_word_scanner.crawler.models import ScanResult
from site_word_scanner.report.csv_report import render_csv
from site_word_scanner.report.json_report import render_json
from site_word_scanner.utils import extract_domain

_RENDERERS: Dict[OutputFormat, Callable[[ScanResult, Union[str, Path]], Path]] = {
    OutputFormat.JSON: render_json,
    OutputFormat.CSV: render_csv,
}


def generate_output_filename(url: str, fmt: Union[OutputFormat, str], day: Optional[date] = None) -> str:
    """Имя файла вида ``{domain}_{YYYY-MM-DD}.{format}``."""
    fmt = OutputFormat(fmt)
    domain = extract_domain(url) or url
    return f"{domain}_{(day or date.today()).isoformat()}.{fmt.value}"


def render(result: ScanResult, fmt: Union[OutputFormat, str], path: Union[str, Path]) -> Path:
    """Сохраняет result в файл path в выбранном формате."""
    return _RENDERERS[OutputFormat(fmt)](result, path)


__all__ = ["render", "render_json", "render_csv", "generate_output_filename"]
