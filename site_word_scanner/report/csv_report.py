# site_word_scanner/report/csv_report.py

"""
Генерация CSV-отчёта: одна строка на каждое найденное вхождение.

Колонки: URL страницы, тип вхождения (TEXT, MAIL, LINK) и само значение.
Страницы без вхождений в отчёт не попадают.
"""
import csv
from pathlib import Path
from typing import Iterator, Tuple

from site_word_scanner.crawler.models import ScanResult

HEADER = ("URL", "Type", "Content")
DELIMITER = ";"


def iter_rows(result: ScanResult) -> Iterator[Tuple[str, str, str]]:
    """Строки таблицы в порядке обхода: сначала TEXT, затем MAIL, затем LINK."""
    for page in result.visited_urls_data:
        if not page.count:
            continue
        for value in page.text:
            yield page.url, "TEXT", value
        for value in page.mail:
            yield page.url, "MAIL", value
        for value in page.link:
            yield page.url, "LINK", value


def render_csv(result: ScanResult, output_path: Path | str) -> Path:
    """Сохраняет вхождения из result в CSV (разделитель ``;``) и возвращает путь к файлу."""
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open("w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f, delimiter=DELIMITER, lineterminator="\n")
        writer.writerow(HEADER)
        writer.writerows(iter_rows(result))

    return output
