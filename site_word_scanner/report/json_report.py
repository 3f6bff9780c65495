# site_word_scanner/report/json_report.py

"""
Генерация JSON-отчёта для проекта SiteWordScanner.

Сериализация объекта ScanResult в файл.
"""
from pathlib import Path

from site_word_scanner.crawler.models import ScanResult


def render_json(result: ScanResult, output_path: Path | str) -> Path:
    """
    Сохраняет результат сканирования в формате JSON по указанному пути.

    :param result: объект ScanResult
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from site_word_scanner.report.json_report import render_json
    report_path = render_json(result, 'reports/example.com_2024-01-01.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result.json(pretty=True), encoding="utf-8")
    return output
