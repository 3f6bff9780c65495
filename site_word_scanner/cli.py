#!/usr/bin/env python3
"""
Точка входа для запуска SiteWordScanner через командную строку.

Аргументы:
  KEYWORD             Слово для поиска (регистр не важен)
  INPUT               URL сайта (http:// или https://) или путь к файлу
                      со списком URL (по одному в строке)

Опции:
  -f, --format FMT    Формат результата: json или csv (default: json)
  -d, --directory DIR Каталог для файлов результата (default: .)
  -p, --parallel INT  Число доменов, сканируемых одновременно (default: 3)
  -t, --timeout MS    Таймаут запроса в миллисекундах
  -u, --user-agent UA Свой заголовок User-Agent
  -c, --config PATH   YAML/JSON-конфиг со значениями по умолчанию
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только stdout, если не указан)
  --version, -v       Показать версию

Пример:
  site-word-scanner turtle https://example.com --format csv --directory reports
"""
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import click
from pydantic import ValidationError

from site_word_scanner import __version__
from site_word_scanner.config import OutputFormat, ScanConfig, load_config
from site_word_scanner.engine import Engine, load_urls
from site_word_scanner.logger import init_logging, logger

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg="red", err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, "--version", "-v", message="SiteWordScanner, version %(version)s")
@click.argument("keyword")
@click.argument("source", metavar="INPUT")
@click.option(
    "--format", "-f", "output_format",
    default=None,
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    help="Формат результата (json или csv)  [default: json]",
)
@click.option(
    "--directory", "-d", "output_directory",
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help="Каталог для файлов результата  [default: .]",
)
@click.option(
    "--parallel", "-p", "parallel_scans",
    default=None,
    type=click.IntRange(min=1),
    help="Число параллельных сканирований  [default: 3]",
)
@click.option(
    "--timeout", "-t", "timeout_millis",
    default=None,
    type=click.IntRange(min=1),
    help="Таймаут запроса в миллисекундах",
)
@click.option("--user-agent", "-u", "user_agent", default=None, help="Свой заголовок User-Agent")
@click.option(
    "--config", "-c", "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Путь к YAML/JSON-конфигу.",
)
@click.option(
    "--log-level", "log_level",
    default="INFO", show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Уровень логирования",
)
@click.option(
    "--log-file", "log_file",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Путь к файлу логов (stdout, если не указан)",
)
def cli(
    keyword: str,
    source: str,
    output_format: Optional[str],
    output_directory: Optional[Path],
    parallel_scans: Optional[int],
    timeout_millis: Optional[int],
    user_agent: Optional[str],
    config_path: Optional[Path],
    log_level: str,
    log_file: Optional[Path],
):
    """Обойти сайт(ы) из INPUT и найти все вхождения KEYWORD."""
    init_logging(level=log_level.upper(), log_file=log_file)

    keyword = keyword.strip().lower()
    if not keyword:
        print_error("The keyword to search for must be provided and cannot be empty.")

    try:
        cfg = load_config(config_path)
    except (OSError, ValueError, TypeError) as e:
        print_error(f"Ошибка загрузки конфигурации: {e}")

    overrides: Dict[str, Any] = {
        "output_format": output_format,
        "output_directory": str(output_directory) if output_directory else None,
        "parallel_scans": parallel_scans,
        "timeout_millis": timeout_millis,
        "user_agent": user_agent,
    }
    try:
        cfg = ScanConfig.model_validate({**cfg.model_dump(), **{k: v for k, v in overrides.items() if v is not None}})
    except ValidationError as e:
        print_error(f"Некорректные параметры: {e}")

    try:
        urls = load_urls(source)
    except FileNotFoundError as e:
        print_error(str(e))
    if not urls:
        print_error(f"No URLs to process in {source}")

    logger.info('Start search for "%s"', keyword)
    engine = Engine(cfg)
    results = engine.run_sync(urls, keyword)

    # единственный URL: печатаем отчёт в stdout
    if len(urls) == 1:
        click.echo(results[0].json(pretty=True))

    if engine.failed_saves:
        print_error(f"Ошибка при сохранении результата: {', '.join(engine.failed_saves)}")


if __name__ == "__main__":
    cli()
