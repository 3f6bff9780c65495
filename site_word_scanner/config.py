# === FILE: site_word_scanner/config.py ===
"""
Модуль для загрузки и валидации конфигурации SiteWordScanner.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; SiteWordScanner/1.0)"


class OutputFormat(str, Enum):
    JSON = "json"
    CSV = "csv"


class RequestOptions(BaseModel):
    """Параметры HTTP-запросов одного сканирования домена."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    user_agent: Optional[str] = Field(None, description="Заголовок User-Agent.")
    timeout_millis: Optional[int] = Field(
        None, gt=0, description="Таймаут на один запрос (мс). None: ждать без ограничения."
    )

    @property
    def timeout_seconds(self) -> Optional[float]:
        return None if self.timeout_millis is None else self.timeout_millis / 1000

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent or DEFAULT_USER_AGENT}


class ScanConfig(BaseModel):
    """Конфигурация запуска: формат и место вывода, параллелизм, параметры запросов."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    output_format: OutputFormat = Field(OutputFormat.JSON, description="Формат файла результата.")
    output_directory: str = Field(".", min_length=1, description="Каталог для файлов результата.")
    parallel_scans: int = Field(3, ge=1, description="Число одновременно сканируемых доменов.")
    timeout_millis: Optional[int] = Field(None, gt=0, description="Таймаут на один запрос (мс).")
    user_agent: Optional[str] = Field(None, min_length=1, description="Заголовок User-Agent.")

    @field_validator("output_format", mode="before")
    def _lower_format(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.lower()
        return v

    def request_options(self) -> RequestOptions:
        return RequestOptions(user_agent=self.user_agent, timeout_millis=self.timeout_millis)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None) -> ScanConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект ScanConfig.
    Без пути возвращает конфигурацию по умолчанию.
    """
    if path is None:
        return ScanConfig()

    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return ScanConfig(**data)


__all__ = [
    "DEFAULT_USER_AGENT",
    "OutputFormat",
    "RequestOptions",
    "ScanConfig",
    "ValidationError",
    "load_config",
]
