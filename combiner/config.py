"""Конфигурация запуска.

- `CombineConfig` — явные пути двух входных и одного выходного изображения.
- `Settings` — параметры окружения (уровень и файл логов), читаются из
  переменных окружения и необязательного файла `.env`.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Некорректное значение настройки."""


@dataclass(frozen=True)
class CombineConfig:
    """Пути одного запуска: два входных изображения и выходной файл."""
    image_1: Path
    image_2: Path
    output: Path


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Читает `COMBINER_LOG_LEVEL` и `COMBINER_LOG_FILE`.

        Raises:
            ConfigurationError: если уровень логирования неизвестен.
        """
        env = os.environ if environ is None else environ
        level = parse_log_level(env.get("COMBINER_LOG_LEVEL", "INFO"))
        log_file = env.get("COMBINER_LOG_FILE") or None
        return cls(log_level=level, log_file=Path(log_file) if log_file else None)


def parse_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            f"Неизвестный уровень логирования {value!r}, допустимо: {', '.join(LOG_LEVELS)}"
        )
    return level
