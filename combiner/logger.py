"""Настройка логирования для пакета `combiner`.

Usage:
    from combiner.logger import configure_logging

    configure_logging("DEBUG", log_file=Path("logs/combiner.log"))
"""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOGGER_NAME = "combiner"

# Ротация: 10 МБ на файл, 5 последних файлов
MAX_BYTES = 10 * 1024 * 1024
BACKUP_COUNT = 5

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = "INFO", log_file: Optional[Path] = None) -> logging.Logger:
    """Настраивает логгер пакета; повторный вызов заменяет обработчики."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8"
        )
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger
