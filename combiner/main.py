"""Точка входа командной строки."""
from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from combiner.app import CombinerApp
from combiner.config import CombineConfig, ConfigurationError, Settings, parse_log_level
from combiner.models.errors import CombinerError

logger = logging.getLogger("combiner")

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="combiner",
        description="Объединяет два изображения одного формата, чередуя их пиксели.",
        epilog="Пример: combiner images/fcc_glyph.png images/pro.png images/output.png",
    )
    parser.add_argument("image_1", type=Path, help="первое входное изображение")
    parser.add_argument("image_2", type=Path, help="второе входное изображение")
    parser.add_argument("output", type=Path, help="путь к выходному изображению")
    parser.add_argument("--log-level", default=None, help="уровень логирования (по умолчанию из COMBINER_LOG_LEVEL)")
    parser.add_argument("--log-file", type=Path, default=None, help="файл логов с ротацией")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Разбирает аргументы, запускает комбинирование и возвращает код выхода."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env()
        if args.log_level is not None:
            settings = replace(settings, log_level=parse_log_level(args.log_level))
        if args.log_file is not None:
            settings = replace(settings, log_file=args.log_file)
    except ConfigurationError as exc:
        parser.error(str(exc))

    app = CombinerApp(settings)
    config = CombineConfig(image_1=args.image_1, image_2=args.image_2, output=args.output)
    try:
        app.run(config)
    except CombinerError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
