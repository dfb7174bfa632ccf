"""Загрузка изображений с диска и определение их формата.

Принципы:
- SRP: класс отвечает только за открытие файла и полное декодирование.
- Формат определяется до декодирования пикселей: после `convert` исходный
  файл уже закрыт.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from PIL import Image, UnidentifiedImageError

from combiner.models.errors import DecodeError, IoError
from combiner.models.image_model import DecodedImage, FormatTag

logger = logging.getLogger(__name__)


class ImageService:
    def decode(self, file_path: str | Path) -> Tuple[DecodedImage, FormatTag]:
        """Декодирует изображение с диска и возвращает его вместе с форматом.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            Пара из `DecodedImage` (RGBA, полностью загружено) и `FormatTag`.

        Raises:
            IoError: если файл не удаётся открыть.
            DecodeError: если файл не распознан или формат не поддерживается.
        """
        path = Path(file_path)
        try:
            fp = path.open("rb")
        except OSError as exc:
            raise IoError(f"Не удаётся открыть файл: {path}") from exc

        with fp:
            try:
                with Image.open(fp) as raw:
                    format_tag = FormatTag.from_pil(raw.format)
                    if format_tag is None:
                        raise DecodeError(f"Неподдерживаемый формат {raw.format!r}: {path}")
                    pil_image = raw.convert("RGBA")
            except UnidentifiedImageError as exc:
                raise DecodeError(f"Файл не является изображением: {path}") from exc
            except (OSError, ValueError, Image.DecompressionBombError) as exc:
                raise DecodeError(f"Не удалось декодировать изображение: {path}") from exc

        width, height = pil_image.size
        logger.debug("Декодировано %s: %s, %dx%d", path, format_tag.value, width, height)

        image = DecodedImage(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            format=format_tag,
        )
        return image, format_tag
