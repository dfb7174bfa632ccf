"""Приведение двух изображений к одному размеру.

Большее (по числу пикселей) изображение уменьшается до точного размера
меньшего с билинейной (треугольной) интерполяцией, чтобы сетки пикселей
совпадали один к одному. Исходные объекты не изменяются.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Tuple

from PIL import Image

from combiner.models.errors import InvalidDimensions
from combiner.models.image_model import DecodedImage

logger = logging.getLogger(__name__)


class SizeService:
    resample = Image.Resampling.BILINEAR

    def standardize(self, image_a: DecodedImage, image_b: DecodedImage) -> Tuple[DecodedImage, DecodedImage]:
        """Возвращает пару изображений одинакового размера.

        Эталон — изображение со строго меньшим числом пикселей. При равном
        числе пикселей эталоном считается второе изображение; если размеры
        уже совпадают, изменение размера не выполняется.

        Raises:
            InvalidDimensions: если у одного из изображений нулевой размер.
        """
        for image in (image_a, image_b):
            self._check_dimensions(image.width, image.height)

        if image_a.size == image_b.size:
            return image_a, image_b

        if image_a.pixel_count < image_b.pixel_count:
            return image_a, self.resize(image_b, image_a.width, image_a.height)
        return self.resize(image_a, image_b.width, image_b.height), image_b

    def resize(self, image: DecodedImage, width: int, height: int) -> DecodedImage:
        """Возвращает новое `DecodedImage` точного размера `width` x `height`."""
        self._check_dimensions(width, height)
        logger.debug(
            "Изменение размера %s: %dx%d -> %dx%d", image.path, image.width, image.height, width, height
        )
        resized = image.pil_image.resize((width, height), self.resample)
        return replace(image, pil_image=resized, width=width, height=height)

    # ---------- Вспомогательные функции ----------
    def _check_dimensions(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise InvalidDimensions(f"Недопустимый размер изображения: {width}x{height}")
