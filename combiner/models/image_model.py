"""Модели данных для декодированных изображений.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from PIL import Image

BYTES_PER_PIXEL = 4


class FormatTag(str, Enum):
    """Поддерживаемые форматы кодирования (имена как в `PIL.Image.format`)."""

    PNG = "PNG"
    JPEG = "JPEG"
    GIF = "GIF"
    BMP = "BMP"
    TIFF = "TIFF"
    WEBP = "WEBP"
    ICO = "ICO"
    TGA = "TGA"
    PPM = "PPM"

    @classmethod
    def from_pil(cls, name: Optional[str]) -> Optional["FormatTag"]:
        """Возвращает тег по имени формата Pillow или `None`, если формат не поддерживается."""
        if not name:
            return None
        try:
            return cls(name.upper())
        except ValueError:
            return None

    @property
    def supports_alpha(self) -> bool:
        return self not in (FormatTag.JPEG, FormatTag.PPM)

    @property
    def max_dimension(self) -> Optional[int]:
        # в заголовке ICO на размер отводится один байт
        if self is FormatTag.ICO:
            return 256
        return None

    def save_options(self, size: Tuple[int, int]) -> Dict[str, Any]:
        """Дополнительные параметры `Image.save` для изображения размера `size`."""
        # lossy WebP изменил бы пиксели
        if self is FormatTag.WEBP:
            return {"lossless": True}
        # без явного списка ICO пишет только стандартные размеры 16..256
        if self is FormatTag.ICO:
            return {"sizes": [size]}
        return {}


@dataclass(frozen=True)
class DecodedImage:
    """Неизменяемая модель декодированного изображения.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Полностью загруженное изображение PIL в режиме RGBA.
        width: Ширина, px.
        height: Высота, px.
        format: Формат, в котором изображение было закодировано на диске.
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int
    format: FormatTag

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def pixels(self) -> bytes:
        """RGBA8-данные построчно, 4 байта на пиксель."""
        return self.pil_image.tobytes()
