"""Выходное изображение: буфер фиксированной ёмкости и запись на диск.

Ёмкость по умолчанию равна `width * height * 4` байт, поэтому ограничение
на максимальное разрешение отсутствует. Запись атомарная: данные сначала
кодируются во временный файл рядом с целевым, затем файл переименовывается.
"""
from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Optional

from PIL import Image

from combiner.models.errors import BufferTooSmall, EncodeError, InvalidDimensions, IoError
from combiner.models.image_model import BYTES_PER_PIXEL, FormatTag

logger = logging.getLogger(__name__)


class OutputImage:
    """Изображение-результат с заданным размером, данными и именем файла."""

    def __init__(self, width: int, height: int, name: str | Path, capacity: Optional[int] = None) -> None:
        if width <= 0 or height <= 0:
            raise InvalidDimensions(f"Недопустимый размер выходного изображения: {width}x{height}")
        if capacity is not None and capacity < 0:
            raise ValueError(f"Ёмкость буфера не может быть отрицательной: {capacity}")

        self.width = width
        self.height = height
        self.name = Path(name)
        self.capacity = capacity if capacity is not None else width * height * BYTES_PER_PIXEL
        self._data = b""

    @property
    def data(self) -> bytes:
        return self._data

    def set_data(self, data: bytes) -> None:
        """Сохраняет данные в буфер, заменяя прежнее содержимое.

        Raises:
            BufferTooSmall: если `len(data)` больше ёмкости буфера.
        """
        if len(data) > self.capacity:
            raise BufferTooSmall(
                f"Данные ({len(data)} байт) не помещаются в буфер ({self.capacity} байт)"
            )
        self._data = bytes(data)

    def write_to_file(self, format_tag: FormatTag) -> Path:
        """Кодирует RGBA8-буфер в заданном формате и сохраняет его в `name`.

        Для форматов без альфа-канала (JPEG, PPM) альфа отбрасывается.
        При любой ошибке целевой файл не создаётся и не изменяется.

        Returns:
            Путь к записанному файлу.

        Raises:
            EncodeError: если данные не соответствуют размеру или кодировщик не справился.
            IoError: если не удаётся создать или заменить файл.
        """
        expected = self.width * self.height * BYTES_PER_PIXEL
        if len(self._data) != expected:
            raise EncodeError(
                f"Размер данных ({len(self._data)} байт) не соответствует "
                f"изображению {self.width}x{self.height} ({expected} байт)"
            )
        limit = format_tag.max_dimension
        if limit is not None and (self.width > limit or self.height > limit):
            raise EncodeError(
                f"Формат {format_tag.value} не поддерживает размер {self.width}x{self.height} "
                f"(максимум {limit}x{limit})"
            )

        image = Image.frombytes("RGBA", (self.width, self.height), self._data)
        if not format_tag.supports_alpha:
            image = image.convert("RGB")

        target = self.name
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
            )
        except OSError as exc:
            raise IoError(f"Не удаётся записать в каталог: {target.parent}") from exc

        tmp_path = Path(tmp_name)
        try:
            try:
                options = format_tag.save_options((self.width, self.height))
                with os.fdopen(fd, "wb") as fp:
                    image.save(fp, format=format_tag.value, **options)
            except (OSError, ValueError, KeyError) as exc:
                raise EncodeError(f"Не удалось закодировать {target} как {format_tag.value}") from exc
            try:
                os.chmod(tmp_path, _output_mode(target))
                os.replace(tmp_path, target)
            except OSError as exc:
                raise IoError(f"Не удаётся записать файл: {target}") from exc
        finally:
            tmp_path.unlink(missing_ok=True)

        logger.debug("Записано %s (%s, %dx%d)", target, format_tag.value, self.width, self.height)
        return target


def _output_mode(target: Path) -> int:
    """Права для результата: как у заменяемого файла, иначе 0o666 с учётом umask."""
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        pass
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask
