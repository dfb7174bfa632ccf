from __future__ import annotations

import numpy as np

from combiner.models.errors import BufferLengthMismatch
from combiner.models.image_model import BYTES_PER_PIXEL, DecodedImage


class CombineService:
    def combine(self, buffer_a: bytes, buffer_b: bytes) -> bytes:
        """
        Чередование пикселей двух RGBA-буферов одинаковой длины.
        Пиксель k берётся из `buffer_a` при чётном k (смещение i, i % 8 == 0)
        и из `buffer_b` при нечётном. Все 4 канала копируются без изменений.
        """
        if len(buffer_a) != len(buffer_b):
            raise BufferLengthMismatch(
                f"Буферы разной длины: {len(buffer_a)} и {len(buffer_b)} байт"
            )
        if len(buffer_a) % BYTES_PER_PIXEL:
            raise BufferLengthMismatch(
                f"Длина буфера {len(buffer_a)} не кратна размеру пикселя ({BYTES_PER_PIXEL})"
            )

        a = np.frombuffer(buffer_a, dtype=np.uint8).reshape(-1, BYTES_PER_PIXEL)
        b = np.frombuffer(buffer_b, dtype=np.uint8).reshape(-1, BYTES_PER_PIXEL)

        out = b.copy()
        out[0::2] = a[0::2]
        return out.tobytes()

    def combine_images(self, image_a: DecodedImage, image_b: DecodedImage) -> bytes:
        """
        Объединяет два изображения одного размера, возвращает RGBA8-данные результата.
        """
        return self.combine(image_a.pixels, image_b.pixels)
