"""Контроллер комбинирования: оркестрация сервисов за один запуск.

SOLID:
- SRP: класс только связывает шаги (декодирование, проверка формата,
  выравнивание размера, чередование пикселей, запись), без логики обработки.
- DIP: сервисы передаются извне; конкретные реализации инкапсулированы.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from combiner.config import CombineConfig
from combiner.models.errors import FormatMismatch
from combiner.models.output_image import OutputImage
from combiner.services.combine_service import CombineService
from combiner.services.image_service import ImageService
from combiner.services.size_service import SizeService

logger = logging.getLogger(__name__)


@dataclass
class CombineController:
    """Выполняет один проход: два входных файла -> один выходной.

    Ответственности:
    - Декодирование обоих входов через `ImageService`.
    - Проверка совпадения форматов до любой тяжёлой работы.
    - Выравнивание размеров через `SizeService`.
    - Чередование пикселей через `CombineService`.
    - Проверка ёмкости и запись результата через `OutputImage`.
    """
    image_service: ImageService = field(default_factory=ImageService)
    size_service: SizeService = field(default_factory=SizeService)
    combine_service: CombineService = field(default_factory=CombineService)

    def run(self, config: CombineConfig) -> Path:
        """Комбинирует изображения из `config` и возвращает путь к результату.

        Raises:
            CombinerError: любой вид ошибки из `combiner.models.errors`.
        """
        image_1, format_1 = self.image_service.decode(config.image_1)
        image_2, format_2 = self.image_service.decode(config.image_2)

        if format_1 != format_2:
            raise FormatMismatch(
                f"Форматы не совпадают: {config.image_1} ({format_1.value}), "
                f"{config.image_2} ({format_2.value})"
            )

        image_1, image_2 = self.size_service.standardize(image_1, image_2)
        logger.info("Размер результата: %dx%d", image_1.width, image_1.height)

        output = OutputImage(image_1.width, image_1.height, config.output)
        output.set_data(self.combine_service.combine_images(image_1, image_2))
        return output.write_to_file(format_1)
