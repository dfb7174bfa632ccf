from pathlib import Path

from combiner.config import CombineConfig, Settings
from combiner.controllers.combine_controller import CombineController
from combiner.logger import configure_logging


class CombinerApp:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.logger = configure_logging(settings.log_level, settings.log_file)
        self._controller = CombineController()

    def run(self, config: CombineConfig) -> Path:
        self.logger.info(
            "Изображения: %s, %s -> %s", config.image_1, config.image_2, config.output
        )
        output = self._controller.run(config)
        self.logger.info("Готово: изображение сохранено в %s", output)
        return output
