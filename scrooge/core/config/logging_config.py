# scrooge/core/config/logging_config.py

import os
import logging
from typing import Dict, Any

class LoggingConfig:
    """
    Niveles de log por canal (archivo de sesión y terminal).
    """

    def __init__(self):
        self._file_level = self._parse_level(os.getenv("SCROOGE_LOG_LEVEL", "INFO"))
        self._console_level = self._parse_level(os.getenv("SCROOGE_CONSOLE_LEVEL", "ERROR"))

    @staticmethod
    def _parse_level(name: str) -> int:
        level = logging.getLevelName(str(name).upper())
        if not isinstance(level, int):
            raise ValueError(f"Nivel de log desconocido: {name}")
        return level

    # --- Getters ---
    @property
    def file_level(self) -> int: return self._file_level
    @property
    def console_level(self) -> int: return self._console_level

    def update_from_dict(self, data: Dict[str, Any]) -> None:
        if not data:
            return
        if "level" in data:
            self._file_level = self._parse_level(data["level"])
        if "console_level" in data:
            self._console_level = self._parse_level(data["console_level"])
