# backend/dealership/core/logging_config.py
"""
Configuración centralizada del logging.

Todos los módulos obtienen su logger con ``logging.getLogger(__name__)``;
aquí solo se configura el logger raíz una única vez.
"""

import logging
import sys
from pathlib import Path

from dealership.core.config import Settings

_configured = False


def setup_logging(settings: Settings) -> None:
    """
    Configura el logger raíz con el nivel y formato de la configuración.

    Si ``LOG_FILE_PATH`` está definido, además del stream se escribe en
    ese fichero (se crea el directorio padre si no existe).
    """
    global _configured
    if _configured:
        return

    formatter = logging.Formatter(settings.LOG_FORMAT)
    root = logging.getLogger()
    root.setLevel(settings.LOG_LEVEL.upper())

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    if settings.LOG_FILE_PATH:
        log_path = Path(settings.LOG_FILE_PATH)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    _configured = True
