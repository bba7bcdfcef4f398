"""Единая настройка логирования пакета."""

from __future__ import annotations

import logging
from typing import Optional, Union

ROOT_LOGGER_NAME = "utcs"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_configured = False


def configure_logging(level: Union[int, str] = logging.INFO, fmt: Optional[str] = None) -> logging.Logger:
    """Подключает консольный обработчик к корневому логгеру пакета (один раз)."""

    global _configured
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt or LOG_FORMAT))
        root.addHandler(handler)
        _configured = True
    return root


def get_logger(name: str) -> logging.Logger:
    """Возвращает логгер модуля внутри иерархии ``utcs``."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
