"""
log_config.py

Централізоване налаштування логування для застосунку.

Використання:
    from regressionAPP.log_config import setup_logging, get_logger

    # у main() (один раз при старті)
    setup_logging(level="DEBUG", log_file="/tmp/regression_demo.log")

    # у будь-якому модулі
    logger = get_logger(__name__)
    logger.debug("Повідомлення")
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "regressionAPP"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    console: bool = False,
) -> None:
    """
    Налаштувати дерево логерів "regressionAPP".

    Parameters
    ----------
    level : str
        'DEBUG', 'INFO', 'WARNING', 'ERROR' або 'CRITICAL'.
    log_file : Optional[str]
        Шлях до файлу логів (використовується лише для DEBUG/INFO).
    console : bool
        Якщо True, дублювати повідомлення в stderr.
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    if numeric_level <= logging.INFO and log_file:
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # щоб не було попереджень "no handlers could be found"
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.debug(
        "Логування налаштовано: level=%s, log_file=%s, console=%s",
        level, log_file, console,
    )


def get_logger(name: str) -> logging.Logger:
    """Повернути логер, вкладений у дерево "regressionAPP"."""
    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


__all__ = [
    "setup_logging",
    "get_logger",
]
