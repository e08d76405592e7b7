# -*- coding: utf-8 -*-
"""
Logging configuration for the application
"""

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level: Union[int, str]) -> int:
    """Aceita nível numérico ou nome ('INFO', 'debug')"""
    if isinstance(level, int):
        return level
    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


def setup_logging(log_file: str = "countdown.log", level: Union[int, str] = logging.INFO):
    """Configura o sistema de logging (arquivo + console)"""
    level = resolve_level(level)
    formatter = logging.Formatter(LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Evita handlers duplicados em chamadas repetidas
    for handler in list(root_logger.handlers):
        if getattr(handler, "_countdown", False):
            root_logger.removeHandler(handler)
            handler.close()

    # Handler para arquivo
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(level)

    # Handler para console: as linhas de diagnóstico (Target/Current/string) são INFO
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
        handler._countdown = True
        root_logger.addHandler(handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Obtém um logger com o nome especificado"""
    return logging.getLogger(name)
