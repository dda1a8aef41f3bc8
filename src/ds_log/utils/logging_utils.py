"""Internal logging helpers for ds_log."""
from __future__ import annotations

import logging
import os
from typing import Optional

ROOT_LOGGER_NAME = 'ds_log'

_LOGGER: Optional[logging.Logger] = None


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Return a logger under the ``ds_log`` namespace writing to stderr.

    The namespace root is configured once; children propagate to it and stop there,
    so library chatter never reaches application handlers (including
    :class:`ds_log.core.writer.DiagnosticLogHandler`).
    """
    global _LOGGER
    if _LOGGER is None:
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        logger.setLevel(_resolve_level())

        formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(name)s: %(message)s')

        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

        logger.propagate = False
        _LOGGER = logger

    if name == ROOT_LOGGER_NAME or not name.startswith(ROOT_LOGGER_NAME + '.'):
        return _LOGGER
    return logging.getLogger(name)


def _resolve_level() -> int:
    env_level = os.environ.get('DS_LOG_VERBOSITY', '').strip().upper()
    if not env_level:
        return logging.WARNING
    level = logging.getLevelName(env_level)
    return level if isinstance(level, int) else logging.WARNING


def is_internal_record(record: logging.LogRecord) -> bool:
    return record.name == ROOT_LOGGER_NAME or record.name.startswith(ROOT_LOGGER_NAME + '.')
