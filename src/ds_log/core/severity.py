"""Message severity levels and their log labels."""
from __future__ import annotations

import logging
from enum import IntEnum


class LogSeverity(IntEnum):
    DEBUG = 0
    WARNING = 1
    CRITICAL = 2
    FATAL = 3
    SYSTEM = 4


_LABELS = {
    LogSeverity.DEBUG: 'DEBUG',
    LogSeverity.WARNING: 'WARNING',
    LogSeverity.CRITICAL: 'CRITICAL',
    LogSeverity.FATAL: 'FATAL',
}


def severity_label(severity) -> str:
    """Label for the ERROR LEVEL column; anything unrecognised is ``SYSTEM``."""
    try:
        return _LABELS.get(LogSeverity(severity), 'SYSTEM')
    except (ValueError, TypeError):
        return 'SYSTEM'


def severity_from_level(levelno: int) -> LogSeverity:
    """Map a stdlib ``logging`` level onto the closest severity."""
    if levelno >= logging.CRITICAL:
        return LogSeverity.FATAL
    if levelno >= logging.ERROR:
        return LogSeverity.CRITICAL
    if levelno >= logging.WARNING:
        return LogSeverity.WARNING
    if levelno >= logging.INFO:
        return LogSeverity.SYSTEM
    return LogSeverity.DEBUG
