"""Entry point producers use to write diagnostic rows."""
from __future__ import annotations

import atexit
import logging
import sys
import threading
from pathlib import Path
from typing import Optional, TextIO

from ds_log.config.parameter_schema import LoggerParameters, load_parameters
from ds_log.constants import CLOSE_NOTICE
from ds_log.core.formatting import format_elapsed, format_row
from ds_log.core.session import LogSession
from ds_log.core.severity import LogSeverity, severity_from_level, severity_label
from ds_log.utils.logging_utils import get_logger, is_internal_record

_WRITER: Optional['LogWriter'] = None
_HOOKED: set[int] = set()
_WRITER_LOCK = threading.Lock()


class LogWriter:
    """Formats rows and fans them out to the session sinks and the console.

    ``emit`` never raises; once the session is closed every call is dropped.
    """

    def __init__(
        self,
        session: Optional[LogSession] = None,
        *,
        console: Optional[TextIO] = None,
    ):
        self._session = session or LogSession()
        self._console = console
        self._logger = get_logger(__name__)

    @property
    def session(self) -> LogSession:
        return self._session

    @property
    def log_file(self) -> Optional[Path]:
        return self._session.log_file

    @property
    def mirror_file(self) -> Optional[Path]:
        return self._session.mirror_file

    def emit(self, severity, message) -> None:
        session = self._session
        with session.lock:
            if session.closed:
                return
            try:
                session.ensure_started()
                row = format_row(
                    format_elapsed(session.elapsed_ms()),
                    severity_label(severity),
                    str(message),
                )
            except Exception as exc:  # pragma: no cover - never propagate into producers
                self._logger.warning('Dropping log message: %s', exc)
                return

            sinks = session.sinks()
            for sink in sinks:
                session.write(sink, row)

            console = self._console_stream()
            if console is not None and all(console is not sink for sink in sinks):
                session.write(console, row)

    def debug(self, message) -> None:
        self.emit(LogSeverity.DEBUG, message)

    def warning(self, message) -> None:
        self.emit(LogSeverity.WARNING, message)

    def critical(self, message) -> None:
        self.emit(LogSeverity.CRITICAL, message)

    def fatal(self, message) -> None:
        self.emit(LogSeverity.FATAL, message)

    def system(self, message) -> None:
        self.emit(LogSeverity.SYSTEM, message)

    def close(self) -> None:
        """Write the closing notice and release the session. Safe to call repeatedly."""
        session = self._session
        with session.lock:
            if not session.initialized:
                return
            self.emit(LogSeverity.DEBUG, CLOSE_NOTICE)
            session.close()

    def _console_stream(self) -> Optional[TextIO]:
        if not self._session.params.echo_console:
            return None
        return self._console if self._console is not None else sys.stderr


class DiagnosticLogHandler(logging.Handler):
    """Forward stdlib ``logging`` records to a :class:`LogWriter`."""

    def __init__(self, writer: LogWriter, level: int = logging.NOTSET):
        super().__init__(level)
        self._writer = writer

    def emit(self, record: logging.LogRecord) -> None:
        if is_internal_record(record):
            return
        try:
            message = self.format(record)
        except Exception:  # pragma: no cover - formatting errors reported by logging
            self.handleError(record)
            return
        self._writer.emit(severity_from_level(record.levelno), message)


def get_diagnostic_writer(params: Optional[LoggerParameters] = None) -> LogWriter:
    """Return the process-wide writer, creating it on first use."""
    global _WRITER
    if _WRITER:
        return _WRITER

    with _WRITER_LOCK:
        if _WRITER is None:
            _WRITER = LogWriter(LogSession(params or load_parameters()))
    return _WRITER


def install_shutdown_hook(writer: LogWriter) -> None:
    """Close ``writer`` at interpreter exit (registered once per writer)."""
    if id(writer) in _HOOKED:
        return
    _HOOKED.add(id(writer))
    atexit.register(writer.close)
