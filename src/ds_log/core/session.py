"""Log session lifecycle: lazy start, elapsed clock and one-shot close."""
from __future__ import annotations

import platform
import sys
import threading
import time
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, TextIO

from ds_log.config.parameter_schema import LoggerParameters
from ds_log.constants import CREATED_TIMESTAMP_FORMAT, HEADER_TITLE
from ds_log.core.formatting import header_lines
from ds_log.core.sequence_namer import next_log_name
from ds_log.utils.logging_utils import get_logger
from ds_log.utils.path_utils import logs_directory, logs_extension, mirror_path


class SessionState(Enum):
    UNINITIALIZED = 'uninitialized'
    INITIALIZED = 'initialized'
    CLOSED = 'closed'


class LogSession:
    """Owns the open log file, the mirror file and the elapsed-time clock.

    ``UNINITIALIZED -> INITIALIZED -> CLOSED``; there is no way back. If the
    persistent log cannot be created the session writes to ``fallback_stream``
    (stderr by default) instead of failing.
    """

    def __init__(
        self,
        params: Optional[LoggerParameters] = None,
        *,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = datetime.now,
        fallback_stream: Optional[TextIO] = None,
    ):
        self._params = params or LoggerParameters()
        self._clock = clock
        self._now = now
        self._fallback_stream = fallback_stream
        self._logger = get_logger(__name__)
        self.lock = threading.RLock()

        self._state = SessionState.UNINITIALIZED
        self._start: float = 0.0
        self._file: Optional[TextIO] = None
        self._mirror: Optional[TextIO] = None
        self._log_file: Optional[Path] = None
        self._mirror_file: Optional[Path] = None
        self._owned: List[TextIO] = []

    # ------------------------------------------------------------------ state
    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def initialized(self) -> bool:
        return self._state is SessionState.INITIALIZED

    @property
    def closed(self) -> bool:
        return self._state is SessionState.CLOSED

    @property
    def params(self) -> LoggerParameters:
        return self._params

    @property
    def log_file(self) -> Optional[Path]:
        """Persistent log path, ``None`` before start or when degraded to the fallback stream."""
        return self._log_file

    @property
    def mirror_file(self) -> Optional[Path]:
        return self._mirror_file

    @property
    def degraded(self) -> bool:
        return self._file is not None and self._file not in self._owned

    def sinks(self) -> List[TextIO]:
        return [sink for sink in (self._file, self._mirror) if sink is not None]

    # ------------------------------------------------------------------ lifecycle
    def ensure_started(self) -> None:
        with self.lock:
            if self._state is not SessionState.UNINITIALIZED:
                return

            self._start = self._clock()
            self._mirror_file = mirror_path(self._params.temp_dir)
            self._file = self._open_log_file()
            self._mirror = self._open_mirror()

            created = self._now().strftime(CREATED_TIMESTAMP_FORMAT)
            lines = header_lines(
                title=HEADER_TITLE,
                created=created,
                system=platform.platform(),
                app_name=self._params.app_name,
                app_version=self._params.app_version,
            )
            header = ''.join(f'{line}\n' for line in lines)
            for sink in self.sinks():
                self.write(sink, header)

            self._state = SessionState.INITIALIZED
            self._logger.info('Log session started. Output file: %s', self._log_file or '<stderr>')

    def elapsed_ms(self) -> int:
        """Milliseconds since :meth:`ensure_started`; zero before the session starts."""
        if self._state is SessionState.UNINITIALIZED:
            return 0
        return int((self._clock() - self._start) * 1000)

    def close(self) -> None:
        """Flush and release the sinks once; later calls do nothing."""
        with self.lock:
            if self._state is not SessionState.INITIALIZED:
                return
            self._state = SessionState.CLOSED

            for sink in self.sinks():
                self._release(sink)
            self._file = None
            self._mirror = None
            self._logger.info('Log session closed')

    # ------------------------------------------------------------------ io
    def write(self, sink: TextIO, text: str) -> bool:
        """Write ``text`` to one sink and flush it; report failures instead of raising."""
        try:
            sink.write(text)
            sink.flush()
        except (OSError, ValueError) as exc:
            self._logger.warning('Failed writing to %s: %s', getattr(sink, 'name', sink), exc)
            return False
        return True

    # ------------------------------------------------------------------ helpers
    def _fallback(self) -> TextIO:
        return self._fallback_stream if self._fallback_stream is not None else sys.stderr

    def _open_log_file(self) -> TextIO:
        try:
            directory = logs_directory(self._params.app_name, self._params.home_dir or None)
            extension = logs_extension()
            path = directory / next_log_name(directory, extension, now=self._now())
            handle = open(path, 'w', encoding='utf-8')
        except OSError as exc:
            self._logger.warning('Cannot create log file (%s); writing to stderr instead', exc)
            return self._fallback()
        self._log_file = path
        self._owned.append(handle)
        return handle

    def _open_mirror(self) -> Optional[TextIO]:
        try:
            handle = open(self._mirror_file, 'w', encoding='utf-8')
        except OSError as exc:
            self._logger.warning('Cannot open mirror file %s: %s', self._mirror_file, exc)
            return None
        self._owned.append(handle)
        return handle

    def _release(self, sink: TextIO) -> None:
        try:
            sink.flush()
            if sink in self._owned:
                sink.close()
        except (OSError, ValueError) as exc:
            self._logger.warning('Failed closing %s: %s', getattr(sink, 'name', sink), exc)
