"""
ds_log - driver station diagnostic log writer

Writes severity-tagged rows, timestamped relative to session start, to a
numbered log file under ``~/.<app>/Logs`` and to a mirror file in the
temp directory.
"""

from .core.severity import LogSeverity
from .core.session import LogSession
from .core.writer import (
    DiagnosticLogHandler,
    LogWriter,
    get_diagnostic_writer,
    install_shutdown_hook,
)
from .config.parameter_schema import LoggerParameters, load_parameters

__version__ = '0.1.0'
__all__ = [
    'LogSeverity',
    'LogSession',
    'LogWriter',
    'DiagnosticLogHandler',
    'get_diagnostic_writer',
    'install_shutdown_hook',
    'LoggerParameters',
    'load_parameters',
]
