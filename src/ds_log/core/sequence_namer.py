"""Numbered log file naming."""
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

from ds_log.constants import FILENAME_TIMESTAMP_FORMAT, SEQUENCE_DIGITS


def count_logs(directory: Path, extension: str) -> int:
    return sum(1 for path in Path(directory).glob(f'*.{extension}') if path.is_file())


def pad_sequence(count: int) -> str:
    # Counts past 9999 keep all their digits.
    return str(count).rjust(SEQUENCE_DIGITS, '0')


def next_log_name(
    directory: Path,
    extension: str,
    timestamp_format: str = FILENAME_TIMESTAMP_FORMAT,
    *,
    now: Optional[datetime] = None,
) -> str:
    """Name for the next log in ``directory``.

    ``Log NNNN (MMM dd yyyy - HH_mm_ss).<extension>``, where ``NNNN`` is the
    number of ``*.<extension>`` files already present.
    """
    number = pad_sequence(count_logs(directory, extension))
    stamp = (now or datetime.now()).strftime(timestamp_format)
    return f'Log {number} {stamp}.{extension}'
