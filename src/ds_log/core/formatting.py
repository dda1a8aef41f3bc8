"""Pure formatting helpers for log rows and the session header."""
from __future__ import annotations

from typing import List

from ds_log.constants import (
    BANNER_CHAR,
    BANNER_WIDTH,
    COLUMN_TITLES,
    ELAPSED_COLUMN_WIDTH,
    LEVEL_COLUMN_WIDTH,
    MESSAGE_COLUMN_WIDTH,
)


def banner() -> str:
    return BANNER_CHAR * BANNER_WIDTH


def format_row(elapsed: str, level: str, message: str) -> str:
    """Render one newline-terminated, left-justified three-column row."""
    return (
        f'{elapsed:<{ELAPSED_COLUMN_WIDTH}} '
        f'{level:<{LEVEL_COLUMN_WIDTH}} '
        f'{message:<{MESSAGE_COLUMN_WIDTH}}\n'
    )


def format_elapsed(elapsed_ms: int) -> str:
    """Render milliseconds as ``MM:SS.d``.

    Minutes wrap at 60. The trailing digit is the *first* digit of the
    millisecond remainder, not a rounded tenth: 340 ms gives ``.3`` but
    so does 34 ms and 3 ms.
    """
    elapsed_ms = max(0, int(elapsed_ms))
    secs = elapsed_ms // 1000
    mins = (secs // 60) % 60
    secs %= 60
    msec = elapsed_ms % 1000
    return f'{mins:02d}:{secs:02d}.{str(msec)[0]}'


def header_lines(
    *,
    title: str,
    created: str,
    system: str,
    app_name: str,
    app_version: str,
) -> List[str]:
    """Lines (without newlines) written once at the top of every log."""
    line = banner()
    return [
        line,
        title.upper(),
        line,
        '',
        f'Log created on:      {created}',
        f'Operating System:    {system}',
        f'Application name:    {app_name}',
        f'Application version: {app_version}',
        '',
        line,
        format_row(*COLUMN_TITLES).rstrip('\n'),
        line,
    ]
