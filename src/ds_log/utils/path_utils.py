"""Shared path helpers for the ds_log package."""
from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Optional

from ds_log.constants import LOGS_EXTENSION, LOGS_SUBDIR, MIRROR_FILENAME


def _candidate_roots() -> list[Path]:
    return [
        Path(__file__).resolve().parents[3],  # repository root in a source checkout
        Path.cwd(),
    ]


def resolve_relative_path(path_str: str, *, must_exist: bool = False) -> Path:
    """Resolve ``path_str`` to an absolute :class:`Path`.

    - Absolute paths are returned as-is (optionally validated).
    - Relative paths are resolved against candidate roots in order.
    - If ``must_exist`` is True, the first existing candidate is returned; otherwise the
      first candidate path is returned even if it does not exist yet.
    """

    candidate = Path(path_str).expanduser()
    if candidate.is_absolute():
        if must_exist and not candidate.exists():
            raise FileNotFoundError(candidate)
        return candidate

    roots = _candidate_roots()
    for root in roots:
        candidate = (root / path_str).resolve()
        if candidate.exists():
            return candidate

    if must_exist:
        raise FileNotFoundError(path_str)
    return (roots[0] / path_str).resolve()


def logs_directory(app_name: str, home: Optional[str | Path] = None) -> Path:
    """Return ``<home>/.<app_name lower>/Logs``, creating it if needed.

    Raises :class:`OSError` when the directory cannot be created.
    """
    base = Path(home).expanduser() if home else Path.home()
    directory = base / f'.{app_name.lower()}' / LOGS_SUBDIR
    directory.mkdir(parents=True, exist_ok=True)
    return directory.resolve()


def logs_extension() -> str:
    return LOGS_EXTENSION


def mirror_path(temp_dir: Optional[str | Path] = None) -> Path:
    """Fixed mirror file location; every session overwrites the same file."""
    base = Path(temp_dir).expanduser() if temp_dir else Path(tempfile.gettempdir())
    return base / MIRROR_FILENAME
