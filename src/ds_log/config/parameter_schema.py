"""Parameter parsing helpers for ds_log."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Optional

import yaml

from ds_log.constants import DEFAULT_APP_NAME, DEFAULT_APP_VERSION
from ds_log.utils.logging_utils import get_logger
from ds_log.utils.path_utils import resolve_relative_path

_ENV_OVERRIDES = {
    'DS_LOG_HOME': 'home_dir',
    'DS_LOG_TEMP_DIR': 'temp_dir',
}


@dataclass
class LoggerParameters:
    app_name: str = DEFAULT_APP_NAME
    app_version: str = DEFAULT_APP_VERSION
    home_dir: str = ''
    temp_dir: str = ''
    echo_console: bool = True


def load_parameters(path_str: Optional[str] = None) -> LoggerParameters:
    """Read ``LoggerParameters`` from a YAML file, then apply env overrides.

    The mapping may sit at the top level or under a ``ds_log:`` key. A missing
    path falls back to defaults; unknown keys are rejected.
    """
    logger = get_logger(__name__)
    data: dict = {}

    if path_str:
        try:
            path = resolve_relative_path(path_str, must_exist=True)
        except FileNotFoundError:
            logger.warning('Config file %s missing, using defaults', path_str)
        else:
            try:
                data = yaml.safe_load(path.read_text()) or {}
            except yaml.YAMLError as exc:
                raise ValueError(f'Config file {path} is not valid YAML: {exc}') from exc
            if not isinstance(data, dict):
                raise ValueError(f'Config file {path} must contain a mapping')
            if 'ds_log' in data:
                data = data['ds_log'] or {}
                if not isinstance(data, dict):
                    raise ValueError(f'Config file {path}: ds_log section must be a mapping')

    known = {f.name for f in fields(LoggerParameters)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f'Unknown ds_log parameters: {sorted(unknown)}')

    echo_console = data.get('echo_console', True)
    if not isinstance(echo_console, bool):
        raise ValueError(f'echo_console must be true or false, got {echo_console!r}')

    params = LoggerParameters(
        app_name=str(data.get('app_name', DEFAULT_APP_NAME)),
        app_version=str(data.get('app_version', DEFAULT_APP_VERSION)),
        home_dir=str(data.get('home_dir') or ''),
        temp_dir=str(data.get('temp_dir') or ''),
        echo_console=echo_console,
    )
    if not params.app_name.strip():
        raise ValueError('app_name must not be empty')

    for env_name, attr in _ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            setattr(params, attr, value)
    return params
