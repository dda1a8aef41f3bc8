import io
from datetime import datetime

import pytest

from ds_log.config.parameter_schema import LoggerParameters
from ds_log.core.session import LogSession
from ds_log.core.writer import LogWriter


class FakeClock:
    def __init__(self, start: float = 100.0):
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


FIXED_NOW = datetime(2016, 3, 5, 14, 7, 9)


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    monkeypatch.delenv('DS_LOG_HOME', raising=False)
    monkeypatch.delenv('DS_LOG_TEMP_DIR', raising=False)


@pytest.fixture
def params(tmp_path):
    temp_dir = tmp_path / 'tmp'
    temp_dir.mkdir()
    return LoggerParameters(
        app_name='QDriverStation',
        app_version='1.2.3',
        home_dir=str(tmp_path / 'home'),
        temp_dir=str(temp_dir),
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session(params, clock):
    session = LogSession(params, clock=clock, now=lambda: FIXED_NOW)
    yield session
    session.close()


@pytest.fixture
def console():
    return io.StringIO()


@pytest.fixture
def writer(session, console):
    return LogWriter(session, console=console)
