import logging

import pytest

from ds_log.core.severity import LogSeverity, severity_from_level, severity_label


@pytest.mark.parametrize(
    'severity, label',
    [
        (LogSeverity.DEBUG, 'DEBUG'),
        (LogSeverity.WARNING, 'WARNING'),
        (LogSeverity.CRITICAL, 'CRITICAL'),
        (LogSeverity.FATAL, 'FATAL'),
        (LogSeverity.SYSTEM, 'SYSTEM'),
    ],
)
def test_known_labels(severity, label):
    assert severity_label(severity) == label


@pytest.mark.parametrize('value', [42, -1, 'DEBUG', None, object()])
def test_unrecognised_severity_is_system(value):
    assert severity_label(value) == 'SYSTEM'


def test_logging_levels_map_to_severities():
    assert severity_from_level(logging.DEBUG) is LogSeverity.DEBUG
    assert severity_from_level(logging.INFO) is LogSeverity.SYSTEM
    assert severity_from_level(logging.WARNING) is LogSeverity.WARNING
    assert severity_from_level(logging.ERROR) is LogSeverity.CRITICAL
    assert severity_from_level(logging.CRITICAL) is LogSeverity.FATAL
