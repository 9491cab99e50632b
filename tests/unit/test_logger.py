"""Test module for FragmentLogger"""

from tableframe.logger import FragmentLogger, FragmentWarning, get_logger


def test_get_logger_returns_shared_instance():
    assert get_logger() is get_logger()


def test_handler_installed_once():
    first = FragmentLogger()
    second = FragmentLogger()
    assert first.logger is second.logger
    assert len(second.logger.handlers) == 1


def test_warn_non_finite_offset_records_details(logger):
    logger.warn_non_finite_offset(3, 'offy', float('inf'))
    warning = logger.get_warnings()[0]
    assert isinstance(warning, FragmentWarning)
    assert warning.message == "Non-finite offset: offy=inf"
    assert warning.details == {'axis': 'offy', 'value': float('inf')}


def test_warn_malformed_fragment_records_line(logger):
    logger.warn_malformed_fragment(2, "Opening and ending tag mismatch", line=1)
    warning = logger.get_warnings()[0]
    assert warning.warning_type == 'malformed_fragment'
    assert warning.details['line'] == 1


def test_clear_warnings(logger):
    logger.warn_duplicate_id(1)
    assert len(logger.get_warnings()) == 1
    logger.clear_warnings()
    assert logger.get_warnings() == []
