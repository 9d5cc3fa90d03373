"""Tests for logging setup."""

import logging

from common.logging_config import get_logger, setup_logging


def test_setup_logging_is_idempotent():
    logger = setup_logging('filestore-test-idempotent', log_level='DEBUG')
    again = setup_logging('filestore-test-idempotent', log_level='DEBUG')

    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_setup_logging_reads_level_from_env(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'warning')

    logger = setup_logging('filestore-test-env-level')

    assert logger.level == logging.WARNING


def test_unknown_level_falls_back_to_info():
    logger = setup_logging('filestore-test-bad-level', log_level='chatty')
    assert logger.level == logging.INFO


def test_get_logger_returns_child_of_component():
    assert get_logger('filestore.services').name == 'filestore.services'
