"""Tests for logging helpers."""

from __future__ import annotations

import logging

import pytest

from utils import logging as log_utils


@pytest.fixture
def test_root(monkeypatch):
    name = 'satwatch-test'
    monkeypatch.setattr(log_utils, 'ROOT_LOGGER', name)
    yield logging.getLogger(name)
    logging.getLogger(name).handlers.clear()


def test_configure_logging_adds_single_handler(test_root):
    log_utils.configure_logging('DEBUG')
    log_utils.configure_logging('WARNING')

    assert len(test_root.handlers) == 1
    assert test_root.level == logging.WARNING


def test_unknown_level_name_defaults_to_info(test_root):
    log_utils.configure_logging('CHATTY')

    assert test_root.level == logging.INFO


def test_get_logger_returns_named_logger():
    assert log_utils.get_logger('satwatch.passes').name == 'satwatch.passes'
