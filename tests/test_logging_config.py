"""Tests for itipcheck.logging_config."""

from __future__ import annotations

import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from itipcheck.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def test_text_output() -> None:
    configure_logging("debug")
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0].formatter, JsonFormatter)


def test_json_output() -> None:
    configure_logging("INFO", json_output=True)
    root = logging.getLogger()
    assert root.level == logging.INFO
    assert isinstance(root.handlers[0].formatter, JsonFormatter)


def test_invalid_level() -> None:
    with pytest.raises(ValueError):
        configure_logging("LOUD")
