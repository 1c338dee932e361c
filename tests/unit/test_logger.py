"""Unit tests for logging setup."""

import logging

import pytest

from config.logger import console_handler, setup_logging


def test_setup_logging_adds_console_handler_once(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    setup_logging()
    setup_logging()

    root_logger = logging.getLogger()
    assert root_logger.handlers.count(console_handler) == 1
    assert root_logger.level == logging.DEBUG


def test_setup_logging_rejects_unknown_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValueError):
        setup_logging()
