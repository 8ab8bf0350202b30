"""Tests for logs.py"""

from __future__ import annotations

import logging
import os

import pytest

from .logs import add_file_handler, add_stdout_handler, close_logging, get_root_logger, prepare_log_path, setup_logging


@pytest.fixture
def root_handlers():
    """Close the handlers a test adds and restore the root logger level."""
    root_logger = get_root_logger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            handler.close()
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)


def test_setup_logging_handlers(root_handlers, tmp_path):
    """One handler per requested output, none after closing."""
    log_filename = str(tmp_path / "test_logging.log")
    setup_logging(log_filename=log_filename, log_stdout=False)
    assert len(root_handlers.handlers) == 1
    close_logging()
    assert not root_handlers.handlers

    setup_logging(log_stdout=True)
    assert len(root_handlers.handlers) == 1
    close_logging()

    setup_logging(log_filename=log_filename, log_stdout=True, log_level=logging.DEBUG)
    assert len(root_handlers.handlers) == 2
    assert root_handlers.level == logging.DEBUG


def test_file_handler_writes(root_handlers, tmp_path):
    """Records at or above the handler level reach the file."""
    log_filename = str(tmp_path / "dispute")
    handler = add_file_handler(log_filename, keep_previous_handlers=False, log_level=logging.WARNING)
    root_handlers.setLevel(logging.DEBUG)
    logging.info("Not written")
    logging.warning("Poll failed")
    handler.flush()
    with open(tmp_path / "dispute.log", encoding="utf-8") as log_file:
        contents = log_file.read()
    assert "Poll failed" in contents
    assert "Not written" not in contents
    close_logging(delete_logs=True)
    assert not os.path.exists(tmp_path / "dispute.log")


def test_add_handlers(root_handlers, tmp_path):
    """Handlers are added on top of existing ones unless asked otherwise."""
    add_stdout_handler(keep_previous_handlers=False)
    add_file_handler(str(tmp_path / "test_logging.log"))
    assert len(root_handlers.handlers) == 2
    add_stdout_handler(keep_previous_handlers=False)
    assert len(root_handlers.handlers) == 1


def test_prepare_log_path(tmp_path):
    """The .log extension is added and the directory created."""
    log_path = prepare_log_path(str(tmp_path / "nested" / "run"))
    assert log_path == str(tmp_path / "nested" / "run.log")
    assert os.path.isdir(tmp_path / "nested")
