"""Utility functions for logging."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

# Logging defaults
DEFAULT_LOG_LEVEL = logging.INFO
DEFAULT_LOG_FORMATTER = "\n%(asctime)s: %(levelname)s: %(filename)s:%(lineno)s::%(module)s::%(funcName)s:\n%(message)s"
DEFAULT_LOG_DATETIME = "%y-%m-%d %H:%M:%S"
DEFAULT_LOG_MAXBYTES = int(2e6)  # 2MB
DEFAULT_LOG_DIR = ".logging"


def setup_logging(
    log_filename: str | None = None,
    max_bytes: int | None = None,
    log_level: int | None = None,
    delete_previous_logs: bool = False,
    log_stdout: bool = True,
    log_format_string: str | None = None,
    keep_previous_handlers: bool = False,
) -> None:
    r"""Configure the root logger for a script talking to the chain.

    Subscriptions, retries and submitted transactions are logged through the root logger, so this is
    the one place to route them to stdout, a rotating file, or both.

    Arguments
    ---------
    log_filename: str | None, optional
        Path and name of the log file. If None, nothing is logged to file.
    max_bytes: int | None, optional
        Size in bytes at which the log file rotates. Defaults to DEFAULT_LOG_MAXBYTES.
    log_level: int | None, optional
        Level of the new handlers. Defaults to DEFAULT_LOG_LEVEL.
    delete_previous_logs: bool, optional
        Whether to delete an existing log file first. Defaults to False.
    log_stdout: bool, optional
        Whether to log to standard output. Defaults to True.
    log_format_string: str | None, optional
        Format of the log records. Defaults to DEFAULT_LOG_FORMATTER.
    keep_previous_handlers: bool, optional
        Whether to keep the handlers already on the root logger. Defaults to False.
    """
    # pylint: disable=too-many-arguments
    root_logger = get_root_logger()
    if not keep_previous_handlers:
        remove_handlers(root_logger)
    if log_stdout:
        add_stdout_handler(log_format_string=log_format_string, log_level=log_level)
    if log_filename is not None:
        add_file_handler(
            log_filename=log_filename,
            delete_previous_logs=delete_previous_logs,
            log_format_string=log_format_string,
            max_bytes=max_bytes,
            log_level=log_level,
        )
    # The root logger filters before its handlers do, so it must pass the lowest handler level
    if root_logger.handlers:
        root_logger.setLevel(min(handler.level for handler in root_logger.handlers))
    else:
        root_logger.setLevel(DEFAULT_LOG_LEVEL if log_level is None else log_level)


def close_logging(delete_logs: bool = True) -> None:
    """Flush and remove every root handler.

    Arguments
    ---------
    delete_logs: bool, optional
        Whether to delete the files written by file handlers. Defaults to True.
    """
    root_logger = get_root_logger()
    for handler in list(root_logger.handlers):
        handler.close()
        log_path = getattr(handler, "baseFilename", None)
        if delete_logs and log_path is not None and os.path.exists(log_path):
            os.remove(log_path)
    remove_handlers(root_logger)


def prepare_log_path(log_filename: str) -> str:
    """Build the full path of a log file, creating its directory.

    A ".log" extension is added when missing. Bare file names go in DEFAULT_LOG_DIR under the
    working directory.

    Arguments
    ---------
    log_filename: str
        Path and name of the log file.

    Returns
    -------
    str
        The path to log to.
    """
    log_dir, log_name = os.path.split(log_filename)
    if not log_name.endswith(".log"):
        log_name += ".log"
    if log_dir == "":
        log_dir = os.path.join(os.getcwd(), DEFAULT_LOG_DIR)
    os.makedirs(log_dir, exist_ok=True)
    return os.path.join(log_dir, log_name)


def create_formatter(log_format_string: str | None = None) -> logging.Formatter:
    """Create a formatter with the default date format.

    Arguments
    ---------
    log_format_string: str | None, optional
        Format of the log records. Defaults to DEFAULT_LOG_FORMATTER.

    Returns
    -------
    logging.Formatter
        The formatter.
    """
    return logging.Formatter(log_format_string or DEFAULT_LOG_FORMATTER, DEFAULT_LOG_DATETIME)


def get_root_logger(root_logger: logging.Logger | None = None) -> logging.Logger:
    """Return the given logger, or the root logger."""
    if root_logger is None:
        root_logger = logging.getLogger()
    return root_logger


def add_stdout_handler(
    logger: logging.Logger | None = None,
    log_format_string: str | None = None,
    log_level: int | None = None,
    keep_previous_handlers: bool = True,
) -> logging.Handler:
    """Log to standard output.

    Arguments
    ---------
    logger: logging.Logger | None, optional
        Logger to add the handler to. Defaults to the root logger.
    log_format_string: str | None, optional
        Format of the log records. Defaults to DEFAULT_LOG_FORMATTER.
    log_level: int | None, optional
        Level of the handler. Defaults to DEFAULT_LOG_LEVEL.
    keep_previous_handlers: bool, optional
        Whether to keep the handlers already on the logger. Defaults to True.

    Returns
    -------
    logging.Handler
        The added handler.
    """
    logger = get_root_logger(logger)
    if not keep_previous_handlers:
        remove_handlers(logger)
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setLevel(DEFAULT_LOG_LEVEL if log_level is None else log_level)
    stream_handler.setFormatter(create_formatter(log_format_string))
    logger.addHandler(stream_handler)
    return stream_handler


def add_file_handler(
    log_filename: str,
    logger: logging.Logger | None = None,
    delete_previous_logs: bool = False,
    log_format_string: str | None = None,
    log_level: int | None = None,
    max_bytes: int | None = None,
    keep_previous_handlers: bool = True,
) -> logging.Handler:
    """Log to a rotating file.

    Arguments
    ---------
    log_filename: str
        Path and name of the log file.
    logger: logging.Logger | None, optional
        Logger to add the handler to. Defaults to the root logger.
    delete_previous_logs: bool, optional
        Whether to delete an existing log file first. Defaults to False.
    log_format_string: str | None, optional
        Format of the log records. Defaults to DEFAULT_LOG_FORMATTER.
    log_level: int | None, optional
        Level of the handler. Defaults to DEFAULT_LOG_LEVEL.
    max_bytes: int | None, optional
        Size in bytes at which the file rotates. Defaults to DEFAULT_LOG_MAXBYTES.
    keep_previous_handlers: bool, optional
        Whether to keep the handlers already on the logger. Defaults to True.

    Returns
    -------
    logging.Handler
        The added handler.
    """
    # pylint: disable=too-many-arguments
    logger = get_root_logger(logger)
    if not keep_previous_handlers:
        remove_handlers(logger)
    log_path = prepare_log_path(log_filename)
    if delete_previous_logs and os.path.exists(log_path):
        os.remove(log_path)
    file_handler = RotatingFileHandler(
        log_path, mode="w", maxBytes=DEFAULT_LOG_MAXBYTES if max_bytes is None else max_bytes
    )
    file_handler.setLevel(DEFAULT_LOG_LEVEL if log_level is None else log_level)
    file_handler.setFormatter(create_formatter(log_format_string))
    logger.addHandler(file_handler)
    return file_handler


def remove_handlers(logger: logging.Logger) -> None:
    """Remove all handlers attached directly to the logger."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
