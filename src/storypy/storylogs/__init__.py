"""Logging setup for scripts that use storypy."""

from .logs import (
    DEFAULT_LOG_DATETIME,
    DEFAULT_LOG_FORMATTER,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_MAXBYTES,
    add_file_handler,
    add_stdout_handler,
    close_logging,
    create_formatter,
    get_root_logger,
    prepare_log_path,
    remove_handlers,
    setup_logging,
)
