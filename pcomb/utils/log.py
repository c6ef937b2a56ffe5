# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Logging setup for the command line tools."""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Tuple, Union

LOG_FORMATTER = logging.Formatter(
    "[%(asctime)s] - [%(levelname)s] - [%(name)s] - %(message)s"
)


def init_logger(
    logger_name: str,
    log_level: Union[int, str] = logging.WARNING,
    log_dir: Optional[str] = None,
    log_name: str = "pcomb.log",
    log_formatter: Optional[logging.Formatter] = LOG_FORMATTER,
    max_bytes: int = 1024 * 1024,
    backup_count: int = 2,
    log_stdout: bool = False,
) -> Tuple[logging.Logger, logging.Handler]:
    """Set up logging for `logger_name` and everything below it.

    Logs are stored at {log_dir}/{log_name} when `log_dir` is given, written to
    stdout when `log_stdout` is set, and to stderr otherwise.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)

    handler: logging.Handler
    if log_dir is not None:
        file_path = os.path.join(log_dir, log_name)
        os.makedirs(os.path.dirname(file_path), exist_ok=True)
        handler = RotatingFileHandler(
            file_path, mode="a", maxBytes=max_bytes, backupCount=backup_count
        )
    elif log_stdout:
        handler = logging.StreamHandler(sys.stdout)
    else:
        handler = logging.StreamHandler(sys.stderr)

    if log_formatter:
        handler.setFormatter(log_formatter)
    logger.addHandler(handler)

    return logger, handler
