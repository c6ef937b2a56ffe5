# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pcomb.utils.log import init_logger


def test_init_logger_to_file(tmp_path: Path) -> None:
    logger, handler = init_logger(
        "pcomb.test_log", log_level=logging.INFO, log_dir=str(tmp_path / "logs")
    )
    try:
        assert isinstance(handler, RotatingFileHandler)
        assert logger.level == logging.INFO

        logger.info("hello")
        logger.debug("not written")
        handler.flush()

        contents = (tmp_path / "logs" / "pcomb.log").read_text()
        assert "[INFO] - [pcomb.test_log] - hello" in contents
        assert "not written" not in contents
    finally:
        logger.removeHandler(handler)
        handler.close()


def test_init_logger_to_stdout() -> None:
    logger, handler = init_logger("pcomb.test_log_stdout", log_stdout=True)
    try:
        assert isinstance(handler, logging.StreamHandler)
        assert not isinstance(handler, RotatingFileHandler)
        assert logger.level == logging.WARNING
        assert handler in logger.handlers
    finally:
        logger.removeHandler(handler)
