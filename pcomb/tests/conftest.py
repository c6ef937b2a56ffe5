# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import logging
from typing import Iterator

import pytest


@pytest.fixture(autouse=True)
def reset_pcomb_logger() -> Iterator[None]:
    """The CLI attaches handlers to the 'pcomb' logger; drop them between tests so
    they do not write to streams captured by an earlier test.
    """
    logger = logging.getLogger("pcomb")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
