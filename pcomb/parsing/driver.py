# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import logging
from typing import Any, TypeVar

from pcomb.parsing.result import describe, Input, Parser, render, Success
from typeguard import typechecked

logger = logging.getLogger(__name__)

_TResult = TypeVar("_TResult")


class ParseError(Exception):
    """Raised by `parse` when the parser fails on the given input."""

    def __init__(self, expected: Any, actual: Input) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Parse error. Expected {describe(expected)}. Instead found {render(actual)}."
        )


@typechecked
def parse(parser: Parser[_TResult], s: Input) -> Success[_TResult]:
    """Run `parser` on `s`.

    Returns the `Success` as is; whether leftover input matters is up to the
    caller (sequence the parser with `eof` to require full consumption).

    Raises:
        `ParseError` if the parser fails.
    """
    result = parser(s)
    if not result:
        logger.debug(f"Parse failed; expected {describe(result.expected)}")
        raise ParseError(result.expected, result.actual)
    return result
