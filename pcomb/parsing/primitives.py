# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Parsers which are not built from other parsers."""

import re
from typing import AnyStr, Sequence, TypeVar, Union

from pcomb.parsing.result import (
    failure,
    Input,
    Parser,
    ParseResult,
    render,
    success,
)
from typeguard import typechecked

_TResult = TypeVar("_TResult")
_TSeq = TypeVar("_TSeq", bound=Sequence)


def _starts_with(s: Input, prefix: Input) -> bool:
    if isinstance(s, (str, bytes)) and type(s) is type(prefix):
        return s.startswith(prefix)
    return s[: len(prefix)] == prefix  # noqa: E203


@typechecked
def text(match: _TSeq) -> Parser[_TSeq]:
    """Returns a parser which consumes exactly `match` if the input begins with
    it. Works for any sequence, e.g. a list of tokens, not only strings.
    """
    expected = f"'{render(match)}'"

    def text_parser(s: Input) -> ParseResult[_TSeq]:
        if _starts_with(s, match):
            return success(match, s[len(match) :])  # noqa: E203
        return failure(expected, s)

    return text_parser


@typechecked
def regex(
    pattern: Union[AnyStr, re.Pattern[AnyStr]], flags: int = 0
) -> Parser[AnyStr]:
    """Returns a parser which matches `pattern` at the very start of the input.

    The pattern is always anchored: `re.match` never skips input, so the parser
    consumes exactly the matched prefix. On failure, `expected` is the compiled
    pattern itself.
    """
    if isinstance(pattern, re.Pattern):
        if flags:
            raise ValueError("cannot process flags argument with a compiled pattern")
        compiled = pattern
    else:
        compiled = re.compile(pattern, flags)

    def regex_parser(s: Input) -> ParseResult[AnyStr]:
        if not isinstance(s, type(compiled.pattern)):
            return failure(compiled, s)
        m = compiled.match(s)
        if m is None:
            return failure(compiled, s)
        matched = m.group(0)
        return success(matched, s[len(matched) :])  # noqa: E203

    return regex_parser


def eof(s: Input) -> ParseResult[None]:
    """Succeeds with `None` only when there is no input left."""
    if len(s) == 0:
        return success(None, s)
    return failure("end of input", s)


def pure(value: _TResult) -> Parser[_TResult]:
    """Returns a parser which always succeeds with `value` and consumes nothing."""

    def pure_parser(s: Input) -> ParseResult[_TResult]:
        return success(value, s)

    return pure_parser
