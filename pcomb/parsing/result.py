# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""The value shape shared by every parser.

A parser is a function Input -> ParseResult[T] which takes a slice of the input
and returns either a `Success` holding the parsed value and the unconsumed
suffix of the input, or a `Failure` describing what was expected and the input
found at the point of failure.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Generic, Literal, Sequence, TypeVar, Union

_T = TypeVar("_T")
_T_co = TypeVar("_T_co", covariant=True)

Input = Sequence[Any]


@dataclass(frozen=True)
class Success(Generic[_T_co]):
    data: _T_co
    rest: Input

    def __bool__(self) -> Literal[True]:
        return True


@dataclass(frozen=True)
class Failure:
    expected: Any
    actual: Input

    def __bool__(self) -> Literal[False]:
        return False


ParseResult = Union[Success[_T], Failure]
Parser = Callable[[Input], ParseResult[_T]]


def success(data: _T, rest: Input) -> Success[_T]:
    return Success(data, rest)


def failure(expected: Any, actual: Input) -> Failure:
    return Failure(expected, actual)


def describe(expected: Any) -> str:
    """Render an `expected` description as text.

    Examples:
    >>> describe("'+'")
    "'+'"
    >>> describe(re.compile(r"\\d+"))
    '/\\\\d+/'
    >>> describe(["a decimal", "'('"])
    "one of a decimal, '('"
    """
    if isinstance(expected, str):
        return expected
    if isinstance(expected, re.Pattern):
        source = expected.pattern
        if isinstance(source, bytes):
            source = source.decode("utf-8", errors="backslashreplace")
        return f"/{source}/"
    if isinstance(expected, (list, tuple)):
        return "one of " + ", ".join(describe(e) for e in expected)
    return str(expected)


def render(s: Input) -> str:
    """Render an input slice as text, decoding bytes as UTF-8."""
    if isinstance(s, bytes):
        return s.decode("utf-8", errors="backslashreplace")
    return str(s)
