# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Utilities for combining parsers.

A parser is a function Input -> ParseResult[T] (see `pcomb.parsing.result`).
Every combinator here takes one or more parsers and returns a new parser. A
failure is an ordinary return value: it is passed through unchanged, or
replaced, but never raised.
"""

import logging
from contextlib import closing
from typing import Any, Callable, Generator, List, Sequence, TypeVar

from pcomb.parsing.result import failure, Input, Parser, ParseResult, success
from typing_extensions import Protocol

logger = logging.getLogger(__name__)

_TIn = TypeVar("_TIn")
_TOut = TypeVar("_TOut")
_TResult = TypeVar("_TResult")

ONE_OF_EXPECTED = "oneOf"


def map(func: Callable[[_TIn], _TOut], parser: Parser[_TIn]) -> Parser[_TOut]:
    """Returns a parser which transforms the parsed result of `parser` with
    `func`. The remaining input is left as `parser` produced it.
    """

    def map_parser(s: Input) -> ParseResult[_TOut]:
        result = parser(s)
        if not result:
            return result
        return success(func(result.data), result.rest)

    return map_parser


def one_of(*parsers: Parser[Any]) -> Parser[Any]:
    """Returns a parser which runs each of `parsers` against the same input and
    returns the first successful parse. Fails if all of the given parsers fail.

    The failures of the individual alternatives are not reported; the failure
    always expects `ONE_OF_EXPECTED`. Wrap the result in `label` to name it.
    """

    def one_of_parser(s: Input) -> ParseResult[Any]:
        for parser in parsers:
            result = parser(s)
            if result:
                return result
        # if no parser succeeded, then fail
        return failure(ONE_OF_EXPECTED, s)

    return one_of_parser


def apply(
    func: Callable[..., _TResult], parsers: Sequence[Parser[Any]]
) -> Parser[_TResult]:
    """Returns a parser which runs `parsers` sequentially, each on the input left
    over by the previous one, and calls `func` with all of the parsed results as
    positional arguments. Fails with the first failure encountered.
    """

    def apply_parser(s: Input) -> ParseResult[_TResult]:
        acc: List[Any] = []
        rest = s
        for parser in parsers:
            result = parser(rest)
            if not result:
                return result
            acc.append(result.data)
            rest = result.rest
        return success(func(*acc), rest)

    return apply_parser


def _as_list(*values: Any) -> List[Any]:
    return list(values)


def collect(*parsers: Parser[Any]) -> Parser[List[Any]]:
    """Returns a parser which runs `parsers` sequentially and aggregates the
    results into a list.
    """
    return apply(_as_list, parsers)


def label(parser: Parser[_TResult], expected: Any) -> Parser[_TResult]:
    """Returns a parser which replaces what a failed `parser` says it expected
    with `expected`, keeping the input it failed on.
    """

    def label_parser(s: Input) -> ParseResult[_TResult]:
        result = parser(s)
        if not result:
            return failure(expected, result.actual)
        return result

    return label_parser


class Lexeme(Protocol):
    def __call__(self, parser: Parser[_TResult]) -> Parser[_TResult]: ...


def _keep_first(data: Any, _junk: Any) -> Any:
    return data


def lexeme(junk: Parser[Any]) -> Lexeme:
    """Returns a token factory: given a parser for meaningful content, the
    factory returns a parser which parses the content and then skips `junk`
    (e.g. whitespace or comments), keeping only the content's result.

    `junk` should always succeed, possibly consuming nothing, otherwise it can
    cause a token to fail.

    Examples:
    >>> token = lexeme(regex(r"\\s*"))
    >>> token(text("+"))("+   1")
    Success(data='+', rest='1')
    """

    def token(parser: Parser[_TResult]) -> Parser[_TResult]:
        return apply(_keep_first, [parser, junk])

    return token


def many(parser: Parser[_TResult]) -> Parser[List[_TResult]]:
    """Returns a parser which runs the given parser until failure and returns
    the results in order. Never fails; zero matches yield an empty list.

    If `parser` succeeds without consuming any input, repetition stops there
    and that zero-width result is dropped, since running it again would match
    the same input forever.
    """

    def many_parser(s: Input) -> ParseResult[List[_TResult]]:
        acc: List[_TResult] = []
        rest = s
        while True:
            result = parser(rest)
            if not result:
                return success(acc, rest)
            if len(result.rest) >= len(rest):
                logger.debug(
                    f"Zero-width match after {len(acc)} item(s); stopping repetition"
                )
                return success(acc, rest)
            acc.append(result.data)
            rest = result.rest

    return many_parser


Script = Callable[[], Generator[Parser[Any], Any, _TResult]]


def go(script: Script[_TResult]) -> Parser[_TResult]:
    """Returns a parser which steps over the parsers yielded by a generator.

    Each yielded parser is run on the remaining input and its parsed result is
    sent back into the generator, so later steps may depend on earlier results.
    The value returned by the generator is the parsed result. The generator is
    closed as soon as a yielded parser fails, and that failure is returned.

    Can be used as a decorator:
    >>> @go
    ... def signed():
    ...     sign = yield one_of(text("-"), pure(""))
    ...     digits = yield regex(r"[0-9]+")
    ...     return int(sign + digits)
    >>> signed("-12;")
    Success(data=-12, rest=';')
    """

    def go_parser(s: Input) -> ParseResult[_TResult]:
        gen = script()
        rest = s
        with closing(gen):
            try:
                parser = next(gen)
            except StopIteration as stop:
                return success(stop.value, rest)

            while True:
                result = parser(rest)
                if not result:
                    return result
                rest = result.rest
                try:
                    parser = gen.send(result.data)
                except StopIteration as stop:
                    return success(stop.value, rest)

    return go_parser


def bind(
    parser: Parser[_TIn], func: Callable[[_TIn], Parser[_TOut]]
) -> Parser[_TOut]:
    """Returns a parser which runs `parser`, then runs the parser that `func`
    builds from its result on the remaining input.
    """

    def bind_parser(s: Input) -> ParseResult[_TOut]:
        result = parser(s)
        if not result:
            return result
        return func(result.data)(result.rest)

    return bind_parser
