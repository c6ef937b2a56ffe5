# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""A small arithmetic expression grammar built from the parsing combinators.

Three flavours of the same language are provided:
    * `binary_expr`: exactly `<decimal> <op> <decimal>`, sequenced with `apply`
    * `binary_expr_go`: the same, written as a `go` script
    * `chain_expr`: `<decimal> (<op> <decimal>)*`, evaluated left to right, so
      `1 - 2 - 3` is `(1 - 2) - 3` and operators share one precedence level

Leading and trailing spaces, and spaces between tokens, are skipped.

Examples:
    >>> evaluate("23 + 23", grammar="binary")
    46
    >>> evaluate("1 + 2 + 3 + 5")
    11
"""

import operator
from functools import reduce
from typing import Callable, Dict, List, Mapping, Tuple, Union

from pcomb.parsing import combinators as c
from pcomb.parsing.driver import parse
from pcomb.parsing.primitives import eof, regex, text
from pcomb.parsing.result import Parser

Number = Union[int, float]
BinaryOp = Callable[[Number, Number], Number]

OPERATORS: Mapping[str, BinaryOp] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def _to_number(s: str) -> Number:
    return float(s) if "." in s else int(s)


op: Parser[BinaryOp] = c.map(
    OPERATORS.__getitem__,
    c.label(
        c.one_of(*(text(symbol) for symbol in OPERATORS)),
        "an arithmetic operator",
    ),
)

decimal: Parser[Number] = c.map(
    _to_number, c.label(regex(r"\d+(?:\.\d+)?"), "a decimal")
)

spaces: Parser[str] = regex(r"\s*")
token = c.lexeme(spaces)


def _apply_binary(
    _leading: str, left: Number, func: BinaryOp, right: Number, _end: None
) -> Number:
    return func(left, right)


binary_expr: Parser[Number] = c.apply(
    _apply_binary,
    [
        spaces,  # skip any leading spaces
        token(decimal),
        token(op),
        token(decimal),  # skips any trailing spaces
        eof,
    ],
)


@c.go
def binary_expr_go():  # type: ignore[no-untyped-def]
    yield spaces
    left = yield token(decimal)
    func = yield token(op)
    right = yield token(decimal)
    yield eof
    return func(left, right)


def _fold(first: Number, rest: List[Tuple[BinaryOp, Number]]) -> Number:
    return reduce(lambda acc, pair: pair[0](acc, pair[1]), rest, first)


@c.go
def chain_expr():  # type: ignore[no-untyped-def]
    yield spaces
    first = yield token(decimal)
    rest = yield c.many(c.collect(token(op), token(decimal)))
    yield eof
    return _fold(first, rest)


GRAMMARS: Dict[str, Parser[Number]] = {
    "binary": binary_expr,
    "binary-go": binary_expr_go,
    "chain": chain_expr,
}


def evaluate(expression: str, grammar: str = "chain") -> Number:
    """Parse and evaluate `expression` with the named grammar.

    Raises:
        `KeyError` if `grammar` is not one of `GRAMMARS`.
        `pcomb.parsing.driver.ParseError` if the expression does not parse.
    """
    return parse(GRAMMARS[grammar], expression).data
