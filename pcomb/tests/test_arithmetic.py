# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from typing import Union

import pytest

from pcomb.grammars.arithmetic import (
    binary_expr,
    binary_expr_go,
    chain_expr,
    decimal,
    evaluate,
    op,
    token,
)
from pcomb.parsing.driver import parse, ParseError
from pcomb.parsing.result import Failure, Success


@pytest.mark.parametrize(
    "s, expected",
    [
        ("23", Success(23, "")),
        ("1.25x", Success(1.25, "x")),
        ("1.", Success(1, ".")),
        ("x", Failure("a decimal", "x")),
    ],
)
def test_decimal(s: str, expected: object) -> None:
    assert decimal(s) == expected


def test_op() -> None:
    result = op("*2")
    assert result
    assert result.data(3, 4) == 12
    assert result.rest == "2"

    assert op("%") == Failure("an arithmetic operator", "%")


def test_token_skips_trailing_spaces() -> None:
    assert token(decimal)("42   + 1") == Success(42, "+ 1")


@pytest.mark.parametrize("parser", [binary_expr, binary_expr_go])
@pytest.mark.parametrize(
    "s, expected",
    [
        ("23 + 23", 46),
        ("  23+23  ", 46),
        ("7 - 10", -3),
        ("6 * 7", 42),
        ("10 / 4", 2.5),
        ("1.5 + 1", 2.5),
    ],
)
def test_binary_expr(parser: object, s: str, expected: Union[int, float]) -> None:
    assert parse(parser, s) == Success(expected, "")  # type: ignore[arg-type]


@pytest.mark.parametrize("parser", [binary_expr, binary_expr_go])
@pytest.mark.parametrize(
    "s, message",
    [
        ("23 +", "Parse error. Expected a decimal. Instead found ."),
        ("23 % 2", "Parse error. Expected an arithmetic operator. Instead found % 2."),
        ("1 + 2 + 3", "Parse error. Expected end of input. Instead found + 3."),
        ("", "Parse error. Expected a decimal. Instead found ."),
    ],
)
def test_binary_expr_failures(parser: object, s: str, message: str) -> None:
    with pytest.raises(ParseError) as exc_info:
        parse(parser, s)  # type: ignore[arg-type]
    assert str(exc_info.value) == message


@pytest.mark.parametrize(
    "s, expected",
    [
        ("1 + 2 + 3 + 5", 11),
        ("42", 42),
        ("  7  ", 7),
        ("8 - 2 - 1", 5),
        ("2 * 3 + 4", 10),
        # operators share one precedence level and associate to the left
        ("2 + 3 * 4", 20),
        ("1 / 2 * 4", 2.0),
    ],
)
def test_chain_expr(s: str, expected: Union[int, float]) -> None:
    assert parse(chain_expr, s) == Success(expected, "")


def test_chain_expr_trailing_operator() -> None:
    with pytest.raises(ParseError) as exc_info:
        parse(chain_expr, "1 + 2 +")
    assert str(exc_info.value) == "Parse error. Expected end of input. Instead found +."


def test_evaluate() -> None:
    assert evaluate("1 + 2 + 3 + 5") == 11
    assert evaluate("23 + 23", grammar="binary") == 46
    assert evaluate("23 + 23", grammar="binary-go") == 46

    with pytest.raises(KeyError):
        evaluate("1", grammar="does-not-exist")
    with pytest.raises(ZeroDivisionError):
        evaluate("1 / 0")
