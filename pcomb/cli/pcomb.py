# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""A single entrypoint into the pcomb command line tools.

This file is intentionally lightweight and should not include any parsing logic.
"""
import json
import logging
import re
from typing import Literal, Optional, Tuple

import click

from pcomb._version import __version__
from pcomb.click import (
    grammar_option,
    log_folder_option,
    log_level_option,
    toml_config_option,
)
from pcomb.grammars.arithmetic import evaluate, Number
from pcomb.parsing.driver import parse, ParseError
from pcomb.parsing.primitives import regex, text
from pcomb.utils.log import init_logger
from typeguard import typechecked

LOGGER_NAME = "pcomb"
logger = logging.getLogger(LOGGER_NAME)


def _format_number(n: Number) -> str:
    if isinstance(n, float) and n.is_integer():
        return str(int(n))
    return str(n)


@click.group(epilog=f"pcomb Version: {__version__}")
@toml_config_option("pcomb")
@log_level_option
@log_folder_option
@click.option(
    "--stdout",
    is_flag=True,
    default=False,
    help="Whether to write logs to stdout instead of stderr.",
)
@click.version_option(__version__)
@typechecked
def main(
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    log_folder: Optional[str],
    stdout: bool,
) -> None:
    """Parser combinator toolkit. Evaluate arithmetic expressions and try out
    the primitive parsers from the command line.
    """
    init_logger(
        logger_name=LOGGER_NAME,
        log_level=getattr(logging, log_level),
        log_dir=log_folder,
        log_stdout=stdout,
    )


@main.command(name="eval")
@grammar_option
@click.argument("expressions", nargs=-1, required=True)
@typechecked
def eval_(grammar: str, expressions: Tuple[str, ...]) -> None:
    """Parse and evaluate each arithmetic EXPRESSION, printing one result per
    line.
    """
    for expression in expressions:
        try:
            value = evaluate(expression, grammar=grammar)
        except ParseError as e:
            logger.info(f"Could not parse {expression!r} with grammar '{grammar}'")
            raise click.ClickException(str(e)) from e
        except ZeroDivisionError as e:
            raise click.ClickException(f"Division by zero in {expression!r}") from e
        click.echo(_format_number(value))


@main.command(name="match")
@click.option(
    "--regex",
    "use_regex",
    is_flag=True,
    default=False,
    help="Treat PATTERN as a regular expression anchored at the start of INPUT.",
)
@click.argument("pattern")
@click.argument("input_", metavar="INPUT")
@typechecked
def match(use_regex: bool, pattern: str, input_: str) -> None:
    """Run a single primitive parser for PATTERN on INPUT and print the parsed
    data and the remaining input as JSON.
    """
    try:
        parser = regex(pattern) if use_regex else text(pattern)
    except re.error as e:
        raise click.BadParameter(
            f"{pattern!r} is not a valid regular expression: {e}"
        ) from e
    try:
        result = parse(parser, input_)
    except ParseError as e:
        raise click.ClickException(str(e)) from e
    click.echo(json.dumps({"data": result.data, "rest": result.rest}))


if __name__ == "__main__":
    main()
