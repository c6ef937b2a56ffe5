# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import nox

SRC_DIRS = [
    "pcomb",
]


def _install(session: nox.Session) -> None:
    session.install("-r", "dev-requirements.txt")
    session.install("--no-deps", "-e", ".")


@nox.session
def tests(session: nox.Session) -> None:
    _install(session)
    session.run("pytest", "-n", "auto", *session.posargs)


@nox.session
def lint(session: nox.Session) -> None:
    _install(session)
    session.run(
        "flake8",
        "--max-line-length=100",
        *SRC_DIRS,
    )


@nox.session
def format(session: nox.Session) -> None:
    _install(session)
    session.run(
        "ufmt",
        "check",
        *SRC_DIRS,
    )


@nox.session
def typecheck(session: nox.Session) -> None:
    _install(session)
    session.run("mypy", *SRC_DIRS)
