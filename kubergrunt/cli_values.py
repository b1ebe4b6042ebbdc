"""Small parsers for command line values shared by the commands."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from enum import Enum

from kubergrunt.errors import RequiredArgsError

DEFAULT_LOG_LEVEL = "info"

TRACE = 5

_LOG_LEVELS = {
    "panic": logging.CRITICAL,
    "fatal": logging.CRITICAL,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}


class CorednsAnnotation(str, Enum):
    """Where the coredns deployment is scheduled."""

    FARGATE = "fargate"
    EC2 = "ec2"


def require_string_flag(values: Mapping[str, str | None], name: str) -> str:
    """Return the value of flag ``name``, raising if it is missing or empty."""
    value = values.get(name)
    if not value:
        raise RequiredArgsError(f"Required flag --{name} was not set.")
    return value


def parse_log_level(name: str) -> int:
    """Turn a log level name into a :mod:`logging` level number."""
    try:
        return _LOG_LEVELS[name.lower()]
    except KeyError:
        raise ValueError(f"not a valid log level: {name!r}") from None


def parse_kubectl_wrapper_args(args: Sequence[str]) -> list[str]:
    """Drop a leading ``--`` separator from arguments forwarded to kubectl."""
    if args and args[0] == "--":
        return list(args[1:])
    return list(args)