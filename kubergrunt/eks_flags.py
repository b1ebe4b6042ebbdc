"""Defaults and duration parsing for the ``eks`` command flags."""

from __future__ import annotations

import re
from datetime import timedelta
from fractions import Fraction

DEFAULT_DRAIN_TIMEOUT = timedelta(minutes=15)
DEFAULT_SLEEP_BETWEEN_RETRIES = timedelta(seconds=15)
DEFAULT_WAIT_TIMEOUT = "10m"
DEFAULT_MAX_RETRIES = 0

_NANOSECONDS_PER_UNIT = {
    "ns": 1,
    "us": 1_000,
    "\u00b5s": 1_000,
    "\u03bcs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 60 * 60 * 1_000_000_000,
}

_MAX_NANOSECONDS = 2**63 - 1

_COMPONENT = re.compile(
    r"(?P<whole>[0-9]*)(?:\.(?P<frac>[0-9]*))?(?P<unit>[^0-9.]*)"
)


def _invalid(text: str, reason: str = "invalid duration") -> ValueError:
    return ValueError(f"time: {reason} {text!r}")


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as ``10m``, ``1h30m`` or ``1.5s``.

    The text is an optional sign followed by one or more decimal numbers,
    each with a unit: ``ns``, ``us`` (or ``µs``), ``ms``, ``s``, ``m``, ``h``.
    A bare ``0`` is accepted. The result is rounded to microseconds.
    """
    if not isinstance(text, str):
        raise TypeError(f"duration must be a string, not {type(text).__name__}")

    body = text
    negative = False
    if body[:1] in ("+", "-"):
        negative = body[0] == "-"
        body = body[1:]

    if body == "0":
        return timedelta(0)
    if not body:
        raise _invalid(text)

    total = Fraction(0)
    position = 0
    while position < len(body):
        match = _COMPONENT.match(body, position)
        whole = match.group("whole")
        frac = match.group("frac") or ""
        unit = match.group("unit")
        if not whole and not frac:
            raise _invalid(text)
        if not unit:
            raise _invalid(text, "missing unit in duration")
        scale = _NANOSECONDS_PER_UNIT.get(unit)
        if scale is None:
            raise _invalid(text, f"unknown unit {unit!r} in duration")

        value = Fraction(int(whole or "0"))
        if frac:
            value += Fraction(int(frac), 10 ** len(frac))
        total += value * scale
        position = match.end()

    nanoseconds = int(total)
    limit = _MAX_NANOSECONDS + 1 if negative else _MAX_NANOSECONDS
    if nanoseconds > limit:
        raise _invalid(text)

    if negative:
        nanoseconds = -nanoseconds
    return timedelta(microseconds=round(Fraction(nanoseconds, 1_000)))