"""Helpers that turn ``tls gen`` command line values into settings."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import timedelta

DEFAULT_TLS_VALIDITY_DAYS = 3650
CA_FILENAME_BASE = "ca"
TLS_FILENAME_BASE = "tls"


def tag_args_to_map(tag_args: Iterable[str]) -> dict[str, str]:
    """Turn ``key=value`` tag arguments into a dictionary.

    Only the first ``=`` separates key from value, so values may hold ``=``.
    An argument without ``=`` maps its whole text to an empty value, and a
    later argument with the same key replaces an earlier one.
    """
    tags: dict[str, str] = {}
    for tag_arg in tag_args:
        key, _, value = tag_arg.partition("=")
        tags[key] = value
    return tags


def secret_filename_base(base: str | None, gen_ca: bool) -> str:
    """Return the file name base for the key pair stored in the Secret.

    An explicit base wins; otherwise CA key pairs use ``ca`` and other key
    pairs use ``tls``.
    """
    if base:
        return base
    return CA_FILENAME_BASE if gen_ca else TLS_FILENAME_BASE


def ca_secret_namespace(ca_namespace: str | None, namespace: str) -> str:
    """Return the namespace of the CA Secret, defaulting to ``namespace``."""
    return ca_namespace or namespace


def validity_from_days(days: int) -> timedelta:
    """Return how long a certificate stays valid, given a number of days."""
    if isinstance(days, bool) or not isinstance(days, int):
        raise TypeError(f"validity must be a whole number of days, not {days!r}")
    return timedelta(days=days)