"""Argument checks and output formatting for the ``eks`` commands."""

from __future__ import annotations

import json
from collections.abc import Sequence

from kubergrunt.errors import ExactlyOneASGError, RequiredArgsError

ASG_NAME_FLAG_NAME = "asg-name"

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def select_single_asg(asg_names: Sequence[str], flag_name: str) -> str:
    """Return the only auto scaling group name, raising unless there is exactly one."""
    if len(asg_names) != 1:
        raise ExactlyOneASGError(flag_name)
    return asg_names[0]


def require_asg_names(asg_names: Sequence[str]) -> list[str]:
    """Return the auto scaling group names, raising if none were given."""
    if not asg_names:
        raise RequiredArgsError(
            f"You must provide at least one ASG Name with --{ASG_NAME_FLAG_NAME}."
        )
    return list(asg_names)


def _compact_json(value: object) -> str:
    text = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    for char, escape in _HTML_ESCAPES.items():
        text = text.replace(char, escape)
    return text


def format_token_output(token: str, as_tf_data: bool, json_data: str) -> str:
    """Return what the ``eks token`` command writes to standard output.

    For use as a Terraform external data source the token is wrapped in a
    compact ``{"token_data": ...}`` object with no trailing newline;
    otherwise the exec credential JSON is written followed by a newline.
    """
    if as_tf_data:
        return _compact_json({"token_data": token})
    return f"{json_data}\n"