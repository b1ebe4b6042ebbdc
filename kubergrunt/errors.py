"""Error types raised by the command line layer."""

from __future__ import annotations


class KubergruntError(Exception):
    """Base class for errors raised by kubergrunt."""


class MutuallyExclusiveFlagError(KubergruntError):
    """Raised when flags that exclude each other are given together."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ExactlyOneASGError(KubergruntError):
    """Raised when a command needs exactly one auto scaling group name."""

    def __init__(self, flag_name: str) -> None:
        self.flag_name = flag_name
        super().__init__(
            f"You must provide exactly one ASG using {flag_name} to this command."
        )


class ImpossibleError(KubergruntError):
    """Raised for conditions that can only come from a bug in kubergrunt."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(
            "You reached a point in kubergrunt that should not happen and is "
            "almost certainly a bug. Please open an issue with the contents of "
            f"this error message. Code: {code}"
        )


class RequiredArgsError(KubergruntError):
    """Raised when a required command line argument is missing."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message