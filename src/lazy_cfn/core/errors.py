"""Error types raised by lazy-cfn components."""

from __future__ import annotations


class LazyCfnError(Exception):
    """Base class for failures that end a run with exit code 1."""


class InputError(LazyCfnError):
    """User supplied input that cannot be used (empty pattern, missing profile)."""


class InvalidPatternError(InputError):
    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid match pattern '{pattern}': {reason}")
        self.pattern = pattern


class NotFoundError(LazyCfnError):
    """Nothing to show at a given stage of the lookup."""

    def __init__(self, stage: str, message: str) -> None:
        super().__init__(message)
        self.stage = stage


class TransientIOError(LazyCfnError):
    """A CloudFormation read call failed."""


class UserCancelledError(Exception):
    """The user cancelled a prompt. Not an error, the run ends with exit code 0."""


class MissingConsoleLinkError(LazyCfnError):
    """A picked resource has no console URL."""
