"""Process exit codes.

Every command maps its failures onto one of these codes so that a CI step
can tell bad input apart from a broken runner.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    The numeric values are part of the CLI contract:
    - 0: Success
    - 1: User error (invalid workflow context, bad option values)
    - 2: Environment error (unreadable config, unknown host platform)
    - 5: I/O error (step output file cannot be written)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        return self != ErrorCode.OK
