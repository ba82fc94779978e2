"""Exit codes for relsign commands.

The numeric values are part of the CLI contract (CI scripts check them):
- 0: Success
- 1: User error (bad option, invalid --project)
- 2: Environment error (not inside a Flutter project)
- 3: Build error (release variant cannot be signed)
- 5: I/O error (keystore or properties file unreadable)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    BUILD_ERROR = 3
    IO_ERROR = 5
