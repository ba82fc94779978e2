"""Error presentation utilities.

Centralized formatting and exit code mapping for signing failures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from relsign.core.errors import ErrorCode
from relsign.output.console import Style
from relsign.services.signing_errors import KeystoreMissing, SigningError, SigningUnavailable

if TYPE_CHECKING:
    from relsign.output.console import ConsoleProtocol

__all__ = ["print_signing_error", "signing_error_exit_code"]


def print_signing_error(error: SigningError, console: ConsoleProtocol) -> None:
    """Print a signing error with its hint."""
    match error:
        case SigningUnavailable(variant=variant, properties_path=path, hint=hint):
            console.error(f"{variant}: no signing config, cannot sign the artifact")
            if path is not None:
                console.print(f"looked in: {path}", Style.DIM)
            console.print(f"hint: {hint}", Style.DIM)
        case KeystoreMissing(path=path, hint=hint):
            console.error(f"keystore not found: {path}")
            console.print(f"hint: {hint}", Style.DIM)


def signing_error_exit_code(error: SigningError) -> int:
    """Get exit code for a signing error."""
    match error:
        case SigningUnavailable():
            return int(ErrorCode.BUILD_ERROR)
        case KeystoreMissing():
            return int(ErrorCode.IO_ERROR)
