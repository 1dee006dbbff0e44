"""Exit-code constants and the error-to-exit-code table used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.  The
values follow the cluster's own command-line tool so scripts can test
for them.
"""

from __future__ import annotations

from kvctl.exceptions import (
    ConnectionFailedError,
    EmptyCredentialValueError,
    FlagValueError,
    KvctlError,
    MissingArgumentError,
    TLSSetupError,
)

SUCCESS: int = 0
"""Clean exit — command completed without error."""

GENERAL_ERROR: int = 1
"""Generic failure, including malformed flag values and unexpected errors."""

BAD_CONNECTION: int = 2
"""The network client could not be constructed."""

BAD_ARGS: int = 128
"""Arguments or credential flags were missing or unusable."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""


ERROR_EXIT_CODES: dict[type[KvctlError], int] = {
    MissingArgumentError: BAD_ARGS,
    EmptyCredentialValueError: BAD_ARGS,
    TLSSetupError: BAD_ARGS,
    FlagValueError: GENERAL_ERROR,
    ConnectionFailedError: BAD_CONNECTION,
}
"""Most specific match wins; unlisted errors exit with GENERAL_ERROR."""


def exit_code_for(exc: BaseException) -> int:
    """Classify *exc* into a process exit code."""
    for klass in type(exc).__mro__:
        code = ERROR_EXIT_CODES.get(klass)  # type: ignore[arg-type]
        if code is not None:
            return code
    return GENERAL_ERROR
