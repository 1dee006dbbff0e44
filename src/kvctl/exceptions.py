"""Custom exception hierarchy for kvctl.

All exceptions that cross layer boundaries must inherit from
:class:`KvctlError`.  Raw ``OSError`` / ``ssl.SSLError`` instances raised
while reading TLS material, or errors raised by a network client factory,
must be caught at the boundary that produced them and re-raised as a typed
subclass defined here.

Hierarchy
---------
KvctlError
├── ArgumentError
│   └── MissingArgumentError
├── ConfigError
│   ├── FlagValueError
│   ├── EmptyCredentialValueError
│   └── TLSSetupError
└── ConnectionFailedError

Exit-code classification lives in :mod:`kvctl.cli.exit_codes`; nothing in
this module knows about process termination.
"""

from __future__ import annotations


class KvctlError(Exception):
    """Base exception for all kvctl errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Positional arguments --------------------------------------------------

class ArgumentError(KvctlError):
    """Raised when a command's positional arguments are unusable."""


class MissingArgumentError(ArgumentError):
    """Raised when neither the positional slot nor stdin yields a value."""


# --- Connection configuration ----------------------------------------------

class ConfigError(KvctlError):
    """Raised when connection parameters cannot form a valid configuration."""


class FlagValueError(ConfigError):
    """Raised when a global flag carries a malformed value."""


class EmptyCredentialValueError(ConfigError):
    """Raised when a credential flag is explicitly set to an empty string."""

    def __init__(self, field: str, *, hint: str | None = None) -> None:
        super().__init__(
            f"empty string is passed to --{field} option",
            hint=hint or f"Omit --{field} entirely or pass a file path.",
        )
        self.field: str = field
        """Name of the offending credential flag (``cert``, ``key`` or ``cacert``)."""


class TLSSetupError(ConfigError):
    """Raised when TLS material cannot be turned into a transport config."""


# --- Connection --------------------------------------------------------------

class ConnectionFailedError(KvctlError):
    """Raised when the network client cannot be constructed."""
