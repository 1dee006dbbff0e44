"""Domain models for kvctl.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  A :class:`ConnectionConfig` is rebuilt from
the current inputs on every invocation; nothing here is cached or shared.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

EndpointSet = tuple[str, ...]
"""Ordered cluster member addresses, passed through unchanged."""


# ---------------------------------------------------------------------------
# Credential input
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CredentialTriple:
    """The three optional TLS file paths as supplied on the command line.

    ``None`` means the flag was not given.  An explicitly empty string is
    rejected during flag extraction and never reaches this model.
    """

    cert: str | None = None
    """Client certificate path."""

    key: str | None = None
    """Client private key path."""

    cacert: str | None = None
    """Certificate authority bundle path."""


# ---------------------------------------------------------------------------
# TLS description
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TLSInfo:
    """The subset of TLS files that were actually provided."""

    cert_file: str | None = None
    key_file: str | None = None
    ca_file: str | None = None

    @property
    def empty(self) -> bool:
        """True when no client certificate material (cert or key) is set."""
        return not self.cert_file and not self.key_file


# ---------------------------------------------------------------------------
# Dial-ready configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ConnectionConfig:
    """Everything a network client needs to dial the cluster."""

    endpoints: EndpointSet
    """Cluster member addresses in the order given."""

    dial_timeout: timedelta
    """Connect timeout; zero defers to the client's default."""

    tls: TLSInfo | None = None
    """TLS files in use, or ``None`` for a plaintext connection."""

    transport_tls: Any = field(default=None, compare=False, repr=False)
    """Loader output (an :class:`ssl.SSLContext` by default).

    Excluded from equality: two builds from identical inputs compare equal
    even though each owns a fresh transport object.
    """

    @property
    def secure(self) -> bool:
        """True when the connection will be dialed over TLS."""
        return self.tls is not None
