"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters and CLI
collaborators must satisfy.  Core code depends ONLY on these protocols —
never on concrete implementations — preserving the dependency inversion
principle.
"""

from __future__ import annotations

from typing import Any, Protocol

from kvctl.core.models import ConnectionConfig, TLSInfo


class TLSLoader(Protocol):
    """Contract for TLS material loaders.

    Any object that implements :meth:`load` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def load(self, info: TLSInfo) -> Any:
        """Turn *info* into a dial-ready transport TLS object.

        Implementations perform their own completeness checks (e.g. a
        certificate without its key) and must map every failure to
        :class:`~kvctl.exceptions.TLSSetupError`.

        Raises
        ------
        TLSSetupError
            When a file is unreadable or the certificate/key pair is bad.
        """
        ...  # pragma: no cover


class ClientFactory(Protocol):
    """Contract for network client constructors.

    A factory receives a fully validated :class:`ConnectionConfig` and
    returns a connected client object.  Connection failures may surface as
    any exception; the CLI layer classifies them as
    :class:`~kvctl.exceptions.ConnectionFailedError`.
    """

    def __call__(self, config: ConnectionConfig) -> Any:
        ...  # pragma: no cover


class Printer(Protocol):
    """Contract for command output renderers.

    A printer is constructed once per invocation and passed to the command
    handler that needs it.
    """

    def config(self, cfg: ConnectionConfig) -> None:
        """Render a resolved connection configuration."""
        ...  # pragma: no cover

    def value(self, text: str) -> None:
        """Render a single resolved value."""
        ...  # pragma: no cover
