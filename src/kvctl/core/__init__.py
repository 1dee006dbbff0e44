"""Core / service layer — pure configuration building and argument resolution.

Rules
-----
* No ``print()`` calls.
* No direct filesystem, ``ssl`` or network access (TLS files are read by
  an injected loader).
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from kvctl.core.args import arg_or_stdin
from kvctl.core.client_config import ClientConfigBuilder
from kvctl.core.models import ConnectionConfig, CredentialTriple, EndpointSet, TLSInfo
from kvctl.core.protocols import ClientFactory, Printer, TLSLoader

__all__: list[str] = [
    "ClientConfigBuilder",
    "ClientFactory",
    "ConnectionConfig",
    "CredentialTriple",
    "EndpointSet",
    "Printer",
    "TLSInfo",
    "TLSLoader",
    "arg_or_stdin",
]
