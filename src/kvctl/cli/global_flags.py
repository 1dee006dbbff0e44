"""Global connection flags and their extraction from a parsed namespace.

Flags are registered on the top-level parser and inherited by every
sub-command.  Extraction helpers read the raw values back out of the
:class:`argparse.Namespace`, validate them, and hand them to the core
:class:`~kvctl.core.client_config.ClientConfigBuilder`.

Credential flags default to ``None`` so that "not given" and "given as an
empty string" stay distinguishable; the latter is rejected before the
builder ever runs.
"""

from __future__ import annotations

import argparse
import logging
from datetime import timedelta
from typing import Any

from kvctl.core.client_config import ClientConfigBuilder
from kvctl.core.models import ConnectionConfig, CredentialTriple, EndpointSet
from kvctl.core.protocols import ClientFactory, TLSLoader
from kvctl.exceptions import (
    ConnectionFailedError,
    EmptyCredentialValueError,
    FlagValueError,
    KvctlError,
)
from kvctl.utils.duration import parse_duration

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINTS: EndpointSet = ("127.0.0.1:2379",)
DEFAULT_DIAL_TIMEOUT: str = "5s"
DEFAULT_WRITE_OUT: str = "simple"

CREDENTIAL_FLAGS: tuple[str, ...] = ("cert", "key", "cacert")


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

def add_global_flags(parser: argparse.ArgumentParser) -> None:
    """Register the connection and output flags on *parser*."""
    group = parser.add_argument_group("global flags")
    group.add_argument(
        "--endpoints",
        action="append",
        default=None,
        metavar="HOST:PORT[,HOST:PORT...]",
        help=f"gRPC endpoints (default: {','.join(DEFAULT_ENDPOINTS)}).",
    )
    group.add_argument(
        "--dial-timeout",
        default=DEFAULT_DIAL_TIMEOUT,
        metavar="DURATION",
        help="Dial timeout for client connections, e.g. 500ms, 2s (default: %(default)s).",
    )
    group.add_argument("--cert", default=None, help="Identify secure client using this TLS certificate file.")
    group.add_argument("--key", default=None, help="Identify secure client using this TLS key file.")
    group.add_argument("--cacert", default=None, help="Verify certificates of TLS-enabled servers using this CA bundle.")
    group.add_argument(
        "-w",
        "--write-out",
        default=DEFAULT_WRITE_OUT,
        help="Output format: simple, json or table (default: %(default)s).",
    )
    group.add_argument("--hex", action="store_true", help="Print values as hex-encoded strings.")
    group.add_argument("--debug", action="store_true", help="Enable debug logging on stderr.")


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------

def _flag(ns: argparse.Namespace, name: str) -> Any:
    """Fetch a registered flag or raise :class:`FlagValueError`."""
    attr = name.replace("-", "_")
    if not hasattr(ns, attr):
        raise FlagValueError(f"flag --{name} is not defined")
    return getattr(ns, attr)


def endpoints_from_args(ns: argparse.Namespace) -> EndpointSet:
    """Return the endpoint list, splitting comma-separated values.

    Repeated ``--endpoints`` flags are concatenated in order.  Empty
    items are dropped; the result itself is not required to be non-empty.
    """
    raw = _flag(ns, "endpoints")
    if raw is None:
        return DEFAULT_ENDPOINTS
    if isinstance(raw, str):
        raw = [raw]
    if not all(isinstance(item, str) for item in raw):
        raise FlagValueError(f"invalid --endpoints value: {raw!r}")

    endpoints: list[str] = []
    for item in raw:
        endpoints.extend(part.strip() for part in item.split(",") if part.strip())
    return tuple(endpoints)


def dial_timeout_from_args(ns: argparse.Namespace) -> timedelta:
    """Parse ``--dial-timeout`` into a non-negative :class:`timedelta`."""
    raw = _flag(ns, "dial-timeout")
    if isinstance(raw, timedelta):
        timeout = raw
    else:
        try:
            timeout = parse_duration(str(raw))
        except ValueError as exc:
            raise FlagValueError(
                f"invalid --dial-timeout value {raw!r}: {exc}",
                hint="Use a duration such as 500ms, 2s or 1m30s.",
            ) from exc
    if timeout < timedelta(0):
        raise FlagValueError(f"--dial-timeout must not be negative, got {raw!r}")
    return timeout


def key_and_cert_from_args(ns: argparse.Namespace) -> CredentialTriple:
    """Return the credential triple, rejecting explicitly empty values.

    Raises
    ------
    EmptyCredentialValueError
        For the first of ``cert``, ``key``, ``cacert`` set to ``""``.
    """
    values: dict[str, str | None] = {}
    for name in CREDENTIAL_FLAGS:
        value = _flag(ns, name)
        if value == "":
            raise EmptyCredentialValueError(name)
        values[name] = value
    return CredentialTriple(**values)


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------

def _default_tls_loader() -> TLSLoader:
    from kvctl.infra.tls_loader import SSLContextLoader

    return SSLContextLoader()


def client_config_from_args(
    ns: argparse.Namespace,
    tls_loader: TLSLoader | None = None,
) -> ConnectionConfig:
    """Extract the global flags and build a :class:`ConnectionConfig`."""
    endpoints = endpoints_from_args(ns)
    dial_timeout = dial_timeout_from_args(ns)
    creds = key_and_cert_from_args(ns)

    builder = ClientConfigBuilder(tls_loader or _default_tls_loader())
    return builder.build(
        endpoints,
        dial_timeout,
        cert=creds.cert,
        key=creds.key,
        cacert=creds.cacert,
    )


def client_from_args(
    ns: argparse.Namespace,
    factory: ClientFactory,
    tls_loader: TLSLoader | None = None,
) -> Any:
    """Build the configuration and hand it to *factory*.

    Raises
    ------
    ConnectionFailedError
        When *factory* fails with anything other than a kvctl error.
    """
    config = client_config_from_args(ns, tls_loader)
    try:
        return factory(config)
    except KvctlError:
        raise
    except Exception as exc:
        logger.debug("client construction failed", exc_info=True)
        raise ConnectionFailedError(
            f"Unable to connect to {','.join(config.endpoints)}: {exc}",
            hint="Check --endpoints and that the cluster is reachable.",
        ) from exc
