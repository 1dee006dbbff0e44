"""Core connection-configuration builder.

Merges endpoints, dial timeout and the optional credential triple into one
:class:`~kvctl.core.models.ConnectionConfig`.  TLS material is turned into
a transport object by a :class:`~kvctl.core.protocols.TLSLoader` injected
at construction time, keeping the core free of ``ssl`` and filesystem
access.

Guarantees
----------
* Deterministic — identical inputs give equal configurations.
* TLS is enabled as soon as any one credential path is set.
* Only :class:`~kvctl.exceptions.KvctlError` subclasses escape.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import timedelta

from kvctl.core.models import ConnectionConfig, TLSInfo
from kvctl.core.protocols import TLSLoader
from kvctl.exceptions import KvctlError, TLSSetupError

logger = logging.getLogger(__name__)


class ClientConfigBuilder:
    """Stateless builder for dial-ready connection configurations.

    Parameters
    ----------
    tls_loader:
        Any object satisfying the :class:`TLSLoader` protocol.  Only
        consulted when at least one credential path is set.
    """

    def __init__(self, tls_loader: TLSLoader) -> None:
        self._tls_loader: TLSLoader = tls_loader

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build(
        self,
        endpoints: Sequence[str],
        dial_timeout: timedelta,
        cert: str | None = None,
        key: str | None = None,
        cacert: str | None = None,
    ) -> ConnectionConfig:
        """Assemble a :class:`ConnectionConfig` from explicit inputs.

        Empty or ``None`` credential values are treated as unset.

        Raises
        ------
        TLSSetupError
            If TLS is requested and the loader cannot derive a transport
            configuration from the given files.
        """
        tls = self.tls_info(cert, key, cacert)

        transport_tls = None
        if tls is not None:
            transport_tls = self._load(tls)

        config = ConnectionConfig(
            endpoints=tuple(endpoints),
            dial_timeout=dial_timeout,
            tls=tls,
            transport_tls=transport_tls,
        )
        logger.debug(
            "connection config: endpoints=%s dial_timeout=%s tls=%s",
            ",".join(config.endpoints),
            config.dial_timeout,
            config.tls,
        )
        return config

    @staticmethod
    def tls_info(
        cert: str | None,
        key: str | None,
        cacert: str | None,
    ) -> TLSInfo | None:
        """Return the provided subset of the triple, or ``None`` when unset."""
        if not (cert or key or cacert):
            return None
        return TLSInfo(
            cert_file=cert or None,
            key_file=key or None,
            ca_file=cacert or None,
        )

    # ------------------------------------------------------------------
    # Loader delegation (safe boundary)
    # ------------------------------------------------------------------

    def _load(self, tls: TLSInfo) -> object:
        """Call the loader and ensure only our exceptions escape."""
        try:
            return self._tls_loader.load(tls)
        except KvctlError:
            raise
        except Exception as exc:
            raise TLSSetupError(
                f"Unable to set up TLS: {exc}",
            ) from exc
