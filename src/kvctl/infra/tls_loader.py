"""``ssl``-backed implementation of :class:`~kvctl.core.protocols.TLSLoader`.

This module is the **only** place in the codebase that imports ``ssl``.
Every ``OSError`` / ``ssl.SSLError`` is caught here and re-raised as
:class:`~kvctl.exceptions.TLSSetupError` — nothing raw escapes the
infrastructure boundary.
"""

from __future__ import annotations

import logging
import ssl

from kvctl.core.models import TLSInfo
from kvctl.exceptions import TLSSetupError

logger = logging.getLogger(__name__)


class SSLContextLoader:
    """Concrete :class:`TLSLoader` producing a client-side :class:`ssl.SSLContext`.

    Usage::

        loader = SSLContextLoader()
        context = loader.load(TLSInfo(cert_file="c.pem", key_file="k.pem"))

    The CA bundle, when given, replaces the system trust store.  Without
    one the platform's default certificates are used.
    """

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def load(self, info: TLSInfo) -> ssl.SSLContext:
        """Build a client :class:`ssl.SSLContext` from *info*.

        Raises
        ------
        TLSSetupError
            When the certificate/key pair is incomplete, a file cannot
            be read, or its content is not valid PEM material.
        """
        self._check_pair(info)

        try:
            context = ssl.create_default_context(
                ssl.Purpose.SERVER_AUTH,
                cafile=info.ca_file,
            )
        except (OSError, ssl.SSLError) as exc:
            raise TLSSetupError(
                f"Unable to load CA file {info.ca_file}: {exc}",
                hint="Check that --cacert points to a readable PEM bundle.",
            ) from exc

        if not info.empty:
            try:
                context.load_cert_chain(
                    certfile=info.cert_file,  # type: ignore[arg-type]
                    keyfile=info.key_file,
                )
            except (OSError, ssl.SSLError) as exc:
                raise TLSSetupError(
                    f"Unable to load key pair {info.cert_file} / {info.key_file}: {exc}",
                    hint="Check that --cert and --key are a matching PEM pair.",
                ) from exc

        logger.debug("loaded TLS material: %s", info)
        return context

    # ------------------------------------------------------------------
    # Completeness check
    # ------------------------------------------------------------------

    @staticmethod
    def _check_pair(info: TLSInfo) -> None:
        """A client certificate and its key must be given together."""
        if info.cert_file and not info.key_file:
            raise TLSSetupError(
                f"Certificate {info.cert_file} given without a key.",
                hint="Pass the matching private key with --key.",
            )
        if info.key_file and not info.cert_file:
            raise TLSSetupError(
                f"Key {info.key_file} given without a certificate.",
                hint="Pass the matching certificate with --cert.",
            )
