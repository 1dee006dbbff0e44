"""Tests for ClientConfigBuilder (core/client_config.py).

The :class:`TLSLoader` dependency is **mocked** — no certificate files
are read.  These tests verify:

* Plaintext configs when no credential is set
* Which credential paths end up in ``TLSInfo``
* The CA path is recorded when only ``cacert`` is given
* Loader errors surface as ``TLSSetupError``
* Determinism of repeated builds
"""

from __future__ import annotations

from datetime import timedelta
from unittest.mock import MagicMock

import pytest

from kvctl.core.client_config import ClientConfigBuilder
from kvctl.core.models import ConnectionConfig, TLSInfo
from kvctl.exceptions import TLSSetupError

ENDPOINTS = ("127.0.0.1:2379", "127.0.0.1:22379")
TIMEOUT = timedelta(seconds=5)


# ---------------------------------------------------------------------------
# Plaintext
# ---------------------------------------------------------------------------

class TestWithoutTLS:
    def test_all_unset_yields_no_tls(self, fake_loader: MagicMock) -> None:
        cfg = ClientConfigBuilder(fake_loader).build(ENDPOINTS, TIMEOUT)
        assert cfg.tls is None
        assert cfg.transport_tls is None

    def test_empty_strings_treated_as_unset(self, fake_loader: MagicMock) -> None:
        cfg = ClientConfigBuilder(fake_loader).build(ENDPOINTS, TIMEOUT, "", "", "")
        assert cfg.tls is None

    def test_loader_not_called(self, fake_loader: MagicMock) -> None:
        ClientConfigBuilder(fake_loader).build(ENDPOINTS, TIMEOUT)
        fake_loader.load.assert_not_called()

    def test_endpoints_and_timeout_pass_through(self, fake_loader: MagicMock) -> None:
        cfg = ClientConfigBuilder(fake_loader).build(list(ENDPOINTS), timedelta(0))
        assert cfg.endpoints == ENDPOINTS
        assert cfg.dial_timeout == timedelta(0)

    def test_empty_endpoints_pass_through(self, fake_loader: MagicMock) -> None:
        cfg = ClientConfigBuilder(fake_loader).build([], TIMEOUT)
        assert cfg.endpoints == ()


# ---------------------------------------------------------------------------
# TLS
# ---------------------------------------------------------------------------

class TestWithTLS:
    def test_cert_and_key_without_ca(self, fake_loader: MagicMock) -> None:
        cfg = ClientConfigBuilder(fake_loader).build(
            ENDPOINTS, TIMEOUT, cert="c.pem", key="k.pem",
        )
        assert cfg.tls == TLSInfo(cert_file="c.pem", key_file="k.pem")
        assert cfg.tls.ca_file is None

    def test_cacert_only_records_ca_path(self, fake_loader: MagicMock) -> None:
        cfg = ClientConfigBuilder(fake_loader).build(ENDPOINTS, TIMEOUT, cacert="ca.pem")
        assert cfg.tls is not None
        assert cfg.tls.ca_file == "ca.pem"
        assert cfg.tls.cert_file is None
        assert cfg.tls.key_file is None

    def test_full_triple(self, fake_loader: MagicMock) -> None:
        cfg = ClientConfigBuilder(fake_loader).build(
            ENDPOINTS, TIMEOUT, cert="c.pem", key="k.pem", cacert="ca.pem",
        )
        assert cfg.tls == TLSInfo(cert_file="c.pem", key_file="k.pem", ca_file="ca.pem")

    def test_loader_receives_tls_info(self, fake_loader: MagicMock) -> None:
        ClientConfigBuilder(fake_loader).build(ENDPOINTS, TIMEOUT, cacert="ca.pem")
        fake_loader.load.assert_called_once_with(TLSInfo(ca_file="ca.pem"))

    def test_transport_object_attached(self, fake_loader: MagicMock) -> None:
        cfg = ClientConfigBuilder(fake_loader).build(ENDPOINTS, TIMEOUT, cert="c.pem", key="k.pem")
        assert cfg.transport_tls is fake_loader.load.return_value

    @pytest.mark.parametrize(
        ("cert", "key", "cacert"),
        [("c.pem", None, None), (None, "k.pem", None), (None, None, "ca.pem")],
    )
    def test_any_single_field_enables_tls(
        self,
        fake_loader: MagicMock,
        cert: str | None,
        key: str | None,
        cacert: str | None,
    ) -> None:
        cfg = ClientConfigBuilder(fake_loader).build(ENDPOINTS, TIMEOUT, cert, key, cacert)
        assert cfg.secure


# ---------------------------------------------------------------------------
# Loader failures
# ---------------------------------------------------------------------------

class TestLoaderErrors:
    def test_tls_setup_error_propagates_unchanged(self) -> None:
        loader = MagicMock()
        original = TLSSetupError("bad pair")
        loader.load.side_effect = original
        with pytest.raises(TLSSetupError) as exc_info:
            ClientConfigBuilder(loader).build(ENDPOINTS, TIMEOUT, cert="c.pem", key="k.pem")
        assert exc_info.value is original

    def test_unexpected_error_wrapped(self) -> None:
        loader = MagicMock()
        loader.load.side_effect = OSError("No such file")
        with pytest.raises(TLSSetupError, match="No such file") as exc_info:
            ClientConfigBuilder(loader).build(ENDPOINTS, TIMEOUT, cacert="missing.pem")
        assert isinstance(exc_info.value.__cause__, OSError)


# ---------------------------------------------------------------------------
# Determinism
# ---------------------------------------------------------------------------

class TestDeterminism:
    def test_identical_inputs_give_equal_configs(self, fake_loader: MagicMock) -> None:
        builder = ClientConfigBuilder(fake_loader)
        a = builder.build(ENDPOINTS, TIMEOUT, cert="c.pem", key="k.pem", cacert="ca.pem")
        fake_loader.load.return_value = object()
        b = builder.build(ENDPOINTS, TIMEOUT, cert="c.pem", key="k.pem", cacert="ca.pem")
        assert a == b
        assert a is not b

    def test_identical_inputs_give_identical_errors(self) -> None:
        loader = MagicMock()
        loader.load.side_effect = OSError("No such file: ca.pem")
        builder = ClientConfigBuilder(loader)

        messages: list[str] = []
        for _ in range(2):
            with pytest.raises(TLSSetupError) as exc_info:
                builder.build(ENDPOINTS, TIMEOUT, cacert="ca.pem")
            messages.append(str(exc_info.value))
        assert messages[0] == messages[1]

    def test_returns_connection_config(self, fake_loader: MagicMock) -> None:
        assert isinstance(
            ClientConfigBuilder(fake_loader).build(ENDPOINTS, TIMEOUT),
            ConnectionConfig,
        )
