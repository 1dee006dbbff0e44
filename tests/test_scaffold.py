"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes and their error table are defined.
"""

from __future__ import annotations

import io

import pytest

from kvctl import __version__
from kvctl.cli import exit_codes
from kvctl.cli.app import main
from kvctl.exceptions import (
    ArgumentError,
    ConfigError,
    ConnectionFailedError,
    EmptyCredentialValueError,
    FlagValueError,
    KvctlError,
    MissingArgumentError,
    TLSSetupError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            ArgumentError,
            MissingArgumentError,
            ConfigError,
            FlagValueError,
            TLSSetupError,
            ConnectionFailedError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[KvctlError]
    ) -> None:
        assert issubclass(exc_class, KvctlError)

    def test_missing_argument_is_argument_error(self) -> None:
        assert issubclass(MissingArgumentError, ArgumentError)

    def test_empty_credential_is_config_error(self) -> None:
        assert issubclass(EmptyCredentialValueError, ConfigError)

    def test_hint_is_stored(self) -> None:
        err = KvctlError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = KvctlError("boom")
        assert err.hint is None

    def test_empty_credential_names_field(self) -> None:
        err = EmptyCredentialValueError("cacert")
        assert err.field == "cacert"
        assert str(err) == "empty string is passed to --cacert option"
        assert err.hint is not None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_bad_connection_is_two(self) -> None:
        assert exit_codes.BAD_CONNECTION == 2

    def test_bad_args_is_128(self) -> None:
        assert exit_codes.BAD_ARGS == 128

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    @pytest.mark.parametrize(
        ("exc", "code"),
        [
            (MissingArgumentError("x"), exit_codes.BAD_ARGS),
            (EmptyCredentialValueError("cert"), exit_codes.BAD_ARGS),
            (TLSSetupError("x"), exit_codes.BAD_ARGS),
            (FlagValueError("x"), exit_codes.GENERAL_ERROR),
            (ConnectionFailedError("x"), exit_codes.BAD_CONNECTION),
            (ConfigError("x"), exit_codes.GENERAL_ERROR),
            (KvctlError("x"), exit_codes.GENERAL_ERROR),
            (RuntimeError("x"), exit_codes.GENERAL_ERROR),
        ],
    )
    def test_exit_code_for(self, exc: BaseException, code: int) -> None:
        assert exit_codes.exit_code_for(exc) == code

    def test_subclass_inherits_mapping(self) -> None:
        class CustomMissing(MissingArgumentError):
            pass

        assert exit_codes.exit_code_for(CustomMissing("x")) == exit_codes.BAD_ARGS


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No command should print help and exit 0."""
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "usage" in capsys.readouterr().out.lower()

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_config_command_returns_success(self) -> None:
        out = io.StringIO()
        code = main(["config"], stdout=out)
        assert code == exit_codes.SUCCESS
        assert "endpoints: 127.0.0.1:2379" in out.getvalue()

    def test_value_command_returns_success(self) -> None:
        out = io.StringIO()
        code = main(["value", "hello"], stdin=io.BytesIO(b""), stdout=out)
        assert code == exit_codes.SUCCESS
        assert out.getvalue() == "hello\n"
