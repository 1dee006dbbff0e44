"""Output printers selected by ``--write-out`` and ``--hex``.

A printer is a plain value: :func:`new_printer` builds one per invocation
and the command dispatcher hands it to the handler that renders output.
Printers write to the stream they were constructed with (stdout in
production) and never touch the diagnostic console on stderr.
"""

from __future__ import annotations

import json
from typing import Any, TextIO

from kvctl.core.models import ConnectionConfig
from kvctl.core.protocols import Printer
from kvctl.exceptions import FlagValueError
from kvctl.utils.duration import format_duration

OUTPUT_FORMATS: tuple[str, ...] = ("simple", "json", "table")


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def config_rows(cfg: ConnectionConfig) -> list[tuple[str, str]]:
    """Return ``(label, value)`` pairs describing *cfg*, in display order."""
    tls = cfg.tls
    return [
        ("endpoints", ",".join(cfg.endpoints)),
        ("dial-timeout", format_duration(cfg.dial_timeout)),
        ("tls", "enabled" if cfg.secure else "disabled"),
        ("cert", (tls.cert_file if tls else None) or ""),
        ("key", (tls.key_file if tls else None) or ""),
        ("cacert", (tls.ca_file if tls else None) or ""),
    ]


def _encode(text: str, is_hex: bool) -> str:
    return text.encode("utf-8").hex() if is_hex else text


# ---------------------------------------------------------------------------
# Printers
# ---------------------------------------------------------------------------

class SimplePrinter:
    """``key: value`` lines for configs; raw text for values."""

    def __init__(self, stream: TextIO, *, is_hex: bool = False) -> None:
        self._stream = stream
        self._is_hex = is_hex

    def config(self, cfg: ConnectionConfig) -> None:
        for label, value in config_rows(cfg):
            print(f"{label}: {value}", file=self._stream)

    def value(self, text: str) -> None:
        print(_encode(text, self._is_hex), file=self._stream)


class JSONPrinter:
    """One JSON document per call."""

    def __init__(self, stream: TextIO, *, is_hex: bool = False) -> None:
        self._stream = stream
        self._is_hex = is_hex

    def config(self, cfg: ConnectionConfig) -> None:
        tls: dict[str, Any] | None = None
        if cfg.tls is not None:
            tls = {
                "cert": cfg.tls.cert_file,
                "key": cfg.tls.key_file,
                "cacert": cfg.tls.ca_file,
            }
        doc = {
            "endpoints": list(cfg.endpoints),
            "dial_timeout": cfg.dial_timeout.total_seconds(),
            "tls": tls,
        }
        print(json.dumps(doc), file=self._stream)

    def value(self, text: str) -> None:
        print(json.dumps({"value": _encode(text, self._is_hex)}), file=self._stream)


class TablePrinter:
    """Rich table output, with a plain-text fallback when Rich is missing."""

    def __init__(self, stream: TextIO, *, is_hex: bool = False) -> None:
        self._stream = stream
        self._is_hex = is_hex

    def config(self, cfg: ConnectionConfig) -> None:
        self._render("connection", config_rows(cfg))

    def value(self, text: str) -> None:
        self._render("value", [("value", _encode(text, self._is_hex))])

    def _render(self, title: str, rows: list[tuple[str, str]]) -> None:
        try:
            from rich.table import Table
        except ModuleNotFoundError:
            self._render_plain(rows)
            return

        from kvctl.cli.console import get_rich_console

        table = Table(
            title=title,
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Field", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        for label, value in rows:
            table.add_row(label, value)
        get_rich_console(self._stream).print(table)

    def _render_plain(self, rows: list[tuple[str, str]]) -> None:
        print(f"{'Field':<14} {'Value'}", file=self._stream)
        print("-" * 48, file=self._stream)
        for label, value in rows:
            print(f"{label:<14} {value}", file=self._stream)


_PRINTERS: dict[str, type[SimplePrinter] | type[JSONPrinter] | type[TablePrinter]] = {
    "simple": SimplePrinter,
    "json": JSONPrinter,
    "table": TablePrinter,
}


def new_printer(write_out: str, is_hex: bool, stream: TextIO) -> Printer:
    """Build the printer for *write_out*.

    Raises
    ------
    FlagValueError
        If *write_out* is not one of :data:`OUTPUT_FORMATS`.
    """
    printer_class = _PRINTERS.get(write_out)
    if printer_class is None:
        raise FlagValueError(
            f"unsupported output format {write_out!r}",
            hint=f"Choose one of: {', '.join(OUTPUT_FORMATS)}.",
        )
    return printer_class(stream, is_hex=is_hex)
