"""CLI application entry point and command routing for kvctl.

This module is the **sole error boundary** for the entire application.
It catches :class:`~kvctl.exceptions.KvctlError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and mapping them to exit codes through :mod:`kvctl.cli.exit_codes`.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  layer and the global-flag helpers.
* The output printer is built once per invocation and passed to the
  handler; there is no module-level printer.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from typing import BinaryIO, TextIO

from kvctl.cli import exit_codes
from kvctl.cli.console import ConsoleProxy
from kvctl.cli.global_flags import add_global_flags, client_config_from_args
from kvctl.cli.logging import setup_logging
from kvctl.cli.printer import new_printer
from kvctl.core.args import arg_or_stdin
from kvctl.core.protocols import Printer
from kvctl.exceptions import KvctlError
from kvctl.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``kvctl config``          — show the resolved connection configuration
    * ``kvctl value [VALUE]``   — resolve a value from the argument or stdin
    * ``kvctl --version``
    """
    parser = argparse.ArgumentParser(
        prog="kvctl",
        description="Command-line front end for a distributed key-value store.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    add_global_flags(parser)

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.add_parser(
        "config",
        help="Resolve the global flags into a connection configuration and print it.",
    )
    value = commands.add_parser(
        "value",
        help="Print VALUE, reading it from stdin when omitted.",
    )
    value.add_argument("value", nargs="?", default=None, help="The value; read from stdin when omitted.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_config(args: argparse.Namespace, printer: Printer) -> int:
    """Build the connection configuration and render it."""
    config = client_config_from_args(args)
    printer.config(config)
    return exit_codes.SUCCESS


def _handle_value(args: argparse.Namespace, printer: Printer, stdin: BinaryIO) -> int:
    """Resolve the first positional argument, falling back to stdin."""
    positional = [args.value] if args.value is not None else []
    printer.value(arg_or_stdin(positional, stdin, 0))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    stdin: BinaryIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run the kvctl CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    stdin, stdout:
        Streams used by commands; default to the process streams
        (``sys.stdin.buffer`` / ``sys.stdout``).

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    KvctlError
        Propagated unchanged; :func:`cli` maps it to an exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    setup_logging(debug=args.debug)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    out = stdout if stdout is not None else sys.stdout
    printer = new_printer(args.write_out, args.hex, out)

    if args.command == "config":
        return _handle_config(args, printer)

    return _handle_value(args, printer, stdin if stdin is not None else sys.stdin.buffer)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    console = ConsoleProxy()
    try:
        code = main()
        sys.exit(code)
    except KvctlError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.exit_code_for(exc))
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.GENERAL_ERROR)
