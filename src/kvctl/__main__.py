"""Allow ``python -m kvctl`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m kvctl`` behaves identically to the ``kvctl`` console
script.
"""

from __future__ import annotations

from kvctl.cli.app import cli

if __name__ == "__main__":
    cli()
