"""Logging setup for the ``kvctl`` command.

Library modules only create module loggers via ``logging.getLogger``;
handlers are installed here, once, by the CLI entry point.  Rich's
:class:`~rich.logging.RichHandler` is used when Rich is installed, else a
plain stderr :class:`logging.StreamHandler`.
"""

from __future__ import annotations

import logging
import sys

from kvctl.cli.console import rich_available

LOG_FORMAT = "%(message)s"
PLAIN_LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def setup_logging(debug: bool = False) -> None:
    """Configure the ``kvctl`` logger for DEBUG (``--debug``) or WARNING."""
    level = logging.DEBUG if debug else logging.WARNING

    logger = logging.getLogger("kvctl")
    logger.setLevel(level)

    # Remove all existing handlers to prevent duplicate log messages
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler: logging.Handler
    if rich_available():
        from rich.logging import RichHandler

        from kvctl.cli.console import get_rich_console

        handler = RichHandler(
            console=get_rich_console(),
            show_path=debug,
            rich_tracebacks=False,
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(PLAIN_LOG_FORMAT))

    logger.addHandler(handler)
    logger.propagate = False
