"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO


def rich_available() -> bool:
	"""Return ``True`` when ``rich`` can be imported."""
	try:
		import rich.console  # noqa: F401
	except ModuleNotFoundError:
		return False
	return True


def get_rich_console(file: TextIO | None = None) -> Any:
	"""Create a Rich console instance targeting *file* (stderr by default)."""
	from rich.console import Console

	if file is None:
		return Console(stderr=True)
	return Console(file=file)


class ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback.

	Messages go to stderr; command output is rendered by a
	:class:`~kvctl.cli.printer` printer instead.
	"""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		if not rich_available():
			print(*objects, file=sys.stderr)
			return
		get_rich_console().print(*objects)
