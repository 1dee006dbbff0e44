"""Shared utilities — parsing helpers and cross-cutting concerns.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""

from kvctl.utils.duration import format_duration, parse_duration

__all__: list[str] = ["format_duration", "parse_duration"]
