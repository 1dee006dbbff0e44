"""Parsing of Go-style duration strings (``500ms``, ``5s``, ``1m30s``).

Duration flags are written the way the cluster's own tooling writes them,
so ``--dial-timeout`` accepts the same syntax.  A bare ``0`` is the only
unit-less value allowed.
"""

from __future__ import annotations

import re
from datetime import timedelta

_UNIT_SECONDS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_COMPONENT = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(text: str) -> timedelta:
    """Convert *text* to a :class:`~datetime.timedelta`.

    Raises
    ------
    ValueError
        If *text* is empty, carries an unknown unit, or is malformed.
    """
    raw = text.strip()
    if not raw:
        raise ValueError("empty duration")

    sign = 1.0
    body = raw
    if body[0] in "+-":
        sign = -1.0 if body[0] == "-" else 1.0
        body = body[1:]

    if body == "0":
        return timedelta(0)
    if not body:
        raise ValueError(f"invalid duration {raw!r}")

    total = 0.0
    pos = 0
    while pos < len(body):
        match = _COMPONENT.match(body, pos)
        if match is None:
            raise ValueError(f"invalid duration {raw!r}")
        number, unit = match.groups()
        total += float(number) * _UNIT_SECONDS[unit]
        pos = match.end()

    try:
        value = timedelta(seconds=sign * total)
    except OverflowError as exc:
        raise ValueError(f"invalid duration {raw!r}") from exc

    # timedelta cannot hold less than 1us; a nonzero request must stay nonzero.
    if total and not value:
        value = timedelta(microseconds=-1 if sign < 0 else 1)
    return value


def format_duration(value: timedelta) -> str:
    """Render *value* compactly, e.g. ``5s``, ``1m30s``, ``250ms``."""
    total = value.total_seconds()
    if total == 0:
        return "0s"

    sign = "-" if total < 0 else ""
    total = abs(total)
    if total < 1:
        return f"{sign}{total * 1000:g}ms"

    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    parts: list[str] = []
    if hours:
        parts.append(f"{int(hours)}h")
    if minutes:
        parts.append(f"{int(minutes)}m")
    if seconds or not parts:
        parts.append(f"{seconds:g}s")
    return sign + "".join(parts)
