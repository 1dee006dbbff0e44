"""Positional-argument resolution with a standard-input fallback.

Commands that take a value (e.g. the value of a key) accept it either as a
positional argument or piped on stdin.  The positional slot always wins;
the stream is only touched when the slot is missing.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import IO, AnyStr

from kvctl.exceptions import MissingArgumentError


def arg_or_stdin(args: Sequence[str], stream: IO[AnyStr], index: int) -> str:
    """Return ``args[index]``, or the entire content of *stream*.

    The stream is read once, to exhaustion, in a single call.  Bytes are
    decoded as UTF-8; text streams are used as-is.  Content is returned
    verbatim, including any trailing newline.

    Raises
    ------
    MissingArgumentError
        If the slot is absent and the stream is empty or unreadable.
    ValueError
        If *index* is negative.
    """
    if index < 0:
        raise ValueError(f"argument index must be non-negative, got {index}")

    if index < len(args):
        return args[index]

    try:
        data = stream.read()
        text = data.decode("utf-8") if isinstance(data, bytes) else data
    except (OSError, ValueError) as exc:
        # ValueError also covers UnicodeDecodeError and closed streams.
        raise MissingArgumentError(
            f"no available argument and stdin: {exc}",
        ) from exc

    if not text:
        raise MissingArgumentError(
            "no available argument and stdin",
            hint="Pass the value as an argument or pipe it on stdin.",
        )
    return text
