"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _until_nul(s: str) -> str:
    return s.split("\0", 1)[0]


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write the single character ``c`` to ``stream`` (stdout by default)."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write ``s`` up to its first NUL to ``stream`` (stdout by default)."""
    _target(stream).write(_until_nul(s))


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write ``s`` up to its first NUL, then a newline."""
    _target(stream).write(_until_nul(s) + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal representation of ``n`` to ``stream``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _target(stream).write(str(n))