"""Character classification on ASCII code points."""

from __future__ import annotations

__all__ = ["is_alpha", "is_digit", "is_alnum", "is_ascii", "is_print"]


def _code(c: int | str) -> int:
    """Return the integer code of ``c``, which is an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return c


def is_alpha(c: int | str) -> bool:
    """True if ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True if ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True if ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True if ``c`` lies in the ASCII table (0 to 127)."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True if ``c`` is a printable ASCII character (32 to 126)."""
    return 32 <= _code(c) <= 126