"""Formatted output with the ``c s p d i u x X %`` conversions.

Flags ``+ - space 0 #``, a width and a precision are understood, either
written as digits or taken from the arguments with ``*``. Padding follows
the library's own rules, which differ from the C library in a few corners:
a width is ignored for ``%%``, a ``#`` prefix is not counted against the
width, and a string whose precision equals its length is not padded.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["FormatError", "FormatSpec", "parse_spec", "render", "sprintf", "printf"]

_FLAGS = "+- 0#"
_DIGITS = "0123456789"
_SPECIFIERS = "cspdiuxX%"
_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1


class FormatError(ValueError):
    """Raised for a malformed conversion or a missing argument."""


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer."""
    value &= _MASK32
    return value - (1 << 32) if value >= 1 << 31 else value


@dataclass
class FormatSpec:
    """One parsed conversion: its flags, width, precision and specifier."""

    specifier: str
    plus: bool = False
    left_justified: bool = False
    space: bool = False
    zero_pad: bool = False
    hash: bool = False
    width: int = 0
    precision: int | None = None

    def __post_init__(self) -> None:
        if len(self.specifier) != 1 or self.specifier not in _SPECIFIERS:
            raise FormatError(f"unknown conversion specifier {self.specifier!r}")
        if self.precision is not None and self.precision < 0:
            self.precision = None

    @property
    def base(self) -> int:
        """Numeric base of the conversion, or 0 for non-numeric ones."""
        if self.specifier in "diu":
            return 10
        if self.specifier in "xXp":
            return 16
        return 0

    @property
    def upper_case(self) -> bool:
        """True when hexadecimal digits are written in upper case."""
        return self.specifier == "X"


def _next_arg(args: Iterator[Any], what: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise FormatError(f"missing argument for {what}") from None


def _read_value(text: str, pos: int, args: Iterator[Any]) -> tuple[int, int]:
    """Read a width or precision at ``pos``: ``*`` or a run of digits."""
    if text[pos:pos + 1] == "*":
        value = _next_arg(args, "'*'")
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"'*' expects an int, got {type(value).__name__}")
        return _wrap_int(value), pos + 1
    value = 0
    while pos < len(text) and text[pos] in _DIGITS:
        value = value * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return _wrap_int(value), pos


def parse_spec(text: str, pos: int, args: Iterator[Any]) -> tuple[FormatSpec, int]:
    """Parse the conversion that starts at ``pos``, just after a ``%``.

    ``args`` is an iterator from which ``*`` widths and precisions are taken.
    Returns the spec and the index just past its specifier character.
    """
    flags = set()
    while pos < len(text) and text[pos] in _FLAGS:
        flags.add(text[pos])
        pos += 1
    width, pos = _read_value(text, pos, args)
    precision: int | None = None
    if text[pos:pos + 1] == ".":
        precision, pos = _read_value(text, pos + 1, args)
    if pos >= len(text) or text[pos] not in _SPECIFIERS:
        found = text[pos] if pos < len(text) else "end of format"
        raise FormatError(f"invalid conversion at {pos}: {found!r}")
    spec = FormatSpec(
        specifier=text[pos],
        plus="+" in flags,
        left_justified="-" in flags,
        space=" " in flags,
        zero_pad="0" in flags,
        hash="#" in flags,
        width=width,
        precision=precision,
    )
    return spec, pos + 1


def _render_char(spec: FormatSpec, ch: str) -> str:
    if spec.width > 1 and spec.specifier != "%":
        pad = " " * (spec.width - 1)
        return ch + pad if spec.left_justified else pad + ch
    return ch


def _render_str(spec: FormatSpec, value: str | None, spaces: int = 0) -> str:
    text = "(null)" if value is None else value
    text = text.split("\0", 1)[0]
    length = len(text)
    precision = spec.precision
    if spec.width > 0:
        if precision is not None:
            if precision > length:
                spaces = spec.width - length
            elif precision < length:
                spaces = spec.width - precision
        else:
            spaces = spec.width - length
    shown = text if precision is None else text[:precision]
    pad = " " * max(spaces, 0)
    return shown + pad if spec.left_justified else pad + shown


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {value!r}")
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise TypeError(f"%c expects an int or a character, got {type(value).__name__}")


def _render_int(spec: FormatSpec, value: Any) -> str:
    letter = spec.specifier
    if letter == "p":
        if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
            raise TypeError(f"%p expects an int or None, got {type(value).__name__}")
        magnitude = 0 if value is None else value & _MASK64
        negative = False
    else:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"%{letter} expects an int, got {type(value).__name__}")
        if letter in "di":
            number = _wrap_int(value)
            negative = number < 0
            magnitude = -number if negative else number
        else:
            magnitude = value & _MASK32
            negative = False

    if spec.base == 16:
        digits = format(magnitude, "X" if spec.upper_case else "x")
    else:
        digits = str(magnitude)
    n = len(digits)
    width = spec.width
    precision = spec.precision
    hex_prefix = letter in "xX" and spec.hash and digits[0] != "0"
    sign_room = negative or spec.plus or spec.space

    zeros = 0
    if precision is not None and precision > n:
        zeros = precision - n
    elif letter == "p":
        zeros = width - n - 2 if spec.zero_pad and precision is None else 0
    else:
        if spec.zero_pad and not spec.left_justified:
            zeros = width - n
        if letter != "u":
            if hex_prefix:
                zeros -= 2
            elif sign_room:
                zeros -= 1
            zeros = max(zeros, 0)

    if letter == "p":
        spaces = width - n - 2
        if spec.zero_pad and precision is None:
            spaces -= zeros
        spaces = max(spaces, 0)
    else:
        spaces = width - zeros - n
        if hex_prefix:
            zeros -= 2
        if sign_room:
            spaces -= 1
        spaces = max(spaces, 0)

    if letter == "p" and magnitude == 0:
        return _render_str(spec, "(nil)", spaces)

    prefix = ""
    if spec.base == 16:
        if hex_prefix or letter == "p":
            prefix = "0X" if spec.upper_case else "0x"
    elif letter in "di":
        if negative:
            prefix = "-"
        elif spec.plus:
            prefix = "+"
        elif spec.space:
            prefix = " "

    body = prefix + "0" * max(zeros, 0) + digits
    pad = " " * spaces
    return body + pad if spec.left_justified else pad + body


def render(spec: FormatSpec, value: Any = None) -> str:
    """Render ``value`` according to ``spec``; ``value`` is unused for ``%%``."""
    letter = spec.specifier
    if letter == "%":
        return _render_char(spec, "%")
    if letter == "c":
        return _render_char(spec, _as_char(value))
    if letter == "s":
        if value is not None and not isinstance(value, str):
            raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
        return _render_str(spec, value)
    return _render_int(spec, value)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by its rendered argument."""
    pieces: list[str] = []
    remaining = iter(args)
    pos = 0
    while pos < len(fmt):
        mark = fmt.find("%", pos)
        if mark < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:mark])
        spec, pos = parse_spec(fmt, mark + 1, remaining)
        if spec.specifier == "%":
            pieces.append(render(spec))
        else:
            pieces.append(render(spec, _next_arg(remaining, f"%{spec.specifier}")))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length.

    Nothing is written when the format is invalid.
    """
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)