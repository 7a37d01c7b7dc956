"""Number parsing and formatting, word splitting and ASCII case mapping."""

from __future__ import annotations

__all__ = ["atoi", "atoi_base", "itoa", "split", "word_count", "to_lower", "to_upper"]

_INT_BITS = 32
_BLANKS = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789abcdef"


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    modulus = 1 << _INT_BITS
    value %= modulus
    if value >= modulus // 2:
        value -= modulus
    return value


def _skip_blanks(text: str) -> int:
    """Return the index of the first character of ``text`` that is not blank."""
    for index, ch in enumerate(text):
        if ch not in _BLANKS:
            return index
    return len(text)


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped, then an optional sign. A ``+`` directly
    followed by ``-`` is not treated as a sign, so such input yields 0.
    Parsing stops at the first non-digit. The result wraps to a 32-bit int.
    """
    i = _skip_blanks(text)
    sign = 1
    if text[i:i + 1] == "+" and text[i + 1:i + 2] != "-":
        i += 1
    if text[i:i + 1] == "-":
        sign = -1
        i += 1
    result = 0
    for ch in text[i:]:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return _wrap_int(result * sign)


def atoi_base(text: str, base: int) -> int:
    """Parse a leading integer written in ``base`` (1 to 16) from ``text``.

    Leading blanks and one optional sign are skipped. For base 16 a ``0x`` or
    ``0X`` prefix is skipped only when it opens the text itself. Digits may be
    upper or lower case; parsing stops at the first character that is not a
    digit of the base. The result wraps to a 32-bit int.
    """
    if not 1 <= base <= 16:
        raise ValueError(f"base must be between 1 and 16, got {base}")
    valid = _DIGITS[:base]
    i = _skip_blanks(text)
    sign = 1
    if text[i:i + 1] in ("-", "+") and i < len(text):
        if text[i] == "-":
            sign = -1
        i += 1
    if base == 16 and text[:1] == "0" and text[1:2] in ("x", "X"):
        i += 2
    result = 0
    for ch in text[i:]:
        digit = valid.find(ch.lower()) if ch.isascii() else -1
        if digit < 0:
            break
        result = result * base + digit
    return _wrap_int(result * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def _check_sep(sep: str) -> None:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    _check_sep(sep)
    return [word for word in text.split(sep) if word]


def word_count(text: str, sep: str) -> int:
    """Count the non-empty words of ``text`` separated by the character ``sep``."""
    _check_sep(sep)
    count = 0
    in_word = False
    for ch in text:
        if ch == sep:
            in_word = False
        elif not in_word:
            in_word = True
            count += 1
    return count


def _case_map(c: int | str, low: str, high: str, shift: int) -> int | str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return chr(ord(c) + shift) if low <= c <= high else c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return c + shift if ord(low) <= c <= ord(high) else c


def to_lower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; anything else is returned as is."""
    return _case_map(c, "A", "Z", 32)


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; anything else is returned as is."""
    return _case_map(c, "a", "z", -32)