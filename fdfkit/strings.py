"""String search, comparison, bounded copying and character mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

__all__ = [
    "strchr",
    "strrchr",
    "strnstr",
    "strncmp",
    "strlcpy",
    "strlcat",
    "strjoin",
    "substr",
    "strtrim",
    "strmapi",
    "striteri",
]


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string; ints are truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return chr(c & 0xFF)


def _end(text: str) -> int:
    """Index of the terminator: the first NUL in ``text``, or its length."""
    index = text.find("\0")
    return len(text) if index < 0 else index


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strchr(text: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``text``, or None.

    Searching for NUL finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return _end(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``text``, or None.

    Searching for NUL finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return _end(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> int | None:
    """Return where ``little`` first occurs wholly inside the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0; a miss gives None.
    """
    _non_negative("length", length)
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b`` by code point.

    Returns the difference of the first differing pair, a shorter string
    counting as a NUL at its end, or 0 when they match.
    """
    _non_negative("n", n)
    for i in range(n):
        x = ord(a[i]) if i < len(a) else 0
        y = ord(b[i]) if i < len(b) else 0
        if x != y:
            return x - y
        if x == 0:
            break
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the length of ``src``; a result shorter than
    that length means the copy was truncated.
    """
    _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters including the terminator.

    Returns the resulting text and the length it tried to create. When
    ``size`` does not exceed the length of ``dst``, ``dst`` is left as is and
    the returned length is ``size + len(src)``.
    """
    _non_negative("size", size)
    if size <= len(dst):
        return dst, size + len(src)
    return dst + src[: size - 1 - len(dst)], len(dst) + len(src)


def strjoin(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    return a + b


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A ``start`` past the end gives an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start > len(text):
        return ""
    return text[start:start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(i, ch) for i, ch in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> MutableSequence[str]:
    """Call ``func(index, char)`` on each element of ``chars`` in place.

    A non-None return value replaces the element. Returns ``chars``.
    """
    for i, ch in enumerate(list(chars)):
        replacement = func(i, ch)
        if replacement is not None:
            chars[i] = replacement
    return chars