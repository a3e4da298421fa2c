"""String helpers: number conversion, splitting, searching, comparing and trimming.

Searches return an index into the text, or None when nothing is found.
Functions that would write into a caller's buffer return the new text
instead.
"""

from __future__ import annotations

from itertools import takewhile, zip_longest
from typing import Callable, Optional

_SPACES = " \t\n\v\f\r"
_INT_BITS = 32
_NUL = "\0"


def _check_char(c: str, what: str = "character") -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{what} must be a single character, got {c!r}")


def _check_size(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, two's complement style."""
    half = 1 << (_INT_BITS - 1)
    return ((value + half) % (1 << _INT_BITS)) - half


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping leading whitespace.

    One optional sign is accepted. Parsing stops at the first non-digit; text
    with no digits gives 0. The result wraps to a signed 32-bit integer.
    """
    rest = text.lstrip(_SPACES)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: "0" <= ch <= "9", rest))
    value = int(digits) if digits else 0
    return _wrap_int(-value if negative else value)


def itoa(number: int) -> str:
    """Return the decimal text of ``number``."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected int, got {type(number).__name__}")
    return str(number)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    _check_char(sep, "separator")
    if sep == _NUL:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def str_chr(text: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``text``; a NUL ``c`` finds the end of the text."""
    _check_char(c)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return index if index >= 0 else None


def str_rchr(text: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``text``; a NUL ``c`` finds the end of the text."""
    _check_char(c)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return index if index >= 0 else None


def _compare(first: str, second: str) -> int:
    for a, b in zip_longest(first, second, fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def str_cmp(first: str, second: str) -> int:
    """Difference of the first differing characters, or 0 when equal."""
    return _compare(first, second)


def str_ncmp(first: str, second: str, n: int) -> int:
    """Like :func:`str_cmp`, looking at no more than ``n`` characters."""
    _check_size(n, "count")
    return _compare(first[:n], second[:n])


def str_nstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` found wholly within the first ``length`` characters.

    An empty needle matches at 0.
    """
    _check_size(length, "length")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return index if index >= 0 else None


def str_lcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    _check_size(size, "size")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def str_lcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have had;
    when ``dst`` already fills the buffer, ``size`` stands in for its length.
    """
    _check_size(size, "size")
    dst_len = len(dst)
    if dst_len < size:
        return dst + src[: size - 1 - dst_len], dst_len + len(src)
    return dst, size + len(src)


def str_mapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def str_iteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` for every character.

    A string returned by ``func`` replaces the character; None keeps it.
    """
    result = []
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        result.append(ch if replacement is None else replacement)
    return "".join(result)


def str_trim(text: str, chars: str) -> str:
    """Remove characters found in ``chars`` from both ends of ``text``."""
    if not chars:
        return text
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``; empty past the end."""
    _check_size(start, "start")
    _check_size(length, "length")
    if start > len(text):
        return ""
    return text[start:start + length]