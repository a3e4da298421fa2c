"""Character classification and case conversion for the ASCII range.

Each function takes either an integer character code or a one-character
string. Predicates return a bool. The case converters return a value of
the same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    """Return the integer code for an int or one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_digit(c: CharLike) -> bool:
    """True for the characters '0' to '9'."""
    return 48 <= _code(c) <= 57


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters 'A'-'Z' and 'a'-'z'."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters, space (32) to '~' (126)."""
    return 32 <= _code(c) <= 126


def to_lower(c: CharLike) -> CharLike:
    """Map 'A'-'Z' to 'a'-'z'; anything else is returned unchanged."""
    code = _code(c)
    if 65 <= code <= 90:
        return _same_kind(c, code + 32)
    return c


def to_upper(c: CharLike) -> CharLike:
    """Map 'a'-'z' to 'A'-'Z'; anything else is returned unchanged."""
    code = _code(c)
    if 97 <= code <= 122:
        return _same_kind(c, code - 32)
    return c