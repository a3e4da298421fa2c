"""Formatted output to a text stream with a small set of conversions.

Supported conversions are ``%c``, ``%s``, ``%d``, ``%i``, ``%u``, ``%x``,
``%X``, ``%p`` and ``%%``. Every writer returns the number of characters
it wrote.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Union

_INT_BITS = 32
_POINTER_BITS = 64
_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"


class TextSink(Protocol):
    """Anything that accepts text through ``write``."""

    def write(self, text: str) -> Any:  # pragma: no cover - protocol
        ...


def _to_signed(value: int, bits: int = _INT_BITS) -> int:
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


def _to_unsigned(value: int, bits: int = _INT_BITS) -> int:
    return value % (1 << bits)


def _check_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    return value


def _emit(stream: TextSink, text: str) -> int:
    stream.write(text)
    return len(text)


def _digits(value: int, base: int, alphabet: str) -> str:
    if value == 0:
        return alphabet[0]
    out = []
    while value:
        value, rest = divmod(value, base)
        out.append(alphabet[rest])
    return "".join(reversed(out))


def put_char(stream: TextSink, c: Union[str, int]) -> int:
    """Write one character; an int is taken as a code in the 0-255 range."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return _emit(stream, c)
    return _emit(stream, chr(_check_int(c) & 0xFF))


def put_str(stream: TextSink, text: Optional[str]) -> int:
    """Write ``text``; None is written as ``(null)``."""
    if text is None:
        return _emit(stream, "(null)")
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    return _emit(stream, text)


def put_nbr(stream: TextSink, number: int) -> int:
    """Write ``number`` as a signed 32-bit decimal."""
    value = _to_signed(_check_int(number))
    if value < 0:
        return _emit(stream, "-" + _digits(-value, 10, _LOWER_DIGITS))
    return _emit(stream, _digits(value, 10, _LOWER_DIGITS))


def put_unsigned(stream: TextSink, number: int) -> int:
    """Write ``number`` as an unsigned 32-bit decimal."""
    value = _to_unsigned(_check_int(number))
    return _emit(stream, _digits(value, 10, _LOWER_DIGITS))


def put_hex(stream: TextSink, number: int, upper: bool = False) -> int:
    """Write ``number`` as unsigned 32-bit hexadecimal, in lower or upper case."""
    value = _to_unsigned(_check_int(number))
    return _emit(stream, _digits(value, 16, _UPPER_DIGITS if upper else _LOWER_DIGITS))


def put_pointer(stream: TextSink, address: int) -> int:
    """Write an address as ``0x`` and lower-case hex; zero is ``(nil)``."""
    value = _to_unsigned(_check_int(address), _POINTER_BITS)
    if value == 0:
        return _emit(stream, "(nil)")
    return _emit(stream, "0x" + _digits(value, 16, _LOWER_DIGITS))


def _convert(stream: TextSink, spec: str, args: list[Any]) -> int:
    if spec == "%":
        return put_char(stream, "%")
    writers = {
        "c": put_char,
        "s": put_str,
        "d": put_nbr,
        "i": put_nbr,
        "u": put_unsigned,
        "x": lambda out, value: put_hex(out, value, False),
        "X": lambda out, value: put_hex(out, value, True),
        "p": put_pointer,
    }
    writer = writers.get(spec)
    if writer is None:
        return 0
    if not args:
        raise TypeError(f"not enough arguments for conversion %{spec}")
    return writer(stream, args.pop(0))


def printf(stream: TextSink, fmt: str, *args: Any) -> int:
    """Write ``fmt`` to ``stream``, replacing conversions with ``args``.

    An unknown conversion is dropped silently; a ``%`` at the very end is
    written as is. Returns the number of characters written.
    """
    pending = list(args)
    count = 0
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            count += put_char(stream, ch)
            continue
        spec = next(chars, None)
        if spec is None:
            count += put_char(stream, "%")
        else:
            count += _convert(stream, spec, pending)
    return count