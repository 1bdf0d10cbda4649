"""Character classification, integer/text conversion and simple stream output."""

from __future__ import annotations

import sys
from typing import TextIO, Union

CharLike = Union[str, int]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_INT_BITS = 32


def _code(char: CharLike) -> int:
    """Return the integer code of a one-character string or an integer."""
    if isinstance(char, bool):
        raise TypeError("expected a single character or an integer code")
    if isinstance(char, int):
        return char
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return ord(char)
    raise TypeError("expected a single character or an integer code")


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, as a C ``int`` cast does."""
    modulus = 1 << _INT_BITS
    value %= modulus
    if value >= modulus // 2:
        value -= modulus
    return value


def is_alnum(char: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(char) or is_digit(char)


def is_alpha(char: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(char)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_ascii(char: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(char) <= 127


def is_digit(char: CharLike) -> bool:
    """True for the ASCII digits 0 to 9."""
    return ord("0") <= _code(char) <= ord("9")


def is_print(char: CharLike) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(char) <= 126


def to_lower(char: CharLike) -> CharLike:
    """Lower-case an ASCII capital letter; anything else is returned unchanged."""
    code = _code(char)
    if ord("A") <= code <= ord("Z"):
        code += 32
        return chr(code) if isinstance(char, str) else code
    return char


def to_upper(char: CharLike) -> CharLike:
    """Upper-case an ASCII small letter; anything else is returned unchanged."""
    code = _code(char)
    if ord("a") <= code <= ord("z"):
        code -= 32
        return chr(code) if isinstance(char, str) else code
    return char


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and digits are
    read until the first non-digit. Text without digits gives 0. The result is
    wrapped to a signed 32-bit integer.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and "0" <= text[pos] <= "9":
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return _wrap_int(result * sign)


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError("itoa expects an integer")
    if number == 0:
        return "0"
    digits = []
    magnitude = abs(number)
    while magnitude > 0:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
    if number < 0:
        digits.append("-")
    return "".join(reversed(digits))


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: TextIO | None = None) -> None:
    """Write one character; a NUL character writes nothing."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if char == "\0":
        return
    _target(stream).write(char)


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write text up to its first NUL character; None writes nothing."""
    if text is None:
        return
    end = text.find("\0")
    if end != -1:
        text = text[:end]
    if text:
        _target(stream).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write text followed by a newline; None writes nothing."""
    if text is None:
        return
    put_str(text, stream)
    put_char("\n", stream)


def put_nbr(number: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal."""
    put_str(itoa(number), stream)