"""String and byte helpers: splitting, trimming, searching and comparing."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _single_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _check_count(n: int, *buffers: BytesLike) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if any(n > len(buf) for buf in buffers):
        raise ValueError("byte count exceeds the length of the data")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    _single_char(sep)
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from index ``start``.

    A start at or beyond the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return None if index == -1 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; the end of a string counts as code 0.

    Returns the difference of the first pair of codes that differ, or 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    pairs = zip_longest(first, second, fillvalue="\0")
    for a, b in islice(pairs, n):
        if a != b or a == "\0":
            return ord(a) - ord(b)
    return 0


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``; NUL finds the end of the text."""
    _single_char(char)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index == -1 else index


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``; NUL finds the end of the text."""
    _single_char(char)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index == -1 else index


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def memchr(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (taken modulo 256) in ``data[:n]``."""
    _check_count(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index == -1 else index


def memcmp(first: BytesLike, second: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch."""
    _check_count(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0