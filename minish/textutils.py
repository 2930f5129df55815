"""String helpers: splitting, trimming, bounded search and comparison, slicing."""

from __future__ import annotations

from itertools import islice, zip_longest


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove every character of ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the first match, 0 for an empty needle, or None
    when there is no match that lies wholly inside the bound.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return None if index == -1 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    Returns the difference of the first pair of codes that differ, a shorter
    string counting as if it ended in a NUL character, and 0 when the
    compared prefixes are equal.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for x, y in islice(zip_longest(a, b, fillvalue="\0"), n):
        if x != y:
            return ord(x) - ord(y)
        if x == "\0":
            return 0
    return 0


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` from ``start``.

    A start at or past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]