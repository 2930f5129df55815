"""A small printf-style formatter with the conversions %c %s %d %i %u %x %X %p %%."""

from __future__ import annotations

import sys
from typing import Any, TextIO

_HEX_DIGITS = "0123456789abcdef"
_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def itoahex(n: int, spec: str) -> str:
    """Render ``n`` (as an unsigned 64-bit value) in hexadecimal.

    ``X`` gives upper-case digits, ``p`` a ``0x``-prefixed lower-case value,
    anything else lower-case digits. Zero is always rendered as ``0``.
    """
    n &= _ULONG_MASK
    if n == 0:
        return "0"
    digits = []
    while n:
        n, rest = divmod(n, 16)
        digits.append(_HEX_DIGITS[rest])
    text = "".join(reversed(digits))
    if spec == "X":
        return text.upper()
    if spec == "p":
        return "0x" + text
    return text


def format_decimal(spec: str, value: int) -> str:
    """Render ``value`` as a signed (``d``, ``i``) or unsigned (``u``) 32-bit integer.

    Any other conversion yields an empty string.
    """
    if spec in ("d", "i"):
        return str(_to_int32(value))
    if spec == "u":
        return str(value & _UINT_MASK)
    return ""


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _format_hex_pointer(spec: str, value: Any) -> str:
    if spec == "p":
        if not value:
            return "(nil)"
        return itoahex(int(value), "p")
    return itoahex(int(value) & _UINT_MASK, spec)


def _convert(spec: str, args: list[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return spec
    if not args:
        raise TypeError(f"not enough arguments for %{spec}")
    value = args.pop(0)
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "diu":
        return format_decimal(spec, int(value))
    return _format_hex_pointer(spec, value)


def cformat(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the result.

    An unknown conversion character is emitted as is, without the ``%``;
    a lone ``%`` at the end of the format is emitted literally.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    remaining = list(args)
    out: list[str] = []
    chars = iter(enumerate(fmt))
    for index, c in chars:
        if c == "%" and index + 1 < len(fmt):
            _, spec = next(chars)
            out.append(_convert(spec, remaining))
        else:
            out.append(c)
    return "".join(out)


def cprintf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = cformat(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)