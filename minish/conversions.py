"""Number parsing and formatting, and byte-range character classes."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_INT_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    """Wrap ``value`` to a signed 32-bit integer."""
    value &= _INT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _code(c: int | str) -> int:
    """Character code of ``c``, given either as an integer or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return int(c)


def _skip_sign(text: str) -> tuple[int, str]:
    """Drop leading whitespace and one optional sign; return the sign and the rest."""
    rest = text.lstrip("".join(_WHITESPACE))
    if rest[:1] in ("-", "+"):
        return (-1 if rest[0] == "-" else 1), rest[1:]
    return 1, rest


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as a 32-bit signed value.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Values outside the 32-bit range wrap around.
    """
    sign, rest = _skip_sign(text)
    result = 0
    for c in rest:
        if not "0" <= c <= "9":
            break
        result = result * 10 + (ord(c) - ord("0"))
    return _to_int32(sign * result)


def _digit_value(c: str, base: int) -> int | None:
    """Value of ``c`` as a digit in ``base``, or None when it is not one."""
    if "0" <= c <= "9":
        value = ord(c) - ord("0")
        return value if value < base else None
    if base <= 10:
        return None
    if "A" <= c <= "Z":
        value = ord(c) - ord("A") + 10
    elif "a" <= c <= "z":
        value = ord(c) - ord("a") + 10
    else:
        return None
    return value if value < base else None


def atoi_base(text: str | None, base: int) -> int:
    """Parse a leading integer written in ``base`` (2 to 16).

    Returns 0 when ``text`` is None or the base is out of range. Letters of
    either case serve as digits above 9. Results wrap to 32 bits.
    """
    if text is None or not 2 <= base <= 16:
        return 0
    sign, rest = _skip_sign(text)
    result = 0
    for c in rest:
        value = _digit_value(c, base)
        if value is None:
            break
        result = result * base + value
    return _to_int32(result * sign)


def itoa(n: int) -> str:
    """Render ``n``, taken as a 32-bit signed integer, in decimal."""
    return str(_to_int32(n))


def _in_byte_range(c: int | str) -> int | None:
    code = _code(c)
    return code if 0 <= code <= 255 else None


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _in_byte_range(c)
    return code is not None and (
        ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")
    )


def is_digit(c: int | str) -> bool:
    """True for the decimal digits 0 to 9."""
    code = _in_byte_range(c)
    return code is not None and ord("0") <= code <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and decimal digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    code = _in_byte_range(c)
    return code is not None and code <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, codes 32 to 126."""
    code = _in_byte_range(c)
    return code is not None and 32 <= code <= 126