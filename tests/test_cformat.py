import io

import pytest

from minish.cformat import cformat, cprintf, format_decimal, itoahex


@pytest.mark.parametrize("n", [1, 15, 16, 255, 4096, 0xDEADBEEF, 2**63])
def test_itoahex_round_trip_lowercase(n):
    text = itoahex(n, "x")
    assert int(text, 16) == n
    assert text == text.lower()
    assert not text.startswith("0")


def test_itoahex_upper_matches_lower():
    assert itoahex(0xABCDEF, "X") == itoahex(0xABCDEF, "x").upper()


def test_itoahex_pointer_prefix():
    text = itoahex(0x1234, "p")
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0x1234


def test_itoahex_zero_is_plain_zero():
    assert itoahex(0, "x") == "0"
    assert itoahex(0, "p") == "0"


def test_itoahex_negative_wraps_to_64_bits():
    assert int(itoahex(-1, "x"), 16) == 2**64 - 1


@pytest.mark.parametrize("value", [0, 7, -7, 123456, -2147483648, 2147483647])
def test_format_decimal_signed_round_trip(value):
    assert int(format_decimal("d", value)) == value
    assert format_decimal("i", value) == format_decimal("d", value)


def test_format_decimal_signed_wraps():
    assert int(format_decimal("d", 2**31)) == -(2**31)


def test_format_decimal_unsigned_wraps():
    assert int(format_decimal("u", -1)) == 2**32 - 1


def test_format_decimal_other_spec_empty():
    assert format_decimal("x", 5) == ""


def test_cformat_plain_text_unchanged():
    assert cformat("hello world") == "hello world"


def test_cformat_percent_escape_and_trailing_percent():
    assert cformat("100%%") == "100%"
    assert cformat("50%") == "50%"


def test_cformat_unknown_conversion_keeps_char():
    assert cformat("%q") == "q"


def test_cformat_null_string_and_pointer():
    assert cformat("%s", None) == "(null)"
    assert cformat("%p", None) == "(nil)"
    assert cformat("%p", 0) == "(nil)"


def test_cformat_mixed_conversions():
    result = cformat("%c-%s-%d-%x-%X", "a", "word", -3, 255, 255)
    assert result == "a-word--3-" + itoahex(255, "x") + "-" + itoahex(255, "X")


def test_cformat_char_from_int():
    assert cformat("%c", ord("Z")) == "Z"


def test_cformat_pointer_uses_itoahex():
    assert cformat("%p", 0x7FFF) == itoahex(0x7FFF, "p")


def test_cformat_hex_masks_to_32_bits():
    assert int(cformat("%x", -1), 16) == 2**32 - 1


def test_cformat_missing_argument():
    with pytest.raises(TypeError):
        cformat("%d")


def test_cformat_none_format():
    with pytest.raises(TypeError):
        cformat(None)


def test_cprintf_writes_and_counts():
    buffer = io.StringIO()
    count = cprintf("%s=%d\n", "key", 42, file=buffer)
    assert buffer.getvalue() == cformat("%s=%d\n", "key", 42)
    assert count == len(buffer.getvalue())


def test_cprintf_defaults_to_stdout(capsys):
    count = cprintf("%s", "hi")
    assert capsys.readouterr().out == "hi"
    assert count == 2