import pytest

from solong.printf import format_printf, printf


def test_plain_text_passes_through():
    assert format_printf("You Won!!!\n") == "You Won!!!\n"


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -2**31, 2**31 - 1])
def test_signed_decimal(n):
    assert format_printf("%d", n) == str(n)
    assert format_printf("%i", n) == str(n)


def test_signed_decimal_wraps_to_32_bits():
    assert format_printf("%d", 2**31) == str(-2**31)


def test_unsigned_of_negative():
    assert format_printf("%u", -1) == str(2**32 - 1)


@pytest.mark.parametrize("n", [0, 10, 255, 48879, 2**32 - 1])
def test_hex_cases(n):
    assert format_printf("%x", n) == format(n, "x")
    assert format_printf("%X", n) == format(n, "X")


def test_hex_of_negative_uses_unsigned_32_bits():
    assert format_printf("%x", -1) == format(2**32 - 1, "x")


def test_null_string_and_pointer():
    assert format_printf("%s", None) == "(null)"
    assert format_printf("%p", 0) == "(nil)"


def test_pointer_is_hex_with_prefix():
    assert format_printf("%p", 4096) == hex(4096)


def test_char_from_str_and_int():
    assert format_printf("%c%c", "A", ord("b")) == "Ab"


def test_percent_literal():
    assert format_printf("100%%") == "100%"


def test_unknown_conversion_consumes_nothing():
    assert format_printf("%q%d", 5) == "5"


def test_trailing_percent_is_dropped():
    assert format_printf("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_printf_writes_and_counts(capsys):
    count = printf("Moves = %d\n", 3)
    out = capsys.readouterr().out
    assert out == "Moves = 3\n"
    assert count == len(out)