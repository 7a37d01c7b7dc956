import pytest

from fdfkit.printf import FormatError, FormatSpec, parse_spec, printf, render, sprintf


def test_plain_text_passes_through():
    assert sprintf("plain text") == "plain text"


def test_percent_escape():
    assert sprintf("100%%") == "100%%" % ()


@pytest.mark.parametrize(
    "fmt, value",
    [
        ("%d", 42),
        ("%d", -42),
        ("%i", 17),
        ("%5d", 42),
        ("%-5d", 42),
        ("%05d", 42),
        ("%05d", -42),
        ("%+d", 42),
        ("% d", 42),
        ("%.3d", 7),
        ("%u", 42),
        ("%x", 255),
        ("%X", 255),
        ("%#x", 255),
        ("%c", "A"),
        ("%5c", "A"),
        ("%-5c", "A"),
        ("%s", "hi"),
        ("%.1s", "hi"),
        ("%10s", "hi"),
        ("%-10s", "hi"),
    ],
)
def test_common_conversions_match_standard_formatting(fmt, value):
    assert sprintf(fmt, value) == fmt % value


@pytest.mark.parametrize("n", [0, 1, -1, 123456, -987654, 2**31 - 1, -(2**31)])
def test_decimal_round_trip(n):
    assert int(sprintf("%d", n)) == n


@pytest.mark.parametrize("n", [0, 1, 255, 4096, 2**32 - 1])
def test_hex_round_trip(n):
    assert int(sprintf("%x", n), 16) == n
    assert sprintf("%X", n) == sprintf("%x", n).upper()


def test_int_wraps_to_32_bits():
    assert sprintf("%d", 2**31) == str(-(2**31))


def test_unsigned_of_negative():
    assert sprintf("%u", -1) == str(2**32 - 1)
    assert sprintf("%x", -1) == format(2**32 - 1, "x")


def test_null_string():
    assert sprintf("%s", None) == "(null)"


def test_null_pointer():
    assert sprintf("%p", None) == "(nil)"
    assert sprintf("%p", 0) == "(nil)"


def test_pointer_has_prefix():
    assert sprintf("%p", 255) == "0x" + format(255, "x")


def test_char_from_int():
    assert sprintf("%c", 65) == chr(65)


def test_star_width_and_precision():
    assert sprintf("%*d", 5, 42) == "%*d" % (5, 42)
    assert sprintf("%.*d", 3, 7) == "%.*d" % (3, 7)


def test_negative_star_precision_means_none():
    assert sprintf("%.*s", -1, "abc") == "abc"


def test_width_ignored_for_percent():
    assert sprintf("%5%") == "%"


def test_hash_prefix_not_counted_against_width():
    result = sprintf("%#10x", 255)
    assert result == " " * 8 + "0xff"


def test_string_precision_equal_to_length_is_not_padded():
    assert sprintf("%5.3s", "abc") == "abc"


def test_mixed_arguments():
    assert sprintf("%s=%d (%c)", "x", 3, "y") == "%s=%d (%c)" % ("x", 3, "y")


def test_extra_arguments_ignored():
    assert sprintf("%d", 1, 2, 3) == "1"


@pytest.mark.parametrize("fmt", ["%", "abc %", "%q", "%5"])
def test_invalid_conversion_raises(fmt):
    with pytest.raises(FormatError):
        sprintf(fmt, 1)


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        sprintf("%d")


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        sprintf("%d", "text")


def test_parse_spec_reads_flags_width_precision():
    spec, end = parse_spec("-08.3x", 0, iter(()))
    assert spec.left_justified and spec.zero_pad
    assert not spec.plus and not spec.space and not spec.hash
    assert spec.width == 8
    assert spec.precision == 3
    assert spec.specifier == "x"
    assert spec.base == 16
    assert end == len("-08.3x")


def test_parse_spec_consumes_star_argument():
    args = iter([7, 99])
    spec, end = parse_spec("*d", 0, args)
    assert spec.width == 7
    assert end == 2
    assert next(args) == 99


def test_parse_spec_dot_without_digits_gives_zero_precision():
    spec, _ = parse_spec(".s", 0, iter(()))
    assert spec.precision == 0
    assert render(spec, "abc") == ""


def test_format_spec_rejects_unknown_specifier():
    with pytest.raises(FormatError):
        FormatSpec("q")


def test_render_directly():
    assert render(FormatSpec("d", width=4), 7) == "%4d" % 7
    assert render(FormatSpec("X"), 171) == format(171, "X")


def test_printf_writes_and_counts(capsys):
    count = printf("%s-%d", "ab", 12)
    out = capsys.readouterr().out
    assert out == "ab-12"
    assert count == len(out)


def test_printf_writes_nothing_on_error(capsys):
    with pytest.raises(FormatError):
        printf("ok %q")
    assert capsys.readouterr().out == ""