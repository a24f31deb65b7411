import pytest

from ogbcore.formatting import builder_print, format_string, print_formatted, sprint
from ogbcore.strings import StringBuilder


def test_plain_text_passes_through():
    assert format_string("no specifiers here") == "no specifiers here"


def test_string_specifier():
    assert format_string("hello %s!", "world") == "hello world!"


def test_bytes_are_decoded():
    assert format_string("%s", b"abc") == "abc"


def test_c_string_specifier():
    assert format_string("[%cs]", "abc") == "[abc]"


def test_bool_specifier():
    assert format_string("%b %b", 1, 0) == "true false"


def test_vector_specifiers_use_source_templates():
    assert format_string("%v2", (1.5, 2.5)) == "{ X: %f, Y: %f }" % (1.5, 2.5)
    assert format_string("%v3", [1, 2, 3]) == "{ X: %f, Y: %f, Z: %f }" % (1, 2, 3)
    assert format_string("%v4", (1, 2, 3, 4)) == "{ X: %f, Y: %f, Z: %f, W: %f }" % (1, 2, 3, 4)


def test_vector_from_attributes():
    class V:
        x = 0.5
        y = 0.25

    assert format_string("%v2", V()) == "{ X: %f, Y: %f }" % (0.5, 0.25)


def test_vector_wrong_size_raises():
    with pytest.raises(ValueError):
        format_string("%v3", (1.0, 2.0))


def test_signed_integer():
    assert format_string("%d and %i", -42, 7) == "-42 and 7"


def test_unsigned_wraps_negative():
    assert format_string("%u", -1) == "4294967295"


def test_length_modifier_is_accepted():
    assert format_string("%zu items", 7) == "7 items"
    assert format_string("%lld", 123) == "123"


def test_hex_conversion():
    assert format_string("%x", 255) == "ff"
    assert format_string("%X", 255) == format_string("%x", 255).upper()


def test_float_precision_matches_python():
    assert format_string("%.3f", 2.5) == "%.3f" % 2.5


def test_width_from_argument():
    assert len(format_string("%*d", 6, 3)) == 6


def test_literal_percent():
    assert format_string("100%%") == "100%"


def test_trailing_percent_is_kept():
    assert format_string("100%") == "100%"


def test_too_few_arguments_raises():
    with pytest.raises(ValueError):
        format_string("%d %d", 1)


def test_n_specifier_raises():
    with pytest.raises(ValueError):
        format_string("%n", 0)


def test_sprint_matches_format_string():
    assert sprint("%s=%d", "a", 1) == format_string("%s=%d", "a", 1)


def test_print_formatted_writes_stdout(capsys):
    print_formatted("value %s\n", "ok")
    assert capsys.readouterr().out == "value ok\n"


def test_builder_print_appends():
    builder = StringBuilder(16)
    builder.append("[")
    builder_print(builder, "%s-%s", "x", "y")
    assert str(builder) == "[x-y"
    assert len(builder) == 4