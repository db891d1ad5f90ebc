import pytest

from practicals.domain.formatting import (
    SIZE_UNITS_LONG,
    format_file_size,
    parse_int,
    parse_page_param,
)


@pytest.mark.parametrize(
    "size,expected",
    [
        (0, "0 B"),
        (512, "512 B"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (1048576, "1 MB"),
        (1073741824, "1 GB"),
        (1234567, "1.18 MB"),
    ],
)
def test_format_file_size(size, expected):
    assert format_file_size(size) == expected


def test_format_file_size_long_units():
    assert format_file_size(0, SIZE_UNITS_LONG) == "0 Bytes"
    assert format_file_size(2048, SIZE_UNITS_LONG) == "2 KB"


def test_format_file_size_caps_at_largest_unit():
    assert format_file_size(5 * 1024**4) == "5120 GB"


def test_parse_int_leading_digits():
    assert parse_int("12abc") == 12
    assert parse_int(" 7 ") == 7
    assert parse_int("-3") == -3
    assert parse_int(4) == 4


def test_parse_int_nothing_parses():
    assert parse_int("abc") is None
    assert parse_int("") is None
    assert parse_int(None) is None


def test_parse_page_param_defaults():
    assert parse_page_param(None, 100) == 100
    assert parse_page_param("0", 100) == 100
    assert parse_page_param("-2", 100) == 100
    assert parse_page_param("x", 100) == 100
    assert parse_page_param("3", 100) == 3
