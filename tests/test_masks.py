"""
Tests for the DD/MM/YYYY input mask: digit filtering, separator insertion,
truncation and idempotence.
"""

import pytest

from pickerkit.masks import format_input, mask_date, only_digits


def test_only_digits():
    assert only_digits("15/03/2024") == "15032024"
    assert only_digits("ab1c2") == "12"
    assert only_digits("") == ""
    assert only_digits(None) == ""


def test_full_date_is_masked():
    assert mask_date("15032024") == "15/03/2024"


def test_single_digit_is_left_alone():
    assert mask_date("1") == "1"


def test_extra_digits_are_dropped():
    assert mask_date("150320241234") == "15/03/2024"


@pytest.mark.parametrize("raw,expected", [
    ("", ""),
    ("15", "15"),
    ("150", "15/0"),
    ("1503", "15/03"),
    ("15032", "15/03/2"),
    ("1503202", "15/03/202"),
])
def test_partial_input_grows_separators(raw, expected):
    assert mask_date(raw) == expected


@pytest.mark.parametrize("raw,expected", [
    ("15-03-2024", "15/03/2024"),
    ("15.03.2024", "15/03/2024"),
    (" 15 / 03 / 2024 ", "15/03/2024"),
    ("abc", ""),
    ("1a5/0b3", "15/03"),
    ("15//03", "15/03"),
])
def test_junk_is_filtered(raw, expected):
    assert mask_date(raw) == expected


def test_deleting_a_digit_in_the_middle_reflows():
    # user removed the "0" of the month from "15/03/2024"
    assert mask_date("15/3/2024") == "15/32/024"


@pytest.mark.parametrize("raw", ["", "1", "150", "15/03", "15032024", "1503202499", "x1y2z3", "//", "31/02/2024"])
def test_masking_is_idempotent(raw):
    once = mask_date(raw)
    assert mask_date(once) == once


def test_output_length_bounds():
    for n in range(0, 12):
        out = mask_date("9" * n)
        digits = min(n, 8)
        assert digits <= len(out) <= 10
        if digits <= 2:
            assert out.count("/") == 0
        elif digits <= 4:
            assert out.count("/") == 1
        else:
            assert out.count("/") == 2


def test_format_input_is_the_mask():
    assert format_input is mask_date


@pytest.mark.parametrize("raw,expected", [
    ("1５032024", "10/32/024"),
    ("1٥032024", "10/32/024"),
    ("１５０３２０２４", ""),
])
def test_non_ascii_digits_are_filtered(raw, expected):
    assert mask_date(raw) == expected
    assert only_digits(raw) == expected.replace("/", "")
