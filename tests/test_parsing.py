"""
Tests for the lenient parsers and pagination normalization.
"""

import pytest

from app.core.parsing import parse_int_or_default, parse_optional_int, parse_optional_str
from app.services.employee_listing import (
    employees_cache_key,
    normalize_pagination,
    total_pages,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", None),
        ("7", 7),
        ("-3", -3),
        ("+4", 4),
        ("abc", None),
        ("4.5", None),
        (" 5", None),
        ("5 ", None),
        (None, None),
        (12, 12),
        ("9223372036854775807", 9223372036854775807),
        ("9223372036854775808", None),
        ("-9223372036854775809", None),
        (2**63, None),
    ],
)
def test_parse_optional_int(raw, expected):
    assert parse_optional_int(raw) == expected


def test_parse_optional_str_empty_is_none():
    assert parse_optional_str("") is None
    assert parse_optional_str(" ") == " "
    assert parse_optional_str("Analyst") == "Analyst"


def test_parse_int_or_default():
    assert parse_int_or_default("x", 10) == 10
    assert parse_int_or_default("25", 10) == 25


@pytest.mark.parametrize("raw_page", [None, "", "abc", "0", "-1", 0, -5])
def test_invalid_page_defaults_to_one(raw_page):
    page, _ = normalize_pagination(raw_page, "20")
    assert page == 1


def test_page_has_no_upper_bound():
    page, _ = normalize_pagination("100000", None)
    assert page == 100000


@pytest.mark.parametrize("raw_size", [None, "", "abc", "0", "-10", "101", "1000"])
def test_invalid_page_size_defaults_to_ten(raw_size):
    _, page_size = normalize_pagination("2", raw_size)
    assert page_size == 10


@pytest.mark.parametrize("raw_size, expected", [("1", 1), ("50", 50), ("100", 100)])
def test_valid_page_size_is_kept(raw_size, expected):
    _, page_size = normalize_pagination(None, raw_size)
    assert page_size == expected


def test_equivalent_requests_share_one_cache_key():
    assert employees_cache_key(*normalize_pagination(None, None)) == employees_cache_key(
        *normalize_pagination("1", "10")
    )
    assert employees_cache_key(*normalize_pagination("-2", "500")) == "employees:page:1:size:10"


@pytest.mark.parametrize(
    "total_count, page_size, expected",
    [(0, 10, 0), (2, 10, 1), (10, 10, 1), (11, 10, 2), (100, 7, 15)],
)
def test_total_pages_uses_ceiling_division(total_count, page_size, expected):
    assert total_pages(total_count, page_size) == expected


def test_page_beyond_64_bits_defaults_to_one():
    page, _ = normalize_pagination("9223372036854775808", "10")
    assert page == 1
