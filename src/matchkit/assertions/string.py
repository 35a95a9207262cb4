"""Assertion helpers for string subjects.

Each helper applies the matcher of the same name from
:mod:`matchkit.matchers.string` through :func:`should` or :func:`should_not`.

Examples
--------
>>> should_contain_only_digits("2024")
>>> should_not_be_blank("  x ")
>>> should_be_equal_ignoring_case("foo", "FoO")
"""

import re

from matchkit.assertions._base import should, should_not
from matchkit.matchers import string as m


def should_contain_only_digits(value: str | None) -> None:
    should(value, m.contain_only_digits())


def should_not_contain_only_digits(value: str | None) -> None:
    should_not(value, m.contain_only_digits())


def should_contain_a_digit(value: str | None) -> None:
    should(value, m.contain_a_digit())


def should_not_contain_a_digit(value: str | None) -> None:
    should_not(value, m.contain_a_digit())


def should_contain_only_once(value: str | None, substring: str) -> None:
    should(value, m.contain_only_once(substring))


def should_not_contain_only_once(value: str | None, substring: str) -> None:
    should_not(value, m.contain_only_once(substring))


def should_be_lower_case(value: str | None) -> None:
    should(value, m.be_lower_case())


def should_not_be_lower_case(value: str | None) -> None:
    should_not(value, m.be_lower_case())


def should_be_upper_case(value: str | None) -> None:
    should(value, m.be_upper_case())


def should_not_be_upper_case(value: str | None) -> None:
    should_not(value, m.be_upper_case())


def should_be_empty(value: str | None) -> None:
    should(value, m.be_empty())


def should_not_be_empty(value: str | None) -> None:
    should_not(value, m.be_empty())


def should_have_same_length_as(value: str | None, other: str) -> None:
    should(value, m.have_same_length_as(other))


def should_not_have_same_length_as(value: str | None, other: str) -> None:
    should_not(value, m.have_same_length_as(other))


def should_have_line_count(value: str | None, count: int) -> None:
    should(value, m.have_line_count(count))


def should_not_have_line_count(value: str | None, count: int) -> None:
    should_not(value, m.have_line_count(count))


def should_be_blank(value: str | None) -> None:
    should(value, m.be_blank())


def should_not_be_blank(value: str | None) -> None:
    should_not(value, m.be_blank())


def should_contain_ignoring_case(value: str | None, substring: str) -> None:
    should(value, m.contain_ignoring_case(substring))


def should_not_contain_ignoring_case(value: str | None, substring: str) -> None:
    should_not(value, m.contain_ignoring_case(substring))


def should_contain(value: str | None, expected: str | re.Pattern[str]) -> None:
    should(value, m.contain(expected))


def should_not_contain(value: str | None, expected: str | re.Pattern[str]) -> None:
    should_not(value, m.contain(expected))


def should_contain_in_order(value: str | None, *substrings: str) -> None:
    should(value, m.contain_in_order(*substrings))


def should_include(value: str | None, substring: str) -> None:
    should(value, m.include(substring))


def should_not_include(value: str | None, substring: str) -> None:
    should_not(value, m.include(substring))


def should_have_max_length(value: str | None, length: int) -> None:
    should(value, m.have_max_length(length))


def should_not_have_max_length(value: str | None, length: int) -> None:
    should_not(value, m.have_max_length(length))


def should_have_min_length(value: str | None, length: int) -> None:
    should(value, m.have_min_length(length))


def should_not_have_min_length(value: str | None, length: int) -> None:
    should_not(value, m.have_min_length(length))


def should_have_length(value: str | None, length: int) -> None:
    should(value, m.have_length(length))


def should_not_have_length(value: str | None, length: int) -> None:
    should_not(value, m.have_length(length))


def should_match(value: str | None, regex: str | re.Pattern[str]) -> None:
    should(value, m.match(regex))


def should_not_match(value: str | None, regex: str | re.Pattern[str]) -> None:
    should_not(value, m.match(regex))


def should_start_with(value: str | None, prefix: str) -> None:
    should(value, m.start_with(prefix))


def should_not_start_with(value: str | None, prefix: str) -> None:
    should_not(value, m.start_with(prefix))


def should_end_with(value: str | None, suffix: str) -> None:
    should(value, m.end_with(suffix))


def should_not_end_with(value: str | None, suffix: str) -> None:
    should_not(value, m.end_with(suffix))


def should_be_equal_ignoring_case(value: str | None, other: str) -> None:
    """Assert that ``value`` equals ``other``, ignoring case.

    Opposite of :func:`should_not_be_equal_ignoring_case`.

    Examples
    --------
    >>> should_be_equal_ignoring_case("foo", "FoO")  # passes
    >>> should_be_equal_ignoring_case("foo", "BaR")  # raises AssertionFailedError
    """
    should(value, m.be_equal_ignoring_case(other))


def should_not_be_equal_ignoring_case(value: str | None, other: str) -> None:
    """Assert that ``value`` does not equal ``other``, ignoring case.

    Opposite of :func:`should_be_equal_ignoring_case`.

    Examples
    --------
    >>> should_not_be_equal_ignoring_case("foo", "bar")  # passes
    >>> should_not_be_equal_ignoring_case("foo", "FoO")  # raises AssertionFailedError
    """
    should_not(value, m.be_equal_ignoring_case(other))
