"""Matchers for string values.

Every factory returns a :class:`~matchkit.matchers.base.Matcher` whose
``test`` raises :class:`~matchkit.matchers.base.InvalidSubjectError` on a
``None`` subject and otherwise returns an
:class:`~matchkit.matchers.base.Outcome`.

Examples
--------
>>> contain_only_digits().test("12345").passed
True
>>> contain_in_order("a", "c").test("abc").passed
True
>>> have_max_length(3).test("abcd").failure_message
'"abcd" should have maximum length of 3'
"""

import re

from matchkit.display import display_string
from matchkit.matchers.base import Matcher, Outcome, never_null_matcher
from matchkit.matchers.core import end_with, have_length, match, start_with

__all__ = [
    "be_blank",
    "be_empty",
    "be_equal_ignoring_case",
    "be_lower_case",
    "be_upper_case",
    "contain",
    "contain_a_digit",
    "contain_ignoring_case",
    "contain_in_order",
    "contain_only_digits",
    "contain_only_once",
    "contain_only_whitespace",
    "contain_regex",
    "end_with",
    "have_length",
    "have_line_count",
    "have_max_length",
    "have_min_length",
    "have_same_length_as",
    "include",
    "match",
    "start_with",
]


@never_null_matcher
def contain_only_digits():
    """Match when every character is a decimal digit; ``""`` matches."""

    def check(value: str) -> Outcome:
        return Outcome(
            passed=all(ch.isdecimal() for ch in value),
            failure_message=f"{display_string(value)} should contain only digits",
            negated_failure_message=f"{display_string(value)} should not contain only digits",
        )

    return check


@never_null_matcher
def contain_a_digit():
    """Match when at least one character is a decimal digit."""

    def check(value: str) -> Outcome:
        return Outcome(
            passed=any(ch.isdecimal() for ch in value),
            failure_message=f"{display_string(value)} should contain at least one digit",
            negated_failure_message=f"{display_string(value)} should not contain any digits",
        )

    return check


@never_null_matcher
def contain_only_once(substring: str):
    """Match when ``substring`` occurs in the subject exactly once.

    An absent substring has equal first and last indices (both ``-1``), so
    presence is checked first.
    """

    def check(value: str) -> Outcome:
        first = value.find(substring)
        return Outcome(
            passed=first >= 0 and first == value.rfind(substring),
            failure_message=(
                f"{display_string(value)} should contain the substring "
                f"{display_string(substring)} exactly once"
            ),
            negated_failure_message=(
                f"{display_string(value)} should not contain the substring "
                f"{display_string(substring)} exactly once"
            ),
        )

    return check


@never_null_matcher
def be_lower_case():
    """Match when lower-casing the subject leaves it unchanged."""

    def check(value: str) -> Outcome:
        return Outcome(
            passed=value.lower() == value,
            failure_message=f"{display_string(value)} should be lower case",
            negated_failure_message=f"{display_string(value)} should not be lower case",
        )

    return check


@never_null_matcher
def be_upper_case():
    """Match when upper-casing the subject leaves it unchanged."""

    def check(value: str) -> Outcome:
        return Outcome(
            passed=value.upper() == value,
            failure_message=f"{display_string(value)} should be upper case",
            negated_failure_message=f"{display_string(value)} should not be upper case",
        )

    return check


@never_null_matcher
def be_empty():
    def check(value: str) -> Outcome:
        return Outcome(
            passed=len(value) == 0,
            failure_message=f"{display_string(value)} should be empty",
            negated_failure_message=f"{display_string(value)} should not be empty",
        )

    return check


@never_null_matcher
def have_same_length_as(other: str):
    def check(value: str) -> Outcome:
        return Outcome(
            passed=len(value) == len(other),
            failure_message=(
                f"{display_string(value)} should have the same length as {display_string(other)}"
            ),
            negated_failure_message=(
                f"{display_string(value)} should not have the same length as {display_string(other)}"
            ),
        )

    return check


@never_null_matcher
def have_line_count(count: int):
    """Match on the number of ``"\\n"`` characters in the subject.

    Only line feeds are counted, so ``"\\r\\n"`` counts once and the result
    does not depend on the platform line separator. ``"a\\nb\\nc"`` has a line
    count of 2 and ``""`` has 0.
    """

    def check(value: str) -> Outcome:
        lines = value.count("\n")
        return Outcome(
            passed=lines == count,
            failure_message=f"{display_string(value)} should have {count} lines but had {lines}",
            negated_failure_message=f"{display_string(value)} should not have {count} lines",
        )

    return check


@never_null_matcher
def be_blank():
    """Match when the subject is empty or contains only whitespace."""

    def check(value: str) -> Outcome:
        return Outcome(
            passed=value == "" or value.isspace(),
            failure_message=f"{display_string(value)} should contain only whitespace",
            negated_failure_message=f"{display_string(value)} should not contain only whitespace",
        )

    return check


def contain_only_whitespace() -> Matcher:
    """Alias of :func:`be_blank`."""
    return be_blank()


@never_null_matcher
def contain_ignoring_case(substring: str):
    def check(value: str) -> Outcome:
        return Outcome(
            passed=substring.lower() in value.lower(),
            failure_message=(
                f"{display_string(value)} should contain the substring "
                f"{display_string(substring)} (case insensitive)"
            ),
            negated_failure_message=(
                f"{display_string(value)} should not contain the substring "
                f"{display_string(substring)} (case insensitive)"
            ),
        )

    return check


@never_null_matcher
def contain_regex(regex: re.Pattern[str]):
    """Match when ``regex`` is found anywhere in the subject."""

    def check(value: str) -> Outcome:
        return Outcome(
            passed=regex.search(value) is not None,
            failure_message=f"{display_string(value)} should contain regex {regex.pattern}",
            negated_failure_message=f"{display_string(value)} should not contain regex {regex.pattern}",
        )

    return check


@never_null_matcher
def contain_in_order(*substrings: str):
    """Match when the substrings first occur in the given order.

    Indices come from ``str.find``, so an absent substring contributes ``-1``
    and sorts ahead of everything else: ``contain_in_order("x", "a")`` matches
    ``"abc"`` even though ``"x"`` is missing.
    """

    def check(value: str) -> Outcome:
        indexes = [value.find(substring) for substring in substrings]
        return Outcome(
            passed=indexes == sorted(indexes),
            failure_message=(
                f"{display_string(value)} should include substrings "
                f"{display_string(substrings)} in order"
            ),
            negated_failure_message=(
                f"{display_string(value)} should not include substrings "
                f"{display_string(substrings)} in order"
            ),
        )

    return check


@never_null_matcher
def include(substring: str):
    """Match when ``substring`` occurs anywhere in the subject."""

    def check(value: str) -> Outcome:
        return Outcome(
            passed=substring in value,
            failure_message=f"{display_string(value)} should include substring {display_string(substring)}",
            negated_failure_message=(
                f"{display_string(value)} should not include substring {display_string(substring)}"
            ),
        )

    return check


def contain(expected: str | re.Pattern[str]) -> Matcher:
    """Match a substring, or a regex found anywhere when given a compiled pattern.

    Parameters
    ----------
    expected : str or re.Pattern
        A plain string delegates to :func:`include`; a compiled pattern
        delegates to :func:`contain_regex`.

    Returns
    -------
    Matcher
        The selected matcher.
    """
    if isinstance(expected, re.Pattern):
        return contain_regex(expected)
    return include(expected)


@never_null_matcher
def have_max_length(length: int):
    """Match when ``len(subject) <= length``.

    The negated message states the bound as a minimum of ``length - 1``.
    """

    def check(value: str) -> Outcome:
        return Outcome(
            passed=len(value) <= length,
            failure_message=f"{display_string(value)} should have maximum length of {length}",
            negated_failure_message=f"{display_string(value)} should have minimum length of {length - 1}",
        )

    return check


@never_null_matcher
def have_min_length(length: int):
    """Match when ``len(subject) >= length``.

    The negated message states the bound as a maximum of ``length - 1``.
    """

    def check(value: str) -> Outcome:
        return Outcome(
            passed=len(value) >= length,
            failure_message=f"{display_string(value)} should have minimum length of {length}",
            negated_failure_message=f"{display_string(value)} should have maximum length of {length - 1}",
        )

    return check


@never_null_matcher
def be_equal_ignoring_case(other: str):
    """Match when the subject equals ``other`` once both are lower-cased.

    Uses the same ``str.lower`` mapping as :func:`contain_ignoring_case`, so
    strings whose case forms differ in length (``"Straße"`` and ``"STRASSE"``)
    are not equal.

    Examples
    --------
    >>> be_equal_ignoring_case("FoO").test("foo").passed
    True
    >>> be_equal_ignoring_case("BoB").test("bar").passed
    False
    """

    def check(value: str) -> Outcome:
        return Outcome(
            passed=value.lower() == other.lower(),
            failure_message=f"{display_string(value)} should be equal ignoring case {display_string(other)}",
            negated_failure_message=(
                f"{display_string(value)} should not be equal ignoring case {display_string(other)}"
            ),
        )

    return check
