"""Matcher library."""

from matchkit.matchers.base import (
    FunctionMatcher,
    InvalidSubjectError,
    Matcher,
    NeverNullMatcher,
    Outcome,
    never_null_matcher,
)
from matchkit.matchers.core import end_with, have_length, match, start_with
from matchkit.matchers.string import (
    be_blank,
    be_empty,
    be_equal_ignoring_case,
    be_lower_case,
    be_upper_case,
    contain,
    contain_a_digit,
    contain_ignoring_case,
    contain_in_order,
    contain_only_digits,
    contain_only_once,
    contain_only_whitespace,
    contain_regex,
    have_line_count,
    have_max_length,
    have_min_length,
    have_same_length_as,
    include,
)

__all__ = [
    # Matcher abstractions
    "Matcher",
    "FunctionMatcher",
    "NeverNullMatcher",
    "Outcome",
    "InvalidSubjectError",
    "never_null_matcher",
    # Generic matchers
    "match",
    "start_with",
    "end_with",
    "have_length",
    # String matchers
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
    "have_line_count",
    "have_max_length",
    "have_min_length",
    "have_same_length_as",
    "include",
]
