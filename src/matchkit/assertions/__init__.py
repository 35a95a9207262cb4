"""Assertion layer: apply matchers and raise on failure."""

from matchkit.assertions._base import (
    AssertionFailedError,
    assert_not_that,
    assert_that,
    should,
    should_not,
)

__all__ = [
    "AssertionFailedError",
    "should",
    "should_not",
    "assert_that",
    "assert_not_that",
]
