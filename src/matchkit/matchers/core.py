"""Generic matchers shared by the typed matcher modules."""

import re

from matchkit.display import display_string
from matchkit.matchers.base import Outcome, never_null_matcher


@never_null_matcher
def match(regex: str | re.Pattern[str]):
    """Match when the whole subject matches ``regex``."""
    pattern = re.compile(regex) if isinstance(regex, str) else regex

    def check(value: str) -> Outcome:
        return Outcome(
            passed=pattern.fullmatch(value) is not None,
            failure_message=f"{display_string(value)} should match regex {pattern.pattern}",
            negated_failure_message=f"{display_string(value)} should not match regex {pattern.pattern}",
        )

    return check


@never_null_matcher
def start_with(prefix: str):
    """Match when the subject starts with ``prefix``.

    The failure message names the first index at which the subject and the
    prefix differ, when they differ inside their common length.
    """

    def check(value: str) -> Outcome:
        passed = value.startswith(prefix)
        message = f"{display_string(value)} should start with {display_string(prefix)}"
        if not passed:
            for k in range(min(len(value), len(prefix))):
                if value[k] != prefix[k]:
                    message = f"{message} (diverged at index {k})"
                    break
        return Outcome(
            passed=passed,
            failure_message=message,
            negated_failure_message=f"{display_string(value)} should not start with {display_string(prefix)}",
        )

    return check


@never_null_matcher
def end_with(suffix: str):
    """Match when the subject ends with ``suffix``."""

    def check(value: str) -> Outcome:
        return Outcome(
            passed=value.endswith(suffix),
            failure_message=f"{display_string(value)} should end with {display_string(suffix)}",
            negated_failure_message=f"{display_string(value)} should not end with {display_string(suffix)}",
        )

    return check


@never_null_matcher
def have_length(length: int):
    """Match when ``len(subject) == length``."""

    def check(value: str) -> Outcome:
        return Outcome(
            passed=len(value) == length,
            failure_message=(
                f"{display_string(value)} should have length {length}, but instead was {len(value)}"
            ),
            negated_failure_message=f"{display_string(value)} should not have length {length}",
        )

    return check
