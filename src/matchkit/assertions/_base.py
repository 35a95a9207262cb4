"""Apply matchers to subjects and raise on failure."""

import logging
from typing import Any

from matchkit.config import get_settings
from matchkit.context import record_outcome
from matchkit.matchers.base import Matcher, Outcome

logger = logging.getLogger(__name__)


class AssertionFailedError(AssertionError):
    """AssertionError with the attached matcher outcome.

    Attributes
    ----------
    outcome : Outcome
        The evaluated outcome that caused the failure.
    negated : bool
        True when raised by ``should_not``.
    """

    def __init__(self, outcome: Outcome, negated: bool = False):
        self.outcome = outcome
        self.negated = negated
        message = outcome.negated_failure_message if negated else outcome.failure_message
        super().__init__(message)


def _apply(subject: Any, matcher: Matcher, negated: bool) -> Outcome:
    outcome = matcher.test(subject)
    record_outcome(outcome)
    failed = outcome.passed if negated else not outcome.passed
    if failed:
        logger.debug(
            "%s failed: %s",
            matcher.name,
            outcome.negated_failure_message if negated else outcome.failure_message,
        )
        raise AssertionFailedError(outcome, negated=negated)
    if get_settings().log_outcomes:
        logger.debug("%s passed (negated=%s)", matcher.name, negated)
    return outcome


def should(subject: Any, matcher: Matcher) -> Outcome:
    """Assert that ``matcher`` holds for ``subject``.

    Parameters
    ----------
    subject : Any
        Value under test.
    matcher : Matcher
        Matcher to evaluate.

    Returns
    -------
    Outcome
        The passing outcome.

    Raises
    ------
    AssertionFailedError
        If the outcome did not pass; the message is ``failure_message``.
    InvalidSubjectError
        If the matcher rejects a ``None`` subject.
    """
    return _apply(subject, matcher, negated=False)


def should_not(subject: Any, matcher: Matcher) -> Outcome:
    """Assert that ``matcher`` does not hold for ``subject``.

    Parameters
    ----------
    subject : Any
        Value under test.
    matcher : Matcher
        Matcher to evaluate.

    Returns
    -------
    Outcome
        The (non-passing) outcome.

    Raises
    ------
    AssertionFailedError
        If the outcome passed; the message is ``negated_failure_message``.
    InvalidSubjectError
        If the matcher rejects a ``None`` subject.
    """
    return _apply(subject, matcher, negated=True)


assert_that = should
assert_not_that = should_not
