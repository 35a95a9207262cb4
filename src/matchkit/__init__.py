"""matchkit - string matchers for test assertions."""

from .assertions import AssertionFailedError, assert_not_that, assert_that, should, should_not
from .config import MatchkitSettings, get_settings
from .context import outcomes_collector
from .display import display_string
from .matchers import InvalidSubjectError, Matcher, Outcome, never_null_matcher
from .version import __version__


__all__ = [
    # Assertions
    "should",
    "should_not",
    "assert_that",
    "assert_not_that",
    "AssertionFailedError",
    # Matchers
    "Matcher",
    "Outcome",
    "InvalidSubjectError",
    "never_null_matcher",
    # Support
    "display_string",
    "outcomes_collector",
    "MatchkitSettings",
    "get_settings",
]
