import re

import pytest

from matchkit.matchers import InvalidSubjectError, end_with, have_length, match, start_with


class TestMatch:
    def test_full_match_only(self):
        assert match(r"[a-z]+").test("abc").passed
        assert not match(r"[a-z]+").test("abc1").passed
        assert not match(r"b").test("abc").passed

    def test_messages_use_pattern_source(self):
        outcome = match(re.compile(r"\d+")).test("abc")

        assert outcome.failure_message == r'"abc" should match regex \d+'
        assert outcome.negated_failure_message == r'"abc" should not match regex \d+'

    def test_invalid_pattern_fails_at_construction(self):
        with pytest.raises(re.error):
            match("(")


class TestStartWith:
    def test_passes(self):
        outcome = start_with("foo").test("foobar")

        assert outcome.passed
        assert outcome.negated_failure_message == '"foobar" should not start with "foo"'

    def test_reports_divergence_index(self):
        outcome = start_with("fob").test("foobar")

        assert not outcome.passed
        assert outcome.failure_message == '"foobar" should start with "fob" (diverged at index 2)'

    def test_no_divergence_when_subject_is_shorter_prefix(self):
        outcome = start_with("foobar").test("foo")

        assert not outcome.passed
        assert outcome.failure_message == '"foo" should start with "foobar"'


class TestEndWith:
    def test_end_with(self):
        assert end_with("bar").test("foobar").passed
        outcome = end_with("baz").test("foobar")
        assert not outcome.passed
        assert outcome.failure_message == '"foobar" should end with "baz"'
        assert outcome.negated_failure_message == '"foobar" should not end with "baz"'


class TestHaveLength:
    def test_have_length(self):
        assert have_length(0).test("").passed
        outcome = have_length(2).test("abc")
        assert not outcome.passed
        assert outcome.failure_message == '"abc" should have length 2, but instead was 3'
        assert outcome.negated_failure_message == '"abc" should not have length 2'


@pytest.mark.parametrize("matcher", [match("a"), start_with("a"), end_with("a"), have_length(1)])
def test_null_subject(matcher):
    with pytest.raises(InvalidSubjectError) as exc_info:
        matcher.test(None)

    assert matcher.name in str(exc_info.value)
    assert exc_info.value.matcher_name == matcher.name
