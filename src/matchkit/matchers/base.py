"""Base matcher classes and outcome types."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from functools import wraps
from typing import Any, ParamSpec

from pydantic import BaseModel, ConfigDict

P = ParamSpec("P")


class InvalidSubjectError(ValueError):
    """Raised when a matcher is applied to a missing (``None``) subject.

    This is not an assertion failure: the matcher could not be evaluated at
    all, so neither ``should`` nor ``should_not`` can pass.
    """

    def __init__(self, matcher_name: str | None = None):
        self.matcher_name = matcher_name
        message = "Expecting actual not to be null"
        if matcher_name:
            message = f"{matcher_name}: {message}"
        super().__init__(message)


class Outcome(BaseModel):
    """Result of evaluating a matcher against a subject.

    Attributes
    ----------
    passed : bool
        Whether the predicate held for the subject.
    failure_message : str
        Message reported when ``should`` fails.
    negated_failure_message : str
        Message reported when ``should_not`` fails.

    Notes
    -----
    - ``bool(outcome)`` is equivalent to ``outcome.passed``.
    - Outcomes are frozen; evaluating the same matcher twice on the same
      subject yields equal outcomes.
    """

    model_config = ConfigDict(frozen=True)

    passed: bool
    failure_message: str
    negated_failure_message: str

    def __bool__(self) -> bool:
        return self.passed

    def __repr__(self) -> str:
        return self.model_dump_json(indent=2)


class Matcher(ABC):
    """A predicate over a subject paired with its two failure messages.

    Attributes
    ----------
    name : str
        Identifier used in logs and errors; defaults to the subclass name.

    Notes
    -----
    Subclasses implement :meth:`test`. Calling the matcher is the same as
    calling ``test``.
    """

    name: str

    def __init_subclass__(cls, **kwargs):
        """Auto-generate name from class name if not provided."""
        super().__init_subclass__(**kwargs)
        if "name" not in cls.__dict__:
            cls.name = cls.__name__

    @abstractmethod
    def test(self, subject: Any) -> Outcome:
        """Evaluate the matcher against ``subject``.

        Parameters
        ----------
        subject : Any
            Value under test.

        Returns
        -------
        Outcome
            Pass/fail state plus both messages.

        Raises
        ------
        InvalidSubjectError
            If the matcher requires a subject and ``subject`` is ``None``.
        """

    def __call__(self, subject: Any) -> Outcome:
        return self.test(subject)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class FunctionMatcher(Matcher):
    """Adapt a plain ``subject -> Outcome`` function into a :class:`Matcher`."""

    def __init__(self, fn: Callable[[Any], Outcome], name: str | None = None):
        self._fn = fn
        self.name = name or getattr(fn, "__name__", type(self).__name__)

    def test(self, subject: Any) -> Outcome:
        return self._fn(subject)


class NeverNullMatcher(FunctionMatcher):
    """Matcher that rejects ``None`` before delegating to its predicate."""

    def test(self, subject: Any) -> Outcome:
        if subject is None:
            raise InvalidSubjectError(self.name)
        return self._fn(subject)


def never_null_matcher(factory: Callable[P, Callable[[Any], Outcome]]) -> Callable[P, Matcher]:
    """Decorator turning an outcome-function factory into a matcher factory.

    The decorated factory returns a function from a non-null subject to an
    :class:`Outcome`. The wrapper builds a :class:`NeverNullMatcher` around it,
    so the ``None`` check lives in one place instead of every matcher.

    Example:
        >>> @never_null_matcher
        >>> def be_empty():
        >>>     def check(value: str) -> Outcome:
        >>>         return Outcome(
        >>>             passed=value == "",
        >>>             failure_message=f"{value!r} should be empty",
        >>>             negated_failure_message=f"{value!r} should not be empty",
        >>>         )
        >>>     return check
        >>>
        >>> assert be_empty().test("").passed is True
    """

    @wraps(factory)
    def build(*args: P.args, **kwargs: P.kwargs) -> Matcher:
        return NeverNullMatcher(factory(*args, **kwargs), name=factory.__name__)

    return build
