from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from matchkit.matchers.base import Outcome


OUTCOMES_COLLECTOR: ContextVar[list[Outcome] | None] = ContextVar("outcomes_collector", default=None)


def record_outcome(outcome: Outcome) -> None:
    """Append ``outcome`` to the active collector, if there is one."""
    if (collector := OUTCOMES_COLLECTOR.get()) is not None:
        collector.append(outcome)


@contextmanager
def outcomes_collector(ctx: list[Outcome]) -> Iterator[None]:
    """Record every outcome evaluated by ``should`` / ``should_not`` into ``ctx``.

    Parameters
    ----------
    ctx : list[Outcome]
        List that receives outcomes for the duration of the ``with`` block.
    """
    token = OUTCOMES_COLLECTOR.set(ctx)
    try:
        yield
    finally:
        OUTCOMES_COLLECTOR.reset(token)
