"""Fork-join pattern utilities."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, TypeVar

from .executor import ParallelExecutor

R = TypeVar("R")


def _call(fn: Callable[[], R]) -> R:
    return fn()


def fork_join(
    tasks: Sequence[Callable[[], R]],
    *,
    kind: str = "threads",
    max_workers: Optional[int] = None,
    log_events: bool = False,
) -> List[R]:
    """Run independent callables in parallel and join their results in order.

    The call returns only after every task has finished. With no tasks no
    pool is started.
    """
    if not tasks:
        return []
    with ParallelExecutor(
        kind=kind, max_workers=max_workers, log_events=log_events
    ) as ex:
        return ex.run(_call, tasks)


__all__ = ["fork_join"]
