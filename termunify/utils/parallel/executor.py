"""Lightweight parallel execution helpers.

Features:
- Unified process/thread pool via a single class
- Submit, map, and gather results in submission order
- Optional task-level logging (start/end/duration)
"""

from __future__ import annotations

from concurrent.futures import (
    ThreadPoolExecutor,
    ProcessPoolExecutor,
    FIRST_COMPLETED,
    wait,
)
import logging
import time
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    List,
    Optional,
    Sequence,
    TypeVar,
    Union,
)


T = TypeVar("T")
R = TypeVar("R")


PoolKind = Union[ThreadPoolExecutor, ProcessPoolExecutor]


@dataclass
class ParallelExecutor:
    """Unified wrapper around thread/process pools.

    kind: "threads" or "processes".
    """

    max_workers: Optional[int] = None
    kind: str = "threads"  # "threads" | "processes"
    log_events: bool = False
    logger: Optional[logging.Logger] = None

    def __post_init__(self) -> None:
        if self.kind not in ("threads", "processes"):
            raise ValueError("kind must be 'threads' or 'processes'")
        if self.logger is None:
            self.logger = logging.getLogger("termunify.parallel")
        if self.kind == "threads":
            self._pool: PoolKind = ThreadPoolExecutor(
                max_workers=self.max_workers, thread_name_prefix="termunify"
            )
        else:
            self._pool = ProcessPoolExecutor(max_workers=self.max_workers)

    def submit(self, fn: Callable[..., R], *args: Any, **kwargs: Any):
        if self.log_events:
            # Top-level wrapper keeps the task picklable for processes
            logger_name = self.logger.name if self.logger else None
            return self._pool.submit(
                _execute_with_logging, fn, args, kwargs, logger_name
            )
        return self._pool.submit(fn, *args, **kwargs)

    def shutdown(self, wait_for_completion: bool = True) -> None:
        self._pool.shutdown(wait=wait_for_completion)

    def run(self, fn: Callable[[T], R], items: Iterable[T]) -> List[R]:
        """Run fn over items, block until every task is done, and return
        the results in submission order."""
        futures = [self.submit(fn, item) for item in items]
        return _gather_results(futures, logger=self.logger)

    def __enter__(self) -> "ParallelExecutor":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()


def _execute_with_logging(
    fn: Callable[..., R], args: tuple, kwargs: dict, logger_name: Optional[str]
) -> R:
    """Execute a callable, logging start/end/duration using a named logger.

    This function is top-level so it's picklable for process pools.
    """
    logger = logging.getLogger(logger_name) if logger_name else None
    name = getattr(fn, "__name__", repr(fn))
    start = time.time()
    if logger:
        logger.debug("task.start name=%s", name)
    try:
        return fn(*args, **kwargs)
    finally:
        if logger:
            logger.debug("task.end name=%s elapsed=%.6fs", name, time.time() - start)


def _gather_results(
    futures: Sequence, *, logger: Optional[logging.Logger]
) -> List:
    """Wait for every future and collect results in submission order.

    A task exception is logged and re-raised once the remaining tasks have
    been cancelled.
    """
    results: Dict[int, Any] = {}
    pending: Dict[Any, int] = {f: idx for idx, f in enumerate(futures)}

    while pending:
        done, _ = wait(pending.keys(), return_when=FIRST_COMPLETED)
        for fut in done:
            idx = pending.pop(fut)
            try:
                results[idx] = fut.result()
            except Exception as exc:
                if logger:
                    logger.error("task.error type=%s msg=%s", type(exc).__name__, exc)
                for rem in pending:
                    rem.cancel()
                raise

    return [results[i] for i in sorted(results)]
