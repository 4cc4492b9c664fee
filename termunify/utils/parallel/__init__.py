"""Parallel execution utilities used to solve expression sets concurrently."""

from .executor import ParallelExecutor
from .fork_join import fork_join

__all__ = [
    "ParallelExecutor",
    "fork_join",
]
