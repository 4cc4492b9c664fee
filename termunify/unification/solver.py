"""Solve expression sets concurrently, one task per set."""

import logging
from functools import partial
from typing import List, Optional

from termunify.global_params import global_config
from termunify.unification.core import ExpressionSet, unify_set
from termunify.unification.sets import build_expression_sets
from termunify.utils.parallel import fork_join

logger = logging.getLogger(__name__)


def solve_expression_sets(expression_sets: List[ExpressionSet],
                          kind: Optional[str] = None,
                          log_events: Optional[bool] = None) -> List[ExpressionSet]:
    """Unify every set on its own worker and wait for all of them.

    The pool has one worker per set. Each task owns its set exclusively, so
    nothing is locked; the join at the end is the only synchronisation.
    The solved sets are returned in input order. With a process pool they
    are copies of the ones passed in.
    """
    if kind is None:
        kind = global_config.executor_kind
    if log_events is None:
        log_events = global_config.log_events
    if not expression_sets:
        return []

    logger.info("Solving %d expression sets with %s", len(expression_sets), kind)
    tasks = [partial(unify_set, expression_set) for expression_set in expression_sets]
    solved = fork_join(tasks, kind=kind, max_workers=len(tasks), log_events=log_events)
    logger.info("%d of %d sets have no unifier",
                sum(1 for s in solved if s.failed), len(solved))
    return solved


def solve_text(text: str, delimiter: Optional[str] = None) -> List[ExpressionSet]:
    """Build the expression sets of ``text`` and solve them."""
    return solve_expression_sets(build_expression_sets(text, delimiter))
