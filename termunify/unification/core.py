"""Most general unifiers for sets of term equations.

Each :class:`ExpressionSet` is solved on its own by :func:`unify_set`, which
binds variables equation by equation in input order. Failures are recorded
on the set rather than raised, and solving does not stop at the first
failure: every remaining equation and every remaining argument position is
still tried, and bindings made after a failure are kept.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from termunify.unification.parser import canonicalize, parse_term, split_equation
from termunify.unification.terms import Function, Term, Variable, dispatch, occurs

logger = logging.getLogger(__name__)


class FailureKind(Enum):
    """Reasons a set of equations has no unifier."""

    OCCURS_CHECK = "Fails occurs check"
    DIFFERENT_FUNCTIONS = "Different functions"
    DIFFERENT_ARITIES = "Different arities"


@dataclass(frozen=True)
class Failure:
    """Why unification failed, with a human-readable detail line."""

    kind: FailureKind
    details: str

    @property
    def reason(self) -> str:
        return self.kind.value


@dataclass
class ExpressionSet:
    """One independently solved group of equations."""

    id: int
    expressions: List[str] = field(default_factory=list)
    bindings: Dict[str, Term] = field(default_factory=dict)  # variable name -> term
    failed: bool = False
    failure: Optional[Failure] = None

    def fail(self, kind: FailureKind, details: str) -> None:
        """Mark the set as failed. Only the latest failure is kept."""
        self.failed = True
        self.failure = Failure(kind, details)
        logger.debug("set %d: %s (%s)", self.id, kind.value, details)

    def binding_table(self) -> Dict[str, str]:
        """Bindings with the bound terms rendered as text."""
        return {name: str(term) for name, term in self.bindings.items()}


def unify_set(expression_set: ExpressionSet) -> ExpressionSet:
    """Solve every equation of the set in order and return the set."""
    for expr in expression_set.expressions:
        if "=" not in expr:
            logger.debug("set %d: skipping %r, not an equation", expression_set.id, expr)
            continue
        left, right = split_equation(expr)
        bind(expression_set, parse_term(left), parse_term(right))
    return expression_set


@dispatch(ExpressionSet, Variable, object)
def bind(expression_set, left, right):
    """Bind ``left`` to ``right`` or unify them structurally."""
    if occurs(left, right):
        expression_set.fail(FailureKind.OCCURS_CHECK, f"{left} occurs in {right}")
        return
    expression_set.bindings[left.name] = right
    logger.debug("set %d: %s ==> %s", expression_set.id, left, right)


@dispatch(ExpressionSet, Function, Variable)
def bind(expression_set, left, right):  # noqa: F811
    bind(expression_set, right, left)


@dispatch(ExpressionSet, Function, Function)
def bind(expression_set, left, right):  # noqa: F811
    # function symbols are single characters; only the first one is compared
    if left.symbol[:1] != right.symbol[:1]:
        expression_set.fail(FailureKind.DIFFERENT_FUNCTIONS,
                            f"{left.symbol[:1]} != {right.symbol[:1]}")
        return
    if left.arity != right.arity:
        expression_set.fail(FailureKind.DIFFERENT_ARITIES,
                            f"{left}: {left.arity} args ## {right}: {right.arity} args")
        return
    # No short-circuit: later positions are tried even if an earlier one failed.
    for left_arg, right_arg in zip(left.args, right.args):
        bind(expression_set, *canonicalize(left_arg, right_arg))
