"""Term structure for first-order unification.

A term is either a logical variable (``?x``) or a functional term
(``f(a(), ?x)``); a functional term with no arguments is a constant.
Terms are parsed once from their source text into :class:`Variable` and
:class:`Function` values and rendered back with ``str`` in canonical form,
that is, without any whitespace::

    >>> str(Function("f", (Variable("?x"), Function("a"))))
    'f(?x,a())'
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import partial
from typing import Tuple, Union

from multipledispatch import dispatch
from toolz import concat

namespace: dict = {}

dispatch = partial(dispatch, namespace=namespace)

VARIABLE_PREFIX = "?"


@dataclass(frozen=True)
class Variable:
    """Logical variable. ``name`` keeps the leading ``?``."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Function:
    """Function symbol applied to an ordered tuple of argument terms."""

    symbol: str
    args: Tuple["Term", ...] = ()

    @property
    def arity(self) -> int:
        """Number of arguments."""
        return len(self.args)

    def __str__(self) -> str:
        return f"{self.symbol}({','.join(str(arg) for arg in self.args)})"


Term = Union[Variable, Function]


@dispatch(str)
def is_variable(token):
    """Is the token a logical variable (``?`` followed by at least one character)?"""
    return token[:1] == VARIABLE_PREFIX and len(token) > 1


@dispatch(Variable)
def is_variable(term):  # noqa: F811
    return True


@dispatch(Function)
def is_variable(term):  # noqa: F811
    return False


def is_functional_term(token) -> bool:
    """Anything that is not a variable is a functional term."""
    return not is_variable(token)


@dispatch(Variable)
def variables(term):
    """Names of the variables occurring in a term."""
    return {term.name}


@dispatch(Function)
def variables(term):  # noqa: F811
    return set(concat(variables(arg) for arg in term.args))


@dispatch(Variable, Mapping)
def substitute(term, bindings):
    """Replace each bound variable by its value, in a single pass.

    Values are inserted as they are: a variable bound to a term that
    contains other bound variables is not resolved further.
    """
    return bindings.get(term.name, term)


@dispatch(Function, Mapping)
def substitute(term, bindings):  # noqa: F811
    return Function(term.symbol, tuple(substitute(arg, bindings) for arg in term.args))


def occurs(var: Variable, term: Term) -> bool:
    """Occurs check by textual containment of the variable's name.

    ``?x`` therefore occurs in ``f(?x1)`` as well as in ``?x`` itself.
    """
    return var.name in str(term)
