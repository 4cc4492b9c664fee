"""First-order term unification over independent sets of equations.

This package parses terms, computes a most general unifier per expression
set, solves the sets concurrently and reports the outcome.
"""

from .terms import Function, Term, Variable, is_functional_term, is_variable, occurs
from .parser import canonicalize, extract_args, find_args, parse_term, split_equation
from .core import ExpressionSet, Failure, FailureKind, bind, unify_set
from .sets import build_expression_sets, read_input
from .solver import solve_expression_sets, solve_text
from .report import format_expression_sets, format_set_report, report, substitute_bindings

__all__ = [
    "Function",
    "Term",
    "Variable",
    "is_functional_term",
    "is_variable",
    "occurs",
    "canonicalize",
    "extract_args",
    "find_args",
    "parse_term",
    "split_equation",
    "ExpressionSet",
    "Failure",
    "FailureKind",
    "bind",
    "unify_set",
    "build_expression_sets",
    "read_input",
    "solve_expression_sets",
    "solve_text",
    "format_expression_sets",
    "format_set_report",
    "report",
    "substitute_bindings",
]
