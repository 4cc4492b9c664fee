"""Console report of the solved expression sets."""

import re
import sys
from typing import List, Mapping, Sequence, TextIO, Optional

from termunify.unification.core import ExpressionSet
from termunify.unification.parser import parse_term
from termunify.unification.terms import Term, substitute, variables


def substitute_bindings(expr: str, bindings: Mapping[str, Term]) -> str:
    """Rewrite an expression with the variables replaced by their bindings.

    One pass replaces every bound variable. A second pass is made only if
    variables remain (a variable bound to another variable); longer chains
    are left partially resolved.

    Lines that are not equations are not parsed; bound variable tokens in
    them are replaced as text, with the same two-pass rule.
    """
    if "=" not in expr:
        return _substitute_text(expr, bindings)
    terms = [substitute(parse_term(side), bindings) for side in expr.split("=", 1)]
    if any(variables(term) for term in terms):
        terms = [substitute(term, bindings) for term in terms]
    return " = ".join(str(term) for term in terms)


def _substitute_text(text: str, bindings: Mapping[str, Term]) -> str:
    if not bindings:
        return text
    # longest names first so ?x1 is not read as ?x followed by 1
    pattern = re.compile("|".join(re.escape(name) for name in sorted(bindings, key=len, reverse=True)))

    def one_pass(s: str) -> str:
        return pattern.sub(lambda m: str(bindings[m.group(0)]), s)

    text = one_pass(text)
    if "?" in text:
        text = one_pass(text)
    return text


def format_bindings(expression_set: ExpressionSet) -> List[str]:
    lines = ["", f"### MGU for set {expression_set.id}", "", "Bindings:"]
    for name in sorted(expression_set.bindings):
        lines.append(f"   {name} ==> {expression_set.bindings[name]}")
    lines.extend(["", "Expressions:"])
    for expr in expression_set.expressions:
        lines.append(f"   Original:  {expr}")
        lines.append(f"   Rewritten: {substitute_bindings(expr, expression_set.bindings)}")
        lines.append("")
    return lines


def format_failure(expression_set: ExpressionSet) -> List[str]:
    return [
        "",
        f"### No MGU for set {expression_set.id}",
        expression_set.failure.reason,
        expression_set.failure.details,
    ]


def format_set_report(expression_set: ExpressionSet) -> str:
    """Report for one set: its failure, or its bindings and rewritten expressions."""
    if expression_set.failed:
        return "\n".join(format_failure(expression_set))
    return "\n".join(format_bindings(expression_set))


def format_expression_sets(expression_sets: Sequence[ExpressionSet]) -> str:
    """Echo of the input sets as read, before solving."""
    lines = ["", f"{len(expression_sets)} expression sets:"]
    for expression_set in expression_sets:
        lines.extend(["", f"Set {expression_set.id}"])
        lines.extend(expression_set.expressions)
    return "\n".join(lines)


def report(expression_sets: Sequence[ExpressionSet], out: Optional[TextIO] = None) -> None:
    """Print every set's report in set-id order."""
    out = out if out is not None else sys.stdout
    for expression_set in sorted(expression_sets, key=lambda s: s.id):
        print(format_set_report(expression_set), file=out)
