import io

from termunify.unification.core import ExpressionSet, unify_set
from termunify.unification.report import (
    format_expression_sets,
    format_set_report,
    report,
    substitute_bindings,
)


def _solve(*expressions, set_id=1):
    return unify_set(ExpressionSet(id=set_id, expressions=list(expressions)))


def test_two_hop_substitution():
    solved = _solve("?x = ?y", "?y = a()")
    assert substitute_bindings("?x", solved.bindings) == "a()"
    assert substitute_bindings("?x = ?y", solved.bindings) == "a() = a()"


def test_substitution_stops_after_two_passes():
    solved = _solve("?x = ?y", "?y = ?z", "?z = a()")
    assert substitute_bindings("?x", solved.bindings) == "?z"


def test_unbound_variables_are_kept():
    assert substitute_bindings("f(?x, ?u) = ?v", {}) == "f(?x,?u) = ?v"


def test_success_report():
    solved = _solve("?b = c()", "f(a()) = ?a")
    text = format_set_report(solved)
    lines = text.split("\n")
    assert lines[1] == "### MGU for set 1"
    assert lines.index("   ?a ==> f(a())") < lines.index("   ?b ==> c()")
    assert "   Original:  f(a()) = ?a" in lines
    assert "   Rewritten: f(a()) = f(a())" in lines
    assert "   Rewritten: c() = c()" in lines


def test_failure_report():
    solved = _solve("?x = f(?x)", "?y = a()")
    assert format_set_report(solved) == "\n### No MGU for set 1\nFails occurs check\n?x occurs in f(?x)"


def test_expression_sets_echo():
    sets = [ExpressionSet(id=1, expressions=["?x = a()"]),
            ExpressionSet(id=2, expressions=["?y = b()", "?z = c()"])]
    assert format_expression_sets(sets) == (
        "\n2 expression sets:\n\nSet 1\n?x = a()\n\nSet 2\n?y = b()\n?z = c()"
    )


def test_report_in_set_order():
    sets = [_solve("?x = a()", set_id=2), _solve("?x = f(?x)", set_id=1)]
    out = io.StringIO()
    report(sets, out=out)
    text = out.getvalue()
    assert text.index("### No MGU for set 1") < text.index("### MGU for set 2")


def test_non_equation_lines_are_rewritten_as_text():
    solved = _solve("?x = ?y", "?y = a()", "?x1 = b()")
    assert substitute_bindings("just a comment", solved.bindings) == "just a comment"
    assert substitute_bindings("see ?x and ?x1", solved.bindings) == "see a() and b()"
