from termunify.unification.terms import (
    Function,
    Variable,
    is_functional_term,
    is_variable,
    occurs,
    substitute,
    variables,
)


def test_variable_tokens():
    assert is_variable("?x")
    assert is_variable("?x1")
    assert not is_variable("?")
    assert not is_variable("")
    assert not is_variable("f(?x)")
    assert is_functional_term("a()")
    assert not is_functional_term("?y")


def test_is_variable_on_parsed_terms():
    assert is_variable(Variable("?x"))
    assert not is_variable(Function("a"))


def test_canonical_rendering():
    term = Function("f", (Variable("?x"), Function("h", (Function("a"), Function("b")))))
    assert str(term) == "f(?x,h(a(),b()))"
    assert str(Function("c")) == "c()"
    assert Function("c").arity == 0
    assert term.arity == 2


def test_variables():
    term = Function("f", (Variable("?x"), Function("g", (Variable("?y"), Variable("?x")))))
    assert variables(term) == {"?x", "?y"}
    assert variables(Function("h", (Function("a"),))) == set()


def test_occurs_is_textual():
    x = Variable("?x")
    assert occurs(x, Function("f", (x,)))
    assert occurs(x, x)
    # name containment, not term identity
    assert occurs(x, Function("f", (Variable("?x1"),)))
    assert not occurs(Variable("?x1"), Function("f", (x,)))


def test_substitute_single_pass():
    bindings = {"?x": Variable("?y"), "?y": Function("a")}
    term = Function("f", (Variable("?x"), Variable("?z")))
    once = substitute(term, bindings)
    assert str(once) == "f(?y,?z)"
    assert str(substitute(once, bindings)) == "f(a(),?z)"
