"""Reading terms and equations from their textual form.

The input grammar is assumed well-formed; nothing here validates it.
"""

from typing import List, Tuple

from termunify.unification.terms import Function, Term, Variable, is_variable

WHITESPACE = " \t\n"


def extract_args(text: str) -> List[str]:
    """Split the inside of an argument list into its top-level arguments.

    Commas only separate arguments outside nested parentheses, and
    whitespace is dropped::

        >>> extract_args("?x, h(a(), ?y), b()")
        ['?x', 'h(a(),?y)', 'b()']
        >>> extract_args("")
        ['']
    """
    depth = 0
    args: List[str] = []
    buff: List[str] = []
    for ch in text:
        if ch == "(":
            buff.append(ch)
            depth += 1
        elif ch == ")":
            buff.append(ch)
            depth -= 1
        elif ch == ",":
            if depth == 0:
                args.append("".join(buff))
                buff = []
            else:
                buff.append(ch)
        elif ch not in WHITESPACE:
            buff.append(ch)
    args.append("".join(buff))  # last argument
    return args


def find_args(term: str) -> List[str]:
    """Arguments of a functional term, given as text."""
    left = term.find("(")
    return extract_args(term[left + 1:len(term) - 1])


def parse_term(token: str) -> Term:
    """Parse the text of a term into a Variable or Function."""
    token = token.strip()
    if is_variable(token):
        return Variable(token)
    left = token.find("(")
    symbol = token[:left].strip() if left >= 0 else token
    args = find_args(token)
    if args == [""]:
        # constant, e.g. a()
        args = []
    return Function(symbol, tuple(parse_term(arg) for arg in args))


def canonicalize(left, right) -> Tuple:
    """Put a lone variable on the left: ``f(a()) = ?x`` becomes ``?x = f(a())``.

    Works on raw tokens as well as parsed terms.
    """
    if is_variable(right) and not is_variable(left):
        return right, left
    return left, right


def split_equation(expr: str) -> Tuple[str, str]:
    """Split ``left = right`` on the first ``=``, trim both sides and
    canonicalize the pair."""
    left, _, right = expr.partition("=")
    return canonicalize(left.strip(), right.strip())
