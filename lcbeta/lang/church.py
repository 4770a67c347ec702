"""Church encodings of booleans and natural numbers, built directly as expression trees. Every builder returns a fresh
tree, so results can be combined and reduced without sharing nodes.

Source: https://en.wikipedia.org/wiki/Church_encoding
"""

from lcbeta.lang.error import GenericException
from lcbeta.pure.expression import Call, Function, Variable


def true():
    """λa.λb.a: selects the first of two arguments."""
    return Function("a", Function("b", Variable("a")))


def false():
    """λa.λb.b: selects the second of two arguments."""
    return Function("a", Function("b", Variable("b")))


def negate():
    """λx.((x FALSE) TRUE)"""
    return Function("x", apply(Variable("x"), false(), true()))


def reorder():
    """λa.λb.λc.((c b) a): takes three arguments and applies the last to the other two in reverse order."""
    return Function("a", Function("b", Function("c", apply(Variable("c"), Variable("b"), Variable("a")))))


def apply_map():
    """λa.(a x)"""
    return Function("a", Call(Variable("a"), Variable("x")))


def apply(function, *arguments):
    """Returns function applied to arguments, associating by left: apply(f, a, b) = ((f a) b)."""
    result = function
    for argument in arguments:
        result = Call(result, argument)
    return result


def cnumber(num):
    """Returns Expression of num in lambda calculus (cnum = Church numeral)."""
    try:
        assert not isinstance(num, (float, bool))
        num = int(num)
        assert num >= 0
    except (AssertionError, TypeError, ValueError):
        raise GenericException("expected natural number, got '{}'", str(num), internal=True)

    body = Variable("x")
    for _ in range(num):
        body = Call(Variable("f"), body)
    return Function("f", Function("x", body))


def number(cnum):
    """Returns str(number) given Expression cnum. If cnum isn't a Church numeral, returns None."""
    if not isinstance(cnum, Function) or not isinstance(cnum.body, Function):
        return None

    first_arg, second_arg, nth_body = cnum.input, cnum.body.input, cnum.body.body
    if first_arg == second_arg:
        return None

    num = 0
    while isinstance(nth_body, Call):
        var, nth_body = nth_body.nodes
        if not isinstance(var, Variable) or var.name != first_arg:
            return None

        num += 1

    return str(num) if isinstance(nth_body, Variable) and nth_body.name == second_arg else None


def boolean(expr):
    """Returns True/False if expr is shaped like a Church boolean (λa.λb.a or λa.λb.b), else None."""
    if not isinstance(expr, Function) or not isinstance(expr.body, Function):
        return None

    first, second, chosen = expr.input, expr.body.input, expr.body.body
    if first == second or not isinstance(chosen, Variable):
        return None
    elif chosen.name == first:
        return True
    elif chosen.name == second:
        return False
    return None
