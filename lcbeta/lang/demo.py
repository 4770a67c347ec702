"""Demonstration scenarios: hand-built terms, printed before and after reduction.

Every scenario is registered in SCENARIOS under a short id and receives the Demo it runs in, which decides where output
goes, which notations are printed and how reductions are limited.
"""

from lcbeta.lang import church
from lcbeta.lang.error import ErrorHandler, GenericException
from lcbeta.pure.expression import Call, Function, Variable
from lcbeta.pure.reduction import NormalOrderReducer


SCENARIOS = {}   # dict of id: (title, scenario function), in registration order
OMEGA_STEPS = 8  # budget for the scenario without a normal form if none is configured


def scenario(key, title):
    """Registers the decorated function as scenario key."""

    def register(func):
        SCENARIOS[key] = (title, func)
        return func

    return register


def print_expression(writer, expr, title="", alternate=False):
    """Writes expr with a label.

    Format:
    <title or type>:
        <λ notation> -- <type>
        <arrow notation>        # <-- only if alternate
    """
    description = expr.type_description() if expr is not None else "blank"
    writer.write(f"{title if title else description}:\n\t")
    if expr is not None:
        expr.dump(writer)
    else:
        writer.write("_")
    writer.write(f" -- {description}\n")

    if alternate:
        writer.write("\t")
        if expr is not None:
            expr.dump_alternate(writer)
        else:
            writer.write("_")
        writer.write("\n")


class Demo:
    """Runs scenarios against one error handler and reduction configuration."""

    def __init__(self, writer, error_handler=None, alternate=False, max_steps=None):
        self.writer = writer
        self.error_handler = error_handler if error_handler is not None else ErrorHandler()
        self.alternate = alternate
        self.max_steps = max_steps

    def show(self, expr, title=""):
        print_expression(self.writer, expr, title, self.alternate)

    def reduce(self, expr, title, max_steps=None):
        """Reduces expr, registering it with the error handler under title while it is being worked on."""
        self.error_handler.register_term(title, expr)
        reducer = NormalOrderReducer(expr, self.error_handler, max_steps if max_steps is not None else self.max_steps)
        result = reducer.beta_reduce()
        self.error_handler.remove_term(title)
        return result

    def run(self, keys=None):
        """Runs the scenarios in keys (all of them if None), in the given order."""
        for key in keys if keys else SCENARIOS:
            if key not in SCENARIOS:
                raise GenericException("unknown scenario '{}'", key, diagnosis=False)

            __, func = SCENARIOS[key]
            func(self)


@scenario("1", "replace x with E")
def identity_like(demo):
    apply_x_to_b = Function("x", Call(Variable("x"), Variable("b")))
    call_apply_e_to_b = Call(apply_x_to_b, Variable("E"))

    demo.show(call_apply_e_to_b, "1A. replace x with E")
    demo.show(demo.reduce(call_apply_e_to_b, "1B. reduced"), "1B. reduced")


@scenario("2", "incomplete terms")
def incomplete(demo):
    demo.show(Function("x", Function("y")), "2A. func of func")
    demo.show(Call(Call(None, Variable("x")), Variable("y")), "2B. call of call")

    triple = Function("x", Function("y", Function("z")))
    double_triple = church.apply(triple, Variable("a"), Variable("b"), Variable("c"))
    demo.show(double_triple, "2C. double triple")


@scenario("3", "argument substituted unreduced")
def unreduced_argument(demo):
    to_reduce = Call(Function("x", Call(Variable("x"), Call(Variable("y"), Variable("x")))),
                     Call(Variable("f"), Variable("f")))

    demo.show(to_reduce, "3A. to reduce")
    demo.show(demo.reduce(to_reduce, "3B. reduced"), "3B. reduced")


@scenario("4", "booleans")
def booleans(demo):
    demo.show(church.true(), "4A. True")
    demo.show(church.false(), "4B. False")

    true_1_2 = church.apply(church.true(), Variable("1"), Variable("2"))
    false_1_2 = church.apply(church.false(), Variable("1"), Variable("2"))
    demo.show(demo.reduce(true_1_2, "4D. True(1, 2)"), "4D. True(1, 2)")
    demo.show(demo.reduce(false_1_2, "4E. False(1, 2)"), "4E. False(1, 2)")


@scenario("5", "reorder")
def reorder(demo):
    applied = church.apply(church.reorder(), Variable("1"), Variable("2"), Variable("3"))

    demo.show(church.reorder(), "5A. reorder")
    demo.show(applied, "5B. reorder(1, 2, 3)")
    demo.show(demo.reduce(applied, "5C. reorder(1, 2, 3) = 3, 2, 1"), "5C. reorder(1, 2, 3) = 3, 2, 1")


@scenario("6", "map the map")
def map_the_map(demo):
    capitalize_b = Call(church.apply_map(), Function("b", Call(Variable("b"), Variable("b"))))

    demo.show(church.apply_map(), "6A. map")
    demo.show(capitalize_b, "6B. map the map")
    demo.show(demo.reduce(capitalize_b, "6C. reduce map the map"), "6C. reduce map the map")


@scenario("7", "not")
def negation(demo):
    """NOT(True) shows variable capture: the b of False's body is rewritten when True is substituted for b."""
    demo.show(church.negate(), "7A. not")
    demo.show(demo.reduce(Call(church.negate(), church.true()), "7B. not(True)"), "7B. not(True)")
    demo.show(demo.reduce(Call(church.negate(), church.false()), "7C. not(False)"), "7C. not(False)")


@scenario("8", "church numerals")
def numerals(demo):
    two = church.cnumber(2)
    applied = church.apply(two, Variable("g"), Variable("y"))

    demo.show(two, "8A. two")
    demo.show(demo.reduce(applied, "8B. two(g, y)"), "8B. two(g, y)")


@scenario("9", "no normal form")
def omega(demo):
    self_apply = Function("x", Call(Variable("x"), Variable("x")))
    looping = Call(self_apply, self_apply.duplicate())

    demo.show(looping, "9A. omega")
    steps = demo.max_steps if demo.max_steps is not None else OMEGA_STEPS
    demo.show(demo.reduce(looping, "9B. omega, bounded", max_steps=steps), "9B. omega, bounded")
