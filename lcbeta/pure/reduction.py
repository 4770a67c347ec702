"""Normal-order beta reduction of expression trees.

A Call is reduced by first reducing its target; if that gives a Function, the argument is substituted (unreduced) into
the Function's body and the result is reduced in turn. Nothing else is looked at: function bodies and call arguments
are left as they are, so the result is a normal form only in the sense that its outermost redexes are gone.

There is no loop detection. A term like (λx.(x x)) (λx.(x x)) reduces to itself forever unless a step limit is given.
"""

from lcbeta.lang.error import ErrorHandler
from lcbeta.pure.expression import Call, Function


class NormalOrderReducer:
    """Implements normal-order beta reduction of a syntax tree. The tree passed in is never modified: every step builds
    a new one, so self.tree is always a complete, valid term even if reduction is cut short.
    """

    def __init__(self, tree, error_handler=None, max_steps=None):
        """max_steps=None means reduce until there is nothing left to reduce, however long that takes."""
        if max_steps is not None and max_steps < 0:
            raise ValueError("max_steps cannot be negative")

        self.original = tree
        self.tree = tree
        self.error_handler = error_handler if error_handler is not None else ErrorHandler(verbose=False)
        self.max_steps = max_steps

        self.steps = 0
        self.reduced = False

    @property
    def exhausted(self):
        """Whether or not the step budget has been used up."""
        return self.max_steps is not None and self.steps >= self.max_steps

    def beta_reduce(self):
        """Reduces self.tree and returns the result. Warns through the error handler if the step budget runs out."""
        self.tree = self._reduce(self.tree.duplicate())
        self.reduced = not self.exhausted or not self._has_outer_redex(self.tree)

        if not self.reduced:
            self.error_handler.warn("'{}' did not reach a normal form within {} steps", (self.original, self.max_steps),
                                    diagnosis=False)
        return self.tree

    def _reduce(self, expr):
        while isinstance(expr, Call) and not expr.has_blanks():
            target = self._reduce(expr.target)
            if not isinstance(target, Function) or self.exhausted:
                return expr if target is expr.target else Call(target, expr.argument)

            expr = Call(target, expr.argument).reduce_step()
            self.steps += 1
            self.error_handler.register_step("β", expr)
        return expr

    @staticmethod
    def _has_outer_redex(expr):
        """Whether there is a redex left on expr's chain of call targets."""
        while isinstance(expr, Call) and not expr.has_blanks():
            if expr.is_redex:
                return True
            expr = expr.target
        return False

    def __repr__(self):
        return f"NormalOrderReducer({self.tree!r})"

    def __str__(self):
        return str(self.tree)


def beta_reduce(expr, error_handler=None, max_steps=None):
    """Shorthand for NormalOrderReducer(expr, error_handler, max_steps).beta_reduce()."""
    return NormalOrderReducer(expr, error_handler, max_steps).beta_reduce()
