"""Pure lambda calculus expression trees.

The `pure` directory contains the lambda calculus data model and its reduction- nothing in here knows about the demo
driver or the console.

Formally, the terms built here can be defined as

```
<λ-term> ::= <name>                     ; "variable"
           | "λ" <name> "." <λ-term>    ; "function"
                                        ; - the body may be left blank (rendered as "_")
           | <λ-term> <λ-term>          ; "call"
                                        ; - either side may be left blank (rendered as "_")
```

There is no parser: trees are built directly from Variable, Function and Call objects. Blank children make a term
incomplete, which is fine for rendering but not for substitution.

Names are compared by plain string equality and there is no alpha conversion, so substitution can capture free
variables of the replacement (see Function.replace).
"""

from abc import abstractmethod, ABC
from io import StringIO

from lcbeta.lang.error import MalformedTermError


BLANK = "_"


def _dump(node, writer, alternate=False):
    """Writes node in either notation, or BLANK if node is missing."""
    if node is None:
        writer.write(BLANK)
    elif alternate:
        node.dump_alternate(writer)
    else:
        node.dump(writer)


def _duplicate(node):
    return None if node is None else node.duplicate()


class Expression(ABC):
    """Superclass for the three λ-term shapes. Subclasses are closed: Variable, Function and Call."""

    @property
    @abstractmethod
    def nodes(self):
        """Immediate children of this node, in rendering order. Missing children are None."""

    @abstractmethod
    def has_blanks(self):
        """Whether a required immediate child is missing. Does not look any deeper than one level."""

    @abstractmethod
    def dump(self, writer):
        """Writes the λ notation of this term to writer."""

    @abstractmethod
    def dump_alternate(self, writer):
        """Writes the arrow notation of this term to writer."""

    @abstractmethod
    def type_description(self):
        """One of 'variable', 'function', 'call'."""

    @abstractmethod
    def replace(self, name, replacement):
        """Returns a new tree where every Variable called name is a copy of replacement. Never mutates self."""

    @abstractmethod
    def duplicate(self):
        """Returns a structurally identical tree that shares nothing with self."""

    def alternate(self):
        """dump_alternate as a string."""
        writer = StringIO()
        self.dump_alternate(writer)
        return writer.getvalue()

    def display(self, indents=0):
        """Recursively displays the tree with readable format.

        Format:
        <type>('<label>', nodes=[
            <type>('<label>', nodes=[
                ...
                <type>('<label>')  # <-- if node has no children
            ])
        ])
        """
        label = self._label()
        result = f"{'    ' * indents}{self.type_description()}(" + (repr(label) if label else "")
        if self.nodes:
            result += ", nodes=[" if label else "nodes=["
            for node in self.nodes:
                if node is None:
                    result += f"\n{'    ' * (indents + 1)}{BLANK},"
                else:
                    result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"

    def _label(self):
        return ""

    def __str__(self):
        writer = StringIO()
        self.dump(writer)
        return writer.getvalue()

    def __eq__(self, other):
        return isinstance(other, type(self)) and self._label() == other._label() and self.nodes == other.nodes


class Variable(Expression):
    """Variable: a reference to a bound or free name."""

    def __init__(self, name):
        self.name = name

    @property
    def nodes(self):
        return []

    def has_blanks(self):
        return False

    def dump(self, writer):
        writer.write(self.name)

    def dump_alternate(self, writer):
        writer.write(self.name)

    def type_description(self):
        return "variable"

    def duplicate(self):
        return Variable(self.name)

    def replace(self, name, replacement):
        if self.name == name:
            return replacement.duplicate()
        return self.duplicate()

    def _label(self):
        return self.name

    def __repr__(self):
        return f"Variable({self.name!r})"


class Function(Expression):
    """Function: a one-argument abstraction λinput.body. body may be None while the term is being built."""
    SHORTHAND = True  # render λa.λb.M as (λ a b . M)

    def __init__(self, input, body=None):
        self.input = input
        self.body = body

    @property
    def nodes(self):
        return [self.body]

    def has_blanks(self):
        return self.body is None

    def dump(self, writer):
        writer.write("(λ")
        self._dump_params(writer)
        writer.write(")")

    def _dump_params(self, writer):
        writer.write(f" {self.input}")
        if Function.SHORTHAND and isinstance(self.body, Function):
            self.body._dump_params(writer)
        else:
            writer.write(" . ")
            _dump(self.body, writer)

    def dump_alternate(self, writer):
        writer.write(f"({self.input} -> ")
        _dump(self.body, writer, alternate=True)
        writer.write(")")

    def type_description(self):
        return "function"

    def duplicate(self):
        return Function(self.input, _duplicate(self.body))

    def replace(self, name, replacement):
        """Substitution does not stop at a Function that rebinds name: the body is always rewritten, so
        (λx.x).replace('x', y) gives (λx.y). Likewise free variables of replacement are not renamed and may be
        captured by this Function's input.
        """
        if self.body is None:
            raise MalformedTermError("cannot substitute into '{}': function body is blank", str(self))
        return Function(self.input, self.body.replace(name, replacement))

    def _label(self):
        return self.input

    def __repr__(self):
        return f"Function({self.input!r}, {self.body!r})"


class Call(Expression):
    """Call: application of target to argument. Either side may be None while the term is being built."""

    def __init__(self, target=None, argument=None):
        self.target = target
        self.argument = argument

    @property
    def nodes(self):
        return [self.target, self.argument]

    def has_blanks(self):
        return self.target is None or self.argument is None

    def dump(self, writer):
        writer.write("(")
        _dump(self.target, writer)
        writer.write(" ")
        _dump(self.argument, writer)
        writer.write(")")

    def dump_alternate(self, writer):
        _dump(self.target, writer, alternate=True)
        writer.write("(")
        _dump(self.argument, writer, alternate=True)
        writer.write(")")

    def type_description(self):
        return "call"

    def duplicate(self):
        return Call(_duplicate(self.target), _duplicate(self.argument))

    def replace(self, name, replacement):
        if self.has_blanks():
            raise MalformedTermError("cannot substitute into '{}': call has a blank side", str(self))
        return Call(self.target.replace(name, replacement), self.argument.replace(name, replacement))

    @property
    def is_redex(self):
        """Whether this Call can be beta reduced as it stands: complete, with a Function target."""
        return not self.has_blanks() and isinstance(self.target, Function)

    def reduce_step(self):
        """One beta reduction: (λx.M) N becomes M with every x replaced by N. N is substituted as it is, unreduced.
        If this Call is not a redex, a copy of it is returned instead, so reducing a normal form is a no-op.
        """
        if not self.is_redex:
            return self.duplicate()

        function = self.target
        if function.body is None:
            raise MalformedTermError("cannot apply '{}': function body is blank", str(self))
        return function.body.replace(function.input, self.argument)

    def __repr__(self):
        return f"Call({self.target!r}, {self.argument!r})"
