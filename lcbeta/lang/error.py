"""Error handling for lcbeta. Only GenericExceptions should be encountered during running: if another type of error is
raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

ErrorHandler doubles as the console reporter for reduction steps, so that everything printed on behalf of the engine
goes through one place.
"""

import re
import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error/warning message so that it can be used to throw a lcbeta error/warning."""

    def __init__(self, msg, exprs=None, start=0, end=-1, diagnosis=True, internal=False):
        """Parses args for GenericException or warning. exprs[0] should be the offending expr that caused the error;
        start and end delimit the part of it that is highlighted in the diagnosis.
        """
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]

        self.msg = msg.format(*(colored(str(expr), attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = str(exprs[0])
        self.end = end if end != -1 else len(self.expr)  # needed for error display

        self.start = start
        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(msg.format(*exprs))


class MalformedTermError(GenericException):
    """A term with a blank ('_') was used where substitution needs every child to be present. Points the diagnosis at
    the first blank: a "_" standing on its own, not one inside a name such as my_f.
    """
    BLANK = re.compile(r"(?<![^\s(])_(?![^\s)])")

    def __init__(self, msg, expr, **kwargs):
        blank = MalformedTermError.BLANK.search(expr)
        start = blank.start() if blank else 0
        kwargs.setdefault("start", start)
        kwargs.setdefault("end", start + 1)
        super().__init__(msg, expr, **kwargs)


class ErrorHandler:
    """Context manager that will silently suppress Python errors and raise custom lcbeta errors/warnings. Also keeps
    the reduction trace.
    """
    ERROR = "red"
    WARNING = "magenta"
    STEP = "cyan"

    def __init__(self, fatal=True, verbose=False, alternate=False):
        self.fatal = fatal
        self.verbose = verbose      # whether or not to print each reduction step
        self.alternate = alternate  # whether or not traced terms are printed in arrow notation
        self.traceback = {}         # dict of scenario title: rendered term being worked on
        self.steps = []             # list of (kind, rendered term) of the current term, kept only if verbose

    def register_term(self, title, expr):
        """Registers the term currently being worked on. Should be called prior to reducing it."""
        self.traceback[title] = str(expr)
        self.steps = []

    def remove_term(self, title):
        """Removes title from traceback. Should be called after a successful reduction."""
        self.traceback.pop(title, None)

    def register_step(self, kind, expr):
        """Records and prints a reduction step of the given kind ('β' for beta reduction). Does nothing unless verbose,
        so that silent reductions never render intermediate terms.
        """
        if not self.verbose:
            return

        rendered = expr.alternate() if self.alternate else str(expr)
        self.steps.append((kind, rendered))

        prefix = colored(f"  {len(self.steps):>4} {kind} ", ErrorHandler.STEP, attrs=["bold"])
        print(prefix + rendered)

    @staticmethod
    def diagnose(error, warning=False):
        """Returns offending part of error.expr highlighted and bolded."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR

        diagnosis = "  " + error.expr[:error.start]

        end = max(error.end, error.start + 1)
        diagnosis += colored(error.expr[error.start:end], color, attrs=["bold"])
        diagnosis += error.expr[end:] + "\n"

        diagnosis += "  " + " " * error.start
        diagnosis += colored("^" + "~" * (end - error.start - 1), color, attrs=["bold"])

        return diagnosis

    def _location(self):
        """Most recently registered scenario title, or '' if nothing is registered."""
        if not self.traceback:
            return ""
        return colored(f"{next(reversed(self.traceback))}: ", attrs=["bold"])

    def warn(self, *args, **kwargs):
        """Generates and prints runtime warning message based on args."""
        error = GenericException(*args, **kwargs)

        error_msg = self._location()
        error_msg += colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + error.msg
        print(error_msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error, warning=True))

    def throw(self, error):
        """Throws error using error and self.traceback. error must be a GenericException."""
        error_msg = ""
        lines = 0
        for title, expr in self.traceback.items():  # assumes dict is insertion-ordered
            error_msg += f"  In '{title}':\n"
            error_msg += f"    {expr}\n"
            lines += 1

        if lines > 1:
            error_msg = "Traceback:\n" + error_msg

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error))

        if self.fatal:
            sys.exit(1)
        self.traceback = {}  # if error occurred, reset traceback (no need if error is fatal)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("beta normal form might exist, but maximum recursion depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
            do_exit = True

        return not do_exit
