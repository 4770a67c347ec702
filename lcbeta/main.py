"""Runs the lcbeta demonstration scenarios under the error handling context manager. Called from the lcbeta
executable script.
"""

import argparse
import sys

from lcbeta.lang.demo import Demo, SCENARIOS
from lcbeta.lang.error import ErrorHandler, GenericException
from lcbeta.pure.expression import Function


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Untyped lambda calculus beta reduction demo.")
    parser.add_argument("scenario", help="scenarios to run (if empty, runs all of them)", nargs="*")
    parser.add_argument("--alternate", action="store_true", help="also print terms in arrow notation")
    parser.add_argument("--trace", action="store_true", help="print every reduction step")
    parser.add_argument("--max-steps", type=int, default=None, help="step budget for every reduction")
    parser.add_argument("--no-shorthand", action="store_true", help="fully parenthesize nested functions")
    parser.add_argument("--list", action="store_true", help="list scenarios and exit")
    return parser.parse_args(argv)


def main(argv=None):
    """Runs lcbeta demo. Called from lcbeta executable script."""
    args = parse_args(argv)

    if args.list:
        for key, (title, __) in SCENARIOS.items():
            print(f"{key}: {title}")
        return

    shorthand = Function.SHORTHAND
    Function.SHORTHAND = not args.no_shorthand

    try:
        with ErrorHandler(verbose=args.trace, alternate=args.alternate) as error_handler:
            if args.max_steps is not None and args.max_steps < 0:
                msg = "--max-steps expects a natural number, got '{}'"
                raise GenericException(msg, str(args.max_steps), diagnosis=False)

            Demo(sys.stdout, error_handler, alternate=args.alternate, max_steps=args.max_steps).run(args.scenario)
    finally:
        Function.SHORTHAND = shorthand


if __name__ == "__main__":
    main()
