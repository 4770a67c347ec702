import io
import unittest
from contextlib import redirect_stdout

from lcbeta.lang.demo import Demo, print_expression, SCENARIOS
from lcbeta.lang.error import ErrorHandler, GenericException
from lcbeta.pure.expression import Call, Function, Variable


class PrintExpressionTestCase(unittest.TestCase):

    def test_print_expression(self):
        cases = {
            "label:\n\tx -- variable\n": (Variable("x"), "label", False),
            "call:\n\t(f x) -- call\n": (Call(Variable("f"), Variable("x")), "", False),
            "function:\n\t(λ x . x) -- function\n\t(x -> x)\n": (Function("x", Variable("x")), "", True),
            "blank:\n\t_ -- blank\n\t_\n": (None, "", True),
        }
        for expected, (expr, title, alternate) in cases.items():
            writer = io.StringIO()
            print_expression(writer, expr, title, alternate)
            self.assertEqual(expected, writer.getvalue())


class DemoTestCase(unittest.TestCase):

    def run_demo(self, keys, **kwargs):
        writer = io.StringIO()
        with redirect_stdout(io.StringIO()):
            Demo(writer, ErrorHandler(fatal=False), **kwargs).run(keys)
        return writer.getvalue()

    def test_scenarios(self):
        cases = {
            "1": ["1B. reduced:\n\t(E b) -- call\n"],
            "2": ["(λ x y . _) -- function", "((_ x) y) -- call", "((((λ x y z . _) a) b) c) -- call"],
            "3": ["3B. reduced:\n\t((f f) (y (f f))) -- call\n"],
            "4": ["4D. True(1, 2):\n\t1 -- variable\n", "4E. False(1, 2):\n\t2 -- variable\n"],
            "5": ["\t((3 2) 1) -- call\n"],
            "6": ["6C. reduce map the map:\n\t(x x) -- call\n"],
            "7": ["7B. not(True):\n\t(λ a b a b . a) -- function\n", "7C. not(False):\n\t(λ a b . a) -- function\n"],
            "8": ["8B. two(g, y):\n\t(g (g y)) -- call\n"],
            "9": ["9B. omega, bounded:\n\t((λ x . (x x)) (λ x . (x x))) -- call\n"],
        }
        for key, expected in cases.items():
            output = self.run_demo([key])
            for line in expected:
                self.assertIn(line, output, key)

    def test_run_all(self):
        output = self.run_demo(None)
        for key, (title, __) in SCENARIOS.items():
            self.assertIn(f"{key}A. ", output, title)

    def test_alternate(self):
        output = self.run_demo(["1"], alternate=True)
        self.assertIn("\t(x -> x(b))(E)\n", output)

    def test_max_steps(self):
        writer = io.StringIO()
        output = io.StringIO()
        with redirect_stdout(output):
            Demo(writer, ErrorHandler(fatal=False), max_steps=1).run(["5"])
        self.assertIn("\t(((λ b c . ((c b) 1)) 2) 3) -- call\n", writer.getvalue())
        self.assertIn("warning: ", output.getvalue())

    def test_shared_handler(self):
        error_handler = ErrorHandler(fatal=False)
        with redirect_stdout(io.StringIO()):
            Demo(io.StringIO(), error_handler).run(None)
            Demo(io.StringIO(), error_handler).run(None)
        self.assertEqual([], error_handler.steps)
        self.assertEqual({}, error_handler.traceback)

    def test_unknown_scenario(self):
        demo = Demo(io.StringIO(), ErrorHandler(fatal=False))
        self.assertRaises(GenericException, demo.run, ["nope"])

    def test_reduce(self):
        error_handler = ErrorHandler(fatal=False)
        demo = Demo(io.StringIO(), error_handler)
        result = demo.reduce(Call(Function("x", Variable("x")), Variable("y")), "identity")
        self.assertEqual("y", str(result))
        self.assertEqual({}, error_handler.traceback)


if __name__ == '__main__':
    unittest.main()
