import unittest

from lcbeta.lang.church import apply, boolean, cnumber, false, negate, number, reorder, true
from lcbeta.lang.error import GenericException
from lcbeta.pure.expression import Call, Function, Variable


class ChurchTestCase(unittest.TestCase):

    def test_builders(self):
        cases = {
            "(λ a b . a)": true(),
            "(λ a b . b)": false(),
            "(λ x . ((x (λ a b . b)) (λ a b . a)))": negate(),
            "(λ a b c . ((c b) a))": reorder(),
        }
        for expected, case in cases.items():
            self.assertEqual(expected, str(case))

        self.assertIsNot(true(), true())
        self.assertEqual(true(), true())

    def test_apply(self):
        f = Variable("f")
        self.assertIs(f, apply(f))
        self.assertEqual("((f a) b)", str(apply(f, Variable("a"), Variable("b"))))

    def test_cnumber(self):
        should_fail = [-2, 0.3, 4.0, 14.2, "x", None, True]
        for case in should_fail:
            self.assertRaises(GenericException, cnumber, case)

        should_pass = {0: "(λ f x . x)", 3: "(λ f x . (f (f (f x))))", "2": "(λ f x . (f (f x)))"}
        for case, result in should_pass.items():
            self.assertEqual(result, str(cnumber(case)))

    def test_number(self):
        should_fail = [
            Function("f", Function("x", Call(Variable("f"), Variable("f")))),
            Function("f", Function("x", Call(Call(Variable("x"), Variable("f")), Variable("x")))),
            Function("f", Function("f", Variable("f"))),
            Function("f", Function("x")),
            Function("f", Variable("x")),
            Variable("x"),
            Call(Variable("f"), Variable("x")),
            None,
        ]
        for case in should_fail:
            self.assertIsNone(number(case), case)

        should_pass = {"3": cnumber(3), "0": cnumber(0), "1": Function("g", Function("y", Call(Variable("g"),
                                                                                                  Variable("y"))))}
        for result, case in should_pass.items():
            self.assertEqual(result, number(case), case)

    def test_boolean(self):
        cases = [(True, true()), (False, false())]
        for result, case in cases:
            self.assertIs(result, boolean(case))

        should_fail = [negate(), Function("a", Function("a", Variable("a"))), Function("a", Function("b")),
                       Function("a", Function("b", Variable("c"))), Variable("a")]
        for case in should_fail:
            self.assertIsNone(boolean(case), case)


if __name__ == '__main__':
    unittest.main()
