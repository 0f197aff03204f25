import unittest

from skilc.lang.error import ParseError
from skilc.pure.lexical import Abstraction, Application, Lexer, Variable, parse


class LexerTestCase(unittest.TestCase):

    def test_tokens(self):
        lexer = Lexer("  (λx\\y  foo)")
        expected = [(Lexer.LPAREN, None), (Lexer.LAMBDA, None), (Lexer.IDENT, "x"), (Lexer.LAMBDA, None),
                    (Lexer.IDENT, "y"), (Lexer.IDENT, "foo"), (Lexer.RPAREN, None)]
        for kind, text in expected:
            self.assertEqual(kind, lexer.peek())
            self.assertEqual(text, lexer.consume())

        self.assertEqual(Lexer.EOF, lexer.peek())
        self.assertIsNone(lexer.consume())

    def test_identifiers(self):
        cases = {"x": "x", "x'": "x'", "foo_bar1": "foo_bar1", "%": "%", "a.b": "a.b", "y)": "y", "zλ": "z"}
        for case, expected in cases.items():
            self.assertEqual(expected, Lexer(case).consume(), case)


class ParseTestCase(unittest.TestCase):

    def test_parse(self):
        x, y, z = Variable("x"), Variable("y"), Variable("z")
        cases = {
            "x": x,
            "(x)": x,
            "  ((x))  ": x,
            "\\x x": Abstraction("x", x),
            "λx x": Abstraction("x", x),
            "x y": Application(x, y),
            "x y z": Application(Application(x, y), z),
            "x (y z)": Application(x, Application(y, z)),
            "(λx x) y": Application(Abstraction("x", x), y),
            "λx x y": Abstraction("x", Application(x, y)),
            "x λy y z": Application(x, Abstraction("y", Application(y, z))),
            "λx λy x": Abstraction("x", Abstraction("y", x)),
            "λx(x)": Abstraction("x", x),
        }
        for case, expected in cases.items():
            self.assertEqual(expected, parse(case), case)

    def test_church_add(self):
        m, n, f, x = Variable("m"), Variable("n"), Variable("f"), Variable("x")
        body = Application(Application(m, f), Application(Application(n, f), x))
        expected = Abstraction("m", Abstraction("n", Abstraction("f", Abstraction("x", body))))
        self.assertEqual(expected, parse("\\m \\n \\f \\x m f (n f x)"))

    def test_parse_errors(self):
        cases = {
            "": ("expression", Lexer.EOF),
            "   ": ("expression", Lexer.EOF),
            "(x": (Lexer.RPAREN, Lexer.EOF),
            "x)": (Lexer.EOF, Lexer.RPAREN),
            "()": ("expression", Lexer.RPAREN),
            "λ": ("Ident after Lambda", Lexer.EOF),
            "λ(x) x": ("Ident after Lambda", Lexer.LPAREN),
            "λx": ("expression", Lexer.EOF),
            "x (y": (Lexer.RPAREN, Lexer.EOF),
        }
        for case, (expected, found) in cases.items():
            with self.assertRaises(ParseError, msg=case) as context:
                parse(case)
            self.assertEqual(expected, context.exception.expected, case)
            self.assertEqual(found, context.exception.found, case)

    def test_error_position(self):
        with self.assertRaises(ParseError) as context:
            parse("(λx x) y)")
        self.assertEqual(8, context.exception.position)


class RenderTestCase(unittest.TestCase):

    def test_render(self):
        cases = {
            "x": "x",
            "\\x x": "λx x",
            "(x)": "x",
            "x y": "x y",
            "(w x) (y z)": "w x (y z)",
            "\\m \\n \\f \\x m f (n f x)": "λm λn λf λx m f (n f x)",
            "(λx x) y": "(λx x) y",
            "f (λx x) y": "f (λx x) y",
            "f λx x y": "f λx x y",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, str(parse(case)), case)

    def test_round_trip(self):
        cases = ["x", "λx x", "x y z", "x (y z)", "(λx x) (λy y)", "λf λx f (f x)", "(λx x x) (λx x x)",
                 "f (λx x) (g λy y)", "((λx λy y) a) b"]
        for case in cases:
            rendered = str(parse(case))
            self.assertEqual(parse(case), parse(rendered), case)
            self.assertEqual(rendered, str(parse(rendered)), case)


class LambdaTermTestCase(unittest.TestCase):

    def test_free_variables(self):
        cases = {
            "x": {"x"},
            "λx x": set(),
            "λx y": {"y"},
            "x λx x": {"x"},
            "λx λy z (x y) w": {"z", "w"},
        }
        for case, expected in cases.items():
            self.assertEqual(expected, parse(case).free_variables(), case)
            for name in expected | {"x", "y"}:
                self.assertEqual(name in expected, parse(case).contains(name), (case, name))

    def test_alpha_equals(self):
        should_fail = [("x", "y"), ("λx x", "λx y"), ("λx λy x", "λx λy y"), ("λx y", "λy y"), ("x y", "λx y")]
        for case, other in should_fail:
            self.assertFalse(parse(case).alpha_equals(parse(other)), (case, other))

        should_pass = [("x", "x"), ("λx x", "λy y"), ("λx λy x y", "λa λb a b"), ("λy' y", "λz y"),
                       ("λx λx x", "λa λb b"), ("(λx x) z", "(λq q) z")]
        for case, other in should_pass:
            self.assertTrue(parse(case).alpha_equals(parse(other)), (case, other))


if __name__ == '__main__':
    unittest.main()
