import io
import unittest
from contextlib import redirect_stdout

from skilc.lang.error import (ErrorHandler, FreeVariableError, GenericException, ParseError,
                              UntranslatedAbstractionError)


class GenericExceptionTestCase(unittest.TestCase):

    def test_init(self):
        error = GenericException("'{}' could not be opened", "missing.lc", diagnosis=False)
        self.assertEqual("missing.lc", error.expr)
        self.assertEqual(0, error.start)
        self.assertEqual(len("missing.lc"), error.end)
        self.assertEqual("'missing.lc' could not be opened", str(error))
        self.assertIn("missing.lc", error.msg)

    def test_subclasses(self):
        error = ParseError("RParen", "EOF", "(x", 2)
        self.assertEqual(("RParen", "EOF", 2), (error.expected, error.found, error.position))
        self.assertEqual("expected RParen, got EOF in '(x'", str(error))
        self.assertFalse(error.internal)

        error = FreeVariableError("x")
        self.assertEqual("x", error.name)
        self.assertFalse(error.internal)

        self.assertTrue(UntranslatedAbstractionError().internal)


class ErrorHandlerTestCase(unittest.TestCase):

    def run_handler(self, error, fatal=False):
        out = io.StringIO()
        with redirect_stdout(out):
            with ErrorHandler(fatal=fatal):
                raise error
        return out.getvalue()

    def test_throw(self):
        output = self.run_handler(ParseError("RParen", "EOF", "(x", 2))
        self.assertIn("error: ", output)
        self.assertIn("expected RParen, got EOF", output)
        self.assertIn("^", output)

    def test_fatal(self):
        with self.assertRaises(SystemExit) as context:
            self.run_handler(FreeVariableError("x"), fatal=True)
        self.assertEqual(1, context.exception.code)

    def test_recursion(self):
        self.assertIn("maximum recursion depth exceeded", self.run_handler(RecursionError()))

    def test_internal(self):
        with redirect_stdout(io.StringIO()) as out:
            self.assertRaises(ValueError, self.run_handler, ValueError("oops"))
            self.assertRaises(UntranslatedAbstractionError, self.run_handler, UntranslatedAbstractionError())
        self.assertEqual("", out.getvalue())

    def test_traceback(self):
        out = io.StringIO()
        handler = ErrorHandler(fatal=False)
        handler.register_file("a.lc")
        handler.register_line("a.lc", "λx", 3)
        with redirect_stdout(out):
            handler.throw(ParseError("expression", "EOF", "λx", 2))
        self.assertIn("File 'a.lc', line 3:", out.getvalue())
        self.assertEqual({"a.lc": (None, None)}, handler.traceback)

    def test_warn(self):
        out = io.StringIO()
        handler = ErrorHandler(fatal=False)
        handler.register_line("<in>", "beta", 4)
        with redirect_stdout(out):
            handler.warn("'{}' has no beta normal form", "x", diagnosis=False)
        self.assertIn("<in>:4: ", out.getvalue())
        self.assertIn("warning: ", out.getvalue())

    def test_diagnose(self):
        error = ParseError("EOF", "RParen", "x) y", 1)
        lines = ErrorHandler.diagnose(error).splitlines()
        self.assertEqual(2, len(lines))
        self.assertIn("^", lines[1])


if __name__ == '__main__':
    unittest.main()
