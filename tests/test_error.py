import io
import unittest
from contextlib import redirect_stdout

from minilisp.lang.error import ErrorHandler, LispError


class LispErrorTestCase(unittest.TestCase):

    def test_reason(self):
        error = LispError("unbound symbol: x", "x")
        self.assertEqual("unbound symbol: x", error.reason)
        self.assertEqual("unbound symbol: x", str(error))
        self.assertEqual("x", error.expr)
        self.assertEqual("", LispError("empty input").expr)

    def test_equality(self):
        self.assertEqual(LispError("empty list"), LispError("empty list", "()"))
        self.assertNotEqual(LispError("empty list"), LispError("not a function"))


class ErrorHandlerTestCase(unittest.TestCase):

    def test_non_fatal(self):
        handler = ErrorHandler(fatal=False)
        handler.register_line("<in>", "(+ 1 x)", 3)

        out = io.StringIO()
        with redirect_stdout(out):
            with handler:
                raise LispError("unbound symbol: x", "x")

        output = out.getvalue()
        self.assertIn("File '<in>', line 3:", output)
        self.assertIn("(+ 1 x)", output)
        self.assertIn("unbound symbol: x", output)
        self.assertIn("^", output)
        self.assertEqual({"<in>": (None, None)}, handler.traceback)

    def test_fatal(self):
        handler = ErrorHandler()
        out = io.StringIO()
        with redirect_stdout(out):
            with self.assertRaises(SystemExit) as cm:
                with handler:
                    raise LispError("empty input")
        self.assertEqual(1, cm.exception.code)
        self.assertIn("error: ", out.getvalue())
        self.assertIn("empty input", out.getvalue())

    def test_recursion_error(self):
        out = io.StringIO()
        with redirect_stdout(out):
            with ErrorHandler(fatal=False):
                raise RecursionError()
        self.assertIn("maximum recursion depth exceeded", out.getvalue())

    def test_internal_error(self):
        out = io.StringIO()
        with redirect_stdout(out):
            with self.assertRaises(ValueError):
                with ErrorHandler(fatal=False):
                    raise ValueError("bad")
        self.assertIn("[internal] ", out.getvalue())
        self.assertIn("unknown error: 'ValueError: bad'", out.getvalue())

    def test_diagnose(self):
        diagnosis = ErrorHandler.diagnose(LispError("unbound symbol: foo", "foo"), "(+ 1 foo)")
        self.assertIn("foo", diagnosis)
        self.assertIn("^~~", diagnosis)
        self.assertIn("      ", diagnosis.splitlines()[1])  # caret sits under the offending token
        self.assertIsNone(ErrorHandler.diagnose(LispError("unbound symbol: bar", "bar"), "(+ 1 foo)"))

    def test_no_error(self):
        out = io.StringIO()
        with redirect_stdout(out):
            with ErrorHandler() as handler:
                handler.register_file("a.lisp")
        self.assertEqual("", out.getvalue())


if __name__ == '__main__':
    unittest.main()
