"""
Tests for the joxy command-line driver.

Author: xwest
"""

import contextlib
import io
import unittest
import unittest.mock
import sys
import os
import tempfile

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from joxy.cli import (
    main, run, run_file, run_prompt,
    EX_OK, EX_USAGE, EX_DATAERR, EX_NOINPUT,
)


class TestRunFile(unittest.TestCase):
    """Scanning scripts from disk."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.out = io.StringIO()
        self.err = io.StringIO()

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write(self, source, name="script.jx"):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(source)
        return path

    def test_clean_script(self):
        path = self._write('var a = "hi";\n')
        status = run_file(path, encoding="utf-8", out=self.out, err=self.err)

        self.assertEqual(status, EX_OK)
        self.assertEqual(
            self.out.getvalue().splitlines(),
            ["VAR('var')", "IDENTIFIER('a')", "EQUAL('=')",
             "STRING('\"hi\"' -> 'hi')", "SEMICOLON(';')", "EOF('')"]
        )
        self.assertEqual(self.err.getvalue(), "")

    def test_lexical_error_exit_code(self):
        path = self._write("x\n@ y")
        status = run_file(path, encoding="utf-8", out=self.out, err=self.err)

        self.assertEqual(status, EX_DATAERR)
        self.assertEqual(self.err.getvalue(), "[line 2] Error: Unexpected character.\n")
        # Tokens are still printed alongside the errors
        self.assertIn("IDENTIFIER('y')", self.out.getvalue())

    def test_every_error_is_reported(self):
        path = self._write('@ # "open')
        run_file(path, encoding="utf-8", out=self.out, err=self.err)
        self.assertEqual(len(self.err.getvalue().splitlines()), 3)

    def test_undecodable_bytes_are_reported(self):
        path = os.path.join(self.tmpdir.name, "binary.jx")
        with open(path, "wb") as f:
            f.write(b"var x = \xff;\n")

        status = run_file(path, encoding="utf-8", out=self.out, err=self.err)

        self.assertEqual(status, EX_DATAERR)
        self.assertEqual(self.err.getvalue(), "[line 1] Error: Unexpected character.\n")
        self.assertIn("SEMICOLON(';')", self.out.getvalue())

    def test_missing_file(self):
        path = os.path.join(self.tmpdir.name, "missing.jx")
        status = run_file(path, out=self.out, err=self.err)

        self.assertEqual(status, EX_NOINPUT)
        self.assertIn("cannot read", self.err.getvalue())
        self.assertEqual(self.out.getvalue(), "")

    def test_main_with_script(self):
        path = self._write("print 1;")
        with contextlib.redirect_stdout(self.out), contextlib.redirect_stderr(self.err):
            status = main([path, "--encoding", "utf-8"])

        self.assertEqual(status, EX_OK)
        self.assertIn("PRINT('print')", self.out.getvalue())

    def test_main_with_bad_script(self):
        path = self._write("/* never closed")
        with contextlib.redirect_stdout(self.out), contextlib.redirect_stderr(self.err):
            status = main([path])

        self.assertEqual(status, EX_DATAERR)
        self.assertIn("Unterminated block comment.", self.err.getvalue())


class TestUsage(unittest.TestCase):

    def test_too_many_arguments(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            status = main(["a.jx", "b.jx"])

        self.assertEqual(status, EX_USAGE)
        self.assertEqual(out.getvalue(), "Usage: joxy [script]\n")

    def test_unknown_option(self):
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            with self.assertRaises(SystemExit) as ctx:
                main(["--bogus"])

        self.assertEqual(ctx.exception.code, EX_USAGE)
        self.assertIn("Usage: joxy [script]", err.getvalue())


class TestPrompt(unittest.TestCase):

    def test_each_line_is_scanned_independently(self):
        stdin = io.StringIO('var x;\n@\n"open\nx\n')
        out = io.StringIO()
        err = io.StringIO()

        status = run_prompt(stdin=stdin, out=out, err=err)

        self.assertEqual(status, EX_OK)
        # Each line restarts at line 1
        self.assertEqual(
            err.getvalue().splitlines(),
            ["[line 1] Error: Unexpected character.",
             "[line 1] Error: Unterminated string."]
        )
        self.assertEqual(out.getvalue().count("> "), 5)
        self.assertEqual(out.getvalue().count("EOF('')"), 4)

    def test_empty_input(self):
        out = io.StringIO()
        self.assertEqual(run_prompt(stdin=io.StringIO(""), out=out), EX_OK)
        self.assertEqual(out.getvalue(), "> ")

    def test_main_without_script_runs_prompt(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            with unittest.mock.patch("sys.stdin", io.StringIO("1 + 2\n")):
                status = main([])

        self.assertEqual(status, EX_OK)
        self.assertIn("PLUS('+')", out.getvalue())


class TestRun(unittest.TestCase):

    def test_run_returns_result(self):
        out = io.StringIO()
        err = io.StringIO()
        result = run("a <= b", out, err)

        self.assertFalse(result.has_errors())
        self.assertEqual(len(result.tokens), 4)
        self.assertEqual(len(out.getvalue().splitlines()), 4)


if __name__ == '__main__':
    unittest.main()
