"""
Test suite for input orchestration, the REPL loop, file mode and the CLI.
"""

import io
import os
import sys
import tempfile
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from matlite.config import CalculatorConfig
from matlite.lexer import TokenType
from matlite.repl import process_input, run_file, run_repl, READ_ERROR_MESSAGE
from matlite.state import VariableTable
from matlite import cli


def lines_reader(lines):
    it = iter(lines)
    return lambda: next(it, "")


class TestProcessInput(unittest.TestCase):

    def setUp(self):
        self.state = VariableTable()
        self.out = io.StringIO()
        self.config = CalculatorConfig(use_color=False)

    def test_success_prints_nothing(self):
        result = process_input(self.state, "x = 3.5;", self.out, self.config)
        self.assertTrue(result.success)
        self.assertEqual(result.token_types[-1], TokenType.SEMICOL)
        self.assertEqual(self.out.getvalue(), "")
        self.assertEqual(len(self.state), 0)

    def test_error_draws_caret(self):
        result = process_input(self.state, "x = @;", self.out, self.config)
        self.assertFalse(result.success)
        self.assertEqual(
            self.out.getvalue(),
            "Error parsing the input text:\n\n"
            "x = @;\n"
            "    ^\n"
        )

    def test_error_at_start(self):
        process_input(self.state, "#", self.out, self.config)
        self.assertTrue(self.out.getvalue().endswith("#\n^\n"))


class TestRunRepl(unittest.TestCase):

    def test_prompts_until_eof(self):
        out = io.StringIO()
        config = CalculatorConfig(use_color=False)
        status = run_repl(out=out, config=config,
                          read_line=lines_reader(["a = 1;\n", "b = $\n"]))
        self.assertEqual(status, 0)
        text = out.getvalue()
        self.assertEqual(text.count(">>"), 3)
        self.assertIn("b = $\n    ^\n", text)

    def test_custom_prompt(self):
        out = io.StringIO()
        run_repl(out=out, config=CalculatorConfig(prompt="calc> ", use_color=False),
                 read_line=lines_reader([]))
        self.assertTrue(out.getvalue().startswith("calc> "))

    def test_long_lines_are_truncated(self):
        out = io.StringIO()
        config = CalculatorConfig(max_input_length=5, use_color=False)
        # "abcd@" would fail at offset 4; truncated to "abcd" it lexes cleanly.
        run_repl(out=out, config=config, read_line=lines_reader(["abcd@\n"]))
        self.assertNotIn("^", out.getvalue())

    def test_truncation_counts_the_newline(self):
        config = CalculatorConfig(max_input_length=5, use_color=False)
        # Four characters plus newline: the newline is what gets cut.
        out = io.StringIO()
        run_repl(out=out, config=config, read_line=lines_reader(["abc@\n"]))
        self.assertIn("abc@\n   ^", out.getvalue())

        out = io.StringIO()
        run_repl(out=out, config=config, read_line=lines_reader(["abcd\n"]))
        self.assertNotIn("^", out.getvalue())

    def test_keyboard_interrupt_exits(self):
        def interrupted():
            raise KeyboardInterrupt

        self.assertEqual(run_repl(out=io.StringIO(), read_line=interrupted), 0)


class TestRunFile(unittest.TestCase):

    def _write(self, text):
        handle = tempfile.NamedTemporaryFile("w", suffix=".ml", delete=False, encoding="utf-8")
        with handle:
            handle.write(text)
        self.addCleanup(os.unlink, handle.name)
        return handle.name

    def test_valid_file(self):
        path = self._write("\\\\ script\nx = [1, 2; 3, 4];\ny = x * 2;\n")
        out = io.StringIO()
        self.assertEqual(run_file(path, out=out), 0)
        self.assertEqual(out.getvalue(), "")

    def test_invalid_file(self):
        path = self._write("x = 1;\ny = ?;\n")
        out = io.StringIO()
        self.assertEqual(run_file(path, out=out, config=CalculatorConfig(use_color=False)), 1)
        self.assertIn("Error parsing the input text:", out.getvalue())

    def test_missing_file(self):
        out = io.StringIO()
        status = run_file(os.path.join(tempfile.gettempdir(), "no_such_matlite_file.ml"), out=out)
        self.assertEqual(status, 1)
        self.assertEqual(out.getvalue(), READ_ERROR_MESSAGE + "\n")


class TestConfig(unittest.TestCase):

    def test_defaults(self):
        config = CalculatorConfig()
        self.assertEqual(config.prompt, ">>")
        self.assertEqual(config.max_input_length, 500)
        self.assertEqual(config.comment_marker, "\\\\")
        self.assertEqual(config.max_variables, 255)

    def test_from_env(self):
        config = CalculatorConfig.from_env({
            "MATLITE_PROMPT": "$ ",
            "MATLITE_USE_COLOR": "no",
            "MATLITE_MAX_VARIABLES": "10",
        })
        self.assertEqual(config.prompt, "$ ")
        self.assertFalse(config.use_color)
        self.assertEqual(config.max_variables, 10)

    def test_from_env_rejects_bad_values(self):
        with self.assertRaises(ValueError):
            CalculatorConfig.from_env({"MATLITE_MAX_VARIABLES": "many"})
        with self.assertRaises(ValueError):
            CalculatorConfig.from_env({"MATLITE_COMMENT_MARKER": "#"})

    def test_with_overrides_skips_none(self):
        config = CalculatorConfig().with_overrides(prompt=None, use_color=False)
        self.assertEqual(config.prompt, ">>")
        self.assertFalse(config.use_color)


class TestCli(unittest.TestCase):

    def test_file_mode_exit_status(self):
        missing = os.path.join(tempfile.gettempdir(), "no_such_matlite_file.ml")
        self.assertEqual(cli.main([missing, "--no-color"]), 1)

    def test_parser_options(self):
        args = cli.build_parser().parse_args(["-v", "--prompt", "> ", "f.ml"])
        self.assertTrue(args.verbose)
        self.assertEqual(args.prompt, "> ")
        self.assertEqual(args.path, "f.ml")


if __name__ == '__main__':
    unittest.main()
