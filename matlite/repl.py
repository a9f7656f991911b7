"""
Input orchestration for the calculator.

``process_input`` is the single entry point for a REPL line or a whole
source file: it lexes the text and reports lexing errors with a caret under
the offending column. Parsing and execution are not implemented yet, so a
successful scan ends there.
"""

import logging
import sys
from typing import Callable, Optional, TextIO

from .config import CalculatorConfig
from .formatting import MessageLevel, print_message, format_error_caret
from .lexer import Lexer, LexerResult
from .state import VariableTable

logger = logging.getLogger(__name__)

READ_ERROR_MESSAGE = "Can't read input file."


def process_input(state: VariableTable, text: str, out: Optional[TextIO] = None,
                  config: Optional[CalculatorConfig] = None,
                  filename: str = "<input>") -> LexerResult:
    """
    Lex ``text`` and print a diagnostic if it fails.

    Returns:
        The LexerResult, so callers (and the future parser) can use the tokens.
    """
    out = out or sys.stdout
    config = config or CalculatorConfig()

    result = Lexer(text, filename, config).tokenize()

    if not result.success:
        print_message(MessageLevel.ERROR, "Error parsing the input text:\n", out, config.use_color)
        out.write(format_error_caret(text, result.error_location))
        return result

    # Parsing and statement execution against ``state`` go here.
    logger.debug("%d tokens ready, %d variables bound", len(result.tokens), len(state))
    return result


def run_file(path: str, state: Optional[VariableTable] = None, out: Optional[TextIO] = None,
             config: Optional[CalculatorConfig] = None) -> int:
    """Process a whole file as one input. Returns a process exit status."""
    out = out or sys.stdout
    config = config or CalculatorConfig()
    state = state if state is not None else VariableTable(config.max_variables)

    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("failed to read %s: %s", path, e)
        out.write(READ_ERROR_MESSAGE + "\n")
        return 1

    result = process_input(state, text, out, config, filename=path)
    return 0 if result.success else 1


def run_repl(state: Optional[VariableTable] = None, out: Optional[TextIO] = None,
             config: Optional[CalculatorConfig] = None,
             read_line: Optional[Callable[[], str]] = None) -> int:
    """
    Prompt, read one line, process it, repeat until end of input.

    ``read_line`` follows ``readline`` semantics: an empty string means EOF.
    """
    out = out or sys.stdout
    config = config or CalculatorConfig()
    state = state if state is not None else VariableTable(config.max_variables)
    read_line = read_line or sys.stdin.readline
    limit = config.max_input_length - 1

    while True:
        out.write(config.prompt)
        out.flush()

        try:
            line = read_line()
        except KeyboardInterrupt:
            out.write("\n")
            break

        if not line:
            out.write("\n")
            break

        if len(line) > limit:
            logger.debug("input truncated from %d to %d characters", len(line), limit)
            line = line[:limit]
        line = line.rstrip("\r\n")

        process_input(state, line, out, config)

    return 0
