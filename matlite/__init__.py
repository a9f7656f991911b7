"""
matlite - a small MATLAB-like matrix calculator

Front end of the calculator: tokenizes input text and keeps the table of
named matrix variables that statement execution works on.

Architecture:
    matlite/
    ├── lexer/           # Cursor, tokens and tokenization
    ├── matrix/          # Dense matrix value type and arithmetic
    ├── state/           # Variable table
    ├── formatting.py    # Console messages and variable printing
    ├── repl.py          # Input orchestration, REPL loop and file mode
    └── cli.py           # Command line entry point

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .config import CalculatorConfig
from .lexer import Lexer, LexerResult, Token, TokenType
from .matrix import Matrix, MatrixError, ShapeMismatchError
from .state import Variable, VariableTable
from .repl import process_input

__all__ = [
    "CalculatorConfig",
    "Lexer",
    "LexerResult",
    "Token",
    "TokenType",
    "Matrix",
    "MatrixError",
    "ShapeMismatchError",
    "Variable",
    "VariableTable",
    "process_input",

    # Version info
    "__version__",
    "__license__",
]
