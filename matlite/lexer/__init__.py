"""
matlite Lexer Package

Cursor, token model and tokenizer for the calculator language.

Key Features:
- Keywords, identifiers, decimal and string literals
- Relational, logical and arithmetic operators with longest-match ordering
- Line comments introduced by two backslashes
- Error reporting by character offset for caret diagnostics
"""

from .tokens import (
    Token, TokenType, SourceLocation, IdentifierToken, NumericToken, StringToken, AnyToken
)
from .cursor import Cursor
from .lexer import Lexer, LexerResult, tokenize_string, string_to_float
from .errors import LexerError, Diagnostic

__all__ = [
    "Cursor",
    "Lexer",
    "LexerResult",
    "Token",
    "TokenType",
    "SourceLocation",
    "IdentifierToken",
    "NumericToken",
    "StringToken",
    "AnyToken",
    "LexerError",
    "Diagnostic",
    "tokenize_string",
    "string_to_float",
]
