"""
matlite lexer - turns input text into tokens

Single left-to-right pass over a Cursor. Each step skips whitespace and
comments, then tries in order: the keyword/operator table, an identifier,
a string literal, a numeric literal. The first character that starts none
of them stops the scan; there is no resynchronisation.
"""

import logging
import re
import string
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import CalculatorConfig
from .cursor import Cursor
from .tokens import (
    Token, TokenType, IdentifierToken, NumericToken, StringToken, AnyToken,
    KEYWORDS, OPERATORS
)
from .errors import (
    LexerError, create_invalid_character_error, create_invalid_number_error
)

logger = logging.getLogger(__name__)

IDENTIFIER_START = frozenset(string.ascii_letters)
IDENTIFIER_CONTINUE = frozenset(string.ascii_letters + string.digits + "_")
DIGITS = frozenset(string.digits)

_DECIMAL_PATTERN = re.compile(r'(?:\d+\.?\d*|\.\d+)\Z', re.ASCII)


def string_to_float(text: str) -> float:
    """
    Convert a plain decimal literal to a float.

    Accepts digits with at most one decimal point. Signs, exponents,
    underscores and hex prefixes are rejected with ValueError.
    """
    if not _DECIMAL_PATTERN.match(text):
        raise ValueError(f"not a decimal literal: {text!r}")
    return float(text)


@dataclass
class LexerResult:
    """Outcome of a scan: the full token list, or the offset where it stopped."""
    tokens: List[AnyToken] = field(default_factory=list)
    success: bool = False
    error_location: int = 0
    error: Optional[LexerError] = None

    def __bool__(self) -> bool:
        return self.success

    @property
    def token_types(self) -> List[TokenType]:
        return [token.type for token in self.tokens]


class Lexer:
    """
    matlite lexical analyzer.

    Converts a source string into a list of tokens. Failures are reported
    through ``LexerResult`` rather than raised; see ``tokenize_string`` for
    the raising variant.
    """

    def __init__(self, source: str, filename: str = "<input>",
                 config: Optional[CalculatorConfig] = None):
        self.source = source
        self.filename = filename
        self.config = config or CalculatorConfig()
        self.cursor = Cursor(source, filename, self.config.comment_marker)

    def tokenize(self) -> LexerResult:
        """
        Tokenize the entire source.

        Returns:
            LexerResult with ``success`` set and every token in order, or
            with ``error_location`` set to the offset of the failure.
        """
        self.cursor = Cursor(self.source, self.filename, self.config.comment_marker)
        tokens: List[AnyToken] = []

        while True:
            self.cursor.skip_whitespace_and_comments()
            if self.cursor.at_end:
                break

            try:
                tokens.append(self._next_token())
            except LexerError as e:
                logger.debug("lexing stopped at offset %d: %s", e.offset, e.diagnostic.message)
                return LexerResult(tokens=[], success=False, error_location=e.offset, error=e)

        logger.debug("lexed %d tokens from %d characters", len(tokens), len(self.source))
        return LexerResult(tokens=tokens, success=True)

    def _next_token(self) -> AnyToken:
        token = self._match_spelling()
        if token is not None:
            return token

        current_char = self.cursor.peek()

        if current_char in IDENTIFIER_START:
            return self._tokenize_identifier()

        if current_char == '"':
            return self._tokenize_string()

        if current_char in DIGITS:
            return self._tokenize_number()

        raise create_invalid_character_error(
            current_char, self.cursor.location(), self.cursor.line_text()
        )

    def _match_spelling(self) -> Optional[Token]:
        """Try the keyword table, then the operator table, in order."""
        start = self.cursor.offset

        for word, token_type in KEYWORDS.items():
            end = start + len(word)
            # A keyword followed by an identifier character is an identifier.
            if end < len(self.source) and self.source[end] in IDENTIFIER_CONTINUE:
                continue
            if self.cursor.compare_word_and_skip(word):
                return Token(token_type, word, self.cursor.location(start))

        for spelling, token_type in OPERATORS:
            if self.cursor.compare_word_and_skip(spelling):
                return Token(token_type, spelling, self.cursor.location(start))

        return None

    def _tokenize_identifier(self) -> IdentifierToken:
        start = self.cursor.offset
        self.cursor.advance()

        while not self.cursor.at_end and self.cursor.peek() in IDENTIFIER_CONTINUE:
            self.cursor.advance()

        name = self.source[start:self.cursor.offset]
        return IdentifierToken(TokenType.IDENTIFIER, name, self.cursor.location(start), name=name)

    def _tokenize_string(self) -> StringToken:
        """
        Everything up to the next double quote; no escape sequences.

        Without a closing quote the literal runs to the end of the input.
        """
        start = self.cursor.offset
        closing = self.source.find('"', start + 1)

        if closing == -1:
            end = len(self.source)
            text = self.source[start + 1:]
        else:
            end = closing + 1
            text = self.source[start + 1:closing]

        self.cursor.advance(end - start)
        return StringToken(
            TokenType.STRING_LITERAL,
            self.source[start:end],
            self.cursor.location(start),
            text=text
        )

    def _tokenize_number(self) -> NumericToken:
        start = self.cursor.offset
        seen_dot = False

        while not self.cursor.at_end:
            char = self.cursor.peek()
            if char == '.':
                if seen_dot:
                    raise create_invalid_number_error(
                        self.source[start:self.cursor.offset + 1],
                        self.cursor.location(),
                        "A numeric literal may contain at most one decimal point.",
                        self.cursor.line_text()
                    )
                seen_dot = True
            elif char not in DIGITS:
                break
            self.cursor.advance()

        lexeme = self.source[start:self.cursor.offset]
        try:
            value = string_to_float(lexeme)
        except ValueError:
            raise create_invalid_number_error(
                lexeme, self.cursor.location(start), "Cannot parse decimal number",
                self.cursor.line_text(start)
            )

        return NumericToken(TokenType.NUMERIC_LITERAL, lexeme, self.cursor.location(start), value=value)


def tokenize_string(source: str, filename: str = "<string>",
                    config: Optional[CalculatorConfig] = None) -> List[AnyToken]:
    """
    Convenience function to tokenize a source string.

    Raises:
        LexerError: If lexing fails
    """
    result = Lexer(source, filename, config).tokenize()

    if not result.success:
        raise result.error

    return result.tokens
