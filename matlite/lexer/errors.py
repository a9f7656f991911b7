"""
Error handling for the matlite lexer.

Lexing errors are recoverable: they carry the offset where scanning stopped
so the REPL can draw a caret under the offending column and return to the
prompt.
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation, OPERATORS


@dataclass
class Diagnostic:
    """
    A single error or warning with its source location.

    Rendered as::

        error[L001]: Invalid character: '#'
          --> <input>:1:3
          a # b
            ^
          help: ...
    """
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None
    source_line: Optional[str] = None   # Line containing location, no newline

    def __str__(self) -> str:
        header = f"{self.severity}[{self.code}]" if self.code else self.severity
        result = f"{header}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.source_line is not None:
            result += f"  {self.source_line}\n"
            result += f"  {' ' * (self.location.column - 1)}^\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Raised (or reported through ``LexerResult``) when scanning cannot continue.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None,
        source_line: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions,
            source_line=source_line
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def offset(self) -> int:
        return self.diagnostic.location.offset

    def __str__(self) -> str:
        return str(self.diagnostic)


ERROR_CODES = {
    "L001": "Invalid character",
    "L003": "Invalid numeric literal",
}


def suggest_operator_corrections(char: str) -> List[str]:
    """Operators that contain ``char``, e.g. '&' -> ['&&']."""
    return [spelling for spelling, _ in OPERATORS if char in spelling and spelling != char][:3]


def create_invalid_character_error(char: str, location: SourceLocation,
                                   source_line: Optional[str] = None) -> LexerError:
    """Create an error for a character no token can start with."""
    suggestions = suggest_operator_corrections(char)

    if suggestions:
        help_text = f"Did you mean {' or '.join(repr(s) for s in suggestions)}?"
    elif char.isprintable():
        help_text = f"The character '{char}' cannot start a token."
    else:
        help_text = f"Non-printable character (U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"Invalid character: {char!r}",
        location=location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions or None,
        source_line=source_line
    )


def create_invalid_number_error(lexeme: str, location: SourceLocation, reason: str,
                                source_line: Optional[str] = None) -> LexerError:
    return LexerError(
        message=f"Invalid numeric literal: '{lexeme}'",
        location=location,
        code="L003",
        help_text=reason,
        source_line=source_line
    )
