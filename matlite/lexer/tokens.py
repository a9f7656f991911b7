"""
Token definitions for the matlite lexer.

Defines the token types of the calculator language:
- Keywords (if, else, elif, while, func)
- Identifiers, numeric literals and string literals
- Relational, logical and arithmetic operators
- Punctuation

Tokens are a small sum type: the plain ``Token`` carries no payload, while
``IdentifierToken``, ``NumericToken`` and ``StringToken`` each carry exactly
one. A payload class only accepts its own token type.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict, List, Tuple, Union


class TokenType(Enum):
    """
    Enumeration of all token types.

    Organized by category for clarity and maintainability.
    """

    # Keywords
    KEYWORD_IF = auto()             # if
    KEYWORD_ELSE = auto()           # else
    KEYWORD_ELIF = auto()           # elif
    KEYWORD_WHILE = auto()          # while
    KEYWORD_FUNC = auto()           # func

    # Identifiers and literals
    IDENTIFIER = auto()             # x, my_var2
    NUMERIC_LITERAL = auto()        # 42, 3.5
    STRING_LITERAL = auto()         # "hello"

    # Relational and logical operators
    LOGICAL_LT = auto()             # <
    LOGICAL_GT = auto()             # >
    LOGICAL_GTE = auto()            # >=
    LOGICAL_LTE = auto()            # <=
    LOGICAL_EQUALS = auto()         # ==
    LOGICAL_NOT_EQUALS = auto()     # !=
    LOGICAL_NOT = auto()            # !
    LOGICAL_AND = auto()            # &&
    LOGICAL_OR = auto()             # ||

    # Arithmetic and assignment
    OPERATOR_PLUS = auto()          # +
    OPERATOR_MINUS = auto()         # -
    OPERATOR_MULTIPLY = auto()      # *
    OPERATOR_DIVIDE = auto()        # /
    OPERATOR_ASSIGN = auto()        # =

    # Punctuation
    LEFT_PARAN = auto()             # (
    RIGHT_PARAN = auto()            # )
    COMMA = auto()                  # ,
    SEMICOL = auto()                # ;
    LEFT_SQUARE_BRACKET = auto()    # [
    RIGHT_SQUARE_BRACKET = auto()   # ]


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    ``offset`` is the character offset from the start of the input and is
    what error carets are drawn against.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


PAYLOAD_TYPES = frozenset({
    TokenType.IDENTIFIER,
    TokenType.NUMERIC_LITERAL,
    TokenType.STRING_LITERAL,
})


@dataclass(frozen=True)
class Token:
    """
    A lexical token without a payload (keywords, operators, punctuation).

    Payload-carrying tokens are the subclasses below.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    location: SourceLocation

    def __post_init__(self):
        if self.type not in self._accepted_types():
            raise TypeError(f"{type(self).__name__} cannot carry token type {self.type.name}")

    @classmethod
    def _accepted_types(cls) -> frozenset:
        return frozenset(TokenType) - PAYLOAD_TYPES

    def __str__(self) -> str:
        return f"{self.type.name}({self.lexeme!r})"

    @property
    def is_keyword(self) -> bool:
        return self.type in KEYWORD_TYPES


@dataclass(frozen=True)
class IdentifierToken(Token):
    name: str

    @classmethod
    def _accepted_types(cls) -> frozenset:
        return frozenset({TokenType.IDENTIFIER})

    def __str__(self) -> str:
        return f"IDENTIFIER({self.name!r})"


@dataclass(frozen=True)
class NumericToken(Token):
    value: float

    @classmethod
    def _accepted_types(cls) -> frozenset:
        return frozenset({TokenType.NUMERIC_LITERAL})

    def __str__(self) -> str:
        return f"NUMERIC_LITERAL({self.value!r})"


@dataclass(frozen=True)
class StringToken(Token):
    text: str

    @classmethod
    def _accepted_types(cls) -> frozenset:
        return frozenset({TokenType.STRING_LITERAL})

    def __str__(self) -> str:
        return f"STRING_LITERAL({self.text!r})"


AnyToken = Union[Token, IdentifierToken, NumericToken, StringToken]


KEYWORDS: Dict[str, TokenType] = {
    "if": TokenType.KEYWORD_IF,
    "else": TokenType.KEYWORD_ELSE,
    "elif": TokenType.KEYWORD_ELIF,
    "while": TokenType.KEYWORD_WHILE,
    "func": TokenType.KEYWORD_FUNC,
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())

# Order matters: every spelling must come before any shorter spelling that
# is a prefix of it.
OPERATORS: List[Tuple[str, TokenType]] = [
    (">=", TokenType.LOGICAL_GTE),
    ("<=", TokenType.LOGICAL_LTE),
    ("==", TokenType.LOGICAL_EQUALS),
    ("!=", TokenType.LOGICAL_NOT_EQUALS),
    ("&&", TokenType.LOGICAL_AND),
    ("||", TokenType.LOGICAL_OR),
    ("<", TokenType.LOGICAL_LT),
    (">", TokenType.LOGICAL_GT),
    ("!", TokenType.LOGICAL_NOT),
    ("=", TokenType.OPERATOR_ASSIGN),
    ("+", TokenType.OPERATOR_PLUS),
    ("-", TokenType.OPERATOR_MINUS),
    ("*", TokenType.OPERATOR_MULTIPLY),
    ("/", TokenType.OPERATOR_DIVIDE),
    ("(", TokenType.LEFT_PARAN),
    (")", TokenType.RIGHT_PARAN),
    (",", TokenType.COMMA),
    (";", TokenType.SEMICOL),
    ("[", TokenType.LEFT_SQUARE_BRACKET),
    ("]", TokenType.RIGHT_SQUARE_BRACKET),
]
