"""
Token definitions for the Monkey lexer.

This module defines the closed set of token types the lexer can produce:
- Special tokens (end of input, illegal characters)
- Identifiers and integer literals
- Operators and comparison operators
- Delimiters and brackets
- Keywords

Each token type has a canonical display spelling used in parser
diagnostics ("expected next token to be =, got Ident instead").
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Dict, Optional


class TokenType(Enum):
    """
    Enumeration of all token types in Monkey.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    ILLEGAL = auto()                # Unrecognized character
    EOF = auto()                    # End of input

    # ========================================================================
    # Identifiers and Literals
    # ========================================================================
    IDENT = auto()                  # add, foobar, x, y
    INT = auto()                    # 1343456

    # ========================================================================
    # Operators
    # ========================================================================
    ASSIGN = auto()                 # =
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    BANG = auto()                   # !
    ASTERISK = auto()               # *
    SLASH = auto()                  # /

    # Comparison
    LT = auto()                     # <
    GT = auto()                     # >
    EQ = auto()                     # ==
    NOT_EQ = auto()                 # !=

    # ========================================================================
    # Delimiters
    # ========================================================================
    COMMA = auto()                  # ,
    SEMICOLON = auto()              # ;

    LPAREN = auto()                 # (
    RPAREN = auto()                 # )
    LBRACE = auto()                 # {
    RBRACE = auto()                 # }

    # ========================================================================
    # Keywords
    # ========================================================================
    FUNCTION = auto()               # fn
    LET = auto()                    # let
    TRUE = auto()                   # true
    FALSE = auto()                  # false
    IF = auto()                     # if
    ELSE = auto()                   # else
    RETURN = auto()                 # return

    @property
    def display(self) -> str:
        """Canonical spelling of this token type, as shown in diagnostics."""
        return TOKEN_DISPLAY[self]

    def __str__(self) -> str:
        return self.display


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and the REPL's token dump.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Monkey language.

    Two tokens are equal when their type and literal text match; the
    source location only travels along for diagnostics.
    """
    type: TokenType
    literal: str                    # Exact text from source
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"{self.type.name}({self.literal!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.literal!r}, {self.location!r})"

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORDS.values()

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator."""
        return self.type in OPERATOR_TYPES

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENT


# Reserved words; anything else shaped like an identifier is IDENT
KEYWORDS: Dict[str, TokenType] = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}

# Single-character tokens that need no lookahead
SINGLE_CHAR_TOKENS: Dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LT,
    ">": TokenType.GT,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

# Characters that form a two-character token when followed by '='
TWO_CHAR_TOKENS: Dict[str, TokenType] = {
    "==": TokenType.EQ,
    "!=": TokenType.NOT_EQ,
}

OPERATOR_TYPES = frozenset({
    TokenType.ASSIGN, TokenType.PLUS, TokenType.MINUS, TokenType.BANG,
    TokenType.ASTERISK, TokenType.SLASH, TokenType.LT, TokenType.GT,
    TokenType.EQ, TokenType.NOT_EQ,
})

TOKEN_DISPLAY: Dict[TokenType, str] = {
    TokenType.ILLEGAL: "Illegal",
    TokenType.EOF: "EOF",
    TokenType.IDENT: "Ident",
    TokenType.INT: "Int",
    TokenType.ASSIGN: "=",
    TokenType.BANG: "!",
}
TOKEN_DISPLAY.update({token_type: spelling for spelling, token_type in SINGLE_CHAR_TOKENS.items()})
TOKEN_DISPLAY.update({token_type: spelling for spelling, token_type in TWO_CHAR_TOKENS.items()})
TOKEN_DISPLAY.update({token_type: word for word, token_type in KEYWORDS.items()})


def lookup_ident(ident: str) -> TokenType:
    """Classify an identifier-shaped word as a keyword or a plain identifier."""
    return KEYWORDS.get(ident, TokenType.IDENT)
