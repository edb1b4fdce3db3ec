"""
Error handling for the Monkey parser.

Syntax problems are recorded, not raised: the parser keeps going to the
next statement and hands back everything it found. ParseError is still
an Exception so a caller that wants to stop at the first problem can
raise one of the recorded errors itself.
"""

from typing import Optional

from ..lexer.tokens import Token, TokenType, SourceLocation
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    A recorded syntax error.

    error.message is the plain diagnostic string the parser exposes
    through Parser.errors.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation],
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text
        )
        self.token = token

    def __str__(self) -> str:
        return str(self.diagnostic)


class ParseWarning:
    """
    Represents a parser warning that doesn't count as a syntax error.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation],
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text
        )
        self.token = token

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P003": "Illegal token",
}

# Hints attached to the most common missing tokens
MISSING_TOKEN_HELP = {
    TokenType.IDENT: "A 'let' binding needs a name, e.g. 'let x = 5;'",
    TokenType.ASSIGN: "Add an assignment operator '=' after the binding name",
    TokenType.SEMICOLON: "Add a semicolon ';' to end the statement",
}


def create_unexpected_token_error(expected: TokenType, found: Token) -> ParseError:
    """Create the error recorded when the peek token is not the one required."""
    return ParseError(
        message=f"expected next token to be {expected.display}, got {found.type.display} instead",
        location=found.location,
        token=found,
        code="P001",
        help_text=MISSING_TOKEN_HELP.get(expected)
    )


def create_illegal_token_warning(found: Token) -> ParseWarning:
    """Create the warning recorded when a statement starts with an ILLEGAL token."""
    return ParseWarning(
        message=f"illegal token {found.literal!r}",
        location=found.location,
        token=found,
        code="P003",
        help_text="The lexer could not classify this character; it was skipped."
    )
