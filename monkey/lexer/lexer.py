"""
Monkey Lexer - turns source text into tokens

The lexer is pull-based: the parser asks for one token at a time with
next_token(). It keeps a cursor (position/read_position) and the
character currently under examination, and only ever looks one
character ahead, which is enough to tell '=' from '==' and '!' from '!='.

Identifiers are letters and underscores only. Digits end an identifier,
so "x1" lexes as IDENT("x") followed by INT("1").
"""

from typing import Iterator, List

from .tokens import (
    Token, TokenType, SourceLocation, SINGLE_CHAR_TOKENS, TWO_CHAR_TOKENS, lookup_ident
)
from .errors import LexerError, LexerWarning, create_illegal_character_warning


# Sentinel stored in `ch` once the cursor has run past the input
EOF_CHAR = '\0'

WHITESPACE = frozenset(' \t\n\r')


class Lexer:
    """
    Monkey lexical analyzer.

    Produces exactly one token per next_token() call. Once the input is
    exhausted every further call returns an EOF token with an empty
    literal.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.warnings: List[LexerWarning] = []

        self.position = 0           # index of `ch`
        self.read_position = 0      # index of the next character to read
        self.ch = EOF_CHAR
        self.line = 1
        self.column = 0
        self._read_char()

    def next_token(self) -> Token:
        """Scan and return the next token."""
        self._skip_whitespace()

        location = self._location()

        if self._at_end():
            return Token(TokenType.EOF, "", location)

        ch = self.ch

        # '=' and '!' need one character of lookahead
        if ch in ('=', '!'):
            pair = ch + self._peek_char()
            if pair in TWO_CHAR_TOKENS:
                self._read_char()
                self._read_char()
                return Token(TWO_CHAR_TOKENS[pair], pair, location)
            token_type = TokenType.ASSIGN if ch == '=' else TokenType.BANG
            self._read_char()
            return Token(token_type, ch, location)

        if ch in SINGLE_CHAR_TOKENS:
            self._read_char()
            return Token(SINGLE_CHAR_TOKENS[ch], ch, location)

        if self._is_letter(ch):
            literal = self._read_identifier()
            return Token(lookup_ident(literal), literal, location)

        if self._is_digit(ch):
            literal = self._read_number()
            return Token(TokenType.INT, literal, location)

        # Nothing matched: hand the character to the parser as ILLEGAL
        self.warnings.append(create_illegal_character_warning(ch, location))
        self._read_char()
        return Token(TokenType.ILLEGAL, ch, location)

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Scans with a separate cursor, so a parser already pulling from
        this lexer is not disturbed and `warnings` is left as it is.

        Returns:
            List of tokens including the EOF token
        """
        return list(Lexer(self.source, self.filename))

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens from the current cursor up to and including EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return

    def _read_char(self):
        """Move the cursor one character forward, updating line/column."""
        if self.ch == '\n':
            self.line += 1
            self.column = 0

        if self.read_position >= len(self.source):
            self.ch = EOF_CHAR
        else:
            self.ch = self.source[self.read_position]

        self.position = self.read_position
        self.read_position += 1
        self.column += 1

    def _peek_char(self) -> str:
        """Look at the next character without consuming it."""
        if self.read_position >= len(self.source):
            return EOF_CHAR
        return self.source[self.read_position]

    def _at_end(self) -> bool:
        return self.position >= len(self.source)

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.position)

    def _skip_whitespace(self):
        while not self._at_end() and self.ch in WHITESPACE:
            self._read_char()

    def _read_identifier(self) -> str:
        start = self.position
        while not self._at_end() and self._is_letter(self.ch):
            self._read_char()
        return self.source[start:self.position]

    def _read_number(self) -> str:
        start = self.position
        while not self._at_end() and self._is_digit(self.ch):
            self._read_char()
        return self.source[start:self.position]

    @staticmethod
    def _is_letter(ch: str) -> bool:
        return 'a' <= ch <= 'z' or 'A' <= ch <= 'Z' or ch == '_'

    @staticmethod
    def _is_digit(ch: str) -> bool:
        return '0' <= ch <= '9'

    def has_warnings(self) -> bool:
        """Check if the lexer met any illegal characters."""
        return len(self.warnings) > 0


def tokenize_string(source: str, filename: str = "<string>", strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting
        strict: Raise on the first illegal character instead of
            returning an ILLEGAL token for it

    Returns:
        List of tokens

    Raises:
        LexerError: If strict is set and an illegal character was found
    """
    lexer = Lexer(source, filename)
    tokens = list(lexer)

    if strict and lexer.has_warnings():
        first = lexer.warnings[0].diagnostic
        raise LexerError(first.message, first.location, first.code, first.help_text)

    return tokens


def tokenize_file(filepath: str, strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If strict is set and an illegal character was found
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath, strict)
