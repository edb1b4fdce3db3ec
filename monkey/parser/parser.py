"""
Monkey Parser Implementation

Recursive descent over a two-token window (current and peek) pulled from
the lexer on demand. Statements are parsed one at a time; a statement
that does not match the grammar is dropped with a recorded diagnostic
and parsing continues with the next one, so a single call collects every
problem in the input.

Statement values are not parsed yet: _parse_expression is the entry
point a Pratt parser plugs into, and for now it only skips to the end of
the statement.
"""

from typing import List, Optional, Tuple

from ..lexer.lexer import Lexer
from ..lexer.tokens import Token, TokenType
from .ast_nodes import Program, StatementNode, LetStatement, ReturnStatement, Identifier, Expression
from .errors import (
    ParseError, ParseWarning, create_unexpected_token_error, create_illegal_token_warning
)


class Parser:
    """
    Monkey statement parser.

    parse_program() always returns a Program; callers must check
    `errors` as well, since the program may be missing statements that
    failed to parse.
    """

    def __init__(self, lexer: Lexer):
        """
        Initialize parser and prime the lookahead window.

        Args:
            lexer: Lexer positioned at the start of the input
        """
        self.lexer = lexer
        self.errors: List[str] = []
        self.diagnostics: List[ParseError] = []
        self.warnings: List[ParseWarning] = []

        self.cur_token: Token = Token(TokenType.ILLEGAL, "")
        self.peek_token: Token = Token(TokenType.ILLEGAL, "")

        # Read two tokens so cur_token and peek_token are both set
        self._next_token()
        self._next_token()

    def parse_program(self) -> Program:
        """
        Parse the token stream into an AST.

        Returns:
            Program AST node holding every statement that parsed
        """
        statements: List[StatementNode] = []

        while not self._cur_token_is(TokenType.EOF):
            statement = self._parse_statement()
            if statement is not None:
                statements.append(statement)
            self._next_token()

        return Program(statements)

    def _parse_statement(self) -> Optional[StatementNode]:
        """Dispatch on the current token."""
        token_type = self.cur_token.type
        if token_type == TokenType.LET:
            return self._parse_let_statement()
        elif token_type == TokenType.RETURN:
            return self._parse_return_statement()
        elif token_type == TokenType.ILLEGAL:
            self.warnings.append(create_illegal_token_warning(self.cur_token))
        return None

    def _parse_let_statement(self) -> Optional[LetStatement]:
        """Parse `let <ident> = <expression>;`."""
        let_token = self.cur_token

        if not self._expect_peek(TokenType.IDENT):
            return None

        name = Identifier(self.cur_token, self.cur_token.literal)

        if not self._expect_peek(TokenType.ASSIGN):
            return None

        self._next_token()
        value = self._parse_expression()

        return LetStatement(let_token, name, value)

    def _parse_return_statement(self) -> ReturnStatement:
        """Parse `return <expression>;`."""
        return_token = self.cur_token

        self._next_token()
        return_value = self._parse_expression()

        return ReturnStatement(return_token, return_value)

    def _parse_expression(self) -> Optional[Expression]:
        """
        Consume a statement value.

        Skips every token up to the terminating semicolon (or end of
        input) and yields no expression node.
        """
        while not self._cur_token_is(TokenType.SEMICOLON) and not self._cur_token_is(TokenType.EOF):
            self._next_token()
        return None

    # Utility methods

    def _next_token(self):
        """Shift peek into current and pull a fresh peek token."""
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def _cur_token_is(self, token_type: TokenType) -> bool:
        return self.cur_token.type == token_type

    def _peek_token_is(self, token_type: TokenType) -> bool:
        return self.peek_token.type == token_type

    def _expect_peek(self, token_type: TokenType) -> bool:
        """Advance if the peek token has the given type, else record an error."""
        if self._peek_token_is(token_type):
            self._next_token()
            return True
        self._peek_error(token_type)
        return False

    def _peek_error(self, token_type: TokenType):
        error = create_unexpected_token_error(token_type, self.peek_token)
        self.diagnostics.append(error)
        self.errors.append(error.message)

    def has_errors(self) -> bool:
        """Check if parser recorded any syntax errors."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if parser recorded any warnings."""
        return len(self.warnings) > 0


def parse_string(source: str, filename: str = "<string>") -> Tuple[Program, List[str]]:
    """
    Convenience function to parse a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        The program and the list of diagnostic messages
    """
    parser = Parser(Lexer(source, filename))
    program = parser.parse_program()
    return program, parser.errors


def parse_file(filepath: str) -> Tuple[Program, List[str]]:
    """
    Convenience function to parse a source file.

    Raises:
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return parse_string(source, filepath)
