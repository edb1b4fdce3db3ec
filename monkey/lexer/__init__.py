"""
Monkey Lexer Package

Implements the lexical analyzer (tokenizer) for the Monkey language.

Key Features:
- Pull-based scanning, one token per next_token() call
- One character of lookahead for '==' and '!='
- Keyword recognition through a single reserved-word table
- Illegal characters become ILLEGAL tokens instead of stopping the scan
- Source location tracking for diagnostics
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, lookup_ident
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError, LexerWarning

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "lookup_ident",
    "tokenize_string",
    "tokenize_file",
    "Diagnostic",
    "LexerError",
    "LexerWarning",
]
