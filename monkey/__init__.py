"""
Monkey Interpreter Front End

Lexer and parser for Monkey, a small C-family scripting language. Source
text goes through the lexer (characters to tokens) and the parser
(tokens to an abstract syntax tree); the resulting Program is what an
evaluator walks.

Architecture:
    monkey/
    ├── lexer/           # Tokenization and lexical analysis
    ├── parser/          # Statement parsing and AST definitions
    └── repl.py          # Interactive driver and command line

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType
from .parser import Parser, Program, parse_string, parse_file

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "Program",

    # Convenience
    "parse_string",
    "parse_file",

    # Version info
    "__version__",
    "__license__",
]
