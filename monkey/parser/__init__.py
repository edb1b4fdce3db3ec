"""
Monkey Parser Package

Implements a recursive descent statement parser for the Monkey language,
built on a two-token lookahead window over the lexer.

Key Features:
- let and return statements
- Diagnostics collected as data; one bad statement never stops the parse
- AST nodes that keep their originating token and render back to text
"""

from .ast_nodes import *
from .parser import Parser, parse_string, parse_file
from .errors import ParseError, ParseWarning

__all__ = [
    # Core parser
    "Parser", "parse_string", "parse_file",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor",
    "Program", "Statement", "Expression",
    "LetStatement", "ReturnStatement", "Identifier",
    "StatementNode", "ExpressionNode",

    # Error handling
    "ParseError", "ParseWarning",
]
