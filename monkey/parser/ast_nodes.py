"""
Abstract Syntax Tree node definitions for Monkey.

Every node keeps the token that introduced it, so it can report its
originating literal (token_literal) without going back to the source,
and every node can render itself back to text (print). The rendering is
deterministic and is what the parser tests compare against.

Statements and expressions are two closed families rooted at Statement
and Expression. New kinds of expression (integers, prefix/infix
operators, function literals, calls) are added as further subclasses
plus an ASTNodeType member.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Any, Union
from enum import Enum

from ..lexer.tokens import Token


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    # Top-level
    PROGRAM = "Program"

    # Statements
    LET_STATEMENT = "LetStatement"
    RETURN_STATEMENT = "ReturnStatement"

    # Expressions
    IDENTIFIER = "Identifier"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'ASTNode') -> Any:
        """Visit a generic AST node."""
        pass


class ASTNode(ABC):
    """Base class for all AST nodes."""

    def __init__(self, node_type: ASTNodeType, token: Optional[Token]):
        self.node_type = node_type
        self.token = token

    def token_literal(self) -> str:
        """Literal text of the token that introduced this node."""
        return self.token.literal if self.token is not None else ""

    @abstractmethod
    def print(self) -> str:
        """Human-readable reconstruction of the node."""
        pass

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    def __str__(self) -> str:
        return self.print()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.print()!r})"


# ============================================================================
# Expressions
# ============================================================================

class Expression(ASTNode):
    """Base class for expressions."""
    pass


class Identifier(Expression):
    """Identifier expression."""
    value: str

    def __init__(self, token: Token, value: str):
        super().__init__(ASTNodeType.IDENTIFIER, token)
        self.value = value

    def print(self) -> str:
        return self.value

    def children(self) -> List[ASTNode]:
        return []


# ============================================================================
# Statements
# ============================================================================

class Statement(ASTNode):
    """Base class for statements."""
    pass


def _print_value(value: Optional[Expression]) -> str:
    # Missing values render as None so truncated statements stay visible
    return value.print() if value is not None else "None"


class LetStatement(Statement):
    """Binding statement: let <name> = <value>;"""
    name: Identifier
    value: Optional[Expression]

    def __init__(self, token: Token, name: Identifier, value: Optional[Expression] = None):
        super().__init__(ASTNodeType.LET_STATEMENT, token)
        self.name = name
        self.value = value

    def print(self) -> str:
        return f"{self.token_literal()} {self.name.print()} = {_print_value(self.value)};"

    def children(self) -> List[ASTNode]:
        children: List[ASTNode] = [self.name]
        if self.value is not None:
            children.append(self.value)
        return children


class ReturnStatement(Statement):
    """Return statement: return <value>;"""
    return_value: Optional[Expression]

    def __init__(self, token: Token, return_value: Optional[Expression] = None):
        super().__init__(ASTNodeType.RETURN_STATEMENT, token)
        self.return_value = return_value

    def print(self) -> str:
        return f"{self.token_literal()} {_print_value(self.return_value)};"

    def children(self) -> List[ASTNode]:
        return [self.return_value] if self.return_value is not None else []


# Closed variant sets handed to later stages
StatementNode = Union[LetStatement, ReturnStatement]
ExpressionNode = Union[Identifier]


# ============================================================================
# Top-level nodes
# ============================================================================

class Program(ASTNode):
    """Root AST node representing a complete program."""
    statements: List[StatementNode]

    def __init__(self, statements: List[StatementNode]):
        super().__init__(ASTNodeType.PROGRAM, None)
        self.statements = statements

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def print(self) -> str:
        return "".join(statement.print() for statement in self.statements)

    def children(self) -> List[ASTNode]:
        return list(self.statements)
