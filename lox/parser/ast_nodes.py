"""
Abstract Syntax Tree node definitions for Lox expressions.

The expression grammar has a closed set of four node kinds. Every node is
an immutable dataclass tagged with its ExprKind, and every consumer of the
tree implements ExprVisitor, which has exactly one handler per kind.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, List, TypeVar, Union
from dataclasses import dataclass
from enum import Enum

from ..lexer.tokens import Token, TokenType


class ExprKind(Enum):
    """Enumeration of all expression node kinds."""
    BINARY = "Binary"
    GROUPING = "Grouping"
    LITERAL = "Literal"
    UNARY = "Unary"


class NilType:
    """Type of the NIL sentinel: the Lox value nil."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NIL"

    def __str__(self) -> str:
        return "nil"

    def __bool__(self) -> bool:
        return False


NIL = NilType()

LiteralValue = Union[float, int, str, bool, NilType]

# Operator kinds each grammar rule may put into a node
UNARY_OPERATORS = frozenset({TokenType.BANG, TokenType.MINUS})
BINARY_OPERATORS = frozenset({
    TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL,
    TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL,
    TokenType.MINUS, TokenType.PLUS,
    TokenType.SLASH, TokenType.STAR,
})

R = TypeVar("R")


class ExprVisitor(ABC, Generic[R]):
    """
    Visitor interface over the closed set of expression kinds.

    A subclass that leaves any handler unimplemented cannot be
    instantiated, so a new node kind shows up as a TypeError at visitor
    construction rather than a missing branch at runtime.
    """

    @abstractmethod
    def visit_binary_expr(self, expr: 'Binary') -> R:
        pass

    @abstractmethod
    def visit_grouping_expr(self, expr: 'Grouping') -> R:
        pass

    @abstractmethod
    def visit_literal_expr(self, expr: 'Literal') -> R:
        pass

    @abstractmethod
    def visit_unary_expr(self, expr: 'Unary') -> R:
        pass


class Expr(ABC):
    """Base class for expression nodes."""
    kind: ClassVar[ExprKind]

    @abstractmethod
    def accept(self, visitor: ExprVisitor[R]) -> R:
        """Accept a visitor (visitor pattern)."""
        pass

    @abstractmethod
    def children(self) -> List['Expr']:
        """Get all child nodes."""
        pass


def _require_expr(value: Any, field_name: str, node: str):
    if not isinstance(value, Expr):
        raise TypeError(f"{node}.{field_name} must be an Expr, got {type(value).__name__}")


def _require_operator(token: Any, allowed: frozenset, node: str):
    if not isinstance(token, Token) or token.type not in allowed:
        raise ValueError(f"{node}.operator cannot be {token!r}")


@dataclass(frozen=True)
class Binary(Expr):
    """Infix operation: left operator right."""
    kind: ClassVar[ExprKind] = ExprKind.BINARY

    left: Expr
    operator: Token
    right: Expr

    def __post_init__(self):
        _require_expr(self.left, "left", "Binary")
        _require_operator(self.operator, BINARY_OPERATORS, "Binary")
        _require_expr(self.right, "right", "Binary")

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_binary_expr(self)

    def children(self) -> List[Expr]:
        return [self.left, self.right]


@dataclass(frozen=True)
class Grouping(Expr):
    """Parenthesized expression."""
    kind: ClassVar[ExprKind] = ExprKind.GROUPING

    expression: Expr

    def __post_init__(self):
        _require_expr(self.expression, "expression", "Grouping")

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_grouping_expr(self)

    def children(self) -> List[Expr]:
        return [self.expression]


@dataclass(frozen=True)
class Literal(Expr):
    """Literal value: number, string, boolean or NIL."""
    kind: ClassVar[ExprKind] = ExprKind.LITERAL

    value: LiteralValue

    def __post_init__(self):
        if not isinstance(self.value, (bool, int, float, str, NilType)):
            raise TypeError(
                f"Literal.value must be a number, string, boolean or NIL, got {self.value!r}"
            )

    # bool is an int subclass, so True == 1.0 unless booleans are keyed apart
    def _key(self):
        return (isinstance(self.value, bool), self.value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Literal):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_literal_expr(self)

    def children(self) -> List[Expr]:
        return []


@dataclass(frozen=True)
class Unary(Expr):
    """Prefix operation: ! or - applied to an operand."""
    kind: ClassVar[ExprKind] = ExprKind.UNARY

    operator: Token
    right: Expr

    def __post_init__(self):
        _require_operator(self.operator, UNARY_OPERATORS, "Unary")
        _require_expr(self.right, "right", "Unary")

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_unary_expr(self)

    def children(self) -> List[Expr]:
        return [self.right]
