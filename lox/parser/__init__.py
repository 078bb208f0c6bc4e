"""
Lox Parser Package

Implements a recursive descent parser for Lox expressions.
Produces immutable expression trees consumed through ExprVisitor.

Key Features:
- One grammar rule per precedence level
- Left-associative binary operators, right-nested prefix operators
- Single syntax error per parse attempt, reported with line and token

Author: xwest
"""

from .ast_nodes import (
    ExprKind, Expr, Binary, Grouping, Literal, Unary,
    ExprVisitor, NIL, NilType,
)
from .parser import Parser, parse_string, parse_file
from .errors import ParseError, ParseResult

__all__ = [
    # Core parser
    "Parser", "parse_string", "parse_file",

    # AST nodes
    "ExprKind", "Expr", "Binary", "Grouping", "Literal", "Unary",
    "ExprVisitor", "NIL", "NilType",

    # Error handling
    "ParseError", "ParseResult",
]
