"""
Tests for the expression node model and the visitor contract.

Author: xwest
"""

import dataclasses
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.lexer.tokens import Token, TokenType
from lox.parser.ast_nodes import (
    ExprKind, ExprVisitor, Binary, Grouping, Literal, Unary, NIL, NilType,
)


MINUS = Token(TokenType.MINUS, "-", None, 1)
PLUS = Token(TokenType.PLUS, "+", None, 1)
BANG = Token(TokenType.BANG, "!", None, 1)


class KindCollector(ExprVisitor[list]):
    """Visitor that lists node kinds in depth-first order."""

    def visit_binary_expr(self, expr):
        return [expr.kind] + expr.left.accept(self) + expr.right.accept(self)

    def visit_grouping_expr(self, expr):
        return [expr.kind] + expr.expression.accept(self)

    def visit_literal_expr(self, expr):
        return [expr.kind]

    def visit_unary_expr(self, expr):
        return [expr.kind] + expr.right.accept(self)


class TestExpressionNodes(unittest.TestCase):
    """Test cases for node construction and invariants."""

    def test_kinds(self):
        self.assertEqual(Literal(1.0).kind, ExprKind.LITERAL)
        self.assertEqual(Grouping(Literal(1.0)).kind, ExprKind.GROUPING)
        self.assertEqual(Unary(MINUS, Literal(1.0)).kind, ExprKind.UNARY)
        self.assertEqual(Binary(Literal(1.0), PLUS, Literal(2.0)).kind, ExprKind.BINARY)

    def test_nodes_are_immutable(self):
        node = Binary(Literal(1.0), PLUS, Literal(2.0))

        with self.assertRaises(dataclasses.FrozenInstanceError):
            node.left = Literal(3.0)

    def test_value_equality(self):
        self.assertEqual(
            Unary(MINUS, Grouping(Literal(1.0))),
            Unary(MINUS, Grouping(Literal(1.0))),
        )
        self.assertNotEqual(Literal(1.0), Literal("1"))

    def test_boolean_and_number_literals_differ(self):
        self.assertNotEqual(Literal(True), Literal(1.0))
        self.assertNotEqual(Literal(False), Literal(0))
        self.assertEqual(Literal(1), Literal(1.0))
        self.assertEqual(len({Literal(True), Literal(1.0)}), 2)

    def test_children(self):
        left, right = Literal(1.0), Literal(2.0)
        self.assertEqual(Binary(left, PLUS, right).children(), [left, right])
        self.assertEqual(Unary(BANG, left).children(), [left])
        self.assertEqual(Grouping(left).children(), [left])
        self.assertEqual(left.children(), [])

    def test_operands_must_be_expressions(self):
        with self.assertRaises(TypeError):
            Binary(None, PLUS, Literal(1.0))
        with self.assertRaises(TypeError):
            Unary(MINUS, None)
        with self.assertRaises(TypeError):
            Grouping(1.0)

    def test_unary_operator_restricted(self):
        with self.assertRaises(ValueError):
            Unary(PLUS, Literal(1.0))

    def test_binary_operator_restricted(self):
        with self.assertRaises(ValueError):
            Binary(Literal(1.0), BANG, Literal(2.0))

    def test_nil_is_explicit(self):
        self.assertIs(Literal(NIL).value, NIL)
        with self.assertRaises(TypeError):
            Literal(None)

    def test_nil_is_a_singleton(self):
        self.assertIs(NilType(), NIL)
        self.assertFalse(NIL)
        self.assertEqual(str(NIL), "nil")


class TestVisitorContract(unittest.TestCase):
    """Test cases for double dispatch through ExprVisitor."""

    def test_dispatch_reaches_every_kind(self):
        tree = Binary(
            Unary(MINUS, Literal(123.0)),
            Token(TokenType.STAR, "*", None, 1),
            Grouping(Literal(45.67)),
        )

        self.assertEqual(tree.accept(KindCollector()), [
            ExprKind.BINARY, ExprKind.UNARY, ExprKind.LITERAL,
            ExprKind.GROUPING, ExprKind.LITERAL,
        ])

    def test_incomplete_visitor_cannot_be_built(self):
        class NoGrouping(ExprVisitor[str]):
            def visit_binary_expr(self, expr):
                return ""

            def visit_literal_expr(self, expr):
                return ""

            def visit_unary_expr(self, expr):
                return ""

        with self.assertRaises(TypeError):
            NoGrouping()


if __name__ == "__main__":
    unittest.main()
