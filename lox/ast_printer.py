"""
Parenthesized prefix rendering of Lox expression trees.

    -123 * (45.67)   ->   (* (- 123) (group 45.67))

Author: xwest
"""

from .lexer.tokens import Token, TokenType
from .parser.ast_nodes import (
    Expr, ExprVisitor, Binary, Grouping, Literal, Unary, NilType,
)


class AstPrinter(ExprVisitor[str]):
    """Renders an expression tree as nested (operator operand...) forms."""

    def print(self, expr: Expr) -> str:
        """
        Render a tree.

        Raises:
            ValueError: If the tree is too deep to render recursively
        """
        try:
            return expr.accept(self)
        except RecursionError:
            raise ValueError("Expression nested too deeply to print.") from None

    def visit_binary_expr(self, expr: Binary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_grouping_expr(self, expr: Grouping) -> str:
        return self._parenthesize("group", expr.expression)

    def visit_literal_expr(self, expr: Literal) -> str:
        return format_literal(expr.value)

    def visit_unary_expr(self, expr: Unary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.right)

    def _parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name] + [expr.accept(self) for expr in exprs]
        return "(" + " ".join(parts) + ")"


def format_literal(value) -> str:
    """Lox text for a literal value."""
    if isinstance(value, NilType):
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        # Lox has one number type; integral values print without ".0"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def main():
    """Print the tree for -123 * (45.67), built by hand."""
    expression = Binary(
        Unary(Token(TokenType.MINUS, "-", None, 1), Literal(123)),
        Token(TokenType.STAR, "*", None, 1),
        Grouping(Literal(45.67)),
    )

    print(AstPrinter().print(expression))


if __name__ == "__main__":
    main()
