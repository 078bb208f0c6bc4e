"""
Error handling for the Lox parser.

A syntax error aborts the current parse attempt: grammar rules raise
ParseError, and Parser.parse() turns it into a failed ParseResult after
reporting its diagnostic once.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass

from ..lexer.tokens import Token, STATEMENT_KEYWORDS
from ..lexer.errors import Diagnostic
from .ast_nodes import Expr


class ParseError(Exception):
    """
    Exception raised when the parser meets a token it cannot use.

    Carries the offending token and the diagnostic to report for it.
    """

    def __init__(self, token: Token, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.token = token
        self.message = message
        self.code = code
        self.diagnostic = Diagnostic.for_token(token, message, code)

    def __str__(self) -> str:
        return str(self.diagnostic)


@dataclass(frozen=True)
class ParseResult:
    """Outcome of one parse attempt: a tree or the error that stopped it."""
    expression: Optional[Expr] = None
    error: Optional[ParseError] = None

    @classmethod
    def success(cls, expression: Expr) -> "ParseResult":
        return cls(expression=expression)

    @classmethod
    def failure(cls, error: ParseError) -> "ParseResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Expr:
        """Return the tree, or raise the error that prevented building it."""
        if self.error is not None:
            raise self.error
        return self.expression


class SyntaxErrorRecovery:
    """
    Error recovery data for the parser.

    Only statement-level grammars can resume after an error; the
    expression grammar gives up on the first one.
    """

    # Token types that start a new statement
    STATEMENT_BOUNDARIES = STATEMENT_KEYWORDS


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Expected expression",
    "P002": "Expected token not found",
    "P003": "Malformed literal token",
    "P004": "Expression nested too deeply",
}
