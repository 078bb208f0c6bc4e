"""
Diagnostic reporting shared by the Lox lexer and parser.

Every syntax problem found while scanning or parsing is turned into a
Diagnostic and handed to an ErrorReporter, which writes it to the error
stream and remembers that something went wrong.

Author: xwest
"""

import sys
from typing import Optional, List, TextIO
from dataclasses import dataclass

from .tokens import Token


@dataclass(frozen=True)
class Diagnostic:
    """A single reported syntax error."""
    line: int
    where: str       # "", " at end" or " at '<lexeme>'"
    message: str
    code: Optional[str] = None

    def __str__(self) -> str:
        return f"[line {self.line}] Error{self.where}: {self.message}"

    @classmethod
    def for_token(cls, token: Token, message: str, code: Optional[str] = None) -> "Diagnostic":
        """Build a diagnostic located at a token."""
        return cls(token.line, location_for(token), message, code)


def location_for(token: Token) -> str:
    """Describe where in the input a token sits, for error messages."""
    if token.is_eof:
        return " at end"
    return f" at '{token.lexeme}'"


class ErrorReporter:
    """
    Diagnostic sink for a run of the lexer and parser.

    The had_error flag is sticky: once set it stays set until reset() is
    called, so callers can check it before trusting a returned tree.
    Independent parse attempts (one REPL line, one file) should call
    reset() in between.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        # None means "whatever sys.stderr is at write time"
        self.stream = stream
        self.diagnostics: List[Diagnostic] = []
        self.had_error = False

    def report(self, line: int, where: str, message: str, code: Optional[str] = None) -> Diagnostic:
        """Record a diagnostic and write it to the error stream."""
        return self.emit(Diagnostic(line, where, message, code))

    def emit(self, diagnostic: Diagnostic) -> Diagnostic:
        """Record an already built diagnostic."""
        self.diagnostics.append(diagnostic)
        stream = self.stream if self.stream is not None else sys.stderr
        print(str(diagnostic), file=stream)
        self.had_error = True
        return diagnostic

    def error(self, token: Token, message: str, code: Optional[str] = None) -> Diagnostic:
        """Report an error located at a token."""
        return self.emit(Diagnostic.for_token(token, message, code))

    def error_at_line(self, line: int, message: str, code: Optional[str] = None) -> Diagnostic:
        """Report an error known only by its line (used by the lexer)."""
        return self.report(line, "", message, code)

    def reset(self):
        """Clear the error flag and forget recorded diagnostics."""
        self.had_error = False
        self.diagnostics.clear()


# Common lexer error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
}
