"""
Lox Lexer Package

Turns Lox source text into the token list consumed by the parser, and
hosts the diagnostic sink that both stages report syntax errors to.

Author: xwest
"""

from .tokens import Token, TokenType
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, ErrorReporter

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "Diagnostic",
    "ErrorReporter",
    "tokenize_string",
    "tokenize_file",
]
