"""
Lox Expression Front End

Lexer, parser and expression tree for the Lox language, with an AST
printer and a small command-line driver.

Architecture:
    lox/
    ├── lexer/           # Tokenization and diagnostics
    ├── parser/          # Syntax analysis and AST generation
    ├── ast_printer.py   # Parenthesized rendering of expression trees
    └── cli.py           # File runner and interactive prompt

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, ErrorReporter
from .parser import Parser, ParseResult, ParseError
from .ast_printer import AstPrinter

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "ErrorReporter",
    "Parser",
    "ParseResult",
    "ParseError",
    "AstPrinter",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
