"""
Lox Recursive Descent Parser

One method per precedence level, lowest to highest:

    expression -> equality
    equality   -> comparison ( ( "!=" | "==" ) comparison )*
    comparison -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term       -> factor ( ( "-" | "+" ) factor )*
    factor     -> unary ( ( "/" | "*" ) unary )*
    unary      -> ( "!" | "-" ) unary | primary
    primary    -> NUMBER | STRING | "true" | "false" | "nil"
                | "(" expression ")"

Each rule only calls rules of higher precedence for its operands, so the
loops build left-leaning Binary chains (left associativity) and unary is
the only rule that recurses into itself.

Author: xwest
"""

from typing import List, Optional

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import ErrorReporter
from .ast_nodes import Expr, Binary, Grouping, Literal, Unary, NIL
from .errors import ParseError, ParseResult, SyntaxErrorRecovery


class Parser:
    """
    Lox expression parser.

    A Parser owns a cursor over one token list and is meant for a single
    parse() call; use a fresh instance per input.
    """

    def __init__(self, tokens: List[Token], reporter: Optional[ErrorReporter] = None):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer, normally ending in EOF
            reporter: Diagnostic sink that receives the syntax error, if any
        """
        self.tokens = list(tokens)
        if not self.tokens or self.tokens[-1].type != TokenType.EOF:
            line = self.tokens[-1].line if self.tokens else 1
            self.tokens.append(Token(TokenType.EOF, "", None, line))
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.current = 0

    def parse(self) -> ParseResult:
        """
        Parse the token stream into an expression tree.

        Returns:
            ParseResult holding the root expression, or the ParseError that
            stopped the parse. The error has already been reported.
        """
        try:
            return ParseResult.success(self._expression())
        except RecursionError:
            error = ParseError(self._peek(), "Expression nested too deeply.", code="P004")
        except ParseError as parse_error:
            error = parse_error

        self.reporter.emit(error.diagnostic)
        return ParseResult.failure(error)

    # Grammar rules

    def _expression(self) -> Expr:
        return self._equality()

    def _equality(self) -> Expr:
        expr = self._comparison()

        while self._match(TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL):
            operator = self._previous()
            right = self._comparison()
            expr = Binary(expr, operator, right)

        return expr

    def _comparison(self) -> Expr:
        expr = self._term()

        while self._match(TokenType.GREATER, TokenType.GREATER_EQUAL,
                          TokenType.LESS, TokenType.LESS_EQUAL):
            operator = self._previous()
            right = self._term()
            expr = Binary(expr, operator, right)

        return expr

    def _term(self) -> Expr:
        expr = self._factor()

        while self._match(TokenType.MINUS, TokenType.PLUS):
            operator = self._previous()
            right = self._factor()
            expr = Binary(expr, operator, right)

        return expr

    def _factor(self) -> Expr:
        expr = self._unary()

        while self._match(TokenType.SLASH, TokenType.STAR):
            operator = self._previous()
            right = self._unary()
            expr = Binary(expr, operator, right)

        return expr

    def _unary(self) -> Expr:
        # Right recursive: "!!x" is "!(!x)"
        if self._match(TokenType.BANG, TokenType.MINUS):
            operator = self._previous()
            right = self._unary()
            return Unary(operator, right)

        return self._primary()

    def _primary(self) -> Expr:
        if self._match(TokenType.FALSE):
            return Literal(False)
        if self._match(TokenType.TRUE):
            return Literal(True)
        if self._match(TokenType.NIL):
            return Literal(NIL)

        if self._match(TokenType.NUMBER, TokenType.STRING):
            token = self._previous()
            if not _literal_fits(token):
                raise ParseError(token, "Malformed literal.", code="P003")
            return Literal(token.literal)

        if self._match(TokenType.LEFT_PAREN):
            expr = self._expression()
            self._consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)

        raise ParseError(self._peek(), "Expect expression.", code="P001")

    # Utility methods

    def _match(self, *token_types: TokenType) -> bool:
        """Consume the current token if it has any of the given types."""
        for token_type in token_types:
            if self._check(token_type):
                self._advance()
                return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        if self._is_at_end():
            return False
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token."""
        if not self._is_at_end():
            self.current += 1
        return self._previous()

    def _is_at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _peek(self) -> Token:
        return self.tokens[self.current]

    def _previous(self) -> Token:
        return self.tokens[self.current - 1]

    def _consume(self, token_type: TokenType, message: str) -> Token:
        """Consume token of expected type or raise error."""
        if self._check(token_type):
            return self._advance()

        raise ParseError(self._peek(), message, code="P002")

    def synchronize(self):
        """
        Discard tokens until the start of the next statement.

        Stops right after a ';' or in front of a statement keyword. The
        expression grammar never calls this; it is here for statement
        rules to recover into once they exist.
        """
        self._advance()

        while not self._is_at_end():
            if self._previous().type == TokenType.SEMICOLON:
                return

            if self._peek().type in SyntaxErrorRecovery.STATEMENT_BOUNDARIES:
                return

            self._advance()


def _literal_fits(token: Token) -> bool:
    """Check that a NUMBER or STRING token carries a value of its kind."""
    value = token.literal
    if token.type == TokenType.NUMBER:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    return isinstance(value, str)


def parse_string(source: str, reporter: Optional[ErrorReporter] = None) -> ParseResult:
    """
    Convenience function to parse a source string.

    Lexical errors are reported to the same reporter; check
    reporter.had_error before trusting the tree.

    Args:
        source: Source code string
        reporter: Diagnostic sink shared by lexer and parser

    Returns:
        ParseResult
    """
    from ..lexer import tokenize_string

    reporter = reporter if reporter is not None else ErrorReporter()
    tokens = tokenize_string(source, reporter)
    parser = Parser(tokens, reporter)
    return parser.parse()


def parse_file(filepath: str, reporter: Optional[ErrorReporter] = None) -> ParseResult:
    """
    Convenience function to parse a source file.

    Args:
        filepath: Path to source file
        reporter: Diagnostic sink shared by lexer and parser

    Returns:
        ParseResult

    Raises:
        IOError: If file cannot be read
    """
    from ..lexer import tokenize_file

    reporter = reporter if reporter is not None else ErrorReporter()
    tokens = tokenize_file(filepath, reporter)
    parser = Parser(tokens, reporter)
    return parser.parse()
