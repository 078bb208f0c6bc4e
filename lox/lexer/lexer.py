"""
Lox Lexer - turns source text into a flat list of tokens.

Lexical errors never stop the scan: they go to the ErrorReporter and the
lexer carries on with the next character, so a single run surfaces every
bad character at once.

Author: xwest
"""

import re
from typing import List, Optional

from .tokens import Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, EQUAL_SUFFIX_TOKENS
from .errors import ErrorReporter


class Lexer:
    """
    Lox lexical analyzer.

    Converts source code text into a list of tokens terminated by a single
    EOF token.
    """

    def __init__(self, source: str, reporter: Optional[ErrorReporter] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            reporter: Diagnostic sink shared with the parser
        """
        self.source = source
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.pos = 0
        self.line = 1
        self.tokens: List[Token] = []

        self._compile_patterns()

    def _compile_patterns(self):
        """Compile regex patterns used by the lexer."""
        # A trailing '.' with no digits after it belongs to the next token
        self.number_pattern = re.compile(r'[0-9]+(?:\.[0-9]+)?')
        self.identifier_pattern = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens including EOF token
        """
        self.pos = 0
        self.line = 1
        self.tokens = []

        while self.pos < len(self.source):
            token = self._next_token()
            if token:
                self.tokens.append(token)

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        return self.tokens

    def _next_token(self) -> Optional[Token]:
        """Scan one lexeme; returns None for whitespace, comments and errors."""
        start = self.pos
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            return self._make_token(SINGLE_CHAR_TOKENS[char], start)

        if char in EQUAL_SUFFIX_TOKENS:
            single, with_equal = EQUAL_SUFFIX_TOKENS[char]
            return self._make_token(with_equal if self._match("=") else single, start)

        if char == "/":
            if self._match("/"):
                # Comment runs to end of line; the newline itself is left for line counting
                while self.pos < len(self.source) and self.source[self.pos] != "\n":
                    self.pos += 1
                return None
            return self._make_token(TokenType.SLASH, start)

        if char in " \r\t":
            return None

        if char == "\n":
            self.line += 1
            return None

        if char == '"':
            return self._tokenize_string(start)

        if "0" <= char <= "9":
            return self._tokenize_number(start)

        if char == "_" or (char.isascii() and char.isalpha()):
            return self._tokenize_identifier_or_keyword(start)

        self.reporter.error_at_line(self.line, "Unexpected character.", code="L001")
        return None

    def _tokenize_string(self, start: int) -> Optional[Token]:
        """Scan a string literal; the opening quote is already consumed."""
        while self.pos < len(self.source) and self.source[self.pos] != '"':
            if self.source[self.pos] == "\n":
                self.line += 1
            self.pos += 1

        if self.pos >= len(self.source):
            self.reporter.error_at_line(self.line, "Unterminated string.", code="L002")
            return None

        self._advance()  # closing quote
        value = self.source[start + 1:self.pos - 1]
        return self._make_token(TokenType.STRING, start, value)

    def _tokenize_number(self, start: int) -> Token:
        """Scan an integer or decimal number literal."""
        match = self.number_pattern.match(self.source, start)
        self.pos = match.end()
        return self._make_token(TokenType.NUMBER, start, float(match.group()))

    def _tokenize_identifier_or_keyword(self, start: int) -> Token:
        """Scan an identifier, or a reserved word if it is one."""
        match = self.identifier_pattern.match(self.source, start)
        self.pos = match.end()
        token_type = KEYWORDS.get(match.group(), TokenType.IDENTIFIER)
        return self._make_token(token_type, start)

    def _make_token(self, token_type: TokenType, start: int, literal=None) -> Token:
        return Token(token_type, self.source[start:self.pos], literal, self.line)

    def _advance(self) -> str:
        char = self.source[self.pos]
        self.pos += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is the expected one."""
        if self.pos >= len(self.source) or self.source[self.pos] != expected:
            return False
        self.pos += 1
        return True


def tokenize_string(source: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        reporter: Diagnostic sink for lexical errors

    Returns:
        List of tokens
    """
    return Lexer(source, reporter).tokenize()


def tokenize_file(filepath: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file
        reporter: Diagnostic sink for lexical errors

    Returns:
        List of tokens

    Raises:
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return Lexer(source, reporter).tokenize()
