"""
Lexer for the expression language.

Converts expression text into a stream of tokens for the builder.
Supports:
- Real literals (42, 3.14, 1e-9, 2.5E+3)
- Imaginary literals (2i, 0.5i) and the imaginary unit ``i``
- Identifiers (function, constant and variable names)
- Operators + - * / ^ and the delimiters ( ) { } , ;
- Implicit multiplication ("2x", "3(4+5)", "(1+2)(3+4)")
"""

from typing import Iterator, List, Optional

from .tokens import (
    OPERAND_END, OPERAND_START, SourceLocation, SourceSpan, Token, TokenType,
)
from .errors import error_invalid_number_literal, error_unexpected_character


IMAGINARY_UNIT = "i"

SINGLE_CHAR_TOKENS = {
    '+': TokenType.PLUS,
    '-': TokenType.MINUS,
    '*': TokenType.STAR,
    '/': TokenType.SLASH,
    '^': TokenType.CARET,
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    '{': TokenType.LBRACE,
    '}': TokenType.RBRACE,
    ',': TokenType.COMMA,
    ';': TokenType.SEMICOLON,
}


def _is_identifier_char(ch: str) -> bool:
    return ch.isalnum() or ch == '_'


class Lexer:
    """
    Tokenizer for expression text.

    Usage:
        lexer = Lexer("2x + sin(pi/4)")
        tokens = lexer.tokenize()

    Or for streaming (no implicit multiplication tokens):
        lexer = Lexer(text)
        for token in lexer:
            process(token)
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0            # Current position in source
        self.line = 1           # Current line (1-indexed)
        self.column = 1         # Current column (1-indexed)
        self._lines: Optional[List[str]] = None  # Cached line list

    @property
    def lines(self) -> List[str]:
        """Lazy-load line list for error reporting."""
        if self._lines is None:
            self._lines = self.source.splitlines()
        return self._lines

    def get_source_line(self, line_num: int) -> Optional[str]:
        """Get a specific line of source (1-indexed)."""
        if 1 <= line_num <= len(self.lines):
            return self.lines[line_num - 1]
        return None

    def _location(self) -> SourceLocation:
        """Get current source location."""
        return SourceLocation(self.line, self.column, self.pos)

    def _span(self, start: SourceLocation) -> SourceSpan:
        """Create a span from start to current position."""
        return SourceSpan(start, self._location())

    def _peek(self, offset: int = 0) -> str:
        """Look at character at current position + offset without consuming."""
        idx = self.pos + offset
        if idx >= len(self.source):
            return '\0'
        return self.source[idx]

    def _advance(self) -> str:
        """Consume and return current character."""
        if self.pos >= len(self.source):
            return '\0'
        ch = self.source[self.pos]
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def _is_at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _skip_whitespace(self) -> None:
        while self._peek() in ' \t\r\n' and not self._is_at_end():
            self._advance()

    def _make_token(self, token_type: TokenType, value, start: SourceLocation,
                    lexeme: Optional[str] = None) -> Token:
        """Create a token."""
        span = self._span(start)
        if lexeme is None:
            lexeme = self.source[start.offset:self.pos]
        return Token(token_type, value, lexeme, span)

    def _has_exponent(self) -> bool:
        """An 'e' starts an exponent only when digits follow ("2e" is 2 * e)."""
        if self._peek() not in 'eE':
            return False
        if self._peek(1).isdigit():
            return True
        return self._peek(1) in '+-' and self._peek(2).isdigit()

    def _scan_number(self) -> Token:
        """Scan a real or imaginary numeric literal."""
        start = self._location()

        while self._peek().isdigit():
            self._advance()

        if self._peek() == '.':
            self._advance()  # consume '.'
            if not self._peek().isdigit():
                lexeme = self.source[start.offset:self.pos]
                raise error_invalid_number_literal(
                    lexeme, self._span(start), self.get_source_line(start.line)
                )
            while self._peek().isdigit():
                self._advance()

        if self._has_exponent():
            self._advance()  # consume 'e'
            if self._peek() in '+-':
                self._advance()
            while self._peek().isdigit():
                self._advance()

        digits = self.source[start.offset:self.pos]
        try:
            value = float(digits)
        except ValueError:
            raise error_invalid_number_literal(
                digits, self._span(start), self.get_source_line(start.line)
            )

        # "2i" is imaginary, "2in" is 2 * in
        if self._peek() == IMAGINARY_UNIT and not _is_identifier_char(self._peek(1)):
            self._advance()
            return self._make_token(TokenType.IMAGINARY, value, start)
        return self._make_token(TokenType.NUMBER, value, start)

    def _scan_identifier(self) -> Token:
        """Scan an identifier; a lone 'i' is the imaginary unit."""
        start = self._location()

        while _is_identifier_char(self._peek()):
            self._advance()

        lexeme = self.source[start.offset:self.pos]
        if lexeme == IMAGINARY_UNIT:
            return self._make_token(TokenType.IMAGINARY, 1.0, start, lexeme)
        return self._make_token(TokenType.IDENTIFIER, lexeme, start, lexeme)

    def _scan_token(self) -> Token:
        """Scan the next token."""
        self._skip_whitespace()

        if self._is_at_end():
            return self._make_token(TokenType.EOF, None, self._location(), "")

        start = self._location()
        ch = self._peek()

        if ch.isdigit():
            return self._scan_number()

        if ch.isalpha() or ch == '_':
            return self._scan_identifier()

        self._advance()
        if ch in SINGLE_CHAR_TOKENS:
            return self._make_token(SINGLE_CHAR_TOKENS[ch], ch, start)

        raise error_unexpected_character(
            ch, self._span(start), self.get_source_line(start.line)
        )

    def tokenize(self) -> List[Token]:
        """Tokenize the entire source, inserting implicit multiplications."""
        tokens = []
        while True:
            token = self._scan_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return insert_implicit_multiplication(tokens)

    def __iter__(self) -> Iterator[Token]:
        """Iterate over the raw tokens."""
        while True:
            token = self._scan_token()
            yield token
            if token.type == TokenType.EOF:
                break


def insert_implicit_multiplication(tokens: List[Token]) -> List[Token]:
    """
    Insert a STAR token between an operand end and an operand start.

    The inserted token has an empty lexeme and a zero-width span at the
    start of the token that follows it.
    """
    result: List[Token] = []
    for token in tokens:
        if result and result[-1].type in OPERAND_END and token.type in OPERAND_START:
            here = token.span.start
            result.append(Token(TokenType.STAR, "*", "", SourceSpan(here, here)))
        result.append(token)
    return result


def tokenize(source: str) -> List[Token]:
    """
    Convenience function to tokenize expression text.

    Args:
        source: The expression text to tokenize

    Returns:
        List of tokens, implicit multiplications included

    Raises:
        ExpressionSyntaxError: If tokenization fails
    """
    lexer = Lexer(source)
    return lexer.tokenize()
