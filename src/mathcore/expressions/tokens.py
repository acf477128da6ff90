"""
Token types for the expression lexer.

Token type categories follow the error code ranges:
- E0xx: Lexer errors
- E1xx: Parser errors
- E2xx: Name resolution errors
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Optional


class TokenType(Enum):
    """All token types recognized by the expression lexer."""

    # --- Literals ---
    NUMBER = auto()             # 42, 3.14, 1e-9
    IMAGINARY = auto()          # 2i, 0.5i, i

    # --- Identifiers ---
    IDENTIFIER = auto()         # function, constant and variable names

    # --- Arithmetic operators ---
    PLUS = auto()               # +
    MINUS = auto()              # -
    STAR = auto()               # * (also inserted for implicit multiplication)
    SLASH = auto()              # /
    CARET = auto()              # ^ (power)

    # --- Delimiters ---
    LPAREN = auto()             # (
    RPAREN = auto()             # )
    LBRACE = auto()             # { (matrix literal)
    RBRACE = auto()             # }
    COMMA = auto()              # , (argument / column separator)
    SEMICOLON = auto()          # ; (matrix row separator)

    # --- Special ---
    EOF = auto()                # end of input


@dataclass(frozen=True)
class SourceLocation:
    """Represents a position in source text."""
    line: int           # 1-indexed line number
    column: int         # 1-indexed column number
    offset: int         # 0-indexed character offset from start

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class SourceSpan:
    """Represents a range in source text."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        return f"{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"


@dataclass(frozen=True)
class Token:
    """A single token from the lexer."""
    type: TokenType
    value: Any              # float for literals, str for identifiers
    lexeme: str             # The original source text ("" for inserted tokens)
    span: SourceSpan        # Location in source

    @property
    def is_implicit(self) -> bool:
        """True for a multiplication token that was not written in the source."""
        return self.type == TokenType.STAR and self.lexeme == ""

    def __str__(self) -> str:
        if self.type in (TokenType.NUMBER, TokenType.IMAGINARY, TokenType.IDENTIFIER):
            return f"{self.type.name}({self.value!r})"
        return self.type.name


# Tokens that can end an operand and begin one, for implicit multiplication:
# "2x", "3(4+5)", "(1+2)(3+4)", "2{1, 2}", "(1+i)2"
OPERAND_END: frozenset = frozenset({
    TokenType.NUMBER,
    TokenType.IMAGINARY,
    TokenType.RPAREN,
    TokenType.RBRACE,
})

OPERAND_START: frozenset = frozenset({
    TokenType.NUMBER,
    TokenType.IMAGINARY,
    TokenType.IDENTIFIER,
    TokenType.LPAREN,
    TokenType.LBRACE,
})


def describe_token(token: Token) -> str:
    """Describe a token for an 'expected X, found Y' message."""
    if token.type == TokenType.EOF:
        return "end of input"
    if token.lexeme:
        return f"'{token.lexeme}'"
    return token.type.name
