"""
Expression-specific exceptions and error handling.

Error code ranges:
- E0xx: Lexer errors
- E1xx: Parser errors
- E2xx: Name resolution errors

Errors raised while a tree is being built carry a ``Diagnostic`` with the
source position; errors raised while it is evaluated carry only a message.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..errors import MathCoreError
from .tokens import SourceSpan


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    code: str                       # E001, E101, etc.
    message: str                    # Human-readable message
    span: Optional[SourceSpan] = None
    source_line: Optional[str] = None   # The actual line of source text
    hints: List[str] = field(default_factory=list)

    def format(self, show_source: bool = True) -> str:
        """Format the diagnostic for display."""
        parts = []

        # Header: location: error[code]: message
        if self.span is not None:
            parts.append(f"{self.span.start}: error[{self.code}]: {self.message}")
        else:
            parts.append(f"error[{self.code}]: {self.message}")

        # Source line with caret
        if show_source and self.source_line is not None and self.span is not None:
            parts.append("  |")
            parts.append(f"  | {self.source_line}")
            col = self.span.start.column
            end_col = (self.span.end.column if self.span.start.line == self.span.end.line
                       else len(self.source_line) + 1)
            underline_len = max(1, end_col - col)
            parts.append(f"  | {' ' * (col - 1)}{'^' * underline_len}")

        for hint in self.hints:
            parts.append(f"  = hint: {hint}")

        return "\n".join(parts)

    def to_json(self) -> dict:
        """Convert to JSON-serializable dict for tooling integration."""
        data = {
            "code": self.code,
            "message": self.message,
            "hints": self.hints,
        }
        if self.span is not None:
            data["range"] = {
                "start": {
                    "line": self.span.start.line,
                    "column": self.span.start.column,
                    "offset": self.span.start.offset,
                },
                "end": {
                    "line": self.span.end.line,
                    "column": self.span.end.column,
                    "offset": self.span.end.offset,
                },
            }
        return data


class ExpressionError(MathCoreError):
    """Base exception for errors in building or evaluating an expression."""
    pass


class BuildError(ExpressionError):
    """An expression could not be turned into a tree."""

    def __init__(self, diagnostic: Diagnostic):
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)

    @property
    def span(self) -> Optional[SourceSpan]:
        return self.diagnostic.span

    @property
    def offset(self) -> Optional[int]:
        """0-indexed character offset of the error, if known."""
        if self.diagnostic.span is None:
            return None
        return self.diagnostic.span.start.offset

    def __str__(self) -> str:
        return self.diagnostic.format()


class ExpressionSyntaxError(BuildError):
    """Malformed expression text (E0xx, E1xx)."""
    pass


class UnknownIdentifierError(BuildError):
    """A name that is neither registered nor allowed as a variable (E201)."""

    def __init__(self, diagnostic: Diagnostic, name: str):
        self.name = name
        super().__init__(diagnostic)


class ArityMismatchError(BuildError):
    """A registered name called with an unsupported argument count (E202)."""

    def __init__(self, diagnostic: Diagnostic, name: str, argument_count: int,
                 valid_arities: Sequence[int]):
        self.name = name
        self.argument_count = argument_count
        self.valid_arities = tuple(valid_arities)
        super().__init__(diagnostic)


class EvaluationError(ExpressionError):
    """A tree failed while being evaluated."""
    pass


class TypeMismatchError(EvaluationError):
    """An argument has a kind the receiving function does not accept."""

    def __init__(self, expected: str, actual_kind: str, context: Optional[str] = None):
        self.expected = expected
        self.actual_kind = actual_kind
        self.context = context
        prefix = f"{context}: " if context else ""
        super().__init__(f"{prefix}expected {expected}, found {actual_kind}")


class UnboundVariableError(EvaluationError):
    """A variable was evaluated before a value was bound to it."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"variable '{name}' has no value")


class AbsentArgumentError(RuntimeError):
    """
    The absent-argument placeholder was evaluated.

    Optional trailing arguments are represented by the ``NULL`` node, which
    call nodes must skip; reaching this error means a node factory built a
    tree that cannot be evaluated.
    """

    def __init__(self):
        super().__init__("the absent-argument placeholder cannot be evaluated")


class RegistryConfigurationError(Exception):
    """Invalid or conflicting function registration, detected at startup."""
    pass


# --- Lexer error codes ---

def error_unexpected_character(char: str, span: SourceSpan,
                               source_line: Optional[str] = None) -> ExpressionSyntaxError:
    """E001: Unexpected character."""
    diag = Diagnostic(
        code="E001",
        message=f"unexpected character '{char}'",
        span=span,
        source_line=source_line,
    )
    return ExpressionSyntaxError(diag)


def error_invalid_number_literal(text: str, span: SourceSpan,
                                 source_line: Optional[str] = None) -> ExpressionSyntaxError:
    """E002: Invalid number literal."""
    diag = Diagnostic(
        code="E002",
        message=f"invalid number literal '{text}'",
        span=span,
        source_line=source_line,
        hints=["numbers look like 42, 3.14, 1e-9 or 2.5i"],
    )
    return ExpressionSyntaxError(diag)


# --- Parser error codes ---

def error_unexpected_token(expected: str, found: str, span: SourceSpan,
                           source_line: Optional[str] = None) -> ExpressionSyntaxError:
    """E101: Unexpected token."""
    diag = Diagnostic(
        code="E101",
        message=f"expected {expected}, found {found}",
        span=span,
        source_line=source_line,
    )
    return ExpressionSyntaxError(diag)


def error_unexpected_end(expected: str, span: SourceSpan,
                         source_line: Optional[str] = None) -> ExpressionSyntaxError:
    """E102: Unexpected end of input."""
    diag = Diagnostic(
        code="E102",
        message=f"unexpected end of input, expected {expected}",
        span=span,
        source_line=source_line,
    )
    return ExpressionSyntaxError(diag)


def error_ragged_matrix(expected: int, found: int, span: SourceSpan,
                        source_line: Optional[str] = None) -> ExpressionSyntaxError:
    """E103: Matrix literal rows of different lengths."""
    diag = Diagnostic(
        code="E103",
        message=f"matrix row has {found} element(s), expected {expected}",
        span=span,
        source_line=source_line,
        hints=["every row of a matrix literal must have the same number of elements"],
    )
    return ExpressionSyntaxError(diag)


def error_nesting_too_deep(limit: int, span: SourceSpan,
                           source_line: Optional[str] = None) -> ExpressionSyntaxError:
    """E104: Expression nested deeper than the builder allows."""
    diag = Diagnostic(
        code="E104",
        message=f"expression is nested more than {limit} levels deep",
        span=span,
        source_line=source_line,
        hints=["split the expression or remove redundant parentheses and signs"],
    )
    return ExpressionSyntaxError(diag)


# --- Name resolution error codes ---

def error_unknown_identifier(name: str, span: Optional[SourceSpan] = None,
                             source_line: Optional[str] = None) -> UnknownIdentifierError:
    """E201: Unknown function or constant."""
    diag = Diagnostic(
        code="E201",
        message=f"unknown function or constant '{name}'",
        span=span,
        source_line=source_line,
    )
    return UnknownIdentifierError(diag, name)


def _format_arities(arities: Sequence[int]) -> str:
    counts = [str(a) for a in arities]
    if len(counts) == 1:
        return counts[0]
    return ", ".join(counts[:-1]) + " or " + counts[-1]


def error_arity_mismatch(name: str, argument_count: int, valid_arities: Sequence[int],
                         span: Optional[SourceSpan] = None,
                         source_line: Optional[str] = None) -> ArityMismatchError:
    """E202: Registered name called with the wrong number of arguments."""
    diag = Diagnostic(
        code="E202",
        message=(f"'{name}' does not take {argument_count} argument(s); "
                 f"it takes {_format_arities(valid_arities)}"),
        span=span,
        source_line=source_line,
    )
    if 0 in valid_arities and argument_count > 0:
        diag.hints.append(f"'{name}' is a constant, write it without parentheses")
    elif argument_count == 0 and 0 not in valid_arities:
        diag.hints.append(f"'{name}' is a function, call it as {name}(...)")
    return ArityMismatchError(diag, name, argument_count, valid_arities)
