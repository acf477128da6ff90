"""
Recursive descent tree builder for the expression language.

Converts expression text into an ``ExpressionTree``, resolving function and
constant names against a registry as it goes.

Grammar:
    expression := term (('+' | '-') term)*
    term       := unary (('*' | '/' | implicit) unary)*
    unary      := ('-' | '+') unary | power
    power      := primary ('^' unary)*        (right-associative)
    primary    := NUMBER | IMAGINARY | IDENTIFIER
                | IDENTIFIER '(' [expression (',' expression)*] ')'
                | '(' expression ')'
                | '{' [row (';' row)*] '}'
    row        := expression (',' expression)*
"""

import logging
from typing import List, Optional

from .coercion import Value
from .errors import (
    error_arity_mismatch,
    error_nesting_too_deep,
    error_ragged_matrix,
    error_unexpected_end,
    error_unexpected_token,
    error_unknown_identifier,
)
from .lexer import Lexer
from .registry import FunctionRegistry, get_registry
from .tokens import SourceSpan, Token, TokenType, describe_token
from .tree import (
    BinaryNode, ConstantNode, ExpressionTree, NAryNode, Node, UnaryNode, VariableNode,
    MATRIX, ROW, add, build_matrix, build_row, identity, multiply, negate, quotient,
    raise_power, subtract,
)

logger = logging.getLogger(__name__)


class TreeBuilder:
    """
    Precedence-climbing parser producing expression trees.

    Usage:
        builder = TreeBuilder(get_registry())
        tree = builder.build("2x + sin(pi/4)")

    Precedence, lowest to highest:
        + -
        * / (and implicit multiplication)
        unary - +
        ^ (power, right-associative)

    Unary minus binds looser than power, so ``-2^2`` is ``-(2^2)``.
    """

    # Operator precedence levels (higher = tighter binding)
    PRECEDENCE = {
        TokenType.PLUS: 1,
        TokenType.MINUS: 1,
        TokenType.STAR: 2,
        TokenType.SLASH: 2,
        TokenType.CARET: 4,
    }

    # Right-associative operators
    RIGHT_ASSOCIATIVE = {TokenType.CARET}

    # The operand of a unary sign only absorbs powers
    UNARY_OPERAND_PRECEDENCE = 4

    # Deepest nesting of parentheses, signs, calls and powers
    MAX_NESTING = 100

    BINARY_NODES = {
        TokenType.PLUS: ("add", add),
        TokenType.MINUS: ("subtract", subtract),
        TokenType.STAR: ("multiply", multiply),
        TokenType.SLASH: ("divide", quotient),
        TokenType.CARET: ("power", raise_power),
    }

    UNARY_NODES = {
        TokenType.MINUS: ("negate", negate),
        TokenType.PLUS: ("plus", identity),
    }

    def __init__(self, registry: Optional[FunctionRegistry] = None,
                 allow_variables: bool = True):
        self.registry = registry if registry is not None else get_registry()
        self.allow_variables = allow_variables
        self.tokens: List[Token] = []
        self.pos = 0
        self._lexer: Optional[Lexer] = None
        self._depth = 0

    def build(self, text: str) -> ExpressionTree:
        """Parse ``text`` into a tree."""
        self._lexer = Lexer(text)
        self.tokens = self._lexer.tokenize()
        self.pos = 0
        self._depth = 0

        root = self._parse_binary_expr(0)
        if not self._is_at_end():
            self._error("an operator or end of input")

        tree = ExpressionTree(root, text)
        logger.debug("Built %s from %r", tree, text)
        return tree

    # =========================================================================
    # Token Navigation
    # =========================================================================

    def _current(self) -> Token:
        """Get current token."""
        if self.pos >= len(self.tokens):
            return self.tokens[-1]  # EOF
        return self.tokens[self.pos]

    def _peek(self, offset: int = 0) -> Token:
        """Peek at token at current position + offset."""
        idx = self.pos + offset
        if idx >= len(self.tokens):
            return self.tokens[-1]  # EOF
        return self.tokens[idx]

    def _is_at_end(self) -> bool:
        return self._current().type == TokenType.EOF

    def _check(self, token_type: TokenType) -> bool:
        return self._current().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token."""
        token = self._current()
        if not self._is_at_end():
            self.pos += 1
        return token

    def _consume(self, token_type: TokenType, expected: str) -> Token:
        """Consume token of expected type, or raise error."""
        if self._check(token_type):
            return self._advance()
        self._error(expected)

    def _match(self, *token_types: TokenType) -> Optional[Token]:
        """Consume token if it matches any of the given types."""
        if self._current().type in token_types:
            return self._advance()
        return None

    def _source_line(self, span: SourceSpan) -> Optional[str]:
        return self._lexer.get_source_line(span.start.line)

    def _error(self, expected: str) -> None:
        """Raise a syntax error at the current token."""
        token = self._current()
        if token.type == TokenType.EOF:
            raise error_unexpected_end(expected, token.span, self._source_line(token.span))
        raise error_unexpected_token(expected, describe_token(token), token.span,
                                     self._source_line(token.span))

    def _span_from(self, start: Token) -> SourceSpan:
        """Create a span from start token to the end of the previous token."""
        end_token = self.tokens[max(0, self.pos - 1)]
        return SourceSpan(start.span.start, end_token.span.end)

    # =========================================================================
    # Expressions
    # =========================================================================

    def _parse_binary_expr(self, min_precedence: int) -> Node:
        """Parse binary expressions with precedence climbing."""
        if self._depth >= self.MAX_NESTING:
            span = self._current().span
            raise error_nesting_too_deep(self.MAX_NESTING, span, self._source_line(span))
        self._depth += 1
        try:
            left = self._parse_unary_expr()

            while True:
                op_token = self._current()
                precedence = self.PRECEDENCE.get(op_token.type)

                if precedence is None or precedence < min_precedence:
                    break

                self._advance()  # consume operator

                # Right-associative operators use same precedence, others use precedence + 1
                next_precedence = precedence if op_token.type in self.RIGHT_ASSOCIATIVE else precedence + 1
                right = self._parse_binary_expr(next_precedence)

                name, function = self.BINARY_NODES[op_token.type]
                left = BinaryNode(name, left, right, function)

            return left
        finally:
            self._depth -= 1

    def _parse_unary_expr(self) -> Node:
        """Parse a prefix sign; its operand extends over powers only."""
        op = self._match(TokenType.MINUS, TokenType.PLUS)
        if op is not None:
            operand = self._parse_binary_expr(self.UNARY_OPERAND_PRECEDENCE)
            name, function = self.UNARY_NODES[op.type]
            return UnaryNode(name, operand, function)
        return self._parse_primary_expr()

    def _parse_primary_expr(self) -> Node:
        token = self._current()

        if token.type == TokenType.NUMBER:
            self._advance()
            return ConstantNode(complex(token.value, 0.0))

        if token.type == TokenType.IMAGINARY:
            self._advance()
            return ConstantNode(complex(0.0, token.value))

        if token.type == TokenType.IDENTIFIER:
            if self._peek(1).type == TokenType.LPAREN:
                return self._parse_call()
            return self._parse_name()

        if token.type == TokenType.LPAREN:
            self._advance()
            inner = self._parse_binary_expr(0)
            self._consume(TokenType.RPAREN, "')'")
            return inner

        if token.type == TokenType.LBRACE:
            return self._parse_matrix()

        self._error("an expression")

    def _parse_call(self) -> Node:
        """Parse ``name(arg, ...)`` and resolve it by argument count."""
        name_token = self._advance()
        self._consume(TokenType.LPAREN, "'('")

        arguments: List[Node] = []
        if not self._check(TokenType.RPAREN):
            arguments.append(self._parse_binary_expr(0))
            while self._match(TokenType.COMMA):
                arguments.append(self._parse_binary_expr(0))
        self._consume(TokenType.RPAREN, "',' or ')'")

        span = self._span_from(name_token)
        factory = self.registry.resolve(name_token.value, len(arguments),
                                        span, self._source_line(span))
        return factory(arguments)

    def _parse_name(self) -> Node:
        """A bare name: a constant, or else a variable."""
        token = self._advance()
        name = token.value

        if self.registry.contains(name):
            arities = self.registry.arities(name)
            if 0 in arities:
                return self.registry.resolve(name, 0)([])
            raise error_arity_mismatch(name, 0, arities, token.span,
                                       self._source_line(token.span))

        if not self.allow_variables:
            raise error_unknown_identifier(name, token.span, self._source_line(token.span))
        return VariableNode(name)

    def _parse_matrix(self) -> Node:
        """Parse ``{a, b; c, d}``; every row must have the same length."""
        self._consume(TokenType.LBRACE, "'{'")
        rows: List[Node] = []

        if not self._match(TokenType.RBRACE):
            width: Optional[int] = None
            while True:
                row_start = self._current()
                elements = [self._parse_binary_expr(0)]
                while self._match(TokenType.COMMA):
                    elements.append(self._parse_binary_expr(0))

                if width is None:
                    width = len(elements)
                elif len(elements) != width:
                    span = self._span_from(row_start)
                    raise error_ragged_matrix(width, len(elements), span,
                                              self._source_line(span))
                rows.append(NAryNode(ROW, elements, build_row))

                if self._match(TokenType.SEMICOLON):
                    continue
                self._consume(TokenType.RBRACE, "',', ';' or '}'")
                break

        return NAryNode(MATRIX, rows, build_matrix)


def build_tree(text: str, registry: Optional[FunctionRegistry] = None,
               allow_variables: bool = True) -> ExpressionTree:
    """
    Convenience function to build an expression tree.

    Args:
        text: The expression text
        registry: Registry to resolve names against (the global one by default)
        allow_variables: Treat unknown bare names as variables

    Returns:
        The built ExpressionTree

    Raises:
        BuildError: If the text is malformed or names cannot be resolved
    """
    return TreeBuilder(registry, allow_variables).build(text)


def evaluate_expression(text: str, registry: Optional[FunctionRegistry] = None,
                        **bindings) -> Value:
    """Build ``text`` and evaluate it with the given variable bindings."""
    return build_tree(text, registry).evaluate(**bindings)
