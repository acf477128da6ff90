"""
Unit tests for the expression lexer.
"""

import pytest
from mathcore.expressions import tokenize, Lexer, TokenType, ExpressionSyntaxError


def types_of(text):
    return [t.type for t in tokenize(text)]


class TestLexerBasics:
    """Test basic lexer functionality."""

    def test_empty_source(self):
        """Empty source produces only EOF."""
        tokens = tokenize("")
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.EOF

    def test_whitespace_only(self):
        assert types_of("  \t \n ") == [TokenType.EOF]

    def test_operators_and_delimiters(self):
        assert types_of("+ - * / ^ ( ) { } , ;") == [
            TokenType.PLUS, TokenType.MINUS, TokenType.STAR, TokenType.SLASH,
            TokenType.CARET, TokenType.LPAREN, TokenType.RPAREN, TokenType.LBRACE,
            TokenType.RBRACE, TokenType.COMMA, TokenType.SEMICOLON, TokenType.EOF,
        ]

    def test_identifier_value(self):
        tokens = tokenize("sum_sq2")
        assert tokens[0].type == TokenType.IDENTIFIER
        assert tokens[0].value == "sum_sq2"

    def test_position_tracking(self):
        """Token positions are tracked correctly."""
        tokens = tokenize("1 + sin(x)")
        assert tokens[0].span.start.column == 1
        assert tokens[2].span.start.column == 5
        assert tokens[2].span.start.offset == 4
        assert tokens[2].span.end.column == 8

    def test_multiline_position_tracking(self):
        tokens = tokenize("1 +\n  2")
        assert tokens[2].span.start.line == 2
        assert tokens[2].span.start.column == 3


class TestNumbers:
    """Test numeric literals."""

    @pytest.mark.parametrize("text,value", [
        ("42", 42.0),
        ("3.14", 3.14),
        ("1e3", 1000.0),
        ("2.5E-2", 0.025),
        ("6e+1", 60.0),
        ("0", 0.0),
    ])
    def test_real_literals(self, text, value):
        tokens = tokenize(text)
        assert tokens[0].type == TokenType.NUMBER
        assert tokens[0].value == value
        assert tokens[0].lexeme == text

    def test_imaginary_literal(self):
        tokens = tokenize("2.5i")
        assert tokens[0].type == TokenType.IMAGINARY
        assert tokens[0].value == 2.5
        assert tokens[0].lexeme == "2.5i"

    def test_imaginary_unit(self):
        tokens = tokenize("i")
        assert tokens[0].type == TokenType.IMAGINARY
        assert tokens[0].value == 1.0

    def test_i_inside_identifier(self):
        tokens = tokenize("sin")
        assert tokens[0].type == TokenType.IDENTIFIER

    def test_number_followed_by_identifier_starting_with_i(self):
        """'2im' is 2 * im, not an imaginary literal."""
        assert types_of("2im") == [
            TokenType.NUMBER, TokenType.STAR, TokenType.IDENTIFIER, TokenType.EOF,
        ]

    def test_e_without_digits_is_not_an_exponent(self):
        """'2e' is 2 * e."""
        tokens = tokenize("2e")
        assert [t.type for t in tokens] == [
            TokenType.NUMBER, TokenType.STAR, TokenType.IDENTIFIER, TokenType.EOF,
        ]
        assert tokens[2].value == "e"

    def test_trailing_decimal_point(self):
        with pytest.raises(ExpressionSyntaxError) as exc_info:
            tokenize("2.")
        assert exc_info.value.diagnostic.code == "E002"


class TestImplicitMultiplication:
    """Implicit multiplication tokens are inserted between operands."""

    @pytest.mark.parametrize("text", ["2x", "3(4)", "(1)(2)", "2{1}", "(1)2", "2i x", "{1}{2}"])
    def test_inserted(self, text):
        tokens = tokenize(text)
        stars = [t for t in tokens if t.type == TokenType.STAR]
        assert len(stars) == 1
        assert stars[0].is_implicit
        assert stars[0].lexeme == ""

    @pytest.mark.parametrize("text", ["sin(x)", "x + 2", "2 * x", "f(1, 2)", "{1; 2}", "-2"])
    def test_not_inserted(self, text):
        assert not any(t.is_implicit for t in tokenize(text))

    def test_explicit_star_is_not_implicit(self):
        tokens = tokenize("2 * 3")
        assert not tokens[1].is_implicit

    def test_span_of_inserted_token(self):
        tokens = tokenize("2x")
        star = tokens[1]
        assert star.span.start == star.span.end
        assert star.span.start.offset == 1

    def test_raw_iteration_has_no_inserted_tokens(self):
        types = [t.type for t in Lexer("2x")]
        assert types == [TokenType.NUMBER, TokenType.IDENTIFIER, TokenType.EOF]


class TestLexerErrors:

    def test_unexpected_character(self):
        with pytest.raises(ExpressionSyntaxError) as exc_info:
            tokenize("1 + $")
        error = exc_info.value
        assert error.diagnostic.code == "E001"
        assert error.offset == 4
        assert "'$'" in error.diagnostic.message

    def test_error_formatting_points_at_column(self):
        with pytest.raises(ExpressionSyntaxError) as exc_info:
            tokenize("12 # 3")
        text = exc_info.value.diagnostic.format()
        assert "1:4: error[E001]" in text
        assert "  | 12 # 3" in text
        assert "  |    ^" in text
