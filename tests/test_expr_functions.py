"""
Tests for the built-in functions and constants, driven largely by the worked
examples every descriptor carries.
"""

import math

import pytest

from mathcore.errors import DimensionMismatchError, DomainError
from mathcore.expressions import (
    ArityMismatchError,
    TypeMismatchError,
    UnknownIdentifierError,
    build_tree,
    format_value,
    get_registry,
    results_match,
)
from mathcore.expressions.introspection import check_examples
from mathcore.linalg import CMatrix


def formatted(text, **bindings):
    return format_value(build_tree(text).evaluate(**bindings))


def all_examples():
    return [
        pytest.param(e.expression, e.result, id=f"{d.name}: {e.expression}")
        for d in get_registry().get_metadata()
        for e in d.examples
    ]


class TestWorkedExamples:
    """Every worked example evaluates to its documented result."""

    @pytest.mark.parametrize("expression,expected", all_examples())
    def test_example(self, expression, expected):
        assert results_match(formatted(expression), expected)

    def test_check_examples_reports_all_passed(self):
        results = check_examples()
        assert results
        assert [r for r in results if not r.passed] == []

    def test_every_signature_is_demonstrated(self):
        for d in get_registry().get_metadata():
            assert len(d.examples) >= len(d.signatures), d.name


class TestEndToEnd:

    @pytest.mark.parametrize("expression,expected", [
        ("2(3+4)", "14"),
        ("2i", "2i"),
        ("median({2;1;5;8;-11})", "2"),
        ("mean({2i;-1;2.2;0.6;-11})", "-1.84 + 0.4i"),
        ("pvar({2;3;6;8})", "5.6875"),
        ("sum({-12;15;2;6.6})", "11.6"),
        ("hist({15;28;6.6;6;-12})", "{0.2;0.4;0.4}"),
        ("{1,2;3,4}", "{1, 2; 3, 4}"),
        ("sqrt(-4) + 1", "1 + 2i"),
    ])
    def test_formatted_result(self, expression, expected):
        assert results_match(formatted(expression), expected)

    def test_imaginary_literal_is_scalar(self):
        value = build_tree("2i").evaluate()
        assert value == complex(0, 2)

    def test_matrix_element(self):
        assert build_tree("{1,2;3,4}").evaluate()[0, 1] == 2

    def test_arity_mismatch(self):
        with pytest.raises(ArityMismatchError):
            build_tree("sqrt(4, 2)")

    def test_unknown_identifier(self):
        with pytest.raises(UnknownIdentifierError):
            build_tree("nosuch(1)")

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            build_tree("{1,2;3,4} + {1,2,3;4,5,6;7,8,9}").evaluate()


class TestConstants:

    def test_values(self):
        assert build_tree("pi").evaluate() == pytest.approx(math.pi)
        assert build_tree("e").evaluate() == pytest.approx(math.e)
        assert build_tree("phi").evaluate() == pytest.approx((1 + math.sqrt(5)) / 2)
        assert build_tree("euler").evaluate() == pytest.approx(0.5772156649015329)
        assert build_tree("catalan").evaluate() == pytest.approx(0.915965594177219)

    def test_constants_have_arity_zero(self):
        registry = get_registry()
        for name in ("pi", "e", "phi", "euler", "catalan"):
            assert registry.arities(name) == [0]


class TestElementary:

    def test_logarithm_of_zero(self):
        with pytest.raises(DomainError):
            build_tree("ln(0)").evaluate()
        with pytest.raises(DomainError):
            build_tree("log(0)").evaluate()

    def test_matrix_argument_rejected(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            build_tree("sin({1, 2})").evaluate()
        assert "sin" in str(exc_info.value)

    def test_one_by_one_matrix_is_a_scalar(self):
        assert build_tree("sqrt({9})").evaluate() == 3

    def test_principal_branch(self):
        assert build_tree("arg(-1)").evaluate() == pytest.approx(math.pi)
        assert build_tree("sqrt(-1)").evaluate() == 1j


class TestStatisticsFunctions:

    def test_row_major_data(self):
        assert formatted("median({1,5;-1.2,16})") == "3"

    def test_real_functions_reject_complex_data(self):
        with pytest.raises(TypeMismatchError):
            build_tree("median({1; 2i})").evaluate()

    def test_hist_interval_count_must_be_integer(self):
        with pytest.raises(TypeMismatchError):
            build_tree("hist({1;2;3}, 1.5)").evaluate()

    def test_hist_edges_must_be_a_vector(self):
        with pytest.raises(TypeMismatchError):
            build_tree("hist({1;2;3}, {0,1;2,3})").evaluate()

    def test_covariance_lengths(self):
        with pytest.raises(DimensionMismatchError):
            build_tree("pcov({1;2}, {1;2;3})").evaluate()

    def test_empty_data(self):
        with pytest.raises(DomainError):
            build_tree("mean({})").evaluate()


class TestLinearAlgebraFunctions:

    def test_det_needs_square(self):
        with pytest.raises(TypeMismatchError):
            build_tree("det({1, 2})").evaluate()

    def test_singular_inverse(self):
        with pytest.raises(DomainError):
            build_tree("inverse({1,2;2,4})").evaluate()

    def test_cond_of_singular_matrix(self):
        assert formatted("cond({1,0;0,0})") == "Infinity"

    def test_pinv_reconstructs(self):
        a = build_tree("{1,2;2,4;3,6}").evaluate()
        p = build_tree("pinv({1,2;2,4;3,6})").evaluate()
        assert isinstance(p, CMatrix)
        assert p.shape == (2, 3)
        assert (a * p * a).close(a)


class TestSpecialFunctions:

    def test_gamma_pole(self):
        with pytest.raises(DomainError):
            build_tree("gamma(0)").evaluate()

    def test_zeta_pole(self):
        with pytest.raises(DomainError):
            build_tree("zeta(1)").evaluate()
