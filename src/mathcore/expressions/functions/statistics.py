"""
Statistical functions over the elements of a matrix.

A matrix argument is read in row-major order, so ``{1, 2; 3, 4}`` and
``{1; 2; 3; 4}`` describe the same data set.
"""

from typing import Callable, List, Optional

from ... import stats
from ...linalg import CMatrix
from ..coercion import (
    Value, as_complex_array, as_integer, as_real_array, as_real_vector,
)
from ..metadata import ArgumentKind, FunctionDescriptor, example, signature

CATEGORY = "Statistics"

REAL_DATA = (ArgumentKind.REAL_MATRIX, "data")
COMPLEX_DATA = (ArgumentKind.COMPLEX_MATRIX, "data")
COMPLEX_X = (ArgumentKind.COMPLEX_MATRIX, "x")
COMPLEX_Y = (ArgumentKind.COMPLEX_MATRIX, "y")
ORDER = (ArgumentKind.INTEGER, "order")


def _over_real(name: str, function: Callable) -> Callable[[Value], Value]:
    def apply(value: Value) -> Value:
        return complex(function(as_real_array(value, name)))
    return apply


def _over_complex(name: str, function: Callable) -> Callable[[Value], Value]:
    def apply(value: Value) -> Value:
        return complex(function(as_complex_array(value, name)))
    return apply


def _with_order(name: str, function: Callable) -> Callable[[Value, Value], Value]:
    def apply(data: Value, order: Value) -> Value:
        return complex(function(as_complex_array(data, name), as_integer(order, name)))
    return apply


def _paired(name: str, function: Callable) -> Callable[[Value, Value], Value]:
    def apply(x: Value, y: Value) -> Value:
        return complex(function(as_complex_array(x, name), as_complex_array(y, name)))
    return apply


def _histogram(arguments: List[Optional[Value]]) -> Value:
    """
    Relative frequencies as a column.

    The second argument is either an interval count (a scalar) or the
    interval edges (a real vector).
    """
    data = as_real_array(arguments[0], "hist")
    intervals = arguments[1]
    if intervals is None:
        frequencies = stats.histogram(data)
    elif isinstance(intervals, CMatrix) and intervals.size > 1:
        frequencies = stats.histogram_edges(data, as_real_vector(intervals, "hist"))
    else:
        frequencies = stats.histogram(data, as_integer(intervals, "hist"))
    return CMatrix.column(frequencies)


def _descriptor(name: str, display_name: str, section: str, description: str,
                signatures, examples) -> FunctionDescriptor:
    return FunctionDescriptor(
        name=name,
        display_name=display_name,
        category=CATEGORY,
        section=section,
        description=description,
        signatures=tuple(signatures),
        examples=tuple(examples),
    )


def register(registry) -> None:
    # --- Averages ---

    registry.register_unary(
        _descriptor("median", "Median", "Averages",
                    "Middle value of the sorted data; the mean of the two middle "
                    "values when the count is even.",
                    [signature(REAL_DATA)],
                    [example("median({2; 1; 5; 8; -11})", "2"),
                     example("median({1, 5; -1.2, 16})", "3")]),
        _over_real("median", stats.median))
    registry.register_unary(
        _descriptor("mean", "Arithmetic mean", "Averages",
                    "Sum of the values divided by their count.",
                    [signature(COMPLEX_DATA)],
                    [example("mean({2i; -1; 2.2; 0.6; -11})", "-1.84 + 0.4i"),
                     example("mean({6, 5; -1.2 + 13i, 16})", "6.45 + 3.25i")]),
        _over_complex("mean", stats.mean))
    registry.register_unary(
        _descriptor("gmean", "Geometric mean", "Averages",
                    "n-th root of the product of n non-negative values.",
                    [signature(REAL_DATA)],
                    [example("gmean({2; 26; 2.2; 1; 1.1})", "2.63004840706915"),
                     example("gmean({0, 5; 1.2, 16})", "0")]),
        _over_real("gmean", stats.geometric_mean))
    registry.register_unary(
        _descriptor("hmean", "Harmonic mean", "Averages",
                    "Count divided by the sum of reciprocals of positive values.",
                    [signature(REAL_DATA)],
                    [example("hmean({2; 26; 2.2; 1; 1.1})", "1.72289156626506"),
                     example("hmean({1, 5; 1.2, 16})", "1.90854870775348")]),
        _over_real("hmean", stats.harmonic_mean))
    registry.register_unary(
        _descriptor("mode", "Mode", "Averages",
                    "Most frequent value; ties go to the value seen first.",
                    [signature(COMPLEX_DATA)],
                    [example("mode({-2; 33; 22.2i; 15; 33})", "33"),
                     example("mode({1, 5; 1, 16})", "1")]),
        _over_complex("mode", stats.mode))

    # --- Dispersion ---

    registry.register_unary(
        _descriptor("pvar", "Population variance", "Dispersion",
                    "Mean squared modulus of the deviations from the mean.",
                    [signature(COMPLEX_DATA)],
                    [example("pvar({2; 3; 6; 8})", "5.6875"),
                     example("pvar({-2i, 18; 3.8, 3 - 6i})", "54.42"),
                     example("pvar({5})", "0")]),
        _over_complex("pvar", stats.population_variance))
    registry.register_unary(
        _descriptor("svar", "Sample variance", "Dispersion",
                    "Unbiased variance estimate (divides by n - 1).",
                    [signature(COMPLEX_DATA)],
                    [example("svar({2; -13; 0; 8})", "78.25"),
                     example("svar({2, 2.8; -4.7, -2 - 3.5i})", "15.405"),
                     example("svar({-8i})", "0")]),
        _over_complex("svar", stats.sample_variance))
    registry.register_unary(
        _descriptor("pstdev", "Population standard deviation", "Dispersion",
                    "Square root of the population variance.",
                    [signature(COMPLEX_DATA)],
                    [example("pstdev({2; 3; 6; 8})", "2.38484800354236"),
                     example("pstdev({-2i, 18; 3.8, 3 - 6i})", "7.3769912566032"),
                     example("pstdev({5})", "0")]),
        _over_complex("pstdev", stats.population_standard_deviation))
    registry.register_unary(
        _descriptor("sstdev", "Sample standard deviation", "Dispersion",
                    "Square root of the sample variance.",
                    [signature(COMPLEX_DATA)],
                    [example("sstdev({2; -13; 0; 8})", "8.84590300647707"),
                     example("sstdev({2, 2.8; -4.7, -2 - 3.5i})", "3.92492038135807"),
                     example("sstdev({12})", "0")]),
        _over_complex("sstdev", stats.sample_standard_deviation))

    # --- Shape ---

    registry.register_unary(
        _descriptor("pskew", "Population skewness", "Shape",
                    "Third central moment over the second central moment to the power 1.5.",
                    [signature(COMPLEX_DATA)],
                    [example("pskew({2.2; -6; 0; 6})", "-0.349105920180674"),
                     example("pskew({-2i, 18; 3.8, 3 - 6i})",
                             "1.32062163212182 - 0.023737045200059i")]),
        _over_complex("pskew", stats.population_skewness))
    registry.register_unary(
        _descriptor("sskew", "Sample skewness", "Shape",
                    "Bias-adjusted skewness estimate; needs at least three values.",
                    [signature(COMPLEX_DATA)],
                    [example("sskew({0.4; -6; 4; 6})", "-0.984814784355962"),
                     example("sskew({-4i + 5, 1.3; 13.1, 3 - 6i})",
                             "4.03612644357173 + 0.295132430675187i")]),
        _over_complex("sskew", stats.sample_skewness))
    registry.register_unary(
        _descriptor("pkurt", "Population kurtosis", "Shape",
                    "Excess kurtosis: fourth central moment over the squared second "
                    "central moment, minus 3.",
                    [signature(COMPLEX_DATA)],
                    [example("pkurt({-14; 13; 2; -66})", "-0.928968973993598"),
                     example("pkurt({-22, 2 - 18.4i; 0, 3})",
                             "-1.81674986052611 + 2.79477015182896i")]),
        _over_complex("pkurt", stats.population_kurtosis))
    registry.register_unary(
        _descriptor("skurt", "Sample kurtosis", "Shape",
                    "Bias-adjusted excess kurtosis estimate; needs at least four values.",
                    [signature(COMPLEX_DATA)],
                    [example("skurt({-14; 13; 2; -66})", "2.03273269504801"),
                     example("skurt({-22, 2 - 18.4i; 0, 3})",
                             "-4.62562395394586 + 20.9607761387172i")]),
        _over_complex("skurt", stats.sample_kurtosis))

    # --- Moments ---

    registry.register_binary(
        _descriptor("moment", "Raw moment", "Moments",
                    "Mean of the values raised to the given integer order.",
                    [signature(COMPLEX_DATA, ORDER)],
                    [example("moment({-14; 13; 2; -66}, 2)", "1181.25"),
                     example("moment({-22, 2 - 18.4i; 0, 3}, 3)", "-3161.09 + 1502.176i")]),
        _with_order("moment", stats.population_moment))
    registry.register_binary(
        _descriptor("cmoment", "Central moment", "Moments",
                    "Mean of the deviations from the mean raised to the given integer order.",
                    [signature(COMPLEX_DATA, ORDER)],
                    [example("cmoment({-14; 13; 2; -66}, 2)", "917.1875"),
                     example("cmoment({-22, 2 - 18.4i; 0, 3}, 3)", "-2016.09375 + 1510.341i")]),
        _with_order("cmoment", stats.population_central_moment))

    # --- Bivariate ---

    registry.register_binary(
        _descriptor("pcov", "Population covariance", "Bivariate",
                    "Mean of (x - mean x) times the conjugate of (y - mean y).",
                    [signature(COMPLEX_X, COMPLEX_Y)],
                    [example("pcov({-14; 13; 2; -66}, {1; 1.4; -111; 5.5})", "-564.04375"),
                     example("pcov({-22, 2 - 18.4i; 0, 3}, {2.4i, 3.3; 44, -0.2})",
                             "54.30375 + 49.635i")]),
        _paired("pcov", stats.population_covariance))
    registry.register_binary(
        _descriptor("scov", "Sample covariance", "Bivariate",
                    "Unbiased covariance estimate (divides by n - 1).",
                    [signature(COMPLEX_X, COMPLEX_Y)],
                    [example("scov({-14; 13; 2; -66}, {1; 1.4; -111; 6.6})", "-770.3"),
                     example("scov({-22, 2 - 18.4i; 0, 3}, {2.4i, 3.3; 44, -0.2})",
                             "72.405 + 66.18i")]),
        _paired("scov", stats.sample_covariance))
    registry.register_binary(
        _descriptor("corr", "Correlation", "Bivariate",
                    "Pearson correlation coefficient.",
                    [signature(COMPLEX_X, COMPLEX_Y)],
                    [example("corr({-14; 13; 2; -66}, {1; 1.4; -111; 6.6})", "-0.3860576577199"),
                     example("corr({-22, 2 - 18.4i; 0, 3}, {-21, 2.5 - 18.4i; 3, 2})",
                             "0.993950652653727 + 0.0102431643927006i")]),
        _paired("corr", stats.correlation))

    # --- Sums and products ---

    registry.register_unary(
        _descriptor("sum", "Sum", "Sums and Products", "Sum of all elements.",
                    [signature(COMPLEX_DATA)],
                    [example("sum({-12; 15; 2; 6.6})", "11.6"),
                     example("sum({-14i, 2 - 0.2i; 2, 3 - 3i})", "7 - 17.2i")]),
        _over_complex("sum", stats.total))
    registry.register_unary(
        _descriptor("sumsq", "Sum of squares", "Sums and Products",
                    "Sum of the squares of all elements.",
                    [signature(COMPLEX_DATA)],
                    [example("sumsq({-12; 15; 2; 6.6})", "416.56"),
                     example("sumsq({-14i, 2 - 0.2i; 2, 3 - 3i})", "-188.04 - 18.8i")]),
        _over_complex("sumsq", stats.sum_of_squares))
    registry.register_unary(
        _descriptor("prod", "Product", "Sums and Products", "Product of all elements.",
                    [signature(COMPLEX_DATA)],
                    [example("prod({-12; 15; 2; 6.6})", "-2376"),
                     example("prod({-12; 15; 0; 6.6})", "0"),
                     example("prod({-14i, 2 - 0.2i; 2, 3 - 3i})", "-184.8 - 151.2i")]),
        _over_complex("prod", stats.product))

    # --- Distribution ---

    registry.register_nary(
        _descriptor("hist", "Histogram", "Distribution",
                    "Relative frequencies over equal-width intervals spanning the data "
                    "(1 + log2(n) of them by default) or over the given interval edges.",
                    [signature(REAL_DATA),
                     signature(REAL_DATA, (ArgumentKind.INTEGER, "intervals")),
                     signature(REAL_DATA, (ArgumentKind.REAL_VECTOR, "edges"))],
                    [example("hist({15; 28; 6.6; 6; -12})", "{0.2; 0.4; 0.4}"),
                     example("hist({-12; -3; 6.6; -10}, 2)", "{0.75; 0.25}"),
                     example("hist({-12; 15; 0; 6.6}, {-15; 5; 30})", "{0.5; 0.5}")]),
        _histogram)
