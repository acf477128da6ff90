"""Matrix functions and queries backed by the singular value decomposition."""

from ...errors import DomainError
from ...linalg import CMatrix, CSVD
from ..coercion import Value, as_integer, as_matrix, as_square_matrix
from ..metadata import ArgumentKind, FunctionDescriptor, example, signature

CATEGORY = "Linear Algebra"

A = (ArgumentKind.COMPLEX_MATRIX, "A")


def _transpose(value: Value) -> Value:
    return as_matrix(value).transpose()


def _adjoint(value: Value) -> Value:
    return as_matrix(value).adjoint()


def _trace(value: Value) -> Value:
    return as_square_matrix(value, "trace").trace()


def _determinant(value: Value) -> Value:
    return as_square_matrix(value, "det").determinant()


def _inverse(value: Value) -> Value:
    return as_square_matrix(value, "inverse").inverse()


def _identity(value: Value) -> Value:
    n = as_integer(value, "identity")
    if n < 0:
        raise DomainError("identity size must be non-negative")
    return CMatrix.identity(n)


def _singular_values(value: Value) -> Value:
    return CMatrix.column(CSVD(as_matrix(value), values_only=True).singular_values)


def _norm2(value: Value) -> Value:
    return complex(CSVD(as_matrix(value), values_only=True).norm2())


def _condition(value: Value) -> Value:
    return complex(CSVD(as_matrix(value), values_only=True).condition())


def _rank(value: Value) -> Value:
    return complex(CSVD(as_matrix(value), values_only=True).rank())


def _pseudo_inverse(value: Value) -> Value:
    return CSVD(as_matrix(value)).pseudo_inverse()


def _descriptor(name, display_name, section, description, params, examples) -> FunctionDescriptor:
    return FunctionDescriptor(
        name=name,
        display_name=display_name,
        category=CATEGORY,
        section=section,
        description=description,
        signatures=(signature(*params),),
        examples=tuple(examples),
    )


def register(registry) -> None:
    registry.register_unary(
        _descriptor("transpose", "Transpose", "Matrix Operations",
                    "Rows and columns exchanged.", [A],
                    [example("transpose({1,2;3,4})", "{1, 3; 2, 4}")]),
        _transpose)
    registry.register_unary(
        _descriptor("adjoint", "Adjoint", "Matrix Operations",
                    "Conjugate transpose.", [A],
                    [example("adjoint({i,2})", "{-i; 2}")]),
        _adjoint)
    registry.register_unary(
        _descriptor("trace", "Trace", "Matrix Operations",
                    "Sum of the main diagonal of a square matrix.", [A],
                    [example("trace({1,2;3,4})", "5")]),
        _trace)
    registry.register_unary(
        _descriptor("det", "Determinant", "Matrix Operations",
                    "Determinant of a square matrix.", [A],
                    [example("det({1,2;3,4})", "-2")]),
        _determinant)
    registry.register_unary(
        _descriptor("inverse", "Inverse", "Matrix Operations",
                    "Inverse of a non-singular square matrix.", [A],
                    [example("inverse({2,0;0,4})", "{0.5, 0; 0, 0.25}")]),
        _inverse)
    registry.register_unary(
        _descriptor("identity", "Identity matrix", "Matrix Operations",
                    "The n x n identity matrix.", [(ArgumentKind.INTEGER, "n")],
                    [example("identity(2)", "{1, 0; 0, 1}")]),
        _identity)

    registry.register_unary(
        _descriptor("sv", "Singular values", "Decompositions",
                    "Singular values as a column, largest first.", [A],
                    [example("sv({3,0;0,4})", "{4; 3}")]),
        _singular_values)
    registry.register_unary(
        _descriptor("norm2", "Two norm", "Decompositions",
                    "Largest singular value.", [A],
                    [example("norm2({3,0;0,4})", "4")]),
        _norm2)
    registry.register_unary(
        _descriptor("cond", "Condition number", "Decompositions",
                    "Ratio of the largest to the smallest singular value; "
                    "Infinity for a rank-deficient matrix.", [A],
                    [example("cond({2,0;0,1})", "2")]),
        _condition)
    registry.register_unary(
        _descriptor("rank", "Rank", "Decompositions",
                    "Number of singular values above max(m, n) * s1 * machine epsilon.",
                    [A],
                    [example("rank({1,2;2,4})", "1"), example("rank({1,0;0,1})", "2")]),
        _rank)
    registry.register_unary(
        _descriptor("pinv", "Pseudoinverse", "Decompositions",
                    "Moore-Penrose inverse computed from the singular value decomposition.",
                    [A],
                    [example("pinv({2,0;0,4})", "{0.5, 0; 0, 0.25}")]),
        _pseudo_inverse)
