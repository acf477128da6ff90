"""
Views of evaluated values.

A value is either a complex scalar or a ``CMatrix``. Functions ask for the
view they need (a real number, an integer, a vector, a square matrix...) and
a value that cannot provide it raises ``TypeMismatchError`` naming its actual
kind. 1x1 matrices and scalars are interchangeable through these helpers.
"""

from numbers import Number
from typing import List, Optional, Union

from ..linalg import CMatrix
from ..scalar import format_complex, is_integer
from .errors import TypeMismatchError

Value = Union[complex, CMatrix]


def kind_of(value) -> str:
    """Describe a value's kind for error messages."""
    if value is None:
        return "absent argument"
    if isinstance(value, CMatrix):
        element = "real" if value.is_real else "complex"
        return f"{element} {value.row_count}x{value.col_count} matrix"
    if isinstance(value, Number):
        return "real scalar" if complex(value).imag == 0 else "complex scalar"
    return type(value).__name__


def as_matrix(value: Value) -> CMatrix:
    """A matrix view; a scalar becomes a 1x1 matrix."""
    if isinstance(value, CMatrix):
        return value
    if isinstance(value, Number):
        return CMatrix.from_rows([[value]])
    raise TypeMismatchError("matrix", kind_of(value))


def as_complex(value: Value, context: Optional[str] = None) -> complex:
    """A scalar view; a 1x1 matrix yields its only element."""
    if isinstance(value, CMatrix):
        if value.shape == (1, 1):
            return value[0, 0]
        raise TypeMismatchError("scalar", kind_of(value), context)
    if isinstance(value, Number):
        return complex(value)
    raise TypeMismatchError("scalar", kind_of(value), context)


def as_real(value: Value, context: Optional[str] = None) -> float:
    z = as_complex(value, context)
    if z.imag != 0:
        raise TypeMismatchError("real scalar", kind_of(value), context)
    return z.real


def as_integer(value: Value, context: Optional[str] = None) -> int:
    z = as_complex(value, context)
    if not is_integer(z):
        raise TypeMismatchError("integer", kind_of(value), context)
    return int(z.real)


def as_complex_array(value: Value, context: Optional[str] = None) -> List[complex]:
    """All elements in row-major order; a scalar is a single element."""
    if isinstance(value, CMatrix):
        return value.elements()
    return [as_complex(value, context)]


def as_real_array(value: Value, context: Optional[str] = None) -> List[float]:
    """All elements in row-major order, every one of them real."""
    elements = as_complex_array(value, context)
    if any(z.imag != 0 for z in elements):
        raise TypeMismatchError("real values", kind_of(value), context)
    return [z.real for z in elements]


def as_real_vector(value: Value, context: Optional[str] = None) -> List[float]:
    """The elements of a real row vector, column vector or scalar."""
    if isinstance(value, CMatrix) and not value.is_vector:
        raise TypeMismatchError("real vector", kind_of(value), context)
    try:
        return as_real_array(value, context)
    except TypeMismatchError:
        raise TypeMismatchError("real vector", kind_of(value), context)


def as_square_matrix(value: Value, context: Optional[str] = None) -> CMatrix:
    matrix = as_matrix(value)
    if not matrix.is_square:
        raise TypeMismatchError("square matrix", kind_of(value), context)
    return matrix


def format_value(value: Value) -> str:
    """The culture-invariant text form of a result."""
    if isinstance(value, CMatrix):
        return str(value)
    return format_complex(as_complex(value))


def results_match(actual: str, expected: str) -> bool:
    """Compare two formatted results, ignoring all whitespace."""
    return "".join(actual.split()) == "".join(expected.split())
