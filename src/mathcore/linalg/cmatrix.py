"""
Dense complex matrix.

A ``CMatrix`` wraps a two-dimensional numpy ``complex128`` array in row-major
order. The array always has shape ``(row_count, col_count)`` so the backing
store holds exactly ``row_count * col_count`` elements; either dimension may
be zero.

Element-wise operations require identical shapes, the matrix product requires
``left.col_count == right.row_count``; anything else raises
``DimensionMismatchError``. Scalars (any Python or numpy number) combine with
a matrix element by element.
"""

from numbers import Number
from typing import Iterable, Iterator, List, Sequence, Tuple

import numpy as np

from ..errors import DimensionMismatchError, DomainError
from ..scalar import epsilon, format_complex


def _is_scalar(x) -> bool:
    return isinstance(x, (Number, np.number)) and not isinstance(x, bool)


class CMatrix:
    """
    Rectangular matrix of complex numbers.

    Usage:
        m = CMatrix.from_rows([[1, 2], [3, 4]])
        m[0, 1]            # (2+0j)
        (m * m.inverse()).close(CMatrix.identity(2))
    """

    __slots__ = ("_data",)

    def __init__(self, rows: int = 0, cols: int = 0):
        if rows < 0 or cols < 0:
            raise ValueError(f"matrix dimensions must be non-negative, got {rows}x{cols}")
        self._data = np.zeros((rows, cols), dtype=np.complex128)

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_array(cls, array) -> "CMatrix":
        """Copy a 2-D array-like; a 1-D array becomes a column."""
        data = np.array(array, dtype=np.complex128)
        if data.ndim == 0:
            data = data.reshape(1, 1)
        elif data.ndim == 1:
            data = data.reshape(-1, 1)
        elif data.ndim != 2:
            raise ValueError(f"expected a 2-D array, got {data.ndim} dimensions")
        m = cls.__new__(cls)
        m._data = data
        return m

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Number]]) -> "CMatrix":
        """Build a matrix from a list of equally long rows."""
        rows = [list(r) for r in rows]
        if not rows:
            return cls(0, 0)
        width = len(rows[0])
        for r in rows:
            if len(r) != width:
                raise ValueError("all rows must have the same number of elements")
        m = cls(len(rows), width)
        for i, r in enumerate(rows):
            for j, value in enumerate(r):
                m._data[i, j] = complex(value)
        return m

    @classmethod
    def column(cls, values: Iterable[Number]) -> "CMatrix":
        """A single-column matrix (column vector)."""
        return cls.from_rows([[v] for v in values])

    @classmethod
    def row(cls, values: Iterable[Number]) -> "CMatrix":
        """A single-row matrix (row vector)."""
        values = list(values)
        m = cls(1 if values else 0, len(values))
        for j, v in enumerate(values):
            m._data[0, j] = complex(v)
        return m

    @classmethod
    def identity(cls, n: int) -> "CMatrix":
        return cls.from_array(np.eye(n, dtype=np.complex128))

    @classmethod
    def diagonal(cls, values: Sequence[Number], rows: int, cols: int) -> "CMatrix":
        """An rows x cols matrix with ``values`` on the main diagonal."""
        m = cls(rows, cols)
        for i, v in enumerate(values):
            m._data[i, i] = complex(v)
        return m

    # =========================================================================
    # Shape and element access
    # =========================================================================

    @property
    def row_count(self) -> int:
        return self._data.shape[0]

    @property
    def col_count(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.row_count, self.col_count)

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def is_square(self) -> bool:
        return self.row_count == self.col_count

    @property
    def is_vector(self) -> bool:
        """True for a single row or a single column."""
        return self.row_count == 1 or self.col_count == 1

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    @property
    def is_real(self) -> bool:
        return bool(np.all(self._data.imag == 0))

    def _check_index(self, i: int, j: int) -> None:
        if not (0 <= i < self.row_count and 0 <= j < self.col_count):
            raise IndexError(
                f"index [{i}, {j}] out of range for {self.row_count}x{self.col_count} matrix"
            )

    def __getitem__(self, index: Tuple[int, int]) -> complex:
        i, j = index
        self._check_index(i, j)
        return complex(self._data[i, j])

    def __setitem__(self, index: Tuple[int, int], value: Number) -> None:
        i, j = index
        self._check_index(i, j)
        self._data[i, j] = complex(value)

    def elements(self) -> List[complex]:
        """All elements in row-major order."""
        return [complex(z) for z in self._data.ravel()]

    def flatten(self) -> "CMatrix":
        """A column holding every element in row-major order."""
        return CMatrix.from_array(self._data.ravel())

    def __iter__(self) -> Iterator[complex]:
        return iter(self.elements())

    def __len__(self) -> int:
        return self.size

    def to_array(self) -> np.ndarray:
        """A copy of the backing array."""
        return self._data.copy()

    def copy(self) -> "CMatrix":
        return CMatrix.from_array(self._data)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def _require_same_shape(self, other: "CMatrix", operation: str) -> None:
        if self.shape != other.shape:
            raise DimensionMismatchError(operation, self.shape, other.shape)

    def __add__(self, other):
        if isinstance(other, CMatrix):
            self._require_same_shape(other, "addition")
            return CMatrix.from_array(self._data + other._data)
        if _is_scalar(other):
            return CMatrix.from_array(self._data + complex(other))
        return NotImplemented

    def __radd__(self, other):
        if _is_scalar(other):
            return CMatrix.from_array(complex(other) + self._data)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, CMatrix):
            self._require_same_shape(other, "subtraction")
            return CMatrix.from_array(self._data - other._data)
        if _is_scalar(other):
            return CMatrix.from_array(self._data - complex(other))
        return NotImplemented

    def __rsub__(self, other):
        if _is_scalar(other):
            return CMatrix.from_array(complex(other) - self._data)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, CMatrix):
            if self.col_count != other.row_count:
                raise DimensionMismatchError("multiplication", self.shape, other.shape)
            return CMatrix.from_array(self._data @ other._data)
        if _is_scalar(other):
            return CMatrix.from_array(self._data * complex(other))
        return NotImplemented

    def __rmul__(self, other):
        if _is_scalar(other):
            return CMatrix.from_array(complex(other) * self._data)
        return NotImplemented

    def __truediv__(self, other):
        if _is_scalar(other):
            if other == 0:
                raise DomainError("division by zero")
            return CMatrix.from_array(self._data / complex(other))
        return NotImplemented

    def __neg__(self) -> "CMatrix":
        return CMatrix.from_array(-self._data)

    def __pos__(self) -> "CMatrix":
        return self.copy()

    def hadamard(self, other: "CMatrix") -> "CMatrix":
        """Element-wise product."""
        self._require_same_shape(other, "element-wise multiplication")
        return CMatrix.from_array(self._data * other._data)

    # =========================================================================
    # Matrix functions
    # =========================================================================

    def transpose(self) -> "CMatrix":
        return CMatrix.from_array(self._data.T)

    def conjugate(self) -> "CMatrix":
        return CMatrix.from_array(self._data.conj())

    def adjoint(self) -> "CMatrix":
        """Conjugate transpose."""
        return CMatrix.from_array(self._data.conj().T)

    def _require_square(self, operation: str) -> None:
        if not self.is_square:
            raise DimensionMismatchError(operation, self.shape)

    def trace(self) -> complex:
        self._require_square("trace")
        return complex(np.trace(self._data))

    def determinant(self) -> complex:
        self._require_square("determinant")
        return complex(np.linalg.det(self._data))

    def inverse(self) -> "CMatrix":
        self._require_square("inverse")
        try:
            return CMatrix.from_array(np.linalg.inv(self._data))
        except np.linalg.LinAlgError:
            raise DomainError("matrix is singular")

    def power(self, k: int) -> "CMatrix":
        """Integer power of a square matrix; negative powers use the inverse."""
        self._require_square("power")
        if k < 0:
            return self.inverse().power(-k)
        return CMatrix.from_array(np.linalg.matrix_power(self._data, k))

    # =========================================================================
    # Comparison and formatting
    # =========================================================================

    def __eq__(self, other) -> bool:
        if not isinstance(other, CMatrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def close(self, other: "CMatrix", eps: float = epsilon) -> bool:
        """Same shape and every element within eps."""
        if self.shape != other.shape:
            return False
        return bool(np.all(np.abs(self._data - other._data) < eps))

    def __str__(self) -> str:
        if self.is_empty:
            return "{}"
        rows = []
        for i in range(self.row_count):
            rows.append(", ".join(format_complex(z) for z in self._data[i]))
        return "{" + "; ".join(rows) + "}"

    def __repr__(self) -> str:
        return f"CMatrix({self})"
