"""
Unit tests for the dense complex matrix.
"""

import numpy as np
import pytest

from mathcore.errors import DimensionMismatchError, DomainError
from mathcore.linalg import CMatrix


class TestConstruction:

    def test_zero_matrix(self):
        m = CMatrix(2, 3)
        assert m.shape == (2, 3)
        assert m.size == 6
        assert all(z == 0 for z in m)

    def test_empty(self):
        m = CMatrix()
        assert m.is_empty
        assert m.shape == (0, 0)
        assert str(m) == "{}"

    def test_negative_dimensions(self):
        with pytest.raises(ValueError):
            CMatrix(-1, 2)

    def test_from_rows(self):
        m = CMatrix.from_rows([[1, 2], [3, 4]])
        assert m.shape == (2, 2)
        assert m[0, 1] == 2
        assert m[1, 0] == 3

    def test_ragged_rows(self):
        with pytest.raises(ValueError):
            CMatrix.from_rows([[1, 2], [3]])

    def test_from_array_1d_is_column(self):
        m = CMatrix.from_array([1, 2, 3])
        assert m.shape == (3, 1)

    def test_row_and_column(self):
        assert CMatrix.row([1, 2, 3]).shape == (1, 3)
        assert CMatrix.column([1, 2, 3]).shape == (3, 1)
        assert CMatrix.row([]).shape == (0, 0)

    def test_identity_and_diagonal(self):
        assert CMatrix.identity(2) == CMatrix.from_rows([[1, 0], [0, 1]])
        d = CMatrix.diagonal([5, 6], 2, 3)
        assert d == CMatrix.from_rows([[5, 0, 0], [0, 6, 0]])


class TestAccess:

    def test_index_out_of_range(self):
        m = CMatrix(2, 2)
        with pytest.raises(IndexError):
            m[2, 0]
        with pytest.raises(IndexError):
            m[0, -1] = 1

    def test_set_item(self):
        m = CMatrix(2, 2)
        m[1, 1] = 3 + 4j
        assert m[1, 1] == 3 + 4j

    def test_row_major_elements(self):
        m = CMatrix.from_rows([[1, 2], [3, 4]])
        assert m.elements() == [1, 2, 3, 4]
        assert m.flatten().shape == (4, 1)
        assert len(m) == 4

    def test_queries(self):
        assert CMatrix(3, 3).is_square
        assert not CMatrix(2, 3).is_square
        assert CMatrix(1, 4).is_vector
        assert CMatrix(4, 1).is_vector
        assert not CMatrix(2, 2).is_vector
        assert CMatrix.from_rows([[1, 2]]).is_real
        assert not CMatrix.from_rows([[1, 2j]]).is_real

    def test_copy_is_independent(self):
        m = CMatrix.from_rows([[1, 2]])
        c = m.copy()
        c[0, 0] = 9
        assert m[0, 0] == 1


class TestArithmetic:

    def test_add_sub(self):
        a = CMatrix.from_rows([[1, 2], [3, 4]])
        b = CMatrix.from_rows([[1, 1], [1, 1]])
        assert a + b == CMatrix.from_rows([[2, 3], [4, 5]])
        assert a - b == CMatrix.from_rows([[0, 1], [2, 3]])

    def test_add_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            CMatrix(2, 2) + CMatrix(3, 3)

    def test_scalar_broadcast(self):
        a = CMatrix.from_rows([[1, 2]])
        assert a + 1 == CMatrix.from_rows([[2, 3]])
        assert 1 - a == CMatrix.from_rows([[0, -1]])
        assert 2j * a == CMatrix.from_rows([[2j, 4j]])
        assert a / 2 == CMatrix.from_rows([[0.5, 1]])

    def test_divide_by_zero(self):
        with pytest.raises(DomainError):
            CMatrix.from_rows([[1]]) / 0

    def test_product(self):
        a = CMatrix.from_rows([[1, 2], [3, 4]])
        b = CMatrix.from_rows([[5], [6]])
        assert a * b == CMatrix.from_rows([[17], [39]])
        with pytest.raises(DimensionMismatchError):
            b * a

    def test_negate_and_hadamard(self):
        a = CMatrix.from_rows([[1, -2]])
        assert -a == CMatrix.from_rows([[-1, 2]])
        assert a.hadamard(a) == CMatrix.from_rows([[1, 4]])


class TestMatrixFunctions:

    def test_transpose_adjoint(self):
        a = CMatrix.from_rows([[1, 2j], [3, 4]])
        assert a.transpose() == CMatrix.from_rows([[1, 3], [2j, 4]])
        assert a.adjoint() == CMatrix.from_rows([[1, 3], [-2j, 4]])
        assert a.conjugate() == CMatrix.from_rows([[1, -2j], [3, 4]])

    def test_trace_determinant(self):
        a = CMatrix.from_rows([[1, 2], [3, 4]])
        assert a.trace() == 5
        assert abs(a.determinant() - (-2)) < 1e-12

    def test_inverse(self):
        a = CMatrix.from_rows([[4, 7], [2, 6]])
        assert (a * a.inverse()).close(CMatrix.identity(2))

    def test_singular_inverse(self):
        with pytest.raises(DomainError):
            CMatrix.from_rows([[1, 2], [2, 4]]).inverse()

    def test_non_square(self):
        with pytest.raises(DimensionMismatchError):
            CMatrix(2, 3).determinant()

    def test_power(self):
        a = CMatrix.from_rows([[1, 1], [0, 1]])
        assert a.power(3) == CMatrix.from_rows([[1, 3], [0, 1]])
        assert a.power(0) == CMatrix.identity(2)
        assert a.power(-1).close(CMatrix.from_rows([[1, -1], [0, 1]]))


class TestFormatting:

    def test_str(self):
        m = CMatrix.from_rows([[1, 2.5], [-1j, 3 + 4j]])
        assert str(m) == "{1, 2.5; -i, 3 + 4i}"

    def test_equality(self):
        assert CMatrix(1, 2) != CMatrix(2, 1)
        assert CMatrix.from_rows([[1, 2]]) == CMatrix.from_array(np.array([[1, 2]]))
