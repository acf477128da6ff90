"""
Singular value decomposition of a general complex matrix.

The factorization itself is delegated to LAPACK through
``numpy.linalg.svd``; this module fixes the contract around it:

- singular values are real, non-negative and sorted in descending order,
  ``min(m, n)`` of them;
- ``U`` is m x m and ``VH`` (the conjugate transpose of V) is n x n, with
  ``U * S * VH`` reproducing the input;
- rank and pseudoinverse treat every singular value at or below
  ``max(m, n) * s[0] * MACHINE_EPSILON`` as zero, so the threshold scales
  with both the size and the magnitude of the matrix.
"""

from typing import List, Optional

import numpy as np

from ..scalar import MACHINE_EPSILON
from .cmatrix import CMatrix


class CSVD:
    """
    Singular value decomposition ``A = U * S * VH``.

    Usage:
        svd = CSVD(a)
        svd.rank()
        svd.pseudo_inverse()

    Pass ``values_only=True`` to compute only the singular values.
    """

    def __init__(self, matrix: CMatrix, values_only: bool = False):
        self._m = matrix.row_count
        self._n = matrix.col_count
        self._values_only = values_only
        self._u: Optional[CMatrix] = None
        self._vh: Optional[CMatrix] = None

        a = matrix.to_array()
        if a.size == 0:
            self._s = np.zeros(0)
            if not values_only:
                self._u = CMatrix.identity(self._m)
                self._vh = CMatrix.identity(self._n)
            return

        if values_only:
            s = np.linalg.svd(a, compute_uv=False)
        else:
            u, s, vh = np.linalg.svd(a, full_matrices=True)
            self._u = CMatrix.from_array(u)
            self._vh = CMatrix.from_array(vh)

        # LAPACK already returns descending non-negative values; clamp the
        # sign of exact zeros so formatting never sees -0
        self._s = np.abs(np.asarray(s, dtype=float))

    # =========================================================================
    # Factors
    # =========================================================================

    @property
    def singular_values(self) -> List[float]:
        """The singular values, largest first."""
        return [float(x) for x in self._s]

    @property
    def u(self) -> CMatrix:
        """The m x m unitary matrix of left singular vectors."""
        self._require_factors()
        return self._u.copy()

    @property
    def vh(self) -> CMatrix:
        """The conjugate transpose of the n x n matrix of right singular vectors."""
        self._require_factors()
        return self._vh.copy()

    @property
    def s(self) -> CMatrix:
        """The m x n matrix with the singular values on its main diagonal."""
        return CMatrix.diagonal(self._s, self._m, self._n)

    @property
    def combined(self) -> CMatrix:
        """
        The horizontal concatenation ``[U | S | VH]``.

        The result has ``max(m, n)`` rows and ``m + 2n`` columns; blocks
        shorter than that are padded with zeros.
        """
        self._require_factors()
        m, n = self._m, self._n
        out = np.zeros((max(m, n), m + 2 * n), dtype=np.complex128)
        out[:m, :m] = self._u.to_array()
        for i, value in enumerate(self._s):
            out[i, m + i] = value
        out[:n, m + n:] = self._vh.to_array()
        return CMatrix.from_array(out)

    def _require_factors(self) -> None:
        if self._values_only:
            raise RuntimeError("singular vectors were not computed (values_only=True)")

    # =========================================================================
    # Derived queries
    # =========================================================================

    @property
    def tolerance(self) -> float:
        """Threshold below which a singular value counts as zero."""
        if self._s.size == 0:
            return 0.0
        return max(self._m, self._n) * float(self._s[0]) * MACHINE_EPSILON

    def norm2(self) -> float:
        """The two norm: the largest singular value."""
        if self._s.size == 0:
            return 0.0
        return float(self._s[0])

    def condition(self) -> float:
        """
        The two-norm condition number ``s[0] / s[-1]``.

        A rank-deficient matrix yields +inf; the zero matrix (and the empty
        one) yields NaN.
        """
        if self._s.size == 0:
            return float("nan")
        largest = float(self._s[0])
        smallest = float(self._s[-1])
        if smallest == 0:
            return float("inf") if largest > 0 else float("nan")
        return largest / smallest

    def rank(self) -> int:
        """Number of singular values strictly greater than the tolerance."""
        tol = self.tolerance
        return int(np.count_nonzero(self._s > tol))

    def pseudo_inverse(self) -> CMatrix:
        """The Moore-Penrose inverse, ``V * S+ * UH``."""
        self._require_factors()
        tol = self.tolerance
        s_plus = CMatrix(self._n, self._m)
        for i, value in enumerate(self._s):
            if value > tol:
                s_plus[i, i] = 1.0 / value
        return self._vh.adjoint() * s_plus * self._u.adjoint()
