"""
Exceptions shared by the value model and the numeric kernels.

Expression-specific errors (syntax, unknown names, type mismatches) live in
``mathcore.expressions.errors`` and derive from ``MathCoreError`` as well, so
a caller can catch every user-facing failure with a single clause.
"""

from typing import Optional, Tuple


class MathCoreError(Exception):
    """Base exception for all recoverable mathcore errors."""
    pass


class DomainError(MathCoreError):
    """An operation is undefined for its operands (e.g. division by zero)."""
    pass


class DimensionMismatchError(MathCoreError):
    """Matrix operands have incompatible shapes."""

    def __init__(self, operation: str, left: Tuple[int, int],
                 right: Optional[Tuple[int, int]] = None):
        self.operation = operation
        self.left = left
        self.right = right
        if right is None:
            message = f"{operation}: invalid dimensions {left[0]}x{left[1]}"
        else:
            message = (f"{operation}: incompatible dimensions "
                       f"{left[0]}x{left[1]} and {right[0]}x{right[1]}")
        super().__init__(message)
