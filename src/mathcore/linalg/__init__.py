"""
Complex linear algebra: the dense matrix type and its decompositions.
"""

from .cmatrix import CMatrix
from .svd import CSVD

__all__ = ["CMatrix", "CSVD"]
