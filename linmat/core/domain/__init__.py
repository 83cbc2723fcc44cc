"""
Domain containers.

Dense2DStore (storage), Matrix (resizable rectangular) and SquareMatrix
(fixed square with determinant/inverse).
"""

from linmat.core.domain.matrix import BaseMatrix, Matrix
from linmat.core.domain.square_matrix import SquareMatrix
from linmat.core.domain.storage import Dense2DStore

__all__ = [
    "Dense2DStore",
    "BaseMatrix",
    "Matrix",
    "SquareMatrix",
]
