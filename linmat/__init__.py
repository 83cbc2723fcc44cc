"""
linmat — generic dense matrices with cofactor determinant and adjugate inverse.

    >>> from linmat import Matrix, SquareMatrix
    >>> SquareMatrix.from_rows([[2, 0], [0, 2]]).determinant()
    4
"""

from linmat.core.errors import (
    IndexOutOfRange,
    InvalidArgument,
    InvalidDimension,
    MatrixError,
    ShapeError,
    ShapeMismatch,
    SingularMatrixError,
    UnsupportedOperation,
)
from linmat.core.math import (
    default_random_source,
    is_close,
    seed_default_random_source,
)
from linmat.core.settings import (
    MatrixSettings,
    configure,
    get_settings,
    reset_settings,
)
from linmat.core.domain import BaseMatrix, Dense2DStore, Matrix, SquareMatrix

__version__ = "0.3.0"

__all__ = [
    # Containers
    "BaseMatrix",
    "Dense2DStore",
    "Matrix",
    "SquareMatrix",
    # Errors
    "MatrixError",
    "InvalidDimension",
    "ShapeError",
    "ShapeMismatch",
    "IndexOutOfRange",
    "UnsupportedOperation",
    "SingularMatrixError",
    "InvalidArgument",
    # Settings
    "MatrixSettings",
    "configure",
    "get_settings",
    "reset_settings",
    # Utilities
    "default_random_source",
    "seed_default_random_source",
    "is_close",
]
