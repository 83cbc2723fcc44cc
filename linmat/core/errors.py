"""
Matrix Errors — Exception hierarchy for linmat

Every precondition violation in the library is reported by raising one of
the exceptions below at the boundary of the operation that detects it.

CRITICAL INVARIANTS:
1. No operation prints a warning and continues with invalid state
2. A failed operation never leaves its receiver partially mutated
3. Every exception derives from MatrixError and from the closest builtin
   (ValueError, IndexError, TypeError, ArithmeticError), so callers can catch
   either family
"""


class MatrixError(Exception):
    """Base class for all linmat errors."""

    pass


class InvalidDimension(MatrixError, ValueError):
    """
    Requested matrix size is negative or not an integer.

    Raised by Matrix(rows, cols), SquareMatrix(n) and SquareMatrix.identity(n).
    """

    pass


class ShapeError(MatrixError, ValueError):
    """
    Data does not have the required shape.

    Raised for non-rectangular construction input, for a row/column whose
    length does not match the receiver, and for a non-square source passed
    to SquareMatrix.
    """

    pass


class ShapeMismatch(ShapeError):
    """
    Operand shapes are incompatible for an arithmetic operation.

    add/subtract need identical shapes; multiply needs
    left.col_count == right.row_count.
    """

    pass


class IndexOutOfRange(MatrixError, IndexError):
    """Row, column or element index outside the valid range. No clamping."""

    pass


class UnsupportedOperation(MatrixError, TypeError):
    """
    Shape-changing operation attempted on a SquareMatrix.

    Inserting or removing a single row or column would break the
    rows == cols invariant, so SquareMatrix rejects these calls outright.
    """

    pass


class SingularMatrixError(MatrixError, ArithmeticError):
    """
    Inverse requested for a matrix whose determinant is zero.

    The determinant check runs before any adjugate work, so no cofactors are
    computed for a singular matrix.
    """

    pass


class InvalidArgument(MatrixError, ValueError):
    """Argument value is invalid for the operation (e.g. fill_random with low > high)."""

    pass
