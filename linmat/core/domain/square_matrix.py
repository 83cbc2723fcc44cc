"""
SquareMatrix — n x n matrix with determinant and inverse

SquareMatrix shares BaseMatrix with Matrix but does not derive from Matrix:
shape-changing operations are not part of its contract. The resize names
are still defined so that a call fails loudly with UnsupportedOperation
instead of silently doing nothing.

Determinant and inverse are delegated to the cofactor engine
(linmat.core.math.laplace):
- determinant(): Laplace expansion along row 0, columns ascending
- inverse(): determinant guard first, then adjugate scaled by 1/det

CRITICAL INVARIANTS:
1. row_count == col_count for every instance, at all times
2. inverse() raises SingularMatrixError before computing any cofactor when
   the determinant is zero
3. Integer matrices invert with truncating division (exact only for
   det == ±1); use Fraction or float elements for general inverses
"""

from typing import Any, NoReturn, Sequence

from linmat.core.contracts.shape import (
    validate_dimension,
    validate_element_index,
    validate_square,
)
from linmat.core.domain.matrix import BaseMatrix, Matrix
from linmat.core.domain.storage import Dense2DStore
from linmat.core.errors import ShapeMismatch, SingularMatrixError, UnsupportedOperation
from linmat.core.math import laplace as engine
from linmat.core.math.numerical_safeguards import is_zero
from linmat.core.settings import get_settings


class SquareMatrix(BaseMatrix):
    """
    Square matrix: identity, determinant, cofactors, adjugate, inverse.

    Examples:
        >>> SquareMatrix.from_rows([[13, 2, 4], [0, 7, 3], [0, 0, 23]]).determinant()
        2093
        >>> SquareMatrix.identity(3).determinant()
        1
    """

    __slots__ = ()

    def __init__(self, n: int = 0, initial: Any = 0):
        """
        Args:
            n: Order of the matrix (>= 0)
            initial: Value of every cell

        Raises:
            InvalidDimension: If n is negative or not an integer
        """
        n = validate_dimension(n, "n")
        self._store = Dense2DStore.filled(n, n, initial)

    @classmethod
    def _check_store(cls, store: Dense2DStore) -> None:
        validate_square(store.rows, store.cols)

    @classmethod
    def _result_type(cls, rows: int, cols: int) -> type:
        return SquareMatrix if rows == cols else Matrix

    @classmethod
    def identity(cls, n: int, one: Any = 1, zero: Any = 0) -> "SquareMatrix":
        """
        n x n matrix with one on the main diagonal and zero elsewhere.

        Raises:
            InvalidDimension: If n is negative or not an integer
        """
        result = cls(n, zero)
        for i in range(result.order):
            result._store.set(i, i, one)
        return result

    @property
    def order(self) -> int:
        return self._store.rows

    # -- rejected resize operations --------------------------------------------

    def _reject_resize(self, operation: str) -> NoReturn:
        raise UnsupportedOperation(
            f"{operation}() is not supported on SquareMatrix: it would break rows == cols"
        )

    def insert_row(self, i: int, row: Sequence[Any]) -> NoReturn:
        self._reject_resize("insert_row")

    def remove_row(self, i: int) -> NoReturn:
        self._reject_resize("remove_row")

    def insert_col(self, j: int, col: Sequence[Any]) -> NoReturn:
        self._reject_resize("insert_col")

    def remove_col(self, j: int) -> NoReturn:
        self._reject_resize("remove_col")

    def append_row(self, row: Sequence[Any]) -> NoReturn:
        self._reject_resize("append_row")

    def append_col(self, col: Sequence[Any]) -> NoReturn:
        self._reject_resize("append_col")

    def _assign(self, result: BaseMatrix) -> None:
        if result.shape != self.shape:
            raise ShapeMismatch(
                f"In-place result of shape {result.shape} cannot replace a "
                f"{self.order}x{self.order} SquareMatrix"
            )
        super()._assign(result)

    # -- diagonal -------------------------------------------------------------

    def diagonal(self) -> list[Any]:
        return [self._store.get(i, i) for i in range(self.order)]

    def trace(self) -> Any:
        total = 0
        for value in self.diagonal():
            total += value
        return total

    # -- determinant engine -----------------------------------------------------

    def determinant(self) -> Any:
        """
        Determinant by recursive Laplace expansion along the first row.

        O(n!) and not memoized: intended for small matrices. Defined for
        every square matrix (the zero matrix gives 0, the 0x0 matrix gives 1).
        """
        return engine.determinant(self._store)

    def minor(self, i: int, j: int) -> Any:
        """
        Determinant of the submatrix without row i and column j.

        Raises:
            IndexOutOfRange: If (i, j) is outside the matrix
        """
        validate_element_index(i, j, self.order, self.order)
        return engine.minor_determinant(self._store, i, j)

    def cofactor(self, i: int, j: int) -> Any:
        """
        Signed minor, sign(i + j) * minor(i, j).

        Raises:
            IndexOutOfRange: If (i, j) is outside the matrix
        """
        validate_element_index(i, j, self.order, self.order)
        return engine.cofactor(self._store, i, j)

    def cofactor_matrix(self) -> "SquareMatrix":
        return SquareMatrix._from_store(Dense2DStore.from_rows(engine.cofactor_rows(self._store)))

    def adjugate(self) -> "SquareMatrix":
        """Transposed cofactor matrix: C[i][j] is placed at (j, i)."""
        return SquareMatrix._from_store(Dense2DStore.from_rows(engine.adjugate_rows(self._store)))

    def is_singular(self) -> bool:
        return is_zero(self.determinant(), get_settings().singular_tol)

    def inverse(self) -> "SquareMatrix":
        """
        Inverse via adjugate / determinant.

        Returns:
            adjugate() scaled by 1/det

        Raises:
            SingularMatrixError: If the determinant is zero (or within
                settings.singular_tol of zero)
        """
        det = self.determinant()
        if is_zero(det, get_settings().singular_tol):
            raise SingularMatrixError(
                f"Matrix is singular (determinant {det!r}), no inverse exists"
            )

        return self.adjugate().scale(engine.reciprocal(det))
