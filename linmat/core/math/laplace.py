"""
Cofactor Engine — Laplace-expansion determinant and adjugate

The determinant is computed by recursive Laplace (cofactor) expansion along
the first row, column index ascending:

    det(A) = Σ_{p=0}^{n-1} sign(p) * A[0][p] * det(M(0, p))

where M(i, j) is A without row i and column j and sign(k) = +1 for even k,
-1 for odd k. Base cases: n=1 → the sole element, n=2 → a00*a11 - a01*a10.

Submatrices are MinorView index masks over the original storage; no element
is copied during the recursion. Cost is O(n!) and nothing is memoized, so
the engine is meant for small orders only.

CRITICAL INVARIANTS:
1. Expansion order is fixed (row 0, columns ascending): results are
   deterministic and reproducible for every element type
2. The determinant has no error path for square input (zero matrix → 0)
3. The adjugate places cofactor C[i][j] at position (j, i)
4. Arithmetic stays in the element type; accumulation starts at 0
"""

import math
from fractions import Fraction
from numbers import Integral
from typing import Any, Protocol, Sequence

from linmat.core.errors import IndexOutOfRange, ShapeError


class ElementSource(Protocol):
    """Anything with a rectangular shape and element access."""

    rows: int
    cols: int

    def get(self, i: int, j: int) -> Any: ...


# =============================================================================
# MINOR VIEW
# =============================================================================


class MinorView:
    """
    Read-only square view over a source, selecting a subset of rows and columns.

    MinorView.of(source) covers the whole source; view.without(i, j) drops
    one row and one column of the view. Index i of a view maps to
    source row self.row_indices[i].
    """

    __slots__ = ("_source", "row_indices", "col_indices")

    def __init__(
        self,
        source: ElementSource,
        row_indices: Sequence[int],
        col_indices: Sequence[int],
    ):
        if len(row_indices) != len(col_indices):
            raise ShapeError(
                f"MinorView must be square, got {len(row_indices)}x{len(col_indices)}"
            )
        self._source = source
        self.row_indices = tuple(row_indices)
        self.col_indices = tuple(col_indices)

    @classmethod
    def of(cls, source: ElementSource) -> "MinorView":
        """View covering the whole (square) source."""
        if source.rows != source.cols:
            raise ShapeError(
                f"Determinant requires a square matrix, got {source.rows}x{source.cols}"
            )
        return cls(source, range(source.rows), range(source.cols))

    @property
    def order(self) -> int:
        return len(self.row_indices)

    def get(self, i: int, j: int) -> Any:
        return self._source.get(self.row_indices[i], self.col_indices[j])

    def without(self, i: int, j: int) -> "MinorView":
        """View with local row i and local column j removed."""
        if not (0 <= i < self.order and 0 <= j < self.order):
            raise IndexOutOfRange(
                f"Minor index ({i}, {j}) out of range for order {self.order}"
            )
        rows = self.row_indices[:i] + self.row_indices[i + 1:]
        cols = self.col_indices[:j] + self.col_indices[j + 1:]
        return MinorView(self._source, rows, cols)

    def __repr__(self) -> str:
        return f"MinorView(rows={self.row_indices}, cols={self.col_indices})"


# =============================================================================
# DETERMINANT
# =============================================================================


def sign(k: int) -> int:
    """+1 for even k, -1 for odd k."""
    return 1 if k % 2 == 0 else -1


def laplace_determinant(view: MinorView) -> Any:
    """
    Recursive Laplace expansion along row 0 of a view.

    The 0x0 determinant is 1 (empty product), which keeps the cofactor of a
    1x1 matrix well defined.

    Args:
        view: Square view to expand

    Returns:
        Determinant in the element type's arithmetic
    """
    n = view.order

    if n == 0:
        return 1
    if n == 1:
        return view.get(0, 0)
    if n == 2:
        return view.get(0, 0) * view.get(1, 1) - view.get(0, 1) * view.get(1, 0)

    det = 0
    for p in range(n):
        det += sign(p) * view.get(0, p) * laplace_determinant(view.without(0, p))
    return det


def determinant(source: ElementSource) -> Any:
    """
    Determinant of a square source by Laplace expansion.

    Args:
        source: Square element source (e.g. Dense2DStore)

    Returns:
        Determinant

    Raises:
        ShapeError: If the source is not square
    """
    return laplace_determinant(MinorView.of(source))


def minor_determinant(source: ElementSource, i: int, j: int) -> Any:
    """
    Determinant of the submatrix formed by deleting row i and column j.

    Raises:
        ShapeError: If the source is not square
        IndexOutOfRange: If (i, j) is outside the matrix
    """
    return laplace_determinant(MinorView.of(source).without(i, j))


def cofactor(source: ElementSource, i: int, j: int) -> Any:
    """Signed minor: sign(i + j) * minor_determinant(i, j)."""
    return sign(i + j) * minor_determinant(source, i, j)


# =============================================================================
# ADJUGATE
# =============================================================================


def cofactor_rows(source: ElementSource) -> list[list[Any]]:
    """
    Matrix of cofactors, C[i][j] = cofactor(i, j).

    Returns:
        Rows of the cofactor matrix
    """
    view = MinorView.of(source)
    n = view.order
    return [
        [sign(i + j) * laplace_determinant(view.without(i, j)) for j in range(n)]
        for i in range(n)
    ]


def adjugate_rows(source: ElementSource) -> list[list[Any]]:
    """
    Adjugate (transposed cofactor matrix): ADJ[j][i] = C[i][j].

    Returns:
        Rows of the adjugate
    """
    cofactors = cofactor_rows(source)
    n = len(cofactors)
    return [[cofactors[i][j] for i in range(n)] for j in range(n)]


def reciprocal(det: Any) -> Any:
    """
    1 / det in the element type's arithmetic.

    Integral determinants use truncating division, so only det == ±1 yields
    a non-zero result. Callers needing exact inverses use Fraction elements.

    Args:
        det: Non-zero determinant

    Returns:
        Reciprocal
    """
    if isinstance(det, Integral):
        return math.trunc(Fraction(1, int(det)))
    return 1 / det
