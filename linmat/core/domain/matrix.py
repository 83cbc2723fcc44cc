"""
Matrix — Generic rectangular matrix container

BaseMatrix carries everything that does not change a matrix's shape: storage
ownership, bounds-checked access, fills, pure arithmetic, equality and
formatting. Matrix adds the resize operations (row/column insert/remove).
SquareMatrix (square_matrix.py) derives from BaseMatrix as well and never
gains the resize operations.

Value semantics: every instance exclusively owns its Dense2DStore, arithmetic
returns new instances, copies are deep.

CRITICAL INVARIANTS:
1. row_count, col_count >= 0 and always agree with the stored rows
2. Every precondition is validated before storage is touched: a rejected call
   leaves the receiver unchanged
3. Indices are never clamped or wrapped (negative indices are rejected)
4. Compound assignment (+=, -=, *=, @=) computes the pure result first, then
   replaces the receiver's contents in place
"""

import copy as _copy
import random
from numbers import Number
from typing import Any, Iterable, Iterator, Sequence

from linmat.core.contracts.shape import (
    validate_col_index,
    validate_dimension,
    validate_element_index,
    validate_insert_position,
    validate_line_length,
    validate_multipliable,
    validate_range,
    validate_row_index,
    validate_same_shape,
)
from linmat.core.domain.storage import Dense2DStore
from linmat.core.math.numerical_safeguards import rows_close
from linmat.core.math.random_source import default_random_source, draw
from linmat.core.settings import get_settings

# =============================================================================
# BASE MATRIX
# =============================================================================


class BaseMatrix:
    """
    Shape-preserving matrix contract shared by Matrix and SquareMatrix.

    Not meant to be instantiated directly; use Matrix or SquareMatrix.
    """

    __slots__ = ("_store",)

    _store: Dense2DStore

    # -- construction ---------------------------------------------------------

    @classmethod
    def _from_store(cls, store: Dense2DStore) -> "BaseMatrix":
        obj = cls.__new__(cls)
        obj._store = store
        return obj

    @classmethod
    def _check_store(cls, store: Dense2DStore) -> None:
        """Hook for subclass shape invariants, called before an instance is built."""

    @classmethod
    def _result_type(cls, rows: int, cols: int) -> type:
        """Class of a value produced by an operation on an instance of cls."""
        return Matrix

    def _wrap(self, store: Dense2DStore) -> "BaseMatrix":
        return self._result_type(store.rows, store.cols)._from_store(store)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Any]]):
        """
        Build a matrix from a rectangular sequence of rows (data is copied).

        Args:
            rows: Sequence of equally long rows; [] gives a 0x0 matrix

        Raises:
            ShapeError: If rows differ in length (or violate a subclass
                shape invariant)
        """
        store = Dense2DStore.from_rows(rows)
        cls._check_store(store)
        return cls._from_store(store)

    # -- shape ----------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return self._store.rows

    @property
    def col_count(self) -> int:
        return self._store.cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._store.rows, self._store.cols)

    def is_square(self) -> bool:
        return self._store.rows == self._store.cols

    # -- access ---------------------------------------------------------------

    def row(self, i: int) -> list[Any]:
        """
        Copy of row i.

        Raises:
            IndexOutOfRange: If i is outside [0, row_count)
        """
        validate_row_index(i, self._store.rows)
        return self._store.row_copy(i)

    def col(self, j: int) -> list[Any]:
        """
        Copy of column j.

        Raises:
            IndexOutOfRange: If j is outside [0, col_count)
        """
        validate_col_index(j, self._store.cols)
        return self._store.col_copy(j)

    def get(self, i: int, j: int) -> Any:
        """
        Raises:
            IndexOutOfRange: If (i, j) is outside the matrix
        """
        validate_element_index(i, j, self._store.rows, self._store.cols)
        return self._store.get(i, j)

    def set(self, i: int, j: int, value: Any) -> None:
        """
        Raises:
            IndexOutOfRange: If (i, j) is outside the matrix
        """
        validate_element_index(i, j, self._store.rows, self._store.cols)
        self._store.set(i, j, value)

    @staticmethod
    def _split_key(key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(f"Matrix indices must be an (i, j) pair, got {key!r}")
        return key

    def __getitem__(self, key: tuple[int, int]) -> Any:
        i, j = self._split_key(key)
        return self.get(i, j)

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        i, j = self._split_key(key)
        self.set(i, j, value)

    def __iter__(self) -> Iterator[list[Any]]:
        for i in range(self._store.rows):
            yield self._store.row_copy(i)

    def to_list(self) -> list[list[Any]]:
        """Deep copy of the rows."""
        return self._store.to_list()

    def copy(self):
        """Independent copy of the same class."""
        return type(self)._from_store(self._store.copy())

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo: dict):
        elements = _copy.deepcopy(self._store.elements, memo)
        return type(self)._from_store(Dense2DStore(self._store.rows, self._store.cols, elements))

    # -- fills ----------------------------------------------------------------

    def fill(self, value: Any) -> None:
        """Set every element to value."""
        self._store.fill(value)

    def fill_ones(self) -> None:
        self._store.fill(1)

    def fill_zeros(self) -> None:
        self._store.fill(0)

    def fill_random(self, low: Any, high: Any, rng: random.Random | None = None) -> None:
        """
        Fill with values drawn from the closed interval [low, high].

        Integral bounds draw integers, other bounds draw floats.

        Args:
            low: Lower bound
            high: Upper bound
            rng: Random source; defaults to the process-level source, which is
                seeded once on first use (see seed_default_random_source)

        Raises:
            InvalidArgument: If low > high
        """
        validate_range(low, high)
        source = rng if rng is not None else default_random_source()

        rows, cols = self.shape
        elements = [[draw(source, low, high) for _ in range(cols)] for _ in range(rows)]
        self._store.replace(Dense2DStore(rows, cols, elements))

    # -- arithmetic -----------------------------------------------------------

    def transpose(self):
        """New matrix with shape (col_count, row_count), result[j][i] = self[i][j]."""
        rows, cols = self.shape
        get = self._store.get
        elements = [[get(i, j) for i in range(rows)] for j in range(cols)]
        return self._wrap(Dense2DStore(cols, rows, elements))

    @property
    def T(self):
        return self.transpose()

    def add(self, other: "BaseMatrix"):
        """
        Elementwise sum.

        Raises:
            ShapeMismatch: If shapes differ
        """
        validate_same_shape(self.shape, other.shape)
        elements = [
            [a + b for a, b in zip(left, right)]
            for left, right in zip(self._store.elements, other._store.elements)
        ]
        return self._wrap(Dense2DStore(self.row_count, self.col_count, elements))

    def subtract(self, other: "BaseMatrix"):
        """
        Elementwise difference.

        Raises:
            ShapeMismatch: If shapes differ
        """
        validate_same_shape(self.shape, other.shape)
        elements = [
            [a - b for a, b in zip(left, right)]
            for left, right in zip(self._store.elements, other._store.elements)
        ]
        return self._wrap(Dense2DStore(self.row_count, self.col_count, elements))

    def multiply(self, other: "BaseMatrix"):
        """
        Matrix product, each cell the dot product of a row and a column.

        Accumulation starts at 0 for every cell.

        Raises:
            ShapeMismatch: If self.col_count != other.row_count
        """
        validate_multipliable(self.shape, other.shape)
        rows, inner = self.shape
        cols = other.col_count
        left = self._store.elements
        right = other._store.elements

        elements = []
        for i in range(rows):
            out_row = []
            for j in range(cols):
                acc = 0
                for k in range(inner):
                    acc += left[i][k] * right[k][j]
                out_row.append(acc)
            elements.append(out_row)
        return self._wrap(Dense2DStore(rows, cols, elements))

    def scale(self, scalar: Any):
        """Elementwise multiplication by a scalar."""
        elements = [[value * scalar for value in row] for row in self._store.elements]
        return self._wrap(Dense2DStore(self.row_count, self.col_count, elements))

    def __add__(self, other):
        if not isinstance(other, BaseMatrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, BaseMatrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, BaseMatrix):
            return self.multiply(other)
        if not isinstance(other, Number):
            return NotImplemented
        return self.scale(other)

    def __rmul__(self, other):
        if not isinstance(other, Number):
            return NotImplemented
        return self.scale(other)

    def __matmul__(self, other):
        if not isinstance(other, BaseMatrix):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self):
        return self.scale(-1)

    # -- compound assignment --------------------------------------------------

    def _assign(self, result: "BaseMatrix") -> None:
        """Replace the receiver's contents with result (already validated)."""
        self._store.replace(result._store)

    def __iadd__(self, other):
        if not isinstance(other, BaseMatrix):
            return NotImplemented
        self._assign(self.add(other))
        return self

    def __isub__(self, other):
        if not isinstance(other, BaseMatrix):
            return NotImplemented
        self._assign(self.subtract(other))
        return self

    def __imul__(self, other):
        if isinstance(other, BaseMatrix):
            self._assign(self.multiply(other))
        elif isinstance(other, Number):
            self._assign(self.scale(other))
        else:
            return NotImplemented
        return self

    def __imatmul__(self, other):
        if not isinstance(other, BaseMatrix):
            return NotImplemented
        self._assign(self.multiply(other))
        return self

    # -- comparison -----------------------------------------------------------

    def equals(self, other: "BaseMatrix") -> bool:
        """True iff other is a matrix, shapes match and every element compares equal."""
        if not isinstance(other, BaseMatrix):
            return False
        return self.shape == other.shape and self._store.elements == other._store.elements

    def __eq__(self, other):
        if not isinstance(other, BaseMatrix):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def allclose(
        self,
        other: "BaseMatrix",
        rel_tol: float | None = None,
        abs_tol: float | None = None,
    ) -> bool:
        """
        Tolerance-based equality for floating element types.

        Args:
            other: Matrix to compare with
            rel_tol: Relative tolerance (default: settings.rel_tol)
            abs_tol: Absolute tolerance (default: settings.abs_tol)

        Returns:
            False on shape mismatch, otherwise True iff all elements are close
        """
        if self.shape != other.shape:
            return False

        settings = get_settings()
        return rows_close(
            self._store.elements,
            other._store.elements,
            rel_tol=settings.rel_tol if rel_tol is None else rel_tol,
            abs_tol=settings.abs_tol if abs_tol is None else abs_tol,
        )

    # -- formatting -----------------------------------------------------------

    def format(self) -> str:
        """
        Textual grid for diagnostics: one line per row, elements separated by
        settings.element_separator, each row followed by settings.row_terminator.
        """
        settings = get_settings()
        sep = settings.element_separator
        term = settings.row_terminator
        return "".join(sep.join(str(value) for value in row) + term for row in self._store.elements)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        name = type(self).__name__
        if self.row_count == 0 and self.col_count != 0:
            return f"{name}(rows=0, cols={self.col_count})"
        return f"{name}({self._store.elements!r})"


# =============================================================================
# MATRIX
# =============================================================================


class Matrix(BaseMatrix):
    """
    Resizable rectangular matrix.

    Examples:
        >>> m = Matrix(2, 3, 1)
        >>> m.shape
        (2, 3)
        >>> Matrix.from_rows([[1, 1, 1], [2, 2, 2]]) @ Matrix.from_rows(
        ...     [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
        ... ) == Matrix.from_rows([[12, 15, 18], [24, 30, 36]])
        True
    """

    __slots__ = ()

    def __init__(self, rows: int = 0, cols: int = 0, initial: Any = 0):
        """
        Args:
            rows: Number of rows (>= 0)
            cols: Number of columns (>= 0)
            initial: Value of every cell

        Raises:
            InvalidDimension: If rows or cols is negative or not an integer
        """
        rows = validate_dimension(rows, "rows")
        cols = validate_dimension(cols, "cols")
        self._store = Dense2DStore.filled(rows, cols, initial)

    # -- resize ---------------------------------------------------------------

    def insert_row(self, i: int, row: Sequence[Any]) -> None:
        """
        Insert row before index i (i == row_count appends).

        Raises:
            ShapeError: If len(row) != col_count
            IndexOutOfRange: If i is outside [0, row_count]
        """
        row = list(row)
        validate_line_length(row, self._store.cols, "row")
        validate_insert_position(i, self._store.rows, "Row")
        self._store.insert_row(i, row)

    def remove_row(self, i: int) -> None:
        """
        Raises:
            IndexOutOfRange: If i is outside [0, row_count)
        """
        validate_row_index(i, self._store.rows)
        self._store.remove_row(i)

    def insert_col(self, j: int, col: Sequence[Any]) -> None:
        """
        Insert column before index j (j == col_count appends).

        Raises:
            ShapeError: If len(col) != row_count
            IndexOutOfRange: If j is outside [0, col_count]
        """
        col = list(col)
        validate_line_length(col, self._store.rows, "column")
        validate_insert_position(j, self._store.cols, "Column")
        self._store.insert_col(j, col)

    def remove_col(self, j: int) -> None:
        """
        Raises:
            IndexOutOfRange: If j is outside [0, col_count)
        """
        validate_col_index(j, self._store.cols)
        self._store.remove_col(j)

    def append_row(self, row: Sequence[Any]) -> None:
        self.insert_row(self._store.rows, row)

    def append_col(self, col: Sequence[Any]) -> None:
        self.insert_col(self._store.cols, col)
