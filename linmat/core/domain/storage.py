"""
Dense2DStore — Row-major element storage

Leaf of the library: a list of row lists plus explicit row/column counts.
The column count is stored separately so that a store with zero rows keeps
its declared width.

Callers (Matrix / SquareMatrix) validate indices and lengths before calling
the mutators here; the store itself only keeps its shape consistent.
"""

from typing import Any, Iterable, Sequence

from linmat.core.contracts.shape import validate_rectangular


class Dense2DStore:
    """Exclusive owner of a rectangular block of elements."""

    __slots__ = ("rows", "cols", "elements")

    def __init__(self, rows: int, cols: int, elements: list[list[Any]]):
        self.rows = rows
        self.cols = cols
        self.elements = elements

    @classmethod
    def filled(cls, rows: int, cols: int, value: Any) -> "Dense2DStore":
        """Store of the given shape with every cell set to value."""
        return cls(rows, cols, [[value] * cols for _ in range(rows)])

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Any]]) -> "Dense2DStore":
        """
        Copy a rectangular sequence of rows.

        Raises:
            ShapeError: If the rows have differing lengths
        """
        elements = [list(row) for row in rows]
        cols = validate_rectangular(elements)
        return cls(len(elements), cols, elements)

    # -- access ---------------------------------------------------------------

    def get(self, i: int, j: int) -> Any:
        return self.elements[i][j]

    def set(self, i: int, j: int, value: Any) -> None:
        self.elements[i][j] = value

    def row_copy(self, i: int) -> list[Any]:
        return list(self.elements[i])

    def col_copy(self, j: int) -> list[Any]:
        return [row[j] for row in self.elements]

    def to_list(self) -> list[list[Any]]:
        return [list(row) for row in self.elements]

    # -- resize ---------------------------------------------------------------

    def insert_row(self, i: int, row: Sequence[Any]) -> None:
        self.elements.insert(i, list(row))
        self.rows += 1

    def remove_row(self, i: int) -> None:
        del self.elements[i]
        self.rows -= 1

    def insert_col(self, j: int, col: Sequence[Any]) -> None:
        for row, value in zip(self.elements, col):
            row.insert(j, value)
        self.cols += 1

    def remove_col(self, j: int) -> None:
        for row in self.elements:
            del row[j]
        self.cols -= 1

    # -- bulk -----------------------------------------------------------------

    def fill(self, value: Any) -> None:
        for row in self.elements:
            row[:] = [value] * self.cols

    def copy(self) -> "Dense2DStore":
        return Dense2DStore(self.rows, self.cols, self.to_list())

    def replace(self, other: "Dense2DStore") -> None:
        """Take over a copy of other's contents and shape."""
        self.rows = other.rows
        self.cols = other.cols
        self.elements = other.to_list()

    def __repr__(self) -> str:
        return f"Dense2DStore(rows={self.rows}, cols={self.cols})"
