"""
Tests for Dense2DStore

Checks:
1. Construction (filled / from_rows) and rectangular validation
2. Shape bookkeeping across resize operations
3. Copies never alias caller data or each other
"""

import pytest

from linmat.core.domain.storage import Dense2DStore
from linmat.core.errors import ShapeError


class TestConstruction:
    """Tests for Dense2DStore construction"""

    def test_filled(self) -> None:
        store = Dense2DStore.filled(2, 3, 7)
        assert (store.rows, store.cols) == (2, 3)
        assert store.elements == [[7, 7, 7], [7, 7, 7]]

    def test_filled_rows_are_independent(self) -> None:
        store = Dense2DStore.filled(2, 2, 0)
        store.set(0, 0, 5)
        assert store.elements == [[5, 0], [0, 0]]

    def test_zero_rows_keeps_width(self) -> None:
        store = Dense2DStore.filled(0, 4, 0)
        assert store.rows == 0
        assert store.cols == 4
        assert store.elements == []

    def test_from_rows_copies(self) -> None:
        source = [[1, 2], [3, 4]]
        store = Dense2DStore.from_rows(source)
        source[0][0] = 99
        assert store.get(0, 0) == 1

    def test_from_rows_accepts_tuples_and_generators(self) -> None:
        store = Dense2DStore.from_rows(((i, i + 1) for i in range(3)))
        assert (store.rows, store.cols) == (3, 2)
        assert store.elements == [[0, 1], [1, 2], [2, 3]]

    def test_from_rows_ragged(self) -> None:
        with pytest.raises(ShapeError):
            Dense2DStore.from_rows([[1, 2], [3]])

    def test_from_rows_empty(self) -> None:
        store = Dense2DStore.from_rows([])
        assert (store.rows, store.cols) == (0, 0)


class TestResize:
    """Tests for row/column insert and remove"""

    def test_insert_and_remove_row(self) -> None:
        store = Dense2DStore.from_rows([[1, 2], [3, 4]])
        store.insert_row(1, [9, 9])
        assert store.rows == 3
        assert store.elements == [[1, 2], [9, 9], [3, 4]]

        store.remove_row(0)
        assert store.rows == 2
        assert store.elements == [[9, 9], [3, 4]]

    def test_insert_and_remove_col(self) -> None:
        store = Dense2DStore.from_rows([[1, 2], [3, 4]])
        store.insert_col(2, [5, 6])
        assert store.cols == 3
        assert store.elements == [[1, 2, 5], [3, 4, 6]]

        store.remove_col(0)
        assert store.cols == 2
        assert store.elements == [[2, 5], [4, 6]]

    def test_insert_col_into_zero_rows(self) -> None:
        store = Dense2DStore.filled(0, 2, 0)
        store.insert_col(0, [])
        assert (store.rows, store.cols) == (0, 3)

    def test_inserted_row_not_aliased(self) -> None:
        row = [1, 2]
        store = Dense2DStore.filled(0, 2, 0)
        store.insert_row(0, row)
        row[0] = 42
        assert store.get(0, 0) == 1


class TestBulk:
    """Tests for fill, copy, replace"""

    def test_fill(self) -> None:
        store = Dense2DStore.from_rows([[1, 2], [3, 4]])
        store.fill(0)
        assert store.elements == [[0, 0], [0, 0]]

    def test_copy_is_deep(self) -> None:
        store = Dense2DStore.from_rows([[1, 2], [3, 4]])
        clone = store.copy()
        clone.set(0, 0, 100)
        assert store.get(0, 0) == 1

    def test_replace(self) -> None:
        store = Dense2DStore.from_rows([[1, 2]])
        other = Dense2DStore.from_rows([[5], [6], [7]])
        store.replace(other)
        assert (store.rows, store.cols) == (3, 1)
        other.set(0, 0, -1)
        assert store.get(0, 0) == 5

    def test_row_and_col_copies(self) -> None:
        store = Dense2DStore.from_rows([[1, 2], [3, 4]])
        row = store.row_copy(0)
        col = store.col_copy(1)
        row[0] = 0
        col[0] = 0
        assert row == [0, 2]
        assert col == [0, 4]
        assert store.elements == [[1, 2], [3, 4]]
