"""
Shape Contracts — Precondition validators for matrix operations

Each function checks one precondition and raises the matching linmat error.
Operations call them before touching storage, which is what guarantees that
a rejected call leaves the receiver unchanged.
"""

from numbers import Integral
from typing import Any, Sequence

from linmat.core.errors import (
    IndexOutOfRange,
    InvalidArgument,
    InvalidDimension,
    ShapeError,
    ShapeMismatch,
)


# =============================================================================
# DIMENSIONS
# =============================================================================


def validate_dimension(value: Any, name: str) -> int:
    """
    Validate a requested row/column count.

    Args:
        value: Requested size
        name: Parameter name (for the error message)

    Returns:
        The size as int

    Raises:
        InvalidDimension: If value is not an integer or is negative
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidDimension(f"{name} must be an integer, got {value!r}")

    if value < 0:
        raise InvalidDimension(f"{name} must be non-negative, got {value}")

    return int(value)


def validate_rectangular(rows: Sequence[Sequence[Any]]) -> int:
    """
    Validate that every row has the same length.

    Args:
        rows: Candidate sequence of rows

    Returns:
        Common row length (0 for an empty sequence)

    Raises:
        ShapeError: If row lengths differ
    """
    if not rows:
        return 0

    cols = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != cols:
            raise ShapeError(
                f"All rows must have the same number of columns: "
                f"row 0 has {cols}, row {index} has {len(row)}"
            )
    return cols


def validate_square(rows: int, cols: int) -> None:
    """
    Raises:
        ShapeError: If rows != cols
    """
    if rows != cols:
        raise ShapeError(f"Matrix must be square, got {rows}x{cols}")


# =============================================================================
# INDICES
# =============================================================================


def _validate_index(index: Any, upper: int, name: str) -> None:
    if isinstance(index, bool) or not isinstance(index, Integral):
        raise IndexOutOfRange(f"{name} index must be an integer, got {index!r}")

    if not 0 <= index < upper:
        raise IndexOutOfRange(f"{name} index {index} out of range [0, {upper})")


def validate_row_index(index: Any, row_count: int) -> None:
    """
    Raises:
        IndexOutOfRange: If index is outside [0, row_count)
    """
    _validate_index(index, row_count, "Row")


def validate_col_index(index: Any, col_count: int) -> None:
    """
    Raises:
        IndexOutOfRange: If index is outside [0, col_count)
    """
    _validate_index(index, col_count, "Column")


def validate_element_index(i: Any, j: Any, row_count: int, col_count: int) -> None:
    """
    Raises:
        IndexOutOfRange: If (i, j) is outside the matrix
    """
    for index, upper in ((i, row_count), (j, col_count)):
        if isinstance(index, bool) or not isinstance(index, Integral) or not 0 <= index < upper:
            raise IndexOutOfRange(
                f"Matrix indices ({i!r}, {j!r}) out of bounds for shape ({row_count}, {col_count})"
            )


def validate_insert_position(index: Any, count: int, name: str) -> None:
    """
    Validate an insertion position; index == count means append.

    Raises:
        IndexOutOfRange: If index is outside [0, count]
    """
    _validate_index(index, count + 1, name)


def validate_line_length(line: Sequence[Any], expected: int, name: str) -> None:
    """
    Validate the length of a row/column being inserted.

    Raises:
        ShapeError: If len(line) != expected
    """
    if len(line) != expected:
        raise ShapeError(f"New {name} must have {expected} elements, got {len(line)}")


# =============================================================================
# OPERANDS
# =============================================================================


def validate_same_shape(left: tuple[int, int], right: tuple[int, int]) -> None:
    """
    Raises:
        ShapeMismatch: If the shapes differ
    """
    if left != right:
        raise ShapeMismatch(f"Matrix dimensions must match: {left} vs {right}")


def validate_multipliable(left: tuple[int, int], right: tuple[int, int]) -> None:
    """
    Raises:
        ShapeMismatch: If left.cols != right.rows
    """
    if left[1] != right[0]:
        raise ShapeMismatch(
            f"Cannot multiply {left[0]}x{left[1]} by {right[0]}x{right[1]}: "
            f"inner dimensions {left[1]} and {right[0]} differ"
        )


def validate_range(low: Any, high: Any) -> None:
    """
    Raises:
        InvalidArgument: If low > high
    """
    if low > high:
        raise InvalidArgument(f"Min cannot be greater than Max: {low} > {high}")
