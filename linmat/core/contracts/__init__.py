"""
Shape Contracts Module

Precondition validators shared by Matrix and SquareMatrix.
"""

from .shape import (
    validate_col_index,
    validate_dimension,
    validate_element_index,
    validate_insert_position,
    validate_line_length,
    validate_multipliable,
    validate_range,
    validate_rectangular,
    validate_row_index,
    validate_same_shape,
    validate_square,
)

__all__ = [
    # Dimensions
    "validate_dimension",
    "validate_rectangular",
    "validate_square",
    # Indices
    "validate_row_index",
    "validate_col_index",
    "validate_element_index",
    "validate_insert_position",
    "validate_line_length",
    # Operands
    "validate_same_shape",
    "validate_multipliable",
    "validate_range",
]
