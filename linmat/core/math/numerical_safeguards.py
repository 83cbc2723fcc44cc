"""
Numerical Safeguards — Tolerance-aware comparisons for matrix elements

The library never alters the element type's arithmetic. These helpers exist
for callers (and for SquareMatrix.inverse) that work with floating element
types and need comparisons which account for rounding error.

CRITICAL INVARIANTS:
1. With a tolerance of 0 every comparison degrades to exact equality, so
   int and Fraction matrices are compared exactly
2. Comparisons never raise on NaN/Inf; NaN is never close to anything
3. All operations are deterministic and reproducible
"""

import math
from typing import Any, Final, Sequence

# =============================================================================
# TOLERANCE PARAMETERS
# =============================================================================

# Relative tolerance used by is_close / Matrix.allclose
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Absolute tolerance used by is_close / Matrix.allclose
# Needed for comparisons against 0.0, where a relative tolerance is useless
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Default tolerance for the singular-matrix check: exact zero
EPS_SINGULAR: Final[float] = 0.0


# =============================================================================
# ELEMENT COMPARISONS
# =============================================================================


def is_valid_float(value: Any) -> bool:
    """
    Check that a real value is finite (not NaN, not Inf).

    Non-float real types (int, Fraction) are always finite.

    Args:
        value: Value to check

    Returns:
        True if the value is finite
    """
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, complex):
        return math.isfinite(value.real) and math.isfinite(value.imag)
    return True


def is_close(
    a: Any,
    b: Any,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Compare two elements allowing for rounding error.

    Algorithm:
        a == b  or  abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Exact equality is tried first, so exact types (int, Fraction)
    never lose precision through a float conversion.

    Args:
        a: First element
        b: Second element
        rel_tol: Relative tolerance (default: 1e-9)
        abs_tol: Absolute tolerance (default: 1e-12)

    Returns:
        True if the elements are close within tolerance

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    if rel_tol < 0 or abs_tol < 0:
        raise ValueError(f"tolerances must be non-negative, got rel_tol={rel_tol}, abs_tol={abs_tol}")

    if a == b:
        return True

    if not (is_valid_float(a) and is_valid_float(b)):
        return False

    diff = abs(a - b)
    return diff <= max(rel_tol * max(abs(a), abs(b)), abs_tol)


def is_zero(value: Any, tol: float = EPS_SINGULAR) -> bool:
    """
    Check whether a value is zero within an absolute tolerance.

    With tol == 0 this is exactly ``value == 0``.

    Args:
        value: Value to check
        tol: Absolute tolerance (default: EPS_SINGULAR, exact)

    Returns:
        True if abs(value) <= tol
    """
    if tol < 0:
        raise ValueError(f"tol must be non-negative, got {tol}")

    if tol == 0:
        return value == 0

    return abs(value) <= tol


def rows_close(
    left: Sequence[Sequence[Any]],
    right: Sequence[Sequence[Any]],
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Elementwise is_close over two row sequences.

    Args:
        left: Rows of the first matrix
        right: Rows of the second matrix
        rel_tol: Relative tolerance
        abs_tol: Absolute tolerance

    Returns:
        False if the row structure differs, otherwise True iff every pair of
        elements is close
    """
    if len(left) != len(right):
        return False

    for left_row, right_row in zip(left, right):
        if len(left_row) != len(right_row):
            return False
        for a, b in zip(left_row, right_row):
            if not is_close(a, b, rel_tol=rel_tol, abs_tol=abs_tol):
                return False

    return True
