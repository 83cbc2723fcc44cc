"""
Core math modules for linmat

Tolerance-aware comparisons, the random source used by fill_random and the
Laplace/cofactor determinant engine.
"""

# Numerical Safeguards
from linmat.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_SINGULAR,
    is_close,
    is_valid_float,
    is_zero,
    rows_close,
)

# Random Source
from linmat.core.math.random_source import (
    default_random_source,
    draw,
    seed_default_random_source,
)

# Cofactor Engine
from linmat.core.math.laplace import (
    MinorView,
    adjugate_rows,
    cofactor,
    cofactor_rows,
    determinant,
    laplace_determinant,
    minor_determinant,
    reciprocal,
    sign,
)

__all__ = [
    # Numerical Safeguards — Tolerance constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_SINGULAR",
    # Numerical Safeguards — Comparisons
    "is_close",
    "is_valid_float",
    "is_zero",
    "rows_close",
    # Random Source
    "default_random_source",
    "draw",
    "seed_default_random_source",
    # Cofactor Engine — Types
    "MinorView",
    # Cofactor Engine — Functions
    "adjugate_rows",
    "cofactor",
    "cofactor_rows",
    "determinant",
    "laplace_determinant",
    "minor_determinant",
    "reciprocal",
    "sign",
]
