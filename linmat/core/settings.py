"""
MatrixSettings — Library-wide configuration

Immutable Pydantic model holding the knobs that affect formatting,
and tolerance-based comparisons. One instance is active per
process; configure() validates and swaps it atomically.
"""

from pydantic import BaseModel, Field, field_validator

from linmat.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_SINGULAR,
)

# =============================================================================
# SETTINGS MODEL
# =============================================================================


class MatrixSettings(BaseModel):
    """
    Active configuration for linmat.

    - element_separator / row_terminator: used by Matrix.format()
    - rel_tol / abs_tol: defaults for Matrix.allclose()
    - singular_tol: |det| <= singular_tol makes inverse() fail (0.0 = exact)
    """

    element_separator: str = Field(" ", min_length=1, description="Separator between elements in a row")
    row_terminator: str = Field("\n", description="Appended after every formatted row")
    rel_tol: float = Field(EPS_FLOAT_COMPARE_REL, ge=0, description="Relative tolerance for allclose")
    abs_tol: float = Field(EPS_FLOAT_COMPARE_ABS, ge=0, description="Absolute tolerance for allclose")
    singular_tol: float = Field(EPS_SINGULAR, ge=0, description="Determinant magnitude treated as zero")

    model_config = {"frozen": True}

    @field_validator("row_terminator")
    @classmethod
    def validate_row_terminator(cls, v: str) -> str:
        """Row terminator must contain a line break, otherwise rows run together"""
        if "\n" not in v:
            raise ValueError(f"row_terminator must contain a newline, got {v!r}")
        return v


# =============================================================================
# ACTIVE SETTINGS
# =============================================================================

_SETTINGS = MatrixSettings()


def get_settings() -> MatrixSettings:
    """Return the active settings."""
    return _SETTINGS


def configure(**overrides) -> MatrixSettings:
    """
    Replace the active settings with a validated copy carrying overrides.

    Args:
        **overrides: MatrixSettings field values

    Returns:
        The newly active settings

    Raises:
        pydantic.ValidationError: If an override is invalid (active settings
            stay unchanged)
    """
    global _SETTINGS

    settings = MatrixSettings(**{**_SETTINGS.model_dump(), **overrides})
    _SETTINGS = settings
    return settings


def reset_settings() -> MatrixSettings:
    """Restore default settings."""
    global _SETTINGS

    _SETTINGS = MatrixSettings()
    return _SETTINGS
