"""
Pydantic schemas for library settings.
"""

from __future__ import annotations
from typing import Optional, Literal
import logging

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class ToleranceConfig(BaseModel):
    """Tolerances used by approximate comparisons."""
    rtol: Optional[float] = Field(
        default=None,
        gt=0,
        description="Relative tolerance for isapprox (None = sqrt(eps) of the element type)"
    )
    atol: float = Field(
        default=0.0,
        ge=0,
        description="Absolute tolerance for isapprox"
    )
    rotation_tol: Optional[float] = Field(
        default=None,
        gt=0,
        description="Orthonormality tolerance for is_rotation (None = 1000 * eps)"
    )


class RotationSettings(BaseModel):
    """Top-level settings."""
    default_dtype: Literal["float32", "float64"] = Field(
        default="float64",
        description="Element type for identity and random rotations when none is given"
    )
    tolerance: ToleranceConfig = Field(
        default_factory=ToleranceConfig,
        description="Comparison tolerances"
    )


_active = RotationSettings()


def get_settings() -> RotationSettings:
    """Return the active settings."""
    return _active


def configure(settings: Optional[RotationSettings] = None, **overrides) -> RotationSettings:
    """
    Replace the active settings.
    
    Args:
        settings: New settings (None = defaults)
        **overrides: Field values applied on top of ``settings``
    
    Returns:
        The settings now in effect
    """
    global _active
    base = settings if settings is not None else RotationSettings()
    if overrides:
        base = RotationSettings(**{**base.model_dump(), **overrides})
    _active = base
    logger.debug("Active rotation settings: %s", _active)
    return _active
