"""Settings schemas."""

from .schemas import (
    ToleranceConfig,
    RotationSettings,
    get_settings,
    configure,
)

__all__ = [
    "ToleranceConfig",
    "RotationSettings",
    "get_settings",
    "configure",
]
