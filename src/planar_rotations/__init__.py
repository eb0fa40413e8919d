"""
planar-rotations: 2D rotations as a matrix or a single angle.

Importing the package installs the pint unit adapter, so angle quantities
(``30 * ureg.degree``) are accepted wherever a plain radian angle is.
"""

from .geometry import (
    RotationError,
    ShapeMismatchError,
    UnitDimensionError,
    UnitAdapter,
    get_unit_adapter,
    set_unit_adapter,
    Rotation2D,
    RotationMatrix2D,
    Angle2D,
    one,
    zero,
    zeros,
    size,
    element_type,
    random_rotation,
    compose,
    inverse,
    transpose,
    adjoint,
    right_divide,
    left_divide,
    power,
    rotate,
    norm,
    normalize,
    rotation_angle,
    params,
    isapprox,
    is_rotation,
    rotation_between,
    nearest_rotation,
    principal_value,
)
from .adapters import PintUnitAdapter
from .config import RotationSettings, ToleranceConfig, configure, get_settings
from .io import SettingsLoader, load_settings

set_unit_adapter(PintUnitAdapter())

__version__ = "0.1.0"

__all__ = [
    "RotationError",
    "ShapeMismatchError",
    "UnitDimensionError",
    "UnitAdapter",
    "get_unit_adapter",
    "set_unit_adapter",
    "Rotation2D",
    "RotationMatrix2D",
    "Angle2D",
    "one",
    "zero",
    "zeros",
    "size",
    "element_type",
    "random_rotation",
    "compose",
    "inverse",
    "transpose",
    "adjoint",
    "right_divide",
    "left_divide",
    "power",
    "rotate",
    "norm",
    "normalize",
    "rotation_angle",
    "params",
    "isapprox",
    "is_rotation",
    "rotation_between",
    "nearest_rotation",
    "principal_value",
    "PintUnitAdapter",
    "RotationSettings",
    "ToleranceConfig",
    "configure",
    "get_settings",
    "SettingsLoader",
    "load_settings",
]
