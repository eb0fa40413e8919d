"""2D rotation representations, conversions and operations."""

from .errors import RotationError, ShapeMismatchError, UnitDimensionError
from .units import UnitAdapter, get_unit_adapter, set_unit_adapter
from .base import Rotation2D
from .rotation_matrix import RotationMatrix2D
from .angle import Angle2D
from .operations import (
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
]
