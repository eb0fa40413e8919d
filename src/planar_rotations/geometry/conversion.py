"""
Conversion of raw constructor input into stored rotation data.

Accepted input:
    - another Rotation2D
    - a scalar angle (plain number or angle quantity)
    - four components in column-major order (a, b, c, d) -> [[a, c], [b, d]]
    - a 2x2 array-like
"""

from __future__ import annotations
from numbers import Number
from typing import Any, Optional
import numpy as np
from numpy.typing import DTypeLike, NDArray

from .base import Rotation2D
from .errors import ShapeMismatchError
from .numeric import float_dtype, infer_dtype
from .units import get_unit_adapter, strip_angle


def is_angle_like(value: Any) -> bool:
    """True for a scalar angle, with or without a unit."""
    if get_unit_adapter().is_quantity(value):
        return True
    if isinstance(value, np.ndarray):
        return value.ndim == 0 and value.dtype.kind in "iuf"
    return isinstance(value, (Number, np.number)) and not isinstance(value, bool)


def angle_magnitude(value: Any, dtype: Optional[DTypeLike] = None):
    """
    Radian angle as a numpy floating scalar.

    Args:
        value: Plain number or angle quantity
        dtype: Target type (None = inferred from ``value``, promoted to float)
    """
    theta = strip_angle(value)
    if np.ndim(theta) != 0:
        raise ShapeMismatchError(f"Expected a scalar angle, got shape {np.shape(theta)}")
    if dtype is None:
        dtype = float_dtype(infer_dtype(theta))
    return np.dtype(dtype).type(theta)


def matrix_from_angle(theta) -> NDArray:
    """[[cos, -sin], [sin, cos]] in the type of ``theta``."""
    c = np.cos(theta)
    s = np.sin(theta)
    return np.array([[c, -s], [s, c]], dtype=np.asarray(theta).dtype)


def angle_from_matrix(matrix: NDArray, dtype: Optional[DTypeLike] = None):
    """Angle of a rotation matrix, ``atan2(m[1, 0], m[0, 0])``."""
    if dtype is None:
        dtype = float_dtype(matrix.dtype)
    dtype = np.dtype(dtype)
    return dtype.type(np.arctan2(dtype.type(matrix[1, 0]), dtype.type(matrix[0, 0])))


def matrix_from_array(value: Any, dtype: Optional[DTypeLike] = None) -> NDArray:
    """
    2x2 matrix from four column-major components or a 2x2 array-like.

    Raises:
        ShapeMismatchError: If the input is neither 4 components nor 2x2
    """
    if isinstance(value, np.ndarray):
        arr = value
    else:
        try:
            arr = np.asarray(value)
        except ValueError as exc:
            raise ShapeMismatchError(f"Ragged rotation input: {value!r}") from exc
        if arr.dtype != np.object_ and arr.ndim == 1:
            # re-infer with scalar promotion so mixed float32/Python floats stay float32
            arr = np.asarray(value, dtype=infer_dtype(*value))

    if arr.shape == (4,):
        arr = arr.reshape(2, 2, order="F")
    elif arr.shape != (2, 2):
        raise ShapeMismatchError(
            f"Expected 4 components or a 2x2 array, got shape {arr.shape}"
        )

    if dtype is not None:
        arr = arr.astype(dtype)
    elif arr.dtype == np.object_:
        raise TypeError("Rotation components must be numeric")
    return np.array(arr)


def to_matrix(value: Any, dtype: Optional[DTypeLike] = None) -> NDArray:
    """Stored 2x2 matrix for any accepted input."""
    if isinstance(value, Rotation2D):
        matrix = value.to_matrix()
        return matrix.astype(dtype) if dtype is not None else np.array(matrix)
    if is_angle_like(value):
        if dtype is not None and not np.issubdtype(np.dtype(dtype), np.floating):
            return matrix_from_angle(angle_magnitude(value)).astype(dtype)
        return matrix_from_angle(angle_magnitude(value, dtype))
    return matrix_from_array(value, dtype)


def to_angle(value: Any, dtype: Optional[DTypeLike] = None):
    """Stored angle for any accepted input."""
    if dtype is not None and not np.issubdtype(np.dtype(dtype), np.floating):
        raise TypeError(f"Angle element type must be floating, got {np.dtype(dtype)}")
    if isinstance(value, Rotation2D):
        theta = value.rotation_angle()
        return np.dtype(dtype).type(theta) if dtype is not None else theta
    if is_angle_like(value):
        return angle_magnitude(value, dtype)
    return angle_from_matrix(matrix_from_array(value), dtype)
