"""
Minimal single-angle rotation.
"""

from __future__ import annotations
from typing import Any, Optional, Union
import numpy as np
from numpy.typing import DTypeLike, NDArray

from .base import Rotation2D
from .conversion import matrix_from_angle, to_angle
from .numeric import float_dtype, resolve_dtype
from .rotation_matrix import RotationMatrix2D


class Angle2D(Rotation2D):
    """
    Rotation stored as its angle ``theta`` in radians.

    The angle is never wrapped: composing and exponentiating can leave it
    anywhere on the real line (use ``principal_value`` to wrap explicitly).
    Angle quantities are converted to radians on construction, so ``theta``
    is always a plain floating number.
    """

    __slots__ = ("_theta",)

    def __init__(self, value: Any = 0.0, dtype: Optional[DTypeLike] = None):
        self._theta = to_angle(value, dtype)

    @classmethod
    def from_angle(cls, theta, dtype: Optional[DTypeLike] = None) -> Angle2D:
        return cls(theta, dtype=dtype)

    @classmethod
    def identity(cls, dtype: Optional[DTypeLike] = None) -> Angle2D:
        return cls(0, dtype=float_dtype(resolve_dtype(dtype)))

    @property
    def theta(self):
        return self._theta

    @property
    def dtype(self) -> np.dtype:
        return self._theta.dtype

    def to_matrix(self) -> NDArray:
        return matrix_from_angle(self._theta)

    def compose(self, other: Rotation2D) -> Rotation2D:
        if isinstance(other, Angle2D):
            return Angle2D(self._theta + other._theta)
        return RotationMatrix2D(self).compose(other)

    def inverse(self) -> Angle2D:
        return Angle2D(-self._theta)

    def power(self, exponent: Union[int, float]) -> Angle2D:
        return Angle2D(self._theta * exponent)

    def rotation_angle(self):
        return self._theta

    def params(self) -> NDArray:
        return np.array([self._theta])

    def principal_value(self) -> Angle2D:
        """Same rotation with ``theta`` wrapped into [-pi, pi)."""
        wrapped = np.remainder(self._theta + np.pi, 2 * np.pi) - np.pi
        return Angle2D(wrapped, dtype=self.dtype)

    def __repr__(self) -> str:
        return f"Angle2D({float(self._theta)!r}, dtype={self.dtype})"
