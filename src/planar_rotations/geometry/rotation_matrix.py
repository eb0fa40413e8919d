"""
Dense 2x2 rotation matrix.
"""

from __future__ import annotations
from numbers import Integral
from typing import Any, Optional, Union
import numpy as np
from numpy.typing import DTypeLike, NDArray

from .base import Rotation2D
from .conversion import angle_from_matrix, to_matrix
from .numeric import resolve_dtype


class RotationMatrix2D(Rotation2D):
    """
    Rotation stored as an explicit orthonormal 2x2 matrix.

    Orthonormality is not re-checked on construction; callers building from
    raw components are responsible for passing a valid rotation (see
    ``is_rotation`` and ``nearest_rotation``).

    Examples:
        RotationMatrix2D(np.pi / 4)            # from an angle in radians
        RotationMatrix2D(30 * ureg.degree)     # from an angle quantity
        RotationMatrix2D((1, 0, 0, 1))         # column-major components
        RotationMatrix2D([[0, -1], [1, 0]])    # 2x2 array-like
        RotationMatrix2D(Angle2D(0.3))         # from another rotation
    """

    __slots__ = ("_matrix",)

    def __init__(self, value: Any = 0.0, dtype: Optional[DTypeLike] = None):
        matrix = to_matrix(value, dtype)
        matrix.flags.writeable = False
        self._matrix = matrix

    @classmethod
    def _trusted(cls, matrix: NDArray) -> RotationMatrix2D:
        obj = cls.__new__(cls)
        matrix.flags.writeable = False
        obj._matrix = matrix
        return obj

    @classmethod
    def from_angle(cls, theta, dtype: Optional[DTypeLike] = None) -> RotationMatrix2D:
        return cls(theta, dtype=dtype)

    @classmethod
    def from_components(cls, a, b, c, d, dtype: Optional[DTypeLike] = None) -> RotationMatrix2D:
        """Matrix [[a, c], [b, d]] (arguments in column-major order)."""
        return cls((a, b, c, d), dtype=dtype)

    @classmethod
    def identity(cls, dtype: Optional[DTypeLike] = None) -> RotationMatrix2D:
        return cls._trusted(np.eye(2, dtype=resolve_dtype(dtype)))

    @property
    def matrix(self) -> NDArray:
        """Read-only view of the stored matrix."""
        return self._matrix

    @property
    def dtype(self) -> np.dtype:
        return self._matrix.dtype

    def to_matrix(self) -> NDArray:
        return self._matrix

    def compose(self, other: Rotation2D) -> RotationMatrix2D:
        return self._trusted(self._matrix @ other.to_matrix())

    def inverse(self) -> RotationMatrix2D:
        return self._trusted(self._matrix.T.copy())

    def power(self, exponent: Union[int, float]) -> RotationMatrix2D:
        """
        Integer exponents use repeated products; real exponents scale the angle.
        """
        if isinstance(exponent, (Integral, np.integer)):
            base = self._matrix if exponent >= 0 else self._matrix.T
            return self._trusted(np.linalg.matrix_power(base, abs(int(exponent))))
        return RotationMatrix2D(self.rotation_angle() * exponent)

    def rotation_angle(self):
        """Angle from ``atan2(m[1, 0], m[0, 0])``, in (-pi, pi]."""
        return angle_from_matrix(self._matrix)

    def params(self) -> NDArray:
        """Components in column-major order."""
        return self._matrix.ravel(order="F")

    def __repr__(self) -> str:
        return f"RotationMatrix2D({self._matrix.tolist()}, dtype={self.dtype})"
