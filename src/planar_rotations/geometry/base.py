"""
Abstract 2D rotation: the contract shared by every representation.

A rotation behaves like a read-only 2x2 matrix (``np.asarray(r)``,
``r[i, j]``, ``r.shape``) and implements the group operations on top of
``to_matrix``, ``compose``, ``inverse`` and ``rotation_angle``.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from numbers import Number
from typing import Any, Optional, Tuple, Union
import numpy as np
from numpy.typing import DTypeLike, NDArray

from .errors import ShapeMismatchError
from .numeric import default_atol, default_rtol, resolve_dtype
from .units import split_quantity


class Rotation2D(ABC):
    """
    Orientation in the plane.

    Attributes:
        shape: Always (2, 2)
        ndim: Always 2
    """

    __slots__ = ()

    shape: Tuple[int, int] = (2, 2)
    ndim = 2

    # Make numpy defer to the reflected operators below instead of
    # broadcasting over the rotation as an object array.
    __array_ufunc__ = None

    # ------------------------------------------------------------------
    # Representation-specific parts
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def dtype(self) -> np.dtype:
        """Element type."""

    @abstractmethod
    def to_matrix(self) -> NDArray:
        """Materialize as a 2x2 ndarray of ``dtype``."""

    @abstractmethod
    def compose(self, other: Rotation2D) -> Rotation2D:
        """Rotation applying ``other`` first, then ``self``."""

    @abstractmethod
    def inverse(self) -> Rotation2D:
        """Inverse rotation."""

    @abstractmethod
    def rotation_angle(self):
        """Rotation angle in radians."""

    @abstractmethod
    def power(self, exponent: Union[int, float]) -> Rotation2D:
        """Rotation by ``exponent`` times the angle."""

    @abstractmethod
    def params(self) -> NDArray:
        """Stored parameters as a flat array."""

    @classmethod
    @abstractmethod
    def identity(cls, dtype: Optional[DTypeLike] = None) -> Rotation2D:
        """Identity rotation with element type ``dtype``."""

    @classmethod
    @abstractmethod
    def from_angle(cls, theta, dtype: Optional[DTypeLike] = None) -> Rotation2D:
        """Rotation by ``theta`` (plain radians or an angle quantity)."""

    # ------------------------------------------------------------------
    # Shared constructors
    # ------------------------------------------------------------------

    @classmethod
    def zero(cls, dtype: Optional[DTypeLike] = None) -> NDArray:
        """2x2 zero matrix (additive zero, not a rotation)."""
        return np.zeros(cls.shape, dtype=resolve_dtype(dtype))

    @classmethod
    def zeros(cls, *shape, dtype: Optional[DTypeLike] = None) -> NDArray:
        """
        Array of zero matrices.

        Args:
            *shape: Outer shape, as integers or a single tuple (empty = 0-d)
            dtype: Element type

        Returns:
            ndarray of shape ``shape + (2, 2)``
        """
        if len(shape) == 1 and isinstance(shape[0], tuple):
            shape = shape[0]
        return np.zeros(tuple(shape) + cls.shape, dtype=resolve_dtype(dtype))

    @classmethod
    def random(cls, rng=None, dtype: Optional[DTypeLike] = None) -> Rotation2D:
        """
        Rotation with angle drawn uniformly from [0, 2*pi).

        Args:
            rng: Seed, ``np.random.Generator`` or None (fresh entropy)
            dtype: Element type
        """
        rng = np.random.default_rng(rng)
        dtype = resolve_dtype(dtype)
        theta = 2 * np.pi * rng.random()
        return cls.from_angle(dtype.type(theta), dtype=dtype)

    # ------------------------------------------------------------------
    # Derived operations
    # ------------------------------------------------------------------

    def transpose(self) -> Rotation2D:
        """Transpose (equal to the inverse)."""
        return self.inverse()

    def adjoint(self) -> Rotation2D:
        """Conjugate transpose (equal to the inverse)."""
        return self.inverse()

    @property
    def T(self) -> Rotation2D:
        return self.inverse()

    def ldiv(self, other):
        """``self.inverse() * other`` (the left division operator)."""
        return self.inverse() * other

    def apply(self, vector):
        """
        Rotate a vector or a stack of column vectors.

        Args:
            vector: Shape (2,) or (2, N), plain or carrying a unit

        Returns:
            Rotated vector(s) in the unit of ``vector``
        """
        magnitude, rewrap = split_quantity(vector)
        arr = np.asarray(magnitude)
        if arr.ndim == 0 or arr.ndim > 2 or arr.shape[0] != 2:
            raise ShapeMismatchError(
                f"Expected a vector of shape (2,) or (2, N), got {arr.shape}"
            )
        return rewrap(self.to_matrix() @ arr)

    def norm(self) -> float:
        """Frobenius norm of the matrix."""
        return np.linalg.norm(self.to_matrix())

    def normalize(self) -> NDArray:
        """Matrix divided by its Frobenius norm (a plain ndarray)."""
        matrix = self.to_matrix()
        return matrix / np.linalg.norm(matrix)

    def isapprox(self, other, rtol: Optional[float] = None, atol: Optional[float] = None) -> bool:
        """
        Approximate equality of the materialized matrices.

        ``norm(a - b) <= max(atol, rtol * max(norm(a), norm(b)))``
        """
        a = np.asarray(self)
        b = np.asarray(other)
        if b.shape != self.shape:
            return False
        if rtol is None:
            rtol = default_rtol(a.dtype, b.dtype)
        if atol is None:
            atol = default_atol()
        a = a.astype(np.float64)
        b = b.astype(np.float64)
        diff = np.linalg.norm(a - b)
        return bool(diff <= max(atol, rtol * max(np.linalg.norm(a), np.linalg.norm(b))))

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __array__(self, dtype=None, copy=None):
        matrix = self.to_matrix()
        if dtype is not None and np.dtype(dtype) != matrix.dtype:
            if copy is False:
                raise ValueError(
                    f"Cannot view a {matrix.dtype} rotation as {np.dtype(dtype)} without copying"
                )
            return matrix.astype(dtype)
        if copy:
            return matrix.copy()
        return matrix

    def __getitem__(self, index):
        return self.to_matrix()[index]

    def __len__(self) -> int:
        return 2

    def __iter__(self):
        return iter(self.to_matrix())

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Rotation2D):
            return bool(np.array_equal(self.to_matrix(), other.to_matrix()))
        if isinstance(other, (np.ndarray, list, tuple)):
            try:
                other = np.asarray(other)
            except ValueError:
                return False
            return other.shape == self.shape and bool(np.array_equal(self.to_matrix(), other))
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self.to_matrix().ravel().tolist()))

    def __mul__(self, other):
        if isinstance(other, Rotation2D):
            return self.compose(other)
        if _is_scalar(other):
            return self.to_matrix() * other
        return self.apply(other)

    def __rmul__(self, other):
        if _is_scalar(other):
            return other * self.to_matrix()
        return np.asarray(other) @ self.to_matrix()

    def __matmul__(self, other):
        if _is_scalar(other):
            return NotImplemented
        return self * other

    def __rmatmul__(self, other):
        if _is_scalar(other):
            return NotImplemented
        return np.asarray(other) @ self.to_matrix()

    def __truediv__(self, other):
        if isinstance(other, Rotation2D):
            return self.compose(other.inverse())
        if _is_scalar(other):
            return self.to_matrix() / other
        return NotImplemented

    def __pow__(self, exponent):
        if not _is_scalar(exponent):
            return NotImplemented
        return self.power(exponent)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (Number, np.number)) and not isinstance(value, bool)
