"""
Free functions over rotations.

Functions taking ``R`` accept either a representation class
(``RotationMatrix2D``, ``Angle2D``) or an instance of one; an instance
contributes its own element type.
"""

from __future__ import annotations
from typing import Optional, Tuple, Type, Union
import logging
import numpy as np
from numpy.typing import DTypeLike, NDArray
from scipy import linalg

from .angle import Angle2D
from .base import Rotation2D
from .errors import ShapeMismatchError
from .numeric import default_dtype, float_dtype, rotation_tol
from .rotation_matrix import RotationMatrix2D

logger = logging.getLogger(__name__)

RotationLike = Union[Type[Rotation2D], Rotation2D]


def _kind_and_dtype(R: RotationLike, dtype: Optional[DTypeLike]) -> Tuple[Type[Rotation2D], Optional[DTypeLike]]:
    if isinstance(R, Rotation2D):
        return type(R), dtype if dtype is not None else R.dtype
    return R, dtype


# ----------------------------------------------------------------------
# Identity, zeros, type queries
# ----------------------------------------------------------------------

def one(R: RotationLike, dtype: Optional[DTypeLike] = None) -> Rotation2D:
    """Identity rotation of the same representation."""
    kind, dtype = _kind_and_dtype(R, dtype)
    return kind.identity(dtype)


def zero(R: RotationLike, dtype: Optional[DTypeLike] = None) -> NDArray:
    """2x2 zero matrix (not a rotation)."""
    kind, dtype = _kind_and_dtype(R, dtype)
    return kind.zero(dtype)


def zeros(R: RotationLike, *shape, dtype: Optional[DTypeLike] = None) -> NDArray:
    """Array of zero matrices with outer shape ``shape``."""
    kind, dtype = _kind_and_dtype(R, dtype)
    return kind.zeros(*shape, dtype=dtype)


def size(R: RotationLike) -> Tuple[int, int]:
    return R.shape


def element_type(R: RotationLike) -> np.dtype:
    """Element type of an instance, or the default element type for a class."""
    if isinstance(R, Rotation2D):
        return R.dtype
    return default_dtype()


def random_rotation(R: Type[Rotation2D] = RotationMatrix2D, rng=None,
                    dtype: Optional[DTypeLike] = None) -> Rotation2D:
    """Uniformly distributed rotation (see ``Rotation2D.random``)."""
    return R.random(rng=rng, dtype=dtype)


# ----------------------------------------------------------------------
# Group operations
# ----------------------------------------------------------------------

def compose(r1: Rotation2D, r2: Rotation2D) -> Rotation2D:
    return r1.compose(r2)


def inverse(r: Rotation2D) -> Rotation2D:
    return r.inverse()


def transpose(r: Rotation2D) -> Rotation2D:
    return r.transpose()


def adjoint(r: Rotation2D) -> Rotation2D:
    return r.adjoint()


def right_divide(r1: Rotation2D, r2: Rotation2D) -> Rotation2D:
    """``r1 * inverse(r2)``."""
    return r1 / r2


def left_divide(r1: Rotation2D, other):
    """``inverse(r1) * other`` for a rotation or vector ``other``."""
    return r1.ldiv(other)


def power(r: Rotation2D, exponent: Union[int, float]) -> Rotation2D:
    return r.power(exponent)


def rotate(r: Rotation2D, vector):
    """Apply ``r`` to a vector or (2, N) stack of vectors."""
    return r.apply(vector)


def norm(r) -> float:
    """Frobenius norm of a rotation or plain matrix."""
    if isinstance(r, Rotation2D):
        return r.norm()
    return np.linalg.norm(np.asarray(r))


def normalize(r) -> NDArray:
    """Matrix divided by its Frobenius norm."""
    if isinstance(r, Rotation2D):
        return r.normalize()
    matrix = np.asarray(r)
    return matrix / np.linalg.norm(matrix)


# ----------------------------------------------------------------------
# Queries
# ----------------------------------------------------------------------

def rotation_angle(r: Rotation2D):
    return r.rotation_angle()


def params(r: Rotation2D) -> NDArray:
    return r.params()


def isapprox(a, b, rtol: Optional[float] = None, atol: Optional[float] = None) -> bool:
    """Approximate equality of two rotations or of a rotation and a matrix."""
    if not isinstance(a, Rotation2D):
        if not isinstance(b, Rotation2D):
            if np.shape(a) != (2, 2):
                return False
            a = RotationMatrix2D(a)
        else:
            a, b = b, a
    return a.isapprox(b, rtol=rtol, atol=atol)


def is_rotation(r, tol: Optional[float] = None) -> bool:
    """
    True if ``r`` is 2x2, orthonormal and has determinant +1.

    Args:
        r: Rotation or matrix-like
        tol: Bound on ``norm(r.T @ r - I)`` (None = configured / 1000 * eps)
    """
    matrix = np.asarray(r)
    if matrix.shape != (2, 2):
        return False
    if tol is None:
        tol = rotation_tol(matrix.dtype)
    matrix = matrix.astype(float_dtype(matrix.dtype))
    error = np.linalg.norm(matrix.T @ matrix - np.eye(2))
    return bool(error <= tol and np.linalg.det(matrix) > 0)


# ----------------------------------------------------------------------
# Construction helpers
# ----------------------------------------------------------------------

def rotation_between(u, v, kind: Type[Rotation2D] = RotationMatrix2D) -> Rotation2D:
    """
    Rotation taking the direction of ``u`` onto the direction of ``v``.

    Raises:
        ValueError: If either vector has zero length
    """
    u = np.asarray(u, dtype=np.float64)
    v = np.asarray(v, dtype=np.float64)
    if u.shape != (2,) or v.shape != (2,):
        raise ShapeMismatchError(f"Expected two 2-vectors, got {u.shape} and {v.shape}")
    if np.linalg.norm(u) < 1e-14 or np.linalg.norm(v) < 1e-14:
        raise ValueError("Cannot rotate to or from a zero vector")
    cross = u[0] * v[1] - u[1] * v[0]
    dot = u @ v
    return kind.from_angle(np.arctan2(cross, dot))


def nearest_rotation(matrix) -> RotationMatrix2D:
    """
    Closest rotation to ``matrix`` in the Frobenius norm.

    Projects through the SVD ``U S Vt`` to ``U D Vt`` with ``D`` chosen so
    the determinant is +1.
    """
    m = np.asarray(matrix)
    if m.shape != (2, 2):
        raise ShapeMismatchError(f"Expected a 2x2 matrix, got shape {m.shape}")
    m = m.astype(float_dtype(m.dtype))
    u, _, vt = linalg.svd(m)
    d = np.diag([1.0, np.sign(np.linalg.det(u @ vt)) or 1.0]).astype(m.dtype)
    projected = u @ d @ vt
    logger.debug("Projected matrix onto SO(2), residual %.3e", np.linalg.norm(projected - m))
    return RotationMatrix2D(projected)


def principal_value(r: Rotation2D) -> Rotation2D:
    """Wrap an ``Angle2D`` into [-pi, pi); other representations are returned as is."""
    if isinstance(r, Angle2D):
        return r.principal_value()
    return r
