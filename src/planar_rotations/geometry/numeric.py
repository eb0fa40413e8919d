"""
Element-type inference for rotation components.

The element type of a rotation is fixed once, at construction, from the
arguments it was built from. Plain Python scalars follow numpy's promotion
rules, so a float32 angle stays float32 and integer components stay integer.
"""

from __future__ import annotations
from typing import Optional
import numpy as np
from numpy.typing import DTypeLike

from ..config.schemas import get_settings


def infer_dtype(*values) -> np.dtype:
    """Common numpy dtype of scalar ``values``."""
    if not values:
        return default_dtype()
    dtype = np.result_type(*values)
    if dtype == np.bool_ or dtype == np.object_:
        raise TypeError(f"Cannot infer a numeric element type from {dtype}")
    return dtype


def float_dtype(dtype: DTypeLike) -> np.dtype:
    """Floating counterpart of ``dtype`` (non-floating types become float64)."""
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.floating):
        return dtype
    return np.dtype(np.float64)


def resolve_dtype(dtype: Optional[DTypeLike]) -> np.dtype:
    """Explicit ``dtype`` or the configured default."""
    if dtype is None:
        return default_dtype()
    return np.dtype(dtype)


def default_dtype() -> np.dtype:
    return np.dtype(get_settings().default_dtype)


def default_rtol(*dtypes: DTypeLike) -> float:
    """
    Relative tolerance for approximate comparisons.
    
    Uses the configured value when set, otherwise sqrt(eps) of the
    loosest floating type among ``dtypes``.
    """
    configured = get_settings().tolerance.rtol
    if configured is not None:
        return configured
    return max(float(np.sqrt(np.finfo(float_dtype(d)).eps)) for d in dtypes)


def default_atol() -> float:
    return get_settings().tolerance.atol


def rotation_tol(dtype: DTypeLike) -> float:
    """Orthonormality tolerance used by ``is_rotation``."""
    configured = get_settings().tolerance.rotation_tol
    if configured is not None:
        return configured
    return 1000 * float(np.finfo(float_dtype(dtype)).eps)
