"""
Exceptions raised while building or converting 2D rotations.
"""


class RotationError(ValueError):
    """Base class for invalid rotation input."""


class ShapeMismatchError(RotationError):
    """Input is not 4 components or a 2x2 array."""


class UnitDimensionError(RotationError):
    """A physical quantity was supplied whose dimension is not an angle."""
