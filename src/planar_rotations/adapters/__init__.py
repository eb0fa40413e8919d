"""Unit library adapters."""

from .pint_units import PintUnitAdapter

__all__ = ["PintUnitAdapter"]
