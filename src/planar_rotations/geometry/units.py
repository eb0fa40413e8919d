"""
Unit adapter contract.

The geometry core never imports a unit library. Quantities are recognized,
converted and rewrapped through the active ``UnitAdapter``; the package
installs a pint-backed adapter on import (see ``planar_rotations.adapters``).
"""

from __future__ import annotations
from typing import Any, Callable, Tuple
import logging

logger = logging.getLogger(__name__)


def _identity(value: Any) -> Any:
    return value


class UnitAdapter:
    """
    Adapter that recognizes no quantities.
    
    Subclasses override ``is_quantity``, ``to_radians`` and ``split`` for a
    concrete unit library.
    """
    
    def is_quantity(self, value: Any) -> bool:
        """True if ``value`` carries a physical unit."""
        return False
    
    def to_radians(self, quantity: Any) -> Any:
        """
        Convert an angle quantity to radians and return the bare magnitude.
        
        Raises:
            UnitDimensionError: If the quantity is not an angle
        """
        raise TypeError(f"{type(self).__name__} does not handle {type(quantity).__name__}")
    
    def split(self, value: Any) -> Tuple[Any, Callable[[Any], Any]]:
        """
        Separate ``value`` into magnitude and a function restoring its unit.
        """
        return value, _identity


_adapter: UnitAdapter = UnitAdapter()


def get_unit_adapter() -> UnitAdapter:
    return _adapter


def set_unit_adapter(adapter: UnitAdapter) -> UnitAdapter:
    """
    Install ``adapter`` and return the previous one.
    """
    global _adapter
    previous = _adapter
    _adapter = adapter
    logger.debug("Unit adapter set to %s", type(adapter).__name__)
    return previous


def strip_angle(value: Any) -> Any:
    """Plain radian magnitude of ``value`` (unchanged if it has no unit)."""
    adapter = get_unit_adapter()
    if adapter.is_quantity(value):
        magnitude = adapter.to_radians(value)
        logger.debug("Stripped angle unit: %r -> %r rad", value, magnitude)
        return magnitude
    return value


def split_quantity(value: Any) -> Tuple[Any, Callable[[Any], Any]]:
    """Magnitude of ``value`` and a function reattaching its unit."""
    adapter = get_unit_adapter()
    if adapter.is_quantity(value):
        return adapter.split(value)
    return value, _identity
