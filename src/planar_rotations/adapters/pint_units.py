"""
pint-backed unit adapter.
"""

from __future__ import annotations
from typing import Any, Callable, Tuple

import pint

from ..geometry.errors import UnitDimensionError
from ..geometry.units import UnitAdapter


class PintUnitAdapter(UnitAdapter):
    """
    Recognizes ``pint.Quantity`` values from any unit registry.
    
    pint treats angles as dimensionless, so a quantity is accepted as an
    angle only when its root units reduce to exactly radian. Ratios such as
    percent or m/km are rejected along with dimensioned quantities.
    """
    
    def is_quantity(self, value: Any) -> bool:
        return isinstance(value, pint.Quantity)
    
    def to_radians(self, quantity: pint.Quantity) -> Any:
        if dict(quantity.to_root_units()._units) != {"radian": 1}:
            raise UnitDimensionError(
                f"Expected an angle, got a quantity in {quantity.units} "
                f"(dimension {quantity.dimensionality})"
            )
        return quantity.to("radian").magnitude
    
    def split(self, value: pint.Quantity) -> Tuple[Any, Callable[[Any], Any]]:
        quantity_type = type(value)
        units = value.units

        def rewrap(magnitude: Any) -> pint.Quantity:
            return quantity_type(magnitude, units)
        
        return value.magnitude, rewrap
