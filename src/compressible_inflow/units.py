"""Dimension checks for dimensioned boundary options.

Canonical units of the options inspected by the inflow checks:
    pressure          pascal
    temperature       kelvin
    specific enthalpy joule/kilogram
"""

from __future__ import annotations

import pint

ureg = pint.UnitRegistry()
Q_ = ureg.Quantity

PRESSURE = "pascal"
TEMPERATURE = "kelvin"
SPECIFIC_ENERGY = "joule/kilogram"


def is_compatible(unit: str | None, canonical: str) -> bool:
    """Return True if ``unit`` has the same dimensionality as ``canonical``.

    A missing unit (None) means the value was given in canonical units.
    Strings pint cannot parse are reported as incompatible.
    """
    if unit is None:
        return True
    try:
        return Q_(1.0, unit).is_compatible_with(canonical)
    except (pint.errors.PintError, ValueError, TypeError):
        return False


def to_canonical(value: float, unit: str | None, canonical: str) -> float:
    """Convert ``value`` given in ``unit`` to a magnitude in ``canonical``.

    Raises:
        pint.errors.DimensionalityError: If the units are incompatible.
    """
    if unit is None:
        return float(value)
    return float(Q_(value, unit).to(canonical).magnitude)
