"""Unit tests for units.py"""

import pint
import pytest

from compressible_inflow import units


@pytest.mark.parametrize(
    "unit, canonical",
    [
        ("Pa", units.PRESSURE),
        ("bar", units.PRESSURE),
        ("MPa", units.PRESSURE),
        ("K", units.TEMPERATURE),
        ("J/kg", units.SPECIFIC_ENERGY),
        ("MJ/kg", units.SPECIFIC_ENERGY),
        ("m^2/s^2", units.SPECIFIC_ENERGY),
    ],
)
def test_compatible_units(unit, canonical):
    assert units.is_compatible(unit, canonical)


@pytest.mark.parametrize(
    "unit, canonical",
    [
        ("K", units.PRESSURE),
        ("Pa", units.TEMPERATURE),
        ("J", units.SPECIFIC_ENERGY),
        ("m/s", units.SPECIFIC_ENERGY),
    ],
)
def test_incompatible_units(unit, canonical):
    assert not units.is_compatible(unit, canonical)


def test_unparseable_unit_is_incompatible():
    assert not units.is_compatible("not_a_unit", units.PRESSURE)


def test_missing_unit_is_canonical():
    assert units.is_compatible(None, units.PRESSURE)
    assert units.to_canonical(53.0e6, None, units.PRESSURE) == 53.0e6


def test_to_canonical_conversion():
    assert units.to_canonical(53.0, "MPa", units.PRESSURE) == pytest.approx(53.0e6)
    assert units.to_canonical(1.0, "bar", units.PRESSURE) == pytest.approx(1.0e5)
    assert units.to_canonical(9.1, "MJ/kg", units.SPECIFIC_ENERGY) == pytest.approx(9.1e6)
    assert units.to_canonical(26.85, "degC", units.TEMPERATURE) == pytest.approx(300.0)


def test_to_canonical_incompatible_raises():
    with pytest.raises(pint.errors.DimensionalityError):
        units.to_canonical(1.0, "K", units.PRESSURE)
