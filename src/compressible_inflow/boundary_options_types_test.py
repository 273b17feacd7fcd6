"""Unit tests for boundary_options_types.py"""

import jax
import jax.numpy as jnp
import pint
import pytest

from compressible_inflow import units
from compressible_inflow.boundary_options_types import BoundaryOptionSet, OptionValue

# Configure JAX for testing
jax.config.update("jax_enable_x64", True)

SPECIES = ("N2", "N")


def test_from_dict_accepts_all_value_forms():
    options = BoundaryOptionSet.from_dict(
        {
            "type": "isentropicInflow",
            "p0": (53.0, "MPa"),
            "T0": OptionValue(7000.0, "K"),
            "h0": 9.1e6,
        }
    )

    assert set(options.names) == {"p0", "T0", "h0"}
    assert options.options["p0"] == OptionValue(53.0, "MPa")
    assert options.options["T0"] == OptionValue(7000.0, "K")
    assert options.options["h0"] == OptionValue(9.1e6, None)


def test_type_is_not_an_option():
    options = BoundaryOptionSet.from_dict({"type": "isentropicInflow"})
    assert not options.option_exists("type")


def test_options_are_read_only():
    options = BoundaryOptionSet.from_dict({"p0": 1.0e5})
    with pytest.raises(TypeError):
        options.options["p0"] = OptionValue(2.0e5)


def test_compatible():
    options = BoundaryOptionSet.from_dict({"p0": (1.0, "bar"), "T0": (300.0, "Pa")})

    assert options.compatible("p0", units.PRESSURE)
    assert not options.compatible("T0", units.TEMPERATURE)
    assert not options.compatible("h0", units.SPECIFIC_ENERGY), "absent option"


def test_get_option_in_units():
    options = BoundaryOptionSet.from_dict({"p0": (53.0, "MPa"), "h0": 9.1e6})

    assert options.get_option_in_units("p0", units.PRESSURE) == pytest.approx(53.0e6)
    assert options.get_option_in_units("h0", units.SPECIFIC_ENERGY) == 9.1e6

    with pytest.raises(KeyError):
        options.get_option_in_units("T0", units.TEMPERATURE)
    with pytest.raises(pint.errors.DimensionalityError):
        options.get_option_in_units("p0", units.TEMPERATURE)


def test_get_mixture_from_mapping():
    options = BoundaryOptionSet.from_dict({"mixture": {"N2": 1.0}})
    Y = options.get_mixture(SPECIES)
    assert jnp.allclose(Y, jnp.array([1.0, 0.0]))


def test_get_mixture_from_sequence():
    options = BoundaryOptionSet.from_dict({"mixture": [0.9, 0.1]})
    Y = options.get_mixture(SPECIES)
    assert jnp.allclose(Y, jnp.array([0.9, 0.1]))


def test_get_mixture_rejects_unknown_species():
    options = BoundaryOptionSet.from_dict({"mixture": {"O2": 1.0}})
    with pytest.raises(ValueError, match="Unknown species"):
        options.get_mixture(SPECIES)


def test_get_mixture_rejects_wrong_length():
    options = BoundaryOptionSet.from_dict({"mixture": [1.0, 0.0, 0.0]})
    with pytest.raises(ValueError, match="shape"):
        options.get_mixture(SPECIES)


def test_with_option_returns_copy():
    options = BoundaryOptionSet.from_dict({"h0": 9.1e6})
    resolved = options.with_option("T0", 7000.0, "K")

    assert resolved.option_exists("T0")
    assert resolved.option_exists("h0")
    assert not options.option_exists("T0")
