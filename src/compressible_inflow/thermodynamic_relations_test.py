"""Unit tests for thermodynamic_relations.py functions"""

from pathlib import Path

import jax
import jax.numpy as jnp

from compressible_inflow import constants, thermodynamic_relations
from compressible_inflow.chemistry_utils import load_species_table

# Configure JAX for testing
jax.config.update("jax_enable_x64", True)

DATA_DIR = Path(__file__).parent.parent.parent / "data"
SPECIES_FILE = DATA_DIR / "rrho_species.json"


def _nitrogen():
    return load_species_table(SPECIES_FILE, ["N2", "N"])


def test_enthalpy_shape():
    """Test output shape of enthalpy computation."""
    table = _nitrogen()
    T = jnp.array([300.0, 1000.0, 5000.0, 10000.0])

    h = thermodynamic_relations.compute_enthalpy(T, table)

    assert h.shape == (table.n_species, len(T)), f"got {h.shape}"


def test_enthalpy_monotonic():
    """Enthalpy increases monotonically with temperature."""
    table = _nitrogen()
    T = jnp.linspace(300.0, 15000.0, 50)

    h = thermodynamic_relations.compute_enthalpy(T, table)

    for i in range(table.n_species):
        assert jnp.all(jnp.diff(h[i, :]) > 0), f"{table.names[i]} not monotonic"


def test_cp_is_derivative_of_enthalpy():
    table = _nitrogen()
    T = jnp.array([500.0, 3000.0, 7000.0])
    dT = 1e-2

    h_plus = thermodynamic_relations.compute_enthalpy(T + dT, table)
    h_minus = thermodynamic_relations.compute_enthalpy(T - dT, table)
    cp = thermodynamic_relations.compute_cp(T, table)

    assert jnp.allclose((h_plus - h_minus) / (2 * dT), cp, rtol=1e-6)


def test_cp_limits():
    """Molecules: 7/2 R/M when vibration is frozen, 9/2 R/M when fully excited."""
    table = _nitrogen()
    R_N2 = constants.R_universal / table.molar_masses[0]
    R_N = constants.R_universal / table.molar_masses[1]

    cp_cold = thermodynamic_relations.compute_cp(jnp.array([100.0]), table)[:, 0]
    cp_hot = thermodynamic_relations.compute_cp(jnp.array([1.0e6]), table)[:, 0]

    assert jnp.isclose(cp_cold[0], 3.5 * R_N2, rtol=1e-6)
    assert jnp.isclose(cp_hot[0], 4.5 * R_N2, rtol=1e-6)
    assert jnp.isclose(cp_cold[1], 2.5 * R_N)
    assert jnp.isclose(cp_hot[1], 2.5 * R_N)


def test_enthalpy_at_zero_temperature_limit():
    table = _nitrogen()
    h = thermodynamic_relations.compute_enthalpy(jnp.array([1.0e-4]), table)[:, 0]
    assert jnp.allclose(h, table.h_s0, atol=1.0)


def test_standard_entropy_at_room_temperature():
    """Compare with tabulated s°(298.15 K): N2 191.6, N 153.3 J/(mol K)."""
    table = _nitrogen()
    s = thermodynamic_relations.compute_molar_entropy_standard(
        jnp.array([298.15]), table
    )[:, 0]

    assert jnp.isclose(s[0], 191.6, rtol=5e-3), f"s(N2) = {s[0]}"
    assert jnp.isclose(s[1], 153.3, rtol=5e-3), f"s(N) = {s[1]}"


def test_gibbs_definition():
    table = _nitrogen()
    T = jnp.array([1000.0, 6000.0])

    g = thermodynamic_relations.compute_gibbs_molar_standard(T, table)
    h = thermodynamic_relations.compute_enthalpy(T, table) * table.molar_masses[:, None]
    s = thermodynamic_relations.compute_molar_entropy_standard(T, table)

    assert jnp.allclose(g, h - T[None, :] * s)


def test_mixture_gas_constant():
    table = _nitrogen()
    R_N2 = constants.R_universal / table.molar_masses[0]

    assert jnp.isclose(
        thermodynamic_relations.compute_mixture_gas_constant(
            jnp.array([1.0, 0.0]), table.molar_masses
        ),
        R_N2,
    )
    assert jnp.isclose(
        thermodynamic_relations.compute_mixture_gas_constant(
            jnp.array([0.0, 1.0]), table.molar_masses
        ),
        2.0 * R_N2,
    )
