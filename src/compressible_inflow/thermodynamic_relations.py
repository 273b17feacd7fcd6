"""Thermodynamic property calculations for rigid-rotor / harmonic-oscillator species.

This module contains pure functions for computing thermodynamic properties.
High-level functions (compute_enthalpy, compute_cp, etc.) take a SpeciesTable
as argument, while low-level functions take raw arrays.

All species quantities are evaluated in thermal equilibrium (T = T_V) and
referenced to the ground state at 0 K, so that h_s(0) = h_s0.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import jax.numpy as jnp
from jaxtyping import Array, Bool, Float

from compressible_inflow import constants

if TYPE_CHECKING:
    from compressible_inflow.chemistry_types import SpeciesTable


def compute_cp_trans_rot(
    T: Float[Array, " N"],
    is_monoatomic: Bool[Array, " n_species"],
    molar_masses: Float[Array, " n_species"],
) -> Float[Array, "n_species N"]:
    """Compute translational-rotational specific heat at constant pressure.

    Atoms:      c_p,tr = 5/2 R/M
    Molecules:  c_p,tr = 7/2 R/M  (fully excited rigid rotor)

    Args:
        T: Temperature [K], shape (N,) - only used for broadcasting
        is_monoatomic: Atom mask, shape (n_species,)
        molar_masses: Molar mass [kg/mol], shape (n_species,)

    Returns:
        c_p,tr [J/(kg K)], shape (n_species, N)
    """
    factor = jnp.where(is_monoatomic, 2.5, 3.5)
    cp_tr = factor * constants.R_universal / molar_masses
    return jnp.broadcast_to(cp_tr[:, None], (molar_masses.shape[0], T.shape[0]))


def compute_e_vib_harmonic_oscillator(
    T: Float[Array, " N"],
    theta_vib: Float[Array, " n_species"],
    molar_masses: Float[Array, " n_species"],
) -> Float[Array, "n_species N"]:
    """Compute vibrational energy per unit mass (harmonic oscillator).

    e_v = (R/M) * θ_v / (exp(θ_v/T) - 1)

    Species without a vibrational mode (θ_v = NaN) contribute zero.

    Args:
        T: Temperature [K], shape (N,)
        theta_vib: Characteristic vibrational temperature [K], shape (n_species,)
        molar_masses: Molar mass [kg/mol], shape (n_species,)

    Returns:
        e_v [J/kg], shape (n_species, N)
    """
    has_vib = jnp.isfinite(theta_vib)
    theta = jnp.where(has_vib, theta_vib, 1.0)[:, None]

    x = theta / T[None, :]
    e_v = (constants.R_universal / molar_masses)[:, None] * theta / jnp.expm1(x)

    return jnp.where(has_vib[:, None], e_v, 0.0)


def compute_cv_vib_harmonic_oscillator(
    T: Float[Array, " N"],
    theta_vib: Float[Array, " n_species"],
    molar_masses: Float[Array, " n_species"],
) -> Float[Array, "n_species N"]:
    """Compute vibrational specific heat (harmonic oscillator).

    c_v,vib = (R/M) * x^2 exp(x) / (exp(x) - 1)^2,   x = θ_v/T
    """
    has_vib = jnp.isfinite(theta_vib)
    theta = jnp.where(has_vib, theta_vib, 1.0)[:, None]

    x = theta / T[None, :]
    cv_v = (
        (constants.R_universal / molar_masses)[:, None]
        * x**2
        * jnp.exp(-x)
        / jnp.expm1(-x) ** 2
    )

    return jnp.where(has_vib[:, None], cv_v, 0.0)


def compute_molar_entropy_standard(
    T: Float[Array, " N"],
    species_table: "SpeciesTable",
) -> Float[Array, "n_species N"]:
    """Compute standard-state molar entropy s°(T) at p° = 1e5 Pa.

    s° = s_trans + s_rot + s_vib + s_el with

        s_trans = R [ln((2π m k T / h²)^{3/2} k T / p°) + 5/2]   (Sackur-Tetrode)
        s_rot   = R [ln(T / (σ θ_r)) + 1]                          (molecules)
        s_vib   = R [x / (exp(x) - 1) - ln(1 - exp(-x))]           (molecules)
        s_el    = R ln g_0

    Args:
        T: Temperature [K], shape (N,)
        species_table: SpeciesTable with RRHO data

    Returns:
        s° [J/(mol K)], shape (n_species, N)
    """
    R = constants.R_universal
    T_row = T[None, :]

    m = (species_table.molar_masses / constants.N_A)[:, None]  # [kg]
    thermal = (2.0 * jnp.pi * m * constants.k * T_row / constants.h_planck**2) ** 1.5
    s_trans = R * (jnp.log(thermal * constants.k * T_row / constants.p_standard) + 2.5)

    is_molecule = ~species_table.is_monoatomic
    theta_rot = jnp.where(is_molecule, species_table.theta_rot, 1.0)[:, None]
    sigma = species_table.symmetry_number[:, None]
    s_rot = jnp.where(
        is_molecule[:, None], R * (jnp.log(T_row / (sigma * theta_rot)) + 1.0), 0.0
    )

    has_vib = jnp.isfinite(species_table.theta_vib)
    theta_vib = jnp.where(has_vib, species_table.theta_vib, 1.0)[:, None]
    x = theta_vib / T_row
    s_vib = jnp.where(
        has_vib[:, None], R * (x / jnp.expm1(x) - jnp.log(-jnp.expm1(-x))), 0.0
    )

    s_el = R * jnp.log(species_table.electronic_degeneracy)[:, None]

    return s_trans + s_rot + s_vib + s_el


# =============================================================================
# High-level API: Functions that take SpeciesTable as argument
# =============================================================================


def compute_enthalpy(
    T: Float[Array, " N"],
    species_table: "SpeciesTable",
) -> Float[Array, "n_species N"]:
    """Compute specific enthalpy for all species.

    h_s(T) = h_s0 + c_p,tr T + e_v(T)

    Args:
        T: Temperature array [K], shape (N,)
        species_table: SpeciesTable containing RRHO data

    Returns:
        Specific enthalpy [J/kg] for all species, shape (n_species, N)
    """
    cp_tr = compute_cp_trans_rot(
        T, species_table.is_monoatomic, species_table.molar_masses
    )
    e_v = compute_e_vib_harmonic_oscillator(
        T, species_table.theta_vib, species_table.molar_masses
    )
    return species_table.h_s0[:, None] + cp_tr * T[None, :] + e_v


def compute_cp(
    T: Float[Array, " N"],
    species_table: "SpeciesTable",
) -> Float[Array, "n_species N"]:
    """Compute specific heat at constant pressure for all species.

    Args:
        T: Temperature array [K], shape (N,)
        species_table: SpeciesTable containing RRHO data

    Returns:
        C_p [J/(kg K)] for all species, shape (n_species, N)
    """
    cp_tr = compute_cp_trans_rot(
        T, species_table.is_monoatomic, species_table.molar_masses
    )
    cv_v = compute_cv_vib_harmonic_oscillator(
        T, species_table.theta_vib, species_table.molar_masses
    )
    return cp_tr + cv_v


def compute_gibbs_molar_standard(
    T: Float[Array, " N"],
    species_table: "SpeciesTable",
) -> Float[Array, "n_species N"]:
    """Compute standard-state molar Gibbs energy g° = h - T s° [J/mol]."""
    h_molar = compute_enthalpy(T, species_table) * species_table.molar_masses[:, None]
    s_molar = compute_molar_entropy_standard(T, species_table)
    return h_molar - T[None, :] * s_molar


def compute_mixture_gas_constant(
    Y: Float[Array, " n_species"],
    molar_masses: Float[Array, " n_species"],
) -> Float[Array, ""]:
    """Mixture specific gas constant R_mix = Σ Y_s R/M_s [J/(kg K)]."""
    return constants.R_universal * jnp.sum(Y / molar_masses)
