from __future__ import annotations

from dataclasses import dataclass, field

import jax
import jax.numpy as jnp
import jaxtyping as jt
from jaxtyping import Float, Int


@jax.tree_util.register_dataclass
@dataclass(frozen=True)
class SpeciesTable:
    """Vectorized rigid-rotor / harmonic-oscillator species data.

    Thermodynamic properties are computed via pure functions in
    thermodynamic_relations.py that take this SpeciesTable as an argument.
    Atoms carry NaN for theta_vib and theta_rot.
    """

    names: tuple[str, ...] = field(metadata=dict(static=True))
    molar_masses: Float[jt.Array, " n_species"]  # [kg/mol]
    h_s0: Float[jt.Array, " n_species"]  # [J/kg], energy of the ground state at 0 K
    theta_vib: Float[jt.Array, " n_species"]  # [K]
    theta_rot: Float[jt.Array, " n_species"]  # [K]
    symmetry_number: Float[jt.Array, " n_species"]  # [-]
    electronic_degeneracy: Float[jt.Array, " n_species"]  # [-]

    # (molecule index, atom index) per homonuclear dissociation pair A2 <-> 2A
    dissociation_pairs: Int[jt.Array, "n_pairs 2"]

    def __post_init__(self):
        """Validate data consistency."""
        n_sp = len(self.names)

        assert self.molar_masses.shape == (
            n_sp,
        ), f"molar_masses shape {self.molar_masses.shape} != ({n_sp},)"
        assert self.h_s0.shape == (n_sp,), f"h_s0 shape {self.h_s0.shape} != ({n_sp},)"
        assert self.theta_vib.shape == (
            n_sp,
        ), f"theta_vib shape {self.theta_vib.shape} != ({n_sp},)"
        assert self.theta_rot.shape == (
            n_sp,
        ), f"theta_rot shape {self.theta_rot.shape} != ({n_sp},)"
        assert self.symmetry_number.shape == (
            n_sp,
        ), f"symmetry_number shape {self.symmetry_number.shape} != ({n_sp},)"
        assert self.electronic_degeneracy.shape == (
            n_sp,
        ), f"electronic_degeneracy shape {self.electronic_degeneracy.shape} != ({n_sp},)"
        assert (
            self.dissociation_pairs.ndim == 2 and self.dissociation_pairs.shape[1] == 2
        ), f"dissociation_pairs shape {self.dissociation_pairs.shape} != (n_pairs, 2)"

    @property
    def n_species(self) -> int:
        """Number of species in the table."""
        return len(self.names)

    @property
    def n_pairs(self) -> int:
        return self.dissociation_pairs.shape[0]

    @property
    def is_monoatomic(self) -> jt.Bool[jt.Array, " n_species"]:
        """Boolean mask: True = atom, False = molecule."""
        return ~jnp.isfinite(self.theta_rot)

    def index(self, name: str) -> int:
        try:
            return self.names.index(name)
        except ValueError:
            raise ValueError(
                f"Species '{name}' not in species table {list(self.names)}"
            ) from None
