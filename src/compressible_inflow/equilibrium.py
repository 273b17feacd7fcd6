"""Chemical equilibrium for homonuclear dissociation A2 <-> 2A.

Each dissociation pair j of the species table conserves the element mass
m_j = Y_A2 + Y_A of the reference mixture. With the mass-based degree of
dissociation α_j (Y_A = α_j m_j) and a_j = m_j / M_A2 the law of mass action

    x_A^2 / x_A2 = K_p,j(T) p° / p

becomes 4 a_j α_j^2 = c_j (1 - α_j) with c_j = K_p,j p° n / p, where n is the
total mole number per unit mass of the mixture. For a single pair this has a
closed form in n; coupled pairs share n, which is found with brentq.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import jax.numpy as jnp
import numpy as np
from jaxtyping import Array, Float
from scipy import optimize

from compressible_inflow import constants, thermodynamic_relations
from compressible_inflow.chemistry_types import SpeciesTable


@runtime_checkable
class EquilibriumChemistry(Protocol):
    """Oracle returning equilibrium mass fractions at (p, T)."""

    def solve(
        self, p: float, T: float, Y_ref: Float[Array, " n_species"]
    ) -> Float[Array, " n_species"]: ...


def compute_equilibrium_constants(
    T: float, species_table: SpeciesTable
) -> Float[Array, " n_pairs"]:
    """Pressure equilibrium constants K_p (referenced to p°) of all pairs.

    K_p = exp(-(2 g°_A - g°_A2) / (R T))
    """
    g = thermodynamic_relations.compute_gibbs_molar_standard(
        jnp.array([T]), species_table
    )[:, 0]
    molecule = species_table.dissociation_pairs[:, 0]
    atom = species_table.dissociation_pairs[:, 1]
    delta_g = 2.0 * g[atom] - g[molecule]
    return jnp.exp(-delta_g / (constants.R_universal * T))


def degree_of_dissociation(a: float, c: float) -> float:
    """Root in [0, 1) of 4 a α^2 + c α - c = 0."""
    if a <= 0.0 or c <= 0.0:
        return 0.0
    return 2.0 * c / (c + math.sqrt(c * c + 16.0 * a * c))


@dataclass(frozen=True)
class DissociationEquilibrium:
    species: SpeciesTable
    xtol: float = 1e-15

    def solve(
        self, p: float, T: float, Y_ref: Float[Array, " n_species"]
    ) -> Float[Array, " n_species"]:
        Y_ref = jnp.asarray(Y_ref, dtype=float)
        if Y_ref.shape != (self.species.n_species,):
            raise ValueError(
                f"Reference mixture has shape {Y_ref.shape}, "
                f"expected ({self.species.n_species},)"
            )
        if self.species.n_pairs == 0:
            return Y_ref

        pairs = np.asarray(self.species.dissociation_pairs)
        molecule, atom = pairs[:, 0], pairs[:, 1]
        M = np.asarray(self.species.molar_masses)
        Y_host = np.asarray(Y_ref)

        element_mass = Y_host[molecule] + Y_host[atom]
        a = element_mass / M[molecule]
        if np.sum(a) <= 0.0:
            return Y_ref

        inert = np.ones(self.species.n_species, dtype=bool)
        inert[pairs.ravel()] = False
        n_inert = float(np.sum(Y_host[inert] / M[inert]))

        K_p = np.asarray(compute_equilibrium_constants(T, self.species))
        scale = constants.p_standard / p

        def alphas(n: float) -> np.ndarray:
            return np.array(
                [degree_of_dissociation(a_j, K_j * scale * n) for a_j, K_j in zip(a, K_p)]
            )

        def residual(n: float) -> float:
            return n - n_inert - float(np.sum(a * (1.0 + alphas(n))))

        if len(a) == 1:
            n = self._single_pair_mole_number(float(a[0]), float(K_p[0]) * scale, n_inert)
        else:
            # residual(n_low) <= 0 and residual(n_high) >= 0
            n_low = n_inert + float(np.sum(a))
            n_high = n_inert + 2.0 * float(np.sum(a))
            n = optimize.brentq(residual, n_low, n_high, xtol=self.xtol * n_high)

        alpha = alphas(n)
        Y = Y_ref.at[molecule].set((1.0 - alpha) * element_mass)
        return Y.at[atom].set(alpha * element_mass)

    @staticmethod
    def _single_pair_mole_number(a: float, K: float, n_inert: float) -> float:
        """Total mole number for one pair with inert diluent.

        Substituting n = n_inert + a (1 + α) into 4 a α^2 = K (1 - α) n gives
        the quadratic (4a + K a) α^2 + K n_inert α - K (n_inert + a) = 0.
        """
        if a <= 0.0 or K <= 0.0:
            return n_inert + a
        A = 4.0 * a + K * a
        B = K * n_inert
        C = K * (n_inert + a)
        alpha = 2.0 * C / (B + math.sqrt(B * B + 4.0 * A * C))
        return n_inert + a * (1.0 + alpha)
