"""Thermally perfect gas mixture built on RRHO species data."""

from __future__ import annotations

import math
from dataclasses import dataclass

import jax.numpy as jnp
from jaxtyping import Array, Float

from compressible_inflow import thermodynamic_relations
from compressible_inflow.chemistry_types import SpeciesTable
from compressible_inflow.equation_of_state_types import ThermodynamicState

Y_SUM_ATOL = 1e-8
T_MIN = 50.0  # [K]


@dataclass(frozen=True)
class ThermallyPerfectGas:
    """Frozen-composition ideal gas mixture with temperature dependent c_p.

    p = rho R_mix T,  h = Σ Y_s h_s(T),  c_p = Σ Y_s c_p,s(T),
    gamma = c_p / (c_p - R_mix),  a = sqrt(gamma R_mix T)
    """

    species: SpeciesTable
    max_iterations: int = 50
    rtol: float = 1e-12

    @property
    def n_species(self) -> int:
        return self.species.n_species

    @property
    def species_names(self) -> tuple[str, ...]:
        return self.species.names

    def _check_composition(self, Y: Float[Array, " n_species"]) -> Float[Array, " n_species"]:
        Y = jnp.asarray(Y, dtype=float)
        if Y.shape != (self.n_species,):
            raise ValueError(
                f"Mixture has shape {Y.shape}, expected ({self.n_species},) "
                f"for species {list(self.species_names)}"
            )
        if jnp.any(Y < 0.0):
            raise ValueError(f"Mass fractions must be non-negative, got {Y}")
        total = float(jnp.sum(Y))
        if abs(total - 1.0) > Y_SUM_ATOL:
            raise ValueError(f"Mass fractions must sum to 1, got {total}")
        return Y

    def _mixture_h_cp(self, Y: Float[Array, " n_species"], T: float) -> tuple[float, float]:
        T_arr = jnp.array([T])
        h_s = thermodynamic_relations.compute_enthalpy(T_arr, self.species)[:, 0]
        cp_s = thermodynamic_relations.compute_cp(T_arr, self.species)[:, 0]
        return float(jnp.sum(Y * h_s)), float(jnp.sum(Y * cp_s))

    def state_from_pT(
        self, Y: Float[Array, " n_species"], p: float, T: float
    ) -> ThermodynamicState:
        Y = self._check_composition(Y)
        if p <= 0.0 or T <= 0.0:
            raise ValueError(f"Pressure and temperature must be positive, got p={p}, T={T}")

        R_mix = float(
            thermodynamic_relations.compute_mixture_gas_constant(
                Y, self.species.molar_masses
            )
        )
        h, cp = self._mixture_h_cp(Y, T)
        gamma = cp / (cp - R_mix)

        return ThermodynamicState(
            rho=p / (R_mix * T),
            T=float(T),
            p=float(p),
            h=h,
            a=math.sqrt(gamma * R_mix * T),
            cp=cp,
            gamma=gamma,
            Y=Y,
        )

    def state_from_ph(
        self, Y: Float[Array, " n_species"], p: float, h: float
    ) -> ThermodynamicState:
        """Invert h(T) at fixed composition by Newton iteration on T.

        Raises:
            ValueError: If the iteration does not converge.
        """
        Y = self._check_composition(Y)

        h_0, cp_0 = self._mixture_h_cp(Y, 300.0)
        T = max(300.0 + (h - h_0) / cp_0, T_MIN)

        for _ in range(self.max_iterations):
            h_T, cp_T = self._mixture_h_cp(Y, T)

            # Newton update, step limited to 0.5 * T
            delta_T = (h - h_T) / cp_T
            delta_T = min(max(delta_T, -0.5 * T), 0.5 * T)
            T = max(T + delta_T, T_MIN)

            if abs(delta_T) <= self.rtol * T:
                return self.state_from_pT(Y, p, T)

        raise ValueError(
            f"Temperature inversion from h={h:.6e} J/kg did not converge "
            f"within {self.max_iterations} iterations (last T={T:.6e} K)"
        )
