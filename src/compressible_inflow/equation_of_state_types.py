from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from jaxtyping import Array, Float


@dataclass(frozen=True)
class ThermodynamicState:
    """Thermodynamic state of one mixture at one (p, T) pair.

    Produced fresh by an EquationOfState; never mutated.
    """

    rho: float  # [kg/m^3]
    T: float  # [K]
    p: float  # [Pa]
    h: float  # [J/kg]
    a: float  # [m/s] frozen speed of sound
    cp: float  # [J/(kg K)] frozen specific heat at constant pressure
    gamma: float  # [-]
    Y: Float[Array, " n_species"]


@runtime_checkable
class EquationOfState(Protocol):
    """Oracle for full thermodynamic states of a fixed species set."""

    @property
    def n_species(self) -> int: ...

    @property
    def species_names(self) -> tuple[str, ...]: ...

    def state_from_pT(
        self, Y: Float[Array, " n_species"], p: float, T: float
    ) -> ThermodynamicState: ...

    def state_from_ph(
        self, Y: Float[Array, " n_species"], p: float, h: float
    ) -> ThermodynamicState: ...
