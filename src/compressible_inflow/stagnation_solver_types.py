from dataclasses import dataclass
from typing import Literal

import pydantic
from jaxtyping import Array, Float

from compressible_inflow.equation_of_state_types import ThermodynamicState


@dataclass(frozen=True, slots=True)
class StagnationSolverConfig:
    """Constants of the stagnation enthalpy iteration.

    dT = relaxation * (h0 - h) / c_p, stop when |h0 - h| < atol [J/kg].
    """

    relaxation: pydantic.PositiveFloat = 0.1
    atol: pydantic.PositiveFloat = 1e-6
    max_iterations: int = 1000


@dataclass(frozen=True)
class StagnationState:
    """Resolved stagnation state of one inflow boundary."""

    T0: float  # [K]
    primitive: Float[Array, " n_variables"]
    state: ThermodynamicState
    mixture: Float[Array, " n_species"]
    iterations: int
    path: Literal["temperature", "enthalpy"]
