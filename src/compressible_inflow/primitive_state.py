"""Conversion between thermodynamic quantities and the primitive state vector.

Vector layout: q = [Y_0, ..., Y_{ns-1}, u_1, ..., u_ndim, p - p_ambient, T]
"""

import jax.numpy as jnp
from jaxtyping import Array, Float

from compressible_inflow.diagnose import runtime_check_array_sizes
from compressible_inflow.equation_of_state_types import (
    EquationOfState,
    ThermodynamicState,
)
from compressible_inflow.equilibrium import EquilibriumChemistry
from compressible_inflow.vector_layout import VectorLayout


@runtime_check_array_sizes
def compute_primitive_vector(
    layout: VectorLayout,
    Y: Float[Array, " n_species"],
    velocity: Float[Array, " n_dims"],
    p: float,
    T: float,
    equilibrium: EquilibriumChemistry | None = None,
    p_ambient: float = 0.0,
) -> Float[Array, " n_variables"]:
    """Assemble a primitive state vector.

    Args:
        layout: Vector layout descriptor
        Y: Mass fractions [-]
        velocity: Velocity components [m/s]
        p: Static pressure [Pa]
        T: Temperature [K]
        equilibrium: If given, Y is replaced by the equilibrium composition
            at (p, T) computed with Y as reference mixture
        p_ambient: Ambient pressure subtracted from p [Pa]

    Returns:
        q: Primitive state vector, shape (layout.size,)
    """
    if Y.shape[0] != layout.n_species:
        raise ValueError(
            f"Mixture has {Y.shape[0]} species, layout expects {layout.n_species}"
        )
    if velocity.shape[0] != layout.n_dims:
        raise ValueError(
            f"Velocity has {velocity.shape[0]} components, layout expects {layout.n_dims}"
        )

    if equilibrium is not None:
        Y = equilibrium.solve(p, T, Y)

    q = jnp.zeros(layout.size)
    q = q.at[: layout.n_species].set(Y)
    q = q.at[layout.momentum_start : layout.momentum_start + layout.n_dims].set(velocity)
    q = q.at[layout.pressure_index].set(p - p_ambient)
    q = q.at[layout.temperature_index].set(T)

    return q


@runtime_check_array_sizes
def extract_thermodynamic_state(
    q: Float[Array, " n_variables"],
    p_ambient: float,
    layout: VectorLayout,
    eos: EquationOfState,
) -> ThermodynamicState:
    """Recover the thermodynamic state stored in a primitive state vector."""
    if q.shape[0] != layout.size:
        raise ValueError(f"Primitive vector has size {q.shape[0]}, layout expects {layout.size}")

    Y = q[: layout.n_species]
    p = float(q[layout.pressure_index]) + p_ambient
    T = float(q[layout.temperature_index])

    return eos.state_from_pT(Y, p, T)


def velocity_magnitude(q: Float[Array, " n_variables"], layout: VectorLayout) -> float:
    u = q[layout.momentum_start : layout.momentum_start + layout.n_dims]
    return float(jnp.sqrt(jnp.sum(u**2)))
