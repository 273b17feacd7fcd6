import sys

import jax.numpy as jnp
import jaxtyping as jt
from beartype import beartype
from jaxtyping import Array, Float

from compressible_inflow.equation_of_state_types import ThermodynamicState
from compressible_inflow.vector_layout import VectorLayout


def runtime_check_array_sizes(f):
    """Decorator to enforce jaxtyping shape annotations at runtime."""
    return jt.jaxtyped(typechecker=beartype)(f)


def print_stagnation_state(
    boundary_name: str,
    state: ThermodynamicState,
    layout: VectorLayout,
    q: Float[Array, " n_variables"],
    file=None,
) -> bool:
    """Print a summary of a resolved stagnation state.

    Returns False if the summary could not be written. Never raises for
    output errors.
    """
    if file is None:
        file = sys.stdout

    u = q[layout.momentum_start : layout.momentum_start + layout.n_dims]
    mach = float(jnp.sqrt(jnp.sum(u**2))) / state.a

    lines = [
        f"isentropicInflow '{boundary_name}' stagnation state:",
        f"  rho   = {state.rho:.6e} kg/m^3",
        f"  T     = {state.T:.6e} K",
        f"  p     = {state.p:.6e} Pa",
        f"  Mach  = {mach:.6e}",
        f"  a     = {state.a:.6e} m/s",
        f"  Gamma = {state.gamma:.6f}",
        f"  h     = {state.h:.6e} J/kg",
    ]
    for i in range(layout.n_species):
        lines.append(f"  Y[{layout.species_name(i)}] = {float(q[i]):.6e}")

    try:
        print("\n".join(lines), file=file)
    except (OSError, ValueError):
        return False
    return True
