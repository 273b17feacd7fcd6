"""Stagnation state of an isentropic inflow boundary.

Path A: T0 given. The state follows directly from (mixture, p0, T0).
Path B: h0 given. T0 is found by a damped Newton iteration on the
enthalpy residual, starting from the temperature the equation of state
returns for (mixture, p0, h0):

    T_{i+1} = T_i + relaxation * (h0 - h(T_i)) / c_p(T_i)

With an equilibrium oracle the composition is re-equilibrated at every
temperature, so h(T) includes the chemical enthalpy while c_p is the frozen
one. The step therefore overshoots, which the relaxation keeps in check.
"""

import jax.numpy as jnp
import pydantic
from jaxtyping import Array, Float

from compressible_inflow import units
from compressible_inflow.boundary_conditions_types import (
    OPTION_EQUILIBRIUM,
    OPTION_H0,
    OPTION_MIXTURE,
    OPTION_P0,
    OPTION_T0,
)
from compressible_inflow.boundary_options_types import BoundaryOptionSet
from compressible_inflow.equation_of_state_types import EquationOfState
from compressible_inflow.equilibrium import EquilibriumChemistry
from compressible_inflow.exceptions import ConvergenceError
from compressible_inflow.primitive_state import (
    compute_primitive_vector,
    extract_thermodynamic_state,
)
from compressible_inflow.stagnation_solver_types import (
    StagnationSolverConfig,
    StagnationState,
)
from compressible_inflow.vector_layout import VectorLayout


def _zero_velocity_state(
    layout: VectorLayout,
    eos: EquationOfState,
    Y: Float[Array, " n_species"],
    p0: float,
    T: float,
    equilibrium: EquilibriumChemistry | None,
    p_ambient: float,
):
    q = compute_primitive_vector(
        layout,
        Y,
        jnp.zeros(layout.n_dims),
        p0,
        T,
        equilibrium=equilibrium,
        p_ambient=float(p_ambient),
    )
    return q, extract_thermodynamic_state(q, float(p_ambient), layout, eos)


def solve_from_temperature(
    Y: Float[Array, " n_species"],
    p0: pydantic.PositiveFloat,
    T0: pydantic.PositiveFloat,
    eos: EquationOfState,
    layout: VectorLayout,
    equilibrium: EquilibriumChemistry | None = None,
    p_ambient: float = 0.0,
) -> StagnationState:
    """Stagnation state for a prescribed stagnation temperature.

    Args:
        Y: Reference mass fractions [-]
        p0: Stagnation pressure [Pa]
        T0: Stagnation temperature [K]
        eos: Equation of state
        layout: Primitive vector layout
        equilibrium: If given, Y is replaced by the equilibrium composition at (p0, T0)
        p_ambient: Ambient pressure of the primitive vector [Pa]
    """
    q, state = _zero_velocity_state(
        layout, eos, jnp.asarray(Y, dtype=float), float(p0), float(T0), equilibrium, p_ambient
    )
    return StagnationState(
        T0=state.T,
        primitive=q,
        state=state,
        mixture=q[: layout.n_species],
        iterations=0,
        path="temperature",
    )


def solve_from_enthalpy(
    Y: Float[Array, " n_species"],
    p0: pydantic.PositiveFloat,
    h0: float,
    eos: EquationOfState,
    layout: VectorLayout,
    equilibrium: EquilibriumChemistry | None = None,
    config: StagnationSolverConfig = StagnationSolverConfig(),
    p_ambient: float = 0.0,
) -> StagnationState:
    """Stagnation state for a prescribed stagnation enthalpy.

    Args:
        Y: Reference mass fractions [-]
        p0: Stagnation pressure [Pa]
        h0: Stagnation enthalpy [J/kg]
        eos: Equation of state
        layout: Primitive vector layout
        equilibrium: If given, the composition is kept in equilibrium at every iterate
        config: Relaxation, tolerance and iteration cap
        p_ambient: Ambient pressure of the primitive vector [Pa]

    Returns:
        StagnationState with |h0 - state.h| < config.atol

    Raises:
        ConvergenceError: If the tolerance is not met within config.max_iterations.
    """
    Y = jnp.asarray(Y, dtype=float)
    p0 = float(p0)
    h0 = float(h0)

    T = float(eos.state_from_ph(Y, p0, h0).T)
    delta_T = 0.0
    residual = float("nan")

    for iteration in range(1, config.max_iterations + 1):
        T += delta_T
        q, state = _zero_velocity_state(layout, eos, Y, p0, T, equilibrium, p_ambient)

        residual = h0 - state.h
        if abs(residual) < config.atol:
            return StagnationState(
                T0=state.T,
                primitive=q,
                state=state,
                mixture=q[: layout.n_species],
                iterations=iteration,
                path="enthalpy",
            )

        delta_T = config.relaxation * residual / state.cp

    raise ConvergenceError(
        f"Stagnation temperature for h0={h0:.6e} J/kg, p0={p0:.6e} Pa did not "
        f"converge within {config.max_iterations} iterations "
        f"(last T={T:.6e} K, residual={residual:.6e} J/kg)",
        iterations=config.max_iterations,
        residual=residual,
    )


def solve_stagnation_state(
    options: BoundaryOptionSet,
    eos: EquationOfState,
    layout: VectorLayout,
    *,
    equilibrium: EquilibriumChemistry | None = None,
    config: StagnationSolverConfig = StagnationSolverConfig(),
    p_ambient: float = 0.0,
    default_mixture: Float[Array, " n_species"] | None = None,
) -> StagnationState:
    """Resolve the stagnation state of one validated isentropic inflow.

    Takes Path A if T0 is given and Path B if h0 is given. The mixture
    option wins over default_mixture.

    Raises:
        ValueError: If no mixture is available, or the equilibrium option is
            set but no equilibrium oracle was passed.
        ConvergenceError: If Path B does not converge.
    """
    if options.option_exists(OPTION_MIXTURE):
        Y = options.get_mixture(layout.species_names)
    elif default_mixture is not None:
        Y = jnp.asarray(default_mixture, dtype=float)
    else:
        raise ValueError("No 'mixture' option and no default mixture available")

    if options.option_exists(OPTION_EQUILIBRIUM):
        if equilibrium is None:
            raise ValueError(
                "Option 'equilibrium' is set but no equilibrium chemistry was provided"
            )
    else:
        equilibrium = None

    p0 = options.get_option_in_units(OPTION_P0, units.PRESSURE)

    if options.option_exists(OPTION_T0):
        T0 = options.get_option_in_units(OPTION_T0, units.TEMPERATURE)
        return solve_from_temperature(
            Y, p0, T0, eos, layout, equilibrium=equilibrium, p_ambient=p_ambient
        )

    h0 = options.get_option_in_units(OPTION_H0, units.SPECIFIC_ENERGY)
    return solve_from_enthalpy(
        Y,
        p0,
        h0,
        eos,
        layout,
        equilibrium=equilibrium,
        config=config,
        p_ambient=p_ambient,
    )
