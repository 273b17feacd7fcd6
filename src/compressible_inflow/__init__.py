"""Stagnation state of isentropic inflow boundaries for compressible flow."""

import jax

jax.config.update("jax_enable_x64", True)

from .boundary_options_types import OptionValue, BoundaryOptionSet  # noqa: E402
from .boundary_checks import (  # noqa: E402
    BoundaryConditionCheck,
    IsentropicInflowCheck,
    BoundaryCheckRegistry,
    register_default_checks,
)
from .exceptions import ValidationError, ConvergenceError  # noqa: E402
from .chemistry_utils import load_species_table  # noqa: E402
from .equation_of_state_types import ThermodynamicState, EquationOfState  # noqa: E402
from .equation_of_state import ThermallyPerfectGas  # noqa: E402
from .equilibrium import EquilibriumChemistry, DissociationEquilibrium  # noqa: E402
from .vector_layout import VectorLayout  # noqa: E402
from .stagnation_solver_types import StagnationSolverConfig, StagnationState  # noqa: E402
from .stagnation_solver import (  # noqa: E402
    solve_from_temperature,
    solve_from_enthalpy,
    solve_stagnation_state,
)
from .mixture_binding import MixtureBinding  # noqa: E402
from .boundary_setup import (  # noqa: E402
    BoundaryRecord,
    BoundarySetup,
    setup_boundaries,
)

__all__ = [
    "OptionValue",
    "BoundaryOptionSet",
    "BoundaryConditionCheck",
    "IsentropicInflowCheck",
    "BoundaryCheckRegistry",
    "register_default_checks",
    "ValidationError",
    "ConvergenceError",
    "load_species_table",
    "ThermodynamicState",
    "EquationOfState",
    "ThermallyPerfectGas",
    "EquilibriumChemistry",
    "DissociationEquilibrium",
    "VectorLayout",
    "StagnationSolverConfig",
    "StagnationState",
    "solve_from_temperature",
    "solve_from_enthalpy",
    "solve_stagnation_state",
    "MixtureBinding",
    "BoundaryRecord",
    "BoundarySetup",
    "setup_boundaries",
]
