"""Setup phase of the inflow boundaries.

All boundaries are validated first. Only then is the stagnation state of
each isentropic inflow solved, once, and its outputs published:

    boundary_config = {
        "inlet": {"type": "isentropicInflow", "p0": (53.0, "MPa"),
                  "h0": (9.1, "MJ/kg"), "mixture": {"N2": 1.0},
                  "equilibrium": True},
        "outlet": {"type": "outflow"},
    }
    setup = setup_boundaries(boundary_config, eos=eos, layout=layout,
                             registry=register_default_checks(BoundaryCheckRegistry()),
                             equilibrium=equilibrium)
    setup.records["inlet"].stagnation.T0
    setup.mixtures.lookup("inlet")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from jaxtyping import Array, Float

from compressible_inflow import diagnose, units
from compressible_inflow.boundary_checks import BoundaryCheckRegistry
from compressible_inflow.boundary_conditions_types import (
    BC_ISENTROPIC_INFLOW,
    OPTION_EQUILIBRIUM,
    OPTION_MIXTURE,
    OPTION_T0,
)
from compressible_inflow.boundary_options_types import BoundaryOptionSet
from compressible_inflow.equation_of_state_types import EquationOfState
from compressible_inflow.equilibrium import EquilibriumChemistry
from compressible_inflow.exceptions import ValidationError
from compressible_inflow.mixture_binding import MixtureBinding
from compressible_inflow.stagnation_solver import solve_stagnation_state
from compressible_inflow.stagnation_solver_types import (
    StagnationSolverConfig,
    StagnationState,
)
from compressible_inflow.vector_layout import VectorLayout


@dataclass(frozen=True)
class BoundaryRecord:
    """One configured boundary and, for isentropic inflows, its solved state.

    resolved_options carries T0 in kelvin for downstream consumers, also
    when the boundary was configured with h0.
    """

    name: str
    bc_type: str
    options: BoundaryOptionSet
    resolved_options: BoundaryOptionSet
    stagnation: StagnationState | None = None


@dataclass(frozen=True)
class BoundarySetup:
    records: dict[str, BoundaryRecord]
    mixtures: MixtureBinding


def validate_boundaries(
    boundary_config: Mapping[str, Mapping[str, object]],
    registry: BoundaryCheckRegistry,
) -> dict[str, BoundaryOptionSet]:
    """Check the options of every boundary with a registered check.

    Raises:
        ValidationError: On the first boundary whose options are rejected.
    """
    option_sets = {}
    for name, bc in boundary_config.items():
        bc_type = bc.get("type")
        if bc_type is None:
            raise ValidationError(f"{name}: boundary has no 'type'")

        options = BoundaryOptionSet.from_dict(bc)
        check = registry.get(bc_type)
        if check is not None and not check.check_options(options):
            raise ValidationError(f"{name} ({bc_type}): {check.error_message}")
        option_sets[name] = options
    return option_sets


def setup_boundaries(
    boundary_config: Mapping[str, Mapping[str, object]],
    *,
    eos: EquationOfState,
    layout: VectorLayout,
    registry: BoundaryCheckRegistry,
    equilibrium: EquilibriumChemistry | None = None,
    default_mixture: Float[Array, " n_species"] | None = None,
    config: StagnationSolverConfig = StagnationSolverConfig(),
    p_ambient: float = 0.0,
    report: bool = True,
) -> BoundarySetup:
    """Validate all boundaries, then solve and publish each isentropic inflow.

    Args:
        boundary_config: {boundary name: {"type": bc type, option: value}}
        eos: Equation of state
        layout: Primitive vector layout
        registry: Option checks by boundary condition type
        equilibrium: Equilibrium chemistry for equilibrium-tagged inflows
        default_mixture: Mixture for inflows without a 'mixture' option
        config: Stagnation enthalpy iteration constants
        p_ambient: Ambient pressure of the primitive vectors [Pa]
        report: Print one stagnation summary per inflow

    Raises:
        ValidationError: If any boundary is rejected. Nothing is solved then.
        ConvergenceError: If a stagnation enthalpy iteration does not converge.
    """
    option_sets = validate_boundaries(boundary_config, registry)

    mixtures = MixtureBinding()
    records = {}
    for name, options in option_sets.items():
        bc_type = boundary_config[name]["type"]
        if bc_type != BC_ISENTROPIC_INFLOW:
            records[name] = BoundaryRecord(name, bc_type, options, options)
            continue

        stagnation = solve_stagnation_state(
            options,
            eos,
            layout,
            equilibrium=equilibrium,
            config=config,
            p_ambient=p_ambient,
            default_mixture=default_mixture,
        )

        if options.option_exists(OPTION_MIXTURE):
            mixtures.bind_default(name, options.get_mixture(layout.species_names))
        elif default_mixture is not None:
            mixtures.bind_default(name, default_mixture)
        if options.option_exists(OPTION_EQUILIBRIUM):
            mixtures.bind_override(name, stagnation.mixture)

        resolved = options.with_option(OPTION_T0, stagnation.T0, units.TEMPERATURE)
        records[name] = BoundaryRecord(name, bc_type, options, resolved, stagnation)

        if report:
            diagnose.print_stagnation_state(
                name, stagnation.state, layout, stagnation.primitive
            )

    return BoundarySetup(records=records, mixtures=mixtures)
