"""Stagnation state of a high-enthalpy nitrogen inflow.

Reservoir of a hypersonic facility: p0 = 53 MPa, h0 = 9.1 MJ/kg, pure N2.
Solves the stagnation state once with frozen composition and once in
dissociation equilibrium N2 <-> 2N, and prints both.

    python experiments/isentropic_inflow_n2.py --p0 53 --h0 9.1
"""

import argparse
import sys
from pathlib import Path

import jax
import jax.numpy as jnp

from compressible_inflow import (
    BoundaryCheckRegistry,
    ConvergenceError,
    DissociationEquilibrium,
    StagnationSolverConfig,
    ThermallyPerfectGas,
    ValidationError,
    VectorLayout,
    load_species_table,
    register_default_checks,
    setup_boundaries,
)

jax.config.update("jax_enable_x64", True)

DATA_DIR = Path(__file__).parent.parent / "data"


def parse_args():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--p0", type=float, default=53.0, help="stagnation pressure [MPa]")
    parser.add_argument("--h0", type=float, default=9.1, help="stagnation enthalpy [MJ/kg]")
    parser.add_argument("--n-dims", type=int, default=1)
    parser.add_argument("--max-iterations", type=int, default=1000)
    return parser.parse_args()


def main() -> int:
    args = parse_args()

    species = load_species_table(DATA_DIR / "rrho_species.json", ["N2", "N"])
    eos = ThermallyPerfectGas(species)
    equilibrium = DissociationEquilibrium(species)
    layout = VectorLayout(species.names, n_dims=args.n_dims)
    registry = register_default_checks(BoundaryCheckRegistry())
    config = StagnationSolverConfig(max_iterations=args.max_iterations)

    inflow = {
        "type": "isentropicInflow",
        "p0": (args.p0, "MPa"),
        "h0": (args.h0, "MJ/kg"),
        "mixture": {"N2": 1.0},
    }
    boundary_config = {
        "reservoir_frozen": inflow,
        "reservoir_equilibrium": {**inflow, "equilibrium": True},
    }

    print("=" * 80)
    print(f"Isentropic inflow: N2, p0 = {args.p0} MPa, h0 = {args.h0} MJ/kg")
    print("=" * 80)

    try:
        setup = setup_boundaries(
            boundary_config,
            eos=eos,
            layout=layout,
            registry=registry,
            equilibrium=equilibrium,
            config=config,
        )
    except ValidationError as e:
        print(f"Invalid boundary options: {e}", file=sys.stderr)
        return 2
    except ConvergenceError as e:
        print(f"Fatal: {e}", file=sys.stderr)
        return 1

    frozen = setup.records["reservoir_frozen"].stagnation
    reacting = setup.records["reservoir_equilibrium"].stagnation

    print("\nSummary:")
    print(f"  T0 frozen      = {frozen.T0:.3f} K ({frozen.iterations} iterations)")
    print(f"  T0 equilibrium = {reacting.T0:.3f} K ({reacting.iterations} iterations)")
    print(f"  Y[N] equilibrium = {float(reacting.mixture[1]):.6e}")
    print(f"  mixture bound for downstream: {setup.mixtures.lookup('reservoir_equilibrium')}")
    print(f"  max |Y - Y_frozen| = {float(jnp.max(jnp.abs(reacting.mixture - frozen.mixture))):.3e}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
