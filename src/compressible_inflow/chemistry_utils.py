import json
from pathlib import Path
from typing import Sequence

import jax.numpy as jnp

from compressible_inflow.chemistry_types import SpeciesTable

# Relative tolerance on M(A2) == 2 M(A) for dissociation pairs
_PAIR_MASS_RTOL = 1e-6


def _load_molar_mass(entry: dict) -> float:
    """Convert molar mass from g/mol to kg/mol."""
    return entry["molar_mass"] / 1000.0


def _load_h_s0(entry: dict) -> float:
    """Convert the 0 K formation energy from kJ/mol to J/kg."""
    J_per_mol = entry["formation_energy"] * 1000.0
    return J_per_mol / _load_molar_mass(entry)


def _optional(entry: dict, key: str) -> float:
    value = entry.get(key)
    return float("nan") if value is None else float(value)


def _select_species_entries(
    raw_data: list[dict], species_names: Sequence[str]
) -> list[dict]:
    entries = {entry["name"]: entry for entry in raw_data}
    missing = [name for name in species_names if name not in entries]
    if missing:
        raise ValueError(f"Species not found in data: {missing}")
    return [entries[name] for name in species_names]


def _build_dissociation_pairs(entries: list[dict]) -> list[tuple[int, int]]:
    names = [entry["name"] for entry in entries]
    pairs = []
    for i, entry in enumerate(entries):
        atom = entry.get("dissociates_to")
        if atom is None or atom not in names:
            continue
        j = names.index(atom)
        M_molecule = _load_molar_mass(entry)
        M_atom = _load_molar_mass(entries[j])
        if abs(M_molecule - 2.0 * M_atom) > _PAIR_MASS_RTOL * M_molecule:
            raise ValueError(
                f"'{entry['name']}' -> 2 '{atom}' does not conserve mass: "
                f"{M_molecule} != 2 * {M_atom} kg/mol"
            )
        pairs.append((i, j))
    return pairs


def load_species_table(data_path: str | Path, species_names: Sequence[str]) -> SpeciesTable:
    """Load RRHO species data for ``species_names`` from a JSON file.

    The species order of the returned table follows ``species_names``. A
    molecule whose ``dissociates_to`` atom is also selected forms a
    dissociation pair A2 <-> 2A.
    """
    raw_data = json.loads(Path(data_path).read_text(encoding="utf-8"))
    entries = _select_species_entries(raw_data, species_names)

    pairs = _build_dissociation_pairs(entries)

    return SpeciesTable(
        names=tuple(entry["name"] for entry in entries),
        molar_masses=jnp.array([_load_molar_mass(e) for e in entries]),
        h_s0=jnp.array([_load_h_s0(e) for e in entries]),
        theta_vib=jnp.array([_optional(e, "theta_vib") for e in entries]),
        theta_rot=jnp.array([_optional(e, "theta_rot") for e in entries]),
        symmetry_number=jnp.array([float(e.get("symmetry_number", 1)) for e in entries]),
        electronic_degeneracy=jnp.array(
            [float(e.get("electronic_degeneracy", 1)) for e in entries]
        ),
        dissociation_pairs=jnp.array(pairs, dtype=jnp.int32).reshape(-1, 2),
    )
