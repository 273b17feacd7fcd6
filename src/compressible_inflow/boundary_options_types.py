from __future__ import annotations

import dataclasses
import types
from typing import Mapping, Sequence

import jax.numpy as jnp
from jaxtyping import Array, Float

from compressible_inflow import units
from compressible_inflow.boundary_conditions_types import OPTION_MIXTURE


@dataclasses.dataclass(frozen=True, slots=True)
class OptionValue:
    """One named boundary option.

    unit=None means no unit was attached; the value is then taken to be in
    the canonical unit of whatever quantity reads it.
    """

    value: object
    unit: str | None = None


@dataclasses.dataclass(frozen=True)
class BoundaryOptionSet:
    """Immutable mapping from option name to OptionValue for one boundary."""

    options: Mapping[str, OptionValue]

    def __post_init__(self):
        object.__setattr__(self, "options", types.MappingProxyType(dict(self.options)))

    @classmethod
    def from_dict(cls, raw: Mapping[str, object]) -> BoundaryOptionSet:
        """Build an option set from a boundary config entry.

        Values may be OptionValue, (value, unit) pairs, or bare values.
        The "type" key names the boundary condition and is not an option.
        """
        options = {}
        for name, entry in raw.items():
            if name == "type":
                continue
            if isinstance(entry, OptionValue):
                options[name] = entry
            elif (
                isinstance(entry, tuple)
                and len(entry) == 2
                and isinstance(entry[1], str)
            ):
                options[name] = OptionValue(entry[0], entry[1])
            else:
                options[name] = OptionValue(entry)
        return cls(options)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self.options)

    def option_exists(self, name: str) -> bool:
        return name in self.options

    def compatible(self, name: str, canonical_unit: str) -> bool:
        """True if option ``name`` exists and has the dimension of ``canonical_unit``."""
        option = self.options.get(name)
        if option is None:
            return False
        return units.is_compatible(option.unit, canonical_unit)

    def get_option_in_units(self, name: str, canonical_unit: str) -> float:
        """Return the scalar option ``name`` converted to ``canonical_unit``.

        Raises:
            KeyError: If the option is absent.
            pint.errors.DimensionalityError: If the units are incompatible.
        """
        option = self.options[name]
        return units.to_canonical(float(option.value), option.unit, canonical_unit)

    def get_mixture(
        self, species_names: Sequence[str]
    ) -> Float[Array, " n_species"]:
        """Return the mixture option as mass fractions ordered by ``species_names``.

        Accepts a {species: fraction} mapping (missing species are zero) or
        a sequence with one entry per species.
        """
        value = self.options[OPTION_MIXTURE].value
        if isinstance(value, Mapping):
            unknown = [name for name in value if name not in species_names]
            if unknown:
                raise ValueError(
                    f"Unknown species in mixture: {unknown}, "
                    f"available: {list(species_names)}"
                )
            return jnp.array([float(value.get(name, 0.0)) for name in species_names])

        Y = jnp.asarray(value, dtype=float)
        if Y.shape != (len(species_names),):
            raise ValueError(
                f"Mixture has shape {Y.shape}, expected ({len(species_names)},)"
            )
        return Y

    def with_option(self, name: str, value: object, unit: str | None = None) -> BoundaryOptionSet:
        """Return a copy with option ``name`` set."""
        options = dict(self.options)
        options[name] = OptionValue(value, unit)
        return BoundaryOptionSet(options)
