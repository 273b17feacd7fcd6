from __future__ import annotations

from jaxtyping import Array, Float


class MixtureBinding:
    """Two-tier lookup of mixture compositions by name.

    Default bindings come from configuration. Override bindings are
    published by equilibrium-tagged inflow boundaries and win over the
    default for the same name.
    """

    def __init__(self):
        self._default: dict[str, Float[Array, " n_species"]] = {}
        self._override: dict[str, Float[Array, " n_species"]] = {}

    def bind_default(self, name: str, Y: Float[Array, " n_species"]) -> None:
        self._default[name] = Y

    def bind_override(self, name: str, Y: Float[Array, " n_species"]) -> None:
        self._override[name] = Y

    def is_overridden(self, name: str) -> bool:
        return name in self._override

    def lookup(self, name: str) -> Float[Array, " n_species"]:
        """Return the override binding for ``name`` if present, else the default.

        Raises:
            KeyError: If ``name`` is bound in neither tier.
        """
        if name in self._override:
            return self._override[name]
        if name in self._default:
            return self._default[name]
        raise KeyError(f"No mixture bound for '{name}'")

    def __contains__(self, name: str) -> bool:
        return name in self._override or name in self._default

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(dict.fromkeys([*self._default, *self._override]))
