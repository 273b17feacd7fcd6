import dataclasses


@dataclasses.dataclass(frozen=True, slots=True)
class VectorLayout:
    """Layout of the primitive state vector.

    q = [Y_0, ..., Y_{ns-1}, u_1, ..., u_ndim, p - p_ambient, T]

    Created once per run and shared read-only by all boundaries.
    """

    species_names: tuple[str, ...]
    n_dims: int = 1

    def __post_init__(self):
        if not self.species_names:
            raise ValueError("VectorLayout requires at least one species.")
        if self.n_dims not in (1, 2, 3):
            raise ValueError(f"n_dims must be 1, 2 or 3, got {self.n_dims}")

    @property
    def n_species(self) -> int:
        return len(self.species_names)

    @property
    def momentum_start(self) -> int:
        return self.n_species

    @property
    def pressure_index(self) -> int:
        return self.n_species + self.n_dims

    @property
    def temperature_index(self) -> int:
        return self.n_species + self.n_dims + 1

    @property
    def size(self) -> int:
        return self.n_species + self.n_dims + 2

    def species_name(self, i: int) -> str:
        return self.species_names[i]
