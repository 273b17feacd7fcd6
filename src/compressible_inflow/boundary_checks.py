"""Option checks for boundary conditions and the registry that holds them.

Checks are registered explicitly during setup:

    registry = register_default_checks(BoundaryCheckRegistry())
    check = registry.get("isentropicInflow")
    if not check.check_options(options):
        print(check.error_message)
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from compressible_inflow import units
from compressible_inflow.boundary_conditions_types import (
    BC_ISENTROPIC_INFLOW,
    OPTION_EQUILIBRIUM,
    OPTION_H0,
    OPTION_MIXTURE,
    OPTION_P0,
    OPTION_T0,
)
from compressible_inflow.boundary_options_types import BoundaryOptionSet


class BoundaryConditionCheck(ABC):
    """Admissibility check for the options of one boundary condition type."""

    @property
    @abstractmethod
    def boundary_condition_name(self) -> str:
        pass

    @property
    @abstractmethod
    def variables_checked(self) -> tuple[str, ...]:
        pass

    @abstractmethod
    def check_options(self, options: BoundaryOptionSet) -> bool:
        """Return True if ``options`` are admissible; see error_message otherwise."""
        pass

    @property
    @abstractmethod
    def error_message(self) -> str:
        pass


class IsentropicInflowCheck(BoundaryConditionCheck):
    """Checks stagnation inflow options.

    Exactly one of T0 or h0, and p0, are required. Unit mismatches on p0,
    T0 and h0 are accumulated into one message.
    """

    def __init__(self):
        self._error_message = ""

    @property
    def boundary_condition_name(self) -> str:
        return BC_ISENTROPIC_INFLOW

    @property
    def variables_checked(self) -> tuple[str, ...]:
        return (OPTION_T0, OPTION_H0, OPTION_P0, OPTION_MIXTURE, OPTION_EQUILIBRIUM)

    @property
    def error_message(self) -> str:
        return self._error_message

    def check_options(self, options: BoundaryOptionSet) -> bool:
        self._error_message = ""

        has_T0 = options.option_exists(OPTION_T0)
        has_h0 = options.option_exists(OPTION_H0)
        if has_T0 == has_h0:
            self._error_message = "must specify one of either 'T0' or 'h0'"
            return False

        if not options.option_exists(OPTION_P0):
            self._error_message = "'p0' is required"
            return False

        message = ""
        if not options.compatible(OPTION_P0, units.PRESSURE):
            message += "Units are incompatible for 'p0' "
        if has_T0 and not options.compatible(OPTION_T0, units.TEMPERATURE):
            message += "Units are incompatible for 'T0'"
        if has_h0 and not options.compatible(OPTION_H0, units.SPECIFIC_ENERGY):
            message += "Units are incompatible for 'h0'"

        self._error_message = message
        return not message


class BoundaryCheckRegistry:
    """Maps boundary condition names to their option checks."""

    def __init__(self):
        self._checks: dict[str, BoundaryConditionCheck] = {}

    def register(self, check: BoundaryConditionCheck) -> None:
        name = check.boundary_condition_name
        if name in self._checks:
            raise ValueError(f"A check for boundary condition '{name}' is already registered")
        self._checks[name] = check

    def get(self, name: str) -> BoundaryConditionCheck | None:
        return self._checks.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._checks

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._checks)


def register_default_checks(registry: BoundaryCheckRegistry) -> BoundaryCheckRegistry:
    """Register the checks for the boundary conditions of this package."""
    registry.register(IsentropicInflowCheck())
    return registry
