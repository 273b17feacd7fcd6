"""Unit tests for boundary_checks.py"""

import pytest

from compressible_inflow.boundary_checks import (
    BoundaryCheckRegistry,
    IsentropicInflowCheck,
    register_default_checks,
)
from compressible_inflow.boundary_options_types import BoundaryOptionSet


def _check(raw: dict) -> tuple[bool, str]:
    check = IsentropicInflowCheck()
    ok = check.check_options(BoundaryOptionSet.from_dict(raw))
    return ok, check.error_message


def test_identifier_and_variables():
    check = IsentropicInflowCheck()
    assert check.boundary_condition_name == "isentropicInflow"
    assert check.variables_checked == ("T0", "h0", "p0", "mixture", "equilibrium")


@pytest.mark.parametrize(
    "raw",
    [
        {"p0": (1.0, "bar"), "T0": (300.0, "K")},
        {"p0": (53.0, "MPa"), "h0": (9.1, "MJ/kg"), "equilibrium": True},
        {"p0": 1.0e5, "T0": 300.0, "mixture": {"N2": 1.0}},
    ],
)
def test_valid_options(raw):
    ok, message = _check(raw)
    assert ok
    assert message == ""


def test_both_T0_and_h0():
    ok, message = _check({"p0": (1.0, "bar"), "T0": (300.0, "K"), "h0": (1.0, "J/kg")})
    assert not ok
    assert message == "must specify one of either 'T0' or 'h0'"


def test_neither_T0_nor_h0():
    ok, message = _check({"p0": (1.0, "bar")})
    assert not ok
    assert "must specify one of either" in message


def test_both_T0_and_h0_wins_over_missing_p0():
    ok, message = _check({"T0": (300.0, "K"), "h0": (1.0, "J/kg")})
    assert not ok
    assert "must specify one of either" in message


@pytest.mark.parametrize("raw", [{"T0": (300.0, "K")}, {"h0": (1.0, "J/kg")}])
def test_missing_p0(raw):
    ok, message = _check(raw)
    assert not ok
    assert message == "'p0' is required"


def test_incompatible_p0():
    ok, message = _check({"p0": (1.0, "K"), "T0": (300.0, "K")})
    assert not ok
    assert message == "Units are incompatible for 'p0' "


def test_incompatible_T0():
    ok, message = _check({"p0": (1.0, "bar"), "T0": (300.0, "m")})
    assert not ok
    assert message == "Units are incompatible for 'T0'"


def test_incompatible_h0():
    ok, message = _check({"p0": (1.0, "bar"), "h0": (1.0, "J")})
    assert not ok
    assert message == "Units are incompatible for 'h0'"


def test_incompatible_messages_accumulate():
    ok, message = _check({"p0": (1.0, "K"), "T0": (300.0, "Pa")})
    assert not ok
    assert "Units are incompatible for 'p0'" in message
    assert "Units are incompatible for 'T0'" in message


def test_message_reset_between_calls():
    check = IsentropicInflowCheck()
    assert not check.check_options(BoundaryOptionSet.from_dict({"T0": 300.0}))
    assert check.error_message

    assert check.check_options(BoundaryOptionSet.from_dict({"T0": 300.0, "p0": 1.0e5}))
    assert check.error_message == ""


def test_registry():
    registry = register_default_checks(BoundaryCheckRegistry())

    assert "isentropicInflow" in registry
    assert registry.names == ("isentropicInflow",)
    assert isinstance(registry.get("isentropicInflow"), IsentropicInflowCheck)
    assert registry.get("outflow") is None


def test_registry_rejects_duplicates():
    registry = register_default_checks(BoundaryCheckRegistry())
    with pytest.raises(ValueError, match="already registered"):
        registry.register(IsentropicInflowCheck())
