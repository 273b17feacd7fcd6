"""Constants for boundary condition identifiers and option keys."""

BC_ISENTROPIC_INFLOW = "isentropicInflow"

OPTION_T0 = "T0"
OPTION_H0 = "h0"
OPTION_P0 = "p0"
OPTION_MIXTURE = "mixture"
OPTION_EQUILIBRIUM = "equilibrium"
