from scipy import constants

N_A = constants.Avogadro  # [1/mol]

k = constants.Boltzmann  # [J/K]

h_planck = constants.Planck  # [J s]

R_universal = constants.R  # [J/(mol K)] universal gas constant

p_standard = 1.0e5  # [Pa] reference pressure for standard-state Gibbs energies
