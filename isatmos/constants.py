"""
constants.py – ISA physical constants.

EUROCONTROL BADA 4 User Manual, sections 2.2.1 / 2.2.2.  All values are SI
and must stay bit-identical to the published ones.
"""

# Mean-sea-level (MSL) reference values
T0_ISA = 288.15      # K
P0_ISA = 101325.0    # Pa
RHO0_ISA = 1.225     # kg/m³
A0_ISA = 340.294     # m/s  (speed of sound)

# Air
KAPPA = 1.4                     # adiabatic index
MU = (KAPPA - 1.0) / KAPPA      # used by the CAS <-> TAS relations
R_AIR = 287.05287               # m²/(K·s²)

g0 = 9.80665         # m/s²

# Troposphere
BETA_T = -0.0065     # K/m  temperature gradient below the tropopause
HP_TROP = 11000.0    # m    geopotential pressure altitude of the tropopause
