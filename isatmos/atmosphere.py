"""
atmosphere.py – ISA temperature, pressure, density and speed of sound.

All quantities are functions of the geopotential pressure altitude Hp [m]
and an optional ISA temperature offset ΔT [K].  Two layers are modelled:

    Hp <= 11 000 m : troposphere  (lapse βT = −6.5 K/km)
    Hp >  11 000 m : isothermal layer above the tropopause

Reference: EUROCONTROL BADA 4 User Manual, chapter 2.2 (Atmosphere Model).

Inputs are converted to numpy float64, so out-of-domain arguments
(T <= 0, p <= 0, ...) propagate silently as nan / inf, with no exception
and no RuntimeWarning.  Use ``isatmos.strict`` for validated variants.
"""

from __future__ import annotations
import functools
from dataclasses import dataclass

import numpy as np

from isatmos.constants import (
    T0_ISA, P0_ISA, RHO0_ISA, KAPPA, R_AIR, g0, BETA_T, HP_TROP,
)

# p/p₀ = (T/T₀)^(−g₀/(βT·R))  in the troposphere
_TROPO_EXPONENT = -g0 / (BETA_T * R_AIR)


def silent(func):
    """Evaluate func with numpy floating-point warnings switched off."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
            return func(*args, **kwargs)
    return wrapper


@dataclass(frozen=True)
class AtmosConditions:
    """
    Consistent snapshot of the atmospheric state at one altitude.

    Normally built by :func:`conditions`; may also be constructed directly
    to carry an arbitrary set of conditions.
    """
    Hp_m: float         # geopotential pressure altitude  [m]
    dT_K: float         # ISA temperature offset  [K]
    T_K: float          # temperature  [K]
    p_Pa: float         # pressure  [Pa]
    rho_kg_m3: float    # density  [kg/m³]
    a_m_s: float        # speed of sound  [m/s]


@silent
def temperature(Hp: float, dT: float = 0.0) -> float:
    """
    Air temperature [K] at pressure altitude Hp [m] with offset dT [K].

    Above the tropopause the temperature stays at its tropopause value.
    (BADA 4 eq. 2.2-13/16)
    """
    Hp = np.float64(Hp)
    dT = np.float64(dT)
    if Hp <= HP_TROP:
        return T0_ISA + dT + BETA_T * Hp
    return T0_ISA + dT + BETA_T * HP_TROP


@silent
def pressure(Hp: float, dT: float = 0.0) -> float:
    """
    Air pressure [Pa] at pressure altitude Hp [m] with offset dT [K].

    The offset is removed again before forming the temperature ratio, so
    pressure is a function of Hp alone.  (BADA 4 eq. 2.2-18/20)
    """
    Hp = np.float64(Hp)
    dT = np.float64(dT)
    if Hp <= HP_TROP:
        return P0_ISA * ((temperature(Hp, dT) - dT) / T0_ISA) ** _TROPO_EXPONENT

    p_trop = P0_ISA * ((temperature(HP_TROP, dT) - dT) / T0_ISA) ** _TROPO_EXPONENT
    return p_trop * np.exp(-g0 / (R_AIR * temperature(HP_TROP)) * (Hp - HP_TROP))


@silent
def density(p: float, T: float) -> float:
    """Air density [kg/m³] from pressure p [Pa] and temperature T [K]."""
    return np.float64(p) / (R_AIR * np.float64(T))


@silent
def speed_of_sound(T: float) -> float:
    """Speed of sound [m/s] at temperature T [K]; nan for T < 0."""
    return np.sqrt(KAPPA * R_AIR * np.float64(T))


@silent
def conditions(Hp: float, dT: float = 0.0) -> AtmosConditions:
    """Compute the full :class:`AtmosConditions` at Hp [m] and offset dT [K]."""
    Hp = np.float64(Hp)
    dT = np.float64(dT)
    T = temperature(Hp, dT)
    p = pressure(Hp, dT)
    rho = density(p, T)
    a = speed_of_sound(T)
    return AtmosConditions(Hp_m=Hp, dT_K=dT, T_K=T, p_Pa=p,
                           rho_kg_m3=rho, a_m_s=a)


# ──────────────────────────────────────────────────────────────────────
# Ratios to MSL values  (BADA 4 eq. 2.2-30/31/32)
# ──────────────────────────────────────────────────────────────────────

@silent
def theta(T: float) -> float:
    """θ = T / T₀"""
    return np.float64(T) / T0_ISA


@silent
def delta(p: float) -> float:
    """δ = p / p₀"""
    return np.float64(p) / P0_ISA


@silent
def sigma(rho: float) -> float:
    """σ = ρ / ρ₀"""
    return np.float64(rho) / RHO0_ISA
