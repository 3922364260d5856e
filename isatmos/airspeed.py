"""
airspeed.py – Calibrated / true airspeed and Mach number conversions.

Compressible-flow relations between calibrated airspeed (referenced to MSL
pressure and density), true airspeed (referenced to the local state) and
Mach number.  Reference: EUROCONTROL BADA 4 User Manual, section 2.2.

Every conversion takes the local state either as explicit ``(p, T)`` or as
a single :class:`~isatmos.atmosphere.AtmosConditions` in place of ``p``
(or of ``T`` for the Mach <-> TAS pair):

    vcas_to_vtas(128.6, p, T)
    vcas_to_vtas(128.6, conditions(9000.0))
"""

from __future__ import annotations

import numpy as np

from isatmos.atmosphere import AtmosConditions, density, silent, speed_of_sound
from isatmos.constants import (
    T0_ISA, P0_ISA, RHO0_ISA, A0_ISA, KAPPA, MU, R_AIR, g0, BETA_T,
)


def _state(p, T) -> tuple[float, float]:
    """Resolve the ``(p, T)`` / ``AtmosConditions`` calling conventions."""
    if isinstance(p, AtmosConditions):
        if T is not None:
            raise TypeError("T must not be given together with an "
                            "AtmosConditions")
        return p.p_Pa, p.T_K
    if T is None:
        raise TypeError("temperature T is required unless an "
                        "AtmosConditions is passed")
    return np.float64(p), np.float64(T)


# ──────────────────────────────────────────────────────────────────────
# CAS <-> TAS   (BADA 4 eq. 2.2-23 / 2.2-24)
# ──────────────────────────────────────────────────────────────────────

@silent
def vcas_to_vtas(Vcas: float, p, T: float | None = None) -> float:
    """
    True airspeed [m/s] from calibrated airspeed Vcas [m/s].

        Vtas = { 2p/(μρ) · [ (1 + p₀/p · ((1 + μρ₀/(2p₀)·Vcas²)^(1/μ) − 1))^μ − 1 ] }^½
    """
    p, T = _state(p, T)
    Vcas = np.float64(Vcas)
    rho = density(p, T)
    impact = (1.0 + MU * RHO0_ISA / (2.0 * P0_ISA) * Vcas**2) ** (1.0 / MU) - 1.0
    return np.sqrt(2.0 * p / (MU * rho)
                   * ((1.0 + P0_ISA / p * impact) ** MU - 1.0))


@silent
def vtas_to_vcas(Vtas: float, p, T: float | None = None) -> float:
    """
    Calibrated airspeed [m/s] from true airspeed Vtas [m/s].

        Vcas = { 2p₀/(μρ₀) · [ (1 + p/p₀ · ((1 + μρ/(2p)·Vtas²)^(1/μ) − 1))^μ − 1 ] }^½
    """
    p, T = _state(p, T)
    Vtas = np.float64(Vtas)
    rho = density(p, T)
    impact = (1.0 + MU * rho / (2.0 * p) * Vtas**2) ** (1.0 / MU) - 1.0
    return np.sqrt(2.0 * P0_ISA / (MU * RHO0_ISA)
                   * ((1.0 + p / P0_ISA * impact) ** MU - 1.0))


# ──────────────────────────────────────────────────────────────────────
# Mach <-> TAS   (BADA 4 eq. 2.2-26)
# ──────────────────────────────────────────────────────────────────────

@silent
def mach_to_vtas(M: float, T) -> float:
    """True airspeed [m/s] = M · a(T).  A bundle supplies its stored a."""
    if isinstance(T, AtmosConditions):
        return np.float64(M) * T.a_m_s
    return np.float64(M) * speed_of_sound(T)


@silent
def vtas_to_mach(Vtas: float, T) -> float:
    """Mach number = Vtas / a(T).  A bundle supplies its stored a."""
    if isinstance(T, AtmosConditions):
        return np.float64(Vtas) / T.a_m_s
    return np.float64(Vtas) / speed_of_sound(T)


# ──────────────────────────────────────────────────────────────────────
# Mach <-> CAS   (through TAS)
# ──────────────────────────────────────────────────────────────────────

@silent
def mach_to_vcas(M: float, p, T: float | None = None) -> float:
    """Calibrated airspeed [m/s] for Mach number M at (p, T)."""
    if isinstance(p, AtmosConditions):
        return vtas_to_vcas(mach_to_vtas(M, p), p, T)
    return vtas_to_vcas(mach_to_vtas(M, T), p, T)


@silent
def vcas_to_mach(Vcas: float, p, T: float | None = None) -> float:
    """Mach number for calibrated airspeed Vcas [m/s] at (p, T)."""
    if isinstance(p, AtmosConditions):
        return vtas_to_mach(vcas_to_vtas(Vcas, p, T), p)
    return vtas_to_mach(vcas_to_vtas(Vcas, p, T), T)


# ──────────────────────────────────────────────────────────────────────
# Crossover altitude   (BADA 4 eq. 2.2-27 / 28 / 29)
# ──────────────────────────────────────────────────────────────────────

@silent
def transition_altitude(Vcas: float, M: float, dT: float = 0.0) -> float:
    """
    Geopotential pressure altitude [m] at which Vcas [m/s] and Mach M give
    the same true airspeed (the CAS/Mach crossover altitude).

        δ_trans = [(1 + (κ−1)/2·(Vcas/a₀)²)^(1/μ) − 1] / [(1 + (κ−1)/2·M²)^(1/μ) − 1]
        θ_trans = δ_trans^(−βT·R/g₀)
        Hp      = T₀/βT · (θ_trans − 1)

    Only valid below the tropopause; the result is not checked.  The
    offset dT is accepted for symmetry with the other functions but has
    no effect: both the CAS/Mach relation at fixed Hp and the pressure
    profile are independent of ΔT.
    """
    Vcas = np.float64(Vcas)
    M = np.float64(M)
    half_km1 = (KAPPA - 1.0) / 2.0
    delta_trans = (((1.0 + half_km1 * (Vcas / A0_ISA)**2) ** (1.0 / MU) - 1.0)
                   / ((1.0 + half_km1 * M**2) ** (1.0 / MU) - 1.0))
    theta_trans = delta_trans ** (-BETA_T * R_AIR / g0)
    return T0_ISA / BETA_T * (theta_trans - 1.0)
