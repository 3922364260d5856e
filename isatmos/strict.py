"""
strict.py – Validating variants of the atmosphere and airspeed functions.

Same names and signatures as ``isatmos.atmosphere`` / ``isatmos.airspeed``,
but inputs are checked before anything is computed and
:class:`~isatmos.exceptions.AtmosphereDomainError` is raised instead of
returning nan / inf.

Rules
-----
- every numeric input must be finite
- temperatures (given or resulting) must be > 0 K
- pressures and densities must be > 0
- airspeeds and Mach numbers must be >= 0
"""

from __future__ import annotations
import logging
import math

from isatmos import airspeed, atmosphere
from isatmos.atmosphere import AtmosConditions
from isatmos.exceptions import AtmosphereDomainError

logger = logging.getLogger(__name__)


def _reject(msg: str):
    logger.debug("rejected input: %s", msg)
    raise AtmosphereDomainError(msg)


def _finite(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value):
        _reject(f"{name} must be finite, got {value}")
    return value


def _positive(name: str, value: float) -> float:
    value = _finite(name, value)
    if value <= 0.0:
        _reject(f"{name} must be > 0, got {value}")
    return value


def _non_negative(name: str, value: float) -> float:
    value = _finite(name, value)
    if value < 0.0:
        _reject(f"{name} must be >= 0, got {value}")
    return value


def _check_altitude(Hp: float, dT: float) -> None:
    _finite("Hp", Hp)
    _finite("dT", dT)
    _positive("temperature at Hp", atmosphere.temperature(Hp, dT))


def _check_state(p, T) -> None:
    if isinstance(p, AtmosConditions):
        if T is not None:
            raise TypeError("T must not be given together with an "
                            "AtmosConditions")
        p, T = p.p_Pa, p.T_K
    elif T is None:
        raise TypeError("temperature T is required unless an "
                        "AtmosConditions is passed")
    _positive("p", p)
    _positive("T", T)


# ── atmosphere ───────────────────────────────────────────────────────

def temperature(Hp: float, dT: float = 0.0) -> float:
    """Temperature [K]; Hp and dT finite, resulting T > 0."""
    _check_altitude(Hp, dT)
    return atmosphere.temperature(Hp, dT)


def pressure(Hp: float, dT: float = 0.0) -> float:
    """Pressure [Pa]; Hp and dT finite, resulting T > 0."""
    _check_altitude(Hp, dT)
    return atmosphere.pressure(Hp, dT)


def density(p: float, T: float) -> float:
    """Density [kg/m³]; p > 0, T > 0."""
    _positive("p", p)
    _positive("T", T)
    return atmosphere.density(p, T)


def speed_of_sound(T: float) -> float:
    """Speed of sound [m/s]; T > 0."""
    _positive("T", T)
    return atmosphere.speed_of_sound(T)


def conditions(Hp: float, dT: float = 0.0) -> AtmosConditions:
    """AtmosConditions; Hp and dT finite, resulting T > 0."""
    _check_altitude(Hp, dT)
    return atmosphere.conditions(Hp, dT)


def theta(T: float) -> float:
    """θ = T / T₀; T > 0."""
    _positive("T", T)
    return atmosphere.theta(T)


def delta(p: float) -> float:
    """δ = p / p₀; p > 0."""
    _positive("p", p)
    return atmosphere.delta(p)


def sigma(rho: float) -> float:
    """σ = ρ / ρ₀; ρ > 0."""
    _positive("rho", rho)
    return atmosphere.sigma(rho)


# ── airspeed ─────────────────────────────────────────────────────────

def vcas_to_vtas(Vcas: float, p, T: float | None = None) -> float:
    """TAS [m/s] from CAS; Vcas >= 0, p > 0, T > 0."""
    _non_negative("Vcas", Vcas)
    _check_state(p, T)
    return airspeed.vcas_to_vtas(Vcas, p, T)


def vtas_to_vcas(Vtas: float, p, T: float | None = None) -> float:
    """CAS [m/s] from TAS; Vtas >= 0, p > 0, T > 0."""
    _non_negative("Vtas", Vtas)
    _check_state(p, T)
    return airspeed.vtas_to_vcas(Vtas, p, T)


def mach_to_vtas(M: float, T) -> float:
    """TAS [m/s] from Mach; M >= 0, T > 0."""
    _non_negative("M", M)
    _positive("T", T.T_K if isinstance(T, AtmosConditions) else T)
    return airspeed.mach_to_vtas(M, T)


def vtas_to_mach(Vtas: float, T) -> float:
    """Mach from TAS; Vtas >= 0, T > 0."""
    _non_negative("Vtas", Vtas)
    _positive("T", T.T_K if isinstance(T, AtmosConditions) else T)
    return airspeed.vtas_to_mach(Vtas, T)


def mach_to_vcas(M: float, p, T: float | None = None) -> float:
    """CAS [m/s] from Mach; M >= 0, p > 0, T > 0."""
    _non_negative("M", M)
    _check_state(p, T)
    return airspeed.mach_to_vcas(M, p, T)


def vcas_to_mach(Vcas: float, p, T: float | None = None) -> float:
    """Mach from CAS; Vcas >= 0, p > 0, T > 0."""
    _non_negative("Vcas", Vcas)
    _check_state(p, T)
    return airspeed.vcas_to_mach(Vcas, p, T)


def transition_altitude(Vcas: float, M: float, dT: float = 0.0) -> float:
    """Crossover altitude [m]; Vcas > 0, M > 0, dT finite."""
    _positive("Vcas", Vcas)
    _positive("M", M)
    _finite("dT", dT)
    return airspeed.transition_altitude(Vcas, M, dT)
