"""
speed_schedule.py – Constant-CAS / constant-Mach climb and descent law.

Below the crossover altitude the aircraft holds a calibrated airspeed;
at and above it, a Mach number.  True airspeed is continuous across the
crossover because both speeds give the same TAS there.
"""

from __future__ import annotations
import logging

import numpy as np

from isatmos.airspeed import (
    transition_altitude, vcas_to_vtas, vcas_to_mach, mach_to_vtas, mach_to_vcas,
)
from isatmos.atmosphere import conditions
from isatmos.constants import HP_TROP

logger = logging.getLogger(__name__)


def speed_schedule(
    Vcas: float,
    M: float,
    altitudes: np.ndarray | list[float],
    dT: float = 0.0,
) -> dict:
    """
    Evaluate a CAS/Mach speed schedule at the given pressure altitudes.

    Parameters
    ----------
    Vcas      : scheduled calibrated airspeed  [m/s]
    M         : scheduled Mach number
    altitudes : pressure altitudes  [m]
    dT        : ISA temperature offset  [K]

    Returns
    -------
    dict with arrays:
        'Hp'          : altitudes  [m]
        'Vcas'        : calibrated airspeed  [m/s]
        'Vtas'        : true airspeed  [m/s]
        'Mach'        : Mach number
        'mach_regime' : True where the Mach number is held
    and the scalar 'Hp_trans' (crossover altitude [m]).
    """
    Hp_trans = float(transition_altitude(Vcas, M, dT))
    logger.debug("crossover altitude for Vcas=%.3f m/s, M=%.3f: %.1f m",
                 Vcas, M, Hp_trans)
    if Hp_trans > HP_TROP:
        logger.warning("crossover altitude %.1f m lies above the tropopause; "
                       "the closed-form result is outside its validity range",
                       Hp_trans)

    altitudes = np.asarray(altitudes, dtype=float)
    n = altitudes.size
    vcas_arr = np.zeros(n)
    vtas_arr = np.zeros(n)
    mach_arr = np.zeros(n)
    regime = altitudes >= Hp_trans

    for i, h in enumerate(altitudes):
        cond = conditions(h, dT)
        if regime[i]:
            mach_arr[i] = M
            vtas_arr[i] = mach_to_vtas(M, cond)
            vcas_arr[i] = mach_to_vcas(M, cond)
        else:
            vcas_arr[i] = Vcas
            vtas_arr[i] = vcas_to_vtas(Vcas, cond)
            mach_arr[i] = vcas_to_mach(Vcas, cond)

    return {
        'Hp': altitudes,
        'Vcas': vcas_arr,
        'Vtas': vtas_arr,
        'Mach': mach_arr,
        'mach_regime': regime,
        'Hp_trans': Hp_trans,
    }
