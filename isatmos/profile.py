"""
profile.py – Atmospheric state sampled over an altitude range.

Every sample is recomputed from the closed-form model; the arrays are
meant for inspection and plotting, not as a lookup table.
"""

from __future__ import annotations
import numpy as np

from isatmos.atmosphere import conditions, theta, delta, sigma


def atmosphere_profile(
    h_min: float = 0.0,
    h_max: float = 20_000.0,
    n_points: int = 201,
    dT: float = 0.0,
) -> dict:
    """
    Sample the ISA between two pressure altitudes.

    Parameters
    ----------
    h_min, h_max : altitude range  [m]
    n_points     : number of evenly spaced samples (>= 2)
    dT           : ISA temperature offset  [K]

    Returns
    -------
    dict with arrays:
        'Hp'    : pressure altitudes  [m]
        'T'     : temperature  [K]
        'p'     : pressure  [Pa]
        'rho'   : density  [kg/m³]
        'a'     : speed of sound  [m/s]
        'theta', 'delta', 'sigma' : ratios to MSL values
    and the scalar 'dT'.
    """
    if n_points < 2:
        raise ValueError("n_points must be >= 2")
    if h_max <= h_min:
        raise ValueError("h_max must be greater than h_min")

    altitudes = np.linspace(h_min, h_max, n_points)
    T_arr = np.zeros(n_points)
    p_arr = np.zeros(n_points)
    rho_arr = np.zeros(n_points)
    a_arr = np.zeros(n_points)

    for i, h in enumerate(altitudes):
        cond = conditions(h, dT)
        T_arr[i] = cond.T_K
        p_arr[i] = cond.p_Pa
        rho_arr[i] = cond.rho_kg_m3
        a_arr[i] = cond.a_m_s

    return {
        'Hp': altitudes,
        'dT': float(dT),
        'T': T_arr,
        'p': p_arr,
        'rho': rho_arr,
        'a': a_arr,
        'theta': np.array([theta(T) for T in T_arr]),
        'delta': np.array([delta(p) for p in p_arr]),
        'sigma': np.array([sigma(rho) for rho in rho_arr]),
    }
