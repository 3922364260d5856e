"""
plotting.py – Atmosphere profile and speed schedule figures.
"""

from __future__ import annotations
import matplotlib.pyplot as plt

from isatmos.constants import HP_TROP


def plot_atmosphere_profile(profile: dict, *, show: bool = True) -> plt.Figure:
    """
    Three-panel plot of temperature, pressure and density against altitude.

    Parameters
    ----------
    profile : dict returned by ``atmosphere_profile``
    show    : call plt.show()

    Returns
    -------
    matplotlib Figure
    """
    h_km = profile['Hp'] / 1000.0

    fig, axes = plt.subplots(1, 3, figsize=(13, 5), sharey=True)

    panels = [
        (profile['T'], 'Temperature [K]', '#d93025'),
        (profile['p'] / 100.0, 'Pressure [hPa]', '#1a73e8'),
        (profile['rho'], 'Density [kg/m³]', '#0d652d'),
    ]
    for ax, (values, label, color) in zip(axes, panels):
        ax.plot(values, h_km, color=color, lw=2)
        ax.axhline(HP_TROP / 1000.0, color='grey', ls='--', lw=0.8)
        ax.set_xlabel(label)
        ax.grid(True, ls=':', alpha=0.4)
    axes[0].set_ylabel('Pressure altitude [km]')
    axes[0].text(axes[0].get_xlim()[0], HP_TROP / 1000.0, ' tropopause',
                 va='bottom', fontsize=8, color='grey')

    fig.suptitle(f"ISA profile (ΔT = {profile['dT']:+.1f} K)", fontsize=13,
                 fontweight='bold')
    fig.tight_layout()

    if show:
        plt.show()
    return fig


def plot_speed_schedule(schedule: dict, *, show: bool = True) -> plt.Figure:
    """Two-panel plot of CAS/TAS and Mach against altitude for a schedule."""
    h_km = schedule['Hp'] / 1000.0
    h_trans = schedule['Hp_trans'] / 1000.0

    fig, axes = plt.subplots(1, 2, figsize=(11, 5), sharey=True)

    ax = axes[0]
    ax.plot(schedule['Vcas'], h_km, color='#1a73e8', lw=2, label='CAS')
    ax.plot(schedule['Vtas'], h_km, color='#e8710a', lw=2, label='TAS')
    ax.set_xlabel('Airspeed [m/s]')
    ax.set_ylabel('Pressure altitude [km]')

    ax = axes[1]
    ax.plot(schedule['Mach'], h_km, color='#0d652d', lw=2)
    ax.set_xlabel('Mach [-]')

    for ax in axes:
        ax.axhline(h_trans, color='#d93025', ls='--', lw=1,
                   label=f'Crossover @ {h_trans:.2f} km')
        ax.grid(True, ls=':', alpha=0.4)
    axes[0].legend(fontsize=8)

    fig.suptitle('CAS / Mach speed schedule', fontsize=13, fontweight='bold')
    fig.tight_layout()

    if show:
        plt.show()
    return fig
