"""
Optional physiological corrections of the uptake model.

Each correction is a pure function. The step function composes them in a
fixed order: humidification once before the loop, then per step the
concentration effect, the shunt mix, metabolic clearance and the mixed
venous pressure.
"""

import numpy as np

from simva.core.constants import CONCENTRATION_EFFECT_DIVISOR, MINUTES_PER_HOUR


def humidify(pinsp: float, pambient: float, pwater: float) -> float:
    """
    Dilute the inspired pressure by saturated water vapour.

    pambient and pwater only need to share a unit.
    """
    return pinsp * (pambient / (pambient + pwater))


def metabolism_per_step(metabolism_frac: float, delta_time: float) -> float:
    """
    Convert a fractional clearance per hour into one per time step (min).

    Note: with the values given by Cowles the results differ from the
    published table at the second decimal place.
    """
    return metabolism_frac / (MINUTES_PER_HOUR / delta_time)


def concentration_effect(alveolar_minute_ventilation: float, tp_factor: float,
                         lung_transfer: float) -> float:
    """
    Ventilation conductance corrected for the concentration effect.

    The faster the agent leaves the alveolar gas the more fresh gas is drawn
    in, so the effective conductance grows with the lung transfer.
    """
    return alveolar_minute_ventilation * tp_factor + lung_transfer / CONCENTRATION_EFFECT_DIVISOR


def shunt_mix(palv: float, pcv: float, shunt_frac: float) -> float:
    """Arterial pressure: shunted venous blood bypasses gas exchange."""
    return palv * (1.0 - shunt_frac) + pcv * shunt_frac


def metabolic_clearance(pressure: float, metabolism_frac_step: float) -> float:
    return pressure * (1.0 - metabolism_frac_step)


def mixed_venous(pvrg: float, pmus: float, pfat: float,
                 g_vrg: float, g_mus: float, g_fat: float) -> float:
    """
    Mixed central-venous pressure, the conductance-weighted mean of the
    tissues draining into the venous pool.

    A zero conductance sum gives NaN (or Inf) rather than an exception.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        num = np.float64(pvrg * g_vrg + pmus * g_mus + pfat * g_fat)
        den = np.float64(g_vrg + g_mus + g_fat)
        return float(num / den)
