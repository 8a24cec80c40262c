"""
Single time step of the Cowles uptake model.

advance() is a pure function: it takes the pressures and conductances of the
previous step and returns new records, nothing is mutated in place. The
order of the corrections inside a step matters and must not change.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .state import CompartmentValues, PartialPressures
from simva.physiology.corrections import (
    concentration_effect,
    metabolic_clearance,
    mixed_venous,
    shunt_mix,
)


@dataclass(frozen=True)
class StepParams:
    """Per-run constants of the step function."""
    delta_time: float
    capacitances: CompartmentValues
    tp_factor: float
    alveolar_minute_ventilation: float
    use_concentration_effect: bool = False
    shunt_frac: float = 0.0
    metabolism_frac_step: float = 0.0


@dataclass(frozen=True)
class StepFluxes:
    """
    Agent fluxes of one step in l/min.

    lung_transfer is the uptake from the inspired gas; the lung flux is what
    remains in the lung after the periphery took its share, so the four
    compartment fluxes always add up to lung_transfer.
    """
    lung_transfer: float
    lung: float
    vrg: float
    mus: float
    fat: float

    @property
    def total(self) -> float:
        return self.lung + self.vrg + self.mus + self.fat


def _integrate(pressure: float, flux: float, delta_time: float, capacity: float) -> float:
    # Zero capacitance yields Inf/NaN like the reference.
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(pressure + np.float64(flux * delta_time) / np.float64(capacity))


def advance(state: PartialPressures, conductances: CompartmentValues,
            params: StepParams) -> Tuple[PartialPressures, CompartmentValues, StepFluxes]:
    """
    Advance the pressures by one explicit Euler step.

    Returns (next_state, next_conductances, fluxes). Only the lung
    conductance can change, and only with the concentration effect enabled;
    the new value is used from the next step on.
    """
    lung_transfer = (state.pinsp - state.palv) * conductances.lung

    if params.use_concentration_effect:
        conductances = conductances.replace(
            lung=concentration_effect(
                params.alveolar_minute_ventilation, params.tp_factor, lung_transfer
            )
        )

    part = shunt_mix(state.palv, state.pcv, params.shunt_frac)

    flux_vrg = (part - state.pvrg) * conductances.vrg
    flux_mus = (part - state.pmus) * conductances.mus
    flux_fat = (part - state.pfat) * conductances.fat
    flux_lung = lung_transfer - (flux_vrg + flux_mus + flux_fat)

    dt = params.delta_time
    caps = params.capacitances
    palv = _integrate(state.palv, flux_lung, dt, caps.lung)
    pvrg = _integrate(state.pvrg, flux_vrg, dt, caps.vrg)
    pmus = _integrate(state.pmus, flux_mus, dt, caps.mus)
    pfat = _integrate(state.pfat, flux_fat, dt, caps.fat)

    # Metabolism clears the peripheral tissues, not the lung.
    pvrg = metabolic_clearance(pvrg, params.metabolism_frac_step)
    pmus = metabolic_clearance(pmus, params.metabolism_frac_step)
    pfat = metabolic_clearance(pfat, params.metabolism_frac_step)

    pcv = mixed_venous(pvrg, pmus, pfat, conductances.vrg, conductances.mus, conductances.fat)

    next_state = PartialPressures(
        pinsp=state.pinsp, palv=palv, part=part,
        pvrg=pvrg, pmus=pmus, pfat=pfat, pcv=pcv,
    )
    fluxes = StepFluxes(
        lung_transfer=lung_transfer,
        lung=flux_lung, vrg=flux_vrg, mus=flux_mus, fat=flux_fat,
    )
    return next_state, conductances, fluxes
