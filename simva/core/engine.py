"""
Explicit Euler integrator of the Cowles uptake model.

Reference: Cowles, Borgstedt & Gillies. Comput Biol Med. 1973;3(4):385-395,
Figure 1.
"""

from typing import Any, Iterator, Optional

import numpy as np

from .constants import AMBIENT_PRESSURE_KPA, WATER_VAPOUR_PRESSURE_KPA
from .errors import MissingArgumentError, RangeError
from .recorder import UptakeRow, UptakeTable
from .state import CompartmentValues, PartialPressures, partial_pressures
from .step_helpers import StepParams, advance
from simva.physiology.corrections import humidify, metabolism_per_step
from simva.physiology.params import stp_factor


def _check_fraction(name: str, value: float):
    if value < 0 or value > 1:
        raise RangeError(f"'{name}' has to be between 0 and 1.")


def _initial_state(pinsp: Optional[float], ppart: Any) -> PartialPressures:
    if ppart is None:
        return partial_pressures(pinsp=pinsp)
    return PartialPressures.from_mapping(ppart, label="ppart")


def _required_vector(value: Any, label: str) -> CompartmentValues:
    if value is None:
        raise MissingArgumentError(f"argument '{label}' is missing, with no default")
    return CompartmentValues.from_mapping(value, label=label)


def step_count(total_time: float, delta_time: float) -> int:
    """Number of steps needed to cover total_time, rounded up."""
    if total_time <= 0:
        return 0
    return int(np.ceil(total_time / delta_time))


def _run(state: PartialPressures, conductances: CompartmentValues, params: StepParams,
         n_steps: int, start_time: float) -> Iterator[UptakeRow]:
    for i in range(1, n_steps + 1):
        state, conductances, _ = advance(state, conductances, params)
        yield UptakeRow.from_state(start_time + i * params.delta_time, state)


def iter_anaesthetic_uptake(pinsp: Optional[float] = None,
                            delta_time: float = 0.1, total_time: float = 10.0,
                            conductances: Any = None, capacitances: Any = None,
                            use_humidification: bool = False,
                            pambient: float = AMBIENT_PRESSURE_KPA,
                            pwater: float = WATER_VAPOUR_PRESSURE_KPA,
                            use_concentration_effect: bool = False,
                            tp_factor: float = stp_factor(),
                            alveolar_minute_ventilation: Optional[float] = None,
                            shunt_frac: float = 0.0,
                            metabolism_frac: float = 0.0,
                            ppart: Any = None,
                            start_time: float = 0.0) -> Iterator[UptakeRow]:
    """
    Validate the inputs and return a lazy iterator over the result rows.

    Validation runs immediately, so bad input fails here and not on the first
    next(). The caller may stop iterating at any time. To continue a run,
    pass the last row's pressures as ppart and its time as start_time.
    """
    state = _initial_state(pinsp, ppart)
    _check_fraction("shunt_frac", shunt_frac)
    _check_fraction("metabolism_frac", metabolism_frac)
    if delta_time <= 0:
        raise RangeError("'delta_time' has to be larger than 0.")
    conductances = _required_vector(conductances, "conductances")
    capacitances = _required_vector(capacitances, "capacitances")

    if alveolar_minute_ventilation is None:
        alveolar_minute_ventilation = conductances.lung / tp_factor

    # Humidification is applied once, not per step.
    if use_humidification:
        state = state.replace(pinsp=humidify(state.pinsp, pambient, pwater))

    params = StepParams(
        delta_time=delta_time,
        capacitances=capacitances,
        tp_factor=tp_factor,
        alveolar_minute_ventilation=alveolar_minute_ventilation,
        use_concentration_effect=bool(use_concentration_effect),
        shunt_frac=shunt_frac,
        metabolism_frac_step=metabolism_per_step(metabolism_frac, delta_time),
    )
    return _run(state, conductances, params, step_count(total_time, delta_time), start_time)


def sim_anaesthetic_uptake(pinsp: Optional[float] = None,
                           delta_time: float = 0.1, total_time: float = 10.0,
                           conductances: Any = None, capacitances: Any = None,
                           use_humidification: bool = False,
                           pambient: float = AMBIENT_PRESSURE_KPA,
                           pwater: float = WATER_VAPOUR_PRESSURE_KPA,
                           use_concentration_effect: bool = False,
                           tp_factor: float = stp_factor(),
                           alveolar_minute_ventilation: Optional[float] = None,
                           shunt_frac: float = 0.0,
                           metabolism_frac: float = 0.0,
                           ppart: Any = None,
                           start_time: float = 0.0) -> UptakeTable:
    """
    Simulate anaesthetic uptake and distribution.

    Args:
        pinsp: Inspired partial pressure (required unless ppart is given)
        delta_time: Step size (min)
        total_time: Simulated time (min); ceil(total_time / delta_time) steps
        conductances: lung/vrg/mus/fat conductances, l/(min*atm)
        capacitances: lung/vrg/mus/fat capacitances, l
        use_humidification: Dilute pinsp by water vapour once before the loop
        pambient: Ambient pressure (kPa)
        pwater: Water vapour pressure (kPa)
        use_concentration_effect: Let the ventilation conductance follow the
            lung transfer
        tp_factor: Temperature/pressure factor
        alveolar_minute_ventilation: l/min, defaults to
            conductances["lung"] / tp_factor
        shunt_frac: Fraction of pulmonary shunt, 0-1
        metabolism_frac: Fraction metabolized per hour, 0-1 (e.g. 0.05 for 5%)
        ppart: Initial partial pressures (pinsp, palv, part, pvrg, pmus, pfat,
            pcv), e.g. to restart at a given anaesthetic state
        start_time: Time of ppart (min)

    Returns:
        UptakeTable: one row (time, pinsp, palv, part, pvrg, pmus, pfat, pcv)
        per step.

    Raises:
        ShapeError, NameMismatchError: malformed ppart or compartment vectors
        RangeError: shunt_frac or metabolism_frac outside [0, 1], delta_time <= 0
        MissingArgumentError: no pinsp/ppart, conductances or capacitances
    """
    return UptakeTable.from_rows(iter_anaesthetic_uptake(
        pinsp=pinsp,
        delta_time=delta_time,
        total_time=total_time,
        conductances=conductances,
        capacitances=capacitances,
        use_humidification=use_humidification,
        pambient=pambient,
        pwater=pwater,
        use_concentration_effect=use_concentration_effect,
        tp_factor=tp_factor,
        alveolar_minute_ventilation=alveolar_minute_ventilation,
        shunt_frac=shunt_frac,
        metabolism_frac=metabolism_frac,
        ppart=ppart,
        start_time=start_time,
    ))
