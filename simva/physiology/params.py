"""
Physical parameters of the Cowles uptake model.

Conductances and capacitances are the two inputs of the integrator. They are
derived from flows, volumes and partition coefficients and normalized to
standard temperature and pressure.

Reference: Cowles, Borgstedt & Gillies. Comput Biol Med. 1973;3(4):385-395.
"""

from typing import Union

from simva.core.constants import (
    CARDIAC_OUTPUT_L_MIN,
    CARDIAC_OUTPUT_PROPORTIONS,
    PARTITION_COEFFICIENTS,
    STD_PRESSURE_ATM,
    STD_TEMPERATURE_K,
    TISSUE_TEMPERATURE_K,
)
from simva.core.enums import Anaesthetic
from simva.core.errors import InvalidArgumentError, ValidationError
from simva.core.state import CompartmentValues


def stp_factor(std_temperature: float = STD_TEMPERATURE_K,
               tissue_temperature: float = TISSUE_TEMPERATURE_K,
               std_pressure: float = STD_PRESSURE_ATM) -> float:
    """
    Standard temperature and pressure correction factor T0 / (P0 * Ti).

    Defaults give BTPS (body temperature, water vapour ignored);
    tissue_temperature=273.2 gives STPD and a factor of exactly 1.0.
    """
    return std_temperature / (std_pressure * tissue_temperature)


def conductance(flow: float, partition_coefficient: float,
                tp_factor: float = stp_factor()) -> float:
    """
    Conductance in l/(min*atm): ability of a flowing fluid to carry the
    agent across a partial pressure gradient (Cowles Eqn. 6).

    For blood perfusing a tissue use the blood flow and the blood:gas
    coefficient; for alveolar gas use the alveolar ventilation and the
    gas:gas coefficient, which is 1.0 by definition.
    """
    return flow * partition_coefficient * tp_factor


def capacitance(tissue_volume: float, tissue_coefficient: float,
                blood_volume: float, blood_coefficient: float,
                tp_factor: float = stp_factor()) -> float:
    """
    Capacitance in l: ability of a tissue to hold the agent at a given
    partial pressure (Cowles Eqn. 14).

    Tissues are considered in equilibrium with their venous blood, so the
    blood within a compartment counts as part of it.
    """
    return (tissue_volume * tissue_coefficient + blood_volume * blood_coefficient) * tp_factor


def lung_capacitance(air_volume: float,
                     tissue_volume: float, tissue_coefficient: float,
                     blood_volume: float, blood_coefficient: float,
                     tp_factor: float = stp_factor()) -> float:
    """
    Lung capacitance in l (Cowles Eqn. 15).

    Alveolar air, lung tissue and arterial blood are in equilibrium; the air
    term has a gas:gas coefficient of 1.
    """
    return (air_volume
            + tissue_volume * tissue_coefficient
            + blood_volume * blood_coefficient) * tp_factor


def partition_coefficients(agent: Union[str, Anaesthetic]) -> CompartmentValues:
    """
    Partition coefficients of a volatile agent (Cowles Table 2).

    Returns lung (blood:gas), vrg, mus and fat (tissue:gas) coefficients.
    """
    key = agent.value if isinstance(agent, Anaesthetic) else agent
    if key not in PARTITION_COEFFICIENTS:
        raise InvalidArgumentError(
            f"'agent' should be one of {', '.join(repr(c) for c in Anaesthetic.choices())}, "
            f"got {agent!r}"
        )
    return CompartmentValues(**PARTITION_COEFFICIENTS[key])


def cardiac_output(total: float = CARDIAC_OUTPUT_L_MIN,
                   prop_lung: float = CARDIAC_OUTPUT_PROPORTIONS["lung"],
                   prop_vrg: float = CARDIAC_OUTPUT_PROPORTIONS["vrg"],
                   prop_mus: float = CARDIAC_OUTPUT_PROPORTIONS["mus"],
                   prop_fat: float = CARDIAC_OUTPUT_PROPORTIONS["fat"]) -> CompartmentValues:
    """
    Blood flow per compartment in l/min (Cowles Table 3).

    The lung receives the whole cardiac output (prop_lung is normally 1.0)
    and is not part of the proportion check.
    """
    if prop_vrg + prop_mus + prop_fat > 1.0:
        raise ValidationError(
            "Sum of proportions of vrg, mus and fat should not be larger than 1.0."
        )
    return CompartmentValues(
        lung=prop_lung * total,
        vrg=prop_vrg * total,
        mus=prop_mus * total,
        fat=prop_fat * total,
    )
