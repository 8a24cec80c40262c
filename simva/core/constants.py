"""
Physiological and Physical Constants for SIMVA.

This module centralizes the literal tables of the Cowles model.

Reference: Cowles, Borgstedt & Gillies. Comput Biol Med. 1973;3(4):385-395.
"""

from typing import Dict

# Standard conditions (used in physiology/params.py stp_factor).

# Standard temperature (K), 0 degC
STD_TEMPERATURE_K = 273.2

# Tissue temperature (K), 37 degC
TISSUE_TEMPERATURE_K = 310.2

# Standard pressure (atm)
STD_PRESSURE_ATM = 1.0

# Humidification (used in the engine defaults and the CLI).

# Ambient barometric pressure (kPa)
AMBIENT_PRESSURE_KPA = 101.325

# Saturated water vapour pressure at 37 degC (kPa)
WATER_VAPOUR_PRESSURE_KPA = 6.26

# Concentration effect: lung transfer is scaled down by this divisor before
# it is added to the ventilation conductance.
CONCENTRATION_EFFECT_DIVISOR = 100.0

# Metabolism fractions are given per hour, time steps in minutes.
MINUTES_PER_HOUR = 60.0

# Partition coefficients (Cowles Table 2).
# "lung" holds the blood:gas coefficient, the others tissue:gas.
PARTITION_COEFFICIENTS: Dict[str, Dict[str, float]] = {
    "nitrous-oxide": {"lung": 0.463, "vrg": 0.463, "mus": 0.463, "fat": 1.03},
    "diethyl-ether": {"lung": 12.1, "vrg": 12.1, "mus": 12.1, "fat": 44.1},
    "halothane": {"lung": 2.3, "vrg": 6.0, "mus": 8.0, "fat": 138.0},
}

# Standard man (Cowles Table 3).

# Total cardiac output (l/min)
CARDIAC_OUTPUT_L_MIN = 6.3

# Fraction of cardiac output per compartment. The lung receives all of it.
CARDIAC_OUTPUT_PROPORTIONS: Dict[str, float] = {
    "lung": 1.0,
    "vrg": 0.798,
    "mus": 0.157,
    "fat": 0.044,
}

# Alveolar minute ventilation (l/min)
ALVEOLAR_VENTILATION_L_MIN = 4.0

# Tissue volumes (l). Non-perfused tissue (7.02 l) is not part of the model.
TISSUE_VOLUMES_L: Dict[str, float] = {
    "lung_air": 2.68,
    "lung_tissue": 1.0,
    "vrg": 8.83,
    "mus": 36.25,
    "fat": 11.5,
}

# Blood volumes (l)
BLOOD_VOLUMES_L: Dict[str, float] = {
    "lung": 1.4,
    "vrg": 3.2,
    "mus": 0.63,
    "fat": 0.18,
}
