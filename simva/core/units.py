"""
Unit conversion helpers for pressure and temperature input.

Internal convention:
- Ambient and water vapour pressure: kPa
- Temperatures: Kelvin
"""

from typing import Dict, Tuple

from .errors import InvalidArgumentError


_PRESSURE_UNIT_ALIASES: Dict[str, str] = {
    "kilopascal": "kpa",
    "torr": "mmhg",
    "mm hg": "mmhg",
    "mmhg": "mmhg",
    "atmosphere": "atm",
    "atmospheres": "atm",
}

# Conversion factors between pressure units (multiplicative).
_PRESSURE_CONVERSIONS: Dict[Tuple[str, str], float] = {
    ("kpa", "kpa"): 1.0,
    ("atm", "kpa"): 101.325,
    ("mmhg", "kpa"): 101.325 / 760.0,
}

PRESSURE_UNITS = ("kpa", "mmhg", "atm")

ZERO_CELSIUS_K = 273.15


def normalize_pressure_unit(unit: str) -> str:
    """Normalize pressure unit strings to canonical lowercase form."""
    if not unit:
        return ""
    u = unit.strip().lower()
    u = _PRESSURE_UNIT_ALIASES.get(u, u)
    return u.replace(" ", "")


def convert_pressure(value: float, from_unit: str, to_unit: str) -> float:
    """
    Convert a pressure between kPa, mmHg and atm.

    Raises InvalidArgumentError if a unit is unsupported.
    """
    from_norm = normalize_pressure_unit(from_unit)
    to_norm = normalize_pressure_unit(to_unit)
    for unit, raw in ((from_norm, from_unit), (to_norm, to_unit)):
        if unit not in PRESSURE_UNITS:
            raise InvalidArgumentError(
                f"Unsupported pressure unit '{raw}', should be one of: "
                + ", ".join(PRESSURE_UNITS)
            )
    if from_norm == to_norm:
        return value
    # Go through kPa.
    kpa = value * _PRESSURE_CONVERSIONS[(from_norm, "kpa")]
    return kpa / _PRESSURE_CONVERSIONS[(to_norm, "kpa")]


def celsius_to_kelvin(temp_c: float) -> float:
    return temp_c + ZERO_CELSIUS_K


def kelvin_to_celsius(temp_k: float) -> float:
    return temp_k - ZERO_CELSIUS_K
