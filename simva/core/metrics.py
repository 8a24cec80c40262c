from typing import Optional, Sequence, Union

import numpy as np

from .recorder import UptakeTable

ArrayLike = Union[Sequence[float], np.ndarray]


def fa_fi_ratio(table: UptakeTable) -> np.ndarray:
    """
    Alveolar to inspired pressure ratio (FA/FI) per step, the classic
    wash-in curve.
    """
    return table.column("palv") / table.column("pinsp")


def time_to_fraction(table: UptakeTable, fraction: float, column: str = "palv") -> Optional[float]:
    """
    First time (min) at which `column` reaches `fraction` of the inspired
    pressure, or None if it never does within the table.
    """
    values = table.column(column)
    target = fraction * table.column("pinsp")
    reached = np.nonzero(values >= target)[0]
    if reached.size == 0:
        return None
    return float(table.column("time")[reached[0]])


def compute_performance_error(measured: ArrayLike, target: ArrayLike) -> np.ndarray:
    """
    Compute Performance Error (PE) = (Measured - Target) / Target * 100.
    """
    measured = np.asarray(measured, dtype=float)
    target = np.asarray(target, dtype=float)
    pe = np.zeros_like(measured)
    mask = (target != 0)
    pe[mask] = (measured[mask] - target[mask]) / target[mask] * 100.0
    return pe


def mean_relative_difference(current: ArrayLike, target: ArrayLike) -> float:
    """
    sum(|target - current|) / sum(|target|).

    Used to compare a whole simulated row against published values, where
    small entries (e.g. fat) are only given to two decimals.
    """
    current = np.asarray(current, dtype=float)
    target = np.asarray(target, dtype=float)
    if current.shape != target.shape:
        raise ValueError(f"Shape mismatch: {current.shape} vs {target.shape}")
    scale = np.sum(np.abs(target))
    diff = np.sum(np.abs(target - current))
    if scale == 0:
        return float(diff)
    return float(diff / scale)
