import csv
import os
from dataclasses import dataclass
from typing import Iterable, NamedTuple, Optional, Tuple

import numpy as np
import pandas as pd

from .state import PartialPressures

COLUMNS = ("time",) + PartialPressures.NAMES

# Slack for float step times when comparing against the sample interval.
TIME_EPSILON = 1e-9


class UptakeRow(NamedTuple):
    """One row of the result table: elapsed time (min) and the pressures."""
    time: float
    pinsp: float
    palv: float
    part: float
    pvrg: float
    pmus: float
    pfat: float
    pcv: float

    @classmethod
    def from_state(cls, time: float, state: PartialPressures) -> "UptakeRow":
        return cls(time, *state.as_tuple())

    @property
    def pressures(self) -> PartialPressures:
        """The pressures of this row, usable as a restart state."""
        return PartialPressures(*self[1:])


@dataclass(frozen=True)
class UptakeTable:
    """
    Result of an uptake simulation, one row per time step in increasing time
    order. Immutable once produced.
    """
    rows: Tuple[UptakeRow, ...] = ()

    columns = COLUMNS

    @classmethod
    def from_rows(cls, rows: Iterable[UptakeRow]) -> "UptakeTable":
        return cls(rows=tuple(rows))

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    def __getitem__(self, index):
        return self.rows[index]

    @property
    def last(self) -> Optional[UptakeRow]:
        return self.rows[-1] if self.rows else None

    def column(self, name: str) -> np.ndarray:
        if name not in COLUMNS:
            raise KeyError(f"Unknown column '{name}', available: {', '.join(COLUMNS)}")
        idx = COLUMNS.index(name)
        return np.array([row[idx] for row in self.rows], dtype=float)

    def to_numpy(self) -> np.ndarray:
        """Matrix with one row per step and the columns of COLUMNS."""
        if not self.rows:
            return np.empty((0, len(COLUMNS)), dtype=float)
        return np.array(self.rows, dtype=float)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.to_numpy(), columns=list(COLUMNS))

    def to_csv(self, path: str) -> str:
        self.to_frame().to_csv(path, index=False)
        return path


class DataRecorder:
    """
    Streams result rows to CSV while a simulation runs.
    """
    def __init__(self, file_path: str, sample_interval_min: float = 0.0):
        self.file_path = file_path
        self.file = None
        self.writer = None
        self.is_recording = False
        self.sample_interval_min = max(0.0, sample_interval_min)
        self._last_sample_time = None
        self.rows_written = 0

    def start(self):
        output_dir = os.path.dirname(self.file_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        self.file = open(self.file_path, 'w', newline='')
        self.writer = csv.writer(self.file)
        self.writer.writerow(COLUMNS)
        self.is_recording = True

    def log(self, row: UptakeRow):
        if not self.is_recording or not self.writer:
            return

        if self.sample_interval_min > 0.0:
            last = self._last_sample_time
            if last is not None and (row.time - last) < self.sample_interval_min - TIME_EPSILON:
                return
            self._last_sample_time = row.time

        self.writer.writerow(list(row))
        self.rows_written += 1

    def stop(self):
        if self.file:
            self.file.close()
            self.file = None
        self.writer = None
        self.is_recording = False

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False
