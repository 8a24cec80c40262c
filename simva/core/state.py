from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Iterator, Optional, Tuple

from .enums import Compartment
from .errors import MissingArgumentError, NameMismatchError, ShapeError


def _named_items(value: Any, expected: Tuple[str, ...], label: str) -> Dict[str, float]:
    """
    Validate a named vector and return it as a plain {name: float} dict.

    Entries are matched by name, never by position, so a caller cannot
    silently swap two compartments.
    """
    if isinstance(value, (str, bytes)):
        raise NameMismatchError(f"'{label}' has to be a mapping with the names: {', '.join(expected)}")
    try:
        n = len(value)
    except TypeError:
        raise ShapeError(
            f"'{label}' has to be of length {len(expected)} "
            f"and has to have the following names: {', '.join(expected)}"
        ) from None
    if n != len(expected):
        raise ShapeError(
            f"'{label}' has to be of length {len(expected)} "
            f"and has to have the following names: {', '.join(expected)}"
        )
    if not hasattr(value, "keys"):
        raise NameMismatchError(
            f"'{label}' has no names, it has to have the following names: {', '.join(expected)}"
        )
    items = {}
    for key in value.keys():
        name = key.key if isinstance(key, Compartment) else str(key)
        items[name] = float(value[key])
    if set(items) != set(expected):
        raise NameMismatchError(
            f"'{label}' has to have the following names: {', '.join(expected)} "
            f"(got: {', '.join(items)})"
        )
    return items


@dataclass(frozen=True)
class CompartmentValues:
    """
    One scalar per compartment (conductances in l/(min*atm), capacitances
    in l, flows in l/min or partition coefficients).
    """
    lung: float
    vrg: float
    mus: float
    fat: float

    NAMES = ("lung", "vrg", "mus", "fat")

    @classmethod
    def from_mapping(cls, value: Any, label: str = "values") -> "CompartmentValues":
        """Build from a CompartmentValues or a mapping keyed by name or Compartment."""
        if isinstance(value, cls):
            return value
        return cls(**_named_items(value, cls.NAMES, label))

    def __getitem__(self, key) -> float:
        if isinstance(key, Compartment):
            key = key.key
        if key not in self.NAMES:
            raise KeyError(key)
        return getattr(self, key)

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_tuple())

    def __len__(self) -> int:
        return len(self.NAMES)

    def keys(self):
        return self.NAMES

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.lung, self.vrg, self.mus, self.fat)

    def as_dict(self) -> Dict[str, float]:
        return dict(zip(self.NAMES, self.as_tuple()))

    def scaled(self, lung: float = 1.0, vrg: float = 1.0, mus: float = 1.0, fat: float = 1.0) -> "CompartmentValues":
        """Return a copy with each entry multiplied by its factor."""
        return CompartmentValues(
            lung=self.lung * lung,
            vrg=self.vrg * vrg,
            mus=self.mus * mus,
            fat=self.fat * fat,
        )

    def replace(self, **changes) -> "CompartmentValues":
        return replace(self, **changes)

    @property
    def peripheral_sum(self) -> float:
        """Sum of the VRG, muscle and fat entries."""
        return self.vrg + self.mus + self.fat


@dataclass(frozen=True)
class PartialPressures:
    """
    Snapshot of the anaesthetic partial pressures at one point in time.

    pinsp : inspired
    palv  : alveolar (lung compartment)
    part  : arterial, alveolar/venous mix by shunt fraction
    pvrg  : vessel-rich group
    pmus  : muscle
    pfat  : fat
    pcv   : mixed central-venous, conductance-weighted tissue mean
    """
    pinsp: float
    palv: float = 0.0
    part: float = 0.0
    pvrg: float = 0.0
    pmus: float = 0.0
    pfat: float = 0.0
    pcv: float = 0.0

    NAMES = ("pinsp", "palv", "part", "pvrg", "pmus", "pfat", "pcv")

    @classmethod
    def from_mapping(cls, value: Any, label: str = "ppart") -> "PartialPressures":
        if isinstance(value, cls):
            return value
        return cls(**_named_items(value, cls.NAMES, label))

    def as_tuple(self) -> Tuple[float, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))

    def as_dict(self) -> Dict[str, float]:
        return dict(zip(self.NAMES, self.as_tuple()))

    def replace(self, **changes) -> "PartialPressures":
        return replace(self, **changes)


def partial_pressures(pinsp: Optional[float] = None, palv: float = 0.0, part: float = 0.0,
                      pvrg: float = 0.0, pmus: float = 0.0, pfat: float = 0.0,
                      pcv: float = 0.0) -> PartialPressures:
    """
    Initial partial pressures.

    Only the inspired pressure is mandatory; at t=0 no agent is present
    anywhere else.
    """
    if pinsp is None:
        raise MissingArgumentError("argument 'pinsp' is missing, with no default")
    return PartialPressures(
        pinsp=float(pinsp), palv=float(palv), part=float(part),
        pvrg=float(pvrg), pmus=float(pmus), pfat=float(pfat), pcv=float(pcv),
    )
