from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class Table4Scenario:
    """
    One row of Cowles 1973 Table 4 (diethyl ether, pinsp 12, t = 10 min).

    The factors scale the standard-man ventilation and cardiac output.
    """
    name: str
    published: Dict[str, float]
    ventilation_factor: float = 1.0
    cardiac_output_factor: float = 1.0
    options: Dict[str, object] = field(default_factory=dict)


PINSP = 12.0
DELTA_TIME = 0.1
TOTAL_TIME = 10.0

TABLE4 = (
    Table4Scenario(
        "normal",
        dict(palv=1.73, part=1.73, pvrg=1.48, pmus=0.28, pfat=0.08, pcv=1.23),
    ),
    Table4Scenario(
        "doubled ventilation",
        dict(palv=3.11, part=3.11, pvrg=2.69, pmus=0.51, pfat=0.14, pcv=2.23),
        ventilation_factor=2.0,
    ),
    Table4Scenario(
        "halved cardiac output",
        dict(palv=2.24, part=2.24, pvrg=1.59, pmus=0.20, pfat=0.05, pcv=1.30),
        cardiac_output_factor=0.5,
    ),
    Table4Scenario(
        "humidified",
        dict(palv=1.63, part=1.63, pvrg=1.39, pmus=0.26, pfat=0.08, pcv=1.16),
        options={"use_humidification": True},
    ),
    Table4Scenario(
        "concentration effect",
        dict(palv=1.91, part=1.91, pvrg=1.64, pmus=0.31, pfat=0.08, pcv=1.36),
        options={"use_concentration_effect": True},
    ),
    Table4Scenario(
        "pulmonary shunt",
        dict(palv=1.78, part=1.72, pvrg=1.47, pmus=0.28, pfat=0.08, pcv=1.22),
        options={"shunt_frac": 0.1},
    ),
)
