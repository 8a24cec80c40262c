from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from simva.core.engine import sim_anaesthetic_uptake
from simva.patient.patient import Patient


ETHER = "diethyl-ether"


@pytest.fixture
def patient():
    """Cowles standard man used across most tests."""
    return Patient()


@pytest.fixture
def ether_conductances(patient):
    return patient.conductances(ETHER)


@pytest.fixture
def ether_capacitances(patient):
    return patient.capacitances(ETHER)


@pytest.fixture
def run_ether(ether_conductances, ether_capacitances):
    """Run the Table 4 diethyl ether setup (pinsp 12, 10 min, dt 0.1) with overrides."""
    def _run(**overrides):
        kwargs = dict(
            pinsp=12,
            delta_time=0.1,
            total_time=10,
            conductances=ether_conductances,
            capacitances=ether_capacitances,
        )
        kwargs.update(overrides)
        return sim_anaesthetic_uptake(**kwargs)

    return _run
