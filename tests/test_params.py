import pytest

from simva.core.enums import Anaesthetic
from simva.core.errors import InvalidArgumentError, ValidationError
from simva.physiology.params import (
    capacitance,
    cardiac_output,
    conductance,
    lung_capacitance,
    partition_coefficients,
    stp_factor,
)


def test_stp_factor():
    assert stp_factor() == pytest.approx(273.2 / 310.2)
    # STPD
    assert stp_factor(tissue_temperature=273.2) == 1.0
    assert stp_factor(std_pressure=2.0) == pytest.approx(273.2 / 310.2 / 2.0)


def test_conductance():
    assert conductance(flow=3, partition_coefficient=2, tp_factor=1) == 6
    assert conductance(flow=4.0, partition_coefficient=1.0) == pytest.approx(4.0 * 273.2 / 310.2)


def test_capacitance():
    assert capacitance(
        tissue_volume=5, tissue_coefficient=4,
        blood_volume=3, blood_coefficient=2,
        tp_factor=1,
    ) == 5 * 4 + 3 * 2


def test_lung_capacitance():
    assert lung_capacitance(
        air_volume=6,
        tissue_volume=5, tissue_coefficient=4,
        blood_volume=3, blood_coefficient=2,
        tp_factor=1,
    ) == 6 + 5 * 4 + 3 * 2


class TestPartitionCoefficients:
    """Values of Cowles Table 2."""

    def test_nitrous_oxide(self):
        coefs = partition_coefficients("nitrous-oxide")
        assert coefs.as_dict() == {"lung": 0.463, "vrg": 0.463, "mus": 0.463, "fat": 1.03}

    def test_diethyl_ether(self):
        coefs = partition_coefficients("diethyl-ether")
        assert coefs.as_dict() == {"lung": 12.1, "vrg": 12.1, "mus": 12.1, "fat": 44.1}

    def test_halothane(self):
        coefs = partition_coefficients(Anaesthetic.HALOTHANE)
        assert coefs.as_dict() == {"lung": 2.3, "vrg": 6.0, "mus": 8.0, "fat": 138.0}

    def test_unknown_agent(self):
        with pytest.raises(InvalidArgumentError, match="should be one of"):
            partition_coefficients("foo")

    def test_unknown_agent_is_value_error(self):
        with pytest.raises(ValueError, match="halothane"):
            partition_coefficients("sevoflurane")


class TestCardiacOutput:
    """Values of Cowles Table 3."""

    EXPECTED = {"lung": 6.3, "vrg": 5.03, "mus": 0.99, "fat": 0.28}

    def test_defaults(self):
        flow = cardiac_output()
        for key, value in self.EXPECTED.items():
            assert flow[key] == pytest.approx(value, rel=5e-2), f"{key}: {flow[key]:.3f} vs {value}"

    def test_scaled_total(self):
        flow = cardiac_output(total=6.3 * 1.5)
        for key, value in self.EXPECTED.items():
            assert flow[key] == pytest.approx(value * 1.5, rel=5e-2)

    def test_proportions_exceeding_one(self):
        with pytest.raises(ValidationError, match="should not be larger"):
            cardiac_output(prop_vrg=0.8, prop_mus=0.2, prop_fat=0.1)

    def test_lung_not_part_of_check(self):
        flow = cardiac_output(total=2.0, prop_lung=1.5)
        assert flow.lung == pytest.approx(3.0)
