import pytest

from simva.core.errors import InvalidArgumentError, ValidationError
from simva.patient.patient import Patient
from simva.physiology.params import capacitance, conductance, lung_capacitance, stp_factor


class TestStandardMan:

    def test_blood_flow(self, patient):
        assert patient.blood_flow.lung == pytest.approx(6.3)
        assert patient.blood_flow.vrg == pytest.approx(5.03, rel=5e-2)

    def test_ether_conductances(self, patient):
        g = patient.conductances("diethyl-ether")
        assert g.lung == pytest.approx(conductance(4.0, 1.0))
        assert g.vrg == pytest.approx(conductance(6.3 * 0.798, 12.1))
        assert g.mus == pytest.approx(conductance(6.3 * 0.157, 12.1))
        assert g.fat == pytest.approx(conductance(6.3 * 0.044, 12.1))

    def test_ether_capacitances(self, patient):
        c = patient.capacitances("diethyl-ether")
        assert c.lung == pytest.approx(lung_capacitance(2.68, 1.0, 12.1, 1.4, 12.1))
        assert c.vrg == pytest.approx(capacitance(8.83, 12.1, 3.2, 12.1))
        assert c.mus == pytest.approx(capacitance(36.25, 12.1, 0.63, 12.1))
        # Fat tissue uses its own coefficient, fat blood the blood:gas one.
        assert c.fat == pytest.approx(capacitance(11.5, 44.1, 0.18, 12.1))

    def test_fat_holds_most_halothane(self, patient):
        c = patient.capacitances("halothane")
        assert c.fat > c.mus > c.vrg > c.lung


def test_tp_factor_follows_temperature():
    assert Patient().tp_factor() == pytest.approx(stp_factor())
    assert Patient(tissue_temperature=273.2).tp_factor() == 1.0


def test_doubled_ventilation():
    base = Patient().conductances("nitrous-oxide")
    doubled = Patient(alveolar_ventilation=8.0).conductances("nitrous-oxide")
    assert doubled.lung == pytest.approx(2 * base.lung)
    assert doubled.vrg == base.vrg


def test_invalid_proportions():
    with pytest.raises(ValidationError):
        Patient(prop_vrg=0.9, prop_mus=0.2)


def test_unknown_agent(patient):
    with pytest.raises(InvalidArgumentError):
        patient.conductances("xenon")
