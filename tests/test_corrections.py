import math

import pytest

from simva.physiology.corrections import (
    concentration_effect,
    humidify,
    metabolic_clearance,
    metabolism_per_step,
    mixed_venous,
    shunt_mix,
)


def test_humidify():
    assert humidify(12.0, 101.325, 6.26) == pytest.approx(12.0 * 101.325 / 107.585)
    assert humidify(12.0, 101.325, 0.0) == 12.0


def test_metabolism_per_step():
    # 6% per hour with 0.1 min steps is 0.01% per step.
    assert metabolism_per_step(0.06, 0.1) == pytest.approx(0.0001)
    assert metabolism_per_step(0.0, 0.1) == 0.0


def test_concentration_effect():
    assert concentration_effect(4.0, 1.0, 0.0) == 4.0
    assert concentration_effect(4.0, 0.5, 50.0) == pytest.approx(2.5)


class TestShuntMix:

    def test_no_shunt_is_alveolar(self):
        assert shunt_mix(1.7, 1.2, 0.0) == 1.7

    def test_full_shunt_is_venous(self):
        assert shunt_mix(1.7, 1.2, 1.0) == 1.2

    def test_partial_shunt(self):
        assert shunt_mix(2.0, 1.0, 0.1) == pytest.approx(1.9)


def test_metabolic_clearance():
    assert metabolic_clearance(2.0, 0.0) == 2.0
    assert metabolic_clearance(2.0, 0.25) == 1.5


class TestMixedVenous:

    def test_weighted_mean(self):
        assert mixed_venous(1.0, 2.0, 3.0, 1.0, 1.0, 2.0) == pytest.approx(9.0 / 4.0)

    def test_equal_pressures(self):
        assert mixed_venous(1.5, 1.5, 1.5, 53.6, 10.5, 2.9) == pytest.approx(1.5)

    def test_zero_conductances_give_nan(self):
        value = mixed_venous(1.0, 2.0, 3.0, 0.0, 0.0, 0.0)
        assert math.isnan(value), "Zero conductance sum should propagate as NaN, not raise"
