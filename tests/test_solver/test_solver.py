# tests/test_solver/test_solver.py
import itertools
import math

import numpy as np
import pytest

from rlcsim import CircuitParameters, CircuitResults, solve


class TestReferenceCircuit:
    """R=100 ohm, L=10 mH, C=1 uF, V=10 V, f=1 kHz."""

    def test_reactances(self, reference_params):
        res = solve(reference_params)
        np.testing.assert_allclose(res.capacitive_reactance, 159.154943, rtol=1e-6)
        np.testing.assert_allclose(res.inductive_reactance, 62.831853, rtol=1e-6)
        np.testing.assert_allclose(res.net_reactance, -96.323090, rtol=1e-6)

    def test_impedance_current_and_power(self, reference_params):
        res = solve(reference_params)
        np.testing.assert_allclose(res.impedance_magnitude, 138.8457, rtol=1e-5)
        np.testing.assert_allclose(res.rms_current, 0.0720224, rtol=1e-5)
        np.testing.assert_allclose(res.power_dissipated, 0.518723, rtol=1e-4)

    def test_component_voltages(self, reference_params):
        res = solve(reference_params)
        np.testing.assert_allclose(res.voltage_across_resistor, 7.20224, rtol=1e-5)
        np.testing.assert_allclose(res.voltage_across_inductor, 4.52530, rtol=1e-5)
        np.testing.assert_allclose(res.voltage_across_capacitor, 11.46272, rtol=1e-5)

    def test_resonance_phase_and_power_factor(self, reference_params):
        res = solve(reference_params)
        np.testing.assert_allclose(res.resonant_frequency, 1591.5494, rtol=1e-6)
        assert res.phase_angle_degrees == pytest.approx(-43.927, abs=1e-3)
        np.testing.assert_allclose(res.power_factor, 0.720224, rtol=1e-5)

    def test_result_is_plain_floats(self, reference_params):
        res = solve(reference_params)
        assert isinstance(res, CircuitResults)
        assert all(type(v) is float for v in vars(res).values())


class TestResonance:

    def test_resonant_frequency_value(self, resonance_lc):
        r, l, c = resonance_lc
        res = solve(CircuitParameters(r, l, c, 10.0, 60.0))
        assert res.resonant_frequency == pytest.approx(503.29, abs=0.01)

    def test_driving_at_resonant_frequency(self, resonance_lc):
        r, l, c = resonance_lc
        f_r = solve(CircuitParameters(r, l, c, 10.0, 60.0)).resonant_frequency

        res = solve(CircuitParameters(r, l, c, 10.0, f_r))
        assert abs(res.inductive_reactance - res.capacitive_reactance) < 1e-6
        assert res.phase_angle_degrees == pytest.approx(0.0, abs=1e-6)
        assert res.impedance_magnitude == pytest.approx(r, rel=1e-9)
        assert res.power_factor == pytest.approx(1.0, abs=1e-12)
        assert res.rms_current == pytest.approx(10.0 / r, rel=1e-9)

    def test_resonant_frequency_ignores_drive_and_supply(self, resonance_lc):
        r, l, c = resonance_lc
        a = solve(CircuitParameters(r, l, c, 1.0, 10.0))
        b = solve(CircuitParameters(r, l, c, 230.0, 1e6))
        assert a.resonant_frequency == b.resonant_frequency


# --- Properties over a grid of valid inputs ---

GRID = list(itertools.product(
    [0.1, 100.0, 1e4],          # resistance
    [1e-6, 1e-3, 1.0],          # inductance
    [1e-12, 1e-6, 1e-2],        # capacitance
    [0.5, 230.0],               # supply voltage
    [1.0, 50.0, 1e6],           # frequency
))


@pytest.mark.parametrize("r, l, c, v, f", GRID)
def test_physical_invariants(r, l, c, v, f):
    res = solve(CircuitParameters(r, l, c, v, f))

    for value in vars(res).values():
        assert math.isfinite(value)

    assert res.impedance_magnitude >= r
    assert -90.0 < res.phase_angle_degrees < 90.0
    assert 0.0 < res.power_factor <= 1.0

    assert res.power_dissipated >= 0.0
    np.testing.assert_allclose(res.power_dissipated, res.rms_current ** 2 * r, rtol=1e-12)

    np.testing.assert_allclose(res.power_factor, r / res.impedance_magnitude, rtol=1e-12)
    np.testing.assert_allclose(
        res.power_factor, math.cos(math.radians(res.phase_angle_degrees)), rtol=1e-9, atol=1e-12
    )

    # Phase sign follows the net reactance.
    assert math.copysign(1.0, res.phase_angle_degrees) == math.copysign(1.0, res.net_reactance)


def test_reactances_are_monotonic_above_resonance(resonance_lc):
    r, l, c = resonance_lc
    f_r = solve(CircuitParameters(r, l, c, 1.0, 1.0)).resonant_frequency

    previous = None
    for factor in [1.01, 1.5, 2.0, 5.0, 10.0, 100.0]:
        res = solve(CircuitParameters(r, l, c, 1.0, f_r * factor))
        if previous is not None:
            assert res.inductive_reactance > previous.inductive_reactance
            assert res.capacitive_reactance < previous.capacitive_reactance
        previous = res


def test_solve_is_pure(reference_params):
    first = solve(reference_params)
    second = solve(reference_params)
    assert first == second
    assert reference_params == CircuitParameters(100.0, 0.01, 1e-6, 10.0, 1000.0)
