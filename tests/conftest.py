# tests/conftest.py
import pytest

from rlcsim import CircuitParameters, AnalysisConfig


class ScriptedInput:
    """
    Stand-in for the builtin `input`: returns the scripted lines in order,
    records every prompt, and raises EOFError once the script runs out.
    """
    def __init__(self, lines):
        self._lines = list(lines)
        self.prompts = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError("scripted input exhausted")
        return self._lines.pop(0)


# Voltage, frequency, resistance, inductance [mH], capacitance [uF]
REFERENCE_LINES = ["10", "1000", "100", "10", "1"]


@pytest.fixture
def scripted_input():
    """Factory fixture: scripted_input(['10', '1000', ...])."""
    return ScriptedInput


@pytest.fixture
def default_config():
    return AnalysisConfig()


@pytest.fixture
def reference_params():
    """R=100 ohm, L=10 mH, C=1 uF, V=10 V, f=1 kHz (capacitive, PF ~0.72)."""
    return CircuitParameters(
        resistance=100.0, inductance=0.01, capacitance=1e-6, supply_voltage=10.0, frequency=1000.0
    )


@pytest.fixture
def resonance_lc():
    """(R, L, C) of the resonance scenario: 50 ohm, 1 mH, 100 uF (f_r ~503.29 Hz)."""
    return 50.0, 1e-3, 1e-4
