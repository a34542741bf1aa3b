# src/rlcsim/solver/results.py
"""
Defines the formal, immutable data contract for the output of the solver.

A `CircuitResults` instance is a snapshot produced in one computation from one
`CircuitParameters` instance. It has no identity of its own and is never
updated; every analysis run creates a fresh pair.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class CircuitResults:
    """
    The steady-state quantities of a driven series RLC circuit, in SI units.

    Attributes:
        capacitive_reactance: X_C in ohms.
        inductive_reactance: X_L in ohms.
        impedance_magnitude: |Z| in ohms. Never smaller than the resistance.
        rms_current: RMS current through the loop, in amperes.
        voltage_across_resistor: RMS voltage across R, in volts.
        voltage_across_inductor: RMS voltage across L, in volts.
        voltage_across_capacitor: RMS voltage across C, in volts.
        power_dissipated: Real power dissipated in R, in watts.
        resonant_frequency: 1/(2*pi*sqrt(LC)) in hertz. Depends on L and C only.
        phase_angle_degrees: Signed angle of Z in (-90, 90). Positive means
                             inductive (current lags the supply voltage).
        power_factor: cos(phase angle), in (0, 1].
    """
    capacitive_reactance: float
    inductive_reactance: float
    impedance_magnitude: float
    rms_current: float
    voltage_across_resistor: float
    voltage_across_inductor: float
    voltage_across_capacitor: float
    power_dissipated: float
    resonant_frequency: float
    phase_angle_degrees: float
    power_factor: float

    @property
    def net_reactance(self) -> float:
        """X_L - X_C in ohms. Positive for an inductive circuit."""
        return self.inductive_reactance - self.capacitive_reactance
